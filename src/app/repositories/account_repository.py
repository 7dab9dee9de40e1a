from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from libs.result import Result
from src.domain.entities import Account


class IAccountRepository(ABC):
    """Account repository interface - application layer

    create/update return Result so that storage-level failures, such as a
    unique index rejecting a racing insert, come back as values.
    """

    @abstractmethod
    async def get_by_id(self, account_id: UUID) -> Optional[Account]:
        """Get account by ID"""
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[Account]:
        """Get account by normalized email address"""
        pass

    @abstractmethod
    async def get_by_username(self, username: str) -> Optional[Account]:
        """Get account by username"""
        pass

    @abstractmethod
    async def list_all(self) -> List[Account]:
        """List all accounts, oldest first"""
        pass

    @abstractmethod
    async def create(self, account: Account) -> Result[Account]:
        """Insert a new account; fails with UNIQUE_VIOLATION on duplicates"""
        pass

    @abstractmethod
    async def update(self, account: Account) -> Result[Account]:
        """Overwrite the mutable fields of an existing account"""
        pass

    @abstractmethod
    async def set_password_hash(self, account_id: UUID, password_hash: str) -> bool:
        """Replace the password hash; False when the account does not exist"""
        pass

    @abstractmethod
    async def delete(self, account_id: UUID) -> bool:
        """Delete an account; False when it does not exist"""
        pass
