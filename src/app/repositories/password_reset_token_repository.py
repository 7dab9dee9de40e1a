from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional
from uuid import UUID

from src.domain.entities import PasswordResetToken


class IPasswordResetTokenRepository(ABC):
    """PasswordResetToken repository interface - application layer"""

    @abstractmethod
    async def create(self, token: PasswordResetToken) -> PasswordResetToken:
        """Create a new password reset token"""
        pass

    @abstractmethod
    async def get_valid_by_token_hash(
        self, token_hash: str, now: datetime
    ) -> Optional[PasswordResetToken]:
        """Get an unused, unexpired token by hash"""
        pass

    @abstractmethod
    async def mark_used_if_valid(
        self, token_hash: str, now: datetime
    ) -> Optional[PasswordResetToken]:
        """
        Atomically flip an unused, unexpired token to used.

        Only one caller can win for a given token; every other caller
        (and any caller holding an unknown/expired/used token) gets None.
        """
        pass

    @abstractmethod
    async def delete(self, token_id: UUID) -> None:
        """Delete a token"""
        pass

    @abstractmethod
    async def delete_by_account_id(self, account_id: UUID) -> int:
        """Delete every token owned by an account"""
        pass

    @abstractmethod
    async def purge_expired(self, now: datetime) -> int:
        """Delete tokens whose expiry has passed"""
        pass
