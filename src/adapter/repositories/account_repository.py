import logging
from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from libs.result import Error, Result, Return
from src.adapter.models import AccountRecord
from src.app.repositories.account_repository import IAccountRepository
from src.domain.entities import Account

logger = logging.getLogger(__name__)


class AccountRepository(IAccountRepository):
    """Account repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, account_id: UUID) -> Optional[Account]:
        """Get account by ID"""
        stmt = select(AccountRecord).where(AccountRecord.id == account_id)
        result = await self.session.exec(stmt)
        row = result.one_or_none()
        return row.to_domain() if row else None

    async def get_by_email(self, email: str) -> Optional[Account]:
        """Get account by normalized email address"""
        stmt = select(AccountRecord).where(AccountRecord.email == email)
        result = await self.session.exec(stmt)
        row = result.one_or_none()
        return row.to_domain() if row else None

    async def get_by_username(self, username: str) -> Optional[Account]:
        """Get account by username"""
        stmt = select(AccountRecord).where(AccountRecord.username == username)
        result = await self.session.exec(stmt)
        row = result.one_or_none()
        return row.to_domain() if row else None

    async def list_all(self) -> List[Account]:
        """List all accounts, oldest first"""
        stmt = select(AccountRecord).order_by(AccountRecord.created_at)
        result = await self.session.exec(stmt)
        return [row.to_domain() for row in result.all()]

    async def create(self, account: Account) -> Result[Account]:
        """Insert a new account"""
        row = AccountRecord.from_domain(account)
        self.session.add(row)
        flushed = await self._flush()
        if flushed.is_err():
            return flushed
        await self.session.refresh(row)
        return Return.ok(row.to_domain())

    async def update(self, account: Account) -> Result[Account]:
        """Overwrite the mutable fields of an existing account"""
        stmt = select(AccountRecord).where(AccountRecord.id == account.id)
        result = await self.session.exec(stmt)
        row = result.one_or_none()
        if row is None:
            return Return.err(Error("NOT_FOUND", f"Account {account.id} does not exist"))

        row.username = account.username
        row.email = account.email
        row.role = account.role
        row.password_hash = account.password_hash
        self.session.add(row)
        flushed = await self._flush()
        if flushed.is_err():
            return flushed
        await self.session.refresh(row)
        return Return.ok(row.to_domain())

    async def set_password_hash(self, account_id: UUID, password_hash: str) -> bool:
        """Replace the password hash of an account"""
        stmt = (
            update(AccountRecord)
            .where(AccountRecord.id == account_id)
            .values(password_hash=password_hash)
        )
        result = await self.session.execute(stmt)
        return result.rowcount == 1

    async def delete(self, account_id: UUID) -> bool:
        """Delete an account"""
        stmt = delete(AccountRecord).where(AccountRecord.id == account_id)
        result = await self.session.execute(stmt)
        return result.rowcount == 1

    async def _flush(self) -> Result[None]:
        try:
            await self.session.flush()
        except IntegrityError as exc:
            await self.session.rollback()
            logger.warning("Account write rejected by constraint: %s", exc.orig)
            return Return.err(Error("UNIQUE_VIOLATION", str(exc.orig)))
        except SQLAlchemyError as exc:
            await self.session.rollback()
            logger.exception("Account write failed")
            return Return.err(Error("PERSISTENCE_ERROR", str(exc)))
        return Return.ok(None)
