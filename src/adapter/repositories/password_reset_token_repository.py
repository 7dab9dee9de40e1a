from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlalchemy import delete, update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.models import PasswordResetTokenRecord
from src.app.repositories.password_reset_token_repository import IPasswordResetTokenRepository
from src.domain.entities import PasswordResetToken


class PasswordResetTokenRepository(IPasswordResetTokenRepository):
    """PasswordResetToken repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, token: PasswordResetToken) -> PasswordResetToken:
        """Create a new password reset token"""
        row = PasswordResetTokenRecord.from_domain(token)
        self.session.add(row)
        await self.session.flush()
        await self.session.refresh(row)
        return row.to_domain()

    async def get_valid_by_token_hash(
        self, token_hash: str, now: datetime
    ) -> Optional[PasswordResetToken]:
        """Get an unused, unexpired token by hash"""
        stmt = select(PasswordResetTokenRecord).where(
            PasswordResetTokenRecord.token_hash == token_hash,
            PasswordResetTokenRecord.used == False,  # noqa: E712
            PasswordResetTokenRecord.expires_at > now,
        )
        result = await self.session.exec(stmt)
        row = result.one_or_none()
        return row.to_domain() if row else None

    async def mark_used_if_valid(
        self, token_hash: str, now: datetime
    ) -> Optional[PasswordResetToken]:
        """
        Conditional update: only the caller whose UPDATE matches the row wins.
        The database serializes concurrent writers on the same row.
        """
        stmt = (
            update(PasswordResetTokenRecord)
            .where(
                PasswordResetTokenRecord.token_hash == token_hash,
                PasswordResetTokenRecord.used == False,  # noqa: E712
                PasswordResetTokenRecord.expires_at > now,
            )
            .values(used=True)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        if result.rowcount != 1:
            return None

        stmt = (
            select(PasswordResetTokenRecord)
            .where(PasswordResetTokenRecord.token_hash == token_hash)
            .execution_options(populate_existing=True)
        )
        result = await self.session.exec(stmt)
        return result.one().to_domain()

    async def delete(self, token_id: UUID) -> None:
        """Delete a token"""
        stmt = (
            delete(PasswordResetTokenRecord)
            .where(PasswordResetTokenRecord.id == token_id)
            .execution_options(synchronize_session=False)
        )
        await self.session.execute(stmt)

    async def delete_by_account_id(self, account_id: UUID) -> int:
        """Delete every token owned by an account"""
        stmt = (
            delete(PasswordResetTokenRecord)
            .where(PasswordResetTokenRecord.account_id == account_id)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        return result.rowcount

    async def purge_expired(self, now: datetime) -> int:
        """Delete tokens whose expiry has passed"""
        stmt = (
            delete(PasswordResetTokenRecord)
            .where(PasswordResetTokenRecord.expires_at <= now)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        return result.rowcount
