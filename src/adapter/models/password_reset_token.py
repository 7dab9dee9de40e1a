from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import ForeignKey, Uuid
from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow
from src.domain.entities import PasswordResetToken


class PasswordResetTokenRecord(SQLModel, table=True):
    """
    Password reset token row, keyed for lookup by the SHA-256 hash of the
    raw token. Rows go away with their account (ON DELETE CASCADE).
    """

    __tablename__ = "password_reset_tokens"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    account_id: UUID = Field(
        sa_column=Column(
            Uuid,
            ForeignKey("accounts.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        )
    )
    token_hash: str = Field(unique=True, index=True, max_length=64)  # SHA-256 hex

    used: bool = Field(default=False)

    # Timestamps
    created_at: datetime = Field(
        default_factory=utcnow, sa_column=Column(DateTime, nullable=False)
    )
    expires_at: datetime = Field(sa_column=Column(DateTime, nullable=False))

    __table_args__ = (Index("idx_password_reset_expires_at", "expires_at"),)

    @classmethod
    def from_domain(cls, token: PasswordResetToken) -> "PasswordResetTokenRecord":
        return cls(**token.model_dump())

    def to_domain(self) -> PasswordResetToken:
        return PasswordResetToken(
            id=self.id,
            account_id=self.account_id,
            token_hash=self.token_hash,
            used=self.used,
            created_at=self.created_at,
            expires_at=self.expires_at,
        )
