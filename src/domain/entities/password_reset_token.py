"""
PasswordResetToken Entity

Single-use, time-bounded credential for changing one account's password.
"""

from datetime import datetime
from uuid import UUID, uuid4

from pydantic import Field

from src.domain.base import ValueRecord, utcnow


class PasswordResetToken(ValueRecord):
    """
    PasswordResetToken entity - immutable value record.

    Business Rules:
    - token_hash is the SHA-256 hex digest of the raw token sent by email
    - Valid only while unused and before expires_at
    - Owned by exactly one account and removed together with it
    - Removed once consumed
    """

    id: UUID = Field(default_factory=uuid4)
    account_id: UUID
    token_hash: str
    used: bool = False
    created_at: datetime = Field(default_factory=utcnow)
    expires_at: datetime

    def is_valid(self, now: datetime) -> bool:
        return not self.used and now < self.expires_at
