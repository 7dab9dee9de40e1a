"""
Account Entity

A registered identity of the travel application.
"""

from datetime import datetime
from typing import List
from uuid import UUID, uuid4

from pydantic import Field

from src.domain.base import ValueRecord, utcnow

from .enums import AccountRole


class Account(ValueRecord):
    """
    Account entity - immutable value record.

    Business Rules:
    - Username and email are each unique across all accounts
    - Email is stored trimmed and lowercased
    - Password stored as bcrypt hash, never plaintext
    - id and created_at never change after creation
    """

    id: UUID = Field(default_factory=uuid4)
    username: str
    email: str
    password_hash: str
    role: AccountRole = AccountRole.user
    created_at: datetime = Field(default_factory=utcnow)

    @property
    def roles(self) -> List[str]:
        return [self.role.value]
