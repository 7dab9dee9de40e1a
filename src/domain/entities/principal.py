"""
Principal

The identity on whose behalf an operation is requested.
"""

from uuid import UUID

from src.domain.base import ValueRecord

from .enums import AccountRole


class Principal(ValueRecord):
    id: UUID
    role: AccountRole

    @property
    def is_admin(self) -> bool:
        return self.role == AccountRole.admin
