"""
Identity Domain Enums
"""

from enum import Enum


class AccountRole(str, Enum):
    """Role of an account across the whole application"""

    user = "user"
    admin = "admin"

    @classmethod
    def parse(cls, value) -> "AccountRole | None":
        """Return the matching role, or None for anything outside the enum"""
        try:
            return cls(value)
        except ValueError:
            return None
