"""
Identity Domain Entities

Immutable value records; persistence rows live in the adapter layer.
"""

from .enums import AccountRole
from .account import Account
from .password_reset_token import PasswordResetToken
from .principal import Principal

__all__ = [
    "AccountRole",
    "Account",
    "PasswordResetToken",
    "Principal",
]
