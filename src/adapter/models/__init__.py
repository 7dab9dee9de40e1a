"""
Persistence rows

SQLModel tables mapped to and from the immutable domain records by the
repositories. Nothing outside src/adapter should import these.
"""

from .account import AccountRecord
from .password_reset_token import PasswordResetTokenRecord

__all__ = [
    "AccountRecord",
    "PasswordResetTokenRecord",
]
