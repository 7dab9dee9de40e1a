"""
Use Cases

Organized by flow:
- accounts/: registration, profile and administrator account management
- password_reset/: reset token issuance and redemption
- auth/: login
"""

from .accounts import (
    CreateAccountUseCase,
    DeleteAccountUseCase,
    GetProfileUseCase,
    ListAccountsUseCase,
    RegisterAccountUseCase,
    UpdateAccountUseCase,
)
from .auth import LoginUseCase
from .password_reset import (
    AdminPasswordResetUseCase,
    ConfirmPasswordResetUseCase,
    RequestPasswordResetUseCase,
)

__all__ = [
    # Accounts
    "CreateAccountUseCase",
    "DeleteAccountUseCase",
    "GetProfileUseCase",
    "ListAccountsUseCase",
    "RegisterAccountUseCase",
    "UpdateAccountUseCase",
    # Auth
    "LoginUseCase",
    # Password reset
    "AdminPasswordResetUseCase",
    "ConfirmPasswordResetUseCase",
    "RequestPasswordResetUseCase",
]
