"""
Account Use Cases

Registration, profile and administrator account management.
"""

from .create_account_use_case import CreateAccountUseCase
from .delete_account_use_case import DeleteAccountUseCase
from .get_profile_use_case import GetProfileUseCase
from .list_accounts_use_case import ListAccountsUseCase
from .register_account_use_case import RegisterAccountUseCase
from .update_account_use_case import UpdateAccountUseCase
from .dtos import (
    AccountSummary,
    CreateAccountCommand,
    CreatedAccountResponse,
    MessageResponse,
    ProfileResponse,
    RegisterCommand,
    SavedResponse,
    UpdateAccountCommand,
)

__all__ = [
    # Use Cases
    "CreateAccountUseCase",
    "DeleteAccountUseCase",
    "GetProfileUseCase",
    "ListAccountsUseCase",
    "RegisterAccountUseCase",
    "UpdateAccountUseCase",
    # DTOs - Commands
    "CreateAccountCommand",
    "RegisterCommand",
    "UpdateAccountCommand",
    # DTOs - Responses
    "AccountSummary",
    "CreatedAccountResponse",
    "MessageResponse",
    "ProfileResponse",
    "SavedResponse",
]
