"""
Password Reset Use Cases
"""

from .admin_password_reset_use_case import AdminPasswordResetUseCase
from .confirm_password_reset_use_case import ConfirmPasswordResetUseCase
from .request_password_reset_use_case import RequestPasswordResetUseCase
from .dtos import PasswordResetConfirmedResponse, PasswordResetRequestedResponse

__all__ = [
    "AdminPasswordResetUseCase",
    "ConfirmPasswordResetUseCase",
    "RequestPasswordResetUseCase",
    "PasswordResetConfirmedResponse",
    "PasswordResetRequestedResponse",
]
