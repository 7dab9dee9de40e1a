"""
Password Reset Use Case DTOs
"""

from pydantic import BaseModel

RESET_LINK_SENT_MESSAGE = "If the account exists, a password reset link has been sent"


class PasswordResetRequestedResponse(BaseModel):
    """Same payload whether or not the target account exists"""

    message: str = RESET_LINK_SENT_MESSAGE


class PasswordResetConfirmedResponse(BaseModel):
    message: str = "Password has been reset successfully"
