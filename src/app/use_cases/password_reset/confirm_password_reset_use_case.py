"""
Confirm Password Reset Use Case

Redeems a reset token and sets a new password.
"""

from libs.result import Result, Return
from src.app.services.password_hasher import IPasswordHasher
from src.app.services.reset_token_service import ResetTokenService
from src.app.services.unit_of_work import UnitOfWork
from src.domain.validators import validate_password

from .dtos import PasswordResetConfirmedResponse


class ConfirmPasswordResetUseCase:
    """
    Use case for redeeming a password reset token.

    Business Rules:
    - New password must pass the shared password rules
    - Unknown, expired and already used tokens all fail with INVALID_OR_EXPIRED_TOKEN
    - Token is consumed exactly once, even under concurrent redemption
    - Password is hashed before it reaches the store
    """

    def __init__(
        self,
        uow: UnitOfWork,
        hasher: IPasswordHasher,
        token_service: ResetTokenService,
    ):
        self.uow = uow
        self.hasher = hasher
        self.token_service = token_service

    async def execute(
        self, token: str, new_password: str
    ) -> Result[PasswordResetConfirmedResponse]:
        validation = validate_password(new_password)
        if validation.is_err():
            return Return.err(validation.error)

        password_hash = self.hasher.hash(new_password)

        async with self.uow:
            consumed = await self.token_service.consume(token, password_hash)
            if consumed.is_err():
                return Return.err(consumed.error)

        return Return.ok(PasswordResetConfirmedResponse())
