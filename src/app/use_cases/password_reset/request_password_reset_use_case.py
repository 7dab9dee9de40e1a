"""
Request Password Reset Use Case

Self-service "forgot password": emails a reset link to a registered address.
"""

from libs.result import Result, Return
from src.app.services.reset_token_service import ResetTokenService
from src.app.services.unit_of_work import UnitOfWork
from src.domain.validators import normalize_email, validate_email

from .dtos import PasswordResetRequestedResponse


class RequestPasswordResetUseCase:
    """
    Business Rules:
    - Email must be syntactically valid (otherwise VALIDATION_ERROR)
    - No email enumeration: identical response for known and unknown emails
    - Token only issued when the email belongs to an account
    """

    def __init__(self, uow: UnitOfWork, token_service: ResetTokenService):
        self.uow = uow
        self.token_service = token_service

    async def execute(self, email: str) -> Result[PasswordResetRequestedResponse]:
        email = normalize_email(email)
        validation = validate_email(email)
        if validation.is_err():
            return Return.err(validation.error)

        async with self.uow:
            account = await self.uow.accounts.get_by_email(email)
            if account is not None:
                await self.token_service.issue(account)

        return Return.ok(PasswordResetRequestedResponse())
