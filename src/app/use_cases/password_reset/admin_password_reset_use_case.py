"""
Admin Password Reset Use Case

An administrator sends a reset link to another account.
"""

from uuid import UUID

from libs.result import Result, Return
from src.app.services.authorization import require_admin
from src.app.services.reset_token_service import ResetTokenService
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.accounts.common import ACCOUNT_NOT_FOUND
from src.domain.entities import Principal

from .dtos import PasswordResetRequestedResponse


class AdminPasswordResetUseCase:
    """
    Business Rules:
    - Principal must be an administrator (checked before any store access)
    - Unknown account id is ACCOUNT_NOT_FOUND
    - The administrator never sees the token; it only goes to the account's email
    """

    def __init__(self, uow: UnitOfWork, token_service: ResetTokenService):
        self.uow = uow
        self.token_service = token_service

    async def execute(
        self, principal: Principal, account_id: UUID
    ) -> Result[PasswordResetRequestedResponse]:
        authorized = require_admin(principal)
        if authorized.is_err():
            return Return.err(authorized.error)

        async with self.uow:
            account = await self.uow.accounts.get_by_id(account_id)
            if account is None:
                return Return.err(ACCOUNT_NOT_FOUND)

            await self.token_service.issue(account)

        return Return.ok(PasswordResetRequestedResponse())
