"""
Delete Account Use Case

Administrator-only removal of an account together with its reset tokens.
"""

import logging
from uuid import UUID

from libs.result import Result, Return
from src.app.services.authorization import require_admin
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Principal

from .common import ACCOUNT_NOT_FOUND
from .dtos import MessageResponse

logger = logging.getLogger(__name__)


class DeleteAccountUseCase:
    """
    Business Rules:
    - Principal must be an administrator
    - Outstanding password reset tokens of the account are deleted with it
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, principal: Principal, account_id: UUID
    ) -> Result[MessageResponse]:
        authorized = require_admin(principal)
        if authorized.is_err():
            return Return.err(authorized.error)

        async with self.uow:
            account = await self.uow.accounts.get_by_id(account_id)
            if account is None:
                return Return.err(ACCOUNT_NOT_FOUND)

            tokens_deleted = await self.uow.password_reset_tokens.delete_by_account_id(
                account_id
            )
            await self.uow.accounts.delete(account_id)
            await self.uow.commit()

        logger.info(
            "Account %s deleted by %s (%d reset tokens removed)",
            account_id,
            principal.id,
            tokens_deleted,
        )
        return Return.ok(MessageResponse(message="User deleted"))
