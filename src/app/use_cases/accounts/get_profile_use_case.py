"""
Get Profile Use Case

Returns the account view of the calling principal.
"""

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Principal

from .common import ACCOUNT_NOT_FOUND
from .dtos import ProfileResponse


class GetProfileUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, principal: Principal) -> Result[ProfileResponse]:
        async with self.uow:
            account = await self.uow.accounts.get_by_id(principal.id)

        if account is None:
            return Return.err(ACCOUNT_NOT_FOUND)

        return Return.ok(ProfileResponse.from_account(account))
