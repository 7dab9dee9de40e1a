"""
List Accounts Use Case
"""

from typing import List

from libs.result import Result, Return
from src.app.services.authorization import require_admin
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Principal

from .dtos import AccountSummary


class ListAccountsUseCase:
    """Administrator-only listing of every account"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, principal: Principal) -> Result[List[AccountSummary]]:
        authorized = require_admin(principal)
        if authorized.is_err():
            return Return.err(authorized.error)

        async with self.uow:
            accounts = await self.uow.accounts.list_all()

        return Return.ok([AccountSummary.from_account(account) for account in accounts])
