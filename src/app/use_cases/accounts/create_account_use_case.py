"""
Create Account Use Case

Administrator-only account creation with a chosen role.
"""

from typing import Any, Optional

from libs.result import Result, Return
from src.app.services.authorization import require_admin
from src.app.services.password_hasher import IPasswordHasher
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AccountRole, Principal
from src.domain.validators import normalize_email, normalize_username, validate_credentials

from .common import insert_account
from .dtos import CreateAccountCommand, CreatedAccountResponse


def resolve_requested_role(role: Optional[Any]) -> AccountRole:
    """Only an explicit "admin" grants admin; anything else means user."""
    return AccountRole.admin if role == AccountRole.admin.value else AccountRole.user


class CreateAccountUseCase:
    """
    Business Rules:
    - Principal must be an administrator (checked before any store access)
    - Same validation and uniqueness rules as self-registration
    - Role is `admin` only when exactly "admin" is requested
    """

    def __init__(self, uow: UnitOfWork, hasher: IPasswordHasher):
        self.uow = uow
        self.hasher = hasher

    async def execute(
        self, principal: Principal, command: CreateAccountCommand
    ) -> Result[CreatedAccountResponse]:
        authorized = require_admin(principal)
        if authorized.is_err():
            return Return.err(authorized.error)

        username = normalize_username(command.username)
        email = normalize_email(command.email)

        validation = validate_credentials(username, email, command.password)
        if validation.is_err():
            return Return.err(validation.error)

        role = resolve_requested_role(command.role)

        async with self.uow:
            created = await insert_account(
                self.uow,
                self.hasher,
                username=username,
                email=email,
                password=command.password,
                role=role,
                failure_message="User creation failed",
            )
            if created.is_err():
                return Return.err(created.error)

        account = created.value
        return Return.ok(CreatedAccountResponse(id=str(account.id), role=account.role.value))
