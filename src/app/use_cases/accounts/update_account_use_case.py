"""
Update Account Use Case

Administrator-only partial update of username, email and role.
"""

import logging
from uuid import UUID

from libs.result import Result, Return
from src.app.services.authorization import require_admin
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AccountRole, Principal
from src.domain.validators import (
    normalize_email,
    normalize_username,
    validate_email,
    validate_username,
)

from .common import ACCOUNT_NOT_FOUND, check_uniqueness, internal_error
from .dtos import SavedResponse, UpdateAccountCommand

logger = logging.getLogger(__name__)


class UpdateAccountUseCase:
    """
    Business Rules:
    - Principal must be an administrator
    - Only supplied fields are validated and changed
    - Supplied username/email must stay unique (the account itself excluded)
    - A role outside {user, admin} is ignored, not rejected
    - Password is never changed here
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, principal: Principal, account_id: UUID, command: UpdateAccountCommand
    ) -> Result[SavedResponse]:
        authorized = require_admin(principal)
        if authorized.is_err():
            return Return.err(authorized.error)

        changes = {}

        if command.username is not None:
            username = normalize_username(command.username)
            validation = validate_username(username)
            if validation.is_err():
                return Return.err(validation.error)
            changes["username"] = username

        if command.email is not None:
            email = normalize_email(command.email)
            validation = validate_email(email)
            if validation.is_err():
                return Return.err(validation.error)
            changes["email"] = email

        role = AccountRole.parse(command.role) if command.role is not None else None
        if command.role is not None and role is None:
            # Unknown roles are dropped silently; callers still get saved=true
            logger.warning(
                "Ignoring unrecognized role %r for account %s", command.role, account_id
            )
        if role is not None:
            changes["role"] = role

        async with self.uow:
            account = await self.uow.accounts.get_by_id(account_id)
            if account is None:
                return Return.err(ACCOUNT_NOT_FOUND)

            unique = await check_uniqueness(
                self.uow,
                email=changes.get("email"),
                username=changes.get("username"),
                exclude_id=account.id,
            )
            if unique.is_err():
                return Return.err(unique.error)

            if changes:
                updated = await self.uow.accounts.update(account.with_changes(**changes))
                if updated.is_err():
                    logger.error(
                        "Account update failed for %s: %s (%s)",
                        account_id,
                        updated.error.code,
                        updated.error.message,
                    )
                    return Return.err(internal_error("Update failed"))
                await self.uow.commit()
                logger.info(
                    "Account %s updated by %s: %s",
                    account_id,
                    principal.id,
                    sorted(changes),
                )

        return Return.ok(SavedResponse(saved=True))
