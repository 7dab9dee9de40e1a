"""
Shared steps of the account flows: uniqueness checks and insertion.
"""

import logging
from typing import Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.password_hasher import IPasswordHasher
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Account, AccountRole

logger = logging.getLogger(__name__)

ACCOUNT_NOT_FOUND = Error("ACCOUNT_NOT_FOUND", "Not found")


def email_conflict() -> Error:
    return Error(
        "EMAIL_ALREADY_EXISTS", "Email is already registered", details={"field": "email"}
    )


def username_conflict() -> Error:
    return Error(
        "USERNAME_ALREADY_EXISTS", "Username is already taken", details={"field": "username"}
    )


def internal_error(message: str) -> Error:
    return Error("INTERNAL_ERROR", message)


async def check_uniqueness(
    uow: UnitOfWork,
    email: Optional[str] = None,
    username: Optional[str] = None,
    exclude_id: Optional[UUID] = None,
) -> Result[None]:
    """
    Email is checked before username. This read only gives a friendly error;
    the unique indexes remain the authority under concurrent writers.
    """
    if email is not None:
        existing = await uow.accounts.get_by_email(email)
        if existing is not None and existing.id != exclude_id:
            return Return.err(email_conflict())

    if username is not None:
        existing = await uow.accounts.get_by_username(username)
        if existing is not None and existing.id != exclude_id:
            return Return.err(username_conflict())

    return Return.ok(None)


async def insert_account(
    uow: UnitOfWork,
    hasher: IPasswordHasher,
    username: str,
    email: str,
    password: str,
    role: AccountRole,
    failure_message: str,
) -> Result[Account]:
    """Uniqueness check, hash, insert and commit. Call inside `async with uow`."""
    unique = await check_uniqueness(uow, email=email, username=username)
    if unique.is_err():
        return unique

    account = Account(
        username=username,
        email=email,
        password_hash=hasher.hash(password),
        role=role,
    )

    created = await uow.accounts.create(account)
    if created.is_err():
        # Includes unique violations from a concurrent insert
        logger.error(
            "Account insert failed for username=%s: %s (%s)",
            username,
            created.error.code,
            created.error.message,
        )
        return Return.err(internal_error(failure_message))

    await uow.commit()
    logger.info("Account %s created with role %s", created.value.id, role.value)
    return created
