"""
Register Account Use Case

Self-service registration. The new account always gets the `user` role.
"""

from libs.result import Result, Return
from src.app.services.password_hasher import IPasswordHasher
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AccountRole
from src.domain.validators import normalize_email, normalize_username, validate_credentials

from .common import insert_account
from .dtos import MessageResponse, RegisterCommand


class RegisterAccountUseCase:
    """
    Business Rules:
    - Username, email, password validated in that order, first failure wins
    - Email normalized (trimmed, lowercased) before validation and lookup
    - Email uniqueness checked before username uniqueness
    - Role forced to `user`
    - Storage failures reported as a generic INTERNAL_ERROR
    """

    def __init__(self, uow: UnitOfWork, hasher: IPasswordHasher):
        self.uow = uow
        self.hasher = hasher

    async def execute(self, command: RegisterCommand) -> Result[MessageResponse]:
        username = normalize_username(command.username)
        email = normalize_email(command.email)

        validation = validate_credentials(username, email, command.password)
        if validation.is_err():
            return Return.err(validation.error)

        async with self.uow:
            created = await insert_account(
                self.uow,
                self.hasher,
                username=username,
                email=email,
                password=command.password,
                role=AccountRole.user,
                failure_message="Registration failed",
            )
            if created.is_err():
                return Return.err(created.error)

        return Return.ok(MessageResponse(message="User registered successfully"))
