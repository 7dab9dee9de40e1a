"""
Login Use Case

Verifies credentials and issues a bearer token carrying the principal.
"""

from libs.result import Error, Result, Return
from src.app.services.password_hasher import IPasswordHasher
from src.app.services.unit_of_work import UnitOfWork
from src.api.utils.jwt import generate_jwt
from src.domain.validators import normalize_email, normalize_username
from .dtos import LoginResponse

INVALID_CREDENTIALS = Error("INVALID_CREDENTIALS", "Invalid credentials")

# Verified against when the account does not exist, to keep timing uniform
_DUMMY_PASSWORD = "dummy_password_1"


class LoginUseCase:
    """
    Use case for login and access token issuance.

    Business Rules:
    - Login is a username or an email address (anything containing "@")
    - Same error for unknown account and wrong password
    - A password check runs even when the account does not exist
    - Token carries the account id and role
    """

    def __init__(self, uow: UnitOfWork, hasher: IPasswordHasher):
        self.uow = uow
        self.hasher = hasher

    async def execute(self, login: str, password: str) -> Result[LoginResponse]:
        async with self.uow:
            if "@" in login:
                account = await self.uow.accounts.get_by_email(normalize_email(login))
            else:
                account = await self.uow.accounts.get_by_username(
                    normalize_username(login)
                )

        if account is None:
            self.hasher.verify(password, self.hasher.hash(_DUMMY_PASSWORD))
            return Return.err(INVALID_CREDENTIALS)

        if not self.hasher.verify(password, account.password_hash):
            return Return.err(INVALID_CREDENTIALS)

        access_token = generate_jwt(account_id=account.id, role=account.role.value)
        return Return.ok(LoginResponse(access_token=access_token))
