from datetime import timedelta
from typing import Optional
from uuid import UUID

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy import event
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from libs.result import Error
from src.adapter import models  # noqa: F401  registers tables on SQLModel.metadata
from src.adapter.services.notifier import (
    DisabledPasswordResetNotifier,
    MailPasswordResetNotifier,
    build_mail_config,
)
from src.adapter.services.password_hasher import BcryptPasswordHasher
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import ClientError
from src.api.utils.jwt import verify_jwt
from src.app.services.notifier import IPasswordResetNotifier
from src.app.services.password_hasher import IPasswordHasher
from src.app.services.reset_token_service import ResetTokenService
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AccountRole, Principal

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer(auto_error=False)


def enable_sqlite_foreign_keys(async_engine) -> None:
    """SQLite ignores ON DELETE CASCADE unless the pragma is set per connection"""
    if async_engine.dialect.name != "sqlite":
        return

    @event.listens_for(async_engine.sync_engine, "connect")
    def _set_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


enable_sqlite_foreign_keys(engine)


async def init_db():
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_password_hasher() -> IPasswordHasher:
    return BcryptPasswordHasher(rounds=ApplicationConfig.BCRYPT_ROUNDS)


def get_notifier() -> IPasswordResetNotifier:
    if not ApplicationConfig.MAIL_ENABLED:
        return DisabledPasswordResetNotifier()
    return MailPasswordResetNotifier(build_mail_config(ApplicationConfig))


def get_reset_token_service(
    uow: UnitOfWork = Depends(get_unit_of_work),
    notifier: IPasswordResetNotifier = Depends(get_notifier),
) -> ResetTokenService:
    return ResetTokenService(
        uow,
        notifier,
        ttl=timedelta(minutes=ApplicationConfig.PASSWORD_RESET_TOKEN_TTL_MINUTES),
        frontend_url=ApplicationConfig.FRONTEND_URL,
    )


async def get_current_principal(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Principal:
    """
    Dependency to extract the acting principal from the Authorization header.

    Returns:
        Principal built from the JWT `sub` and `role` claims

    Raises:
        ClientError: 401 if the header is missing or the token is invalid/expired
    """
    if credentials is None:
        raise ClientError(
            Error("UNAUTHORIZED", "Authentication required"),
            status_code=401,
        )

    payload = verify_jwt(credentials.credentials)
    role = AccountRole.parse(payload.get("role")) if payload else None

    try:
        account_id = UUID(payload["sub"]) if payload else None
    except (KeyError, TypeError, ValueError):
        account_id = None

    if account_id is None or role is None:
        raise ClientError(
            Error("UNAUTHORIZED", "Invalid or expired token"),
            status_code=401,
        )

    return Principal(id=account_id, role=role)
