import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.services.password_hasher import BcryptPasswordHasher
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.utils.jwt import generate_jwt
from src.depends import (
    enable_sqlite_foreign_keys,
    get_notifier,
    get_password_hasher,
    get_unit_of_work,
)
from src.domain.entities import Account, AccountRole
from tests.fixtures.recording_notifier import RecordingNotifier

USERS_URL = "/api/users"
DEFAULT_PASSWORD = "abc12345"


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    enable_sqlite_foreign_keys(engine)
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def hasher():
    return BcryptPasswordHasher(rounds=4)


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest_asyncio.fixture
async def client(session_factory, hasher, notifier):
    from config import ApplicationConfig
    from src.api.app import create_app

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        async with session_factory() as session:
            yield SqlAlchemyUnitOfWork(session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_password_hasher] = lambda: hasher
    app.dependency_overrides[get_notifier] = lambda: notifier

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def create_account(db_session, hasher):
    """Insert an account directly and return it"""

    async def _create(
        username: str = "traveller",
        email: str = "traveller@example.com",
        password: str = DEFAULT_PASSWORD,
        role: AccountRole = AccountRole.user,
    ) -> Account:
        async with SqlAlchemyUnitOfWork(db_session) as uow:
            created = await uow.accounts.create(
                Account(
                    username=username,
                    email=email,
                    password_hash=hasher.hash(password),
                    role=role,
                )
            )
            await uow.commit()
        return created.value

    return _create


def bearer(account: Account) -> dict:
    token = generate_jwt(account_id=account.id, role=account.role.value)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def auth_headers():
    """Bearer headers for an account"""
    return bearer


@pytest_asyncio.fixture
async def admin(create_account):
    return await create_account(
        username="admin", email="admin@example.com", role=AccountRole.admin
    )


@pytest_asyncio.fixture
async def admin_headers(admin):
    return bearer(admin)
