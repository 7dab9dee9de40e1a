from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from src.adapter.services.password_hasher import BcryptPasswordHasher
from src.domain.entities import Account, AccountRole, Principal


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork with both repositories"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.accounts = MagicMock()
    uow.accounts.get_by_id = AsyncMock(return_value=None)
    uow.accounts.get_by_email = AsyncMock(return_value=None)
    uow.accounts.get_by_username = AsyncMock(return_value=None)
    uow.accounts.list_all = AsyncMock(return_value=[])
    uow.accounts.create = AsyncMock()
    uow.accounts.update = AsyncMock()
    uow.accounts.set_password_hash = AsyncMock(return_value=True)
    uow.accounts.delete = AsyncMock(return_value=True)

    uow.password_reset_tokens = MagicMock()
    uow.password_reset_tokens.create = AsyncMock(side_effect=lambda token: token)
    uow.password_reset_tokens.get_valid_by_token_hash = AsyncMock(return_value=None)
    uow.password_reset_tokens.mark_used_if_valid = AsyncMock(return_value=None)
    uow.password_reset_tokens.delete = AsyncMock()
    uow.password_reset_tokens.delete_by_account_id = AsyncMock(return_value=0)
    uow.password_reset_tokens.purge_expired = AsyncMock(return_value=0)

    return uow


@pytest.fixture
def hasher():
    # Low cost factor keeps the suite fast
    return BcryptPasswordHasher(rounds=4)


@pytest.fixture
def admin_principal():
    return Principal(id=uuid4(), role=AccountRole.admin)


@pytest.fixture
def user_principal():
    return Principal(id=uuid4(), role=AccountRole.user)


@pytest.fixture
def existing_account():
    return Account(
        username="traveller",
        email="traveller@example.com",
        password_hash="old_hashed_password",
        role=AccountRole.user,
    )
