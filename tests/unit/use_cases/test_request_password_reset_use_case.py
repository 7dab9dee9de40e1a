"""
Unit tests for RequestPasswordResetUseCase and AdminPasswordResetUseCase
"""
from datetime import timedelta
from uuid import uuid4

import pytest

from src.app.services.reset_token_service import ResetTokenService
from src.app.use_cases.password_reset import (
    AdminPasswordResetUseCase,
    RequestPasswordResetUseCase,
)
from src.app.use_cases.password_reset.dtos import RESET_LINK_SENT_MESSAGE
from tests.fixtures.recording_notifier import RecordingNotifier


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def token_service(mock_uow, notifier):
    return ResetTokenService(
        mock_uow, notifier, ttl=timedelta(minutes=60), frontend_url="http://localhost:5177"
    )


@pytest.mark.asyncio
async def test_known_email_gets_link(mock_uow, token_service, notifier, existing_account):
    # Arrange
    mock_uow.accounts.get_by_email.return_value = existing_account

    # Act
    result = await RequestPasswordResetUseCase(mock_uow, token_service).execute(
        "  Traveller@Example.com "
    )

    # Assert
    assert result.is_ok()
    assert result.value.message == RESET_LINK_SENT_MESSAGE
    mock_uow.accounts.get_by_email.assert_called_once_with("traveller@example.com")
    mock_uow.password_reset_tokens.create.assert_called_once()
    assert [sent.recipient for sent in notifier.sent] == [existing_account.email]


@pytest.mark.asyncio
async def test_unknown_email_same_response_no_token(mock_uow, token_service, notifier):
    result = await RequestPasswordResetUseCase(mock_uow, token_service).execute(
        "nobody@example.com"
    )

    assert result.is_ok()
    assert result.value.message == RESET_LINK_SENT_MESSAGE
    mock_uow.password_reset_tokens.create.assert_not_called()
    assert notifier.sent == []


@pytest.mark.asyncio
async def test_malformed_email_rejected(mock_uow, token_service):
    result = await RequestPasswordResetUseCase(mock_uow, token_service).execute("not-an-email")

    assert result.is_err()
    assert result.error.code == "VALIDATION_ERROR"
    assert result.error.details == {"field": "email", "rule": "INVALID_FORMAT"}
    mock_uow.accounts.get_by_email.assert_not_called()


@pytest.mark.asyncio
async def test_delivery_failure_still_uniform(mock_uow, existing_account):
    notifier = RecordingNotifier(deliver=False)
    service = ResetTokenService(
        mock_uow, notifier, ttl=timedelta(minutes=60), frontend_url="http://localhost:5177"
    )
    mock_uow.accounts.get_by_email.return_value = existing_account

    result = await RequestPasswordResetUseCase(mock_uow, service).execute(existing_account.email)

    assert result.is_ok()
    assert result.value.message == RESET_LINK_SENT_MESSAGE
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_admin_reset_sends_to_target(
    mock_uow, token_service, notifier, admin_principal, existing_account
):
    mock_uow.accounts.get_by_id.return_value = existing_account

    result = await AdminPasswordResetUseCase(mock_uow, token_service).execute(
        admin_principal, existing_account.id
    )

    assert result.is_ok()
    assert notifier.sent[0].recipient == existing_account.email
    mock_uow.accounts.get_by_id.assert_called_once_with(existing_account.id)


@pytest.mark.asyncio
async def test_admin_reset_unknown_account(mock_uow, token_service, notifier, admin_principal):
    result = await AdminPasswordResetUseCase(mock_uow, token_service).execute(
        admin_principal, uuid4()
    )

    assert result.is_err()
    assert result.error.code == "ACCOUNT_NOT_FOUND"
    assert notifier.sent == []


@pytest.mark.asyncio
async def test_admin_reset_forbidden_for_user(
    mock_uow, token_service, notifier, user_principal, existing_account
):
    result = await AdminPasswordResetUseCase(mock_uow, token_service).execute(
        user_principal, existing_account.id
    )

    assert result.is_err()
    assert result.error.code == "FORBIDDEN"
    mock_uow.accounts.get_by_id.assert_not_called()
    assert notifier.sent == []
