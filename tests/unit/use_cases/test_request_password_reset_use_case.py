"""
Unit tests for RequestPasswordResetUseCase

Tests all business logic with mocked dependencies.
"""
from datetime import timedelta

import pytest

from config import ApplicationConfig
from src.app.use_cases.auth import RequestPasswordResetUseCase
from src.domain.base import utcnow
from src.domain.errors import InvalidEmailField


@pytest.mark.asyncio
async def test_fills_reset_password_fields(mock_uow, mock_mailer, make_user):
    user = make_user()
    mock_uow.users.find_by.return_value = user

    result = await RequestPasswordResetUseCase(mock_uow, mock_mailer).execute(
        {"email": "user@example.com"}
    )

    assert result.is_ok()
    assert user.reset_password_token is not None
    assert user.reset_password_sent_at is not None
    mock_uow.users.update.assert_called_once_with(user)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_sends_reset_password_email(mock_uow, mock_mailer, make_user, monkeypatch):
    monkeypatch.setattr(ApplicationConfig, "DELIVER_LATER", False)
    user = make_user()
    mock_uow.users.find_by.return_value = user

    await RequestPasswordResetUseCase(mock_uow, mock_mailer).execute({"email": "user@example.com"})

    mock_mailer.deliver.assert_called_once()
    mock_mailer.deliver_later.assert_not_called()
    message = mock_mailer.deliver.call_args.args[0]
    assert message.recipient == "user@example.com"
    assert message.subject == "Reset password instructions"
    assert user.reset_password_token in message.body


@pytest.mark.asyncio
async def test_uses_deliver_later_when_configured(mock_uow, mock_mailer, make_user, monkeypatch):
    monkeypatch.setattr(ApplicationConfig, "DELIVER_LATER", True)
    mock_uow.users.find_by.return_value = make_user()

    await RequestPasswordResetUseCase(mock_uow, mock_mailer).execute({"email": "user@example.com"})

    mock_mailer.deliver_later.assert_called_once()
    mock_mailer.deliver.assert_not_called()


@pytest.mark.asyncio
async def test_unconfirmed_user_is_refused(mock_uow, mock_mailer, make_user):
    user = make_user(confirmed=False)
    mock_uow.users.find_by.return_value = user

    result = await RequestPasswordResetUseCase(mock_uow, mock_mailer).execute(
        {"email": "user@example.com"}
    )

    assert result.is_err()
    assert result.error.details == {"email": [{"error": "unconfirmed"}]}
    assert user.reset_password_token is None
    assert user.reset_password_sent_at is None
    mock_uow.users.update.assert_not_called()
    mock_uow.commit.assert_not_called()
    mock_mailer.deliver.assert_not_called()
    mock_mailer.deliver_later.assert_not_called()


@pytest.mark.asyncio
async def test_locked_user_is_refused(mock_uow, mock_mailer, make_user):
    user = make_user(locked_at=utcnow() - timedelta(minutes=2))
    mock_uow.users.find_by.return_value = user

    result = await RequestPasswordResetUseCase(mock_uow, mock_mailer).execute(
        {"email": "user@example.com"}
    )

    assert result.is_err()
    assert result.error.details == {"email": [{"error": "locked"}]}
    assert user.reset_password_token is None
    assert user.reset_password_sent_at is None
    mock_uow.users.update.assert_not_called()
    mock_mailer.deliver.assert_not_called()
    mock_mailer.deliver_later.assert_not_called()


@pytest.mark.asyncio
async def test_unknown_email_succeeds_silently(mock_uow, mock_mailer, monkeypatch):
    monkeypatch.setattr(ApplicationConfig, "AVOID_EMAIL_ERRORS", True)
    mock_uow.users.find_by.return_value = None

    result = await RequestPasswordResetUseCase(mock_uow, mock_mailer).execute(
        {"email": "nobody@example.com"}
    )

    assert result.is_ok()
    mock_uow.commit.assert_not_called()
    mock_mailer.deliver.assert_not_called()


@pytest.mark.asyncio
async def test_unknown_email_reports_not_found(mock_uow, mock_mailer, monkeypatch):
    monkeypatch.setattr(ApplicationConfig, "AVOID_EMAIL_ERRORS", False)
    mock_uow.users.find_by.return_value = None

    result = await RequestPasswordResetUseCase(mock_uow, mock_mailer).execute(
        {"email": "nobody@example.com"}
    )

    assert result.is_err()
    assert result.error.details == {"email": [{"error": "not_found"}]}


@pytest.mark.asyncio
async def test_blank_email_fails(mock_uow, mock_mailer):
    result = await RequestPasswordResetUseCase(mock_uow, mock_mailer).execute({"email": " "})

    assert result.is_err()
    assert result.error.details == {"email": [{"error": "blank"}]}
    mock_mailer.deliver.assert_not_called()


@pytest.mark.asyncio
async def test_invalid_email_field_raises(mock_uow, mock_mailer, monkeypatch):
    monkeypatch.setattr(ApplicationConfig, "EMAIL_FIELD_NAME", "invalid")

    with pytest.raises(InvalidEmailField):
        await RequestPasswordResetUseCase(mock_uow, mock_mailer).execute(
            {"email": "user@example.com"}
        )
