"""
Integration tests for the password reset flow

Run against both persistence backends:
- POST /passwords issues a reset token and mails it
- GET /passwords/{token} validates a token
- PUT /passwords/{token} sets the new password and ends every session
"""
from datetime import timedelta

import pytest
from httpx import AsyncClient

from config import ApplicationConfig
from src.domain.base import utcnow
from src.domain.entities import User


async def create_user(records, email="reset@example.com", confirmed=True, **fields) -> User:
    user = User(email=email, confirmed_at=utcnow() if confirmed else None, **fields)
    user.set_password("OldPass123!")
    return await records.add(user)


@pytest.mark.asyncio
async def test_request_reset_fills_token_and_sends_email(client: AsyncClient, records, mailer):
    await create_user(records)

    response = await client.post("/passwords", json={"email": "reset@example.com"})

    assert response.status_code == 204
    user = await records.find("email", "reset@example.com")
    assert user.reset_password_token is not None
    assert user.reset_password_sent_at is not None
    assert len(mailer.delivered) == 1
    assert mailer.delivered[0].recipient == "reset@example.com"
    assert user.reset_password_token in mailer.delivered[0].body


@pytest.mark.asyncio
async def test_request_reset_uses_deliver_later(client: AsyncClient, records, mailer, monkeypatch):
    monkeypatch.setattr(ApplicationConfig, "DELIVER_LATER", True)
    await create_user(records)

    response = await client.post("/passwords", json={"email": "reset@example.com"})

    assert response.status_code == 204
    assert mailer.delivered == []
    assert len(mailer.deferred) == 1


@pytest.mark.asyncio
async def test_request_reset_trims_and_downcases_email(client: AsyncClient, records, mailer, monkeypatch):
    monkeypatch.setattr(ApplicationConfig, "DOWNCASE_AUTH_FIELD", True)
    await create_user(records)

    response = await client.post("/passwords", json={"email": "  Reset@Example.com "})

    assert response.status_code == 204
    assert len(mailer.messages) == 1


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload, error",
    [
        ({}, "blank"),
        ({"email": "   "}, "blank"),
        ({"email": "invalid"}, "format"),
    ],
)
async def test_request_reset_validates_email(client: AsyncClient, mailer, payload, error):
    response = await client.post("/passwords", json=payload)

    assert response.status_code == 422
    assert response.json() == {"errors": {"email": [{"error": error}]}}
    assert mailer.messages == []


@pytest.mark.asyncio
async def test_request_reset_unknown_email_is_silent(client: AsyncClient, mailer):
    response = await client.post("/passwords", json={"email": "nobody@example.com"})

    assert response.status_code == 204
    assert mailer.messages == []


@pytest.mark.asyncio
async def test_request_reset_unknown_email_reports_not_found(client: AsyncClient, monkeypatch):
    monkeypatch.setattr(ApplicationConfig, "AVOID_EMAIL_ERRORS", False)

    response = await client.post("/passwords", json={"email": "nobody@example.com"})

    assert response.status_code == 422
    assert response.json() == {"errors": {"email": [{"error": "not_found"}]}}


@pytest.mark.asyncio
async def test_request_reset_unconfirmed_user(client: AsyncClient, records, mailer):
    await create_user(records, confirmed=False)

    response = await client.post("/passwords", json={"email": "reset@example.com"})

    assert response.status_code == 422
    assert response.json() == {"errors": {"email": [{"error": "unconfirmed"}]}}
    user = await records.find("email", "reset@example.com")
    assert user.reset_password_token is None
    assert user.reset_password_sent_at is None
    assert mailer.messages == []


@pytest.mark.asyncio
async def test_request_reset_locked_user(client: AsyncClient, records, mailer):
    await create_user(records, locked_at=utcnow() - timedelta(minutes=2))

    response = await client.post("/passwords", json={"email": "reset@example.com"})

    assert response.status_code == 422
    assert response.json() == {"errors": {"email": [{"error": "locked"}]}}
    user = await records.find("email", "reset@example.com")
    assert user.reset_password_token is None
    assert mailer.messages == []


@pytest.mark.asyncio
async def test_request_reset_with_invalid_email_field_config(client: AsyncClient, records, monkeypatch):
    await create_user(records)
    monkeypatch.setattr(ApplicationConfig, "EMAIL_FIELD_NAME", "invalid")

    response = await client.post("/passwords", json={"invalid": "reset@example.com"})

    assert response.status_code == 500
    assert response.json()["error"]["code"] == "INVALID_EMAIL_FIELD"


@pytest.mark.asyncio
async def test_check_reset_token(client: AsyncClient, records):
    await create_user(records, reset_password_token="valid", reset_password_sent_at=utcnow())
    await create_user(
        records,
        email="expired@example.com",
        reset_password_token="expired",
        reset_password_sent_at=utcnow() - timedelta(days=2),
    )

    assert (await client.get("/passwords/valid")).status_code == 204
    assert (await client.get("/passwords/expired")).status_code == 410
    assert (await client.get("/passwords/missing")).status_code == 404


@pytest.mark.asyncio
async def test_set_reset_password_cleans_token_and_sessions(client: AsyncClient, records):
    await create_user(
        records,
        reset_password_token="abcd",
        reset_password_sent_at=utcnow(),
        auth_tokens=["test"],
    )

    response = await client.put(
        "/passwords/abcd",
        json={"password": "NewSecurePass123!", "password_confirmation": "NewSecurePass123!"},
    )

    assert response.status_code == 204
    user = await records.find("email", "reset@example.com")
    assert user.reset_password_token is None
    assert user.reset_password_sent_at is None
    assert user.auth_tokens == []
    assert user.check_password("NewSecurePass123!")


@pytest.mark.asyncio
async def test_set_reset_password_requires_password(client: AsyncClient, records):
    await create_user(records, reset_password_token="abcd", reset_password_sent_at=utcnow())

    response = await client.put("/passwords/abcd", json={})

    assert response.status_code == 422
    assert response.json() == {"errors": {"password": [{"error": "blank"}]}}


@pytest.mark.asyncio
async def test_set_reset_password_with_expired_token(client: AsyncClient, records):
    await create_user(
        records,
        reset_password_token="abcd",
        reset_password_sent_at=utcnow() - timedelta(days=2),
        auth_tokens=["test"],
    )

    response = await client.put("/passwords/abcd", json={"password": "NewSecurePass123!"})

    assert response.status_code == 422
    assert response.json() == {"errors": {"reset_password_token": [{"error": "expired"}]}}
    user = await records.find("email", "reset@example.com")
    assert user.reset_password_token == "abcd"
    assert user.auth_tokens == ["test"]
    assert user.check_password("OldPass123!")


@pytest.mark.asyncio
async def test_set_reset_password_unknown_token(client: AsyncClient):
    response = await client.put("/passwords/missing", json={"password": "NewSecurePass123!"})

    assert response.status_code == 404
    assert response.json() == {"errors": {"reset_password_token": [{"error": "not_found"}]}}
