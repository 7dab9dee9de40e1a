from datetime import timedelta

import pytest
from httpx import AsyncClient

from src.api.utils.jwt import generate_jwt, verify_jwt
from src.domain.entities import AccountRole


@pytest.mark.asyncio
async def test_login_with_username_or_email(client: AsyncClient, create_account):
    account = await create_account()

    by_username = await client.post(
        "/api/users/login", json={"login": "traveller", "password": "abc12345"}
    )
    by_email = await client.post(
        "/api/users/login", json={"login": "TRAVELLER@example.com", "password": "abc12345"}
    )

    for response in (by_username, by_email):
        assert response.status_code == 200
        data = response.json()
        assert data["token_type"] == "bearer"
        claims = verify_jwt(data["access_token"])
        assert claims["sub"] == str(account.id)
        assert claims["role"] == "user"


@pytest.mark.asyncio
async def test_login_failures_are_indistinguishable(client: AsyncClient, create_account):
    await create_account()

    wrong_password = await client.post(
        "/api/users/login", json={"login": "traveller", "password": "wrong1234"}
    )
    unknown = await client.post(
        "/api/users/login", json={"login": "nobody", "password": "abc12345"}
    )

    assert wrong_password.status_code == unknown.status_code == 401
    assert wrong_password.json() == unknown.json()
    assert unknown.json()["error"]["code"] == "INVALID_CREDENTIALS"


@pytest.mark.asyncio
async def test_me_returns_profile(client: AsyncClient, create_account, auth_headers):
    account = await create_account()

    response = await client.get("/api/users/me", headers=auth_headers(account))

    assert response.status_code == 200
    assert response.json() == {
        "id": str(account.id),
        "username": "traveller",
        "email": "traveller@example.com",
        "roles": ["user"],
        "createdAt": account.created_at.strftime("%Y-%m-%d %H:%M"),
    }
    assert "password_hash" not in response.text


@pytest.mark.asyncio
async def test_me_requires_bearer_token(client: AsyncClient):
    missing = await client.get("/api/users/me")
    invalid = await client.get(
        "/api/users/me", headers={"Authorization": "Bearer invalid_token_here"}
    )

    for response in (missing, invalid):
        assert response.status_code == 401
        assert response.json()["error"]["code"] == "UNAUTHORIZED"


@pytest.mark.asyncio
async def test_me_for_deleted_account(client: AsyncClient, create_account, auth_headers, admin_headers):
    account = await create_account()
    headers = auth_headers(account)

    deleted = await client.delete(f"/api/users/{account.id}", headers=admin_headers)
    assert deleted.status_code == 200

    response = await client.get("/api/users/me", headers=headers)

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "ACCOUNT_NOT_FOUND"


@pytest.mark.asyncio
async def test_role_is_read_from_token(client: AsyncClient, create_account, auth_headers, admin_headers):
    """A demoted admin's existing token keeps its role until it expires"""
    helper = await create_account(username="helper", email="helper@example.com", role=AccountRole.admin)
    old_headers = auth_headers(helper)

    demoted = await client.put(
        f"/api/users/{helper.id}", json={"role": "user"}, headers=admin_headers
    )
    assert demoted.status_code == 200

    assert (await client.get("/api/users", headers=old_headers)).status_code == 200

    fresh = await client.post(
        "/api/users/login", json={"login": "helper", "password": "abc12345"}
    )
    fresh_headers = {"Authorization": f"Bearer {fresh.json()['access_token']}"}
    assert (await client.get("/api/users", headers=fresh_headers)).status_code == 403


@pytest.mark.asyncio
async def test_expired_token_rejected(client: AsyncClient, create_account):
    account = await create_account()
    token = generate_jwt(account_id=account.id, role="user", expires_delta=timedelta(minutes=-1))

    response = await client.get("/api/users/me", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "UNAUTHORIZED"
