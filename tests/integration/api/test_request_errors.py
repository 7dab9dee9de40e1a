import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_malformed_json(client: AsyncClient):
    response = await client.post(
        "/api/users/register",
        content="{not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "MALFORMED_INPUT"


@pytest.mark.asyncio
async def test_non_object_body(client: AsyncClient):
    response = await client.post("/api/users/register", json=["traveller"])

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "MALFORMED_INPUT"


@pytest.mark.asyncio
async def test_missing_field(client: AsyncClient):
    response = await client.post(
        "/api/users/register", json={"username": "traveller", "email": "t@example.com"}
    )

    assert response.status_code == 400
    error = response.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert error["details"] == {"field": "password", "rule": "REQUIRED"}


@pytest.mark.asyncio
async def test_invalid_account_id_is_not_found(client: AsyncClient, admin_headers):
    response = await client.delete("/api/users/not-a-uuid", headers=admin_headers)

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "ACCOUNT_NOT_FOUND"
