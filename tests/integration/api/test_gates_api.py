from datetime import timedelta

import pytest

from src.api.utils.jwt import TokenService
from src.depends import token_service
from tests.utils.session import caller_id


@pytest.mark.asyncio
async def test_health_is_public(client):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "headers",
    [
        {},
        {"Authorization": "Bearer"},
        {"Authorization": "Bearer a b"},
        {"Authorization": "Bearer not-a-token"},
    ],
)
async def test_missing_or_malformed_header(client, headers):
    response = await client.get("/organizations", headers=headers)

    assert response.status_code == 401
    assert response.json() == {"error": {"code": "UNAUTHORIZED", "message": "Unauthorized"}}


@pytest.mark.asyncio
async def test_user_token_on_admin_route(client, user_headers):
    response = await client.post(
        "/users", json={"email": "new@acme.com"}, headers=user_headers
    )

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_admin_token_on_admin_route(client, admin_headers):
    response = await client.post(
        "/users", json={"email": "new@acme.com", "role_names": ["user"]}, headers=admin_headers
    )

    assert response.status_code == 201
    assert response.json()["email"] == "new@acme.com"


@pytest.mark.asyncio
async def test_expired_token(client):
    token = token_service.issue(1, "admin", expires_delta=timedelta(minutes=-1))

    response = await client.get("/organizations", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_token_signed_outside_key_ring(client):
    foreign = TokenService({"other": "another-secret"}, "other")
    token = foreign.issue(1, "admin")

    response = await client.get("/organizations", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_unknown_role_claim(client):
    token = token_service.issue(1, "superuser")

    response = await client.get("/organizations", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_include_deleted_requires_admin(client, user_headers):
    response = await client.get(
        "/organizations", params={"include_deleted": True}, headers=user_headers
    )

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_users_cannot_update_each_other(client, user_headers, admin_headers):
    response = await client.put(
        f"/users/{caller_id(admin_headers)}", json={"name": "Mallory"}, headers=user_headers
    )

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_users_cannot_verify_themselves(client, user_headers):
    response = await client.put(
        f"/users/{caller_id(user_headers)}", json={"verified": True}, headers=user_headers
    )

    assert response.status_code == 401
