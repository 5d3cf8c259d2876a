import pytest
from sqlmodel import select

from src.domain.entities import User


@pytest.mark.asyncio
async def test_register_hides_secrets(client, test_data):
    response = await client.post("/auth/register", json=test_data.get_copy("user"))

    assert response.status_code == 201
    body = response.json()
    assert body["email"] == "user@acme.com"
    assert body["verified"] is False
    for secret in ("password", "password_hash", "verification_code"):
        assert secret not in body


@pytest.mark.asyncio
async def test_register_duplicate_email(client, test_data):
    await client.post("/auth/register", json=test_data.get_copy("user"))

    response = await client.post("/auth/register", json=test_data.get_copy("user"))

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "EMAIL_ALREADY_EXISTS"


@pytest.mark.asyncio
async def test_register_rejects_password_over_72_bytes(client, test_data):
    payload = test_data.get_copy("user")
    payload["password"] = "p" * 73

    response = await client.post("/auth/register", json=payload)

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "CREDENTIAL_ERROR"


@pytest.mark.asyncio
async def test_login_returns_user_token(client, test_data):
    await client.post("/auth/register", json=test_data.get_copy("user"))

    response = await client.post("/auth/login", json=test_data.credentials("user"))

    assert response.status_code == 200
    body = response.json()
    assert body["token_type"] == "bearer"
    assert body["role"] == "user"
    assert body["access_token"]


@pytest.mark.asyncio
async def test_login_wrong_password(client, test_data):
    await client.post("/auth/register", json=test_data.get_copy("user"))
    credentials = test_data.credentials("user")
    credentials["password"] = "WrongPass123!"

    response = await client.post("/auth/login", json=credentials)

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "INVALID_CREDENTIALS"


@pytest.mark.asyncio
async def test_login_unknown_email_looks_like_wrong_password(client):
    response = await client.post(
        "/auth/login", json={"email": "nobody@acme.com", "password": "Whatever123!"}
    )

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "INVALID_CREDENTIALS"


@pytest.mark.asyncio
async def test_verification_code_is_single_use(client, db_session, test_data):
    register = await client.post("/auth/register", json=test_data.get_copy("user"))
    user = (
        await db_session.exec(select(User).where(User.id == register.json()["id"]))
    ).one()
    code = user.verification_code
    assert len(code) == 43

    response = await client.post("/auth/verify", json={"code": code})
    assert response.status_code == 200
    assert response.json() == {"status": "verified", "user_id": register.json()["id"]}

    replay = await client.post("/auth/verify", json={"code": code})
    assert replay.status_code == 400
    assert replay.json()["error"]["code"] == "INVALID_CODE"
