import pytest

from src.api.error import ClientError
from src.api.utils.auth import extract_token, require_admin, require_user_or_admin
from src.api.utils.jwt import TokenService


@pytest.fixture
def token_service():
    return TokenService({"k1": "gate-secret"}, "k1")


@pytest.mark.parametrize(
    "header,expected",
    [
        ("Bearer abc.def.ghi", "abc.def.ghi"),
        ("Token abc", "abc"),
        ("abc.def.ghi", ""),
        ("Bearer a b", ""),
        ("Bearer  abc", ""),
        ("", ""),
        (None, ""),
    ],
)
def test_extract_token(header, expected):
    assert extract_token(header) == expected


@pytest.mark.asyncio
async def test_user_gate_accepts_user_and_admin(token_service):
    for role in ("user", "admin"):
        token = token_service.issue(1, role)
        claims = await require_user_or_admin(
            authorization=f"Bearer {token}", token_service=token_service
        )
        assert claims["role"] == role


@pytest.mark.asyncio
async def test_admin_gate_rejects_user_token(token_service):
    token = token_service.issue(1, "user")

    with pytest.raises(ClientError) as exc_info:
        await require_admin(authorization=f"Bearer {token}", token_service=token_service)

    assert exc_info.value.status_code == 401
    assert exc_info.value.base_error.code == "UNAUTHORIZED"


@pytest.mark.asyncio
async def test_admin_gate_accepts_admin_token(token_service):
    token = token_service.issue(1, "admin")

    claims = await require_admin(authorization=f"Bearer {token}", token_service=token_service)

    assert claims["id"] == 1


@pytest.mark.asyncio
@pytest.mark.parametrize("header", [None, "", "Bearer", "Bearer not-a-token"])
async def test_user_gate_rejects_missing_or_malformed_header(token_service, header):
    with pytest.raises(ClientError) as exc_info:
        await require_user_or_admin(authorization=header, token_service=token_service)

    assert exc_info.value.status_code == 401


@pytest.mark.asyncio
async def test_user_gate_rejects_unknown_role(token_service):
    token = token_service.issue(1, "auditor")

    with pytest.raises(ClientError):
        await require_user_or_admin(authorization=f"Bearer {token}", token_service=token_service)
