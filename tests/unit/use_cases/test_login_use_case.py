import pytest

from src.api.utils.jwt import TokenService
from src.app.use_cases.auth import LoginUseCase
from src.domain.credentials import hash_password
from src.domain.entities import Permission, Role, User

PASSWORD = "SecurePass123!"


@pytest.fixture(scope="module")
def password_hash():
    return hash_password(PASSWORD)


@pytest.fixture
def token_service():
    return TokenService({"k1": "login-secret"}, "k1")


def make_user(password_hash, *role_names):
    user = User(id=3, email="user@acme.com", password_hash=password_hash)
    roles = []
    for index, name in enumerate(role_names, start=1):
        role = Role(id=index, name=name)
        role.permissions = [Permission(id=index, name=f"{name}:read")]
        roles.append(role)
    user.roles = roles
    user.permissions = [Permission(id=99, name="reports:export")]
    return user


@pytest.mark.asyncio
async def test_login_issues_admin_token_for_admin_role(mock_uow, token_service, password_hash):
    user = make_user(password_hash, "admin", "user")
    mock_uow.users.get_by_email.return_value = user
    mock_uow.users.get_with_roles.return_value = user

    result = await LoginUseCase(mock_uow, token_service).execute("user@acme.com", PASSWORD)

    assert result.is_ok()
    assert result.value.role == "admin"
    assert result.value.permissions == ["admin:read", "reports:export", "user:read"]

    payload = token_service.verify(result.value.access_token)
    assert payload["id"] == 3
    assert payload["role"] == "admin"
    assert payload["permissions"] == result.value.permissions

    activity = mock_uow.activity_logs.create.call_args.args[0]
    assert activity.activity_type == "login"
    assert activity.user_id == 3
    mock_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_login_issues_user_token_without_admin_role(
    mock_uow, token_service, password_hash
):
    user = make_user(password_hash, "user")
    mock_uow.users.get_by_email.return_value = user
    mock_uow.users.get_with_roles.return_value = user

    result = await LoginUseCase(mock_uow, token_service).execute("user@acme.com", PASSWORD)

    assert result.is_ok()
    assert token_service.verify(result.value.access_token)["role"] == "user"


@pytest.mark.asyncio
async def test_login_ignores_soft_deleted_admin_role(mock_uow, token_service, password_hash):
    user = make_user(password_hash, "admin")
    user.roles[0].deleted_at = user.roles[0].created_at
    mock_uow.users.get_by_email.return_value = user
    mock_uow.users.get_with_roles.return_value = user

    result = await LoginUseCase(mock_uow, token_service).execute("user@acme.com", PASSWORD)

    assert result.value.role == "user"


@pytest.mark.asyncio
async def test_login_wrong_password(mock_uow, token_service, password_hash):
    mock_uow.users.get_by_email.return_value = make_user(password_hash, "user")

    result = await LoginUseCase(mock_uow, token_service).execute("user@acme.com", "Wrong!")

    assert result.is_err()
    assert result.error.code == "INVALID_CREDENTIALS"
    mock_uow.activity_logs.create.assert_not_awaited()
    mock_uow.commit.assert_not_awaited()


@pytest.mark.asyncio
async def test_login_unknown_email(mock_uow, token_service):
    mock_uow.users.get_by_email.return_value = None

    result = await LoginUseCase(mock_uow, token_service).execute("nobody@acme.com", PASSWORD)

    assert result.is_err()
    assert result.error.code == "INVALID_CREDENTIALS"
