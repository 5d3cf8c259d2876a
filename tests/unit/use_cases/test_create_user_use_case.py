import pytest

from src.app.repositories.base_repository import ConstraintViolationError
from src.app.use_cases.users import CreateUserCommand, CreateUserUseCase
from src.domain.credentials import verify_password
from src.domain.entities import Role, User


@pytest.fixture
def command():
    return CreateUserCommand(
        email="user@acme.com",
        password="SecurePass123!",
        name="Acme User",
        role_names=["user"],
    )


@pytest.mark.asyncio
async def test_create_user_hashes_password_and_blanks_plaintext(mock_uow, command):
    mock_uow.users.get_by_email.return_value = None
    mock_uow.roles.get_by_name.return_value = Role(id=2, name="user")

    use_case = CreateUserUseCase(mock_uow)
    result = await use_case.execute(1, command)

    assert result.is_ok()
    assert result.value.email == "user@acme.com"
    assert command.password == ""

    created_user = mock_uow.users.create.call_args.args[0]
    assert verify_password("SecurePass123!", created_user.password_hash)
    assert len(created_user.verification_code) == 43

    mock_uow.users.add_role.assert_awaited_once_with(created_user.id, 2)
    mock_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_create_user_audit_entry_has_no_secrets(mock_uow, command):
    mock_uow.users.get_by_email.return_value = None
    mock_uow.roles.get_by_name.return_value = Role(id=2, name="user")

    await CreateUserUseCase(mock_uow).execute(1, command)

    audit_log = mock_uow.audit_logs.create.call_args.args[0]
    assert audit_log.action == "create"
    assert audit_log.resource_type == "users"
    assert audit_log.user_id == 1
    created = audit_log.changes["created"]
    assert "password_hash" not in created
    assert "verification_code" not in created


@pytest.mark.asyncio
async def test_create_user_creates_missing_reserved_role(mock_uow, command):
    mock_uow.users.get_by_email.return_value = None
    mock_uow.roles.get_by_name.return_value = None

    result = await CreateUserUseCase(mock_uow).execute(None, command)

    assert result.is_ok()
    created_role = mock_uow.roles.create.call_args.args[0]
    assert created_role.name == "user"


@pytest.mark.asyncio
async def test_create_user_duplicate_email(mock_uow, command):
    mock_uow.users.get_by_email.return_value = User(id=5, email="user@acme.com")

    result = await CreateUserUseCase(mock_uow).execute(1, command)

    assert result.is_err()
    assert result.error.code == "EMAIL_ALREADY_EXISTS"
    mock_uow.users.create.assert_not_awaited()
    mock_uow.commit.assert_not_awaited()


@pytest.mark.asyncio
async def test_create_user_rejects_overlong_password(mock_uow):
    mock_uow.users.get_by_email.return_value = None
    command = CreateUserCommand(email="user@acme.com", password="x" * 80)

    result = await CreateUserUseCase(mock_uow).execute(1, command)

    assert result.is_err()
    assert result.error.code == "CREDENTIAL_ERROR"
    mock_uow.users.create.assert_not_awaited()


@pytest.mark.asyncio
async def test_create_user_unknown_role(mock_uow):
    mock_uow.users.get_by_email.return_value = None
    mock_uow.roles.get_by_name.return_value = None
    command = CreateUserCommand(email="user@acme.com", role_names=["auditor"])

    result = await CreateUserUseCase(mock_uow).execute(1, command)

    assert result.is_err()
    assert result.error.code == "ROLE_NOT_FOUND"
    mock_uow.users.create.assert_not_awaited()


@pytest.mark.asyncio
async def test_create_user_constraint_violation(mock_uow):
    mock_uow.users.get_by_email.return_value = None
    mock_uow.users.create.side_effect = ConstraintViolationError("UNIQUE constraint failed")
    command = CreateUserCommand(email="user@acme.com", password="SecurePass123!")

    result = await CreateUserUseCase(mock_uow).execute(1, command)

    assert result.is_err()
    assert result.error.code == "CONSTRAINT_VIOLATION"
    mock_uow.commit.assert_not_awaited()
