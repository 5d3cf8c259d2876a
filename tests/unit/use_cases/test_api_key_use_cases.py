import pytest

from src.app.use_cases.access import (
    IssueAPIKeyCommand,
    IssueAPIKeyUseCase,
    TouchAPIKeyUseCase,
)
from src.domain.entities import APIKey, Organization, User


@pytest.fixture
def live_owner(mock_uow):
    mock_uow.users.get_by_id.return_value = User(id=2, email="user@acme.com")
    mock_uow.organizations.get_by_id.return_value = Organization(id=1, name="Acme Corp")
    return mock_uow


@pytest.mark.asyncio
async def test_issued_keys_are_distinct(live_owner):
    command = IssueAPIKeyCommand(user_id=2, organization_id=1, name="ci")

    first = await IssueAPIKeyUseCase(live_owner).execute(2, command)
    second = await IssueAPIKeyUseCase(live_owner).execute(2, command)

    assert len(first.value.key) == 43
    assert len(second.value.key) == 43
    assert first.value.key != second.value.key


@pytest.mark.asyncio
async def test_issued_key_is_not_audited(live_owner):
    result = await IssueAPIKeyUseCase(live_owner).execute(
        2, IssueAPIKeyCommand(user_id=2, organization_id=1)
    )

    audit_log = live_owner.audit_logs.create.call_args.args[0]
    assert "key" not in audit_log.changes["created"]
    assert result.value.key not in str(audit_log.changes)


@pytest.mark.asyncio
async def test_issue_for_missing_organization(mock_uow):
    mock_uow.users.get_by_id.return_value = User(id=2, email="user@acme.com")
    mock_uow.organizations.get_by_id.return_value = None

    result = await IssueAPIKeyUseCase(mock_uow).execute(
        2, IssueAPIKeyCommand(user_id=2, organization_id=1)
    )

    assert result.error.code == "ORGANIZATION_NOT_FOUND"
    mock_uow.api_keys.create.assert_not_awaited()


@pytest.mark.asyncio
async def test_touch_sets_last_used_at(mock_uow):
    api_key = APIKey(id=4, user_id=2, organization_id=1, key="k" * 43)
    mock_uow.api_keys.get_by_id.return_value = api_key

    result = await TouchAPIKeyUseCase(mock_uow).execute(4)

    assert result.is_ok()
    assert result.value.last_used_at is not None
    assert not hasattr(result.value, "key")


@pytest.mark.asyncio
async def test_touch_refuses_another_owner(mock_uow):
    mock_uow.api_keys.get_by_id.return_value = APIKey(
        id=4, user_id=2, organization_id=1, key="k" * 43
    )

    result = await TouchAPIKeyUseCase(mock_uow).execute(4, owner_id=3)

    assert result.error.code == "UNAUTHORIZED"
    mock_uow.api_keys.update.assert_not_awaited()
    mock_uow.commit.assert_not_awaited()
