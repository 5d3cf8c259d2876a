import pytest

from src.app.use_cases.common import (
    CreateEntityUseCase,
    DeleteEntityUseCase,
    GetEntityUseCase,
    ListEntitiesUseCase,
    ParentRef,
    UpdateEntityUseCase,
    diff_fields,
)
from src.app.use_cases.access import APIKeyResponse
from src.app.use_cases.billing import SubscriptionResponse
from src.app.use_cases.organizations import DomainResponse
from src.domain.base import utcnow
from src.domain.entities import (
    APIKey,
    Domain,
    Organization,
    Subscription,
    SubscriptionStatus,
    User,
)

ORGANIZATION_PARENT = ParentRef("organization_id", "organizations", "ORGANIZATION_NOT_FOUND")


def domain_use_case(use_case_type, mock_uow, **kwargs):
    return use_case_type(mock_uow, "domains", DomainResponse, "DOMAIN_NOT_FOUND", **kwargs)


@pytest.mark.asyncio
async def test_create_checks_parent(mock_uow):
    mock_uow.organizations.get_by_id.return_value = None
    use_case = domain_use_case(CreateEntityUseCase, mock_uow, parents=(ORGANIZATION_PARENT,))

    result = await use_case.execute(1, Domain(organization_id=9, domain="acme.test"))

    assert result.is_err()
    assert result.error.code == "ORGANIZATION_NOT_FOUND"
    assert result.error.message == "Organization not found"
    mock_uow.domains.create.assert_not_awaited()


@pytest.mark.asyncio
async def test_create_audits_and_commits(mock_uow):
    mock_uow.organizations.get_by_id.return_value = Organization(id=9, name="Acme Corp")
    use_case = domain_use_case(CreateEntityUseCase, mock_uow, parents=(ORGANIZATION_PARENT,))

    result = await use_case.execute(1, Domain(organization_id=9, domain="acme.test"))

    assert result.is_ok()
    assert result.value.domain == "acme.test"
    audit_log = mock_uow.audit_logs.create.call_args.args[0]
    assert audit_log.organization_id == 9
    assert audit_log.resource_type == "domains"
    mock_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_update_records_field_diff(mock_uow):
    mock_uow.domains.get_by_id.return_value = Domain(id=3, organization_id=9, domain="acme.test")
    use_case = domain_use_case(UpdateEntityUseCase, mock_uow)

    result = await use_case.execute(1, 3, {"verified": True})

    assert result.value.verified is True
    audit_log = mock_uow.audit_logs.create.call_args.args[0]
    assert audit_log.changes == {"verified": {"old": False, "new": True}}


@pytest.mark.asyncio
async def test_delete_is_soft(mock_uow):
    domain = Domain(id=3, organization_id=9, domain="acme.test")
    mock_uow.domains.get_by_id.return_value = domain
    use_case = domain_use_case(DeleteEntityUseCase, mock_uow)

    result = await use_case.execute(1, 3)

    assert result.is_ok()
    assert result.value.deleted_at is not None
    mock_uow.domains.soft_delete.assert_awaited_once_with(domain)
    assert mock_uow.audit_logs.create.call_args.args[0].action == "delete"


@pytest.mark.asyncio
async def test_delete_missing_entity(mock_uow):
    mock_uow.domains.get_by_id.return_value = None

    result = await domain_use_case(DeleteEntityUseCase, mock_uow).execute(1, 3)

    assert result.error.code == "DOMAIN_NOT_FOUND"
    mock_uow.domains.soft_delete.assert_not_awaited()


@pytest.mark.asyncio
async def test_list_passes_include_deleted_and_filters(mock_uow):
    mock_uow.domains.list.return_value = []

    await domain_use_case(ListEntitiesUseCase, mock_uow).execute(
        include_deleted=True, organization_id=9
    )

    mock_uow.domains.list.assert_awaited_once_with(
        include_deleted=True, limit=100, offset=0, organization_id=9
    )


def test_diff_masks_secrets_and_skips_unchanged():
    user = User(id=1, email="user@acme.com", name="Acme User", verification_code="abc")

    diff = diff_fields(
        user, {"name": "Acme User", "email": "new@acme.com", "verification_code": None}
    )

    assert diff == {
        "email": {"old": "user@acme.com", "new": "new@acme.com"},
        "verification_code": {"old": "***", "new": "***"},
    }


@pytest.mark.asyncio
async def test_update_ignores_explicit_nulls(mock_uow):
    mock_uow.subscriptions.get_by_id.return_value = Subscription(
        id=5, organization_id=9, status=SubscriptionStatus.trialing, start_date=utcnow()
    )
    use_case = UpdateEntityUseCase(
        mock_uow, "subscriptions", SubscriptionResponse, "SUBSCRIPTION_NOT_FOUND"
    )

    result = await use_case.execute(1, 5, {"status": None, "payment_method": "card"})

    assert result.is_ok()
    assert result.value.status == SubscriptionStatus.trialing
    assert result.value.payment_method == "card"
    audit_log = mock_uow.audit_logs.create.call_args.args[0]
    assert "status" not in audit_log.changes


def api_key_use_case(use_case_type, mock_uow):
    return use_case_type(
        mock_uow, "api_keys", APIKeyResponse, "API_KEY_NOT_FOUND", owner_field="user_id"
    )


@pytest.mark.asyncio
async def test_get_refuses_another_owner(mock_uow):
    mock_uow.api_keys.get_by_id.return_value = APIKey(id=4, user_id=2, organization_id=9)

    result = await api_key_use_case(GetEntityUseCase, mock_uow).execute(4, owner_id=3)

    assert result.error.code == "UNAUTHORIZED"


@pytest.mark.asyncio
async def test_get_allows_owner(mock_uow):
    mock_uow.api_keys.get_by_id.return_value = APIKey(id=4, user_id=2, organization_id=9)

    result = await api_key_use_case(GetEntityUseCase, mock_uow).execute(4, owner_id=2)

    assert result.value.user_id == 2


@pytest.mark.asyncio
async def test_update_refuses_another_owner(mock_uow):
    api_key = APIKey(id=4, user_id=2, organization_id=9, permissions=["reports:read"])
    mock_uow.api_keys.get_by_id.return_value = api_key

    result = await api_key_use_case(UpdateEntityUseCase, mock_uow).execute(
        3, 4, {"permissions": ["*"]}, owner_id=3
    )

    assert result.error.code == "UNAUTHORIZED"
    assert api_key.permissions == ["reports:read"]
    mock_uow.api_keys.update.assert_not_awaited()
    mock_uow.commit.assert_not_awaited()
