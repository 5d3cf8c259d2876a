import pytest

from tests.utils.session import caller_id, login


@pytest.mark.asyncio
async def test_plan_writes_require_admin(client, user_headers, test_data):
    response = await client.post(
        "/subscription-plans", json=test_data.get_copy("plan"), headers=user_headers
    )

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_plan_detail_lists_live_features(client, admin_headers, user_headers, test_data):
    plan = await client.post(
        "/subscription-plans", json=test_data.get_copy("plan"), headers=admin_headers
    )
    assert plan.status_code == 201
    plan_id = plan.json()["id"]

    feature_ids = []
    for name in ("sso", "audit-export"):
        feature = await client.post("/features", json={"name": name}, headers=admin_headers)
        feature_ids.append(feature.json()["id"])
        added = await client.post(
            f"/subscription-plans/{plan_id}/features",
            json={"feature_id": feature.json()["id"]},
            headers=admin_headers,
        )
        assert added.status_code == 200

    await client.delete(f"/features/{feature_ids[1]}", headers=admin_headers)

    response = await client.get(f"/subscription-plans/{plan_id}", headers=user_headers)

    assert response.status_code == 200
    assert response.json()["price"] == 49.0
    assert [feature["name"] for feature in response.json()["features"]] == ["sso"]


@pytest.mark.asyncio
async def test_feature_added_twice_conflicts(client, admin_headers, test_data):
    plan = await client.post(
        "/subscription-plans", json=test_data.get_copy("plan"), headers=admin_headers
    )
    feature = await client.post("/features", json={"name": "sso"}, headers=admin_headers)
    path = f"/subscription-plans/{plan.json()['id']}/features"
    payload = {"feature_id": feature.json()["id"]}

    await client.post(path, json=payload, headers=admin_headers)
    response = await client.post(path, json=payload, headers=admin_headers)

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "CONSTRAINT_VIOLATION"


@pytest.mark.asyncio
async def test_role_permissions_reach_the_token(client, admin_headers, user_headers, test_data):
    role = await client.post("/roles", json={"name": "billing"}, headers=admin_headers)
    await client.post("/permissions", json={"name": "invoices:read"}, headers=admin_headers)
    granted = await client.post(
        f"/roles/{role.json()['id']}/permissions",
        json={"permission_name": "invoices:read"},
        headers=admin_headers,
    )
    assert granted.json()["permissions"] == ["invoices:read"]

    assigned = await client.post(
        f"/users/{caller_id(user_headers)}/roles",
        json={"role_name": "billing"},
        headers=admin_headers,
    )
    assert assigned.status_code == 200
    assert assigned.json()["role"] == "user"

    response = await client.post("/auth/login", json=test_data.credentials("user"))

    assert response.json()["permissions"] == ["invoices:read"]
    assert response.json()["role"] == "user"


@pytest.mark.asyncio
async def test_admin_role_grants_admin_token(client, admin_headers, user_headers, test_data):
    await client.post(
        f"/users/{caller_id(user_headers)}/roles",
        json={"role_name": "admin"},
        headers=admin_headers,
    )

    promoted = await login(client, test_data.credentials("user"))
    response = await client.get("/audit-logs", headers=promoted)

    assert response.status_code == 200
