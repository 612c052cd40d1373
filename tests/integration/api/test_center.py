import pytest
from httpx import AsyncClient

from tests.utils.api_helpers import bearer, login, promote_to_admin, register_and_login
from tests.utils.json_compare import without_generated


async def admin_token(client: AsyncClient, db_session, test_data) -> str:
    admin = test_data.get_copy("admin")
    await register_and_login(client, admin)
    await promote_to_admin(db_session, admin["email"])
    # Role is read from the account at login
    access_token, _ = await login(client, admin)
    return access_token


@pytest.mark.asyncio
async def test_add_center_requires_admin_role(client: AsyncClient, db_session, test_data):
    """Role Gate

    Given a "user" access token and an "admin" access token
    When each submits a center affiliation
    Then the user is rejected with 403 FORBIDDEN
    And the admin's submission is created
    """
    center = test_data.get_copy("center")
    user_token, _ = await register_and_login(client, test_data.get_copy("ann"))
    admin_access = await admin_token(client, db_session, test_data)

    forbidden = await client.post("/api/center/add", json=center, headers=bearer(user_token))
    assert forbidden.status_code == 403
    assert forbidden.json()["error"]["code"] == "FORBIDDEN"

    created = await client.post("/api/center/add", json=center, headers=bearer(admin_access))
    assert created.status_code == 201
    data = created.json()
    assert data["message"] == "Center affiliation submitted successfully"
    assert without_generated(data["center"]) == center


@pytest.mark.asyncio
async def test_add_center_requires_authentication(client: AsyncClient, test_data):
    response = await client.post("/api/center/add", json=test_data.get_copy("center"))

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_duplicate_center_code(client: AsyncClient, db_session, test_data):
    center = test_data.get_copy("center")
    access_token = await admin_token(client, db_session, test_data)
    await client.post("/api/center/add", json=center, headers=bearer(access_token))

    response = await client.post("/api/center/add", json=center, headers=bearer(access_token))

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "CENTER_CODE_EXISTS"


@pytest.mark.asyncio
async def test_add_center_validation(client: AsyncClient, db_session, test_data):
    center = test_data.get_copy("center")
    center["office"] = "maybe"
    del center["contact_no"]
    access_token = await admin_token(client, db_session, test_data)

    response = await client.post("/api/center/add", json=center, headers=bearer(access_token))

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_list_and_lookup_centers(client: AsyncClient, db_session, test_data):
    center = test_data.get_copy("center")
    access_token = await admin_token(client, db_session, test_data)
    await client.post("/api/center/add", json=center, headers=bearer(access_token))

    listed = await client.get("/api/center")
    assert listed.status_code == 200
    assert [c["center_code"] for c in listed.json()] == ["NC-001"]

    found = await client.get("/api/center/code/NC-001")
    assert found.status_code == 200
    assert found.json()["name"] == center["name"]

    missing = await client.get("/api/center/code/NOPE")
    assert missing.status_code == 404
    assert missing.json()["error"]["code"] == "CENTER_NOT_FOUND"
