import pytest
from httpx import AsyncClient

from tests.utils.api_helpers import cookie_attributes, get_user, login, refresh_set_cookies


@pytest.mark.asyncio
async def test_successful_login(client: AsyncClient, db_session, test_data):
    """Successful Login

    Given a registered account
    When I log in with the correct email and password
    Then I receive an access token in the body
    And the refresh token is set as an HTTP-only, SameSite=Strict cookie
    And the refresh token is stored in the account's slot
    """
    ann = test_data.get_copy("ann")
    await client.post("/api/auth/register", json=ann)

    response = await client.post("/api/auth/login", json=test_data.credentials("ann"))

    assert response.status_code == 200
    data = response.json()
    assert list(data.keys()) == ["accessToken"]

    cookies = refresh_set_cookies(response)
    assert len(cookies) == 1
    attributes = cookie_attributes(cookies[0])
    assert "httponly" in attributes
    assert "samesite=strict" in attributes
    assert "max-age=604800" in attributes
    # Secure only in production
    assert "secure" not in attributes

    user = await get_user(db_session, ann["email"])
    assert user.refresh_token == response.cookies["jwt"]


@pytest.mark.asyncio
async def test_login_yields_user_role(client: AsyncClient, test_data):
    ann = test_data.get_copy("ann")
    await client.post("/api/auth/register", json=ann)
    access_token, _ = await login(client, ann)

    response = await client.get(
        "/api/profile", headers={"Authorization": f"Bearer {access_token}"}
    )

    assert response.status_code == 200
    assert response.json()["role"] == "user"


@pytest.mark.asyncio
async def test_login_is_case_insensitive_on_email(client: AsyncClient, test_data):
    bob = test_data.get_copy("bob")
    await client.post("/api/auth/register", json=bob)

    response = await client.post("/api/auth/login", json={
        "email": "  BOB@Institute.org ",
        "password": bob["password"]
    })

    assert response.status_code == 200


@pytest.mark.asyncio
async def test_login_errors_are_undifferentiated(client: AsyncClient, test_data):
    """Invalid Credentials

    Given a registered account
    When I log in with a wrong password, or with an unknown email
    Then both requests fail with 400 and the same body
    And no cookie is set
    """
    ann = test_data.get_copy("ann")
    await client.post("/api/auth/register", json=ann)

    wrong_password = await client.post("/api/auth/login", json={
        "email": ann["email"],
        "password": "WrongPassword!"
    })
    unknown_email = await client.post("/api/auth/login", json={
        "email": "nobody@x.com",
        "password": ann["password"]
    })
    malformed_email = await client.post("/api/auth/login", json={
        "email": "not-an-email",
        "password": ann["password"]
    })

    for response in (wrong_password, unknown_email, malformed_email):
        assert response.status_code == 400
        assert response.json() == wrong_password.json()
        assert refresh_set_cookies(response) == []
    assert wrong_password.json()["error"]["code"] == "INVALID_CREDENTIALS"


@pytest.mark.asyncio
async def test_login_production_sets_secure_cookie(db_session, mailer, test_data):
    from httpx import ASGITransport

    from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
    from src.api.app import create_app
    from src.depends import get_mailer, get_unit_of_work
    from tests.utils.api_helpers import integration_config

    app = create_app(integration_config(ENVIRONMENT="production"))

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_mailer] = lambda: mailer

    ann = test_data.get_copy("ann")
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="https://test") as client:
        await client.post("/api/auth/register", json=ann)
        response = await client.post("/api/auth/login", json={
            "email": ann["email"],
            "password": ann["password"]
        })

    assert response.status_code == 200
    assert "secure" in cookie_attributes(refresh_set_cookies(response)[0])
