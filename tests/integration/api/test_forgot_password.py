import pytest
from httpx import AsyncClient

from src.depends import get_mailer
from tests.utils.api_helpers import FailingMailer, get_user


@pytest.mark.asyncio
async def test_forgot_password_is_enumeration_safe(client: AsyncClient, mailer, test_data):
    """Request Password Reset

    Given one registered account
    When a reset is requested for it and for an unknown address
    Then both responses are 200 with the same body
    And only the registered address receives an email
    """
    ann = test_data.get_copy("ann")
    await client.post("/api/auth/register", json=ann)

    known = await client.post("/api/auth/forgotpassword", json={"email": ann["email"]})
    unknown = await client.post("/api/auth/forgotpassword", json={"email": "nobody@x.com"})

    assert known.status_code == 200
    assert unknown.status_code == 200
    assert known.json() == unknown.json()
    assert "message" in known.json()

    assert len(mailer.sent) == 1
    assert mailer.sent[0]["to"] == ann["email"]


@pytest.mark.asyncio
async def test_forgot_password_stores_hash_of_mailed_token(
    client: AsyncClient, db_session, mailer, test_data
):
    ann = test_data.get_copy("ann")
    await client.post("/api/auth/register", json=ann)

    await client.post("/api/auth/forgotpassword", json={"email": ann["email"]})

    body = mailer.sent[0]["body"]
    assert "http://frontend.test/reset-password/" in body
    token = body.split("/reset-password/")[1].split()[0]

    user = await get_user(db_session, ann["email"])
    assert user.reset_password_token is not None
    assert user.reset_password_token != token
    assert token not in user.reset_password_token
    assert user.reset_password_expire is not None


@pytest.mark.asyncio
async def test_delivery_failure_returns_500_and_rolls_back_token(
    client: AsyncClient, app, db_session, test_data
):
    ann = test_data.get_copy("ann")
    await client.post("/api/auth/register", json=ann)
    app.dependency_overrides[get_mailer] = lambda: FailingMailer()

    response = await client.post("/api/auth/forgotpassword", json={"email": ann["email"]})

    assert response.status_code == 500
    assert response.json()["error"]["code"] == "EMAIL_DELIVERY_FAILED"

    user = await get_user(db_session, ann["email"])
    assert user.reset_password_token is None
    assert user.reset_password_expire is None


@pytest.mark.asyncio
async def test_forgot_password_rejects_malformed_email(client: AsyncClient):
    response = await client.post("/api/auth/forgotpassword", json={"email": "nope"})

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"
