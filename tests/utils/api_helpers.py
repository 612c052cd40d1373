from httpx import AsyncClient
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from config import Settings
from src.app.services.mailer import IMailer, MailDeliveryError
from src.domain.entities import Role, User

ACCESS_SECRET = "test-access-secret"
REFRESH_SECRET = "test-refresh-secret"


INTEGRATION_SETTINGS = {
    "JWT_SECRET": ACCESS_SECRET,
    "JWT_REFRESH_SECRET": REFRESH_SECRET,
    "ACCESS_TOKEN_EXPIRATION": "15m",
    "REFRESH_TOKEN_EXPIRATION": "7d",
    "PASSWORD_HASH_ROUNDS": 4,
    "ENVIRONMENT": "test",
    "API_PREFIX": "/api",
    "FRONTEND_URL": "http://frontend.test",
    "SMTP_HOST": "",
}


def integration_config(**overrides) -> Settings:
    """Settings for the test app; explicit values win over environment and env.yaml"""
    return Settings(**{**INTEGRATION_SETTINGS, **overrides})


class RecordingMailer(IMailer):
    def __init__(self):
        self.sent = []

    async def send(self, to: str, subject: str, body: str) -> None:
        self.sent.append({"to": to, "subject": subject, "body": body})


class FailingMailer(IMailer):
    async def send(self, to: str, subject: str, body: str) -> None:
        raise MailDeliveryError("SMTP relay unavailable")


async def register_and_login(client: AsyncClient, account: dict) -> tuple[str, str]:
    """Register the account, log in, and return (access_token, refresh_cookie)."""
    response = await client.post("/api/auth/register", json=account)
    assert response.status_code == 201

    return await login(client, account)


async def login(client: AsyncClient, account: dict) -> tuple[str, str]:
    response = await client.post("/api/auth/login", json={
        "email": account["email"],
        "password": account["password"],
    })
    assert response.status_code == 200
    return response.json()["accessToken"], response.cookies["jwt"]


def cookie_header(refresh_token: str) -> dict:
    return {"Cookie": f"jwt={refresh_token}"}


def bearer(access_token: str) -> dict:
    return {"Authorization": f"Bearer {access_token}"}


def refresh_set_cookies(response) -> list:
    """Set-Cookie headers for the refresh cookie"""
    return [h for h in response.headers.get_list("set-cookie") if h.startswith("jwt=")]


def cookie_attributes(set_cookie: str) -> list:
    """Lower-cased attributes of a Set-Cookie header, without the name=value pair"""
    return [part.strip().lower() for part in set_cookie.split(";")[1:]]


async def get_user(db_session: AsyncSession, email: str) -> User:
    result = await db_session.exec(select(User).where(User.email == email))
    user = result.one()
    await db_session.refresh(user)
    return user


async def promote_to_admin(db_session: AsyncSession, email: str) -> None:
    user = await get_user(db_session, email)
    user.role = Role.admin
    db_session.add(user)
    await db_session.commit()
