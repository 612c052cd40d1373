from fastapi import Depends, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from libs.result import Error
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import ClientError
from src.api.utils.cookies import RefreshCookie
from src.app.services.mailer import IMailer
from src.app.services.password_hasher import PasswordHasher
from src.app.services.token_issuer import AccessClaims, TokenError, TokenIssuer

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

# Missing credentials are reported by get_current_user as 401
security = HTTPBearer(auto_error=False)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


# Collaborators built once in create_app and kept on app.state
def get_token_issuer(request: Request) -> TokenIssuer:
    return request.app.state.token_issuer


def get_password_hasher(request: Request) -> PasswordHasher:
    return request.app.state.password_hasher


def get_mailer(request: Request) -> IMailer:
    return request.app.state.mailer


def get_refresh_cookie(request: Request) -> RefreshCookie:
    return request.app.state.refresh_cookie


def get_frontend_url(request: Request) -> str:
    return request.app.state.config.FRONTEND_URL


async def get_current_user(
    request: Request,
    credentials: HTTPAuthorizationCredentials = Depends(security),
    issuer: TokenIssuer = Depends(get_token_issuer),
) -> AccessClaims:
    """
    Dependency to extract and verify the access token from the Authorization header.

    Args:
        credentials: Bearer token from Authorization header

    Returns:
        Decoded access claims (id, username, email, role), also stored on
        request.state.user for downstream handlers

    Raises:
        ClientError: 401 if the token is missing, malformed, expired or forged
    """
    if credentials is None:
        raise ClientError(
            Error("UNAUTHENTICATED", "Not authenticated"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    try:
        claims = issuer.verify_access(credentials.credentials)
    except TokenError:
        raise ClientError(
            Error("UNAUTHENTICATED", "Invalid or expired token"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    request.state.user = claims
    return claims
