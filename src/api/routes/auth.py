import logging
from typing import Annotated, Optional

from fastapi import APIRouter, Cookie, Depends, Response, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, EmailStr, Field, StringConstraints

from libs.result import Error
from src.api.error import ClientError, ServerError, error_content
from src.api.utils.cookies import REFRESH_COOKIE_NAME, RefreshCookie
from src.app.services.mailer import IMailer
from src.app.services.password_hasher import PasswordHasher
from src.app.services.token_issuer import TokenIssuer
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import (
    AccessTokenResponse,
    ForgotPasswordUseCase,
    LoginUseCase,
    LogoutUseCase,
    MessageResponse,
    RefreshTokenUseCase,
    RegisterCommand,
    RegisterResponse,
    RegisterUseCase,
    ResetPasswordUseCase,
)
from src.depends import (
    get_frontend_url,
    get_mailer,
    get_password_hasher,
    get_refresh_cookie,
    get_token_issuer,
    get_unit_of_work,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Authentication"])


class RegisterRequest(BaseModel):
    """
    Register HTTP request payload

    Validates incoming HTTP request before converting to RegisterCommand.
    """

    username: Annotated[
        str, StringConstraints(strip_whitespace=True, min_length=3, max_length=255)
    ] = Field(..., description="Display name (min 3 chars)")
    email: EmailStr = Field(..., description="User email address")
    # bcrypt ignores input beyond 72 bytes
    password: str = Field(
        ..., min_length=6, max_length=72, description="User password (min 6 chars)"
    )


@router.post(
    "/register", status_code=status.HTTP_201_CREATED, response_model=RegisterResponse
)
async def register(
    request: RegisterRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: PasswordHasher = Depends(get_password_hasher),
):
    """
    Register a new account with role "user". Does not log in.

    Raises:
        - 400 Bad Request: Email already registered, or invalid input
        - 500 Internal Server Error: Server error
    """
    command = RegisterCommand(
        username=request.username, email=request.email, password=request.password
    )

    use_case = RegisterUseCase(uow, hasher)
    result = await use_case.execute(command)

    if result.is_err():
        error = result.error
        if error.code == "EMAIL_ALREADY_EXISTS":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return result.value


class LoginRequest(BaseModel):
    """
    Login HTTP request payload

    Email is not format-checked so a malformed address fails exactly like
    an unknown one.
    """

    email: str = Field(..., min_length=1, description="User email address")
    password: str = Field(..., min_length=1, description="User password")


@router.post("/login", status_code=status.HTTP_200_OK, response_model=AccessTokenResponse)
async def login(
    request: LoginRequest,
    response: Response,
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: PasswordHasher = Depends(get_password_hasher),
    issuer: TokenIssuer = Depends(get_token_issuer),
    refresh_cookie: RefreshCookie = Depends(get_refresh_cookie),
):
    """
    User Login

    Returns the access token in the body and sets the refresh token as the
    HTTP-only "jwt" cookie.

    Raises:
        - 400 Bad Request: Invalid credentials (unknown email or wrong password)
        - 500 Internal Server Error: Server error
    """
    use_case = LoginUseCase(uow, hasher, issuer)
    result = await use_case.execute(request.email, request.password)

    if result.is_err():
        error = result.error
        if error.code == "INVALID_CREDENTIALS":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    refresh_cookie.set(response, result.value.refresh_token)
    return AccessTokenResponse(access_token=result.value.access_token)


@router.get("/refresh", status_code=status.HTTP_200_OK, response_model=AccessTokenResponse)
async def refresh(
    refresh_token: Optional[str] = Cookie(default=None, alias=REFRESH_COOKIE_NAME),
    uow: UnitOfWork = Depends(get_unit_of_work),
    issuer: TokenIssuer = Depends(get_token_issuer),
    refresh_cookie: RefreshCookie = Depends(get_refresh_cookie),
):
    """
    Refresh Access Token

    Issues a new access token for the session held in the "jwt" cookie.
    The refresh token itself is not rotated.

    Raises:
        - 401 Unauthorized: No refresh cookie
        - 403 Forbidden: Expired or invalid refresh token (cookie is cleared),
          or session revoked/superseded
        - 500 Internal Server Error: Server error
    """
    if not refresh_token:
        raise ClientError(
            Error("UNAUTHENTICATED", "No refresh token"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    use_case = RefreshTokenUseCase(uow, issuer)
    result = await use_case.execute(refresh_token)

    if result.is_err():
        error = result.error
        if error.code in ("TOKEN_EXPIRED", "TOKEN_INVALID"):
            logger.warning(f"Client error: {error.code}, clearing refresh cookie")
            rejection = JSONResponse(
                status_code=status.HTTP_403_FORBIDDEN,
                content=error_content(error),
            )
            refresh_cookie.clear(rejection)
            return rejection
        if error.code == "SESSION_REVOKED":
            raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
        raise ServerError(error)

    return result.value


@router.post(
    "/logout", status_code=status.HTTP_204_NO_CONTENT, response_class=Response
)
async def logout(
    refresh_token: Optional[str] = Cookie(default=None, alias=REFRESH_COOKIE_NAME),
    uow: UnitOfWork = Depends(get_unit_of_work),
    refresh_cookie: RefreshCookie = Depends(get_refresh_cookie),
):
    """
    Logout

    Clears the session slot owning the cookie's refresh token (if any) and
    the cookie itself. Idempotent: always 204.
    """
    use_case = LogoutUseCase(uow)
    result = await use_case.execute(refresh_token)

    if result.is_err():
        raise ServerError(result.error)

    response = Response(status_code=status.HTTP_204_NO_CONTENT)
    refresh_cookie.clear(response)
    return response


class ForgotPasswordRequest(BaseModel):
    email: EmailStr = Field(..., description="User email address")


@router.post("/forgotpassword", status_code=status.HTTP_200_OK, response_model=MessageResponse)
async def forgot_password(
    request: ForgotPasswordRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    mailer: IMailer = Depends(get_mailer),
    frontend_url: str = Depends(get_frontend_url),
):
    """
    Request Password Reset

    Mails a reset link valid for one hour.

    Security:
        - No email enumeration (same response for known and unknown emails)
        - Only the SHA-256 of the token is stored

    Returns:
        - 200 OK: Generic message
        - 500 Internal Server Error: The email could not be delivered
    """
    use_case = ForgotPasswordUseCase(uow, mailer, frontend_url)
    result = await use_case.execute(request.email)

    if result.is_err():
        error = result.error
        if error.code == "EMAIL_DELIVERY_FAILED":
            raise ServerError(error, expose_message=True)
        raise ServerError(error)

    return result.value


class ResetPasswordRequest(BaseModel):
    password: str = Field(
        ..., min_length=6, max_length=72, description="New password (min 6 chars)"
    )


@router.put(
    "/resetpassword/{token}", status_code=status.HTTP_200_OK, response_model=MessageResponse
)
async def reset_password(
    token: str,
    request: ResetPasswordRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: PasswordHasher = Depends(get_password_hasher),
):
    """
    Complete Password Reset

    Consumes the token from the emailed link and sets the new password.
    Ends the current session of the account.

    Raises:
        - 400 Bad Request: Unknown or expired token, or invalid password
        - 500 Internal Server Error: Server error
    """
    use_case = ResetPasswordUseCase(uow, hasher)
    result = await use_case.execute(token, request.password)

    if result.is_err():
        error = result.error
        if error.code == "INVALID_OR_EXPIRED_TOKEN":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return result.value
