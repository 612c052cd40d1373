from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from sqlmodel import SQLModel

from src.adapter.services.mailer import LoggingMailer, SmtpMailer
from src.api.utils.cookies import RefreshCookie
from src.app.services.password_hasher import PasswordHasher
from src.app.services.token_issuer import TokenIssuer, TokenSettings
from .error import ClientError, ServerError, error_content
import logging

logger = logging.getLogger(__name__)


async def handle_client_error(request: Request, exc: ClientError):
    content = error_content(exc.base_error)
    logger.warning(f"Client error: {content['error']}")
    return JSONResponse(status_code=exc.status_code, content=content)


async def handle_server_error(request: Request, exc: ServerError):
    message = exc.base_error.message if exc.expose_message else "Internal server error"
    logger.error(f"Server error: {exc.base_error.code}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_content(exc.base_error, message),
    )


async def handle_validation_error(request: Request, exc: RequestValidationError):
    details = [
        f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg')}"
        for err in exc.errors()
    ]
    error_dict = {
        "code": "VALIDATION_ERROR",
        "message": "Validation error",
        "details": details,
    }
    logger.warning(f"Validation error on {request.url.path}: {details}")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": error_dict})


async def handle_unexpected_error(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": {"code": "INTERNAL_ERROR", "message": "Internal server error"}},
    )


def build_mailer(ApplicationConfig):
    if not ApplicationConfig.SMTP_HOST:
        logger.warning("SMTP_HOST not configured, emails will only be logged")
        return LoggingMailer()
    return SmtpMailer(
        host=ApplicationConfig.SMTP_HOST,
        port=ApplicationConfig.SMTP_PORT,
        username=ApplicationConfig.SMTP_USERNAME,
        password=ApplicationConfig.SMTP_PASSWORD,
        from_email=ApplicationConfig.MAIL_FROM,
        use_tls=ApplicationConfig.SMTP_USE_TLS,
    )


def create_app(ApplicationConfig) -> FastAPI:
    """
    Build the application.

    Raises:
        ConfigurationError: token secrets or refresh TTL missing/invalid
    """
    token_settings = TokenSettings.from_config(ApplicationConfig)
    token_issuer = TokenIssuer(token_settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        from src.depends import engine

        if ApplicationConfig.DB_CREATE_TABLES:
            async with engine.begin() as conn:
                await conn.run_sync(SQLModel.metadata.create_all)
            logger.info("Database tables ensured")
        yield
        await engine.dispose()

    app = FastAPI(title="Institute API", version="0.1.0", lifespan=lifespan)

    app.state.config = ApplicationConfig
    app.state.token_issuer = token_issuer
    app.state.password_hasher = PasswordHasher(rounds=ApplicationConfig.PASSWORD_HASH_ROUNDS)
    app.state.mailer = build_mailer(ApplicationConfig)
    app.state.refresh_cookie = RefreshCookie(
        secure=ApplicationConfig.ENVIRONMENT == "production",
        max_age=token_issuer.refresh_max_age,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from src.api.routes import auth, center, health_check, profile

    prefix = ApplicationConfig.API_PREFIX
    app.include_router(health_check.router, tags=["Health"])
    app.include_router(auth.router, prefix=prefix, tags=["Authentication"])
    app.include_router(profile.router, prefix=prefix, tags=["Profile"])
    app.include_router(center.router, prefix=prefix, tags=["Centers"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)

    return app
