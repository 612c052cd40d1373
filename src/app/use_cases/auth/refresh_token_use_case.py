"""
Refresh Token Use Case

Mints a new access token from the refresh token held in the cookie.
"""

import logging
import secrets

from libs.result import Error, Result, Return
from src.app.services.token_issuer import (
    TokenExpiredError,
    TokenInvalidError,
    TokenIssuer,
)
from src.app.services.unit_of_work import UnitOfWork
from .dtos import AccessTokenResponse

logger = logging.getLogger(__name__)


class RefreshTokenUseCase:
    """
    Use case for refreshing the access token.

    Business Rules:
    - Refresh token signature and expiry must verify (TOKEN_EXPIRED / TOKEN_INVALID)
    - The token must equal the account's persisted slot (SESSION_REVOKED otherwise),
      so logged-out and superseded sessions cannot refresh
    - No rotation: the refresh token and its slot are left unchanged
    """

    def __init__(self, uow: UnitOfWork, issuer: TokenIssuer):
        self.uow = uow
        self.issuer = issuer

    async def execute(self, refresh_token: str) -> Result[AccessTokenResponse]:
        """
        Execute refresh token use case.

        Args:
            refresh_token: Refresh token from the jwt cookie

        Returns:
            Result with a new access token, or Error
        """
        try:
            claims = self.issuer.verify_refresh(refresh_token)
        except TokenExpiredError:
            logger.info("Refresh rejected: token expired")
            return Return.err(Error("TOKEN_EXPIRED", "Refresh token has expired"))
        except TokenInvalidError:
            logger.info("Refresh rejected: token invalid")
            return Return.err(Error("TOKEN_INVALID", "Invalid refresh token"))

        async with self.uow:
            user = await self.uow.users.get_by_id(claims.id)

            if user is None or user.refresh_token is None or not secrets.compare_digest(
                user.refresh_token.encode(), refresh_token.encode()
            ):
                logger.info(f"Refresh rejected: session revoked for user {claims.id}")
                return Return.err(
                    Error("SESSION_REVOKED", "Session is no longer active")
                )

            access_token = self.issuer.issue_access(user)

            return Return.ok(AccessTokenResponse(access_token=access_token))
