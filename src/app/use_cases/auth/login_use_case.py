"""
Login Use Case

Verifies credentials and opens the account's single session.
"""

import logging

from libs.result import Error, Result, Return
from src.app.services.password_hasher import PasswordHasher
from src.app.services.token_issuer import TokenIssuer
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import normalize_email
from .dtos import LoginResult

logger = logging.getLogger(__name__)


class LoginUseCase:
    """
    Use case for user login and token issuance.

    Business Rules:
    - Unknown email and wrong password return the same INVALID_CREDENTIALS error
    - A dummy hash check runs for unknown emails to keep timing uniform
    - On success an access/refresh pair is issued
    - The refresh token replaces whatever was in the account's slot, which
      invalidates any earlier session of the same account
    """

    def __init__(self, uow: UnitOfWork, hasher: PasswordHasher, issuer: TokenIssuer):
        self.uow = uow
        self.hasher = hasher
        self.issuer = issuer

    async def execute(self, email: str, password: str) -> Result[LoginResult]:
        """
        Execute login use case.

        Args:
            email: User email
            password: Plain text password

        Returns:
            Result with LoginResult containing both tokens, or Error
        """
        async with self.uow:
            user = await self.uow.users.get_by_email(normalize_email(email))

            if user is None:
                self.hasher.dummy_verify(password)
                logger.info("Login rejected: invalid credentials")
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Invalid Credentials")
                )

            if not self.hasher.verify(password, user.password_hash):
                logger.info("Login rejected: invalid credentials")
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Invalid Credentials")
                )

            access_token = self.issuer.issue_access(user)
            refresh_token = self.issuer.issue_refresh(user)

            # Single slot: last write wins
            user.refresh_token = refresh_token
            await self.uow.users.update(user)

            await self.uow.commit()

            logger.info(f"User {user.id} logged in")

            return Return.ok(
                LoginResult(access_token=access_token, refresh_token=refresh_token)
            )
