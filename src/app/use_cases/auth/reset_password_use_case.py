"""
Reset Password Use Case

Consumes a password reset token and sets a new password.
"""

import logging

from libs.result import Error, Result, Return
from src.app.services.password_hasher import PasswordHasher
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now
from .dtos import MessageResponse
from .forgot_password_use_case import hash_reset_token

logger = logging.getLogger(__name__)


class ResetPasswordUseCase:
    """
    Use case for completing a password reset.

    Business Rules:
    - Presented token is hashed with SHA-256 and looked up by hash
    - Token must not be expired
    - Unknown and expired tokens return the same INVALID_OR_EXPIRED_TOKEN error
    - New password is hashed; reset fields are cleared (single use)
    - The refresh slot is cleared, ending the live session
    """

    def __init__(self, uow: UnitOfWork, hasher: PasswordHasher):
        self.uow = uow
        self.hasher = hasher

    async def execute(self, token: str, new_password: str) -> Result[MessageResponse]:
        """
        Execute reset password use case.

        Args:
            token: Plain reset token from the emailed link
            new_password: New password to set

        Returns:
            Result with confirmation message, or Error(INVALID_OR_EXPIRED_TOKEN)
        """
        async with self.uow:
            user = await self.uow.users.get_by_reset_token_hash(hash_reset_token(token))

            if (
                user is None
                or user.reset_password_expire is None
                or user.reset_password_expire <= utc_now()
            ):
                return Return.err(
                    Error(
                        "INVALID_OR_EXPIRED_TOKEN",
                        "Invalid or expired password reset token",
                    )
                )

            user.password_hash = self.hasher.hash(new_password)
            user.reset_password_token = None
            user.reset_password_expire = None
            user.refresh_token = None
            await self.uow.users.update(user)

            await self.uow.commit()

            logger.info(f"Password reset completed for user {user.id}")

            return Return.ok(
                MessageResponse(message="Password has been reset successfully")
            )
