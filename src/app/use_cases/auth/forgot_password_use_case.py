"""
Forgot Password Use Case

Generates a password reset token and mails the reset link.
"""

import hashlib
import logging
import secrets
from datetime import timedelta

from libs.result import Error, Result, Return
from src.app.services.mailer import IMailer, MailDeliveryError
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now
from src.domain.entities import normalize_email
from .dtos import MessageResponse

logger = logging.getLogger(__name__)

RESET_TOKEN_TTL = timedelta(hours=1)
GENERIC_MESSAGE = (
    "If an account with that email exists, a password reset link has been sent."
)


def hash_reset_token(token: str) -> str:
    """SHA-256 hex digest under which a reset token is stored and looked up"""
    return hashlib.sha256(token.encode()).hexdigest()


class ForgotPasswordUseCase:
    """
    Use case for requesting a password reset.

    Business Rules:
    - No email enumeration: the same message whether or not the account exists
    - Token is 20 random bytes (hex); only its SHA-256 hash is stored
    - Token expires in 1 hour; a new request overwrites the previous token
    - If the mail cannot be delivered the token is removed again and
      EMAIL_DELIVERY_FAILED is returned
    """

    def __init__(self, uow: UnitOfWork, mailer: IMailer, frontend_url: str):
        self.uow = uow
        self.mailer = mailer
        self.frontend_url = frontend_url.rstrip("/")

    async def execute(self, email: str) -> Result[MessageResponse]:
        """
        Execute forgot password use case.

        Args:
            email: Address the reset was requested for

        Returns:
            Result with the generic message, or Error(EMAIL_DELIVERY_FAILED)
        """
        async with self.uow:
            user = await self.uow.users.get_by_email(normalize_email(email))

            if user is None:
                return Return.ok(MessageResponse(message=GENERIC_MESSAGE))

            reset_token = secrets.token_hex(20)

            user.reset_password_token = hash_reset_token(reset_token)
            user.reset_password_expire = utc_now() + RESET_TOKEN_TTL
            await self.uow.users.update(user)
            await self.uow.commit()

            reset_url = f"{self.frontend_url}/reset-password/{reset_token}"
            message = (
                "You are receiving this email because you (or someone else) has "
                "requested the reset of a password. Please open the following link "
                f"to choose a new password:\n\n{reset_url}\n\n"
                "The link expires in one hour."
            )

            try:
                await self.mailer.send(
                    to=user.email, subject="Password Reset Token", body=message
                )
            except MailDeliveryError:
                logger.error(f"Password reset email could not be sent for user {user.id}")
                # Do not leave a valid token nobody received
                user.reset_password_token = None
                user.reset_password_expire = None
                await self.uow.users.update(user)
                await self.uow.commit()
                return Return.err(
                    Error(
                        "EMAIL_DELIVERY_FAILED",
                        "Email could not be sent. Please try again later.",
                    )
                )

            logger.info(f"Password reset requested for user {user.id}")

            return Return.ok(MessageResponse(message=GENERIC_MESSAGE))
