"""
Register Use Case

Creates a new account with the default "user" role.
"""

import logging

from libs.result import Error, Result, Return
from src.app.repositories.user_repository import DuplicateEmailError
from src.app.services.password_hasher import PasswordHasher
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Role, User, normalize_email
from .dtos import AccountInfo, RegisterCommand, RegisterResponse

logger = logging.getLogger(__name__)


class RegisterUseCase:
    """
    Use case for account registration.

    Business Rules:
    - Email must not already be registered (compared normalized), also when
      two registrations for the same email race
    - Password is hashed before the account is stored
    - Role defaults to "user"
    - Registration does not log the user in (no tokens issued)
    """

    def __init__(self, uow: UnitOfWork, hasher: PasswordHasher):
        self.uow = uow
        self.hasher = hasher

    async def execute(self, command: RegisterCommand) -> Result[RegisterResponse]:
        """
        Execute register use case

        Args:
            command: RegisterCommand with username, email and password

        Returns:
            Result[RegisterResponse], or Error(EMAIL_ALREADY_EXISTS)
        """
        email = normalize_email(command.email)

        duplicate = Return.err(Error("EMAIL_ALREADY_EXISTS", "User already exists"))

        async with self.uow:
            existing_user = await self.uow.users.get_by_email(email)
            if existing_user:
                return duplicate

            user = User(
                username=command.username.strip(),
                email=email,
                password_hash=self.hasher.hash(command.password),
                role=Role.user,
            )
            try:
                user = await self.uow.users.create(user)
            except DuplicateEmailError:
                logger.info("Registration lost a race for an existing email")
                return duplicate

            await self.uow.commit()

            logger.info(f"Registered user {user.id}")

            return Return.ok(
                RegisterResponse(
                    message="User registered successfully",
                    user=AccountInfo(
                        id=str(user.id),
                        username=user.username,
                        email=user.email,
                        role=user.role.value,
                    ),
                )
            )
