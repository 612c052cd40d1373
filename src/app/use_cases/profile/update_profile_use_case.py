"""
Update Profile Use Case
"""

import logging
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import ProfileResponse, UpdateProfileCommand

logger = logging.getLogger(__name__)


class UpdateProfileUseCase:
    """
    Use case for updating the caller's own profile.

    Business Rules:
    - Only gender and date of birth are editable here
    - Fields left out of the command keep their value
    - The password hash is never touched by a profile update
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: UUID, command: UpdateProfileCommand
    ) -> Result[ProfileResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            if command.gender is not None:
                user.gender = command.gender
            if command.dob is not None:
                user.dob = command.dob

            user = await self.uow.users.update(user)
            await self.uow.commit()

            logger.info(f"Profile updated for user {user.id}")

            return Return.ok(ProfileResponse.from_user(user))
