"""
Logout Use Case

Closes the session owning the presented refresh token.
"""

import logging
from typing import Optional

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class LogoutUseCase:
    """
    Use case for logout.

    Business Rules:
    - Idempotent: always succeeds, with or without a token
    - The account is found by slot value (the caller has no access token here)
    - A matching account gets its refresh slot cleared
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, refresh_token: Optional[str]) -> Result[None]:
        if not refresh_token:
            return Return.ok(None)

        async with self.uow:
            user = await self.uow.users.get_by_refresh_token(refresh_token)

            if user is not None:
                user.refresh_token = None
                await self.uow.users.update(user)
                await self.uow.commit()
                logger.info(f"User {user.id} logged out")

        return Return.ok(None)
