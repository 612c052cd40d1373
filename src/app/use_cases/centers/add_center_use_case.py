"""
Add Center Affiliation Use Case
"""

import logging

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import CenterAffiliation
from .dtos import AddCenterCommand, AddCenterResponse, CenterResponse

logger = logging.getLogger(__name__)


class AddCenterUseCase:
    """
    Use case for submitting a center affiliation.

    Business Rules:
    - center_code must be unique (trimmed before comparison)
    - Authorization (admin only) is enforced by the route
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: AddCenterCommand) -> Result[AddCenterResponse]:
        center_code = command.center_code.strip()

        async with self.uow:
            existing = await self.uow.centers.get_by_code(center_code)
            if existing is not None:
                return Return.err(
                    Error(
                        "CENTER_CODE_EXISTS",
                        "Center with this center code already exists",
                    )
                )

            center = CenterAffiliation(
                **command.model_dump(exclude={"center_code"}),
                center_code=center_code,
            )
            center = await self.uow.centers.create(center)
            await self.uow.commit()

            logger.info(f"Center affiliation {center.center_code} submitted")

            return Return.ok(
                AddCenterResponse(
                    message="Center affiliation submitted successfully",
                    center=CenterResponse.from_entity(center),
                )
            )
