"""
Center Affiliation Queries
"""

from typing import List

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import CenterResponse


class ListCentersUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[List[CenterResponse]]:
        async with self.uow:
            centers = await self.uow.centers.list_all()
            return Return.ok([CenterResponse.from_entity(c) for c in centers])


class GetCenterByCodeUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, center_code: str) -> Result[CenterResponse]:
        async with self.uow:
            center = await self.uow.centers.get_by_code(center_code.strip())
            if center is None:
                return Return.err(Error("CENTER_NOT_FOUND", "Center not found"))

            return Return.ok(CenterResponse.from_entity(center))
