from typing import List, Optional

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.center_repository import ICenterRepository
from src.domain.entities import CenterAffiliation


class CenterRepository(ICenterRepository):
    """CenterAffiliation repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, center: CenterAffiliation) -> CenterAffiliation:
        """Create a new center affiliation"""
        self.session.add(center)
        await self.session.flush()
        await self.session.refresh(center)
        return center

    async def get_by_code(self, center_code: str) -> Optional[CenterAffiliation]:
        """Get center affiliation by center code"""
        stmt = select(CenterAffiliation).where(
            CenterAffiliation.center_code == center_code
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_all(self) -> List[CenterAffiliation]:
        """List all center affiliations"""
        stmt = select(CenterAffiliation).order_by(CenterAffiliation.created_at)
        result = await self.session.exec(stmt)
        return list(result.all())
