from abc import ABC, abstractmethod
from typing import List, Optional

from src.domain.entities import CenterAffiliation


class ICenterRepository(ABC):
    """CenterAffiliation repository interface - application layer"""

    @abstractmethod
    async def create(self, center: CenterAffiliation) -> CenterAffiliation:
        """Create a new center affiliation"""
        pass

    @abstractmethod
    async def get_by_code(self, center_code: str) -> Optional[CenterAffiliation]:
        """Get center affiliation by its unique center code"""
        pass

    @abstractmethod
    async def list_all(self) -> List[CenterAffiliation]:
        """List every center affiliation, oldest first"""
        pass
