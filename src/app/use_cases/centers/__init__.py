"""
Center Affiliation Use Cases
"""

from .add_center_use_case import AddCenterUseCase
from .list_centers_use_case import GetCenterByCodeUseCase, ListCentersUseCase
from .dtos import AddCenterCommand, AddCenterResponse, CenterResponse

__all__ = [
    "AddCenterUseCase",
    "ListCentersUseCase",
    "GetCenterByCodeUseCase",
    "AddCenterCommand",
    "AddCenterResponse",
    "CenterResponse",
]
