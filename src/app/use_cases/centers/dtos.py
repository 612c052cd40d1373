"""
Center Affiliation Use Case DTOs
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from src.domain.entities import CenterAffiliation, YesNo


class AddCenterCommand(BaseModel):
    """Validated center affiliation submission"""

    name: str
    address: str
    center_code: str
    qualification: str = ""
    seating_capacity: str
    strength: str
    no_of_systems: str = ""
    no_of_classrooms: str = ""
    office: YesNo = YesNo.no
    reception_desk: YesNo = YesNo.no
    toilet: YesNo = YesNo.no
    library: YesNo = YesNo.no
    website: Optional[str] = None
    contact_no: str


class CenterResponse(AddCenterCommand):
    id: str
    created_at: datetime

    @classmethod
    def from_entity(cls, center: CenterAffiliation) -> "CenterResponse":
        return cls(
            id=str(center.id),
            name=center.name,
            address=center.address,
            center_code=center.center_code,
            qualification=center.qualification,
            seating_capacity=center.seating_capacity,
            strength=center.strength,
            no_of_systems=center.no_of_systems,
            no_of_classrooms=center.no_of_classrooms,
            office=center.office,
            reception_desk=center.reception_desk,
            toilet=center.toilet,
            library=center.library,
            website=center.website,
            contact_no=center.contact_no,
            created_at=center.created_at,
        )


class AddCenterResponse(BaseModel):
    message: str
    center: CenterResponse
