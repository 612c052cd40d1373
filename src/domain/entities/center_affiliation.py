"""
CenterAffiliation Entity

A training center affiliated with the institute.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from src.domain.base import utc_now
from .enums import YesNo


class CenterAffiliation(SQLModel, table=True):
    """
    CenterAffiliation entity.

    Business Rules:
    - center_code is unique
    - Only admins submit affiliations
    """

    __tablename__ = "center_affiliations"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=255)
    address: str
    center_code: str = Field(unique=True, index=True, max_length=64)
    qualification: str = Field(default="")
    seating_capacity: str = Field(max_length=32)
    strength: str = Field(max_length=32)
    no_of_systems: str = Field(default="", max_length=32)
    no_of_classrooms: str = Field(default="", max_length=32)

    office: YesNo = Field(default=YesNo.no)
    reception_desk: YesNo = Field(default=YesNo.no)
    toilet: YesNo = Field(default=YesNo.no)
    library: YesNo = Field(default=YesNo.no)

    website: Optional[str] = Field(default=None, max_length=255)
    contact_no: str = Field(max_length=32)

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
