"""
Profile Use Case DTOs
"""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel

from src.domain.entities import Gender, User


class UpdateProfileCommand(BaseModel):
    """Fields the owner may change on their own profile; None means unchanged"""

    gender: Optional[Gender] = None
    dob: Optional[date] = None


class ProfileResponse(BaseModel):
    """Own profile - everything except credentials and session state"""

    id: str
    username: str
    email: str
    role: str
    gender: str
    dob: Optional[date] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "ProfileResponse":
        return cls(
            id=str(user.id),
            username=user.username,
            email=user.email,
            role=user.role.value,
            gender=user.gender.value,
            dob=user.dob,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class PublicProfileResponse(BaseModel):
    """Limited view of any account"""

    id: str
    username: str
    email: str
    role: str
    gender: str
    dob: Optional[date] = None
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "PublicProfileResponse":
        return cls(
            id=str(user.id),
            username=user.username,
            email=user.email,
            role=user.role.value,
            gender=user.gender.value,
            dob=user.dob,
            created_at=user.created_at,
        )
