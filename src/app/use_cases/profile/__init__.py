"""
Profile Use Cases
"""

from .load_profile_use_case import LoadProfileUseCase, LoadPublicProfileUseCase
from .update_profile_use_case import UpdateProfileUseCase
from .dtos import ProfileResponse, PublicProfileResponse, UpdateProfileCommand

__all__ = [
    "LoadProfileUseCase",
    "LoadPublicProfileUseCase",
    "UpdateProfileUseCase",
    "UpdateProfileCommand",
    "ProfileResponse",
    "PublicProfileResponse",
]
