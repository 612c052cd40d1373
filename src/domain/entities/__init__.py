"""
Institute Domain Entities

Each entity in its own file.
"""

from .enums import Gender, Role, YesNo
from .user import User, normalize_email
from .center_affiliation import CenterAffiliation

__all__ = [
    # Enums
    "Gender",
    "Role",
    "YesNo",
    # Entities
    "User",
    "CenterAffiliation",
    # Helpers
    "normalize_email",
]
