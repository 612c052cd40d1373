"""
Institute Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class Role(str, Enum):
    """Account role used by route authorization"""

    user = "user"
    admin = "admin"


class Gender(str, Enum):
    """Self-declared gender on the account profile"""

    male = "Male"
    female = "Female"
    other = "Other"
    undisclosed = "Prefer not to say"


class YesNo(str, Enum):
    """Facility flag on a center affiliation"""

    yes = "yes"
    no = "no"
