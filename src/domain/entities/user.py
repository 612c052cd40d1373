"""
User Entity

Represents one account able to sign in.
"""

from datetime import date, datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel, Text

from src.domain.base import utc_now
from .enums import Gender, Role


def normalize_email(email: str) -> str:
    """Emails are compared and stored trimmed and lower-cased."""
    return email.strip().lower()


class User(SQLModel, table=True):
    """
    User entity - one principal of the institute application.

    Business Rules:
    - Email is unique, stored trimmed and lower-cased
    - Password stored as bcrypt hash, only re-hashed when the password changes
    - refresh_token is a single slot: at most one live session per account
    - reset_password_token holds the SHA-256 of the mailed token, never the token
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    username: str = Field(max_length=255)
    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars

    role: Role = Field(default=Role.user)

    # Profile
    gender: Gender = Field(default=Gender.undisclosed)
    dob: Optional[date] = None

    # Session slot (issuing a new refresh token replaces the previous one)
    refresh_token: Optional[str] = Field(default=None, sa_column=Column(Text))

    # Password reset
    reset_password_token: Optional[str] = Field(default=None, index=True, max_length=64)
    reset_password_expire: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime)
    )

    # Timestamps
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_user_role", "role"),)
