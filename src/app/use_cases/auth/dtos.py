"""
Authentication Use Case DTOs (Data Transfer Objects)

All Command and Response classes for the auth domain.
"""

from pydantic import BaseModel, ConfigDict, Field


# ============================================================================
# Command DTOs
# ============================================================================


class RegisterCommand(BaseModel):
    """Register command - validated registration intent"""

    username: str
    email: str
    password: str


# ============================================================================
# Response DTOs
# ============================================================================


class AccountInfo(BaseModel):
    """Account information in authentication responses"""

    id: str
    username: str
    email: str
    role: str


class RegisterResponse(BaseModel):
    """Response for register use case"""

    message: str
    user: AccountInfo


class LoginResult(BaseModel):
    """
    Result of a successful login.

    The refresh token never reaches the JSON body; the API layer moves it
    into the refresh cookie.
    """

    access_token: str
    refresh_token: str


class AccessTokenResponse(BaseModel):
    """Access token body returned by login and refresh"""

    model_config = ConfigDict(populate_by_name=True)

    access_token: str = Field(..., alias="accessToken")


class MessageResponse(BaseModel):
    """Plain message response (forgot/reset password)"""

    message: str
