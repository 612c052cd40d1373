from datetime import date
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field, field_validator

from src.api.error import ClientError, ServerError
from src.api.utils.role_auth import authorize_roles
from src.app.services.token_issuer import AccessClaims
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.profile import (
    LoadProfileUseCase,
    LoadPublicProfileUseCase,
    ProfileResponse,
    PublicProfileResponse,
    UpdateProfileCommand,
    UpdateProfileUseCase,
)
from src.depends import get_unit_of_work
from src.domain.base import utc_today
from src.domain.entities import Gender, Role

router = APIRouter(prefix="/profile", tags=["Profile"])

signed_in = authorize_roles([Role.user, Role.admin])


@router.get("", status_code=status.HTTP_200_OK, response_model=ProfileResponse)
async def get_profile(
    current_user: AccessClaims = Depends(signed_in),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Get the caller's own profile (scoped to the id in the access token).

    Raises:
        - 401 Unauthorized: Missing or invalid access token
        - 404 Not Found: Account no longer exists
    """
    use_case = LoadProfileUseCase(uow)
    result = await use_case.execute(current_user.id)

    if result.is_err():
        error = result.error
        if error.code == "USER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


class UpdateProfileRequest(BaseModel):
    gender: Optional[Gender] = Field(None, description="Male, Female, Other or Prefer not to say")
    dob: Optional[date] = Field(None, description="Date of birth (YYYY-MM-DD)")

    @field_validator("dob")
    @classmethod
    def dob_not_in_future(cls, value: Optional[date]) -> Optional[date]:
        if value is not None and value > utc_today():
            raise ValueError("Date of birth cannot be in the future")
        return value


@router.put("", status_code=status.HTTP_200_OK, response_model=ProfileResponse)
async def update_profile(
    request: UpdateProfileRequest,
    current_user: AccessClaims = Depends(signed_in),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update gender and/or date of birth on the caller's own profile.

    Raises:
        - 400 Bad Request: Validation error
        - 401 Unauthorized: Missing or invalid access token
        - 404 Not Found: Account no longer exists
    """
    command = UpdateProfileCommand(gender=request.gender, dob=request.dob)

    use_case = UpdateProfileUseCase(uow)
    result = await use_case.execute(current_user.id, command)

    if result.is_err():
        error = result.error
        if error.code == "USER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


@router.get("/{user_id}", status_code=status.HTTP_200_OK, response_model=PublicProfileResponse)
async def get_public_profile(
    user_id: UUID,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Public, limited profile of any account.

    Raises:
        - 400 Bad Request: Malformed id
        - 404 Not Found: No such account
    """
    use_case = LoadPublicProfileUseCase(uow)
    result = await use_case.execute(user_id)

    if result.is_err():
        error = result.error
        if error.code == "USER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value
