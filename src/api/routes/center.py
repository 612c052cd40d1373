from typing import List, Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from src.api.error import ClientError, ServerError
from src.api.utils.role_auth import authorize_roles
from src.app.services.token_issuer import AccessClaims
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.centers import (
    AddCenterCommand,
    AddCenterResponse,
    AddCenterUseCase,
    CenterResponse,
    GetCenterByCodeUseCase,
    ListCentersUseCase,
)
from src.depends import get_unit_of_work
from src.domain.entities import Role, YesNo

router = APIRouter(prefix="/center", tags=["Centers"])


class AddCenterRequest(BaseModel):
    """Center affiliation form"""

    name: str = Field(..., min_length=1, max_length=255)
    address: str = Field(..., min_length=1)
    center_code: str = Field(..., min_length=1, max_length=64)
    qualification: str = ""
    seating_capacity: str = Field(..., min_length=1, max_length=32)
    strength: str = Field(..., min_length=1, max_length=32)
    no_of_systems: str = Field("", max_length=32)
    no_of_classrooms: str = Field("", max_length=32)
    office: YesNo = YesNo.no
    reception_desk: YesNo = YesNo.no
    toilet: YesNo = YesNo.no
    library: YesNo = YesNo.no
    website: Optional[str] = Field(None, max_length=255)
    contact_no: str = Field(..., min_length=1, max_length=32)


@router.post("/add", status_code=status.HTTP_201_CREATED, response_model=AddCenterResponse)
async def add_center(
    request: AddCenterRequest,
    current_user: AccessClaims = Depends(authorize_roles([Role.admin])),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Submit a center affiliation (admin only).

    Raises:
        - 401 Unauthorized: Missing or invalid access token
        - 403 Forbidden: Caller is not an admin
        - 409 Conflict: Center code already registered
    """
    command = AddCenterCommand(**request.model_dump())

    use_case = AddCenterUseCase(uow)
    result = await use_case.execute(command)

    if result.is_err():
        error = result.error
        if error.code == "CENTER_CODE_EXISTS":
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        raise ServerError(error)

    return result.value


@router.get("", status_code=status.HTTP_200_OK, response_model=List[CenterResponse])
async def list_centers(uow: UnitOfWork = Depends(get_unit_of_work)):
    """List all center affiliations."""
    result = await ListCentersUseCase(uow).execute()

    if result.is_err():
        raise ServerError(result.error)

    return result.value


@router.get("/code/{center_code}", status_code=status.HTTP_200_OK, response_model=CenterResponse)
async def get_center_by_code(
    center_code: str,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Look up a center affiliation by its center code.

    Raises:
        - 404 Not Found: Unknown center code
    """
    result = await GetCenterByCodeUseCase(uow).execute(center_code)

    if result.is_err():
        error = result.error
        if error.code == "CENTER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value
