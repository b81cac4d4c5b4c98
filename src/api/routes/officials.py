"""
Officials API Routes

Officials-management console endpoints. All require a bearer token.
"""

from typing import Dict, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, EmailStr, Field

from src.api.error import raise_for_error
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.context import ClientContext
from src.app.use_cases.officials import (
    CreateOfficialCommand,
    CreateOfficialResponse,
    OfficialDirectory,
    OfficialInfo,
    OfficialListResponse,
    UpdateOfficialCommand,
)
from src.depends import get_client_context, get_current_official, get_unit_of_work
from src.domain.entities import Capability, Official

router = APIRouter(prefix="/officials", tags=["Officials"])


class CreateOfficialRequest(BaseModel):
    """
    Create official HTTP request payload

    Omit secret to have a one-time password generated and returned once.
    """

    employee_code: str = Field(..., min_length=1, max_length=50)
    full_name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    rank_code: str = Field(..., min_length=1, max_length=20)
    phone: Optional[str] = Field(None, max_length=50)
    department: Optional[str] = Field(None, max_length=255)
    region: Optional[str] = Field(None, max_length=100)
    office_location: Optional[str] = Field(None, max_length=255)
    secret: Optional[str] = Field(None, description="Initial password")
    supervisor_id: Optional[str] = None
    is_super_admin: bool = False
    is_active: bool = True
    grants: Dict[Capability, bool] = Field(default_factory=dict)


class UpdateOfficialRequest(BaseModel):
    """
    Update official HTTP request payload

    Partial update: only fields present in the body are changed.
    employee_code is immutable.
    """

    full_name: Optional[str] = Field(None, min_length=1, max_length=255)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, max_length=50)
    department: Optional[str] = Field(None, max_length=255)
    rank_code: Optional[str] = Field(None, min_length=1, max_length=20)
    region: Optional[str] = Field(None, max_length=100)
    office_location: Optional[str] = Field(None, max_length=255)
    supervisor_id: Optional[str] = None
    is_super_admin: Optional[bool] = None
    is_active: Optional[bool] = None
    account_locked: Optional[bool] = None
    grants: Optional[Dict[Capability, bool]] = None


@router.get("", status_code=status.HTTP_200_OK, response_model=OfficialListResponse)
async def list_officials(
    current_official: Official = Depends(get_current_official),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    List Officials

    Raises:
        - 401 Unauthorized: Invalid session
        - 403 Forbidden: Missing manage_officials capability
    """
    directory = OfficialDirectory(uow)
    result = await directory.list(current_official)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "", status_code=status.HTTP_201_CREATED, response_model=CreateOfficialResponse
)
async def create_official(
    request: CreateOfficialRequest,
    current_official: Official = Depends(get_current_official),
    uow: UnitOfWork = Depends(get_unit_of_work),
    context: ClientContext = Depends(get_client_context),
):
    """
    Create Official

    Raises:
        - 400 Bad Request: Invalid fields, unknown rank or supervisor
        - 401 Unauthorized: Invalid session
        - 403 Forbidden: Missing manage_officials (or super admin for is_super_admin)
        - 409 Conflict: Employee code or email already exists
    """
    command = CreateOfficialCommand(**request.model_dump())

    directory = OfficialDirectory(uow)
    result = await directory.create(current_official, command, context)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/{official_id}", status_code=status.HTTP_200_OK, response_model=OfficialInfo)
async def get_official(
    official_id: UUID,
    current_official: Official = Depends(get_current_official),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Get one official; officials may always read their own record"""
    directory = OfficialDirectory(uow)
    result = await directory.get(current_official, official_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.put("/{official_id}", status_code=status.HTTP_200_OK, response_model=OfficialInfo)
async def update_official(
    official_id: UUID,
    request: UpdateOfficialRequest,
    current_official: Official = Depends(get_current_official),
    uow: UnitOfWork = Depends(get_unit_of_work),
    context: ClientContext = Depends(get_client_context),
):
    """
    Update Official

    Raises:
        - 400 Bad Request: Invalid fields
        - 401 Unauthorized: Invalid session
        - 403 Forbidden: Missing manage_officials (or super admin for is_super_admin)
        - 404 Not Found: No such official
        - 409 Conflict: Email already exists
    """
    command = UpdateOfficialCommand(**request.model_dump(exclude_unset=True))

    directory = OfficialDirectory(uow)
    result = await directory.update(current_official, official_id, command, context)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
