from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from src.api.error import raise_for_error
from src.app.services.permission_model import PermissionModel
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import (
    LoginResponse,
    LoginUseCase,
    LogoutResponse,
    LogoutUseCase,
    ValidateSessionResponse,
    ValidateSessionUseCase,
)
from src.app.use_cases.context import ClientContext
from src.app.use_cases.officials import (
    ChangePasswordResponse,
    OfficialDirectory,
    OfficialInfo,
)
from src.depends import get_client_context, get_session_official, get_unit_of_work
from src.domain.entities import Official

router = APIRouter(prefix="/auth", tags=["Authentication"])


class LoginRequest(BaseModel):
    """
    Login HTTP request payload

    identifier is an employee code or an email address.
    """

    identifier: str = Field(..., min_length=1, description="Employee code or email")
    secret: str = Field(..., min_length=1, description="Password")


@router.post("/login", status_code=status.HTTP_200_OK, response_model=LoginResponse)
async def login(
    request: LoginRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    context: ClientContext = Depends(get_client_context),
):
    """
    Official Login

    Verifies credentials and issues an opaque bearer session token.

    Raises:
        - 401 Unauthorized: Invalid credentials, inactive or locked account
        - 500 Internal Server Error: Server error
    """
    use_case = LoginUseCase(uow)
    result = await use_case.execute(request.identifier, request.secret, context)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class TokenRequest(BaseModel):
    token: str = Field(..., description="Session token")


@router.post(
    "/validate", status_code=status.HTTP_200_OK, response_model=ValidateSessionResponse
)
async def validate(request: TokenRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Validate Session

    Always 200; "valid" is false for unknown, expired or revoked tokens and
    for tokens whose owner is inactive or locked.
    """
    use_case = ValidateSessionUseCase(uow)
    return await use_case.execute(request.token)


@router.post("/logout", status_code=status.HTTP_200_OK, response_model=LogoutResponse)
async def logout(
    request: TokenRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    context: ClientContext = Depends(get_client_context),
):
    """
    Official Logout

    Idempotent: logging out an unknown or already revoked token succeeds.
    """
    use_case = LogoutUseCase(uow)
    result = await use_case.execute(request.token, context)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class ChangePasswordRequest(BaseModel):
    current_secret: str = Field(..., description="Current password")
    new_secret: str = Field(..., description="New password")


@router.post(
    "/change-password",
    status_code=status.HTTP_200_OK,
    response_model=ChangePasswordResponse,
)
async def change_password(
    request: ChangePasswordRequest,
    current_official: Official = Depends(get_session_official),
    uow: UnitOfWork = Depends(get_unit_of_work),
    context: ClientContext = Depends(get_client_context),
):
    """
    Change Password

    Rotates the caller's password and revokes all of their sessions,
    including the one used for this request.
    Reachable while a first-login password change is pending.

    Raises:
        - 401 Unauthorized: Invalid session or wrong current password
        - 400 Bad Request: New password too short or unchanged
    """
    directory = OfficialDirectory(uow)
    result = await directory.change_password(
        current_official, request.current_secret, request.new_secret, context
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/me", status_code=status.HTTP_200_OK, response_model=ValidateSessionResponse)
async def me(current_official: Official = Depends(get_session_official)):
    """Current official and resolved capabilities"""
    return ValidateSessionResponse(
        valid=True,
        official=OfficialInfo.from_entity(current_official),
        capabilities=PermissionModel().as_flags(current_official),
    )
