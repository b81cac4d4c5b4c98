from fastapi import Depends, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import ClientError
from src.app.services.permission_model import PermissionModel
from src.app.use_cases.auth import ValidateSessionUseCase
from src.app.use_cases.context import ClientContext
from src.domain.entities import Official
from src.domain.result import Error

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer(auto_error=False)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


async def get_session_official(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    uow=Depends(get_unit_of_work),
) -> Official:
    """
    Dependency to resolve the bearer token in the Authorization header.

    Args:
        credentials: Bearer token from Authorization header
        uow: Request-scoped unit of work (shared with the route)

    Returns:
        The Official owning a valid session

    Raises:
        ClientError: 401 if the token is missing, unknown, expired,
        or its owner is inactive or locked
    """
    if credentials is None or not credentials.credentials:
        raise ClientError(
            Error("INVALID_SESSION", "Bearer token required"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    result = await ValidateSessionUseCase(uow).authenticate(credentials.credentials)
    if result.is_err():
        raise ClientError(result.error, status_code=status.HTTP_401_UNAUTHORIZED)

    return result.value


async def get_current_official(
    official: Official = Depends(get_session_official),
) -> Official:
    """
    Session owner that has completed any pending first-login password change.

    Raises:
        ClientError: 403 PASSWORD_CHANGE_REQUIRED while must_change_password is set
    """
    rotated = PermissionModel().require_rotated_secret(official)
    if rotated.is_err():
        raise ClientError(rotated.error, status_code=status.HTTP_403_FORBIDDEN)

    return official


def get_client_context(request: Request) -> ClientContext:
    return ClientContext(
        ip_address=request.client.host if request.client else None,
        user_agent=request.headers.get("user-agent"),
    )
