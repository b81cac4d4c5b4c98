"""
Audit API Routes

Audit-log viewer endpoint.
"""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from config import ApplicationConfig
from src.api.error import raise_for_error
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.audit import AuditLogsResponse, GetAuditLogsUseCase
from src.depends import get_current_official, get_unit_of_work
from src.domain.entities import Official

router = APIRouter(tags=["Audit"])


@router.get("/audit-logs", status_code=status.HTTP_200_OK, response_model=AuditLogsResponse)
async def get_audit_logs(
    current_official: Official = Depends(get_current_official),
    uow: UnitOfWork = Depends(get_unit_of_work),
    limit: int = Query(
        ApplicationConfig.AUDIT_LOG_DEFAULT_LIMIT,
        ge=1,
        le=ApplicationConfig.AUDIT_LOG_MAX_LIMIT,
        description="Maximum number of entries to return",
    ),
    official_id: Optional[UUID] = Query(None, description="Filter by acting official"),
    action: Optional[str] = Query(None, description="Filter by action kind"),
    entity_type: Optional[str] = Query(None, description="Filter by entity type"),
):
    """
    Get Audit Logs

    Newest first. Super admins only.

    Raises:
        - 401 Unauthorized: Invalid session
        - 403 Forbidden: Not a super admin
    """
    use_case = GetAuditLogsUseCase(uow)
    result = await use_case.execute(
        current_official,
        limit=limit,
        official_id=official_id,
        action=action,
        entity_type=entity_type,
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value
