"""
Get Audit Logs Use Case

Read path for the audit-log viewer.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional
from uuid import UUID

from pydantic import BaseModel

from src.app.services.audit_logger import AuditLogger
from src.app.services.permission_model import PermissionModel
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Official
from src.domain.result import Result, Return


class AuditLogInfo(BaseModel):
    """Single audit entry in response"""

    id: str
    official_id: Optional[str]
    employee_code: Optional[str]
    full_name: Optional[str]
    action: str
    entity_type: Optional[str]
    entity_id: Optional[str]
    details: Dict[str, Any]
    ip_address: Optional[str]
    user_agent: Optional[str]
    created_at: datetime


class AuditLogsResponse(BaseModel):
    logs: List[AuditLogInfo]


class GetAuditLogsUseCase:
    """
    Use case for listing audit entries.

    Business Rules:
    - Super admins only
    - Newest first, limit defaults to 100
    - Optional filters: acting official, action, entity type
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow
        self.permissions = PermissionModel()
        self.audit = AuditLogger(uow)

    async def execute(
        self,
        requester: Official,
        limit: Optional[int] = None,
        official_id: Optional[UUID] = None,
        action: Optional[str] = None,
        entity_type: Optional[str] = None,
    ) -> Result[AuditLogsResponse]:
        async with self.uow:
            authorized = self.permissions.require_super_admin(requester)
            if authorized.is_err():
                return Return.err(authorized.error)

            rows = await self.audit.query(
                official_id=official_id,
                action=action,
                entity_type=entity_type,
                limit=limit,
            )

            logs = [
                AuditLogInfo(
                    id=str(entry.id),
                    official_id=str(entry.official_id) if entry.official_id else None,
                    employee_code=actor.employee_code if actor else None,
                    full_name=actor.full_name if actor else None,
                    action=entry.action,
                    entity_type=entry.entity_type,
                    entity_id=entry.entity_id,
                    details=entry.details or {},
                    ip_address=entry.ip_address,
                    user_agent=entry.user_agent,
                    created_at=entry.created_at,
                )
                for entry, actor in rows
            ]
            return Return.ok(AuditLogsResponse(logs=logs))
