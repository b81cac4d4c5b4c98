"""
Audit Logger

Append-only audit trail of logins, logouts, credential changes and
administrative mutations.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple, Union
from uuid import UUID

from config import ApplicationConfig
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AuditAction, AuditLogEntry, Official

logger = logging.getLogger(__name__)


class AuditLogger:
    """
    Business Rules:
    - Entries are immutable; there is no update or delete path
    - record() runs after the primary action committed and commits on its own
    - A failed write is logged and rolled back, never raised to the caller
    - query() returns newest first, limit clamped to AUDIT_LOG_MAX_LIMIT
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def record(
        self,
        official_id: Optional[UUID],
        action: Union[AuditAction, str],
        entity_type: Optional[str] = None,
        entity_id: Optional[Any] = None,
        details: Optional[Dict[str, Any]] = None,
        ip_address: Optional[str] = None,
        user_agent: Optional[str] = None,
    ) -> Optional[AuditLogEntry]:
        """
        Append one entry and commit it.

        Returns:
            The stored entry, or None if the write failed
        """
        action_value = action.value if isinstance(action, AuditAction) else action
        entry = AuditLogEntry(
            official_id=official_id,
            action=action_value,
            entity_type=entity_type,
            entity_id=str(entity_id) if entity_id is not None else None,
            details=details,
            ip_address=ip_address,
            user_agent=user_agent,
        )
        try:
            entry = await self.uow.audit_logs.create(entry)
            await self.uow.commit()
        except Exception:
            logger.exception(
                f"Failed to write audit entry action={action_value} official_id={official_id}"
            )
            await self.uow.rollback()
            return None
        return entry

    async def query(
        self,
        official_id: Optional[UUID] = None,
        action: Optional[str] = None,
        entity_type: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> List[Tuple[AuditLogEntry, Optional[Official]]]:
        if limit is None:
            limit = ApplicationConfig.AUDIT_LOG_DEFAULT_LIMIT
        limit = max(1, min(limit, ApplicationConfig.AUDIT_LOG_MAX_LIMIT))
        return await self.uow.audit_logs.query(
            official_id=official_id,
            action=action,
            entity_type=entity_type,
            limit=limit,
        )
