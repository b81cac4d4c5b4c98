from typing import List, Optional, Tuple
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.audit_log_repository import IAuditLogRepository
from src.domain.entities import AuditLogEntry, Official


class AuditLogRepository(IAuditLogRepository):
    """AuditLogEntry repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, entry: AuditLogEntry) -> AuditLogEntry:
        """Append a new audit entry (immutable)"""
        self.session.add(entry)
        await self.session.flush()
        await self.session.refresh(entry)
        return entry

    async def query(
        self,
        official_id: Optional[UUID] = None,
        action: Optional[str] = None,
        entity_type: Optional[str] = None,
        limit: int = 100,
    ) -> List[Tuple[AuditLogEntry, Optional[Official]]]:
        """Newest first, left-joined to the acting official"""
        stmt = select(AuditLogEntry, Official).join(
            Official, AuditLogEntry.official_id == Official.id, isouter=True
        )

        if official_id is not None:
            stmt = stmt.where(AuditLogEntry.official_id == official_id)
        if action:
            stmt = stmt.where(AuditLogEntry.action == action)
        if entity_type:
            stmt = stmt.where(AuditLogEntry.entity_type == entity_type)

        # id breaks ties between entries written in the same microsecond
        stmt = stmt.order_by(
            AuditLogEntry.created_at.desc(), AuditLogEntry.id.desc()
        ).limit(limit)

        result = await self.session.exec(stmt)
        return [(entry, actor) for entry, actor in result.all()]
