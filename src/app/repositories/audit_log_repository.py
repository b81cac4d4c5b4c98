from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from uuid import UUID

from src.domain.entities import AuditLogEntry, Official


class IAuditLogRepository(ABC):
    """AuditLogEntry repository interface - application layer"""

    @abstractmethod
    async def create(self, entry: AuditLogEntry) -> AuditLogEntry:
        """Append a new audit entry (immutable)"""
        pass

    @abstractmethod
    async def query(
        self,
        official_id: Optional[UUID] = None,
        action: Optional[str] = None,
        entity_type: Optional[str] = None,
        limit: int = 100,
    ) -> List[Tuple[AuditLogEntry, Optional[Official]]]:
        """
        Get audit entries, newest first, each paired with its actor.

        The actor is None when official_id is null or the official no longer exists.
        """
        pass
