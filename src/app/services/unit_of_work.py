from abc import ABC, abstractmethod

from src.app.repositories.audit_log_repository import IAuditLogRepository
from src.app.repositories.official_repository import IOfficialRepository
from src.app.repositories.reference_repository import (
    IDepartmentRepository,
    IRankRepository,
)
from src.app.repositories.session_repository import ISessionRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    officials: IOfficialRepository
    sessions: ISessionRepository
    audit_logs: IAuditLogRepository
    ranks: IRankRepository
    departments: IDepartmentRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
