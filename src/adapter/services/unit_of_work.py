from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.audit_log_repository import AuditLogRepository
from src.adapter.repositories.official_repository import OfficialRepository
from src.adapter.repositories.reference_repository import (
    DepartmentRepository,
    RankRepository,
)
from src.adapter.repositories.session_repository import SessionRepository
from src.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.officials = OfficialRepository(self.session)
        self.sessions = SessionRepository(self.session)
        self.audit_logs = AuditLogRepository(self.session)
        self.ranks = RankRepository(self.session)
        self.departments = DepartmentRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
