from typing import List, Optional

from sqlalchemy import func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.reference_repository import (
    IDepartmentRepository,
    IRankRepository,
)
from src.domain.entities import Department, Rank


class RankRepository(IRankRepository):
    """Rank repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_code(self, code: str) -> Optional[Rank]:
        stmt = select(Rank).where(Rank.code == code)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_all(self) -> List[Rank]:
        stmt = select(Rank).order_by(Rank.level)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, rank: Rank) -> Rank:
        self.session.add(rank)
        await self.session.flush()
        return rank


class DepartmentRepository(IDepartmentRepository):
    """Department repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_active(self) -> List[Department]:
        stmt = (
            select(Department)
            .where(Department.is_active == True)  # noqa: E712
            .order_by(Department.name)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def count(self) -> int:
        stmt = select(func.count()).select_from(Department)
        result = await self.session.exec(stmt)
        return result.one()

    async def create(self, department: Department) -> Department:
        self.session.add(department)
        await self.session.flush()
        return department
