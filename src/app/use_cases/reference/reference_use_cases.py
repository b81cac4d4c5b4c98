"""
Reference Data Use Cases

Rank and department listings used to populate directory forms.
"""

from typing import List, Optional

from pydantic import BaseModel

from src.app.services.unit_of_work import UnitOfWork
from src.domain.result import Result, Return


class RankInfo(BaseModel):
    code: str
    name: str
    level: int
    description: Optional[str]


class DepartmentInfo(BaseModel):
    code: str
    name: str
    description: Optional[str]


class ListRanksUseCase:
    """Ranks ordered by level, highest authority first"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[List[RankInfo]]:
        async with self.uow:
            ranks = await self.uow.ranks.list_all()
            return Return.ok(
                [
                    RankInfo(
                        code=r.code, name=r.name, level=r.level, description=r.description
                    )
                    for r in ranks
                ]
            )


class ListDepartmentsUseCase:
    """Active departments ordered by name"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[List[DepartmentInfo]]:
        async with self.uow:
            departments = await self.uow.departments.list_active()
            return Return.ok(
                [
                    DepartmentInfo(code=d.code, name=d.name, description=d.description)
                    for d in departments
                ]
            )
