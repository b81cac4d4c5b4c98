from typing import List, Optional
from uuid import UUID

from sqlalchemy import func, or_
from sqlalchemy.exc import IntegrityError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.official_repository import (
    DuplicateRecordError,
    IOfficialRepository,
)
from src.domain.entities import Official


class OfficialRepository(IOfficialRepository):
    """Official repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, official_id: UUID) -> Optional[Official]:
        """Get official by ID"""
        stmt = select(Official).where(Official.id == official_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_identifier(self, identifier: str) -> Optional[Official]:
        """Get official by employee code or email (email case-insensitive)"""
        stmt = select(Official).where(
            or_(
                Official.employee_code == identifier,
                func.lower(Official.email) == identifier.lower(),
            )
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def get_by_employee_code(self, employee_code: str) -> Optional[Official]:
        """Get official by employee code"""
        stmt = select(Official).where(Official.employee_code == employee_code)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_email(self, email: str) -> Optional[Official]:
        """Get official by email (case-insensitive)"""
        stmt = select(Official).where(func.lower(Official.email) == email.lower())
        result = await self.session.exec(stmt)
        return result.first()

    async def list_all(self) -> List[Official]:
        """All officials ordered by full name"""
        stmt = select(Official).order_by(Official.full_name)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def count(self) -> int:
        """Number of officials"""
        stmt = select(func.count()).select_from(Official)
        result = await self.session.exec(stmt)
        return result.one()

    async def create(self, official: Official) -> Official:
        """Create a new official; the unique constraints arbitrate races"""
        self.session.add(official)
        await self._flush()
        await self.session.refresh(official)
        return official

    async def update(self, official: Official) -> Official:
        """Update existing official"""
        self.session.add(official)
        await self._flush()
        await self.session.refresh(official)
        return official

    async def _flush(self):
        try:
            await self.session.flush()
        except IntegrityError as exc:
            await self.session.rollback()
            raise DuplicateRecordError(str(exc.orig)) from exc
