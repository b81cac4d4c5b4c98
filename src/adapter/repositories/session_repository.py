from typing import Optional
from uuid import UUID

from sqlalchemy import delete
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.session_repository import ISessionRepository
from src.domain.entities import OfficialSession


class SessionRepository(ISessionRepository):
    """Session repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_token_hash(self, token_hash: str) -> Optional[OfficialSession]:
        """Get session by SHA-256 hash of its bearer token"""
        stmt = select(OfficialSession).where(OfficialSession.token_hash == token_hash)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, session_obj: OfficialSession) -> OfficialSession:
        """Create a new session"""
        self.session.add(session_obj)
        await self.session.flush()
        await self.session.refresh(session_obj)
        return session_obj

    async def update(self, session_obj: OfficialSession) -> OfficialSession:
        """Update existing session"""
        self.session.add(session_obj)
        await self.session.flush()
        return session_obj

    async def delete_by_token_hash(self, token_hash: str) -> bool:
        """Delete a session by token hash"""
        stmt = delete(OfficialSession).where(OfficialSession.token_hash == token_hash)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def delete_all_by_official_id(self, official_id: UUID) -> int:
        """Delete every session of an official"""
        stmt = delete(OfficialSession).where(OfficialSession.official_id == official_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
