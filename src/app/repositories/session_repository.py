from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from src.domain.entities import OfficialSession


class ISessionRepository(ABC):
    """Session repository interface - application layer"""

    @abstractmethod
    async def get_by_token_hash(self, token_hash: str) -> Optional[OfficialSession]:
        """Get session by SHA-256 hash of its bearer token"""
        pass

    @abstractmethod
    async def create(self, session: OfficialSession) -> OfficialSession:
        """Create a new session"""
        pass

    @abstractmethod
    async def update(self, session: OfficialSession) -> OfficialSession:
        """Update existing session"""
        pass

    @abstractmethod
    async def delete_by_token_hash(self, token_hash: str) -> bool:
        """Delete a session. Returns True if a row existed."""
        pass

    @abstractmethod
    async def delete_all_by_official_id(self, official_id: UUID) -> int:
        """Delete all sessions of an official. Returns count of deleted rows."""
        pass
