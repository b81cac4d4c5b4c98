from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import Official


class DuplicateRecordError(Exception):
    """Raised when a store uniqueness constraint rejects a write"""


class IOfficialRepository(ABC):
    """Official repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, official_id: UUID) -> Optional[Official]:
        """Get official by ID"""
        pass

    @abstractmethod
    async def get_by_identifier(self, identifier: str) -> Optional[Official]:
        """Get official by employee code or email (email case-insensitive)"""
        pass

    @abstractmethod
    async def get_by_employee_code(self, employee_code: str) -> Optional[Official]:
        """Get official by employee code"""
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[Official]:
        """Get official by email (case-insensitive)"""
        pass

    @abstractmethod
    async def list_all(self) -> List[Official]:
        """All officials ordered by full name"""
        pass

    @abstractmethod
    async def count(self) -> int:
        """Number of officials"""
        pass

    @abstractmethod
    async def create(self, official: Official) -> Official:
        """Create a new official. Raises DuplicateRecordError on collision."""
        pass

    @abstractmethod
    async def update(self, official: Official) -> Official:
        """Update existing official. Raises DuplicateRecordError on collision."""
        pass
