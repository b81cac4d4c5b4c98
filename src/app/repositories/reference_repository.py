from abc import ABC, abstractmethod
from typing import List, Optional

from src.domain.entities import Department, Rank


class IRankRepository(ABC):
    """Rank repository interface - application layer"""

    @abstractmethod
    async def get_by_code(self, code: str) -> Optional[Rank]:
        """Get rank by code"""
        pass

    @abstractmethod
    async def list_all(self) -> List[Rank]:
        """All ranks ordered by level"""
        pass

    @abstractmethod
    async def create(self, rank: Rank) -> Rank:
        """Create a new rank"""
        pass


class IDepartmentRepository(ABC):
    """Department repository interface - application layer"""

    @abstractmethod
    async def list_active(self) -> List[Department]:
        """Active departments ordered by name"""
        pass

    @abstractmethod
    async def count(self) -> int:
        """Number of departments"""
        pass

    @abstractmethod
    async def create(self, department: Department) -> Department:
        """Create a new department"""
        pass
