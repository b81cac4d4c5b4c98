"""
Reference Data Use Cases
"""

from .reference_use_cases import (
    DepartmentInfo,
    ListDepartmentsUseCase,
    ListRanksUseCase,
    RankInfo,
)

__all__ = [
    "DepartmentInfo",
    "ListDepartmentsUseCase",
    "ListRanksUseCase",
    "RankInfo",
]
