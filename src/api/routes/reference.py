from typing import List

from fastapi import APIRouter, Depends, status

from src.api.error import raise_for_error
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.reference import (
    DepartmentInfo,
    ListDepartmentsUseCase,
    ListRanksUseCase,
    RankInfo,
)
from src.depends import get_current_official, get_unit_of_work
from src.domain.entities import Official

router = APIRouter(prefix="/reference", tags=["Reference"])


@router.get("/ranks", status_code=status.HTTP_200_OK, response_model=List[RankInfo])
async def list_ranks(
    current_official: Official = Depends(get_current_official),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Rank titles ordered by level (display metadata only)"""
    result = await ListRanksUseCase(uow).execute()

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/departments", status_code=status.HTTP_200_OK, response_model=List[DepartmentInfo]
)
async def list_departments(
    current_official: Official = Depends(get_current_official),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Active departments ordered by name"""
    result = await ListDepartmentsUseCase(uow).execute()

    if result.is_err():
        raise_for_error(result.error)

    return result.value
