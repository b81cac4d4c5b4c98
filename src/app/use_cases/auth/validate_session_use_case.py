"""
Validate Session Use Case

Resolves a bearer token to the owning official.
"""

from typing import Optional

from src.app.services.permission_model import PermissionModel
from src.app.services.session_manager import SessionManager
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.officials.dtos import OfficialInfo
from src.domain.entities import Official
from src.domain.result import Result
from .dtos import ValidateSessionResponse


class ValidateSessionUseCase:
    """
    Use case for session validation.

    Business Rules:
    - Expired rows are deleted when found
    - Only last_activity_at changes on a valid session
    - Bearer-protected routes and POST /auth/validate share this path
    """

    def __init__(
        self,
        uow: UnitOfWork,
        session_manager: Optional[SessionManager] = None,
    ):
        self.uow = uow
        self.sessions = session_manager or SessionManager(uow)
        self.permissions = PermissionModel()

    async def authenticate(self, token: str) -> Result[Official]:
        """
        Validate a token and persist the activity touch or expired-row delete.

        Returns:
            Result with the Official, or Error INVALID_SESSION
        """
        async with self.uow:
            result = await self.sessions.validate(token)
            await self.uow.commit()
            return result

    async def execute(self, token: str) -> ValidateSessionResponse:
        result = await self.authenticate(token)
        if result.is_err():
            return ValidateSessionResponse(valid=False)

        official = result.value
        return ValidateSessionResponse(
            valid=True,
            official=OfficialInfo.from_entity(official),
            capabilities=self.permissions.as_flags(official),
        )
