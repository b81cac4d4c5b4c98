"""
Logout Use Case

Revokes a session token. Idempotent.
"""

from typing import Optional

from src.app.services.audit_logger import AuditLogger
from src.app.services.session_manager import SessionManager
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AuditAction
from src.domain.result import Result, Return
from src.app.use_cases.context import ClientContext
from .dtos import LogoutResponse


class LogoutUseCase:
    """
    Use case for official logout.

    Business Rules:
    - Revoking an absent or already revoked token succeeds
    - Expired sessions are revoked the same way as live ones
    - A "logout" audit entry is recorded only when a session was removed
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow
        self.sessions = SessionManager(uow)
        self.audit = AuditLogger(uow)

    async def execute(
        self, token: str, context: Optional[ClientContext] = None
    ) -> Result[LogoutResponse]:
        context = context or ClientContext()

        async with self.uow:
            official_id = await self.sessions.find_owner_id(token)
            removed = await self.sessions.revoke(token)
            await self.uow.commit()

            if removed:
                await self.audit.record(
                    official_id,
                    AuditAction.logout,
                    entity_type="official",
                    entity_id=official_id,
                    ip_address=context.ip_address,
                    user_agent=context.user_agent,
                )

            return Return.ok(LogoutResponse(success=True))
