"""
Login Use Case

Authenticates an official and issues a bearer session token.
"""

import logging
from datetime import datetime
from typing import Optional

from src.app.services.audit_logger import AuditLogger
from src.app.services.credential_store import CredentialStore
from src.app.services.permission_model import PermissionModel
from src.app.services.session_manager import SessionManager
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.officials.dtos import OfficialInfo
from src.domain.entities import AuditAction
from src.domain.result import Result, Return
from src.app.use_cases.context import ClientContext
from .dtos import LoginResponse

logger = logging.getLogger(__name__)


class LoginUseCase:
    """
    Use case for official login and session issuance.

    Business Rules:
    - Identifier is an employee code or an email
    - Credentials are evaluated on every attempt; there is no automatic lockout
    - A wrong secret for a known official increments failed_login_attempts
    - Success resets the counter, sets last_login_at and issues a session
    - Success records one "login" audit entry, failure one "login_failed"
    """

    def __init__(
        self,
        uow: UnitOfWork,
        session_manager: Optional[SessionManager] = None,
    ):
        self.uow = uow
        self.credentials = CredentialStore(uow)
        self.sessions = session_manager or SessionManager(uow)
        self.permissions = PermissionModel()
        self.audit = AuditLogger(uow)

    async def execute(
        self,
        identifier: str,
        secret: str,
        context: Optional[ClientContext] = None,
    ) -> Result[LoginResponse]:
        """
        Execute login use case.

        Args:
            identifier: Employee code or email
            secret: Plain text secret
            context: Client IP / user agent

        Returns:
            Result with LoginResponse, or Error
            (INVALID_CREDENTIALS, ACCOUNT_INACTIVE, ACCOUNT_LOCKED)
        """
        context = context or ClientContext()

        async with self.uow:
            verified = await self.credentials.verify(identifier, secret)

            if verified.is_err():
                error = verified.error
                official = await self.uow.officials.get_by_identifier(identifier.strip())

                if official is not None and error.code == "INVALID_CREDENTIALS":
                    official.failed_login_attempts = (official.failed_login_attempts or 0) + 1
                    await self.uow.officials.update(official)
                    await self.uow.commit()

                logger.info(f"Login failed for identifier={identifier!r}: {error.code}")
                await self.audit.record(
                    official.id if official else None,
                    AuditAction.login_failed,
                    entity_type="official",
                    entity_id=official.id if official else None,
                    details={"identifier": identifier, "reason": error.code},
                    ip_address=context.ip_address,
                    user_agent=context.user_agent,
                )
                return Return.err(error)

            official = verified.value

            official.failed_login_attempts = 0
            official.last_login_at = datetime.utcnow()
            await self.uow.officials.update(official)

            token, expires_at = await self.sessions.issue(
                official, context.ip_address, context.user_agent
            )

            await self.uow.commit()

            response = LoginResponse(
                token=token,
                expires_at=expires_at,
                official=OfficialInfo.from_entity(official),
                capabilities=self.permissions.as_flags(official),
                must_change_password=bool(official.must_change_password),
            )

            await self.audit.record(
                official.id,
                AuditAction.login,
                entity_type="official",
                entity_id=official.id,
                details={"identifier": identifier, "expires_at": expires_at.isoformat()},
                ip_address=context.ip_address,
                user_agent=context.user_agent,
            )

            return Return.ok(response)
