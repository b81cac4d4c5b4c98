"""
Official Directory

CRUD over official records plus self-service password change.
Every mutation is gated by the PermissionModel and audited.
"""

import logging
import secrets
from datetime import datetime
from typing import Any, Dict, List, Optional
from uuid import UUID

from email_validator import EmailNotValidError, validate_email

from config import ApplicationConfig
from src.app.repositories.official_repository import DuplicateRecordError
from src.app.services.audit_logger import AuditLogger
from src.app.services.credential_store import MAX_SECRET_BYTES, CredentialStore
from src.app.services.permission_model import PermissionModel, grant_column
from src.app.services.session_manager import SessionManager
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.context import ClientContext
from src.domain.entities import AuditAction, Capability, Official
from src.domain.result import Error, Result, Return
from .dtos import (
    ChangePasswordResponse,
    CreateOfficialCommand,
    CreateOfficialResponse,
    OfficialInfo,
    OfficialListResponse,
    UpdateOfficialCommand,
)

logger = logging.getLogger(__name__)

# Patch keys that may not be cleared to null
NON_NULLABLE_FIELDS = (
    "full_name",
    "email",
    "rank_code",
    "is_super_admin",
    "is_active",
    "account_locked",
    "grants",
)


def generate_secret() -> str:
    """Random one-time secret for accounts created without one"""
    return secrets.token_urlsafe(12)


class OfficialDirectory:
    """
    Use case for managing official records.

    Business Rules:
    - create/update/list require manage_officials (or super admin)
    - Granting or revoking is_super_admin, or editing a super admin,
      requires a super-admin requester
    - employee_code and email are unique; collisions are DUPLICATE_IDENTIFIER
    - employee_code cannot be changed after creation
    - Missing secret on create: a random one is generated, returned once,
      and must_change_password is set
    - update applies only the fields present and always refreshes updated_at
    - change_password revokes every session of the official after commit
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

    # ------------------------------------------------------------------
    # Validation helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _normalize_email(email: str) -> Result[str]:
        try:
            validated = validate_email(email.strip(), check_deliverability=False)
        except EmailNotValidError:
            return Return.err(Error("VALIDATION_ERROR", f"Invalid email address: {email}"))
        return Return.ok(validated.normalized.lower())

    @staticmethod
    def _validate_secret(secret: str) -> Result[None]:
        if len(secret) < ApplicationConfig.MIN_SECRET_LENGTH:
            return Return.err(
                Error(
                    "VALIDATION_ERROR",
                    f"Password must be at least {ApplicationConfig.MIN_SECRET_LENGTH} characters long",
                )
            )
        if len(secret.encode()) > MAX_SECRET_BYTES:
            return Return.err(
                Error(
                    "VALIDATION_ERROR",
                    f"Password must be at most {MAX_SECRET_BYTES} bytes long",
                )
            )
        return Return.ok(None)

    async def _validate_rank(self, rank_code: str) -> Result[None]:
        rank = await self.uow.ranks.get_by_code(rank_code)
        if rank is None:
            return Return.err(Error("VALIDATION_ERROR", f"Unknown rank: {rank_code}"))
        return Return.ok(None)

    async def _resolve_supervisor(self, supervisor_id: Optional[str]) -> Result[Optional[UUID]]:
        if not supervisor_id:
            return Return.ok(None)
        try:
            supervisor_uuid = UUID(str(supervisor_id))
        except ValueError:
            return Return.err(Error("VALIDATION_ERROR", "Invalid supervisor id"))
        if await self.uow.officials.get_by_id(supervisor_uuid) is None:
            return Return.err(Error("VALIDATION_ERROR", "Supervisor not found"))
        return Return.ok(supervisor_uuid)

    def _require_manager(self, requester: Official) -> Result[None]:
        return self.permissions.require(requester, Capability.manage_officials)

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    async def create(
        self,
        requester: Official,
        command: CreateOfficialCommand,
        context: Optional[ClientContext] = None,
    ) -> Result[CreateOfficialResponse]:
        """
        Create an official.

        Returns:
            Result with the created record and any generated secret, or Error
            (UNAUTHORIZED, VALIDATION_ERROR, DUPLICATE_IDENTIFIER)
        """
        context = context or ClientContext()

        async with self.uow:
            authorized = self._require_manager(requester)
            if authorized.is_err():
                return Return.err(authorized.error)

            if command.is_super_admin:
                authorized = self.permissions.require_super_admin(requester)
                if authorized.is_err():
                    return Return.err(authorized.error)

            employee_code = command.employee_code.strip()
            full_name = command.full_name.strip()
            if not employee_code or not full_name:
                return Return.err(
                    Error("VALIDATION_ERROR", "Employee code and full name are required")
                )

            email_result = self._normalize_email(command.email)
            if email_result.is_err():
                return Return.err(email_result.error)
            email = email_result.value

            rank_result = await self._validate_rank(command.rank_code)
            if rank_result.is_err():
                return Return.err(rank_result.error)

            supervisor_result = await self._resolve_supervisor(command.supervisor_id)
            if supervisor_result.is_err():
                return Return.err(supervisor_result.error)

            generated_secret = None
            secret = command.secret
            if secret:
                secret_result = self._validate_secret(secret)
                if secret_result.is_err():
                    return Return.err(secret_result.error)
            else:
                generated_secret = generate_secret()
                secret = generated_secret

            if await self.uow.officials.get_by_employee_code(employee_code) is not None:
                return Return.err(
                    Error("DUPLICATE_IDENTIFIER", "Employee code already exists")
                )
            if await self.uow.officials.get_by_email(email) is not None:
                return Return.err(Error("DUPLICATE_IDENTIFIER", "Email already exists"))

            official = Official(
                employee_code=employee_code,
                full_name=full_name,
                email=email,
                phone=command.phone,
                password_hash=self.credentials.hash(secret),
                department=command.department,
                rank_code=command.rank_code,
                region=command.region,
                office_location=command.office_location,
                is_super_admin=command.is_super_admin,
                is_active=command.is_active,
                must_change_password=generated_secret is not None,
                supervisor_id=supervisor_result.value,
                created_by=requester.id,
            )
            for capability, granted in command.grants.items():
                setattr(official, grant_column(capability), bool(granted))

            try:
                official = await self.uow.officials.create(official)
            except DuplicateRecordError:
                return Return.err(
                    Error("DUPLICATE_IDENTIFIER", "Employee code or email already exists")
                )

            await self.uow.commit()

            response = CreateOfficialResponse(
                official=OfficialInfo.from_entity(official),
                generated_secret=generated_secret,
            )

            await self.audit.record(
                requester.id,
                AuditAction.create_user,
                entity_type="official",
                entity_id=official.id,
                details={
                    "employee_code": official.employee_code,
                    "email": official.email,
                    "rank_code": official.rank_code,
                    "is_super_admin": official.is_super_admin,
                    "grants": {cap.value: granted for cap, granted in command.grants.items()},
                    "secret_generated": generated_secret is not None,
                },
                ip_address=context.ip_address,
                user_agent=context.user_agent,
            )

            return Return.ok(response)

    async def update(
        self,
        requester: Official,
        official_id: UUID,
        command: UpdateOfficialCommand,
        context: Optional[ClientContext] = None,
    ) -> Result[OfficialInfo]:
        """
        Partially update an official.

        Returns:
            Result with the updated record, or Error
            (UNAUTHORIZED, NOT_FOUND, VALIDATION_ERROR, DUPLICATE_IDENTIFIER)
        """
        context = context or ClientContext()
        patch: Dict[str, Any] = command.model_dump(exclude_unset=True)

        async with self.uow:
            authorized = self._require_manager(requester)
            if authorized.is_err():
                return Return.err(authorized.error)

            if "is_super_admin" in patch:
                authorized = self.permissions.require_super_admin(requester)
                if authorized.is_err():
                    return Return.err(authorized.error)

            official = await self.uow.officials.get_by_id(official_id)
            if official is None:
                return Return.err(Error("NOT_FOUND", "Official not found"))

            if official.is_super_admin and "is_super_admin" not in patch:
                authorized = self.permissions.require_super_admin(requester)
                if authorized.is_err():
                    return Return.err(authorized.error)

            for field in NON_NULLABLE_FIELDS:
                if field in patch and patch[field] is None:
                    return Return.err(Error("VALIDATION_ERROR", f"{field} cannot be null"))

            if "full_name" in patch:
                patch["full_name"] = patch["full_name"].strip()
                if not patch["full_name"]:
                    return Return.err(Error("VALIDATION_ERROR", "Full name is required"))

            if "email" in patch:
                email_result = self._normalize_email(patch["email"])
                if email_result.is_err():
                    return Return.err(email_result.error)
                patch["email"] = email_result.value
                existing = await self.uow.officials.get_by_email(patch["email"])
                if existing is not None and existing.id != official.id:
                    return Return.err(Error("DUPLICATE_IDENTIFIER", "Email already exists"))

            if "rank_code" in patch:
                rank_result = await self._validate_rank(patch["rank_code"])
                if rank_result.is_err():
                    return Return.err(rank_result.error)

            if "supervisor_id" in patch:
                supervisor_result = await self._resolve_supervisor(patch["supervisor_id"])
                if supervisor_result.is_err():
                    return Return.err(supervisor_result.error)
                patch["supervisor_id"] = supervisor_result.value

            grants = patch.pop("grants", None) or {}
            for field, value in patch.items():
                setattr(official, field, value)
            for capability, granted in grants.items():
                setattr(official, grant_column(capability), bool(granted))

            if patch.get("account_locked") is False:
                official.failed_login_attempts = 0

            official.updated_at = datetime.utcnow()

            try:
                official = await self.uow.officials.update(official)
            except DuplicateRecordError:
                return Return.err(Error("DUPLICATE_IDENTIFIER", "Email already exists"))

            await self.uow.commit()

            response = OfficialInfo.from_entity(official)

            await self.audit.record(
                requester.id,
                AuditAction.update_user,
                entity_type="official",
                entity_id=official.id,
                details={"patch": command.model_dump(mode="json", exclude_unset=True)},
                ip_address=context.ip_address,
                user_agent=context.user_agent,
            )

            return Return.ok(response)

    async def list(self, requester: Official) -> Result[OfficialListResponse]:
        async with self.uow:
            authorized = self._require_manager(requester)
            if authorized.is_err():
                return Return.err(authorized.error)

            officials: List[Official] = await self.uow.officials.list_all()
            return Return.ok(
                OfficialListResponse(
                    officials=[OfficialInfo.from_entity(o) for o in officials]
                )
            )

    async def get(self, requester: Official, official_id: UUID) -> Result[OfficialInfo]:
        """Officials may always read their own record"""
        async with self.uow:
            if requester.id != official_id:
                authorized = self._require_manager(requester)
                if authorized.is_err():
                    return Return.err(authorized.error)

            official = await self.uow.officials.get_by_id(official_id)
            if official is None:
                return Return.err(Error("NOT_FOUND", "Official not found"))
            return Return.ok(OfficialInfo.from_entity(official))

    async def change_password(
        self,
        official: Official,
        current_secret: str,
        new_secret: str,
        context: Optional[ClientContext] = None,
    ) -> Result[ChangePasswordResponse]:
        """
        Rotate an official's own secret.

        Ordering: the new hash is committed first, then every session of the
        official is revoked and committed, then the audit entry is written.

        Returns:
            Result with revoked session count, or Error
            (INVALID_CURRENT_SECRET, VALIDATION_ERROR)
        """
        context = context or ClientContext()

        async with self.uow:
            verified = await self.credentials.verify(official.employee_code, current_secret)
            if verified.is_err():
                if verified.error.code == "INVALID_CREDENTIALS":
                    return Return.err(
                        Error("INVALID_CURRENT_SECRET", "Current password is incorrect")
                    )
                return Return.err(verified.error)

            secret_result = self._validate_secret(new_secret)
            if secret_result.is_err():
                return Return.err(secret_result.error)

            if new_secret == current_secret:
                return Return.err(
                    Error("VALIDATION_ERROR", "New password must differ from the current one")
                )

            target = verified.value
            target.password_hash = self.credentials.hash(new_secret)
            target.must_change_password = False
            target.updated_at = datetime.utcnow()
            await self.uow.officials.update(target)
            await self.uow.commit()

            revoked = await self.sessions.revoke_all(target.id)
            await self.uow.commit()
            logger.info(f"Password changed for official {target.id}, revoked {revoked} sessions")

            await self.audit.record(
                target.id,
                AuditAction.password_change,
                entity_type="official",
                entity_id=target.id,
                details={"revoked_sessions": revoked},
                ip_address=context.ip_address,
                user_agent=context.user_agent,
            )

            return Return.ok(ChangePasswordResponse(success=True, revoked_sessions=revoked))
