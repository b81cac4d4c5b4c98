"""
Bootstrap Use Case

First-run seeding: reference data and the initial super admin.
"""

from typing import Optional

from src.app.services.audit_logger import AuditLogger
from src.app.services.credential_store import CredentialStore
from src.app.services.permission_model import grant_column
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import (
    DEFAULT_DEPARTMENTS,
    DEFAULT_RANKS,
    AuditAction,
    Capability,
    Department,
    Official,
    Rank,
)
from src.domain.result import Result, Return
from .dtos import BootstrapResponse, OfficialInfo
from .official_directory import generate_secret


class BootstrapUseCase:
    """
    Use case for seeding an empty installation.

    Business Rules:
    - Missing ranks and departments are inserted; existing ones are kept
    - A super admin is created only when no official exists yet
    - Its secret is random, returned once, and must be changed on first login
    - Running it again is a no-op
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow
        self.credentials = CredentialStore(uow)
        self.audit = AuditLogger(uow)

    async def execute(
        self,
        employee_code: str = "ADMIN001",
        email: str = "admin@erca.gov.et",
        full_name: str = "System Administrator",
    ) -> Result[BootstrapResponse]:
        async with self.uow:
            ranks_seeded = 0
            for code, name, level, description in DEFAULT_RANKS:
                if await self.uow.ranks.get_by_code(code) is None:
                    await self.uow.ranks.create(
                        Rank(code=code, name=name, level=level, description=description)
                    )
                    ranks_seeded += 1

            departments_seeded = 0
            if await self.uow.departments.count() == 0:
                for code, name, description in DEFAULT_DEPARTMENTS:
                    await self.uow.departments.create(
                        Department(code=code, name=name, description=description)
                    )
                    departments_seeded += 1

            official: Optional[Official] = None
            secret: Optional[str] = None
            if await self.uow.officials.count() == 0:
                secret = generate_secret()
                official = Official(
                    employee_code=employee_code,
                    full_name=full_name,
                    email=email.lower(),
                    password_hash=self.credentials.hash(secret),
                    rank_code=DEFAULT_RANKS[0][0],
                    is_super_admin=True,
                    must_change_password=True,
                )
                for capability in Capability:
                    setattr(official, grant_column(capability), True)
                official = await self.uow.officials.create(official)

            await self.uow.commit()

            response = BootstrapResponse(
                ranks_seeded=ranks_seeded,
                departments_seeded=departments_seeded,
                official=OfficialInfo.from_entity(official) if official else None,
                generated_secret=secret,
            )

            if official is not None:
                await self.audit.record(
                    official.id,
                    AuditAction.bootstrap,
                    entity_type="official",
                    entity_id=official.id,
                    details={
                        "employee_code": official.employee_code,
                        "ranks_seeded": ranks_seeded,
                        "departments_seeded": departments_seeded,
                    },
                )

            return Return.ok(response)
