"""
Official Directory DTOs (Data Transfer Objects)

Command and Response classes for the officials domain.
"""

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel

from src.domain.entities import Capability, Official
from src.app.services.permission_model import grant_column


# ============================================================================
# Response DTOs
# ============================================================================


class OfficialInfo(BaseModel):
    """Official record as exposed to clients (never includes the hash)"""

    id: str
    employee_code: str
    full_name: str
    email: str
    phone: Optional[str]
    department: Optional[str]
    rank_code: Optional[str]
    region: Optional[str]
    office_location: Optional[str]
    is_super_admin: bool
    is_active: bool
    account_locked: bool
    must_change_password: bool
    failed_login_attempts: int
    grants: Dict[str, bool]
    supervisor_id: Optional[str]
    created_by: Optional[str]
    created_at: Optional[datetime]
    updated_at: Optional[datetime]
    last_login_at: Optional[datetime]

    @classmethod
    def from_entity(cls, official: Official) -> "OfficialInfo":
        return cls(
            id=str(official.id),
            employee_code=official.employee_code,
            full_name=official.full_name,
            email=official.email,
            phone=official.phone,
            department=official.department,
            rank_code=official.rank_code,
            region=official.region,
            office_location=official.office_location,
            is_super_admin=bool(official.is_super_admin),
            is_active=bool(official.is_active),
            account_locked=bool(official.account_locked),
            must_change_password=bool(official.must_change_password),
            failed_login_attempts=official.failed_login_attempts or 0,
            grants={
                capability.value: bool(getattr(official, grant_column(capability)))
                for capability in Capability
            },
            supervisor_id=str(official.supervisor_id) if official.supervisor_id else None,
            created_by=str(official.created_by) if official.created_by else None,
            created_at=official.created_at,
            updated_at=official.updated_at,
            last_login_at=official.last_login_at,
        )


class CreateOfficialResponse(BaseModel):
    """
    Response for create official use case

    generated_secret is present only when the caller supplied no secret;
    it is returned once and never retrievable again.
    """

    official: OfficialInfo
    generated_secret: Optional[str] = None


class OfficialListResponse(BaseModel):
    officials: List[OfficialInfo]


class ChangePasswordResponse(BaseModel):
    success: bool
    revoked_sessions: int


class BootstrapResponse(BaseModel):
    """Response for first-run bootstrap"""

    ranks_seeded: int
    departments_seeded: int
    official: Optional[OfficialInfo] = None
    generated_secret: Optional[str] = None


# ============================================================================
# Command DTOs
# ============================================================================


class CreateOfficialCommand(BaseModel):
    """Validated intent to create an official"""

    employee_code: str
    full_name: str
    email: str
    rank_code: str
    phone: Optional[str] = None
    department: Optional[str] = None
    region: Optional[str] = None
    office_location: Optional[str] = None
    secret: Optional[str] = None
    supervisor_id: Optional[str] = None
    is_super_admin: bool = False
    is_active: bool = True
    grants: Dict[Capability, bool] = {}


class UpdateOfficialCommand(BaseModel):
    """
    Partial update of an official

    Only fields explicitly set are applied (model_dump(exclude_unset=True)).
    Employee code is immutable and therefore absent.
    """

    full_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    department: Optional[str] = None
    rank_code: Optional[str] = None
    region: Optional[str] = None
    office_location: Optional[str] = None
    supervisor_id: Optional[str] = None
    is_super_admin: Optional[bool] = None
    is_active: Optional[bool] = None
    account_locked: Optional[bool] = None
    grants: Optional[Dict[Capability, bool]] = None
