"""
Official Entity

A government user account of the portal.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel


class Official(SQLModel, table=True):
    """
    Official entity - an authenticated government user.

    Business Rules:
    - employee_code and email are globally unique
    - Password stored as bcrypt hash
    - Authorization comes only from is_super_admin and the can_* grants;
      rank_code is display metadata
    - supervisor_id and created_by are optional self-references, no cycle checks
    """

    __tablename__ = "officials"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    employee_code: str = Field(unique=True, index=True, max_length=50)
    full_name: str = Field(max_length=255)
    email: str = Field(unique=True, index=True, max_length=255)
    phone: Optional[str] = Field(default=None, max_length=50)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars

    department: Optional[str] = Field(default=None, max_length=255)
    rank_code: Optional[str] = Field(default=None, max_length=20)
    region: Optional[str] = Field(default=None, max_length=100)
    office_location: Optional[str] = Field(default=None, max_length=255)

    # Account state
    is_super_admin: bool = Field(default=False)
    is_active: bool = Field(default=True)
    account_locked: bool = Field(default=False)
    failed_login_attempts: int = Field(default=0)
    must_change_password: bool = Field(default=False)

    # Capability grants
    can_manage_officials: bool = Field(default=False)
    can_audit_businesses: bool = Field(default=False)
    can_verify_invoices: bool = Field(default=False)
    can_generate_reports: bool = Field(default=False)
    can_configure_system: bool = Field(default=False)
    can_view_businesses: bool = Field(default=True)
    can_view_transactions: bool = Field(default=True)
    can_view_reports: bool = Field(default=True)
    can_issue_penalties: bool = Field(default=False)

    supervisor_id: Optional[UUID] = Field(default=None, foreign_key="officials.id")
    created_by: Optional[UUID] = Field(default=None, foreign_key="officials.id")

    # Timestamps
    created_at: datetime = Field(
        default_factory=datetime.utcnow, sa_column=Column(DateTime)
    )
    updated_at: datetime = Field(
        default_factory=datetime.utcnow, sa_column=Column(DateTime)
    )
    last_login_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_official_department", "department"),
        Index("idx_official_is_active", "is_active"),
    )
