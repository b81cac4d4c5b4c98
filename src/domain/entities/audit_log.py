"""
AuditLogEntry Entity

Immutable record of a privileged or security-relevant action.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, JSON, SQLModel


class AuditLogEntry(SQLModel, table=True):
    """
    AuditLogEntry entity - append-only audit trail.

    Business Rules:
    - Never updated or deleted by normal operation
    - official_id nullable (failed logins, actor removed later)
    - details stores the free-form payload (patch, identifier, etc.)
    """

    __tablename__ = "audit_logs"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    official_id: Optional[UUID] = Field(default=None, index=True)

    action: str = Field(max_length=100)
    entity_type: Optional[str] = Field(default=None, max_length=50)
    entity_id: Optional[str] = Field(default=None, max_length=64)
    details: Optional[dict] = Field(default=None, sa_column=Column(JSON))

    ip_address: Optional[str] = Field(default=None, max_length=64)
    user_agent: Optional[str] = Field(default=None, max_length=512)

    created_at: datetime = Field(
        default_factory=datetime.utcnow, sa_column=Column(DateTime)
    )

    __table_args__ = (
        Index("idx_audit_log_created_at", "created_at"),
        Index("idx_audit_log_action", "action"),
    )
