"""
OfficialSession Entity

A live bearer-token grant.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel


class OfficialSession(SQLModel, table=True):
    """
    OfficialSession entity - one successful login.

    Business Rules:
    - Only the SHA-256 hash of the bearer token is stored
    - Valid iff now < expires_at and the owner is active and not locked
    - Expired rows are deleted when validation finds them
    """

    __tablename__ = "official_sessions"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    official_id: UUID = Field(foreign_key="officials.id", nullable=False, index=True)
    token_hash: str = Field(unique=True, index=True, max_length=64)  # SHA-256 output

    ip_address: Optional[str] = Field(default=None, max_length=64)
    user_agent: Optional[str] = Field(default=None, max_length=512)

    # Timestamps
    created_at: datetime = Field(
        default_factory=datetime.utcnow, sa_column=Column(DateTime)
    )
    expires_at: datetime = Field(sa_column=Column(DateTime, nullable=False))
    last_activity_at: datetime = Field(
        default_factory=datetime.utcnow, sa_column=Column(DateTime)
    )

    __table_args__ = (Index("idx_official_session_expires_at", "expires_at"),)
