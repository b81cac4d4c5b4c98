"""
Official Identity Domain Entities

Each entity in its own module; import from this package.
"""

from .enums import AuditAction, Capability

from .official import Official
from .session import OfficialSession
from .audit_log import AuditLogEntry
from .reference import DEFAULT_DEPARTMENTS, DEFAULT_RANKS, Department, Rank

__all__ = [
    # Enums
    "AuditAction",
    "Capability",
    # Entities
    "Official",
    "OfficialSession",
    "AuditLogEntry",
    "Rank",
    "Department",
    # Seed data
    "DEFAULT_RANKS",
    "DEFAULT_DEPARTMENTS",
]
