"""
Audit Use Cases

All audit-related business logic.
"""

from .get_audit_logs_use_case import AuditLogInfo, AuditLogsResponse, GetAuditLogsUseCase

__all__ = [
    "AuditLogInfo",
    "AuditLogsResponse",
    "GetAuditLogsUseCase",
]
