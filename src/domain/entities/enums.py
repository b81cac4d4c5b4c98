"""
Official Identity Domain Enums

Enumeration types used across domain entities and services.
"""

from enum import Enum


class Capability(str, Enum):
    """Privileged action an official may be granted"""

    manage_officials = "manage_officials"
    audit_businesses = "audit_businesses"
    verify_invoices = "verify_invoices"
    generate_reports = "generate_reports"
    configure_system = "configure_system"
    view_businesses = "view_businesses"
    view_transactions = "view_transactions"
    view_reports = "view_reports"
    issue_penalties = "issue_penalties"


class AuditAction(str, Enum):
    """Kinds of audited events"""

    login = "login"
    login_failed = "login_failed"
    logout = "logout"
    password_change = "password_change"
    create_user = "create_user"
    update_user = "update_user"
    bootstrap = "bootstrap"
