from uuid import uuid4

import bcrypt

from config import ApplicationConfig
from src.domain.entities import Official

# Cheap hashes for tests
ApplicationConfig.BCRYPT_ROUNDS = 4

DEFAULT_SECRET = "SecurePass123!"
ADMIN_SECRET = "AdminPass123!"


def make_official(secret: str = DEFAULT_SECRET, **overrides) -> Official:
    """Active, non-admin official with the legacy default grants"""
    fields = dict(
        id=uuid4(),
        employee_code="E100",
        full_name="Alice Tesfaye",
        email="alice@erca.gov.et",
        password_hash=bcrypt.hashpw(secret.encode(), bcrypt.gensalt(4)).decode(),
        rank_code="off",
        is_super_admin=False,
        is_active=True,
        account_locked=False,
        failed_login_attempts=0,
        must_change_password=False,
        can_manage_officials=False,
        can_audit_businesses=False,
        can_verify_invoices=False,
        can_generate_reports=False,
        can_configure_system=False,
        can_view_businesses=True,
        can_view_transactions=True,
        can_view_reports=True,
        can_issue_penalties=False,
    )
    fields.update(overrides)
    return Official(**fields)


def audited_actions(uow) -> list:
    """Actions passed to audit_logs.create on a mock unit of work, in call order"""
    return [call.args[0].action for call in uow.audit_logs.create.call_args_list]


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


async def login(client, identifier: str, secret: str) -> str:
    """Log in through the API and return the session token"""
    response = await client.post(
        "/auth/login", json={"identifier": identifier, "secret": secret}
    )
    assert response.status_code == 200, response.text
    return response.json()["token"]
