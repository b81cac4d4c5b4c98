from datetime import datetime
from uuid import uuid4

import pytest

from config import ApplicationConfig
from src.app.use_cases.audit import GetAuditLogsUseCase
from src.domain.entities import AuditLogEntry
from tests.fixtures.officials import make_official


@pytest.mark.asyncio
async def test_super_admin_reads_logs(mock_uow):
    admin = make_official(is_super_admin=True)
    actor = make_official(employee_code="E555", email="actor@erca.gov.et", full_name="Actor")
    entry = AuditLogEntry(
        id=uuid4(),
        official_id=actor.id,
        action="login",
        entity_type="official",
        entity_id=str(actor.id),
        details={"identifier": "E555"},
        ip_address="10.0.0.1",
        created_at=datetime(2025, 11, 18, 9, 0, 0),
    )
    orphan = AuditLogEntry(
        id=uuid4(),
        action="login_failed",
        details=None,
        created_at=datetime(2025, 11, 18, 8, 0, 0),
    )
    mock_uow.audit_logs.query.return_value = [(entry, actor), (orphan, None)]

    result = await GetAuditLogsUseCase(mock_uow).execute(admin, limit=5, action="login")

    assert result.is_ok()
    logs = result.value.logs
    assert logs[0].employee_code == "E555"
    assert logs[0].full_name == "Actor"
    assert logs[0].details == {"identifier": "E555"}
    assert logs[1].official_id is None
    assert logs[1].details == {}

    mock_uow.audit_logs.query.assert_called_once_with(
        official_id=None, action="login", entity_type=None, limit=5
    )


@pytest.mark.asyncio
async def test_default_limit(mock_uow):
    admin = make_official(is_super_admin=True)

    await GetAuditLogsUseCase(mock_uow).execute(admin)

    assert mock_uow.audit_logs.query.call_args.kwargs["limit"] == ApplicationConfig.AUDIT_LOG_DEFAULT_LIMIT


@pytest.mark.asyncio
async def test_non_super_admin_is_rejected(mock_uow):
    manager = make_official(can_manage_officials=True)

    result = await GetAuditLogsUseCase(mock_uow).execute(manager)

    assert result.is_err()
    assert result.error.code == "UNAUTHORIZED"
    mock_uow.audit_logs.query.assert_not_called()
