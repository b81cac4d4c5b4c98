from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from src.app.services.session_manager import hash_token
from src.app.use_cases.auth.logout_use_case import LogoutUseCase
from src.app.use_cases.auth.validate_session_use_case import ValidateSessionUseCase
from src.domain.entities import OfficialSession
from tests.fixtures.officials import audited_actions, make_official


def live_session(official, token="tok"):
    now = datetime.utcnow()
    return OfficialSession(
        id=uuid4(),
        official_id=official.id,
        token_hash=hash_token(token),
        created_at=now,
        expires_at=now + timedelta(hours=1),
        last_activity_at=now,
    )


@pytest.mark.asyncio
async def test_validate_returns_official_and_capabilities(mock_uow):
    official = make_official(can_audit_businesses=True)
    mock_uow.sessions.get_by_token_hash.return_value = live_session(official)
    mock_uow.officials.get_by_id.return_value = official

    response = await ValidateSessionUseCase(mock_uow).execute("tok")

    assert response.valid is True
    assert response.official.id == str(official.id)
    assert response.capabilities["audit_businesses"] is True
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_validate_unknown_token_is_not_an_error(mock_uow):
    response = await ValidateSessionUseCase(mock_uow).execute("nope")

    assert response.valid is False
    assert response.official is None
    assert response.capabilities is None


@pytest.mark.asyncio
async def test_logout_removes_session_and_audits(mock_uow):
    official = make_official()
    mock_uow.sessions.get_by_token_hash.return_value = live_session(official)

    result = await LogoutUseCase(mock_uow).execute("tok")

    assert result.is_ok()
    assert result.value.success is True
    mock_uow.sessions.delete_by_token_hash.assert_called_once_with(hash_token("tok"))

    entry = mock_uow.audit_logs.create.call_args.args[0]
    assert entry.action == "logout"
    assert entry.official_id == official.id


@pytest.mark.asyncio
async def test_logout_unknown_token_succeeds_without_audit(mock_uow):
    mock_uow.sessions.delete_by_token_hash.return_value = False

    result = await LogoutUseCase(mock_uow).execute("already-gone")

    assert result.is_ok()
    assert result.value.success is True
    assert audited_actions(mock_uow) == []
