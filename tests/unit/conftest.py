from unittest.mock import AsyncMock, MagicMock

import pytest

import tests.fixtures.officials  # noqa: F401  (lowers bcrypt cost)


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork with all repositories"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.officials = MagicMock()
    uow.officials.get_by_id = AsyncMock(return_value=None)
    uow.officials.get_by_identifier = AsyncMock(return_value=None)
    uow.officials.get_by_employee_code = AsyncMock(return_value=None)
    uow.officials.get_by_email = AsyncMock(return_value=None)
    uow.officials.list_all = AsyncMock(return_value=[])
    uow.officials.count = AsyncMock(return_value=0)
    uow.officials.create = AsyncMock(side_effect=lambda official: official)
    uow.officials.update = AsyncMock(side_effect=lambda official: official)

    uow.sessions = MagicMock()
    uow.sessions.get_by_token_hash = AsyncMock(return_value=None)
    uow.sessions.create = AsyncMock(side_effect=lambda session: session)
    uow.sessions.update = AsyncMock(side_effect=lambda session: session)
    uow.sessions.delete_by_token_hash = AsyncMock(return_value=True)
    uow.sessions.delete_all_by_official_id = AsyncMock(return_value=0)

    uow.audit_logs = MagicMock()
    uow.audit_logs.create = AsyncMock(side_effect=lambda entry: entry)
    uow.audit_logs.query = AsyncMock(return_value=[])

    uow.ranks = MagicMock()
    uow.ranks.get_by_code = AsyncMock(return_value=None)
    uow.ranks.list_all = AsyncMock(return_value=[])
    uow.ranks.create = AsyncMock(side_effect=lambda rank: rank)

    uow.departments = MagicMock()
    uow.departments.list_active = AsyncMock(return_value=[])
    uow.departments.count = AsyncMock(return_value=0)
    uow.departments.create = AsyncMock(side_effect=lambda department: department)

    return uow
