from datetime import datetime, timedelta

import pytest
from sqlmodel import select

from src.app.services.session_manager import hash_token
from src.domain.entities import Official, OfficialSession
from tests.fixtures.officials import bearer, login

OFFICER = {
    "employee_code": "E100",
    "full_name": "Alice Tesfaye",
    "email": "alice@erca.gov.et",
    "rank_code": "off",
    "secret": "SecurePass123!",
}


async def create_officer(client, admin_token, **overrides):
    payload = {**OFFICER, **overrides}
    response = await client.post("/officials", json=payload, headers=bearer(admin_token))
    assert response.status_code == 201, response.text
    return response.json()["official"]


@pytest.mark.asyncio
async def test_login_success(client, admin_token):
    await create_officer(client, admin_token)

    response = await client.post(
        "/auth/login", json={"identifier": "E100", "secret": "SecurePass123!"}
    )

    assert response.status_code == 200
    data = response.json()
    assert data["token"]
    assert data["expires_at"]
    assert data["official"]["employee_code"] == "E100"
    assert "password_hash" not in data["official"]
    assert data["capabilities"]["view_businesses"] is True
    assert data["capabilities"]["manage_officials"] is False
    assert data["must_change_password"] is False


@pytest.mark.asyncio
async def test_login_with_email_case_insensitive(client, admin_token):
    await create_officer(client, admin_token)

    response = await client.post(
        "/auth/login", json={"identifier": "Alice@ERCA.gov.et", "secret": "SecurePass123!"}
    )

    assert response.status_code == 200


@pytest.mark.asyncio
async def test_bootstrap_admin_must_change_password(client, admin_secret):
    response = await client.post(
        "/auth/login", json={"identifier": "admin@erca.gov.et", "secret": admin_secret}
    )

    assert response.status_code == 200
    assert response.json()["must_change_password"] is True
    assert all(response.json()["capabilities"].values())


@pytest.mark.asyncio
async def test_login_invalid_credentials(client, admin_token):
    await create_officer(client, admin_token)

    for identifier in ("E100", "E999"):
        response = await client.post(
            "/auth/login", json={"identifier": identifier, "secret": "WrongPassword!"}
        )
        assert response.status_code == 401
        assert response.json()["error"]["code"] == "INVALID_CREDENTIALS"


@pytest.mark.asyncio
async def test_failed_attempts_never_lock_out(client, admin_token, db_session):
    """Every attempt is evaluated on its own; no automatic lockout"""
    await create_officer(client, admin_token)

    for _ in range(3):
        response = await client.post(
            "/auth/login", json={"identifier": "E100", "secret": "WrongPassword!"}
        )
        assert response.json()["error"]["code"] == "INVALID_CREDENTIALS"

    official = (
        await db_session.exec(select(Official).where(Official.employee_code == "E100"))
    ).one()
    await db_session.refresh(official)
    assert official.failed_login_attempts == 3
    assert official.account_locked is False

    response = await client.post(
        "/auth/login", json={"identifier": "E100", "secret": "SecurePass123!"}
    )
    assert response.status_code == 200
    assert response.json()["official"]["failed_login_attempts"] == 0


@pytest.mark.asyncio
async def test_login_locked_and_inactive(client, admin_token):
    officer = await create_officer(client, admin_token)

    await client.put(
        f"/officials/{officer['id']}", json={"account_locked": True}, headers=bearer(admin_token)
    )
    response = await client.post(
        "/auth/login", json={"identifier": "E100", "secret": "SecurePass123!"}
    )
    assert response.status_code == 401
    assert response.json()["error"]["code"] == "ACCOUNT_LOCKED"

    await client.put(
        f"/officials/{officer['id']}",
        json={"account_locked": False, "is_active": False},
        headers=bearer(admin_token),
    )
    response = await client.post(
        "/auth/login", json={"identifier": "E100", "secret": "SecurePass123!"}
    )
    assert response.status_code == 401
    assert response.json()["error"]["code"] == "ACCOUNT_INACTIVE"


@pytest.mark.asyncio
async def test_login_missing_fields(client):
    response = await client.post("/auth/login", json={"identifier": "E100"})

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_validate_and_me(client, admin_token):
    await create_officer(client, admin_token)
    token = await login(client, "E100", "SecurePass123!")

    response = await client.post("/auth/validate", json={"token": token})
    assert response.status_code == 200
    assert response.json()["valid"] is True
    assert response.json()["official"]["employee_code"] == "E100"

    response = await client.get("/auth/me", headers=bearer(token))
    assert response.status_code == 200
    assert response.json()["official"]["email"] == "alice@erca.gov.et"


@pytest.mark.asyncio
async def test_validate_unknown_token(client):
    response = await client.post("/auth/validate", json={"token": "not-a-real-token"})

    assert response.status_code == 200
    assert response.json()["valid"] is False


@pytest.mark.asyncio
async def test_me_requires_bearer_token(client):
    response = await client.get("/auth/me")
    assert response.status_code == 401
    assert response.json()["error"]["code"] == "INVALID_SESSION"

    response = await client.get("/auth/me", headers=bearer("not-a-real-token"))
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_expired_session_is_deleted_on_validate(client, admin_token, db_session):
    await create_officer(client, admin_token)
    token = await login(client, "E100", "SecurePass123!")

    stored = (
        await db_session.exec(
            select(OfficialSession).where(OfficialSession.token_hash == hash_token(token))
        )
    ).one()
    stored.expires_at = datetime.utcnow() - timedelta(seconds=1)
    db_session.add(stored)
    await db_session.commit()

    response = await client.post("/auth/validate", json={"token": token})
    assert response.json()["valid"] is False

    remaining = (
        await db_session.exec(
            select(OfficialSession).where(OfficialSession.token_hash == hash_token(token))
        )
    ).first()
    assert remaining is None


@pytest.mark.asyncio
async def test_raw_token_is_not_stored(client, admin_token, db_session):
    rows = (await db_session.exec(select(OfficialSession))).all()

    assert len(rows) == 1
    assert rows[0].token_hash == hash_token(admin_token)
    assert rows[0].token_hash != admin_token


@pytest.mark.asyncio
async def test_logout_is_idempotent(client, admin_token):
    await create_officer(client, admin_token)
    token = await login(client, "E100", "SecurePass123!")

    first = await client.post("/auth/logout", json={"token": token})
    second = await client.post("/auth/logout", json={"token": token})

    assert first.status_code == 200
    assert second.status_code == 200
    assert second.json()["success"] is True

    response = await client.post("/auth/validate", json={"token": token})
    assert response.json()["valid"] is False


@pytest.mark.asyncio
async def test_multiple_sessions_coexist(client, admin_token):
    await create_officer(client, admin_token)
    first = await login(client, "E100", "SecurePass123!")
    second = await login(client, "E100", "SecurePass123!")

    assert first != second
    await client.post("/auth/logout", json={"token": first})

    response = await client.post("/auth/validate", json={"token": second})
    assert response.json()["valid"] is True


@pytest.mark.asyncio
async def test_change_password_revokes_every_session(client, admin_token):
    await create_officer(client, admin_token)
    first = await login(client, "E100", "SecurePass123!")
    second = await login(client, "E100", "SecurePass123!")

    response = await client.post(
        "/auth/change-password",
        json={"current_secret": "SecurePass123!", "new_secret": "NewSecurePass456!"},
        headers=bearer(first),
    )

    assert response.status_code == 200
    assert response.json() == {"success": True, "revoked_sessions": 2}

    for token in (first, second):
        response = await client.post("/auth/validate", json={"token": token})
        assert response.json()["valid"] is False

    old = await client.post(
        "/auth/login", json={"identifier": "E100", "secret": "SecurePass123!"}
    )
    assert old.status_code == 401
    await login(client, "E100", "NewSecurePass456!")


@pytest.mark.asyncio
async def test_change_password_wrong_current(client, admin_token):
    await create_officer(client, admin_token)
    token = await login(client, "E100", "SecurePass123!")

    response = await client.post(
        "/auth/change-password",
        json={"current_secret": "WrongPassword!", "new_secret": "NewSecurePass456!"},
        headers=bearer(token),
    )

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "INVALID_CURRENT_SECRET"


@pytest.mark.asyncio
async def test_change_password_too_short(client, admin_token):
    await create_officer(client, admin_token)
    token = await login(client, "E100", "SecurePass123!")

    response = await client.post(
        "/auth/change-password",
        json={"current_secret": "SecurePass123!", "new_secret": "short"},
        headers=bearer(token),
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_first_login_requires_password_change(client, admin_secret):
    token = await login(client, "ADMIN001", admin_secret)

    blocked = await client.get("/officials", headers=bearer(token))
    assert blocked.status_code == 403
    assert blocked.json()["error"]["code"] == "PASSWORD_CHANGE_REQUIRED"

    ranks = await client.get("/reference/ranks", headers=bearer(token))
    assert ranks.status_code == 403

    me = await client.get("/auth/me", headers=bearer(token))
    assert me.status_code == 200
    assert me.json()["official"]["must_change_password"] is True

    response = await client.post(
        "/auth/change-password",
        json={"current_secret": admin_secret, "new_secret": "RotatedPass789!"},
        headers=bearer(token),
    )
    assert response.status_code == 200

    fresh = await login(client, "ADMIN001", "RotatedPass789!")
    allowed = await client.get("/officials", headers=bearer(fresh))
    assert allowed.status_code == 200


@pytest.mark.asyncio
async def test_overlong_secrets_are_typed_errors(client, admin_token):
    overlong = "x" * 80

    unknown = await client.post(
        "/auth/login", json={"identifier": "E999", "secret": overlong}
    )
    assert unknown.status_code == 401
    assert unknown.json()["error"]["code"] == "INVALID_CREDENTIALS"

    await create_officer(client, admin_token)
    known = await client.post(
        "/auth/login", json={"identifier": "E100", "secret": overlong}
    )
    assert known.status_code == 401
    assert known.json()["error"]["code"] == "INVALID_CREDENTIALS"

    token = await login(client, "E100", "SecurePass123!")
    response = await client.post(
        "/auth/change-password",
        json={"current_secret": "SecurePass123!", "new_secret": overlong},
        headers=bearer(token),
    )
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"
