"""
Session Manager

Issues, validates and revokes bearer session tokens.

Lifecycle: Created -> Active -> Expired | Revoked. Expiry is lazy: an
expired row is deleted the next time validation looks it up.
"""

import hashlib
import secrets
from datetime import datetime, timedelta
from typing import Callable, Optional, Tuple
from uuid import UUID

from config import ApplicationConfig
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Official, OfficialSession
from src.domain.result import Error, Result, Return


def hash_token(token: str) -> str:
    return hashlib.sha256(token.encode()).hexdigest()


class SessionManager:
    """
    Business Rules:
    - Token is secrets.token_urlsafe(32) (256 bits), only its SHA-256 hash is stored
    - Valid iff now < expires_at and the owner is active and not locked
    - Several sessions per official may coexist
    - Revocation is idempotent

    The caller owns the transaction: nothing here commits.
    """

    def __init__(
        self,
        uow: UnitOfWork,
        ttl: Optional[timedelta] = None,
        clock: Callable[[], datetime] = datetime.utcnow,
    ):
        self.uow = uow
        self.ttl = ttl or timedelta(hours=ApplicationConfig.SESSION_TTL_HOURS)
        self.clock = clock

    async def issue(
        self,
        official: Official,
        ip_address: Optional[str] = None,
        user_agent: Optional[str] = None,
    ) -> Tuple[str, datetime]:
        """
        Create a session for an authenticated official.

        Returns:
            (token, expires_at); the raw token is never persisted
        """
        token = secrets.token_urlsafe(32)
        now = self.clock()
        expires_at = now + self.ttl

        session = OfficialSession(
            official_id=official.id,
            token_hash=hash_token(token),
            ip_address=ip_address,
            user_agent=user_agent,
            created_at=now,
            expires_at=expires_at,
            last_activity_at=now,
        )
        await self.uow.sessions.create(session)

        return token, expires_at

    async def validate(self, token: str) -> Result[Official]:
        """
        Resolve a bearer token to its owning official.

        Touches last_activity_at on success and deletes the row when expired.

        Returns:
            Result with the Official, or Error INVALID_SESSION
        """
        invalid = Error("INVALID_SESSION", "Session is invalid or expired")

        if not token:
            return Return.err(invalid)

        token_hash = hash_token(token)
        session = await self.uow.sessions.get_by_token_hash(token_hash)
        if session is None:
            return Return.err(invalid)

        now = self.clock()
        if now >= session.expires_at:
            await self.uow.sessions.delete_by_token_hash(token_hash)
            return Return.err(invalid)

        official = await self.uow.officials.get_by_id(session.official_id)
        if official is None or not official.is_active or official.account_locked:
            return Return.err(invalid)

        session.last_activity_at = now
        await self.uow.sessions.update(session)

        return Return.ok(official)

    async def find_owner_id(self, token: str) -> Optional[UUID]:
        """Owner of a stored session regardless of its validity, or None"""
        if not token:
            return None
        session = await self.uow.sessions.get_by_token_hash(hash_token(token))
        return session.official_id if session else None

    async def revoke(self, token: str) -> bool:
        """Delete a session. Returns True if one existed."""
        if not token:
            return False
        return await self.uow.sessions.delete_by_token_hash(hash_token(token))

    async def revoke_all(self, official_id: UUID) -> int:
        """Delete every session of an official. Returns count deleted."""
        return await self.uow.sessions.delete_all_by_official_id(official_id)
