"""
Credential Store

Verifies an identifier + secret pair against stored bcrypt hashes.
"""

from functools import lru_cache
from typing import Optional

import bcrypt

from config import ApplicationConfig
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Official
from src.domain.result import Error, Result, Return

# bcrypt ignores or rejects input past this many bytes
MAX_SECRET_BYTES = 72


@lru_cache(maxsize=None)
def dummy_hash(rounds: int) -> str:
    """Hash compared against when the identifier is unknown"""
    return bcrypt.hashpw(b"unknown-official", bcrypt.gensalt(rounds)).decode()


class CredentialStore:
    """
    Business Rules:
    - Secrets stored as salted bcrypt hashes
    - Constant-time comparison, performed even when the identifier is unknown
    - Account status is only disclosed after the secret matched
    - No side effects; the login flow owns counters and sessions
    """

    def __init__(self, uow: UnitOfWork, rounds: Optional[int] = None):
        self.uow = uow
        self.rounds = rounds or ApplicationConfig.BCRYPT_ROUNDS

    def hash(self, secret: str) -> str:
        return bcrypt.hashpw(secret.encode(), bcrypt.gensalt(self.rounds)).decode()

    @staticmethod
    def check(secret: str, digest: str) -> bool:
        try:
            return bcrypt.checkpw(secret.encode(), digest.encode())
        except (ValueError, AttributeError):
            # Malformed or empty stored hash
            return False

    async def verify(self, identifier: str, secret: str) -> Result[Official]:
        """
        Verify credentials.

        Args:
            identifier: Employee code or email
            secret: Plain text secret

        Returns:
            Result with the Official, or Error
            (INVALID_CREDENTIALS, ACCOUNT_INACTIVE, ACCOUNT_LOCKED)
        """
        official = await self.uow.officials.get_by_identifier(identifier.strip())

        if official is None:
            # Same bcrypt work as a real mismatch
            self.check(secret, dummy_hash(self.rounds))
            return Return.err(
                Error("INVALID_CREDENTIALS", "Invalid identifier or password")
            )

        if not self.check(secret, official.password_hash):
            return Return.err(
                Error("INVALID_CREDENTIALS", "Invalid identifier or password")
            )

        if not official.is_active:
            return Return.err(Error("ACCOUNT_INACTIVE", "Account is inactive"))

        if official.account_locked:
            return Return.err(Error("ACCOUNT_LOCKED", "Account is locked"))

        return Return.ok(official)
