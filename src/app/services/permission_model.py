"""
Permission Model

Resolves the capability set of an official from its direct grants.
Rank is display metadata and is never consulted here.
"""

from typing import FrozenSet

from src.domain.entities import Capability, Official
from src.domain.result import Error, Result, Return

ALL_CAPABILITIES: FrozenSet[Capability] = frozenset(Capability)


def grant_column(capability: Capability) -> str:
    """Name of the Official column holding a capability grant"""
    return f"can_{capability.value}"


class PermissionModel:
    """
    Business Rules:
    - is_super_admin short-circuits to every capability
    - Otherwise a capability is held iff its can_* column is true
    - Missing capability is not an error here; require() turns it into UNAUTHORIZED
    - require_rotated_secret() refuses officials with a pending first-login change
    """

    def resolve(self, official: Official) -> FrozenSet[Capability]:
        if official.is_super_admin:
            return ALL_CAPABILITIES
        return frozenset(
            capability
            for capability in Capability
            if getattr(official, grant_column(capability), False)
        )

    def authorize(self, official: Official, capability: Capability) -> bool:
        if official.is_super_admin:
            return True
        return bool(getattr(official, grant_column(capability), False))

    def require(self, official: Official, capability: Capability) -> Result[None]:
        if not self.authorize(official, capability):
            return Return.err(
                Error(
                    "UNAUTHORIZED",
                    f"Missing required capability: {capability.value}",
                )
            )
        return Return.ok(None)

    def require_rotated_secret(self, official: Official) -> Result[None]:
        """A pending first-login password change blocks everything but the change itself"""
        if official.must_change_password:
            return Return.err(
                Error(
                    "PASSWORD_CHANGE_REQUIRED",
                    "Password must be changed before using this account",
                )
            )
        return Return.ok(None)

    def require_super_admin(self, official: Official) -> Result[None]:
        if not official.is_super_admin:
            return Return.err(
                Error("UNAUTHORIZED", "Only super admins can perform this action")
            )
        return Return.ok(None)

    def as_flags(self, official: Official) -> dict:
        """Capability -> bool mapping for responses"""
        held = self.resolve(official)
        return {capability.value: capability in held for capability in Capability}
