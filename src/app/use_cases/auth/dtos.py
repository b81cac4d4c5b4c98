"""
Authentication Use Case DTOs (Data Transfer Objects)

All Command and Response classes for auth domain.
Provides type safety and clear contracts between layers.
"""

from datetime import datetime
from typing import Dict, Optional

from pydantic import BaseModel

from src.app.use_cases.officials.dtos import OfficialInfo


# ============================================================================
# Response DTOs
# ============================================================================


class LoginResponse(BaseModel):
    """Response for official login use case"""

    token: str
    expires_at: datetime
    official: OfficialInfo
    capabilities: Dict[str, bool]
    must_change_password: bool


class ValidateSessionResponse(BaseModel):
    """Response for session validation; never an error for a bad token"""

    valid: bool
    official: Optional[OfficialInfo] = None
    capabilities: Optional[Dict[str, bool]] = None


class LogoutResponse(BaseModel):
    success: bool

