"""
Official Directory Use Cases

Official records, password change and first-run bootstrap.
"""

from .official_directory import OfficialDirectory
from .bootstrap_use_case import BootstrapUseCase
from .dtos import (
    BootstrapResponse,
    ChangePasswordResponse,
    CreateOfficialCommand,
    CreateOfficialResponse,
    OfficialInfo,
    OfficialListResponse,
    UpdateOfficialCommand,
)

__all__ = [
    # Use Cases
    "OfficialDirectory",
    "BootstrapUseCase",
    # DTOs - Commands
    "CreateOfficialCommand",
    "UpdateOfficialCommand",
    # DTOs - Responses
    "BootstrapResponse",
    "ChangePasswordResponse",
    "CreateOfficialResponse",
    "OfficialInfo",
    "OfficialListResponse",
]
