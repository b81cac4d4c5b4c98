"""
Authentication Use Cases

Login, session validation and logout.
"""

from .login_use_case import LoginUseCase
from .validate_session_use_case import ValidateSessionUseCase
from .logout_use_case import LogoutUseCase
from src.app.use_cases.context import ClientContext
from .dtos import (
    LoginResponse,
    LogoutResponse,
    ValidateSessionResponse,
)

__all__ = [
    # Use Cases
    "LoginUseCase",
    "ValidateSessionUseCase",
    "LogoutUseCase",
    # DTOs - Commands
    "ClientContext",
    # DTOs - Responses
    "LoginResponse",
    "LogoutResponse",
    "ValidateSessionResponse",
]
