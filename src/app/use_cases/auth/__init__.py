"""
Authentication Use Cases

All authentication-related business logic.
"""

from .register_use_case import RegisterUseCase
from .login_use_case import LoginUseCase
from .refresh_token_use_case import RefreshTokenUseCase
from .logout_use_case import LogoutUseCase
from .forgot_password_use_case import ForgotPasswordUseCase, hash_reset_token
from .reset_password_use_case import ResetPasswordUseCase
from .dtos import (
    AccessTokenResponse,
    AccountInfo,
    LoginResult,
    MessageResponse,
    RegisterCommand,
    RegisterResponse,
)

__all__ = [
    # Use Cases
    "RegisterUseCase",
    "LoginUseCase",
    "RefreshTokenUseCase",
    "LogoutUseCase",
    "ForgotPasswordUseCase",
    "ResetPasswordUseCase",
    # DTOs - Commands
    "RegisterCommand",
    # DTOs - Responses
    "RegisterResponse",
    "LoginResult",
    "AccessTokenResponse",
    "MessageResponse",
    # DTOs - Nested Models
    "AccountInfo",
    # Helpers
    "hash_reset_token",
]
