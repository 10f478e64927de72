"""
Authentication Use Cases

All authentication-related business logic.
"""

from .register_use_case import RegisterUseCase
from .login_use_case import LoginUseCase
from .logout_use_case import LogoutUseCase
from .authenticate_use_case import AuthenticateUseCase
from .request_password_reset_use_case import RequestPasswordResetUseCase
from .reset_password_use_case import ResetPasswordUseCase
from .verify_email_use_case import VerifyEmailUseCase
from .resend_verification_use_case import ResendVerificationUseCase
from .validate_registration_use_case import ValidateRegistrationUseCase
from .validate_resend_verification_use_case import ValidateResendVerificationUseCase
from .dtos import (
    RegisterCommand,
    RegisterResponse,
    LoginResponse,
    LogoutResponse,
    SessionInfo,
    MessageResponse,
    UserInfo,
)

__all__ = [
    # Use Cases
    "RegisterUseCase",
    "LoginUseCase",
    "LogoutUseCase",
    "AuthenticateUseCase",
    "RequestPasswordResetUseCase",
    "ResetPasswordUseCase",
    "VerifyEmailUseCase",
    "ResendVerificationUseCase",
    "ValidateRegistrationUseCase",
    "ValidateResendVerificationUseCase",
    # DTOs - Commands
    "RegisterCommand",
    # DTOs - Responses
    "RegisterResponse",
    "LoginResponse",
    "LogoutResponse",
    "SessionInfo",
    "MessageResponse",
    # DTOs - Nested Models
    "UserInfo",
]
