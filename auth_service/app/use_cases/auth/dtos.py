"""
Authentication Use Case DTOs (Data Transfer Objects)

All Command and Response classes for auth domain.
"""

from datetime import datetime

from pydantic import BaseModel


# ============================================================================
# Command DTOs
# ============================================================================


class RegisterCommand(BaseModel):
    """
    Register command - validated registration intent

    Created by API layer after format and uniqueness validation passed.
    """

    username: str
    email: str
    password: str


# ============================================================================
# Response DTOs
# ============================================================================


class UserInfo(BaseModel):
    """User information in authentication responses"""

    id: int
    username: str
    email: str
    email_verified: bool


class RegisterResponse(BaseModel):
    """Response for register use case"""

    message: str
    user: UserInfo
    token: str


class LoginResponse(BaseModel):
    """Response for login use case"""

    message: str
    user: UserInfo
    token: str


class LogoutResponse(BaseModel):
    """Response for logout use case"""

    message: str
    already_revoked: bool


class SessionInfo(BaseModel):
    """Claims of an authenticated session token"""

    user_id: int
    issued_at: datetime
    expires_at: datetime


class MessageResponse(BaseModel):
    """Generic message-only response (password reset, email verification)"""

    message: str
