"""
Single-Use Token Entities

Password reset and email verification tokens share one shape and live in
separate tables.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import DateTime, Field, SQLModel

from auth_service.domain.base import utcnow


class SingleUseTokenBase(SQLModel):
    """
    Columns shared by every single-use token table.

    Business Rules:
    - Token is 64 hex chars (32 random bytes), stored as SHA-256 hash
    - At most one unused token per user and purpose
    - Single-use: used flips to True exactly once
    - Expired rows are never redeemable, even if unused
    """

    id: Optional[int] = Field(default=None, primary_key=True)

    user_id: int = Field(foreign_key="users.id", index=True)
    token_hash: str = Field(unique=True, index=True, max_length=64)  # SHA-256 output

    used: bool = Field(default=False, index=True)

    # Naive UTC columns; sa_type builds a fresh Column for each token table
    expires_at: datetime = Field(sa_type=DateTime, nullable=False, index=True)
    created_at: datetime = Field(default_factory=utcnow, sa_type=DateTime)


class PasswordResetToken(SingleUseTokenBase, table=True):
    """Password reset token - expires after 1 hour"""

    __tablename__ = "password_reset_tokens"


class EmailVerificationToken(SingleUseTokenBase, table=True):
    """Email verification token - expires after 24 hours"""

    __tablename__ = "email_verification_tokens"
