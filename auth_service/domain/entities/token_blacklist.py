"""
TokenBlacklist Entity

Revoked session tokens.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from auth_service.domain.base import utcnow


class TokenBlacklist(SQLModel, table=True):
    """
    TokenBlacklist entity - a session token revoked before its natural expiry.

    Business Rules:
    - Token stored as SHA-256 hash, unique
    - Created on logout, never mutated
    - Rows past expires_at carry no meaning and may be purged
    """

    __tablename__ = "token_blacklist"

    id: Optional[int] = Field(default=None, primary_key=True)
    token_hash: str = Field(unique=True, index=True, max_length=64)  # SHA-256 output

    expires_at: datetime = Field(sa_column=Column(DateTime, nullable=False))
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_token_blacklist_expires_at", "expires_at"),)
