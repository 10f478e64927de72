"""
Auth Service Domain Entities

All domain entities organized by model.
"""

from .enums import TokenPurpose

from .user import User
from .token_blacklist import TokenBlacklist
from .single_use_token import (
    SingleUseTokenBase,
    PasswordResetToken,
    EmailVerificationToken,
)

__all__ = [
    # Enums
    "TokenPurpose",
    # Entities
    "User",
    "TokenBlacklist",
    "SingleUseTokenBase",
    "PasswordResetToken",
    "EmailVerificationToken",
]
