"""
Auth Service Domain Enums
"""

from enum import Enum


class TokenPurpose(str, Enum):
    """Purpose of a single-use token"""

    password_reset = "password_reset"
    email_verification = "email_verification"
