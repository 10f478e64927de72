"""
Request format validation.

Used as pydantic field validators by the request models; failures surface
as 400 VALIDATION_ERROR with one {field, message} pair per problem.
Uniqueness checks need the store and live in the validate_* use cases.
"""

import string

from email_validator import EmailNotValidError, validate_email

from auth_service.app.services.password_hasher import MAX_PASSWORD_BYTES

USERNAME_MIN_LENGTH = 3
PASSWORD_MIN_LENGTH = 8


def validate_username(value: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError("Username is required")
    if len(value) < USERNAME_MIN_LENGTH:
        raise ValueError("Username must be at least 3 characters long")
    if not (value.isascii() and value.isalnum()):
        raise ValueError("Username must contain only letters and numbers")
    return value


def validate_password(value: str) -> str:
    """Strong password: lower, upper, digit and symbol, at least 8 chars"""
    if not value:
        raise ValueError("Password is required")
    if len(value) < PASSWORD_MIN_LENGTH:
        raise ValueError("Password must be at least 8 characters long")
    if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValueError("Password must be at most 72 bytes long")
    if not (
        any(c.islower() for c in value)
        and any(c.isupper() for c in value)
        and any(c.isdigit() for c in value)
        and any(c in string.punctuation for c in value)
    ):
        raise ValueError("Password must be strong")
    return value


def validate_required(value: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError("Field is required")
    return value


def validate_login_identifier(value: str) -> str:
    """
    Username or email. Emails are normalized the way EmailStr stores them at
    registration, so a lookup by the exact string the user registered matches.
    """
    value = validate_required(value)
    if "@" not in value:
        return value
    try:
        return validate_email(value, check_deliverability=False).normalized
    except EmailNotValidError:
        return value
