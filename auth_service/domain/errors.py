"""
Auth Service Error Taxonomy

Closed set of error codes returned by services and use cases, plus the
store exceptions raised by repository adapters.
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Every error code that can leave a use case"""

    validation_error = "VALIDATION_ERROR"
    duplicate_user = "DUPLICATE_USER"
    invalid_credentials = "INVALID_CREDENTIALS"
    unauthenticated = "UNAUTHENTICATED"
    malformed_token = "MALFORMED_TOKEN"
    token_expired = "TOKEN_EXPIRED"
    token_revoked = "TOKEN_REVOKED"
    invalid_or_expired_token = "INVALID_OR_EXPIRED_TOKEN"
    config_error = "CONFIG_ERROR"
    transient_store_error = "TRANSIENT_STORE_ERROR"
    internal_error = "INTERNAL_ERROR"
    admin_unauthorized = "ADMIN_UNAUTHORIZED"

    # Internal to the single-use token manager, folded before leaving a use case
    token_not_found = "TOKEN_NOT_FOUND"


class ConfigError(Exception):
    """Raised when a required setting (e.g. the signing secret) is missing"""


class StoreError(Exception):
    """Base class for persistence failures translated by repository adapters"""


class StoreUnavailableError(StoreError):
    """Store unreachable or failed mid-operation"""


class UniqueViolationError(StoreError):
    """Insert or update collided with a unique constraint"""
