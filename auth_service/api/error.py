from fastapi import status

from auth_service.domain.errors import ErrorCode
from auth_service.libs.result import Error


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(
        self,
        base_error: Error,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
    ):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


CLIENT_ERROR_STATUS = {
    ErrorCode.validation_error: status.HTTP_400_BAD_REQUEST,
    ErrorCode.duplicate_user: status.HTTP_409_CONFLICT,
    ErrorCode.invalid_credentials: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.unauthenticated: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.malformed_token: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.token_expired: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.token_revoked: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.invalid_or_expired_token: status.HTTP_400_BAD_REQUEST,
    ErrorCode.admin_unauthorized: status.HTTP_401_UNAUTHORIZED,
}

SERVER_ERROR_STATUS = {
    ErrorCode.config_error: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorCode.transient_store_error: status.HTTP_503_SERVICE_UNAVAILABLE,
    ErrorCode.internal_error: status.HTTP_500_INTERNAL_SERVER_ERROR,
    # Folded inside use cases; reaching the API means a use case leaked it
    ErrorCode.token_not_found: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def raise_for_error(error: Error):
    """Single mapping from the error taxonomy to HTTP responses"""
    code = ErrorCode(error.code)
    if code in CLIENT_ERROR_STATUS:
        raise ClientError(error, status_code=CLIENT_ERROR_STATUS[code])
    raise ServerError(error, status_code=SERVER_ERROR_STATUS[code])
