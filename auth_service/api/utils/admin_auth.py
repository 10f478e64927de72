"""
Admin API Key Authentication

Validates admin API keys for maintenance endpoints.
"""

from fastapi import Header, Request

from auth_service.api.error import raise_for_error
from auth_service.domain.errors import ErrorCode
from auth_service.libs.result import Error


async def verify_admin_api_key(request: Request, x_admin_api_key: str = Header(None)):
    """
    Verify admin API key from X-Admin-API-Key header.

    Service-to-service auth for maintenance jobs (e.g. a cron purging the
    token blacklist). With no ADMIN_API_KEY configured every call is refused.

    Raises:
        ClientError: 401 if key is missing or invalid
    """
    if not x_admin_api_key:
        raise_for_error(Error(ErrorCode.admin_unauthorized, "Admin API key required"))

    valid_admin_key = request.app.state.admin_api_key
    if not valid_admin_key or x_admin_api_key != valid_admin_key:
        raise_for_error(Error(ErrorCode.admin_unauthorized, "Invalid admin API key"))

    return True
