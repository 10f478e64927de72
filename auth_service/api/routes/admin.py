"""
Admin API Routes - Maintenance Endpoints

Authentication is via Admin API Key, not session tokens.
"""

from fastapi import APIRouter, Depends, status

from auth_service.api.error import raise_for_error
from auth_service.api.utils.admin_auth import verify_admin_api_key
from auth_service.app.services.unit_of_work import UnitOfWork
from auth_service.app.use_cases.maintenance import (
    PurgeRevokedTokensResponse,
    PurgeRevokedTokensUseCase,
)
from auth_service.depends import get_unit_of_work

router = APIRouter(prefix="/admin", tags=["Admin"])


@router.post(
    "/token-blacklist/purge",
    status_code=status.HTTP_200_OK,
    response_model=PurgeRevokedTokensResponse,
    dependencies=[Depends(verify_admin_api_key)],
)
async def purge_token_blacklist(uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Purge Token Blacklist

    Deletes blacklist entries whose token has expired on its own.

    Requires: X-Admin-API-Key header

    Raises:
        - 401 Unauthorized: Missing or invalid admin API key
        - 503 Service Unavailable: TRANSIENT_STORE_ERROR
    """
    use_case = PurgeRevokedTokensUseCase(uow)
    result = await use_case.execute()

    if result.is_err():
        raise_for_error(result.error)

    return result.value
