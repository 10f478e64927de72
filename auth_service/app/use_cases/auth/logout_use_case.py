"""
Logout Use Case

Revokes a session token before its natural expiry.
"""

import logging

from auth_service.app.services.revocation_ledger import RevocationLedger
from auth_service.app.services.session_token_codec import SessionTokenCodec
from auth_service.app.services.unit_of_work import UnitOfWork
from auth_service.app.use_cases.base import store_error_boundary
from auth_service.libs.result import Result, Return
from .dtos import LogoutResponse

logger = logging.getLogger(__name__)


class LogoutUseCase:
    """
    Use case for logout.

    Business Rules:
    - Token must carry a valid signature and be unexpired
    - Token may already be revoked; logging out twice still succeeds
    - Blacklist entry expires together with the token
    """

    def __init__(self, uow: UnitOfWork, codec: SessionTokenCodec):
        self.uow = uow
        self.codec = codec

    @store_error_boundary
    async def execute(self, token: str) -> Result[LogoutResponse]:
        """
        Execute logout use case.

        Errors:
            - MALFORMED_TOKEN: signature or structure invalid
            - TOKEN_EXPIRED: token already past its expiry
        """
        verified = self.codec.verify(token)
        if verified.is_err():
            return Return.err(verified.error)

        claims = verified.value
        async with self.uow:
            ledger = RevocationLedger(self.uow)
            revoked = await ledger.revoke(token, claims.expires_at)
            if revoked:
                await self.uow.commit()

        if not revoked:
            return Return.ok(
                LogoutResponse(message="Token already blacklisted", already_revoked=True)
            )

        logger.info(f"User {claims.user_id} logged out")
        return Return.ok(LogoutResponse(message="Logout successful", already_revoked=False))
