"""
Authenticate Use Case

Accepts or rejects the bearer token of an authenticated request.
"""

from auth_service.app.services.revocation_ledger import RevocationLedger
from auth_service.app.services.session_token_codec import SessionTokenCodec
from auth_service.app.services.unit_of_work import UnitOfWork
from auth_service.app.use_cases.base import store_error_boundary
from auth_service.domain.errors import ErrorCode
from auth_service.libs.result import Error, Result, Return
from .dtos import SessionInfo


class AuthenticateUseCase:
    """
    Use case for bearer token authentication.

    Business Rules:
    - Revoked tokens are rejected even before their natural expiry
    - Signature and expiry are checked by the codec
    """

    def __init__(self, uow: UnitOfWork, codec: SessionTokenCodec):
        self.uow = uow
        self.codec = codec

    @store_error_boundary
    async def execute(self, token: str) -> Result[SessionInfo]:
        """
        Errors:
            - TOKEN_REVOKED: token is in the revocation ledger
            - MALFORMED_TOKEN / TOKEN_EXPIRED: from the codec
        """
        async with self.uow:
            if await RevocationLedger(self.uow).is_revoked(token):
                return Return.err(
                    Error(ErrorCode.token_revoked, "Token has been revoked")
                )

        verified = self.codec.verify(token)
        if verified.is_err():
            return Return.err(verified.error)

        claims = verified.value
        return Return.ok(
            SessionInfo(
                user_id=claims.user_id,
                issued_at=claims.issued_at,
                expires_at=claims.expires_at,
            )
        )
