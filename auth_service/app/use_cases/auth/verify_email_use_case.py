"""
Verify Email Use Case

Handles email verification via single-use token.
"""

import logging

from auth_service.app.services.single_use_token_manager import SingleUseTokenManager
from auth_service.app.services.unit_of_work import UnitOfWork
from auth_service.app.use_cases.base import store_error_boundary
from auth_service.domain.entities import TokenPurpose
from auth_service.domain.errors import ErrorCode
from auth_service.libs.result import Error, Result, Return
from .dtos import MessageResponse

logger = logging.getLogger(__name__)


class VerifyEmailUseCase:
    """
    Use case for email verification.

    Business Rules:
    - Token must exist, be unused and unexpired (24 hours)
    - Sets email_verified = True
    - Token is consumed (single-use)
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @store_error_boundary
    async def execute(self, token: str) -> Result[MessageResponse]:
        """
        Execute email verification use case.

        Errors:
            - INVALID_OR_EXPIRED_TOKEN
        """
        async with self.uow:
            redeemed = await SingleUseTokenManager(self.uow).redeem(
                token, TokenPurpose.email_verification
            )
            if redeemed.is_err():
                return Return.err(
                    Error(ErrorCode.invalid_or_expired_token, "Invalid or expired token")
                )

            user_id = redeemed.value
            await self.uow.users.mark_email_verified(user_id)

            await self.uow.commit()

        logger.info(f"Email verified for user {user_id}")
        return Return.ok(MessageResponse(message="Email verified successfully"))
