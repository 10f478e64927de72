"""
Reset Password Use Case

Redeems a password reset token and stores the new password.
"""

import logging

from auth_service.app.services.password_hasher import PasswordHasher
from auth_service.app.services.single_use_token_manager import SingleUseTokenManager
from auth_service.app.services.unit_of_work import UnitOfWork
from auth_service.app.use_cases.base import store_error_boundary
from auth_service.domain.entities import TokenPurpose
from auth_service.domain.errors import ErrorCode
from auth_service.libs.result import Error, Result, Return
from .dtos import MessageResponse

logger = logging.getLogger(__name__)


class ResetPasswordUseCase:
    """
    Use case for completing a password reset.

    Business Rules:
    - Token must exist, be unused and unexpired
    - Not found, used and expired all surface as INVALID_OR_EXPIRED_TOKEN
    - Token is marked used and password replaced in one transaction
    - New password complexity is enforced by request validation
    """

    def __init__(self, uow: UnitOfWork, hasher: PasswordHasher):
        self.uow = uow
        self.hasher = hasher

    @store_error_boundary
    async def execute(self, token: str, new_password: str) -> Result[MessageResponse]:
        """
        Execute reset password use case.

        Args:
            token: Password reset token (plain text from the email)
            new_password: New password to set

        Errors:
            - INVALID_OR_EXPIRED_TOKEN
        """
        async with self.uow:
            redeemed = await SingleUseTokenManager(self.uow).redeem(
                token, TokenPurpose.password_reset
            )
            if redeemed.is_err():
                logger.warning(f"Password reset rejected: {redeemed.error.code.value}")
                return Return.err(
                    Error(ErrorCode.invalid_or_expired_token, "Invalid or expired token")
                )

            user_id = redeemed.value
            password_hash = await self.hasher.hash(new_password)
            if not await self.uow.users.update_password_hash(user_id, password_hash):
                return Return.err(
                    Error(ErrorCode.invalid_or_expired_token, "Invalid or expired token")
                )

            await self.uow.commit()

        logger.info(f"Password reset for user {user_id}")
        return Return.ok(MessageResponse(message="Password has been reset successfully"))
