"""
Resend Verification Email Use Case

Issues a fresh email verification token.
"""

import logging

from auth_service.app.services.notification_sender import INotificationSender
from auth_service.app.services.single_use_token_manager import (
    SingleUseTokenManager,
    TokenLifetimes,
)
from auth_service.app.services.unit_of_work import UnitOfWork
from auth_service.app.use_cases.base import (
    field_error,
    store_error_boundary,
    validation_error,
)
from auth_service.domain.entities import TokenPurpose
from auth_service.libs.result import Result, Return
from .dtos import MessageResponse

logger = logging.getLogger(__name__)


class ResendVerificationUseCase:
    """
    Use case for resending email verification.

    Business Rules:
    - Email must exist and be unverified (checked by
      ValidateResendVerificationUseCase before this runs; re-checked here)
    - New token invalidates the previous one
    - Token expiry reset to 24 hours from now
    """

    def __init__(
        self,
        uow: UnitOfWork,
        notifier: INotificationSender,
        lifetimes: TokenLifetimes = None,
    ):
        self.uow = uow
        self.notifier = notifier
        self.lifetimes = lifetimes

    @store_error_boundary
    async def execute(self, email: str) -> Result[MessageResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_email(email)

            if user is None:
                return Return.err(validation_error(field_error("email", "Email not found")))
            if user.email_verified:
                return Return.err(
                    validation_error(field_error("email", "Email already verified"))
                )

            tokens = SingleUseTokenManager(self.uow, self.lifetimes)
            verification_token = await tokens.issue(
                user.id, TokenPurpose.email_verification
            )

            await self.uow.commit()

            await self.notifier.send(
                user.email, verification_token, TokenPurpose.email_verification
            )

            logger.info(f"Verification email re-sent for user {user.id}")
            return Return.ok(MessageResponse(message="Verification email sent"))
