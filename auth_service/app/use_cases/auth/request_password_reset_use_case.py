"""
Request Password Reset Use Case

Backs both forgot-password and send-reset-password-email.
"""

import logging

from auth_service.app.services.notification_sender import INotificationSender
from auth_service.app.services.single_use_token_manager import (
    SingleUseTokenManager,
    TokenLifetimes,
)
from auth_service.app.services.unit_of_work import UnitOfWork
from auth_service.app.use_cases.base import store_error_boundary
from auth_service.domain.entities import TokenPurpose
from auth_service.libs.result import Result, Return
from .dtos import MessageResponse

logger = logging.getLogger(__name__)

RESET_REQUESTED_MESSAGE = (
    "If an account with that email exists, a password reset link has been sent"
)


class RequestPasswordResetUseCase:
    """
    Use case for requesting a password reset.

    Business Rules:
    - Same response whether or not the email exists (no enumeration)
    - New token invalidates any earlier reset token of the user
    - Token expires in 1 hour
    - Token is delivered by the notification sender, never logged
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
        """
        Execute request password reset use case.

        Note:
            Always returns success. Only issues and sends a token if the
            email belongs to a user.
        """
        async with self.uow:
            user = await self.uow.users.get_by_email(email)

            if user is None:
                return Return.ok(MessageResponse(message=RESET_REQUESTED_MESSAGE))

            tokens = SingleUseTokenManager(self.uow, self.lifetimes)
            reset_token = await tokens.issue(user.id, TokenPurpose.password_reset)

            await self.uow.commit()

            await self.notifier.send(user.email, reset_token, TokenPurpose.password_reset)

            logger.info(f"Password reset requested for user {user.id}")
            return Return.ok(MessageResponse(message=RESET_REQUESTED_MESSAGE))
