"""
Login Use Case

Authenticates a user by username or email and issues a session token.
"""

import logging

from auth_service.app.services.password_hasher import PasswordHasher
from auth_service.app.services.session_token_codec import SessionTokenCodec
from auth_service.app.services.unit_of_work import UnitOfWork
from auth_service.app.use_cases.base import store_error_boundary
from auth_service.domain.errors import ErrorCode
from auth_service.libs.result import Error, Result, Return
from .dtos import LoginResponse, UserInfo

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS_MESSAGE = "Invalid credentials"


class LoginUseCase:
    """
    Use case for user login.

    Business Rules:
    - Identifier matches username OR email
    - Unknown identifier and wrong password return the same error
    - A bcrypt check runs even when no user matched (constant time)
    - email_verified does not gate login
    """

    def __init__(self, uow: UnitOfWork, hasher: PasswordHasher, codec: SessionTokenCodec):
        self.uow = uow
        self.hasher = hasher
        self.codec = codec

    @store_error_boundary
    async def execute(self, identifier: str, password: str) -> Result[LoginResponse]:
        """
        Execute login use case.

        Args:
            identifier: Username or email
            password: Plain text password

        Returns:
            Result with LoginResponse containing the session token, or Error
        """
        async with self.uow:
            user = await self.uow.users.get_by_username_or_email(identifier)

            if user is None:
                await self.hasher.verify_dummy(password)
                return Return.err(
                    Error(ErrorCode.invalid_credentials, INVALID_CREDENTIALS_MESSAGE)
                )

            if not await self.hasher.verify(password, user.password_hash):
                return Return.err(
                    Error(ErrorCode.invalid_credentials, INVALID_CREDENTIALS_MESSAGE)
                )

            issued = self.codec.issue(user.id)

            logger.info(f"User {user.id} logged in")
            return Return.ok(
                LoginResponse(
                    message="Login successful",
                    user=UserInfo(
                        id=user.id,
                        username=user.username,
                        email=user.email,
                        email_verified=user.email_verified,
                    ),
                    token=issued.token,
                )
            )
