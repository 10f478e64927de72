"""
Register Use Case

Creates a user account and signs the user in.
"""

import logging

from auth_service.app.services.notification_sender import INotificationSender
from auth_service.app.services.password_hasher import PasswordHasher
from auth_service.app.services.session_token_codec import SessionTokenCodec
from auth_service.app.services.single_use_token_manager import (
    SingleUseTokenManager,
    TokenLifetimes,
)
from auth_service.app.services.unit_of_work import UnitOfWork
from auth_service.app.use_cases.base import store_error_boundary
from auth_service.domain.entities import TokenPurpose, User
from auth_service.domain.errors import ErrorCode, UniqueViolationError
from auth_service.libs.result import Error, Result, Return
from .dtos import RegisterCommand, RegisterResponse, UserInfo

logger = logging.getLogger(__name__)


class RegisterUseCase:
    """
    Register Use Case

    Command/Response Pattern:
    - Input: RegisterCommand (format and uniqueness already validated)
    - Output: Result[RegisterResponse]

    Business Logic:
    1. Hash password with bcrypt
    2. Create User with email_verified=False
    3. Issue email verification token (replaces none, user is new)
    4. Commit transaction atomically
    5. Issue session token
    6. Send verification token out of band

    A uniqueness violation at insert time (a concurrent registration slipped
    past validation) is reported as DUPLICATE_USER, not as a server error.
    """

    def __init__(
        self,
        uow: UnitOfWork,
        hasher: PasswordHasher,
        codec: SessionTokenCodec,
        notifier: INotificationSender,
        lifetimes: TokenLifetimes = None,
    ):
        self.uow = uow
        self.hasher = hasher
        self.codec = codec
        self.notifier = notifier
        self.lifetimes = lifetimes

    @store_error_boundary
    async def execute(self, command: RegisterCommand) -> Result[RegisterResponse]:
        """
        Execute register use case

        Args:
            command: RegisterCommand with validated username, email, password

        Returns:
            Result[RegisterResponse] with user data and session token,
            or Error(DUPLICATE_USER)
        """
        async with self.uow:
            password_hash = await self.hasher.hash(command.password)

            try:
                user = await self.uow.users.create(
                    User(
                        username=command.username,
                        email=command.email,
                        password_hash=password_hash,
                        email_verified=False,
                    )
                )
            except UniqueViolationError:
                logger.warning("Registration lost a uniqueness race")
                return Return.err(Error(ErrorCode.duplicate_user, "User already exists"))

            tokens = SingleUseTokenManager(self.uow, self.lifetimes)
            verification_token = await tokens.issue(
                user.id, TokenPurpose.email_verification
            )

            await self.uow.commit()

            issued = self.codec.issue(user.id)
            await self.notifier.send(
                user.email, verification_token, TokenPurpose.email_verification
            )

            logger.info(f"User {user.id} registered")
            return Return.ok(
                RegisterResponse(
                    message="User created successfully",
                    user=UserInfo(
                        id=user.id,
                        username=user.username,
                        email=user.email,
                        email_verified=user.email_verified,
                    ),
                    token=issued.token,
                )
            )
