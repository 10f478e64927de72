from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, EmailStr, Field, field_validator

from auth_service.api.error import raise_for_error
from auth_service.api.validators import (
    validate_login_identifier,
    validate_password,
    validate_required,
    validate_username,
)
from auth_service.app.services.notification_sender import INotificationSender
from auth_service.app.services.password_hasher import PasswordHasher
from auth_service.app.services.session_token_codec import SessionTokenCodec
from auth_service.app.services.single_use_token_manager import TokenLifetimes
from auth_service.app.services.unit_of_work import UnitOfWork
from auth_service.app.use_cases.auth import (
    RegisterCommand,
    RegisterResponse,
    RegisterUseCase,
    LoginUseCase,
    LogoutUseCase,
    RequestPasswordResetUseCase,
    ResetPasswordUseCase,
    VerifyEmailUseCase,
    ResendVerificationUseCase,
    ValidateRegistrationUseCase,
    ValidateResendVerificationUseCase,
    LoginResponse,
    LogoutResponse,
    MessageResponse,
    SessionInfo,
)
from auth_service.depends import (
    get_bearer_token,
    get_current_session,
    get_notification_sender,
    get_password_hasher,
    get_token_codec,
    get_token_lifetimes,
    get_unit_of_work,
)

router = APIRouter(prefix="/auth", tags=["Authentication"])


class RegisterRequest(BaseModel):
    """
    Register HTTP request payload

    Format validation only; uniqueness is checked by ValidateRegistrationUseCase.
    """

    username: str = Field(..., description="Username (alphanumeric, min 3 chars, unique)")
    email: EmailStr = Field(..., description="Email address (unique)")
    password: str = Field(
        ..., description="Password (min 8 chars, upper, lower, digit and symbol)"
    )

    @field_validator("username")
    @classmethod
    def check_username(cls, value: str) -> str:
        return validate_username(value)

    @field_validator("password")
    @classmethod
    def check_password(cls, value: str) -> str:
        return validate_password(value)


@router.post(
    "/register", status_code=status.HTTP_201_CREATED, response_model=RegisterResponse
)
async def register(
    request: RegisterRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: PasswordHasher = Depends(get_password_hasher),
    codec: SessionTokenCodec = Depends(get_token_codec),
    notifier: INotificationSender = Depends(get_notification_sender),
    lifetimes: TokenLifetimes = Depends(get_token_lifetimes),
):
    """
    User Registration

    Creates an account, emails a verification link and returns a session token.

    Raises:
        - 400 Bad Request: VALIDATION_ERROR (format, or username/email taken)
        - 409 Conflict: DUPLICATE_USER (lost a concurrent registration race)
        - 503 Service Unavailable: TRANSIENT_STORE_ERROR
    """
    validation = await ValidateRegistrationUseCase(uow).execute(
        request.username, request.email
    )
    if validation.is_err():
        raise_for_error(validation.error)

    command = RegisterCommand(
        username=request.username, email=request.email, password=request.password
    )
    use_case = RegisterUseCase(uow, hasher, codec, notifier, lifetimes)
    result = await use_case.execute(command)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class LoginRequest(BaseModel):
    """
    Login HTTP request payload

    `username` accepts either the username or the email address.
    """

    username: str = Field(..., description="Username or email")
    password: str = Field(..., description="Password")

    @field_validator("username")
    @classmethod
    def check_username(cls, value: str) -> str:
        return validate_login_identifier(value)


@router.post("/login", status_code=status.HTTP_200_OK, response_model=LoginResponse)
async def login(
    request: LoginRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: PasswordHasher = Depends(get_password_hasher),
    codec: SessionTokenCodec = Depends(get_token_codec),
):
    """
    User Login

    Raises:
        - 401 Unauthorized: INVALID_CREDENTIALS (same body for unknown user
          and wrong password)
    """
    use_case = LoginUseCase(uow, hasher, codec)
    result = await use_case.execute(request.username, request.password)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post("/logout", status_code=status.HTTP_200_OK, response_model=LogoutResponse)
async def logout(
    token: str = Depends(get_bearer_token),
    uow: UnitOfWork = Depends(get_unit_of_work),
    codec: SessionTokenCodec = Depends(get_token_codec),
):
    """
    Logout - revokes the bearer token.

    An already revoked token still logs out successfully.

    Raises:
        - 401 Unauthorized: UNAUTHENTICATED, MALFORMED_TOKEN, TOKEN_EXPIRED
    """
    use_case = LogoutUseCase(uow, codec)
    result = await use_case.execute(token)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/session", status_code=status.HTTP_200_OK, response_model=SessionInfo)
async def session(current: SessionInfo = Depends(get_current_session)):
    """
    Current Session

    Returns the claims of the bearer token if it is valid and not revoked.

    Raises:
        - 401 Unauthorized: UNAUTHENTICATED, MALFORMED_TOKEN, TOKEN_EXPIRED,
          TOKEN_REVOKED
    """
    return current


class EmailRequest(BaseModel):
    """Payload carrying a single email address"""

    email: EmailStr = Field(..., description="Email address")


async def _request_password_reset(
    request: EmailRequest,
    uow: UnitOfWork,
    notifier: INotificationSender,
    lifetimes: TokenLifetimes,
) -> MessageResponse:
    use_case = RequestPasswordResetUseCase(uow, notifier, lifetimes)
    result = await use_case.execute(request.email)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/forgot-password", status_code=status.HTTP_200_OK, response_model=MessageResponse
)
async def forgot_password(
    request: EmailRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    notifier: INotificationSender = Depends(get_notification_sender),
    lifetimes: TokenLifetimes = Depends(get_token_lifetimes),
):
    """
    Forgot Password

    Security:
        - No email enumeration (same response for known/unknown emails)
        - Token expires in 1 hour and replaces any earlier reset token
    """
    return await _request_password_reset(request, uow, notifier, lifetimes)


@router.post(
    "/send-reset-password-email",
    status_code=status.HTTP_200_OK,
    response_model=MessageResponse,
)
async def send_reset_password_email(
    request: EmailRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    notifier: INotificationSender = Depends(get_notification_sender),
    lifetimes: TokenLifetimes = Depends(get_token_lifetimes),
):
    """Same behavior as /forgot-password"""
    return await _request_password_reset(request, uow, notifier, lifetimes)


class ResetPasswordRequest(BaseModel):
    """Reset password HTTP request payload"""

    token: str = Field(..., description="Reset token (64 hex characters)")
    password: str = Field(..., description="New password (must be strong)")

    @field_validator("token")
    @classmethod
    def check_token(cls, value: str) -> str:
        return validate_required(value)

    @field_validator("password")
    @classmethod
    def check_password(cls, value: str) -> str:
        return validate_password(value)


@router.post(
    "/reset-password", status_code=status.HTTP_200_OK, response_model=MessageResponse
)
async def reset_password(
    request: ResetPasswordRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: PasswordHasher = Depends(get_password_hasher),
):
    """
    Reset Password

    Raises:
        - 400 Bad Request: INVALID_OR_EXPIRED_TOKEN (unknown, used or expired)
        - 400 Bad Request: VALIDATION_ERROR (weak password)
    """
    use_case = ResetPasswordUseCase(uow, hasher)
    result = await use_case.execute(request.token, request.password)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class VerifyEmailRequest(BaseModel):
    """Verify email HTTP request payload"""

    token: str = Field(..., description="Email verification token")

    @field_validator("token")
    @classmethod
    def check_token(cls, value: str) -> str:
        return validate_required(value)


@router.post(
    "/verify-email", status_code=status.HTTP_200_OK, response_model=MessageResponse
)
async def verify_email(
    request: VerifyEmailRequest, uow: UnitOfWork = Depends(get_unit_of_work)
):
    """
    Email Verification

    Raises:
        - 400 Bad Request: INVALID_OR_EXPIRED_TOKEN
    """
    use_case = VerifyEmailUseCase(uow)
    result = await use_case.execute(request.token)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/resend-verification-email",
    status_code=status.HTTP_200_OK,
    response_model=MessageResponse,
)
async def resend_verification_email(
    request: EmailRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    notifier: INotificationSender = Depends(get_notification_sender),
    lifetimes: TokenLifetimes = Depends(get_token_lifetimes),
):
    """
    Resend Verification Email

    Invalidates the previous verification token.

    Raises:
        - 400 Bad Request: VALIDATION_ERROR (email unknown or already verified)
    """
    validation = await ValidateResendVerificationUseCase(uow).execute(request.email)
    if validation.is_err():
        raise_for_error(validation.error)

    use_case = ResendVerificationUseCase(uow, notifier, lifetimes)
    result = await use_case.execute(request.email)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
