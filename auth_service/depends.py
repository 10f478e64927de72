from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from auth_service.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from auth_service.api.error import raise_for_error
from auth_service.app.services.notification_sender import INotificationSender
from auth_service.app.services.password_hasher import PasswordHasher
from auth_service.app.services.session_token_codec import SessionTokenCodec
from auth_service.app.services.single_use_token_manager import TokenLifetimes
from auth_service.app.use_cases.auth import AuthenticateUseCase, SessionInfo
from auth_service.domain.errors import ErrorCode
from auth_service.libs.result import Error

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

# auto_error=False so a missing header maps to our own 401 body
security = HTTPBearer(auto_error=False)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_token_codec(request: Request) -> SessionTokenCodec:
    return request.app.state.token_codec


def get_password_hasher(request: Request) -> PasswordHasher:
    return request.app.state.password_hasher


def get_notification_sender(request: Request) -> INotificationSender:
    return request.app.state.notification_sender


def get_token_lifetimes(request: Request) -> TokenLifetimes:
    return request.app.state.token_lifetimes


async def get_bearer_token(
    credentials: HTTPAuthorizationCredentials = Depends(security),
) -> str:
    """
    Extract the raw token from an "Authorization: Bearer <token>" header.

    Raises:
        ClientError: 401 UNAUTHENTICATED if the header is absent or not Bearer
    """
    # HTTPBearer matches the scheme case-insensitively; only "Bearer" is accepted
    if credentials is None or credentials.scheme != "Bearer" or not credentials.credentials:
        raise_for_error(Error(ErrorCode.unauthenticated, "No token provided"))
    return credentials.credentials


async def get_current_session(
    token: str = Depends(get_bearer_token),
    uow=Depends(get_unit_of_work),
    codec: SessionTokenCodec = Depends(get_token_codec),
) -> SessionInfo:
    """
    Dependency for authenticated routes: verifies the token and checks the
    revocation ledger.

    Raises:
        ClientError: 401 if token is invalid, expired or revoked
    """
    result = await AuthenticateUseCase(uow, codec).execute(token)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
