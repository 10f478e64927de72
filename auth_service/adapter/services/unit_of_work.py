from sqlmodel.ext.asyncio.session import AsyncSession

from auth_service.adapter.repositories.single_use_token_repository import SingleUseTokenRepository
from auth_service.adapter.repositories.store_errors import translate_store_errors
from auth_service.adapter.repositories.token_blacklist_repository import TokenBlacklistRepository
from auth_service.adapter.repositories.user_repository import UserRepository
from auth_service.app.services.unit_of_work import UnitOfWork
from auth_service.domain.entities import EmailVerificationToken, PasswordResetToken


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.users = UserRepository(self.session)
        self.token_blacklist = TokenBlacklistRepository(self.session)
        self.password_reset_tokens = SingleUseTokenRepository(
            self.session, PasswordResetToken
        )
        self.email_verification_tokens = SingleUseTokenRepository(
            self.session, EmailVerificationToken
        )
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        with translate_store_errors():
            await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
