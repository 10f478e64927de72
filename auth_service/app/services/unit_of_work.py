from abc import ABC, abstractmethod

from auth_service.app.repositories.single_use_token_repository import ISingleUseTokenRepository
from auth_service.app.repositories.token_blacklist_repository import ITokenBlacklistRepository
from auth_service.app.repositories.user_repository import IUserRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    users: IUserRepository
    token_blacklist: ITokenBlacklistRepository
    password_reset_tokens: ISingleUseTokenRepository
    email_verification_tokens: ISingleUseTokenRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
