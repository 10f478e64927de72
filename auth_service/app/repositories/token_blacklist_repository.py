from abc import ABC, abstractmethod
from datetime import datetime

from auth_service.domain.entities import TokenBlacklist


class ITokenBlacklistRepository(ABC):
    """TokenBlacklist repository interface - application layer"""

    @abstractmethod
    async def exists(self, token_hash: str) -> bool:
        """Check whether a token hash is blacklisted"""
        pass

    @abstractmethod
    async def create(self, entry: TokenBlacklist) -> TokenBlacklist:
        """Insert a blacklist entry. Raises UniqueViolationError if already present"""
        pass

    @abstractmethod
    async def delete_expired(self, now: datetime) -> int:
        """Delete entries whose expires_at is before now. Returns count deleted"""
        pass
