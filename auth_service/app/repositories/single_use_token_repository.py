from abc import ABC, abstractmethod
from typing import Optional

from auth_service.domain.entities import SingleUseTokenBase


class ISingleUseTokenRepository(ABC):
    """
    Single-use token repository interface - application layer

    One instance per purpose; password reset and email verification tokens
    share this contract.
    """

    @abstractmethod
    async def create(self, token: SingleUseTokenBase) -> SingleUseTokenBase:
        """Create a new token row"""
        pass

    @abstractmethod
    async def get_unused_by_token_hash(self, token_hash: str) -> Optional[SingleUseTokenBase]:
        """Get the unused token with this hash, if any (expired rows included)"""
        pass

    @abstractmethod
    async def delete_unused_by_user_id(self, user_id: int) -> int:
        """Delete every unused token of a user. Returns count deleted"""
        pass

    @abstractmethod
    async def mark_used(self, token_id: int) -> bool:
        """
        Flip used to True only if it is still False.

        Returns True for exactly one caller per token, even under concurrency.
        """
        pass
