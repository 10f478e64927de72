from abc import ABC, abstractmethod

from auth_service.domain.entities import TokenPurpose


class INotificationSender(ABC):
    """Out-of-band delivery of single-use tokens to their owner"""

    @abstractmethod
    async def send(self, email: str, token: str, purpose: TokenPurpose) -> None:
        """Deliver a token to the email address. Must not raise on delivery failure"""
        pass
