from abc import ABC, abstractmethod
from typing import Optional

from auth_service.domain.entities import User


class IUserRepository(ABC):
    """User repository interface - application layer"""

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email address"""
        pass

    @abstractmethod
    async def get_by_username(self, username: str) -> Optional[User]:
        """Get user by username"""
        pass

    @abstractmethod
    async def get_by_username_or_email(self, identifier: str) -> Optional[User]:
        """Get user whose username or email equals the identifier"""
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """Create a new user. Raises UniqueViolationError on duplicate username/email"""
        pass

    @abstractmethod
    async def update_password_hash(self, user_id: int, password_hash: str) -> bool:
        """Replace a user's password hash. Returns True if the user exists"""
        pass

    @abstractmethod
    async def mark_email_verified(self, user_id: int) -> bool:
        """Set email_verified=True. Returns True if the user exists"""
        pass
