from typing import Optional

from sqlalchemy import or_, update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from auth_service.adapter.repositories.store_errors import translate_store_errors
from auth_service.app.repositories.user_repository import IUserRepository
from auth_service.domain.entities import User


class UserRepository(IUserRepository):
    """User repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email address"""
        stmt = select(User).where(User.email == email)
        with translate_store_errors():
            result = await self.session.exec(stmt)
            return result.one_or_none()

    async def get_by_username(self, username: str) -> Optional[User]:
        """Get user by username"""
        stmt = select(User).where(User.username == username)
        with translate_store_errors():
            result = await self.session.exec(stmt)
            return result.one_or_none()

    async def get_by_username_or_email(self, identifier: str) -> Optional[User]:
        """Get user whose username or email equals the identifier"""
        stmt = select(User).where(
            or_(User.username == identifier, User.email == identifier)
        )
        with translate_store_errors():
            result = await self.session.exec(stmt)
            return result.first()

    async def create(self, user: User) -> User:
        """Create a new user"""
        with translate_store_errors():
            self.session.add(user)
            await self.session.flush()
            await self.session.refresh(user)
            return user

    async def update_password_hash(self, user_id: int, password_hash: str) -> bool:
        """Replace a user's password hash"""
        stmt = update(User).where(User.id == user_id).values(password_hash=password_hash)
        with translate_store_errors():
            result = await self.session.execute(stmt)
            await self.session.flush()
            return result.rowcount > 0

    async def mark_email_verified(self, user_id: int) -> bool:
        """Set email_verified=True"""
        stmt = update(User).where(User.id == user_id).values(email_verified=True)
        with translate_store_errors():
            result = await self.session.execute(stmt)
            await self.session.flush()
            return result.rowcount > 0
