from typing import Optional, Type

from sqlalchemy import delete, update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from auth_service.adapter.repositories.store_errors import translate_store_errors
from auth_service.app.repositories.single_use_token_repository import ISingleUseTokenRepository
from auth_service.domain.entities import SingleUseTokenBase


class SingleUseTokenRepository(ISingleUseTokenRepository):
    """
    Single-use token repository implementation using SQLModel.

    Bound to one token table (PasswordResetToken or EmailVerificationToken).
    """

    def __init__(self, session: AsyncSession, model: Type[SingleUseTokenBase]):
        self.session = session
        self.model = model

    async def create(self, token: SingleUseTokenBase) -> SingleUseTokenBase:
        """Create a new token row"""
        with translate_store_errors():
            self.session.add(token)
            await self.session.flush()
            await self.session.refresh(token)
            return token

    async def get_unused_by_token_hash(self, token_hash: str) -> Optional[SingleUseTokenBase]:
        """Get the unused token with this hash"""
        stmt = select(self.model).where(
            self.model.token_hash == token_hash,
            self.model.used == False,
        )
        with translate_store_errors():
            result = await self.session.exec(stmt)
            return result.one_or_none()

    async def delete_unused_by_user_id(self, user_id: int) -> int:
        """Delete every unused token of a user"""
        stmt = delete(self.model).where(
            self.model.user_id == user_id,
            self.model.used == False,
        )
        with translate_store_errors():
            result = await self.session.execute(stmt)
            await self.session.flush()
            return result.rowcount

    async def mark_used(self, token_id: int) -> bool:
        """
        Conditional UPDATE ... SET used=true WHERE id=? AND used=false.

        The row lock taken by the update serializes concurrent redeemers;
        only the first sees rowcount 1.
        """
        stmt = (
            update(self.model)
            .where(self.model.id == token_id, self.model.used == False)
            .values(used=True)
        )
        with translate_store_errors():
            result = await self.session.execute(stmt)
            await self.session.flush()
            return result.rowcount == 1
