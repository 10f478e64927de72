from datetime import datetime

from sqlalchemy import delete
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from auth_service.adapter.repositories.store_errors import translate_store_errors
from auth_service.app.repositories.token_blacklist_repository import ITokenBlacklistRepository
from auth_service.domain.entities import TokenBlacklist


class TokenBlacklistRepository(ITokenBlacklistRepository):
    """TokenBlacklist repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def exists(self, token_hash: str) -> bool:
        """Check whether a token hash is blacklisted"""
        stmt = select(TokenBlacklist.id).where(TokenBlacklist.token_hash == token_hash)
        with translate_store_errors():
            result = await self.session.exec(stmt)
            return result.first() is not None

    async def create(self, entry: TokenBlacklist) -> TokenBlacklist:
        """Insert a blacklist entry"""
        with translate_store_errors():
            self.session.add(entry)
            await self.session.flush()
            await self.session.refresh(entry)
            return entry

    async def delete_expired(self, now: datetime) -> int:
        """Delete entries whose expires_at is before now"""
        stmt = delete(TokenBlacklist).where(TokenBlacklist.expires_at < now)
        with translate_store_errors():
            result = await self.session.execute(stmt)
            await self.session.flush()
            return result.rowcount
