"""
Revocation Ledger

Append-only record of session tokens revoked before their natural expiry.
"""

import logging
from datetime import datetime
from typing import Optional

from auth_service.app.services.unit_of_work import UnitOfWork
from auth_service.domain.base import hash_token, utcnow
from auth_service.domain.entities import TokenBlacklist
from auth_service.domain.errors import UniqueViolationError

logger = logging.getLogger(__name__)


class RevocationLedger:
    """
    Works inside the caller's unit of work; the caller commits.

    Business Rules:
    - A token appears at most once
    - Revoking an already revoked token is a successful no-op
    - Entries past expires_at may be purged; correctness never depends on it
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def is_revoked(self, token: str) -> bool:
        return await self.uow.token_blacklist.exists(hash_token(token))

    async def revoke(self, token: str, expires_at: datetime) -> bool:
        """
        Blacklist a token until its natural expiry.

        Returns:
            True if a new entry was written, False if the token was already revoked
        """
        token_hash = hash_token(token)
        if await self.uow.token_blacklist.exists(token_hash):
            return False

        try:
            await self.uow.token_blacklist.create(
                TokenBlacklist(token_hash=token_hash, expires_at=expires_at)
            )
        except UniqueViolationError:
            # A concurrent logout of the same token won the insert
            return False
        return True

    async def purge_expired(self, now: Optional[datetime] = None) -> int:
        purged = await self.uow.token_blacklist.delete_expired(now or utcnow())
        logger.info(f"Purged {purged} expired token blacklist entries")
        return purged
