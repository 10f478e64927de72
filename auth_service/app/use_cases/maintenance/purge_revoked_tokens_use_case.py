"""
Purge Revoked Tokens Use Case

Compacts the token blacklist by dropping entries whose token has expired
anyway.
"""

from pydantic import BaseModel

from auth_service.app.services.revocation_ledger import RevocationLedger
from auth_service.app.services.unit_of_work import UnitOfWork
from auth_service.app.use_cases.base import store_error_boundary
from auth_service.libs.result import Result, Return


class PurgeRevokedTokensResponse(BaseModel):
    purged: int


class PurgeRevokedTokensUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @store_error_boundary
    async def execute(self) -> Result[PurgeRevokedTokensResponse]:
        async with self.uow:
            purged = await RevocationLedger(self.uow).purge_expired()
            await self.uow.commit()

        return Return.ok(PurgeRevokedTokensResponse(purged=purged))
