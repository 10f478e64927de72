"""
Single-Use Token Manager

Issues and redeems the short-lived random tokens behind the password reset
and email verification flows.

Per (user, purpose) a token moves NONE -> ISSUED -> REDEEMED or EXPIRED and
never leaves REDEEMED or EXPIRED.
"""

import secrets
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Dict

from auth_service.app.repositories.single_use_token_repository import ISingleUseTokenRepository
from auth_service.app.services.unit_of_work import UnitOfWork
from auth_service.domain.base import hash_token, utcnow
from auth_service.domain.entities import (
    EmailVerificationToken,
    PasswordResetToken,
    TokenPurpose,
)
from auth_service.domain.errors import ErrorCode
from auth_service.libs.result import Error, Result, Return

TOKEN_BYTES = 32  # 256 bits, 64 hex chars

_TOKEN_MODELS = {
    TokenPurpose.password_reset: PasswordResetToken,
    TokenPurpose.email_verification: EmailVerificationToken,
}


@dataclass(frozen=True)
class TokenLifetimes:
    ttl: Dict[TokenPurpose, timedelta] = field(
        default_factory=lambda: {
            TokenPurpose.password_reset: timedelta(hours=1),
            TokenPurpose.email_verification: timedelta(hours=24),
        }
    )

    @classmethod
    def from_config(cls, config) -> "TokenLifetimes":
        return cls(
            ttl={
                TokenPurpose.password_reset: timedelta(
                    minutes=config.PASSWORD_RESET_TTL_MINUTES
                ),
                TokenPurpose.email_verification: timedelta(
                    hours=config.EMAIL_VERIFICATION_TTL_HOURS
                ),
            }
        )


class SingleUseTokenManager:
    """
    Works inside the caller's unit of work; the caller commits, so issuing
    (delete prior + insert new) lands in one transaction.

    Business Rules:
    - Token is 32 random bytes, hex encoded, stored as SHA-256 hash
    - Issuing deletes every prior unused token for the same user and purpose
    - Expired tokens stay unused and inert, they are never marked used
    - The used flag flips through a conditional update, so one token is
      redeemed at most once even under concurrent requests
    """

    def __init__(self, uow: UnitOfWork, lifetimes: TokenLifetimes = None):
        self.uow = uow
        self.lifetimes = lifetimes or TokenLifetimes()

    def _repository(self, purpose: TokenPurpose) -> ISingleUseTokenRepository:
        if purpose == TokenPurpose.password_reset:
            return self.uow.password_reset_tokens
        return self.uow.email_verification_tokens

    async def issue(self, user_id: int, purpose: TokenPurpose) -> str:
        """
        Issue a new token, invalidating earlier ones for the same user and purpose.

        Returns:
            Plain token (64 lowercase hex chars); only its hash is stored
        """
        repository = self._repository(purpose)
        await repository.delete_unused_by_user_id(user_id)

        token = secrets.token_hex(TOKEN_BYTES)
        model = _TOKEN_MODELS[purpose]
        await repository.create(
            model(
                user_id=user_id,
                token_hash=hash_token(token),
                used=False,
                expires_at=utcnow() + self.lifetimes.ttl[purpose],
            )
        )
        return token

    async def redeem(self, token: str, purpose: TokenPurpose) -> Result[int]:
        """
        Consume a token.

        Returns:
            Result with the owning user_id, or Error

        Errors:
            - TOKEN_NOT_FOUND: unknown, already used, or lost a concurrent redeem
            - TOKEN_EXPIRED: now >= expires_at
        """
        repository = self._repository(purpose)
        stored = await repository.get_unused_by_token_hash(hash_token(token))

        if stored is None:
            return Return.err(Error(ErrorCode.token_not_found, "Token not found"))

        if utcnow() >= stored.expires_at:
            return Return.err(Error(ErrorCode.token_expired, "Token has expired"))

        if not await repository.mark_used(stored.id):
            return Return.err(Error(ErrorCode.token_not_found, "Token not found"))

        return Return.ok(stored.user_id)
