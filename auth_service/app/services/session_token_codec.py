"""
Session Token Codec

Signs and verifies the stateless bearer token handed out at register/login.
The codec never looks at the revocation ledger; that check belongs to the
use cases that accept a token.
"""

import uuid
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Optional

from jose import ExpiredSignatureError, JWTError, jwt

from auth_service.domain.errors import ConfigError, ErrorCode
from auth_service.libs.result import Error, Result, Return

DEFAULT_ALGORITHM = "HS256"
DEFAULT_TTL = timedelta(hours=24)


@dataclass(frozen=True)
class TokenSettings:
    secret: Optional[str]
    algorithm: str = DEFAULT_ALGORITHM
    ttl: timedelta = DEFAULT_TTL

    @classmethod
    def from_config(cls, config) -> "TokenSettings":
        return cls(
            secret=config.JWT_SECRET,
            algorithm=config.JWT_ALGORITHM,
            ttl=timedelta(hours=config.SESSION_TOKEN_TTL_HOURS),
        )


@dataclass(frozen=True)
class IssuedToken:
    token: str
    issued_at: datetime
    expires_at: datetime


@dataclass(frozen=True)
class SessionClaims:
    user_id: int
    issued_at: datetime
    expires_at: datetime


def _from_timestamp(value: int) -> datetime:
    return datetime.fromtimestamp(value, UTC).replace(tzinfo=None)


class SessionTokenCodec:
    """
    HS256 JWT codec for session tokens.

    Claims: user_id, iat, exp, and a random jti so that two tokens issued to
    the same user within the same second are still distinct (and can be
    revoked independently).
    """

    def __init__(self, settings: TokenSettings):
        if not settings.secret or not settings.secret.strip():
            raise ConfigError("JWT_SECRET is not configured")
        self._settings = settings

    def issue(self, user_id: int) -> IssuedToken:
        """
        Issue a signed session token.

        Args:
            user_id: ID of the authenticated user

        Returns:
            IssuedToken with the encoded token and its validity window
        """
        # JWT timestamps have second precision
        issued_at = datetime.now(UTC).replace(microsecond=0)
        expires_at = issued_at + self._settings.ttl
        payload = {
            "user_id": user_id,
            "iat": issued_at,
            "exp": expires_at,
            "jti": uuid.uuid4().hex,
        }
        token = jwt.encode(
            payload, self._settings.secret, algorithm=self._settings.algorithm
        )
        return IssuedToken(
            token=token,
            issued_at=issued_at.replace(tzinfo=None),
            expires_at=expires_at.replace(tzinfo=None),
        )

    def verify(self, token: str) -> Result[SessionClaims]:
        """
        Verify signature, structure and expiry of a session token.

        Errors:
            - MALFORMED_TOKEN: bad signature, bad encoding or missing claims
            - TOKEN_EXPIRED: now >= exp
        """
        try:
            payload = jwt.decode(
                token,
                self._settings.secret,
                algorithms=[self._settings.algorithm],
                options={"require_exp": True, "require_iat": True},
            )
        except ExpiredSignatureError:
            return Return.err(Error(ErrorCode.token_expired, "Token expired"))
        except JWTError:
            return Return.err(Error(ErrorCode.malformed_token, "Invalid token"))

        user_id = payload.get("user_id")
        if not isinstance(user_id, int) or isinstance(user_id, bool):
            return Return.err(Error(ErrorCode.malformed_token, "Invalid token"))

        try:
            issued_at = _from_timestamp(int(payload["iat"]))
            expires_at = _from_timestamp(int(payload["exp"]))
        except (TypeError, ValueError, OverflowError):
            return Return.err(Error(ErrorCode.malformed_token, "Invalid token"))

        # jose tolerates now == exp; a token is only valid strictly before exp
        if datetime.now(UTC).replace(tzinfo=None) >= expires_at:
            return Return.err(Error(ErrorCode.token_expired, "Token expired"))

        return Return.ok(
            SessionClaims(user_id=user_id, issued_at=issued_at, expires_at=expires_at)
        )
