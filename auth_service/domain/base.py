import hashlib
from datetime import UTC, datetime


def utcnow() -> datetime:
    """Naive UTC timestamp, matching the DateTime columns the store uses."""
    return datetime.now(UTC).replace(tzinfo=None)


def hash_token(token: str) -> str:
    """SHA-256 hex digest under which bearer secrets are stored."""
    return hashlib.sha256(token.encode("utf-8")).hexdigest()
