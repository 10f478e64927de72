"""
Password hashing and verification.

Uses bcrypt with a per-call random salt and a fixed work factor. Hashing
runs in a worker thread so the event loop keeps serving other requests.
"""

import asyncio

import bcrypt

DEFAULT_ROUNDS = 10
MAX_PASSWORD_BYTES = 72  # bcrypt ignores or rejects anything longer


class PasswordHasher:
    """bcrypt hasher with a fixed cost factor"""

    def __init__(self, rounds: int = DEFAULT_ROUNDS):
        self.rounds = rounds
        # Compared against when no user matched a login, to equalize timing
        self._dummy_hash = self.hash_sync("dummy_password")

    def hash_sync(self, plaintext: str) -> str:
        return bcrypt.hashpw(
            plaintext.encode("utf-8"), bcrypt.gensalt(self.rounds)
        ).decode("utf-8")

    def verify_sync(self, plaintext: str, digest: str) -> bool:
        """Constant-time comparison against a bcrypt hash. False on malformed digest."""
        try:
            return bcrypt.checkpw(plaintext.encode("utf-8"), digest.encode("utf-8"))
        except (ValueError, TypeError, AttributeError):
            return False

    async def hash(self, plaintext: str) -> str:
        return await asyncio.to_thread(self.hash_sync, plaintext)

    async def verify(self, plaintext: str, digest: str) -> bool:
        return await asyncio.to_thread(self.verify_sync, plaintext, digest)

    async def verify_dummy(self, plaintext: str) -> None:
        """Spend one verification's worth of CPU without a real digest"""
        await asyncio.to_thread(self.verify_sync, plaintext, self._dummy_hash)
