from unittest.mock import AsyncMock, MagicMock

import pytest

from auth_service.app.services.password_hasher import PasswordHasher
from auth_service.app.services.session_token_codec import SessionTokenCodec, TokenSettings


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork with all repositories"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = MagicMock()
    uow.users.get_by_email = AsyncMock(return_value=None)
    uow.users.get_by_username = AsyncMock(return_value=None)
    uow.users.get_by_username_or_email = AsyncMock(return_value=None)
    uow.users.create = AsyncMock()
    uow.users.update_password_hash = AsyncMock(return_value=True)
    uow.users.mark_email_verified = AsyncMock(return_value=True)

    uow.token_blacklist = MagicMock()
    uow.token_blacklist.exists = AsyncMock(return_value=False)
    uow.token_blacklist.create = AsyncMock()
    uow.token_blacklist.delete_expired = AsyncMock(return_value=0)

    for name in ("password_reset_tokens", "email_verification_tokens"):
        repo = MagicMock()
        repo.create = AsyncMock()
        repo.get_unused_by_token_hash = AsyncMock(return_value=None)
        repo.delete_unused_by_user_id = AsyncMock(return_value=0)
        repo.mark_used = AsyncMock(return_value=True)
        setattr(uow, name, repo)

    return uow


@pytest.fixture
def hasher():
    # Minimum bcrypt cost keeps the suite fast
    return PasswordHasher(rounds=4)


@pytest.fixture
def codec():
    return SessionTokenCodec(TokenSettings(secret="unit-test-secret"))


@pytest.fixture
def notifier():
    sender = MagicMock()
    sender.send = AsyncMock()
    return sender
