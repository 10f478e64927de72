"""
Unit tests for SingleUseTokenManager
"""
import asyncio
import re
from datetime import timedelta

import pytest

from auth_service.app.services.single_use_token_manager import (
    SingleUseTokenManager,
    TokenLifetimes,
)
from auth_service.domain.base import hash_token, utcnow
from auth_service.domain.entities import (
    EmailVerificationToken,
    PasswordResetToken,
    TokenPurpose,
)
from auth_service.domain.errors import ErrorCode


@pytest.mark.asyncio
async def test_issue_reset_token(mock_uow):
    manager = SingleUseTokenManager(mock_uow)

    token = await manager.issue(7, TokenPurpose.password_reset)

    assert re.fullmatch(r"[0-9a-f]{64}", token)

    repo = mock_uow.password_reset_tokens
    repo.delete_unused_by_user_id.assert_called_once_with(7)
    stored = repo.create.call_args.args[0]
    assert isinstance(stored, PasswordResetToken)
    assert stored.user_id == 7
    assert stored.used is False
    assert stored.token_hash == hash_token(token)
    assert stored.token_hash != token

    mock_uow.email_verification_tokens.create.assert_not_called()


@pytest.mark.asyncio
async def test_issue_deletes_prior_tokens_before_insert(mock_uow):
    calls = []
    repo = mock_uow.password_reset_tokens
    repo.delete_unused_by_user_id.side_effect = lambda *_: calls.append("delete") or 1
    repo.create.side_effect = lambda *_: calls.append("create")

    await SingleUseTokenManager(mock_uow).issue(7, TokenPurpose.password_reset)

    assert calls == ["delete", "create"]


@pytest.mark.asyncio
async def test_issue_uses_purpose_lifetimes(mock_uow):
    manager = SingleUseTokenManager(mock_uow)
    before = utcnow()

    await manager.issue(7, TokenPurpose.password_reset)
    await manager.issue(7, TokenPurpose.email_verification)

    reset = mock_uow.password_reset_tokens.create.call_args.args[0]
    verification = mock_uow.email_verification_tokens.create.call_args.args[0]
    assert isinstance(verification, EmailVerificationToken)
    assert timedelta(minutes=59) < reset.expires_at - before <= timedelta(hours=1, seconds=5)
    assert timedelta(hours=23) < verification.expires_at - before <= timedelta(hours=24, seconds=5)


@pytest.mark.asyncio
async def test_issue_uses_configured_lifetimes(mock_uow):
    lifetimes = TokenLifetimes(
        ttl={
            TokenPurpose.password_reset: timedelta(minutes=5),
            TokenPurpose.email_verification: timedelta(hours=2),
        }
    )
    before = utcnow()

    await SingleUseTokenManager(mock_uow, lifetimes).issue(7, TokenPurpose.password_reset)

    reset = mock_uow.password_reset_tokens.create.call_args.args[0]
    assert reset.expires_at - before <= timedelta(minutes=5, seconds=5)


@pytest.mark.asyncio
async def test_redeem_success(mock_uow):
    stored = PasswordResetToken(
        id=3,
        user_id=7,
        token_hash=hash_token("abc"),
        used=False,
        expires_at=utcnow() + timedelta(minutes=30),
    )
    repo = mock_uow.password_reset_tokens
    repo.get_unused_by_token_hash.return_value = stored

    result = await SingleUseTokenManager(mock_uow).redeem("abc", TokenPurpose.password_reset)

    assert result.is_ok()
    assert result.value == 7
    repo.get_unused_by_token_hash.assert_called_once_with(hash_token("abc"))
    repo.mark_used.assert_called_once_with(3)


@pytest.mark.asyncio
async def test_redeem_unknown_token(mock_uow):
    result = await SingleUseTokenManager(mock_uow).redeem("nope", TokenPurpose.password_reset)

    assert result.is_err()
    assert result.error.code == ErrorCode.token_not_found
    mock_uow.password_reset_tokens.mark_used.assert_not_called()


@pytest.mark.asyncio
async def test_redeem_expired_token_is_not_consumed(mock_uow):
    stored = EmailVerificationToken(
        id=3,
        user_id=7,
        token_hash=hash_token("abc"),
        used=False,
        expires_at=utcnow() - timedelta(seconds=1),
    )
    repo = mock_uow.email_verification_tokens
    repo.get_unused_by_token_hash.return_value = stored

    result = await SingleUseTokenManager(mock_uow).redeem(
        "abc", TokenPurpose.email_verification
    )

    assert result.is_err()
    assert result.error.code == ErrorCode.token_expired
    repo.mark_used.assert_not_called()


@pytest.mark.asyncio
async def test_concurrent_redeem_succeeds_once(mock_uow):
    stored = PasswordResetToken(
        id=3,
        user_id=7,
        token_hash=hash_token("abc"),
        used=False,
        expires_at=utcnow() + timedelta(minutes=30),
    )
    repo = mock_uow.password_reset_tokens
    repo.get_unused_by_token_hash.return_value = stored
    # The conditional UPDATE matches a row for the first caller only
    repo.mark_used.side_effect = [True, False]

    manager = SingleUseTokenManager(mock_uow)
    results = await asyncio.gather(
        manager.redeem("abc", TokenPurpose.password_reset),
        manager.redeem("abc", TokenPurpose.password_reset),
    )

    assert sum(r.is_ok() for r in results) == 1
    failed = [r for r in results if r.is_err()]
    assert failed[0].error.code == ErrorCode.token_not_found
