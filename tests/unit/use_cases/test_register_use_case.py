from unittest.mock import AsyncMock

import pytest

from auth_service.app.use_cases.auth import RegisterCommand, RegisterUseCase
from auth_service.domain.entities import EmailVerificationToken, TokenPurpose
from auth_service.domain.errors import (
    ErrorCode,
    StoreUnavailableError,
    UniqueViolationError,
)


def _assign_id(user):
    user.id = 1
    return user


@pytest.fixture
def command():
    return RegisterCommand(username="alice", email="alice@example.com", password="Str0ng!Pass")


@pytest.mark.asyncio
async def test_register_success(mock_uow, hasher, codec, notifier, command):
    """Test user is created unverified and signed in"""
    # Arrange
    mock_uow.users.create.side_effect = _assign_id
    use_case = RegisterUseCase(mock_uow, hasher, codec, notifier)

    # Act
    result = await use_case.execute(command)

    # Assert
    assert result.is_ok()
    response = result.value
    assert response.message == "User created successfully"
    assert response.user.id == 1
    assert response.user.username == "alice"
    assert response.user.email_verified is False

    stored = mock_uow.users.create.call_args.args[0]
    assert stored.password_hash != "Str0ng!Pass"
    assert await hasher.verify("Str0ng!Pass", stored.password_hash)

    claims = codec.verify(response.token)
    assert claims.is_ok()
    assert claims.value.user_id == 1

    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_register_sends_verification_token(mock_uow, hasher, codec, notifier, command):
    """Test a verification token is issued with the user and sent after commit"""
    mock_uow.users.create.side_effect = _assign_id
    use_case = RegisterUseCase(mock_uow, hasher, codec, notifier)

    await use_case.execute(command)

    stored = mock_uow.email_verification_tokens.create.call_args.args[0]
    assert isinstance(stored, EmailVerificationToken)
    assert stored.user_id == 1

    notifier.send.assert_called_once()
    email, token, purpose = notifier.send.call_args.args
    assert email == "alice@example.com"
    assert purpose == TokenPurpose.email_verification
    assert len(token) == 64


@pytest.mark.asyncio
async def test_register_lost_uniqueness_race(mock_uow, hasher, codec, notifier, command):
    """Test a unique violation on insert is reported as a duplicate user"""
    mock_uow.users.create.side_effect = UniqueViolationError("users.username")
    use_case = RegisterUseCase(mock_uow, hasher, codec, notifier)

    result = await use_case.execute(command)

    assert result.is_err()
    assert result.error.code == ErrorCode.duplicate_user
    mock_uow.commit.assert_not_called()
    notifier.send.assert_not_called()


@pytest.mark.asyncio
async def test_register_commit_failure_sends_nothing(mock_uow, hasher, codec, notifier, command):
    """Test no session token or email leaks out when the transaction fails"""
    mock_uow.users.create.side_effect = _assign_id
    mock_uow.commit = AsyncMock(side_effect=StoreUnavailableError("down"))
    use_case = RegisterUseCase(mock_uow, hasher, codec, notifier)

    result = await use_case.execute(command)

    assert result.is_err()
    assert result.error.code == ErrorCode.transient_store_error
    notifier.send.assert_not_called()
