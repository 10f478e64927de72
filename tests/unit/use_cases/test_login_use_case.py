from unittest.mock import AsyncMock

import pytest

from auth_service.app.use_cases.auth import LoginUseCase
from auth_service.domain.entities import User
from auth_service.domain.errors import ErrorCode


@pytest.fixture
def user(hasher):
    return User(
        id=5,
        username="alice",
        email="alice@example.com",
        password_hash=hasher.hash_sync("Str0ng!Pass"),
        email_verified=False,
    )


@pytest.mark.asyncio
async def test_login_success(mock_uow, hasher, codec, user):
    """Test login returns a session token for the matching user"""
    # Arrange
    mock_uow.users.get_by_username_or_email.return_value = user
    use_case = LoginUseCase(mock_uow, hasher, codec)

    # Act
    result = await use_case.execute("alice", "Str0ng!Pass")

    # Assert
    assert result.is_ok()
    assert result.value.message == "Login successful"
    assert result.value.user.id == 5
    assert codec.verify(result.value.token).value.user_id == 5
    mock_uow.users.get_by_username_or_email.assert_called_once_with("alice")


@pytest.mark.asyncio
async def test_login_unverified_email_is_allowed(mock_uow, hasher, codec, user):
    """Test email verification does not gate login"""
    mock_uow.users.get_by_username_or_email.return_value = user

    result = await LoginUseCase(mock_uow, hasher, codec).execute(
        "alice@example.com", "Str0ng!Pass"
    )

    assert result.is_ok()
    assert result.value.user.email_verified is False


@pytest.mark.asyncio
async def test_unknown_user_and_wrong_password_are_indistinguishable(
    mock_uow, hasher, codec, user
):
    """Test both failures carry the same code and message"""
    use_case = LoginUseCase(mock_uow, hasher, codec)

    mock_uow.users.get_by_username_or_email.return_value = None
    unknown = await use_case.execute("nobody", "Str0ng!Pass")

    mock_uow.users.get_by_username_or_email.return_value = user
    wrong = await use_case.execute("alice", "Wr0ng!Pass")

    assert unknown.is_err() and wrong.is_err()
    assert unknown.error == wrong.error
    assert unknown.error.code == ErrorCode.invalid_credentials
    assert unknown.error.message == "Invalid credentials"


@pytest.mark.asyncio
async def test_unknown_user_still_runs_bcrypt(mock_uow, hasher, codec):
    """Test a dummy hash check runs when no user matched"""
    hasher.verify_dummy = AsyncMock()

    await LoginUseCase(mock_uow, hasher, codec).execute("nobody", "Str0ng!Pass")

    hasher.verify_dummy.assert_called_once_with("Str0ng!Pass")
