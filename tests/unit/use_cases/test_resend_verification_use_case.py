import pytest

from auth_service.app.use_cases.auth import (
    ResendVerificationUseCase,
    ValidateResendVerificationUseCase,
)
from auth_service.domain.entities import TokenPurpose, User
from auth_service.domain.errors import ErrorCode


def _user(verified):
    return User(
        id=2,
        username="bob",
        email="bob@example.com",
        password_hash="$2b$04$" + "x" * 53,
        email_verified=verified,
    )


@pytest.mark.asyncio
async def test_resend_issues_new_token(mock_uow, notifier):
    """Test prior tokens are replaced and the new one mailed"""
    mock_uow.users.get_by_email.return_value = _user(verified=False)

    result = await ResendVerificationUseCase(mock_uow, notifier).execute("bob@example.com")

    assert result.is_ok()
    assert result.value.message == "Verification email sent"
    mock_uow.email_verification_tokens.delete_unused_by_user_id.assert_called_once_with(2)
    mock_uow.commit.assert_called_once()
    assert notifier.send.call_args.args[2] == TokenPurpose.email_verification


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "user, message",
    [(None, "Email not found"), (_user(verified=True), "Email already verified")],
)
async def test_resend_precondition(mock_uow, notifier, user, message):
    mock_uow.users.get_by_email.return_value = user

    for use_case in (
        ResendVerificationUseCase(mock_uow, notifier),
        ValidateResendVerificationUseCase(mock_uow),
    ):
        result = await use_case.execute("bob@example.com")

        assert result.is_err()
        assert result.error.code == ErrorCode.validation_error
        assert result.error.details == [{"field": "email", "message": message}]

    notifier.send.assert_not_called()


@pytest.mark.asyncio
async def test_validate_resend_passes_for_unverified_user(mock_uow):
    mock_uow.users.get_by_email.return_value = _user(verified=False)

    result = await ValidateResendVerificationUseCase(mock_uow).execute("bob@example.com")

    assert result.is_ok()
