"""
Validate Resend Verification Use Case

Precondition check for resend-verification-email.
"""

from auth_service.app.services.unit_of_work import UnitOfWork
from auth_service.app.use_cases.base import (
    field_error,
    store_error_boundary,
    validation_error,
)
from auth_service.libs.result import Result, Return


class ValidateResendVerificationUseCase:
    """Email must belong to a user whose email is not verified yet"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @store_error_boundary
    async def execute(self, email: str) -> Result[None]:
        async with self.uow:
            user = await self.uow.users.get_by_email(email)

            if user is None:
                return Return.err(validation_error(field_error("email", "Email not found")))
            if user.email_verified:
                return Return.err(
                    validation_error(field_error("email", "Email already verified"))
                )
            return Return.ok(None)
