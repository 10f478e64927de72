"""
Validate Registration Use Case

Uniqueness half of registration validation (format is checked by the
request models). Runs before RegisterUseCase.
"""

from auth_service.app.services.unit_of_work import UnitOfWork
from auth_service.app.use_cases.base import (
    field_error,
    store_error_boundary,
    validation_error,
)
from auth_service.libs.result import Result, Return


class ValidateRegistrationUseCase:
    """
    Business Rules:
    - Username must not be taken
    - Email must not be taken (this is the one place the service reveals
      whether an email is registered)
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @store_error_boundary
    async def execute(self, username: str, email: str) -> Result[None]:
        errors = []
        async with self.uow:
            if await self.uow.users.get_by_username(username) is not None:
                errors.append(field_error("username", "Username already exists"))
            if await self.uow.users.get_by_email(email) is not None:
                errors.append(field_error("email", "Email already exists"))

        if errors:
            return Return.err(validation_error(*errors))
        return Return.ok(None)
