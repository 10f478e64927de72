import pytest
from sqlalchemy.exc import IntegrityError, OperationalError, StatementError

from auth_service.adapter.repositories.store_errors import translate_store_errors
from auth_service.domain.errors import StoreError, StoreUnavailableError, UniqueViolationError


@pytest.mark.parametrize(
    "raised, expected",
    [
        (IntegrityError("INSERT", {}, Exception("UNIQUE constraint failed")), UniqueViolationError),
        (OperationalError("SELECT", {}, Exception("database is locked")), StoreUnavailableError),
    ],
)
def test_driver_errors(raised, expected):
    with pytest.raises(expected):
        with translate_store_errors():
            raise raised


def test_statement_error_outside_the_driver_is_a_store_error():
    raised = StatementError("bad parameter", "SELECT 1", {}, ValueError("bad"))

    with pytest.raises(StoreError) as exc_info:
        with translate_store_errors():
            raise raised

    assert not isinstance(exc_info.value, StoreUnavailableError)
    assert exc_info.value.__cause__ is raised


def test_other_exceptions_pass_through():
    with pytest.raises(KeyError):
        with translate_store_errors():
            raise KeyError("not a store failure")
