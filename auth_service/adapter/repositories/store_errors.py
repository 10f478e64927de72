from contextlib import contextmanager

from sqlalchemy.exc import DBAPIError, IntegrityError, SQLAlchemyError

from auth_service.domain.errors import StoreError, StoreUnavailableError, UniqueViolationError


@contextmanager
def translate_store_errors():
    """Re-raise driver errors as the store exceptions the app layer understands"""
    try:
        yield
    except IntegrityError as exc:
        raise UniqueViolationError(str(exc.orig)) from exc
    except DBAPIError as exc:
        raise StoreUnavailableError(str(exc.orig)) from exc
    except SQLAlchemyError as exc:
        # ORM or statement errors that never reached the driver
        raise StoreError(str(exc)) from exc
