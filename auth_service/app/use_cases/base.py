"""
Use case error boundary.

Store exceptions raised by repository adapters never cross a use case: they
are mapped to the error taxonomy here, once, for every operation.
"""

import functools
import logging

from auth_service.domain.errors import ErrorCode, StoreError, StoreUnavailableError
from auth_service.libs.result import Error, Return

logger = logging.getLogger(__name__)


def store_error_boundary(execute):
    """Wrap a use case's execute() so store failures come back as Result errors"""

    @functools.wraps(execute)
    async def wrapper(self, *args, **kwargs):
        try:
            return await execute(self, *args, **kwargs)
        except StoreUnavailableError:
            logger.error(f"{type(self).__name__}: store unavailable", exc_info=True)
            return Return.err(
                Error(ErrorCode.transient_store_error, "Service temporarily unavailable")
            )
        except StoreError:
            logger.error(f"{type(self).__name__}: unexpected store error", exc_info=True)
            return Return.err(Error(ErrorCode.internal_error, "Internal server error"))

    return wrapper


def field_error(field: str, message: str) -> dict:
    return {"field": field, "message": message}


def validation_error(*fields: dict) -> Error:
    return Error(ErrorCode.validation_error, "Request validation failed", list(fields))
