import logging
import time

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from auth_service.adapter.services.notification_sender import create_notification_sender
from auth_service.app.services.password_hasher import PasswordHasher
from auth_service.app.services.session_token_codec import SessionTokenCodec, TokenSettings
from auth_service.app.services.single_use_token_manager import TokenLifetimes
from auth_service.domain.errors import ErrorCode
from .error import ClientError, ServerError

logger = logging.getLogger(__name__)

_SERVER_ERROR_MESSAGES = {
    ErrorCode.transient_store_error: "Service temporarily unavailable",
}


async def handle_client_error(request: Request, exc: ClientError):
    code = ErrorCode(exc.base_error.code)
    error_dict = {"code": code.value, "message": exc.base_error.message}
    if exc.base_error.details:
        error_dict["fields"] = exc.base_error.details
    logger.warning(f"Client error: {code.value} on {request.url.path}")
    return JSONResponse(status_code=exc.status_code, content={"error": error_dict})


async def handle_server_error(request: Request, exc: ServerError):
    code = ErrorCode(exc.base_error.code)
    error_dict = {
        "code": code.value,
        "message": _SERVER_ERROR_MESSAGES.get(code, "Internal server error"),
    }
    logger.error(f"Server error: {code.value} on {request.url.path}")
    return JSONResponse(status_code=exc.status_code, content={"error": error_dict})


async def handle_unexpected_error(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.url.path}: {exc!r}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": {
                "code": ErrorCode.internal_error.value,
                "message": "Internal server error",
            }
        },
    )


def _field_name(loc) -> str:
    parts = [str(part) for part in loc if part not in ("body", "query", "header")]
    return ".".join(parts) or "body"


def _field_message(message: str) -> str:
    # pydantic prefixes messages raised from our validators
    return message.removeprefix("Value error, ")


async def handle_validation_error(request: Request, exc: RequestValidationError):
    fields = [
        {"field": _field_name(e["loc"]), "message": _field_message(e["msg"])}
        for e in exc.errors()
    ]
    logger.warning(f"Validation error on {request.url.path}: {[f['field'] for f in fields]}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": {
                "code": ErrorCode.validation_error.value,
                "message": "Request validation failed",
                "fields": fields,
            }
        },
    )


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs method, path, status and latency. Never logs headers or bodies."""

    async def dispatch(self, request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            f"{request.method} {request.url.path} -> {response.status_code} "
            f"({elapsed_ms:.1f} ms)"
        )
        return response


def create_app(ApplicationConfig) -> FastAPI:
    logging.basicConfig(level=ApplicationConfig.LOG_LEVEL)

    app = FastAPI(title="Auth Service", version="0.1.0")

    # Fails fast (ConfigError) when JWT_SECRET is missing
    app.state.token_codec = SessionTokenCodec(TokenSettings.from_config(ApplicationConfig))
    app.state.password_hasher = PasswordHasher(ApplicationConfig.BCRYPT_ROUNDS)
    app.state.notification_sender = create_notification_sender(ApplicationConfig)
    app.state.token_lifetimes = TokenLifetimes.from_config(ApplicationConfig)
    app.state.admin_api_key = ApplicationConfig.ADMIN_API_KEY

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    if ApplicationConfig.ENABLE_LOGGING_MIDDLEWARE:
        app.add_middleware(RequestLoggingMiddleware)

    from auth_service.api.routes import admin, auth, health_check

    app.include_router(health_check.router, tags=["Health"])
    app.include_router(auth.router, prefix=ApplicationConfig.API_PREFIX, tags=["Authentication"])
    app.include_router(admin.router, prefix=ApplicationConfig.API_PREFIX, tags=["Admin"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)

    return app
