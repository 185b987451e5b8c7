"""
Global exception handlers for the FastAPI application.

Translates the `CredoError` hierarchy into HTTP responses. Every body has a
`detail` string; infrastructure failures get a generic translated message so
that driver or library text never leaves the process.
"""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette import status
from structlog import get_logger

from credo.core.exceptions import (
    AuthenticationError,
    CredoError,
    DatabaseError,
    HashingFailure,
    PasswordResetError,
    UserAlreadyExistsError,
    UserNotFoundError,
    ValidationError,
)
from credo.utils.i18n import get_request_language, get_translated_message

__all__ = [
    "authentication_error_handler",
    "validation_error_handler",
    "user_already_exists_error_handler",
    "user_not_found_error_handler",
    "password_reset_error_handler",
    "internal_error_handler",
    "credo_error_handler",
    "register_exception_handlers",
]

logger = get_logger(__name__)


def _client_host(request: Request) -> str:
    return request.client.host if request.client else "unknown"


async def authentication_error_handler(request: Request, exc: AuthenticationError) -> JSONResponse:
    """Handles `AuthenticationError`, returning a `401 Unauthorized`.

    Covers invalid credentials and every session-token failure. The
    `WWW-Authenticate` header tells clients to present a bearer token.
    """
    logger.warning(
        "Authentication failure",
        error=exc.code,
        client_ip=_client_host(request),
        path=request.url.path,
    )
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content={"detail": exc.message, "code": exc.code},
        headers={"WWW-Authenticate": "Bearer"},
    )


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    """Handles `ValidationError`, returning a `422 Unprocessable Entity` with the failing fields."""
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": exc.message, "code": exc.code, "fields": exc.fields},
    )


async def user_already_exists_error_handler(
    request: Request, exc: UserAlreadyExistsError
) -> JSONResponse:
    """Handles `UserAlreadyExistsError` (and `DuplicateUserError`), returning a `409 Conflict`."""
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={"detail": exc.message, "code": exc.code},
    )


async def user_not_found_error_handler(request: Request, exc: UserNotFoundError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"detail": exc.message, "code": exc.code},
    )


async def password_reset_error_handler(request: Request, exc: PasswordResetError) -> JSONResponse:
    """Handles `PasswordResetError`, returning a `400 Bad Request`."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": exc.message, "code": exc.code},
    )


async def internal_error_handler(request: Request, exc: CredoError) -> JSONResponse:
    """Handles `DatabaseError` and `HashingFailure`, returning an opaque `500`."""
    logger.error(
        "Internal failure",
        error=exc.code,
        error_type=type(exc).__name__,
        path=request.url.path,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": get_translated_message("internal_error", get_request_language(request))},
    )


async def credo_error_handler(request: Request, exc: CredoError) -> JSONResponse:
    """Catch-all for `CredoError` subclasses without a dedicated handler."""
    logger.error(
        "Unhandled application error",
        error=exc.code,
        error_type=type(exc).__name__,
        path=request.url.path,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": get_translated_message("internal_error", get_request_language(request))},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Registers all custom exception handlers with the FastAPI application.

    Starlette resolves handlers along the exception's MRO, so the base
    `CredoError` handler only fires for classes without a closer match.
    """
    app.add_exception_handler(AuthenticationError, authentication_error_handler)
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(UserAlreadyExistsError, user_already_exists_error_handler)
    app.add_exception_handler(UserNotFoundError, user_not_found_error_handler)
    app.add_exception_handler(PasswordResetError, password_reset_error_handler)
    app.add_exception_handler(DatabaseError, internal_error_handler)
    app.add_exception_handler(HashingFailure, internal_error_handler)
    app.add_exception_handler(CredoError, credo_error_handler)
