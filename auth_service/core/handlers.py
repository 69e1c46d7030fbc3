"""
Global exception handlers for the FastAPI application.

This module translates the `AuthServiceError` hierarchy into HTTP responses.
Every error body has the shape `{"error": "<message>"}`. Credential and token
failures always carry the same generic message whatever the underlying
cause; the cause is written to the log only.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette import status
from structlog import get_logger

from auth_service.core.exceptions import (
    AuthenticationError,
    AuthServiceError,
    InvalidTokenError,
    MissingTokenError,
    UserAlreadyExistsError,
    ValidationError,
)

__all__ = [
    "validation_error_handler",
    "missing_token_error_handler",
    "authentication_error_handler",
    "invalid_token_error_handler",
    "user_already_exists_error_handler",
    "auth_service_error_handler",
    "register_exception_handlers",
]

logger = get_logger(__name__)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    """Handles `ValidationError`, returning a `400 Bad Request`.

    Raised when a request is well-formed JSON but a value (email, password,
    login attempt ID, code) fails its domain rules.
    """
    logger.info("Invalid input rejected", error=exc.code, reason=exc.message, path=request.url.path)
    return _error(status.HTTP_400_BAD_REQUEST, "Invalid credentials")


async def missing_token_error_handler(request: Request, exc: MissingTokenError) -> JSONResponse:
    logger.info("Request without token", path=request.url.path)
    return _error(status.HTTP_400_BAD_REQUEST, "Missing token")


async def authentication_error_handler(request: Request, exc: AuthenticationError) -> JSONResponse:
    """Handles `AuthenticationError`, returning a `401 Unauthorized`.

    Unknown user, wrong password, wrong or consumed 2FA code and stale login
    attempt all produce the same body.

    Args:
        request: The incoming `Request` object.
        exc: The `AuthenticationError` instance.

    Returns:
        A `JSONResponse` with a 401 status code and a generic error.
    """
    logger.warning("Authentication failure", error=exc.code, path=request.url.path)
    return _error(status.HTTP_401_UNAUTHORIZED, "Incorrect credentials")


async def invalid_token_error_handler(request: Request, exc: InvalidTokenError) -> JSONResponse:
    """Handles `InvalidTokenError`, returning a `401 Unauthorized`.

    Malformed, forged, expired and revoked tokens share one response.
    """
    logger.warning("Invalid token presented", error=exc.code, path=request.url.path)
    return _error(status.HTTP_401_UNAUTHORIZED, "Invalid token")


async def user_already_exists_error_handler(
    request: Request, exc: UserAlreadyExistsError
) -> JSONResponse:
    logger.info("Duplicate signup", path=request.url.path)
    return _error(status.HTTP_409_CONFLICT, "User already exists")


async def auth_service_error_handler(request: Request, exc: AuthServiceError) -> JSONResponse:
    """Handles any other `AuthServiceError`, returning a `500 Internal Server Error`.

    This is the catch-all for `UnexpectedError`, `EmailServiceError` and any
    store-level outcome that escaped the orchestrator.
    """
    logger.error(
        "Unhandled service error",
        error=exc.code,
        cause=repr(exc.__cause__) if exc.__cause__ else None,
        path=request.url.path,
    )
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Unexpected error")


def register_exception_handlers(app: FastAPI) -> None:
    """Registers all custom exception handlers with the FastAPI application.

    Starlette resolves a handler by walking the exception's MRO, so the most
    specific class registered wins.

    Args:
        app: The `FastAPI` application instance.
    """
    app.add_exception_handler(MissingTokenError, missing_token_error_handler)
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(InvalidTokenError, invalid_token_error_handler)
    app.add_exception_handler(AuthenticationError, authentication_error_handler)
    app.add_exception_handler(UserAlreadyExistsError, user_already_exists_error_handler)
    app.add_exception_handler(AuthServiceError, auth_service_error_handler)
