"""Centralized, structured exception hierarchy for the auth service.

Every failure the core can produce is one of the classes below. Each carries
a machine-readable `code` for programmatic handling and a human-readable
`message` for logging. The HTTP adapter maps them onto status codes in
`auth_service.core.handlers`; the messages that reach callers for
security-relevant failures are generic.

The hierarchy is used to:
- Reject malformed input (`ValidationError`) before any store is touched.
- Keep store-level outcomes (`UserNotFoundError`, `TwoFACodeNotFoundError`,
  `TokenAlreadyBannedError`) internal to the orchestrator.
- Collapse every credential or token failure into one uniform 401 class.
- Wrap backend failures in `UnexpectedError` with the original chained.
"""

from __future__ import annotations

from typing import Final

__all__: Final = [
    "AuthServiceError",
    "ValidationError",
    "AuthenticationError",
    "InvalidCredentialsError",
    "IncorrectCredentialsError",
    "InvalidTokenError",
    "MalformedTokenError",
    "TokenExpiredError",
    "TokenSignatureError",
    "TokenRevokedError",
    "MissingTokenError",
    "UserAlreadyExistsError",
    "UserNotFoundError",
    "TwoFACodeNotFoundError",
    "TokenAlreadyBannedError",
    "PasswordMismatchError",
    "UnexpectedError",
    "EmailServiceError",
]


class AuthServiceError(Exception):
    """Base exception class for all custom errors in the auth service.

    Attributes:
        message (str): A human-readable error message, suitable for logging.
        code (str): A unique, machine-readable error code.
    """

    message: str
    code: str = "generic_error"

    def __init__(self, message: str, code: str = "generic_error"):
        self.message = message
        self.code = code
        Exception.__init__(self, self.message)

    # A concise, structured representation used by loggers & FastAPI handlers.
    def __str__(self) -> str:
        return self.message


# ---------------------------------------------------------------------------
# Validation errors (map to 400 Bad Request)
# ---------------------------------------------------------------------------


class ValidationError(AuthServiceError):
    """Raised when raw input cannot be parsed into a value object.

    This is the only place malformed data is rejected; a `ValidationError`
    never reaches a store.
    """

    def __init__(self, message: str, code: str = "validation_error"):
        super().__init__(message, code)


class MissingTokenError(ValidationError):
    """Raised when a request that needs a token carries none at all."""

    def __init__(self, message: str = "Missing token", code: str = "missing_token"):
        super().__init__(message, code)


# ---------------------------------------------------------------------------
# Auth-related errors (map to 401 Unauthorized)
# ---------------------------------------------------------------------------


class AuthenticationError(AuthServiceError):
    """Raised for general authentication failures.

    This exception is the base for every credential and token failure and
    maps to a `401 Unauthorized` HTTP status code.
    """

    def __init__(self, message: str, code: str = "authentication_error"):
        super().__init__(message, code)


class InvalidCredentialsError(AuthenticationError):
    """Raised by a user store when the password does not match the stored hash."""

    def __init__(self, message: str = "Invalid credentials", code: str = "invalid_credentials"):
        super().__init__(message, code)


class IncorrectCredentialsError(AuthenticationError):
    """Raised at the boundary for any credential or 2FA challenge failure.

    Unknown user, wrong password, wrong code, consumed code and superseded
    login attempt all surface as this one error so callers cannot tell them
    apart.
    """

    def __init__(
        self, message: str = "Incorrect credentials", code: str = "incorrect_credentials"
    ):
        super().__init__(message, code)


class InvalidTokenError(AuthenticationError):
    """Raised when a session token is malformed, unsigned, expired or banned."""

    def __init__(self, message: str = "Invalid token", code: str = "invalid_token"):
        super().__init__(message, code)


class MalformedTokenError(InvalidTokenError):
    """The token is not a structurally valid JWT or its claims are unusable."""

    def __init__(self, message: str = "Malformed token", code: str = "malformed_token"):
        super().__init__(message, code)


class TokenExpiredError(InvalidTokenError):
    """The token's embedded expiry has passed."""

    def __init__(self, message: str = "Token expired", code: str = "token_expired"):
        super().__init__(message, code)


class TokenSignatureError(InvalidTokenError):
    """The token was not signed with the configured secret."""

    def __init__(self, message: str = "Bad token signature", code: str = "bad_signature"):
        super().__init__(message, code)


class TokenRevokedError(InvalidTokenError):
    """The token is in the banned-token set."""

    def __init__(self, message: str = "Token revoked", code: str = "token_revoked"):
        super().__init__(message, code)


# ---------------------------------------------------------------------------
# Store outcomes
# ---------------------------------------------------------------------------


class UserAlreadyExistsError(AuthServiceError):
    """Raised when signing up with an email that is already registered.

    Maps to a `409 Conflict` HTTP status code.
    """

    def __init__(self, message: str = "User already exists", code: str = "user_already_exists"):
        super().__init__(message, code)


class UserNotFoundError(AuthServiceError):
    """Raised when a requested user is not in the user store."""

    def __init__(self, message: str = "User not found", code: str = "user_not_found"):
        super().__init__(message, code)


class TwoFACodeNotFoundError(AuthServiceError):
    """Raised when no live 2FA challenge exists for an email (missing or expired)."""

    def __init__(
        self, message: str = "Login attempt not found", code: str = "login_attempt_not_found"
    ):
        super().__init__(message, code)


class TokenAlreadyBannedError(AuthServiceError):
    """Raised by banned-token stores that treat re-banning as an error."""

    def __init__(self, message: str = "Token already banned", code: str = "token_already_banned"):
        super().__init__(message, code)


class PasswordMismatchError(AuthServiceError):
    """Raised by the password hasher when a candidate does not match a hash."""

    def __init__(self, message: str = "Password mismatch", code: str = "password_mismatch"):
        super().__init__(message, code)


# ---------------------------------------------------------------------------
# Infrastructure errors (map to 500 / 503)
# ---------------------------------------------------------------------------


class UnexpectedError(AuthServiceError):
    """Raised when a store, crypto or other backend fails.

    The underlying exception is chained with `raise ... from` so diagnostics
    survive in the logs while the caller only ever sees a generic failure.
    """

    def __init__(self, message: str = "Unexpected error", code: str = "unexpected_error"):
        super().__init__(message, code)


class EmailServiceError(AuthServiceError):
    """Raised when the outbound email channel fails to deliver a message."""

    def __init__(self, message: str, code: str = "email_service_error"):
        super().__init__(message, code)
