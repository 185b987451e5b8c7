"""Centralized, structured exception hierarchy for credo.

Every error carries a machine-readable `code` for programmatic handling and a
human-readable `message` for logging and user feedback. The hierarchy maps
cleanly to HTTP status codes in `credo.core.handlers`:

- AuthenticationError and subclasses -> 401
- ValidationError -> 422
- UserAlreadyExistsError -> 409
- UserNotFoundError -> 404
- PasswordResetError -> 400
- DatabaseError, HashingFailure and any other CredoError -> 500
"""

from __future__ import annotations

from typing import Final, Iterable, List

__all__: Final = [
    "CredoError",
    "AuthenticationError",
    "InvalidCredentialsError",
    "UnauthorizedError",
    "InvalidSignatureError",
    "TokenExpiredError",
    "PasswordResetError",
    "ValidationError",
    "UserAlreadyExistsError",
    "DuplicateUserError",
    "UserNotFoundError",
    "DatabaseError",
    "HashingFailure",
    "NotificationDeliveryError",
]


class CredoError(Exception):
    """Base exception class for all custom errors in the credo application.

    Attributes:
        message (str): A human-readable error message, suitable for logging.
                       This message can be translated.
        code (str): A unique, machine-readable error code for identifying
                    the type of error programmatically.
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
# Auth-related errors
# ---------------------------------------------------------------------------


class AuthenticationError(CredoError):
    """Raised for general authentication failures.

    This exception is the base for more specific authentication-related
    errors. It maps to a `401 Unauthorized` HTTP status code.
    """

    def __init__(self, message: str, code: str = "authentication_error"):
        super().__init__(message, code)


class InvalidCredentialsError(AuthenticationError):
    """Raised when an email/password pair does not authenticate.

    Unknown emails and wrong passwords both raise this error with the same
    message and code so callers cannot tell them apart.
    """

    def __init__(self, message: str, code: str = "invalid_credentials"):
        super().__init__(message, code)


class UnauthorizedError(AuthenticationError):
    """Raised by the session dependency when a protected call lacks a valid token.

    The `code` is one of `missing_token`, `invalid_token` or `token_expired`.
    """

    def __init__(self, message: str, code: str = "unauthorized"):
        super().__init__(message, code)


class InvalidSignatureError(AuthenticationError):
    """Raised for tampered, malformed or foreign session tokens."""

    def __init__(self, message: str = "invalid_token", code: str = "invalid_token"):
        super().__init__(message, code)


class TokenExpiredError(AuthenticationError):
    """Raised for a structurally valid token whose `exp` has passed."""

    def __init__(self, message: str = "token_expired", code: str = "token_expired"):
        super().__init__(message, code)


class PasswordResetError(CredoError):
    """Raised when a reset token is unknown, expired or already used.

    Maps to a `400 Bad Request`. The three cases are deliberately
    indistinguishable.
    """

    def __init__(self, message: str, code: str = "password_reset_error"):
        super().__init__(message, code)


# ---------------------------------------------------------------------------
# Validation errors (422 Unprocessable Entity)
# ---------------------------------------------------------------------------


class ValidationError(CredoError):
    """Raised when input fails structural validation.

    Attributes:
        fields (list[str]): Names of every input field that failed.
    """

    def __init__(
        self,
        message: str,
        code: str = "validation_error",
        fields: Iterable[str] = (),
    ):
        super().__init__(message, code)
        self.fields: List[str] = list(fields)


# ---------------------------------------------------------------------------
# Domain / persistence errors
# ---------------------------------------------------------------------------


class UserAlreadyExistsError(CredoError):
    """Raised when attempting to create a credential that already exists.

    It maps to a `409 Conflict` HTTP status code.
    """

    def __init__(self, message: str, code: str = "user_already_exists"):
        super().__init__(message, code)


class DuplicateUserError(UserAlreadyExistsError):
    """Raised when a registration collides with an existing email."""

    def __init__(self, message: str, code: str = "duplicate_user_error"):
        super().__init__(message, code)


class UserNotFoundError(CredoError):
    """Raised when a requested credential is not found. Maps to `404 Not Found`."""

    def __init__(self, message: str = "User not found", code: str = "user_not_found"):
        super().__init__(message, code)


class DatabaseError(CredoError):
    """Raised for low-level database interaction errors.

    This exception wraps underlying driver errors so their text never reaches
    clients. It maps to a `500 Internal Server Error`.
    """

    def __init__(self, message: str, code: str = "database_error"):
        super().__init__(message, code)


class HashingFailure(CredoError):
    """Raised when the password hashing primitive itself fails.

    Distinct from a password mismatch, which is a plain `False` from verify.
    """

    def __init__(
        self,
        message: str = "A critical error occurred while hashing a password.",
        code: str = "hashing_failure",
    ):
        super().__init__(message, code)


class NotificationDeliveryError(CredoError):
    """Raised when an OTP code or reset token cannot be handed to the delivery channel."""

    def __init__(self, message: str, code: str = "notification_delivery_error"):
        super().__init__(message, code)
