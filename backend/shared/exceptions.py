"""
Base exception classes for the AccountKit backend.

Each module should define its own exceptions that inherit from these bases.
The API layer maps each base to one HTTP status, so choosing the base class
is choosing the status code.
"""

from typing import Optional, Any


class AccountKitError(Exception):
    """
    Base exception for all AccountKit errors.

    All custom exceptions should inherit from this class. The message is
    user-facing and is returned verbatim in the ``error`` field.
    """

    status_code: int = 500

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to the API error body."""
        return {"error": self.message}


class ValidationError(AccountKitError):
    """Input validation failed."""

    status_code = 400


class ConflictError(ValidationError):
    """
    Resource already exists.

    Reported as 400 like any other input problem; there is no distinct 409.
    """

    pass


class AuthenticationError(AccountKitError):
    """Authentication failed (invalid or missing credentials)."""

    status_code = 401


class AuthorizationError(AccountKitError):
    """Authorization failed (insufficient permissions)."""

    status_code = 403


class NotFoundError(AccountKitError):
    """Resource not found."""

    status_code = 404
