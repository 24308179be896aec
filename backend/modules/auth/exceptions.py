"""
Authentication module exceptions.

These exceptions are raised by the auth module and caught by the API error
handlers, which return the message verbatim as ``{"error": message}``.
Messages are deliberately low-information: every credential failure shares
one message, and every token failure shares another.
"""

from shared.exceptions import (
    AuthenticationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)


class InvalidInputError(ValidationError):
    """Raised when a request field is missing or malformed."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(
            message,
            code="INVALID_INPUT",
            details={"field": field} if field else None,
        )


class EmailAlreadyExistsError(ConflictError):
    """Raised when registering an email that is already taken."""

    def __init__(self, message: str = "User with this email already exists"):
        super().__init__(message, code="EMAIL_ALREADY_EXISTS")


class EmailInUseError(ConflictError):
    """Raised when a profile update targets another user's email."""

    def __init__(self, message: str = "Email already in use"):
        super().__init__(message, code="EMAIL_IN_USE")


class InvalidCredentialsError(AuthenticationError):
    """Raised for an unknown email or a wrong password, indistinguishably."""

    def __init__(self, message: str = "Invalid email or password"):
        super().__init__(message, code="INVALID_CREDENTIALS")


class MissingTokenError(AuthenticationError):
    """Raised when no well-formed bearer token is provided."""

    def __init__(self, message: str = "No token provided"):
        super().__init__(message, code="MISSING_TOKEN")


class InvalidTokenError(AuthenticationError):
    """Raised when a token is tampered, malformed, signed elsewhere or expired."""

    def __init__(self, message: str = "Invalid or expired token"):
        super().__init__(message, code="INVALID_TOKEN")


class UnauthenticatedError(AuthenticationError):
    """Raised when a profile operation runs without an authenticated identity."""

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message, code="UNAUTHENTICATED")


class TokenUserNotFoundError(AuthenticationError):
    """Raised when a valid token names a user that no longer exists."""

    def __init__(self, user_id: str):
        super().__init__(
            "User not found",
            code="TOKEN_USER_NOT_FOUND",
            details={"user_id": user_id},
        )


class UserNotFoundError(NotFoundError):
    """Raised when an authenticated user's record has vanished."""

    def __init__(self, user_id: str):
        super().__init__(
            "User not found",
            code="USER_NOT_FOUND",
            details={"user_id": user_id},
        )
