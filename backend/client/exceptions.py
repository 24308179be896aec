"""
Client tier exceptions.

Every failure a caller of the client sees is a ClientError. ApiError and its
subclasses come from talking to the server; FormValidationError is raised
before any request is made.
"""

from typing import Optional


class ClientError(Exception):
    """Base exception for the client tier."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ApiError(ClientError):
    """
    The server rejected a request, or answered with something unusable.

    Attributes:
        status_code: HTTP status, or None when no response was received
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class NetworkError(ApiError):
    """No response was received (connection refused, timeout, DNS...)."""

    def __init__(self, message: str = "Network error: unable to connect to the server"):
        super().__init__(message, status_code=None)


class SessionExpiredError(ApiError):
    """
    The session is gone: no cached token, or the server refused the token.

    The caller should send the user back to the login screen.
    """

    pass


class FormValidationError(ClientError):
    """
    Form input failed local validation; nothing was sent.

    Attributes:
        errors: Message per offending field, e.g. {"email": "Email is required"}
    """

    def __init__(self, errors: dict[str, str]):
        first = next(iter(errors.values()), "Invalid input")
        super().__init__(first)
        self.errors = errors
