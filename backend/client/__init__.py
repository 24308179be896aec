"""
AccountKit client.

Python counterpart of the web front end: talks to the API over HTTP and
keeps the session (token and user) in a local cache.

Public API:
- AuthClient, create_auth_client: Login, signup, logout and profile calls
- ApiClient: JSON-over-HTTP transport with normalized errors
- TokenStore: Session cache (memory or JSON file)
- Client exceptions: ApiError, NetworkError, SessionExpiredError, etc.
"""

from .api import ApiClient
from .auth import AuthClient, create_auth_client
from .storage import TokenStore
from .exceptions import (
    ClientError,
    ApiError,
    NetworkError,
    SessionExpiredError,
    FormValidationError,
)

__all__ = [
    "AuthClient",
    "create_auth_client",
    "ApiClient",
    "TokenStore",
    "ClientError",
    "ApiError",
    "NetworkError",
    "SessionExpiredError",
    "FormValidationError",
]
