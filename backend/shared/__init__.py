"""
Shared infrastructure for AccountKit backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- exceptions: Base exception classes
- models: User shapes shared between modules and the API layer

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .exceptions import (
    AccountKitError,
    ValidationError,
    ConflictError,
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
)
from .models import AuthenticatedUser, UserProfile

__all__ = [
    "Settings",
    "get_settings",
    "AccountKitError",
    "ValidationError",
    "ConflictError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "AuthenticatedUser",
    "UserProfile",
]
