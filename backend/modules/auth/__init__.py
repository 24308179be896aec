"""
Authentication module.

Handles password hashing, bearer tokens, registration, login and profile
management.

Public API:
- IAuthService: Interface for auth operations
- AuthService: Implementation over an IUserStore
- PasswordHasher: Credential engine (bcrypt)
- TokenService: Token engine (JWT)
- TokenClaims, AuthResult: Result models
- Auth exceptions: InvalidCredentialsError, InvalidTokenError, etc.
"""

from .interfaces import IAuthService
from .models import (
    TokenClaims,
    AuthResult,
    LogoutResponse,
    RegisterRequest,
    LoginRequest,
    UpdateProfileRequest,
)
from .passwords import PasswordHasher
from .tokens import TokenService
from .exceptions import (
    InvalidInputError,
    EmailAlreadyExistsError,
    EmailInUseError,
    InvalidCredentialsError,
    MissingTokenError,
    InvalidTokenError,
    UnauthenticatedError,
    TokenUserNotFoundError,
    UserNotFoundError,
)

__all__ = [
    # Interface
    "IAuthService",
    # Engines
    "PasswordHasher",
    "TokenService",
    # Models
    "TokenClaims",
    "AuthResult",
    "LogoutResponse",
    "RegisterRequest",
    "LoginRequest",
    "UpdateProfileRequest",
    # Exceptions
    "InvalidInputError",
    "EmailAlreadyExistsError",
    "EmailInUseError",
    "InvalidCredentialsError",
    "MissingTokenError",
    "InvalidTokenError",
    "UnauthenticatedError",
    "TokenUserNotFoundError",
    "UserNotFoundError",
]
