"""
Authentication module interface.

Routes and the session guard depend on IAuthService, not the concrete
implementation. This enables testing with mocks.
"""

from typing import Any, Optional, Protocol, runtime_checkable

from shared.models import AuthenticatedUser, UserProfile

from .models import AuthResult, LogoutResponse


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for authentication and profile operations.

    Each call is stateless given the injected store, hasher and token
    service. Failures are raised as AccountKitError subclasses whose
    messages are safe to show to the client.
    """

    async def register(self, email: Any, password: Any, name: Any) -> AuthResult:
        """
        Create an account and issue a token.

        Raises:
            ValidationError: Missing or malformed field, or email taken
        """
        ...

    async def login(self, email: Any, password: Any) -> AuthResult:
        """
        Check credentials and issue a token.

        Raises:
            ValidationError: Missing field or malformed email
            AuthenticationError: Unknown email or wrong password (same message)
        """
        ...

    async def logout(self) -> LogoutResponse:
        """Acknowledge a logout. Tokens are not revoked server-side."""
        ...

    async def authenticate(self, token: str) -> AuthenticatedUser:
        """
        Resolve a bearer token to the user it belongs to.

        Raises:
            AuthenticationError: Token missing, invalid or expired, or its
                user no longer exists
        """
        ...

    async def get_profile(self, user_id: Optional[str]) -> UserProfile:
        """
        Return the public profile of the authenticated user.

        Raises:
            AuthenticationError: No authenticated identity
            NotFoundError: The user record is gone
        """
        ...

    async def update_profile(
        self,
        user_id: Optional[str],
        name: Any = None,
        email: Any = None,
    ) -> UserProfile:
        """
        Update name and/or email of the authenticated user.

        Raises:
            AuthenticationError: No authenticated identity
            ValidationError: Nothing to update, a malformed field, or the
                email belongs to someone else
            NotFoundError: The user record is gone
        """
        ...
