"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations.

The container is attached to the application (``app.state.container``)
rather than held in a module global, so a test builds an app around a
container holding an in-memory store instead of patching a singleton.
"""

from typing import TYPE_CHECKING, Optional

from fastapi import Request

from shared.config import Settings, get_settings

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.auth.interfaces import IAuthService
    from modules.auth.passwords import PasswordHasher
    from modules.auth.tokens import TokenService
    from modules.users.interfaces import IUserStore


class ServiceContainer:
    """
    Container for all service instances.

    Services are created lazily on first access and cached for the life of
    the container. Any of them can be supplied up front to replace the
    default implementation.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        *,
        store: "IUserStore | None" = None,
        password_hasher: "PasswordHasher | None" = None,
        token_service: "TokenService | None" = None,
    ) -> None:
        self.settings = settings or get_settings()
        self._store = store
        self._password_hasher = password_hasher
        self._token_service = token_service
        self._auth_service: "IAuthService | None" = None

    @property
    def users(self) -> "IUserStore":
        """Get the users store instance."""
        if self._store is None:
            from modules.users.store import create_user_store
            self._store = create_user_store(self.settings)
        return self._store

    @property
    def passwords(self) -> "PasswordHasher":
        """Get the password hasher instance."""
        if self._password_hasher is None:
            from modules.auth.passwords import PasswordHasher
            self._password_hasher = PasswordHasher(rounds=self.settings.bcrypt_rounds)
        return self._password_hasher

    @property
    def tokens(self) -> "TokenService":
        """Get the token service instance."""
        if self._token_service is None:
            from modules.auth.tokens import TokenService
            self._token_service = TokenService(
                secret_key=self.settings.effective_jwt_secret,
                expire_days=self.settings.jwt_expire_days,
            )
        return self._token_service

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.service import AuthService
            self._auth_service = AuthService(
                store=self.users,
                password_hasher=self.passwords,
                token_service=self.tokens,
            )
        return self._auth_service


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_container(request: Request) -> ServiceContainer:
    """FastAPI dependency for the application's container."""
    return request.app.state.container


def get_auth_service(request: Request) -> "IAuthService":
    """FastAPI dependency for auth service."""
    return get_container(request).auth
