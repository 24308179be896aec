"""
Authentication service implementation.

Orchestrates validation, the users store, password hashing and tokens to
provide registration, login, logout and profile management.
"""

import logging
from typing import Any, Optional

from modules.users import DuplicateEmailError, IUserStore, NewUser, UserUpdate
from modules.validation import (
    get_name_error,
    is_valid_email,
    is_valid_password,
    sanitize_email,
    sanitize_name,
)
from shared.models import AuthenticatedUser, UserProfile

from .exceptions import (
    EmailAlreadyExistsError,
    EmailInUseError,
    InvalidCredentialsError,
    InvalidInputError,
    MissingTokenError,
    TokenUserNotFoundError,
    UnauthenticatedError,
    UserNotFoundError,
)
from .interfaces import IAuthService
from .models import AuthResult, LogoutResponse
from .passwords import PasswordHasher
from .tokens import TokenService

logger = logging.getLogger(__name__)

FIELDS_REQUIRED = "Email, password, and name are required"
LOGIN_FIELDS_REQUIRED = "Email and password are required"
PROFILE_FIELDS_REQUIRED = "At least one field (name or email) is required"
INVALID_EMAIL = "Invalid email format"
WEAK_PASSWORD = (
    "Password must be at least 8 characters long and contain at least one letter and one number"
)


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    The store, hasher and token service are injected so tests can swap in
    an in-memory store and a cheap hasher.
    """

    def __init__(
        self,
        store: IUserStore,
        password_hasher: PasswordHasher,
        token_service: TokenService,
    ):
        self._store = store
        self._passwords = password_hasher
        self._tokens = token_service

    async def register(self, email: Any, password: Any, name: Any) -> AuthResult:
        if not email or not password or not name:
            raise InvalidInputError(FIELDS_REQUIRED)
        if not is_valid_email(email):
            raise InvalidInputError(INVALID_EMAIL, field="email")
        if not is_valid_password(password):
            raise InvalidInputError(WEAK_PASSWORD, field="password")
        name_error = get_name_error(name)
        if name_error:
            raise InvalidInputError(name_error, field="name")

        clean_email = sanitize_email(email)
        clean_name = sanitize_name(name)

        if await self._store.find_by_email(clean_email):
            raise EmailAlreadyExistsError()

        password_hash = await self._passwords.hash_async(password)
        try:
            user = await self._store.create(
                NewUser(email=clean_email, password_hash=password_hash, name=clean_name)
            )
        except DuplicateEmailError:
            # Lost a race with a concurrent registration for the same email
            raise EmailAlreadyExistsError()

        logger.info("Registered user %s", user.id)
        return AuthResult(token=self._tokens.issue(user.id), user=user.to_profile())

    async def login(self, email: Any, password: Any) -> AuthResult:
        if not email or not password:
            raise InvalidInputError(LOGIN_FIELDS_REQUIRED)
        if not is_valid_email(email):
            raise InvalidInputError(INVALID_EMAIL, field="email")

        user = await self._store.find_by_email(sanitize_email(email))
        if user is None:
            logger.info("Login rejected: unknown email")
            raise InvalidCredentialsError()

        if not await self._passwords.verify_async(password, user.password_hash):
            logger.info("Login rejected: wrong password for user %s", user.id)
            raise InvalidCredentialsError()

        logger.info("User %s logged in", user.id)
        return AuthResult(token=self._tokens.issue(user.id), user=user.to_profile())

    async def logout(self) -> LogoutResponse:
        return LogoutResponse()

    async def authenticate(self, token: str) -> AuthenticatedUser:
        if not token:
            raise MissingTokenError()

        claims = self._tokens.verify(token)
        user = await self._store.find_by_id(claims.user_id)
        if user is None:
            raise TokenUserNotFoundError(claims.user_id)

        return AuthenticatedUser(id=user.id, email=user.email, name=user.name)

    async def get_profile(self, user_id: Optional[str]) -> UserProfile:
        if not user_id:
            raise UnauthenticatedError()

        user = await self._store.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user.to_profile()

    async def update_profile(
        self,
        user_id: Optional[str],
        name: Any = None,
        email: Any = None,
    ) -> UserProfile:
        if not user_id:
            raise UnauthenticatedError()
        if not name and not email:
            raise InvalidInputError(PROFILE_FIELDS_REQUIRED)

        if email is not None and not is_valid_email(email):
            raise InvalidInputError(INVALID_EMAIL, field="email")
        if name is not None:
            name_error = get_name_error(name)
            if name_error:
                raise InvalidInputError(name_error, field="name")

        changes = UserUpdate(
            name=sanitize_name(name) if name is not None else None,
            email=sanitize_email(email) if email is not None else None,
        )

        if changes.email is not None:
            current = await self._store.find_by_id(user_id)
            if current is not None and current.email != changes.email:
                owner = await self._store.find_by_email(changes.email)
                if owner is not None and owner.id != user_id:
                    raise EmailInUseError()

        try:
            updated = await self._store.update(user_id, changes)
        except DuplicateEmailError:
            raise EmailInUseError()

        if updated is None:
            raise UserNotFoundError(user_id)

        logger.info("Updated profile of user %s (%s)", user_id, ", ".join(changes.changes()))
        return updated.to_profile()
