"""
Client-side authentication flow.

Validates form input locally, calls the API and keeps the session cache in
step with the server's answers.
"""

import logging
from typing import Any, Optional

from modules.auth.models import AuthResult
from modules.validation import validate_login, validate_profile, validate_signup
from shared.config import Settings, get_settings
from shared.models import UserProfile

from .api import ApiClient
from .exceptions import ApiError, FormValidationError, SessionExpiredError
from .storage import TokenStore

logger = logging.getLogger(__name__)

NO_TOKEN = "No token found"


class AuthClient:
    """
    Login, signup, logout and profile calls for one session.

    Usage:
        auth = AuthClient(ApiClient(), TokenStore())
        auth.login("ada@example.com", "secret123")
        auth.get_profile().name
    """

    def __init__(self, api: ApiClient, storage: TokenStore):
        self.api = api
        self.storage = storage

    def _remember(self, body: Any) -> AuthResult:
        result = AuthResult.model_validate(body)
        self.storage.set_token(result.token)
        self.storage.set_user(result.user.model_dump())
        return result

    def _require_token(self) -> str:
        token = self.storage.get_token()
        if not token:
            raise SessionExpiredError(NO_TOKEN)
        return token

    def login(self, email: str, password: str) -> AuthResult:
        """
        Sign in and cache the session.

        Raises:
            FormValidationError: The form is invalid; nothing was sent
            ApiError: The server rejected the credentials, or any other
                server or network failure
        """
        validation = validate_login(email, password)
        if not validation.is_valid:
            raise FormValidationError(validation.errors())

        body = self.api.post("/auth/login", {"email": email, "password": password})
        result = self._remember(body)
        logger.info("Signed in as user %s", result.user.id)
        return result

    def signup(self, name: str, email: str, password: str) -> AuthResult:
        """
        Create an account and cache the new session.

        Raises:
            FormValidationError: The form is invalid; nothing was sent
            ApiError: The server refused the registration
        """
        validation = validate_signup(name, email, password)
        if not validation.is_valid:
            raise FormValidationError(validation.errors())

        body = self.api.post(
            "/auth/register",
            {"name": name, "email": email, "password": password},
        )
        result = self._remember(body)
        logger.info("Registered and signed in as user %s", result.user.id)
        return result

    def logout(self) -> None:
        """
        End the session.

        The cache is cleared even when the server cannot be reached.
        """
        try:
            token = self.storage.get_token()
            if token:
                self.api.post("/auth/logout", {}, token=token)
        except ApiError as e:
            logger.warning("Logout request failed: %s", e.message)
        finally:
            self.storage.clear()

    def get_profile(self) -> UserProfile:
        """
        Fetch the current user's profile from the server.

        Raises:
            SessionExpiredError: No cached token, or the server refused it
            ApiError: Any other server or network failure
        """
        token = self._require_token()
        user = UserProfile.model_validate(self.api.get("/profile", token=token))
        self.storage.set_user(user.model_dump())
        return user

    def update_profile(
        self,
        name: Optional[str] = None,
        email: Optional[str] = None,
    ) -> UserProfile:
        """
        Change name and/or email, then refresh the cached user.

        Raises:
            FormValidationError: The update is invalid; nothing was sent
            SessionExpiredError: No cached token, or the server refused it
            ApiError: Any other server or network failure
        """
        validation = validate_profile(name, email)
        if not validation.is_valid:
            raise FormValidationError(validation.errors())

        token = self._require_token()
        updates = {
            field: value
            for field, value in (("name", name), ("email", email))
            if value
        }
        user = UserProfile.model_validate(self.api.put("/profile", updates, token=token))
        self.storage.set_user(user.model_dump())
        return user

    def is_authenticated(self) -> bool:
        """Whether a token is cached. The token may still have expired."""
        return self.storage.get_token() is not None

    def get_current_user(self) -> Optional[UserProfile]:
        """The cached user, without a server round trip."""
        user = self.storage.get_user()
        if user is None:
            return None
        try:
            return UserProfile.model_validate(user)
        except ValueError:
            logger.warning("Ignoring malformed cached user")
            return None


def create_auth_client(
    settings: Optional[Settings] = None,
    token_file: Optional[str] = None,
) -> AuthClient:
    """
    Build an AuthClient talking to the configured API.

    Args:
        settings: Settings providing api_base_url. Defaults to get_settings().
        token_file: Persist the session to this JSON file instead of memory

    Returns:
        A ready AuthClient
    """
    settings = settings or get_settings()
    return AuthClient(ApiClient(settings.api_base_url), TokenStore(token_file))
