"""
Tests for client/auth.py, run against the real app in-process.
"""

import pytest
from unittest.mock import MagicMock

from client.api import ApiClient
from client.auth import AuthClient, create_auth_client
from client.exceptions import (
    ApiError,
    FormValidationError,
    NetworkError,
    SessionExpiredError,
)
from client.storage import TokenStore
from shared.config import Settings
from tests.conftest import VALID_PASSWORD, bearer


@pytest.fixture
def api(client) -> ApiClient:
    """ApiClient routed into the test app."""
    return ApiClient("http://testserver/api", http_client=client)


@pytest.fixture
def auth(api) -> AuthClient:
    return AuthClient(api, TokenStore())


@pytest.fixture
def signed_up(auth):
    return auth.signup("Ada Lovelace", "ada@example.com", VALID_PASSWORD)


class TestSignupAndLogin:
    def test_signup_caches_session(self, auth):
        result = auth.signup("Ada Lovelace", "Ada@Example.com", VALID_PASSWORD)
        assert result.user.email == "ada@example.com"
        assert auth.is_authenticated() is True
        assert auth.storage.get_token() == result.token
        assert auth.get_current_user() == result.user

    def test_login_caches_session(self, auth, signed_up):
        auth.storage.clear()
        result = auth.login("ada@example.com", VALID_PASSWORD)
        assert result.user == signed_up.user
        assert auth.is_authenticated() is True

    def test_invalid_signup_form_sends_nothing(self, auth):
        auth.api = MagicMock(spec=ApiClient)
        with pytest.raises(FormValidationError) as exc_info:
            auth.signup("R2D2", "bad", "short")
        assert set(exc_info.value.errors) == {"name", "email", "password"}
        auth.api.post.assert_not_called()

    def test_invalid_login_form_sends_nothing(self, auth):
        auth.api = MagicMock(spec=ApiClient)
        with pytest.raises(FormValidationError) as exc_info:
            auth.login("", "")
        assert exc_info.value.errors == {
            "email": "Email is required",
            "password": "Password is required",
        }
        auth.api.post.assert_not_called()

    def test_wrong_password_is_not_a_session_error(self, auth, signed_up):
        auth.storage.clear()
        with pytest.raises(ApiError) as exc_info:
            auth.login("ada@example.com", "wrongpass1")
        assert not isinstance(exc_info.value, SessionExpiredError)
        assert exc_info.value.message == "Invalid email or password"
        assert auth.is_authenticated() is False

    def test_duplicate_signup(self, auth, signed_up):
        with pytest.raises(ApiError) as exc_info:
            auth.signup("Someone", "ada@example.com", VALID_PASSWORD)
        assert exc_info.value.message == "User with this email already exists"


class TestProfile:
    def test_get_profile(self, auth, signed_up):
        assert auth.get_profile() == signed_up.user

    def test_get_profile_refreshes_cache(self, auth, client, signed_up):
        client.put(
            "/api/profile",
            json={"email": "ada@new.org"},
            headers=bearer(signed_up.token),
        )
        assert auth.get_current_user().email == "ada@example.com"

        assert auth.get_profile().email == "ada@new.org"
        assert auth.get_current_user().email == "ada@new.org"

    def test_get_profile_without_token(self, auth):
        with pytest.raises(SessionExpiredError) as exc_info:
            auth.get_profile()
        assert exc_info.value.message == "No token found"

    def test_get_profile_with_rejected_token(self, auth):
        auth.storage.set_token("stale")
        with pytest.raises(SessionExpiredError) as exc_info:
            auth.get_profile()
        assert exc_info.value.message == "Invalid or expired token"

    def test_update_profile_refreshes_cache(self, auth, signed_up):
        updated = auth.update_profile(name="Ada King")
        assert updated.name == "Ada King"
        assert auth.get_current_user().name == "Ada King"

    def test_update_profile_sends_only_given_fields(self, auth, signed_up):
        updated = auth.update_profile(email="ada@new.org")
        assert updated.email == "ada@new.org"
        assert updated.name == "Ada Lovelace"

    def test_invalid_update_sends_nothing(self, auth, signed_up):
        auth.api = MagicMock(spec=ApiClient)
        with pytest.raises(FormValidationError):
            auth.update_profile(name=None, email=None)
        auth.api.put.assert_not_called()

    def test_update_without_token(self, auth):
        with pytest.raises(SessionExpiredError):
            auth.update_profile(name="Ada")

    def test_update_to_taken_email(self, auth, signed_up, register_user):
        register_user(email="taken@example.com", name="Other")
        with pytest.raises(ApiError) as exc_info:
            auth.update_profile(email="taken@example.com")
        assert exc_info.value.message == "Email already in use"
        assert auth.get_current_user().email == "ada@example.com"


class TestLogout:
    def test_logout_clears_session(self, auth, signed_up):
        auth.logout()
        assert auth.is_authenticated() is False
        assert auth.get_current_user() is None

    def test_logout_without_session(self, auth):
        auth.api = MagicMock(spec=ApiClient)
        auth.logout()
        auth.api.post.assert_not_called()

    def test_logout_clears_session_when_server_unreachable(self, auth, signed_up):
        auth.api = MagicMock(spec=ApiClient)
        auth.api.post.side_effect = NetworkError()
        auth.logout()
        assert auth.is_authenticated() is False


class TestCachedUser:
    def test_malformed_cached_user(self, auth):
        auth.storage.set_user({"id": "u1"})
        assert auth.get_current_user() is None


class TestCreateAuthClient:
    def test_uses_configured_base_url(self, tmp_path):
        settings = Settings(_env_file=None, api_base_url="http://example.test/api/")
        auth = create_auth_client(settings, token_file=str(tmp_path / "session.json"))
        assert auth.api.base_url == "http://example.test/api"
        assert auth.storage.path == tmp_path / "session.json"
        auth.api.close()
