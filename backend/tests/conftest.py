"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

from datetime import timedelta
from typing import Optional

import jwt  # PyJWT
import pytest
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import ServiceContainer
from modules.auth.passwords import PasswordHasher
from modules.auth.tokens import TokenService
from modules.users.store import InMemoryUserStore
from shared.config import Settings


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"

# Minimum bcrypt cost; keeps hashing fast in tests
TEST_BCRYPT_ROUNDS = 4

VALID_PASSWORD = "password123"


def create_test_token(
    user_id: str = "test-user-123",
    expired: bool = False,
    secret: str = TEST_JWT_SECRET,
) -> str:
    """
    Create a test token for authentication.

    Args:
        user_id: User ID to include in the token
        expired: If True, creates an expired token
        secret: Signing secret

    Returns:
        JWT token string
    """
    service = TokenService(secret_key=secret)
    if expired:
        return service.issue(user_id, expires_delta=timedelta(hours=-1))
    return service.issue(user_id)


def decode_test_token(token: str) -> dict:
    """Decode a token without verifying it, to inspect its claims."""
    return jwt.decode(token, options={"verify_signature": False})


@pytest.fixture
def settings() -> Settings:
    """Settings for an isolated test app: memory store, known secret."""
    return Settings(
        _env_file=None,
        jwt_secret=TEST_JWT_SECRET,
        users_store="memory",
        bcrypt_rounds=TEST_BCRYPT_ROUNDS,
    )


@pytest.fixture
def store() -> InMemoryUserStore:
    """A fresh, empty users store."""
    return InMemoryUserStore()


@pytest.fixture
def password_hasher() -> PasswordHasher:
    return PasswordHasher(rounds=TEST_BCRYPT_ROUNDS)


@pytest.fixture
def token_service() -> TokenService:
    return TokenService(secret_key=TEST_JWT_SECRET)


@pytest.fixture
def container(settings, store, password_hasher, token_service) -> ServiceContainer:
    """Service container wired to the fresh store."""
    return ServiceContainer(
        settings,
        store=store,
        password_hasher=password_hasher,
        token_service=token_service,
    )


@pytest.fixture
def app(container):
    return create_app(container)


@pytest.fixture
def client(app) -> TestClient:
    """HTTP client for an app backed by the fresh store."""
    return TestClient(app)


@pytest.fixture
def register_user(client):
    """
    Factory that registers a user through the API.

    Returns the response body ({"token", "user"}).
    """

    def _register(
        email: str = "ada@example.com",
        password: str = VALID_PASSWORD,
        name: str = "Ada Lovelace",
    ) -> dict:
        response = client.post(
            "/api/auth/register",
            json={"email": email, "password": password, "name": name},
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _register


@pytest.fixture
def registered_user(register_user) -> dict:
    """A registered user's {"token", "user"}."""
    return register_user()


@pytest.fixture
def auth_headers(registered_user) -> dict:
    """Authorization header for the registered user."""
    return bearer(registered_user["token"])


def bearer(token: Optional[str]) -> dict:
    return {"Authorization": f"Bearer {token}"}
