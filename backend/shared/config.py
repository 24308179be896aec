"""
Centralized configuration for the AccountKit backend.

All settings are loaded from environment variables with sensible defaults.
Module-specific settings should be namespaced (e.g., JWT_*, USERS_*).
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


# Development-only signing secret used when JWT_SECRET is not set.
DEV_JWT_SECRET = "your-secret-key-change-in-production"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "AccountKit API"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
    cors_allow_headers: list[str] = ["Content-Type", "Authorization"]

    # Tokens
    jwt_secret: str = ""
    jwt_expire_days: int = 7

    # Credentials
    bcrypt_rounds: int = 12

    # Users store: "file" for the JSON file backing, "memory" for tests
    users_store: str = "file"
    users_file: str = "data/users.json"

    # Client tier
    api_base_url: str = "http://localhost:3000/api"

    @property
    def effective_jwt_secret(self) -> str:
        """Signing secret, falling back to the development value when unset."""
        return self.jwt_secret or DEV_JWT_SECRET

    @property
    def uses_dev_secret(self) -> bool:
        return not self.jwt_secret


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
