"""
Centralized configuration for the SessionGate backend.

All settings are loaded from environment variables with sensible defaults.
Module-specific settings should be namespaced (e.g., USERS_SERVICE_*, SESSION_COOKIE_*).
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_USERS_SERVICE_API_URL = "https://getmocha.com/u"
DEFAULT_SESSION_COOKIE_NAME = "mocha_session_token"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "SessionGate API"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Users service (remote directory)
    users_service_api_url: str = DEFAULT_USERS_SERVICE_API_URL
    users_service_api_key: str = ""
    users_service_timeout: float = 10.0  # seconds

    # Session cookie
    session_cookie_name: str = DEFAULT_SESSION_COOKIE_NAME
    session_cookie_max_age: int = 60 * 24 * 60 * 60  # 60 days


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
