"""Tests for shared/config.py."""

import pytest
from unittest.mock import patch
import os

from shared.config import (
    DEFAULT_SESSION_COOKIE_NAME,
    DEFAULT_USERS_SERVICE_API_URL,
    Settings,
    get_settings,
)


class TestSettings:
    def test_default_values(self):
        """Settings should have sensible defaults."""
        settings = Settings(_env_file=None)
        assert settings.app_name == "SessionGate API"
        assert settings.debug is False
        assert settings.port == 8000
        assert settings.host == "0.0.0.0"
        assert settings.log_level == "INFO"

    def test_users_service_defaults(self):
        """Users service should default to the production endpoint with no key."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)
        assert settings.users_service_api_url == DEFAULT_USERS_SERVICE_API_URL
        assert settings.users_service_api_url == "https://getmocha.com/u"
        assert settings.users_service_api_key == ""
        assert settings.users_service_timeout == 10.0

    def test_session_cookie_defaults(self):
        """Session cookie should be named and last about 60 days."""
        settings = Settings(_env_file=None)
        assert settings.session_cookie_name == DEFAULT_SESSION_COOKIE_NAME
        assert settings.session_cookie_max_age == 60 * 24 * 60 * 60

    def test_loads_from_env(self):
        """Settings should load from environment variables."""
        with patch.dict(os.environ, {"DEBUG": "true", "PORT": "9000"}):
            settings = Settings(_env_file=None)
            assert settings.debug is True
            assert settings.port == 9000

    def test_loads_users_service_config_from_env(self):
        """Settings should load users service configuration from environment variables."""
        with patch.dict(os.environ, {
            "USERS_SERVICE_API_URL": "https://users.internal/u",
            "USERS_SERVICE_API_KEY": "secret-key",
            "USERS_SERVICE_TIMEOUT": "2.5",
        }):
            settings = Settings(_env_file=None)
            assert settings.users_service_api_url == "https://users.internal/u"
            assert settings.users_service_api_key == "secret-key"
            assert settings.users_service_timeout == 2.5

    def test_case_insensitive(self):
        """Environment variable names should be case-insensitive."""
        with patch.dict(os.environ, {"session_cookie_name": "my_session"}):
            settings = Settings(_env_file=None)
            assert settings.session_cookie_name == "my_session"


class TestGetSettings:
    def test_returns_cached_instance(self):
        """get_settings should return the same instance until the cache is cleared."""
        first = get_settings()
        assert get_settings() is first

        get_settings.cache_clear()
        assert get_settings() is not first
