"""Tests for session client models."""

import pytest
from pydantic import ValidationError

from modules.sessions.models import (
    SUPPORTED_OAUTH_PROVIDERS,
    CurrentUserResponse,
    ExchangeCodeRequest,
    UsersServiceOptions,
)


class TestUsersServiceOptions:
    def test_defaults_to_production_url(self):
        """Options without a URL should target the production endpoint."""
        options = UsersServiceOptions(api_key="key")
        assert options.api_url == "https://getmocha.com/u"
        assert options.timeout == 10.0

    @pytest.mark.parametrize("api_url", ["", None])
    def test_blank_url_falls_back_to_default(self, api_url):
        """A blank URL is treated as unset."""
        options = UsersServiceOptions(api_key="key", api_url=api_url)
        assert options.api_url == "https://getmocha.com/u"

    def test_strips_trailing_slash(self):
        options = UsersServiceOptions(api_key="key", api_url="https://users.test/u/")
        assert options.api_url == "https://users.test/u"

    def test_api_key_required(self):
        with pytest.raises(ValidationError):
            UsersServiceOptions()

    def test_is_immutable(self):
        options = UsersServiceOptions(api_key="key")
        with pytest.raises(ValidationError):
            options.api_key = "other"


class TestWireModels:
    def test_google_is_the_only_provider(self):
        assert SUPPORTED_OAUTH_PROVIDERS == ("google",)

    def test_exchange_request_rejects_empty_code(self):
        with pytest.raises(ValidationError):
            ExchangeCodeRequest(code="")

    def test_current_user_response_unwraps_data(self, user_payload):
        response = CurrentUserResponse.model_validate({"data": user_payload})
        assert response.data.id == user_payload["id"]
