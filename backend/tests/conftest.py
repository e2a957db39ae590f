"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import json
from typing import Any, Optional

import httpx
import pytest

from api.dependencies import reset_container
from shared.config import get_settings
from modules.sessions.models import UsersServiceOptions
from modules.sessions.service import SessionClient


TEST_API_URL = "https://users.test/u"
TEST_API_KEY = "test-api-key"


class UsersServiceStub:
    """
    In-memory stand-in for the remote users service.

    Routes are keyed by (method, path relative to the API URL). Every
    request that reaches the stub is recorded, so tests can assert on
    exactly what went over the wire.
    """

    def __init__(self, base_path: str = "/u"):
        self._base_path = base_path
        self._routes: dict[tuple[str, str], Any] = {}
        self.requests: list[httpx.Request] = []

    def respond(
        self,
        method: str,
        path: str,
        status_code: int = 200,
        json_body: Optional[Any] = None,
    ) -> None:
        self._routes[(method, path)] = (status_code, json_body)

    def fail(self, method: str, path: str, error: type[httpx.HTTPError] = httpx.ConnectError) -> None:
        self._routes[(method, path)] = error

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path.removeprefix(self._base_path)
        route = self._routes.get((request.method, path))

        if route is None:
            return httpx.Response(404, json={"error": "not found"})
        if isinstance(route, type) and issubclass(route, httpx.HTTPError):
            raise route("users service unreachable", request=request)
        status_code, json_body = route
        return httpx.Response(status_code, json=json_body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def requests_to(self, method: str, path: str) -> list[httpx.Request]:
        return [
            r for r in self.requests
            if r.method == method and r.url.path.removeprefix(self._base_path) == path
        ]

    @staticmethod
    def body(request: httpx.Request) -> Any:
        return json.loads(request.content)


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset the service container and cached settings around each test."""
    reset_container()
    get_settings.cache_clear()
    yield
    reset_container()
    get_settings.cache_clear()


@pytest.fixture
def user_payload() -> dict[str, Any]:
    """
    A user record exactly as the users service returns it.

    The mixed-case email, the space-separated and millisecond timestamps and
    the `locale` field are deliberate: they must be forwarded untouched.
    """
    return {
        "id": "01JZ0USER0000000000000001",
        "email": "Tess@Example.COM",
        "google_sub": "109876543210987654321",
        "google_user_data": {
            "email": "Tess@Example.COM",
            "email_verified": True,
            "family_name": "Tester",
            "given_name": "Tess",
            "hd": None,
            "name": "Tess Tester",
            "picture": "https://lh3.googleusercontent.com/a/test",
            "sub": "109876543210987654321",
        },
        "last_signed_in_at": "2025-06-01 12:00:00",
        "created_at": "2025-01-15T08:30:00.000Z",
        "updated_at": "2025-06-01T12:00:00Z",
        "locale": "en-GB",
    }


@pytest.fixture
def users_service_options() -> UsersServiceOptions:
    return UsersServiceOptions(api_url=TEST_API_URL, api_key=TEST_API_KEY)


@pytest.fixture
def users_service() -> UsersServiceStub:
    return UsersServiceStub()


@pytest.fixture
def session_client(users_service_options, users_service) -> SessionClient:
    """Session client wired to the in-memory users service."""
    return SessionClient(users_service_options, transport=users_service.transport)
