"""
Fixtures for API tests.

The session client dependency is overridden with one wired to the
in-memory users service, so no test reaches the network.
"""

import pytest
from fastapi.testclient import TestClient

from api import app
from api.dependencies import get_session_client


BASE_URL = "https://testserver"


@pytest.fixture
def client(session_client):
    """Test client whose session client talks to the users service stub."""
    app.dependency_overrides[get_session_client] = lambda: session_client
    with TestClient(app, base_url=BASE_URL) as test_client:
        yield test_client
    app.dependency_overrides.clear()
