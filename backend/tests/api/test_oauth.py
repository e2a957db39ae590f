"""Tests for the OAuth redirect endpoint."""


class TestLoginRedirectUrl:
    def test_returns_redirect_url(self, client, users_service):
        users_service.respond(
            "GET", "/oauth/google/redirect_url",
            json_body={"redirect_url": "https://accounts.google.com/o/oauth2/auth?client_id=1"},
        )

        response = client.get("/api/oauth/google/redirect_url")

        assert response.status_code == 200
        assert response.json() == {
            "redirectUrl": "https://accounts.google.com/o/oauth2/auth?client_id=1"
        }

    def test_unsupported_provider_returns_400(self, client, users_service):
        response = client.get("/api/oauth/github/redirect_url")

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "UNSUPPORTED_PROVIDER"
        assert body["details"]["provider"] == "github"
        assert users_service.requests == []

    def test_upstream_failure_returns_502(self, client, users_service):
        users_service.respond("GET", "/oauth/google/redirect_url", status_code=500)

        response = client.get("/api/oauth/google/redirect_url")

        assert response.status_code == 502
        assert response.json()["details"]["service"] == "users_service"
