"""Integration tests for JWT authentication.

Validates:
  - /health is public (plain Django view, no DRF).
  - Protected DRF endpoints return 401 without or with a bad token.
  - A token issued by the token endpoint grants access.
"""

import pytest
from django.contrib.auth import get_user_model

pytestmark = pytest.mark.integration


class TestPublicEndpoints:
    """Health check and docs must remain accessible without credentials."""

    def test_health_is_public(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_schema_is_public(self, api_client):
        response = api_client.get("/api/schema/")
        assert response.status_code == 200


class TestProtectedEndpoints:
    """All DRF endpoints require a valid JWT by default (Fail Closed)."""

    def test_no_token_returns_401(self, api_client):
        response = api_client.get("/api/v1/kunden")
        assert response.status_code == 401

    def test_invalid_token_returns_401(self, api_client):
        api_client.credentials(HTTP_AUTHORIZATION="Bearer invalid.token.here")
        response = api_client.get("/api/v1/kunden")
        assert response.status_code == 401

    def test_malformed_auth_header_returns_401(self, api_client):
        api_client.credentials(HTTP_AUTHORIZATION="Token some-token")
        response = api_client.get("/api/v1/vermittler")
        assert response.status_code == 401

    def test_401_includes_www_authenticate_header(self, api_client):
        response = api_client.get("/api/v1/kunden")
        assert response.status_code == 401
        assert "Bearer" in response.get("WWW-Authenticate", "")


class TestTokenFlow:
    def test_obtained_token_grants_access(self, api_client):
        get_user_model().objects.create_user(username="jwtuser", password="s3cret-pass")

        token = api_client.post(
            "/api/v1/auth/token/",
            {"username": "jwtuser", "password": "s3cret-pass"},
            format="json",
        )
        assert token.status_code == 200

        api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {token.data['access']}")
        response = api_client.get("/api/v1/kunden")
        assert response.status_code == 200
