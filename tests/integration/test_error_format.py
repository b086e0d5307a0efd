"""Integration tests for standardized error responses."""

import pytest

pytestmark = pytest.mark.integration


class TestStandardizedErrors:
    def test_auth_error_has_standard_format(self, api_client):
        response = api_client.get("/api/v1/kunden")
        assert response.status_code == 401
        data = response.json()
        assert data["type"] == "client_error"
        assert isinstance(data["errors"], list)
        assert data["errors"]
        assert "code" in data["errors"][0]
        assert "detail" in data["errors"][0]

    def test_parse_error_has_standard_format(self, auth_client):
        response = auth_client.post(
            "/api/v1/kunden", data="{", content_type="application/json"
        )
        assert response.status_code == 400
        data = response.json()
        assert "type" in data
        assert isinstance(data["errors"], list)

    def test_validation_error_carries_field_attr(self, auth_client, agent):
        response = auth_client.post(
            "/api/v1/kunden",
            {"given_name": "Max", "birth_date": "2001-01-01", "agent": agent.id},
            format="json",
        )
        assert response.status_code == 400
        data = response.json()
        assert data["type"] == "validation_error"
        (error,) = data["errors"]
        assert error["attr"] == "name"
        assert error["detail"] == "This value should not be blank."

    def test_not_found_has_standard_format(self, auth_client):
        response = auth_client.get(
            "/api/v1/kunden/00000000-0000-0000-0000-000000000000"
        )
        assert response.status_code == 404
        data = response.json()
        assert data["type"] == "client_error"
        assert data["errors"][0]["code"] == "not_found"
