"""Integration tests for the REST API."""

import pytest
from fastapi.testclient import TestClient

from cutstock.web import create_app


@pytest.fixture
def client() -> TestClient:
    """Create a test client for a fresh app instance."""
    return TestClient(create_app())


def test_health(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


class TestOptimizeEndpoint:
    """Tests for POST /api/v1/optimize."""

    def test_two_bars(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/optimize",
            json={
                "stock_length": 600,
                "items": [
                    {"name": "Rail", "length": 300, "quantity": 2},
                    {"name": "Brace", "length": 200, "quantity": 1},
                ],
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert data["is_valid"] is True
        assert data["error"] is None
        assert [[p["name"] for p in plan["pieces"]] for plan in data["plans"]] == [
            ["Rail", "Rail"],
            ["Brace"],
        ]
        assert data["stats"]["total_stocks"] == 2
        assert data["stats"]["overall_efficiency"] == 66.67

    def test_improve_can_be_disabled(self, client: TestClient) -> None:
        items = [
            {"length": 60, "quantity": 1},
            {"length": 45, "quantity": 2},
            {"length": 10, "quantity": 1},
        ]

        improved = client.post(
            "/api/v1/optimize", json={"stock_length": 100, "items": items}
        ).json()
        greedy = client.post(
            "/api/v1/optimize",
            json={"stock_length": 100, "items": items, "improve": False},
        ).json()

        def lengths(data):
            return [[p["length"] for p in plan["pieces"]] for plan in data["plans"]]

        assert lengths(improved) == [[45, 45, 10], [60]]
        assert lengths(greedy) == [[60, 10], [45, 45]]

    def test_unfittable_piece_in_body(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/optimize",
            json={"stock_length": 600, "items": [{"length": 700}]},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["is_valid"] is False
        assert "does not fit" in data["error"]
        assert data["plans"] == []
        assert data["stats"]["total_stocks"] == 0

    def test_empty_items(self, client: TestClient) -> None:
        response = client.post("/api/v1/optimize", json={"stock_length": 600})

        assert response.status_code == 200
        assert response.json()["plans"] == []

    def test_invalid_request(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/optimize",
            json={"stock_length": 0, "items": [{"length": 10}]},
        )

        assert response.status_code == 422


class TestValidateEndpoint:
    """Tests for POST /api/v1/validate."""

    def test_valid_job(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/validate",
            json={"config": {"stock_length": 600, "items": [{"length": 300}]}},
        )

        assert response.status_code == 200
        assert response.json() == {"is_valid": True, "errors": [], "warnings": []}

    def test_oversized_piece(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/validate",
            json={"config": {"stock_length": 600, "items": [{"length": 700}]}},
        )

        data = response.json()
        assert data["is_valid"] is False
        assert data["errors"][0]["path"] == "items[0].length"

    def test_schema_error_is_422(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/validate",
            json={"config": {"stock_length": 600, "kerf": 3}},
        )

        assert response.status_code == 422
        data = response.json()
        assert data["error"] == "Invalid job configuration"
        assert data["error_type"] == "validation"
        assert data["details"][0]["path"] == "kerf"
