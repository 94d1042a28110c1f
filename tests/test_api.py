"""
Tests for the properties and calculations API endpoints.
"""

import logging

import pytest
from fastapi.testclient import TestClient

from up_real_estate.db.catalog import get_catalog
from up_real_estate.main import app

# Catalog override is handled by conftest.py

DEFAULT_QUERY = {"downPayment": 90000, "interestRate": 6.5, "loanTerm": 30}


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


# ============================================================================
# PROPERTY API TESTS
# ============================================================================

class TestPropertyAPI:
    """Test property endpoints."""

    def test_list_properties(self, client):
        response = client.get("/api/properties/")
        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["total"] == 6
        assert len(data["data"]) == 6

    def test_property_fields_are_camel_case(self, client):
        response = client.get("/api/properties/1")
        assert response.status_code == 200
        prop = response.json()["data"]
        assert prop["id"] == "1"
        assert prop["price"] == 450000
        assert isinstance(prop["price"], int)
        assert '"price":450000,' in response.text
        assert "imageUrl" in prop
        assert "image_url" not in prop

    def test_filter_properties(self, client):
        response = client.get(
            "/api/properties/", params={"state": "CO", "minPrice": 500000}
        )
        data = response.json()
        assert data["total"] == 1
        assert data["data"][0]["id"] == "6"

    def test_get_property_not_found(self, client):
        response = client.get("/api/properties/nonexistent-id")
        assert response.status_code == 404
        data = response.json()
        assert data["success"] is False
        assert "not found" in data["error"].lower()

    def test_catalog_is_injected(self, client, catalog):
        """Handlers read the overridden catalog, not module state."""
        catalog._properties.pop()
        response = client.get("/api/properties/")
        assert response.json()["total"] == 5


# ============================================================================
# CALCULATION API TESTS
# ============================================================================

class TestCalculationAPI:
    """Test calculation endpoints."""

    def test_calculate_airbnb(self, client):
        response = client.get(
            "/api/calculate/1", params={"strategy": "airbnb", **DEFAULT_QUERY}
        )
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True

        data = body["data"]
        assert data["strategy"] == "airbnb"
        assert data["property"]["id"] == "1"
        assert data["results"] == {
            "monthlyIncome": 4568,
            "monthlyCashFlow": 1318,
            "annualCashFlow": 15811,
            "totalROI": 15.3,
        }
        assert "costBreakdown" not in data

    def test_calculate_flip(self, client):
        response = client.get(
            "/api/calculate/1",
            params={
                "strategy": "flip",
                **DEFAULT_QUERY,
                "renovationBudget": 50000,
                "afterRepairValue": 550000,
                "holdingPeriod": 6,
            },
        )
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["results"]["netProfit"] == -66803
        assert data["results"]["totalInvestment"] == 172103
        assert data["results"]["annualizedROI"] == -77.6
        assert data["costBreakdown"]["renovationBudget"] == 50000
        assert data["costBreakdown"]["afterRepairValue"] == 495000

    def test_strategy_is_case_insensitive(self, client):
        upper = client.get(
            "/api/calculate/1", params={"strategy": "AIRBNB", **DEFAULT_QUERY}
        )
        lower = client.get(
            "/api/calculate/1", params={"strategy": "airbnb", **DEFAULT_QUERY}
        )
        assert upper.status_code == 200
        assert upper.content == lower.content

    def test_invalid_strategy(self, client):
        response = client.get(
            "/api/calculate/1", params={"strategy": "sell", **DEFAULT_QUERY}
        )
        assert response.status_code == 400
        data = response.json()
        assert data["success"] is False
        assert "Invalid strategy" in data["error"]

    def test_unknown_property(self, client):
        response = client.get(
            "/api/calculate/99", params={"strategy": "lease", **DEFAULT_QUERY}
        )
        assert response.status_code == 404
        assert response.json()["success"] is False

    def test_missing_strategy(self, client):
        response = client.get("/api/calculate/1", params=DEFAULT_QUERY)
        assert response.status_code == 422
        assert response.json()["success"] is False

    @pytest.mark.parametrize(
        "params",
        [
            {"downPayment": -1},
            {"interestRate": -0.5},
            {"loanTerm": 0},
            {"loanTerm": 100000},
            {"interestRate": 10000},
        ],
    )
    def test_rejects_out_of_range_financing(self, client, params):
        response = client.get(
            "/api/calculate/1", params={"strategy": "lease", **DEFAULT_QUERY, **params}
        )
        assert response.status_code == 422
        assert response.json()["success"] is False

    def test_defaults_when_financing_omitted(self, client):
        explicit = client.get(
            "/api/calculate/1", params={"strategy": "lease", **DEFAULT_QUERY}
        )
        defaulted = client.get("/api/calculate/1", params={"strategy": "lease"})
        assert defaulted.status_code == 200
        assert defaulted.json() == explicit.json()

    def test_deterministic(self, client):
        params = {"strategy": "flip", **DEFAULT_QUERY}
        first = client.get("/api/calculate/4", params=params)
        second = client.get("/api/calculate/4", params=params)
        assert first.content == second.content

    def test_calculate_all(self, client):
        response = client.get("/api/calculate/1/all", params=DEFAULT_QUERY)
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["property"]["id"] == "1"
        assert set(data["strategies"]) == {"airbnb", "lease", "flip"}
        assert data["strategies"]["lease"]["results"]["monthlyIncome"] == 3150
        assert "property" not in data["strategies"]["flip"]
        assert data["strategies"]["flip"]["results"]["netProfit"] == -66803


# ============================================================================
# ERROR HANDLING TESTS
# ============================================================================

class TestUnexpectedErrors:
    """Test the catch-all 500 handler."""

    @pytest.fixture
    def failing_client(self):
        """Client whose catalog dependency blows up."""

        def broken_catalog():
            raise RuntimeError("catalog unavailable")

        app.dependency_overrides[get_catalog] = broken_catalog
        try:
            yield TestClient(app, raise_server_exceptions=False)
        finally:
            app.dependency_overrides.pop(get_catalog, None)

    def test_unhandled_error_returns_envelope(self, failing_client, caplog):
        with caplog.at_level(logging.ERROR, logger="up_real_estate.main"):
            response = failing_client.get(
                "/api/calculate/1", params={"strategy": "lease", **DEFAULT_QUERY}
            )

        assert response.status_code == 500
        assert response.json() == {
            "success": False,
            "error": "Internal server error",
        }
        assert "Unhandled error on GET /api/calculate/1" in caplog.text
        assert "RuntimeError: catalog unavailable" in caplog.text
