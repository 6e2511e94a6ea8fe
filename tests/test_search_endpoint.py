"""Tests for the supplier search HTTP endpoint."""

import json
from pathlib import Path
import pytest
import respx
from unittest.mock import patch
from fastapi.testclient import TestClient

import supplier_finder.app.routes as routes
from supplier_finder.app.main import app

client = TestClient(app)

SERPAPI_URL = "https://serpapi.com/search.json"
ENDPOINT = "/api/search-suppliers"
FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def serp_ok():
    with open(FIXTURES / "serp_ok.json", "r") as f:
        return json.load(f)


@pytest.fixture
def api_key():
    with patch.dict('os.environ', {'SERPAPI_KEY': 'test-api-key'}):
        yield


class TestSearchSuppliersEndpoint:
    """Test POST /api/search-suppliers."""

    def test_success_returns_candidates(self, serp_ok, api_key):
        with respx.mock:
            respx.get(SERPAPI_URL).respond(200, json=serp_ok)
            response = client.post(ENDPOINT, json={
                "requirements": "plastic injection molding prototype",
                "country": "Germany",
            })

        assert response.status_code == 200
        data = response.json()
        assert isinstance(data, list)
        assert len(data) == 3
        first = data[0]
        assert first["displayLink"] == "www.weber-kunststoff.example.de"
        assert first["countryHint"] == "Germany"
        assert first["sizeCategory"] == "Small / SME (heuristic from snippet)"
        assert first["locationDetail"] == "Appears to be located in Bavaria (from snippet/title)."
        assert first["matchScore"] == 100
        assert first["tags"][-1] == "Web result"

    def test_missing_key_returns_500(self):
        """Test the configuration error response."""
        with patch.dict('os.environ', {}, clear=True):
            response = client.post(ENDPOINT, json={"requirements": "gaskets"})

        assert response.status_code == 500
        assert response.json() == {"error": "SerpAPI key not configured on server."}

    def test_upstream_error_returns_502(self, api_key):
        with respx.mock:
            respx.get(SERPAPI_URL).respond(503)
            response = client.post(ENDPOINT, json={"requirements": "gaskets"})

        assert response.status_code == 502
        assert response.json() == {"error": "SerpAPI HTTP error 503"}
        assert "503" in response.json()["error"]

    def test_unexpected_error_returns_generic_500(self, monkeypatch, api_key):
        """Test that internal error details are not leaked."""
        async def explode(**kwargs):
            raise RuntimeError("secret stack detail")

        monkeypatch.setattr(routes, "find_suppliers_async", explode)
        response = client.post(ENDPOINT, json={"requirements": "gaskets"})

        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}
        assert "secret" not in response.text

    def test_malformed_upstream_body_returns_500(self, api_key):
        with respx.mock:
            respx.get(SERPAPI_URL).respond(200, text="not json")
            response = client.post(ENDPOINT, json={"requirements": "gaskets"})

        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}

    def test_stray_result_entries_do_not_fail_request(self, api_key):
        with respx.mock:
            respx.get(SERPAPI_URL).respond(200, json={
                "organic_results": ["ad", {"link": "https://a.example.com", "title": "Acme"}]
            })
            response = client.post(ENDPOINT, json={"requirements": "gaskets"})

        assert response.status_code == 200
        assert [s["name"] for s in response.json()] == ["Acme"]

    def test_non_string_fields_are_coerced(self, api_key):
        """Test that odd field types are tolerated instead of rejected."""
        with respx.mock:
            route = respx.get(SERPAPI_URL).respond(200, json={"organic_results": []})
            response = client.post(ENDPOINT, json={
                "requirements": 123,
                "country": ["Spain"],
                "certifications": True,
            })

        assert response.status_code == 200
        params = route.calls[0].request.url.params
        assert params["q"] == "123 (supplier OR manufacturer OR vendor OR B2B)"

    def test_empty_body_uses_defaults(self, api_key):
        with respx.mock:
            route = respx.get(SERPAPI_URL).respond(200, json={"organic_results": []})
            response = client.post(ENDPOINT)

        assert response.status_code == 200
        assert response.json() == []
        params = route.calls[0].request.url.params
        assert params["q"] == "industrial supplier (supplier OR manufacturer OR vendor OR B2B)"
        assert params["num"] == "10"

    @pytest.mark.parametrize("max_results,expected", [
        (3, "3"),
        (50, "20"),
        (0, "10"),
        (-1, "10"),
        ("abc", "10"),
        ("7", "7"),
        (None, "10"),
    ])
    def test_max_results_resolution(self, api_key, max_results, expected):
        with respx.mock:
            route = respx.get(SERPAPI_URL).respond(200, json={"organic_results": []})
            response = client.post(ENDPOINT, json={"requirements": "valves", "maxResults": max_results})

        assert response.status_code == 200
        assert route.calls[0].request.url.params["num"] == expected


class TestHealth:
    """Test the health endpoint."""

    def test_health_reports_key_state(self):
        with patch.dict('os.environ', {'SERPAPI_KEY': 'test-api-key'}):
            assert client.get("/health").json() == {"status": "healthy", "serpapi": "configured"}

        with patch.dict('os.environ', {}, clear=True):
            response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["serpapi"] == "missing"
