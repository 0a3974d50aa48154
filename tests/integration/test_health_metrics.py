"""Integration tests for /health, /api/test and /metrics endpoints."""

from typing import Any

import pytest
from fastapi.testclient import TestClient
from prometheus_client import REGISTRY
from prometheus_client.parser import text_string_to_metric_families

from backend.app.config import Settings
from backend.app.main import create_app

pytestmark = pytest.mark.integration


def _sample(name: str, labels: dict[str, str]) -> float:
    return REGISTRY.get_sample_value(name, labels) or 0.0


@pytest.fixture
def client(stub_settings: Settings) -> TestClient:
    """Create test client."""
    return TestClient(create_app(settings=stub_settings))


class TestHealthEndpoint:
    """Test /health endpoint."""

    def test_health_reports_provider_and_policy(self, client: TestClient) -> None:
        """Test /health returns 200 with the active configuration."""
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok", "provider": "stub", "policy": "exact_fit"}

    def test_root(self, client: TestClient) -> None:
        """Test root endpoint."""
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["message"] == "Trip Budget Planner API"

    def test_unknown_path_uses_error_envelope(self, client: TestClient) -> None:
        """Test 404s are rendered like every other error."""
        response = client.get("/nope")

        assert response.status_code == 404
        assert response.json() == {"error": "Not Found"}


class TestKeyDiagnostic:
    """Test /api/test credential diagnostic."""

    def test_reports_key_without_exposing_it(self) -> None:
        """Test only presence, length, prefix check and first 10 characters are returned."""
        key = "sk-ant-REDACTED"
        settings = Settings(llm_provider="anthropic", anthropic_api_key=key)
        client = TestClient(create_app(settings=settings, llm_client=object()))  # type: ignore[arg-type]

        response = client.get("/api/test")

        assert response.status_code == 200
        assert response.json() == {
            "exists": True,
            "length": len(key),
            "startsCorrectly": True,
            "firstChars": "sk-ant-api...",
        }
        assert key not in response.text
        assert response.headers["Access-Control-Allow-Origin"] == "*"

    def test_reports_wrong_prefix(self) -> None:
        """Test an OpenAI-style key configured for Anthropic is flagged."""
        settings = Settings(llm_provider="anthropic", anthropic_api_key="sk-proj-1234567890")
        client = TestClient(create_app(settings=settings, llm_client=object()))  # type: ignore[arg-type]

        assert client.get("/api/test").json()["startsCorrectly"] is False

    def test_reports_missing_key(self, client: TestClient) -> None:
        """Test the stub provider has no key."""
        assert client.get("/api/test").json() == {
            "exists": False,
            "length": 0,
            "startsCorrectly": False,
            "firstChars": "NO KEY FOUND",
        }


class TestMetricsEndpoint:
    """Test /metrics endpoint."""

    def test_metrics_returns_prometheus_format(self, client: TestClient) -> None:
        """Test /metrics returns Prometheus text format."""
        response = client.get("/metrics")

        assert response.status_code == 200
        assert "text/plain" in response.headers["content-type"]

    def test_metrics_count_plan_requests(
        self,
        client: TestClient,
        trip_body: dict[str, Any],
    ) -> None:
        """Test planning outcomes and reconciliation adjustments are exported."""
        samples = {
            "success": ("plan_requests_total", {"policy": "exact_fit", "outcome": "success"}),
            "invalid": (
                "plan_requests_total",
                {"policy": "exact_fit", "outcome": "ValidationError"},
            ),
            "latency": ("upstream_latency_ms_count", {"provider": "stub", "outcome": "success"}),
            "adjusted": ("reconciliation_adjustments_total", {"field": "total"}),
        }
        before = {key: _sample(*sample) for key, sample in samples.items()}

        client.post("/api/plan", json=trip_body)
        client.post("/api/plan", json={"destinations": "Rome"})
        client.get("/metrics")

        after = {key: _sample(*sample) for key, sample in samples.items()}
        assert after["success"] - before["success"] == 1
        assert after["invalid"] - before["invalid"] == 1
        assert after["latency"] - before["latency"] == 1
        assert after["adjusted"] - before["adjusted"] == 1

    def test_metrics_exposes_plan_families(self, client: TestClient) -> None:
        """Test the planning metric families appear in the exposition."""
        families = {
            family.name for family in text_string_to_metric_families(client.get("/metrics").text)
        }

        for prefix in ("plan_requests", "upstream_latency_ms", "reconciliation_adjustments"):
            assert any(name.startswith(prefix) for name in families)
