"""API integration tests for triage-ai."""
from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient

from triage_ai.engine.ticket_types import TicketType
from triage_ai.llm.base import ProviderConfigurationError
from triage_ai.main import app


@pytest.fixture
def client():
    """Create test client."""
    return TestClient(app)


class TestHealthEndpoints:
    """Tests for /ping and /health."""

    def test_ping(self, client):
        response = client.get("/ping")

        assert response.status_code == 200
        assert response.json()["status"] == "ok"

    def test_health_reports_rate_limiter(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] in {"healthy", "degraded"}
        assert data["version"] == "0.1.0"
        limiter = data["rate_limiter"]
        assert limiter["token_limit"] == 100
        assert limiter["tokens_per_period"] == 5
        assert 0 <= limiter["available_tokens"] <= limiter["token_limit"]


class TestClassifyEndpoint:
    """Tests for POST /classify."""

    def test_classify_requires_ticket_text(self, client):
        response = client.post("/classify", json={})

        assert response.status_code == 422

    @patch("triage_ai.api.routes.classify.classifier")
    def test_classify_success(self, mock_classifier, client):
        mock_classifier.classify = AsyncMock(return_value=TicketType.RETURNS)

        response = client.post("/classify", json={"ticket_text": "I'd like to return my tent"})

        assert response.status_code == 200
        assert response.json() == {"ticket_type": "Returns"}
        mock_classifier.classify.assert_awaited_once_with("I'd like to return my tent", enforce_rate_limit=True)

    @patch("triage_ai.api.routes.classify.classifier")
    def test_classify_no_result_is_null(self, mock_classifier, client):
        mock_classifier.classify = AsyncMock(return_value=None)

        response = client.post("/classify", json={"ticket_text": "", "enforce_rate_limit": False})

        assert response.status_code == 200
        assert response.json() == {"ticket_type": None}
        mock_classifier.classify.assert_awaited_once_with("", enforce_rate_limit=False)

    @patch("triage_ai.api.routes.classify.classifier")
    def test_classify_provider_unavailable(self, mock_classifier, client):
        mock_classifier.classify = AsyncMock(side_effect=ProviderConfigurationError("OPENAI_API_KEY not provided"))

        response = client.post("/classify", json={"ticket_text": "hello"})

        assert response.status_code == 503
        data = response.json()
        assert data["error"] == "llm_provider_unavailable"
        assert "OPENAI_API_KEY" in data["message"]
