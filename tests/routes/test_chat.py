"""
Tests for the HTTP endpoints: POST /chat, GET /categories, GET /health.
"""

from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient

from localguide.main import app
from localguide.schemas.chat import ChatResponse, SourceLink
from localguide.services import chat_service
from localguide.services.chat_service import ChatResult


@pytest.fixture
def client():
    """Create test client for FastAPI app."""
    return TestClient(app)


@pytest.fixture
def stub_generator(monkeypatch, make_generator):
    """Install a StubGenerator as the shared generator."""
    def install(outcomes):
        generator = make_generator(outcomes)
        monkeypatch.setattr(chat_service, "_generator", generator)
        return generator
    return install


class TestChatEndpoint:
    """Tests for POST /chat."""

    def test_happy_path_returns_text_and_sources(self, client, fast_settings, stub_generator):
        stub_generator(["Η Taverna X έχει την καλύτερη πίτα."])

        response = client.post("/chat", json={"query": "Πού να φάω;", "category": "food"})

        assert response.status_code == 200
        assert response.json() == {
            "text": "Η Taverna X έχει την καλύτερη πίτα.",
            "sources": [{"title": "Taverna X - Website", "uri": "http://x.example"}],
        }

    def test_unknown_category_returns_500_with_apology(self, client, fast_settings, stub_generator):
        stub_generator(["unused"])

        response = client.post("/chat", json={"query": "hi", "category": "unknown"})

        assert response.status_code == 500
        body = response.json()
        assert body["sources"] == []
        assert "I'm sorry" in body["text"]
        assert "Error:" in body["text"]

    def test_route_maps_service_result(self, client):
        result = ChatResult(
            status_code=200,
            response=ChatResponse(text="ok", sources=[SourceLink(title="A - Website", uri="http://a.example")]),
        )

        with patch("localguide.routes.chat.handle_chat", new=AsyncMock(return_value=result)) as mock:
            response = client.post("/chat", json={"query": "q", "category": "sights"})

        mock.assert_awaited_once_with(category="sights", user_query="q")
        assert response.json()["sources"][0]["uri"] == "http://a.example"

    def test_empty_category_returns_500_with_apology(self, client, fast_settings, stub_generator):
        generator = stub_generator(["unused"])

        response = client.post("/chat", json={"query": "hi", "category": ""})

        assert response.status_code == 500
        body = response.json()
        assert body["sources"] == []
        assert body["text"].startswith("I'm sorry, I had a problem processing that request.")
        assert "invalid category key" in body["text"]
        assert generator.calls == 0

    def test_overlong_category_returns_500_with_apology(self, client, fast_settings, stub_generator):
        stub_generator(["unused"])

        response = client.post("/chat", json={"query": "hi", "category": "x" * 300})

        assert response.status_code == 500
        assert response.json()["sources"] == []

    def test_empty_query_is_answered(self, client, fast_settings, stub_generator):
        generator = stub_generator(["Taverna X"])

        response = client.post("/chat", json={"query": "", "category": "food"})

        assert response.status_code == 200
        assert response.json()["sources"] == [{"title": "Taverna X - Website", "uri": "http://x.example"}]
        assert "Question: \n" in generator.prompts[0]

    @pytest.mark.parametrize("body", [
        {"category": "food"},
        {"query": "hi"},
        {"query": 5, "category": "food"},
        {"query": "hi", "category": None},
    ])
    def test_missing_or_mistyped_fields_return_422(self, client, body, recwarn):
        response = client.post("/chat", json=body)

        assert response.status_code == 422
        assert response.json()["error"] == "validation_error"
        assert not [w for w in recwarn if "HTTP_422" in str(w.message)]


class TestCategoriesEndpoint:
    """Tests for GET /categories."""

    def test_lists_categories_from_data_dir(self, client, fast_settings, make_category, data_dir):
        make_category(data_dir, "sights", "t", "Name\n")

        response = client.get("/categories")

        assert response.status_code == 200
        assert response.json() == {"categories": ["food", "sights"]}


class TestHealthEndpoint:
    """Tests for GET /health."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    def test_health_response_model_in_openapi(self, client):
        schema = client.get("/openapi.json").json()

        assert "HealthResponse" in schema["components"]["schemas"]
