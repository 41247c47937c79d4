from __future__ import annotations

from fastapi.testclient import TestClient

from blog_summariser.config import Settings
from blog_summariser.llm.strategy import AISuccess
from blog_summariser.main import app, get_summariser
from blog_summariser.schemas import SummaryResult
from blog_summariser.summariser import Summariser


ARTICLE = (
    "Observability starts with structured logs that machines can parse. "
    "Metrics come next and summarise behaviour over time. "
    "Traces tie individual requests together across service boundaries."
)


class StubStrategy:
    async def generate(self, text: str, sentence_count: int):
        return AISuccess(result=SummaryResult(summary=f"{sentence_count} sentences.", title="Stub", source="ai"))


def test_health() -> None:
    with TestClient(app) as client:
        response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_config_does_not_expose_key(monkeypatch) -> None:
    monkeypatch.setenv("GEMINI_API_KEY", "super-secret")
    with TestClient(app) as client:
        payload = client.get("/config").json()
    assert payload["api_key_configured"] is True
    assert payload["model"] == "gemini-2.0-flash"
    assert payload["fallback_model"] == "gemini-1.5-pro"
    assert "super-secret" not in str(payload)


def test_summarise_without_key_uses_extractive() -> None:
    with TestClient(app) as client:
        response = client.post("/summarise", json={"text": ARTICLE, "sentence_count": 2})
    assert response.status_code == 200
    body = response.json()
    assert body["source"] == "extractive"
    assert body["title"] == "Observability starts with structured logs that machines can..."
    assert body["summary"].count(".") == 2


def test_summarise_uses_injected_summariser() -> None:
    summariser = Summariser(settings=Settings(GEMINI_API_KEY="k"), strategy=StubStrategy())
    app.dependency_overrides[get_summariser] = lambda: summariser
    try:
        with TestClient(app) as client:
            response = client.post("/summarise", json={"text": ARTICLE})
    finally:
        app.dependency_overrides.clear()
    assert response.status_code == 200
    assert response.json() == {"summary": "6 sentences.", "title": "Stub", "source": "ai"}


def test_blank_text_is_unprocessable() -> None:
    with TestClient(app) as client:
        empty = client.post("/summarise", json={"text": ""})
        blank = client.post("/summarise", json={"text": "   "})
        short = client.post("/summarise", json={"text": "Too short."})
    assert empty.status_code == 422
    assert blank.status_code == 422
    assert short.status_code == 422


def test_sentence_count_is_validated() -> None:
    with TestClient(app) as client:
        response = client.post("/summarise", json={"text": ARTICLE, "sentence_count": 0})
    assert response.status_code == 422
