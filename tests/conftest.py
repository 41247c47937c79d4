from __future__ import annotations

import pytest

from blog_summariser.config import get_settings


_ENV_VARS = (
    "GEMINI_API_KEY",
    "GEMINI_BASE_URL",
    "GEMINI_MODEL",
    "GEMINI_FALLBACK_MODEL",
    "GEMINI_RETRY_BACKOFF_SECONDS",
    "SUMMARY_SENTENCE_COUNT",
    "SUMMARY_DEADLINE_SECONDS",
)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path):
    # Keep a developer's .env or exported key from leaking into tests.
    monkeypatch.chdir(tmp_path)
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
