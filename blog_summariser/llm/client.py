from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

import httpx

from blog_summariser.config import Settings, get_settings
from blog_summariser.errors import ConfigurationError, UpstreamError
from blog_summariser.llm.prompts import build_generate_content_body
from blog_summariser.llm.usage import UsageTracker


logger = logging.getLogger("llm.client")


@dataclass(slots=True)
class GenerationResult:
    text: str
    model: str
    response: dict[str, Any]


def _extract_output_text(payload: Any) -> str:
    """Return the first candidate's first text part, or an empty string."""

    if not isinstance(payload, dict):
        return ""
    candidates = payload.get("candidates")
    if not isinstance(candidates, list) or not candidates:
        return ""
    first = candidates[0]
    content = first.get("content") if isinstance(first, dict) else None
    parts = content.get("parts") if isinstance(content, dict) else None
    if not isinstance(parts, list) or not parts:
        return ""
    part = parts[0]
    text = part.get("text") if isinstance(part, dict) else None
    return text if isinstance(text, str) else ""


class GeminiClient:
    """Thin wrapper around the Gemini ``generateContent`` REST endpoint."""

    def __init__(
        self,
        *,
        settings: Optional[Settings] = None,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.base_url = self.settings.gemini_base_url.rstrip("/")
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=self.settings.gemini_timeout_seconds)

    async def close(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "GeminiClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:  # type: ignore[override]
        await self.close()

    def endpoint_for(self, model: str) -> str:
        return f"{self.base_url}/models/{model}:generateContent"

    async def generate(
        self,
        prompt: str,
        *,
        model: str,
        timeout: float,
        usage: Optional[UsageTracker] = None,
    ) -> GenerationResult:
        api_key = self.settings.gemini_api_key
        if not api_key:
            raise ConfigurationError("GEMINI_API_KEY is not configured in environment variables")

        body = build_generate_content_body(
            prompt,
            temperature=self.settings.gemini_temperature,
            max_output_tokens=self.settings.gemini_max_output_tokens,
        )
        try:
            response = await self._client.post(
                self.endpoint_for(model),
                params={"key": api_key},
                json=body,
                headers={"Content-Type": "application/json"},
                timeout=timeout,
            )
        except httpx.TimeoutException as exc:
            raise UpstreamError(f"Gemini request to {model} timed out after {timeout}s") from exc
        except httpx.HTTPError as exc:
            raise UpstreamError(f"Gemini request to {model} failed: {exc.__class__.__name__}") from exc

        if response.status_code >= 400:
            raise UpstreamError(
                f"Gemini API error for {model}",
                status_code=response.status_code,
                content=response.text,
            )

        try:
            payload = response.json()
        except ValueError as exc:
            raise UpstreamError(f"Gemini returned a non-JSON body for {model}") from exc

        if usage is not None and isinstance(payload, dict):
            usage.add_response(model, payload)

        text = _extract_output_text(payload)
        if not text.strip():
            raise UpstreamError(f"No summary was generated by {model}", content=payload)

        logger.debug("Gemini generation complete", extra={"model": model, "chars": len(text)})
        return GenerationResult(text=text, model=model, response=payload)
