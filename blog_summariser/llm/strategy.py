from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional, Union

from blog_summariser.config import Settings, get_settings
from blog_summariser.errors import ConfigurationError, ParseError, SummariserError, UpstreamError
from blog_summariser.extractive.title import generate_extractive_title
from blog_summariser.llm.client import GeminiClient, GenerationResult
from blog_summariser.llm.parsing import parse_summary_response
from blog_summariser.llm.prompts import SummaryPromptContext, build_summary_prompt
from blog_summariser.llm.usage import UsageTracker
from blog_summariser.schemas import SummaryResult


logger = logging.getLogger("llm.strategy")


@dataclass(frozen=True, slots=True)
class AISuccess:
    result: SummaryResult


@dataclass(frozen=True, slots=True)
class AIFailure:
    error: SummariserError
    stage: str


AIOutcome = Union[AISuccess, AIFailure]


class AISummaryStrategy:
    """Summarise through Gemini, retrying once on a different model when overloaded.

    ``generate`` never raises for upstream, configuration or parsing problems,
    nor for unexpected errors while handling a response. Those come back as
    :class:`AIFailure` tagged with the stage that failed (``config``,
    ``request``, ``retry`` or ``parse``). Token usage is collected per call
    and logged once the call finishes.
    """

    def __init__(
        self,
        *,
        settings: Optional[Settings] = None,
        client: Optional[GeminiClient] = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        self.settings = settings or get_settings()
        self._owns_client = client is None
        self.client = client or GeminiClient(settings=self.settings)
        self._sleep = sleep

    async def close(self) -> None:
        if self._owns_client:
            await self.client.close()

    async def __aenter__(self) -> "AISummaryStrategy":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:  # type: ignore[override]
        await self.close()

    async def generate(self, text: str, sentence_count: int) -> AIOutcome:
        if not self.settings.has_api_key:
            return AIFailure(
                error=ConfigurationError("GEMINI_API_KEY is not configured in environment variables"),
                stage="config",
            )

        usage = UsageTracker()
        try:
            return await self._generate(text, sentence_count, usage)
        except Exception as exc:
            logger.exception("Unexpected error during AI summarisation")
            return AIFailure(
                error=UpstreamError(f"Unexpected {exc.__class__.__name__} from Gemini: {exc}"),
                stage="request",
            )
        finally:
            if usage.records:
                logger.info("Gemini token usage", extra=usage.totals())

    async def _generate(self, text: str, sentence_count: int, usage: UsageTracker) -> AIOutcome:
        prompt = build_summary_prompt(SummaryPromptContext(text=text, sentence_count=sentence_count))
        try:
            generation = await self._request(prompt, usage)
        except ConfigurationError as exc:
            return AIFailure(error=exc, stage="config")
        except UpstreamError as exc:
            if not exc.is_overloaded:
                return AIFailure(error=exc, stage="request")
            try:
                generation = await self._retry(prompt, exc, usage)
            except SummariserError as retry_exc:
                logger.error("Retry also failed", extra={"model": self.settings.gemini_fallback_model})
                return AIFailure(error=retry_exc, stage="retry")

        try:
            parsed = parse_summary_response(generation.text)
        except ParseError as exc:
            return AIFailure(error=exc, stage="parse")

        title = parsed.title or generate_extractive_title(text)
        return AISuccess(result=SummaryResult(summary=parsed.summary, title=title, source="ai"))

    async def _request(self, prompt: str, usage: UsageTracker) -> GenerationResult:
        return await self.client.generate(
            prompt,
            model=self.settings.gemini_model,
            timeout=self.settings.gemini_timeout_seconds,
            usage=usage,
        )

    async def _retry(self, prompt: str, cause: UpstreamError, usage: UsageTracker) -> GenerationResult:
        logger.info(
            "Retrying after %s error",
            cause.status_code,
            extra={
                "model": self.settings.gemini_fallback_model,
                "backoff_seconds": self.settings.gemini_retry_backoff_seconds,
            },
        )
        await self._sleep(self.settings.gemini_retry_backoff_seconds)
        return await self.client.generate(
            prompt,
            model=self.settings.gemini_fallback_model,
            timeout=self.settings.gemini_retry_timeout_seconds,
            usage=usage,
        )
