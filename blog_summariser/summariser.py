from __future__ import annotations

import asyncio
import logging
from typing import Any, Optional

from blog_summariser.config import Settings, get_settings
from blog_summariser.errors import InputError, UpstreamError
from blog_summariser.extractive import extractive_summarise, generate_extractive_title
from blog_summariser.llm.strategy import AIFailure, AIOutcome, AISuccess, AISummaryStrategy
from blog_summariser.schemas import SummaryResult


logger = logging.getLogger("summariser")


class Summariser:
    """Produce a title and summary, preferring Gemini and falling back to extraction.

    The ``strategy`` is anything with an async ``generate(text, sentence_count)``
    returning :class:`AISuccess` or :class:`AIFailure`.
    """

    def __init__(self, *, settings: Optional[Settings] = None, strategy: Optional[Any] = None) -> None:
        self.settings = settings or get_settings()
        self._owns_strategy = strategy is None
        self.strategy = strategy or AISummaryStrategy(settings=self.settings)

    async def close(self) -> None:
        if self._owns_strategy:
            await self.strategy.close()

    async def __aenter__(self) -> "Summariser":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:  # type: ignore[override]
        await self.close()

    async def summarise(self, text: str, sentence_count: Optional[int] = None) -> SummaryResult:
        count = self.settings.summary_sentence_count if sentence_count is None else sentence_count
        if count < 1:
            raise InputError(f"sentence_count must be positive, got {count}")
        if not text or not text.strip():
            raise InputError("Cannot summarise empty text")

        outcome = await self._run_ai(text, count)
        match outcome:
            case AISuccess(result=result):
                return result
            case AIFailure(error=error, stage=stage):
                logger.warning(
                    "AI summarization failed, falling back to extractive method",
                    extra={"error_kind": type(error).__name__, "stage": stage, "error": str(error)},
                )
                return self._extractive(text, count)
            case _:
                raise TypeError(f"Unexpected strategy outcome: {outcome!r}")

    async def _run_ai(self, text: str, sentence_count: int) -> AIOutcome:
        deadline = self.settings.summary_deadline_seconds
        try:
            return await asyncio.wait_for(self.strategy.generate(text, sentence_count), timeout=deadline)
        except asyncio.TimeoutError:
            return AIFailure(
                error=UpstreamError(f"AI summarisation exceeded the {deadline}s deadline"),
                stage="deadline",
            )
        except Exception as exc:
            logger.exception("AI strategy raised unexpectedly")
            return AIFailure(
                error=UpstreamError(f"Unexpected {exc.__class__.__name__} from AI strategy: {exc}"),
                stage="request",
            )

    def _extractive(self, text: str, sentence_count: int) -> SummaryResult:
        summary = extractive_summarise(text, sentence_count)
        if not summary:
            raise InputError("Text has no sentences long enough to summarise")
        return SummaryResult(summary=summary, title=generate_extractive_title(text), source="extractive")


async def summarise(
    text: str,
    sentence_count: Optional[int] = None,
    *,
    settings: Optional[Settings] = None,
    strategy: Optional[Any] = None,
) -> SummaryResult:
    """One-shot helper that owns its client for the duration of the call."""

    async with Summariser(settings=settings, strategy=strategy) as summariser:
        return await summariser.summarise(text, sentence_count)
