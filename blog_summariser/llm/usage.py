from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(slots=True)
class UsageRecord:
    model: str
    prompt_tokens: int
    output_tokens: int
    total_tokens: int


def _as_token_count(value: Any) -> int:
    if isinstance(value, bool):
        return 0
    try:
        return max(int(value or 0), 0)
    except (TypeError, ValueError):
        return 0


@dataclass
class UsageTracker:
    """Token usage for the Gemini attempts of a single summarise call."""

    records: list[UsageRecord] = field(default_factory=list)

    def add_response(self, model: str, response: dict[str, Any]) -> None:
        usage = response.get("usageMetadata")
        if not isinstance(usage, dict) or not usage:
            return
        prompt_tokens = _as_token_count(usage.get("promptTokenCount"))
        output_tokens = _as_token_count(usage.get("candidatesTokenCount"))
        total_tokens = _as_token_count(usage.get("totalTokenCount")) or prompt_tokens + output_tokens
        model_version = response.get("modelVersion")
        self.records.append(
            UsageRecord(
                model=model_version if isinstance(model_version, str) and model_version else model,
                prompt_tokens=prompt_tokens,
                output_tokens=output_tokens,
                total_tokens=total_tokens,
            )
        )

    def totals(self) -> dict[str, int]:
        return {
            "prompt_tokens": sum(record.prompt_tokens for record in self.records),
            "output_tokens": sum(record.output_tokens for record in self.records),
            "total_tokens": sum(record.total_tokens for record in self.records),
            "requests": len(self.records),
        }
