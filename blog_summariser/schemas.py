from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


SummarySource = Literal["ai", "extractive"]


@dataclass(frozen=True, slots=True)
class SummaryResult:
    summary: str
    title: str
    source: SummarySource


class SummariseRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")
    text: str = Field(min_length=1, description="Article text already extracted from the page")
    sentence_count: Optional[int] = Field(
        default=None,
        ge=1,
        le=50,
        description="Number of sentences in the summary; defaults to SUMMARY_SENTENCE_COUNT",
    )


class SummariseResponse(BaseModel):
    summary: str
    title: str
    source: SummarySource

    @classmethod
    def from_result(cls, result: SummaryResult) -> "SummariseResponse":
        return cls(summary=result.summary, title=result.title, source=result.source)
