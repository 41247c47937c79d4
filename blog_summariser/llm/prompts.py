from __future__ import annotations

from dataclasses import dataclass
from typing import Any


MAX_TITLE_WORDS = 10


@dataclass(slots=True)
class SummaryPromptContext:
    text: str
    sentence_count: int


def build_summary_prompt(context: SummaryPromptContext) -> str:
    prompt = [
        "For the following text, provide:",
        f"1. A concise title (max {MAX_TITLE_WORDS} words)",
        f"2. A summary in {context.sentence_count} sentences, keeping the most important information",
        "",
        "Format your response as:",
        "TITLE: [your title here]",
        "SUMMARY: [your summary here]",
        "",
        "Text to summarize:",
        context.text,
    ]
    return "\n".join(prompt)


def build_generate_content_body(prompt: str, *, temperature: float, max_output_tokens: int) -> dict[str, Any]:
    return {
        "contents": [{"parts": [{"text": prompt}]}],
        "generationConfig": {
            "temperature": temperature,
            "maxOutputTokens": max_output_tokens,
        },
    }
