from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from blog_summariser.errors import ParseError


TITLE_RULE = re.compile(r"TITLE:\s*(.*?)(?:\n|$)", re.IGNORECASE)
SUMMARY_RULE = re.compile(r"SUMMARY:\s*(.*?)(?:\n\n|\Z)", re.IGNORECASE | re.DOTALL)


@dataclass(slots=True)
class ParsedSummary:
    summary: str
    title: Optional[str]


def _match_rule(rule: re.Pattern[str], text: str) -> Optional[str]:
    match = rule.search(text)
    if match is None:
        return None
    value = match.group(1).strip()
    return value or None


def parse_summary_response(generated_text: str) -> ParsedSummary:
    """Pull the ``TITLE:`` line and ``SUMMARY:`` block out of model output.

    The title is optional; callers substitute their own when it is absent.
    A missing or blank summary raises :class:`ParseError`.
    """

    summary = _match_rule(SUMMARY_RULE, generated_text)
    if summary is None:
        raise ParseError("Generated text has no SUMMARY section")
    return ParsedSummary(summary=summary, title=_match_rule(TITLE_RULE, generated_text))
