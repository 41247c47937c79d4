from __future__ import annotations

import re


FIRST_SENTENCE_BOUNDARY = re.compile(r"[.!?]")
MAX_VERBATIM_TITLE_LENGTH = 60
TRUNCATED_TITLE_WORDS = 8
ELLIPSIS = "..."


def generate_extractive_title(text: str) -> str:
    """Derive a title from the opening sentence of ``text``.

    Short opening sentences are used as-is; longer ones are cut to their
    first eight words followed by an ellipsis.
    """

    first_sentence = FIRST_SENTENCE_BOUNDARY.split(text, maxsplit=1)[0].strip()
    if not first_sentence:
        first_sentence = text.strip()

    if len(first_sentence) <= MAX_VERBATIM_TITLE_LENGTH:
        return first_sentence

    words = first_sentence.split()[:TRUNCATED_TITLE_WORDS]
    return " ".join(words) + ELLIPSIS
