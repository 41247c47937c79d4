from __future__ import annotations

import re
from dataclasses import dataclass


SENTENCE_BOUNDARY = re.compile(r"(?<=[.?!])\s+")
MIN_SENTENCE_LENGTH = 20

POSITION_WEIGHT = 0.6
LENGTH_WEIGHT = 0.2
WORD_COUNT_WEIGHT = 0.2
FULL_CREDIT_LENGTH = 100
FULL_CREDIT_WORDS = 20


@dataclass(slots=True)
class Sentence:
    index: int
    text: str

    @property
    def length(self) -> int:
        return len(self.text)

    @property
    def word_count(self) -> int:
        return len(self.text.split())


@dataclass(slots=True)
class ScoredSentence:
    sentence: Sentence
    score: float


def split_sentences(text: str) -> list[Sentence]:
    """Segment text on terminal punctuation, dropping short fragments.

    Segments of 20 characters or fewer are treated as noise (headers,
    bylines, stray fragments). Surrounding whitespace is stripped first so no
    sentence carries a leading blank. Indices are assigned after filtering.
    """

    flattened = text.replace("\n", " ").strip()
    segments = [segment for segment in SENTENCE_BOUNDARY.split(flattened) if len(segment) > MIN_SENTENCE_LENGTH]
    return [Sentence(index=index, text=segment) for index, segment in enumerate(segments)]


def position_score(index: int, total: int) -> float:
    return 1 - (index / total)


def length_score(sentence: Sentence) -> float:
    return min(sentence.length / FULL_CREDIT_LENGTH, 1.0)


def word_count_score(sentence: Sentence) -> float:
    return min(sentence.word_count / FULL_CREDIT_WORDS, 1.0)


def score_sentence(sentence: Sentence, total: int) -> ScoredSentence:
    score = (
        POSITION_WEIGHT * position_score(sentence.index, total)
        + LENGTH_WEIGHT * length_score(sentence)
        + WORD_COUNT_WEIGHT * word_count_score(sentence)
    )
    return ScoredSentence(sentence=sentence, score=score)


def score_sentences(sentences: list[Sentence]) -> list[ScoredSentence]:
    total = len(sentences)
    return [score_sentence(sentence, total) for sentence in sentences]
