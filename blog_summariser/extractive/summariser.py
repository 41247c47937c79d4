from __future__ import annotations

from blog_summariser.extractive.sentences import ScoredSentence, score_sentences, split_sentences


DEFAULT_SENTENCE_COUNT = 6


def select_top_sentences(scored: list[ScoredSentence], sentence_count: int) -> list[ScoredSentence]:
    # sorted() is stable, so equal scores keep document order.
    ranked = sorted(scored, key=lambda item: item.score, reverse=True)[:sentence_count]
    ranked.sort(key=lambda item: item.sentence.index)
    return ranked


def extractive_summarise(text: str, sentence_count: int = DEFAULT_SENTENCE_COUNT) -> str:
    """Build a summary from the highest scoring sentences of ``text``.

    Sentences are ranked on position, character length and word count and
    the best ``sentence_count`` are joined in their original order. Returns
    an empty string when no sentence survives segmentation.
    """

    sentences = split_sentences(text)
    if len(sentences) <= sentence_count:
        return " ".join(sentence.text for sentence in sentences)

    selected = select_top_sentences(score_sentences(sentences), sentence_count)
    return " ".join(item.sentence.text for item in selected)
