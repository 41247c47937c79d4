from blog_summariser.extractive.sentences import ScoredSentence, Sentence, score_sentences, split_sentences
from blog_summariser.extractive.summariser import DEFAULT_SENTENCE_COUNT, extractive_summarise
from blog_summariser.extractive.title import generate_extractive_title

__all__ = [
    "DEFAULT_SENTENCE_COUNT",
    "ScoredSentence",
    "Sentence",
    "extractive_summarise",
    "generate_extractive_title",
    "score_sentences",
    "split_sentences",
]
