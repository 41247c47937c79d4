"""Blog article summarisation with a Gemini-first, extractive-fallback pipeline."""

from blog_summariser.errors import ConfigurationError, InputError, ParseError, SummariserError, UpstreamError
from blog_summariser.schemas import SummaryResult
from blog_summariser.summariser import Summariser, summarise

__all__ = [
    "ConfigurationError",
    "InputError",
    "ParseError",
    "SummariserError",
    "UpstreamError",
    "SummaryResult",
    "Summariser",
    "summarise",
]
