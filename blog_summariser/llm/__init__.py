from blog_summariser.llm.client import GeminiClient, GenerationResult
from blog_summariser.llm.parsing import ParsedSummary, parse_summary_response
from blog_summariser.llm.prompts import SummaryPromptContext, build_generate_content_body, build_summary_prompt
from blog_summariser.llm.strategy import AIFailure, AIOutcome, AISuccess, AISummaryStrategy
from blog_summariser.llm.usage import UsageRecord, UsageTracker

__all__ = [
    "GeminiClient",
    "GenerationResult",
    "ParsedSummary",
    "parse_summary_response",
    "SummaryPromptContext",
    "build_generate_content_body",
    "build_summary_prompt",
    "AIFailure",
    "AIOutcome",
    "AISuccess",
    "AISummaryStrategy",
    "UsageRecord",
    "UsageTracker",
]
