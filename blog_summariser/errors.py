from __future__ import annotations

from typing import Any, Optional


OVERLOADED_STATUS = 503


class SummariserError(RuntimeError):
    """Base class for summarisation failures."""


class ConfigurationError(SummariserError):
    """A required credential or setting is missing."""


class UpstreamError(SummariserError):
    def __init__(self, message: str, *, status_code: Optional[int] = None, content: Any = None):
        if status_code is not None:
            message = f"{message} (status {status_code})"
        super().__init__(message)
        self.status_code = status_code
        self.content = content

    @property
    def is_overloaded(self) -> bool:
        return self.status_code == OVERLOADED_STATUS


class ParseError(SummariserError):
    """Generated text did not contain the fields we need."""


class InputError(SummariserError, ValueError):
    """The caller supplied text that cannot be summarised."""
