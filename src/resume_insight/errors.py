"""Extraction failure taxonomy.

All of these are recovered inside the extraction pipeline; callers of
``ResumeExtractor`` never see them.
"""

from __future__ import annotations


class ExtractionError(Exception):
    """Base class for failures inside the extraction pipeline."""


class GatewayError(ExtractionError):
    """The chat-completion endpoint was unreachable or broke its response contract."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class DecodeError(ExtractionError):
    """The model reply could not be parsed as a JSON object."""


class ValidationError(ExtractionError):
    """The model reply was a JSON object but did not fit the record schema."""
