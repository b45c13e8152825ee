"""Utilities to pull a JSON object out of free-form LLM replies."""

from __future__ import annotations

import json

from resume_insight.errors import DecodeError


def sanitize_json_text(text: str) -> str:
    """Return the span from the first '{' to the last '}' inclusive.

    Markdown fences, preambles and postscripts are dropped. Text without a
    usable brace pair is returned unchanged so the decoder, not this step,
    reports the failure. Applying this twice gives the same result as once.
    """
    start = text.find("{")
    end = text.rfind("}")
    if start != -1 and end != -1 and start < end:
        return text[start : end + 1]
    return text


def decode_json(text: str) -> dict:
    """Parse sanitized text into a JSON object.

    Raises:
        DecodeError: the text is not valid JSON, or its top level is not an object.
    """
    try:
        data = json.loads(text)
    except (ValueError, TypeError, RecursionError) as exc:
        raise DecodeError(f"Could not decode JSON from text: {text[:200]!r}") from exc
    if not isinstance(data, dict):
        raise DecodeError(f"Expected a JSON object, got {type(data).__name__}")
    return data
