"""Utilities for building generateContent requests and reading their replies."""

from __future__ import annotations
from typing import Any, Optional


def build_request_body(text: str) -> dict[str, Any]:
    """Single-turn body: the user text is the only content sent."""
    return {"contents": [{"parts": [{"text": text}]}]}


def _first(value: Any) -> Any:
    if isinstance(value, list) and value:
        return value[0]
    return None


def first_candidate_text(data: Any) -> Optional[str]:
    """
    Return candidates[0].content.parts[0].text from a response body.
    - Any missing key, empty list or wrong type along the path yields None.
    - An empty text also yields None; whitespace is kept as-is.
    """
    if not isinstance(data, dict):
        return None
    candidate = _first(data.get("candidates"))
    if not isinstance(candidate, dict):
        return None
    content = candidate.get("content")
    if not isinstance(content, dict):
        return None
    part = _first(content.get("parts"))
    if not isinstance(part, dict):
        return None
    text = part.get("text")
    if not isinstance(text, str) or not text:
        return None
    return text


def reply_text(data: Any, fallback: str) -> str:
    """Lenient: the first candidate's text, else the fallback string."""
    return first_candidate_text(data) or fallback
