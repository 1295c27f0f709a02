"""
Abstractions for pluggable services. Inversion of control: the controller
depends on these protocols, not on httpx or Streamlit.

Common protocols:
- LLMClient.generate(text) -> decoded response body (dict)
- StateListener(state) -> None, called after every transcript/pending change

Testing: Use simple fake implementations to test the controller without network calls.
"""

from __future__ import annotations
from typing import Any, Protocol

from .models import SessionState


class LLMError(Exception):
    """Transport or decoding failure talking to the text-generation endpoint."""


class LLMClient(Protocol):
    async def generate(self, text: str) -> dict[str, Any]: ...


class StateListener(Protocol):
    def __call__(self, state: SessionState) -> None: ...
