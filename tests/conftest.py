"""
Pytest configuration and fixtures
"""
import asyncio
from datetime import datetime
from typing import Any, Optional

import pytest

from chat_core.controller import ChatSessionController
from chat_core.models import ReplyStrings


def gemini_reply(text: str) -> dict[str, Any]:
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


class FakeLLMClient:
    """Records every call; optionally holds the reply until release() is called."""

    def __init__(self, reply: Any = None, error: Optional[BaseException] = None):
        self.reply = reply if reply is not None else gemini_reply("ok")
        self.error = error
        self.calls: list[str] = []
        self._gate: Optional[asyncio.Event] = None
        self.started = asyncio.Event()

    def hold(self) -> None:
        self._gate = asyncio.Event()

    def release(self) -> None:
        assert self._gate is not None
        self._gate.set()

    async def generate(self, text: str) -> dict[str, Any]:
        self.calls.append(text)
        self.started.set()
        if self._gate is not None:
            await self._gate.wait()
        if self.error is not None:
            raise self.error
        return self.reply


STRINGS = ReplyStrings(fallback_text="No response", error_text="Request failed.")
FIXED_NOW = datetime(2026, 10, 19, 15, 4, 5)


@pytest.fixture
def llm() -> FakeLLMClient:
    return FakeLLMClient()


@pytest.fixture
def controller(llm: FakeLLMClient) -> ChatSessionController:
    return ChatSessionController(llm, STRINGS, clock=lambda: FIXED_NOW)
