"""
Canonical data shapes, shared truth for typing between layers.

Typical contents:
- Turn (author, text, created_at), immutable once created.
- Transcript, an append-only ordered sequence of turns.
- SessionState (transcript, pending flag, draft buffer).
- LLMSettings (model, base_url, timeout) and ReplyStrings / ChatVariant.

Testing: Mostly types. Transcript is the one class with behavior worth testing.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Iterator, Optional


class Author(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"


@dataclass(frozen=True)
class Turn:
    author: Author
    text: str
    created_at: datetime = field(default_factory=datetime.now)


class Transcript:
    """Ordered conversation history. Turns can be appended, never edited or removed."""

    def __init__(self) -> None:
        self._turns: list[Turn] = []

    def append(self, turn: Turn) -> None:
        self._turns.append(turn)

    def last(self) -> Optional[Turn]:
        return self._turns[-1] if self._turns else None

    def snapshot(self) -> tuple[Turn, ...]:
        return tuple(self._turns)

    def __len__(self) -> int:
        return len(self._turns)

    def __iter__(self) -> Iterator[Turn]:
        return iter(tuple(self._turns))

    def __getitem__(self, idx: int) -> Turn:
        return self._turns[idx]

    def __repr__(self) -> str:
        return f"Transcript({len(self._turns)} turns)"


@dataclass
class SessionState:
    transcript: Transcript = field(default_factory=Transcript)
    pending: bool = False
    draft: str = ""


@dataclass(frozen=True)
class LLMSettings:
    model: str = "gemini-2.0-flash"
    base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    timeout: Optional[float] = 30.0


@dataclass(frozen=True)
class ReplyStrings:
    fallback_text: str
    error_text: str

    def __post_init__(self) -> None:
        if not self.fallback_text.strip() or not self.error_text.strip():
            raise ValueError("Reply strings must be non-empty.")


class DateStyle(str, Enum):
    LONG = "long"
    SHORT = "short"


@dataclass(frozen=True)
class ChatVariant:
    key: str
    title: str
    strings: ReplyStrings
    input_placeholder: str
    tagline: str
    url_path: str = ""
    show_timestamps: bool = False
    persist_theme: bool = False
    date_style: DateStyle = DateStyle.LONG
    clock_seconds: bool = True
    header_date: bool = False
    welcome_cards: bool = False
