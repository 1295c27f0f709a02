"""
Purpose: The single orchestration point for a chat session. Owns the transcript,
the pending flag and the draft buffer. It centralizes the request/reply cycle
and the session lifecycle (submit, reset). Prevents UI from knowing how the
LLM client works.

Key responsibilities:
- Accept a user utterance only while idle; ignore empty input.
- Append the user turn, mark the session pending, call the LLMClient once.
- Append exactly one assistant turn (reply, fallback or error text) and clear
  pending on every exit path.
- Notify subscribed listeners after each change so a renderer can redraw.
- reset() clears transcript, pending and draft; refused while pending.

Testing: Pure unit tests with a fake LLMClient. Hold a request in flight to
verify that a concurrent submit is refused.
"""

from __future__ import annotations
import logging
from datetime import datetime
from typing import Callable, Optional

from .interfaces import LLMClient, LLMError, StateListener
from .models import Author, ReplyStrings, SessionState, Turn
from .utils.gemini_payload import reply_text
from .variants import CLASSIC

logger = logging.getLogger(__name__)


class ChatSessionController:
    def __init__(
        self,
        llm: LLMClient,
        strings: Optional[ReplyStrings] = None,
        *,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.llm: LLMClient = llm
        self.strings: ReplyStrings = strings or CLASSIC.strings
        self._clock = clock
        self._listeners: list[StateListener] = []
        self.state = SessionState()

    @property
    def transcript(self) -> tuple[Turn, ...]:
        """Read-only snapshot of the conversation so far."""
        return self.state.transcript.snapshot()

    @property
    def pending(self) -> bool:
        return self.state.pending

    @property
    def draft(self) -> str:
        return self.state.draft

    def update_draft(self, text: str) -> None:
        """Store the not-yet-sent composition buffer. Does not notify."""
        self.state.draft = text or ""

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register a listener; returns a callable that removes it again."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self.state)
            except Exception:
                logger.exception("State listener %r failed", listener)

    def reset(self) -> bool:
        """
        Start over: empty transcript, idle, empty draft.
        Refused while a reply is pending; returns True if the session was cleared.
        """
        if self.state.pending:
            logger.debug("Ignoring reset while a reply is pending")
            return False
        self.state = SessionState()
        self._notify()
        return True

    def _append(self, author: Author, text: str) -> None:
        self.state.transcript.append(
            Turn(author=author, text=text, created_at=self._clock())
        )

    async def submit(self, text: Optional[str]) -> bool:
        """
        Send one user utterance and wait for the reply.
        Returns False without touching state when the trimmed text is empty
        or a previous request is still pending; True otherwise.
        Only `text` goes to the model; earlier turns are not sent.
        """
        text = (text or "").strip()
        if not text:
            logger.debug("Ignoring empty submit")
            return False
        if self.state.pending:
            logger.debug("Ignoring submit while a reply is pending")
            return False

        self._append(Author.USER, text)
        self.state.pending = True
        self.state.draft = ""
        logger.info("Submitted turn %d (%d chars)", len(self.state.transcript), len(text))

        reply = self.strings.error_text
        try:
            self._notify()
            data = await self.llm.generate(text)
            reply = reply_text(data, self.strings.fallback_text)
        except LLMError as e:
            logger.warning("LLM request failed: %s", e)
        except Exception:
            logger.exception("Unexpected error while waiting for a reply")
        finally:
            self._append(Author.ASSISTANT, reply)
            self.state.pending = False
            self._notify()
            logger.info("Resolved turn %d", len(self.state.transcript))
        return True
