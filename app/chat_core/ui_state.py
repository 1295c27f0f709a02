"""
Purpose: Per-browser-session bookkeeping the Streamlit layer needs across
script reruns. Works on any MutableMapping so it can be tested without
Streamlit (the app passes st.session_state).

- SendGuard: remembers that a send was interrupted by a rerun, so the input
  captured during that wait is discarded instead of sent afterwards.
- LLMSlot: holds the session's LLM client and rebuilds it when the API key
  changes.
"""

from __future__ import annotations
import hashlib
import logging
from typing import Any, Callable, MutableMapping, Optional

logger = logging.getLogger(__name__)


class SendGuard:
    def __init__(self, session: MutableMapping, scope: str) -> None:
        self._session = session
        self._key = f"send_in_flight_{scope}"

    def begin(self) -> None:
        self._session[self._key] = True

    def end(self) -> None:
        self._session[self._key] = False

    def consume_interrupted(self) -> bool:
        """True once if the previous run never reached end(); clears the flag."""
        interrupted = bool(self._session.get(self._key, False))
        if interrupted:
            logger.info("Discarding input sent while a reply was pending")
            self._session[self._key] = False
        return interrupted


def key_signature(api_key: str) -> str:
    return hashlib.sha1(api_key.encode("utf-8")).hexdigest()


class LLMSlot:
    LLM_KEY = "llm"
    SIG_KEY = "llm_key_sig"

    def __init__(self, session: MutableMapping, factory: Callable[[str], Any]) -> None:
        self._session = session
        self._factory = factory

    @property
    def client(self) -> Optional[Any]:
        return self._session.get(self.LLM_KEY)

    def ensure(self, api_key: str) -> tuple[Any, bool]:
        """
        Return (client, rebuilt). A new client is built only when the key's
        signature differs from the one the current client was built with.
        Factory errors propagate and leave no client in place.
        """
        sig = key_signature(api_key)
        if self.client is not None and self._session.get(self.SIG_KEY) == sig:
            return self.client, False
        self._session[self.LLM_KEY] = None
        self._session[self.SIG_KEY] = None
        client = self._factory(api_key)
        self._session[self.LLM_KEY] = client
        self._session[self.SIG_KEY] = sig
        logger.info("LLM client built for a new API key")
        return client, True
