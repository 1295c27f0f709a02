"""
Purpose: Thin async client for the Gemini generateContent REST endpoint.
One place for auth, timeout, and error normalization.

Behavior:
- One POST per call, carrying only the given text.
- No retries. Timeouts, connection errors, non-2xx statuses and bodies that
  are not a JSON object all surface as LLMError.

Testing: Pass an httpx.MockTransport; assert request shape and error mapping.
"""

from __future__ import annotations
import logging
from typing import Any, Optional

import httpx

from ..interfaces import LLMError
from ..models import LLMSettings
from ..utils.gemini_payload import build_request_body

logger = logging.getLogger(__name__)


class GeminiLLMClient:
    def __init__(
        self,
        api_key: str,
        settings: Optional[LLMSettings] = None,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        if not self.api_key:
            raise RuntimeError("Missing GEMINI_API_KEY")
        self.settings = settings or LLMSettings()
        self._transport = transport

    @property
    def endpoint(self) -> str:
        base = self.settings.base_url.rstrip("/")
        return f"{base}/models/{self.settings.model}:generateContent"

    def _headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "x-goog-api-key": self.api_key,
        }

    async def generate(self, text: str) -> dict[str, Any]:
        logger.debug("POST %s chars=%d", self.endpoint, len(text))
        async with httpx.AsyncClient(
            timeout=self.settings.timeout,
            transport=self._transport,
        ) as client:
            try:
                response = await client.post(
                    self.endpoint,
                    json=build_request_body(text),
                    headers=self._headers(),
                )
                response.raise_for_status()
            except httpx.TimeoutException as e:
                raise LLMError(
                    f"Request to {self.settings.model} timed out after "
                    f"{self.settings.timeout}s"
                ) from e
            except httpx.HTTPStatusError as e:
                raise LLMError(
                    f"HTTP error from {self.settings.model}: "
                    f"{e.response.status_code}"
                ) from e
            except httpx.HTTPError as e:
                raise LLMError(f"Error calling {self.settings.model}: {e}") from e

        logger.debug("Response status=%s", response.status_code)
        try:
            data = response.json()
        except ValueError as e:
            raise LLMError("Response body is not valid JSON") from e
        if not isinstance(data, dict):
            raise LLMError(
                f"Expected a JSON object, got {type(data).__name__}"
            )
        return data
