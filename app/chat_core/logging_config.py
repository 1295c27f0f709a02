"""
Logging setup: one stream handler, a plain-text format, and a filter that
masks API keys before anything is written.
"""

from __future__ import annotations
import logging
import re

LOG_FORMAT = "[%(asctime)s] %(levelname)s - %(name)s - %(message)s"


class SensitiveDataFilter(logging.Filter):
    """Mask API keys in log messages and their arguments"""

    SENSITIVE_PATTERNS = [
        (re.compile(r"([?&]key=)[^&\s\"']+", re.I), r"\1***"),
        (re.compile(r"(x-goog-api-key[\"']?\s*[:=]\s*[\"']?)[^\"'\s,}]+", re.I), r"\1***"),
        (re.compile(r"(api[_-]?key[\"']?\s*[:=]\s*[\"']?)[^\"'\s,}&]+", re.I), r"\1***"),
    ]

    def _mask(self, text: str) -> str:
        for pattern, replacement in self.SENSITIVE_PATTERNS:
            text = pattern.sub(replacement, text)
        return text

    def filter(self, record: logging.LogRecord) -> bool:
        if isinstance(record.msg, str):
            record.msg = self._mask(record.msg)
        if isinstance(record.args, tuple) and record.args:
            record.args = tuple(
                self._mask(a) if isinstance(a, str) else a for a in record.args
            )
        return True


_HANDLER_NAME = "chat_core"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Install the handler on the root logger once; later calls only adjust the level."""
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    if not any(h.get_name() == _HANDLER_NAME for h in root.handlers):
        handler = logging.StreamHandler()
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler.addFilter(SensitiveDataFilter())
        root.addHandler(handler)

    # httpx logs every request URL at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
    return logging.getLogger("chat_core")
