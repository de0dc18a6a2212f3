"""Structured JSON logging configuration.

Configures Python logging to emit one JSON object per record with the fields
timestamp, level, logger and message. Codec-specific fields are added when a
log call passes them through ``extra``: status_code and content_length for
writes, error_code for decoded error envelopes.

SECURITY: Never logs credential values or auth tokens.
"""

from __future__ import annotations

import json
import logging
import re
from datetime import datetime, timezone

from jsonresp.config.settings import get_settings

# Patterns that should be redacted from log output
_SENSITIVE_PATTERNS = re.compile(
    r"(api.key|secret|password|token|credential|authorization)"
    r"[\s]*[=:]\s*\S+",
    re.IGNORECASE,
)

_EXTRA_FIELDS = ("status_code", "content_length", "error_code")


class JsonFormatter(logging.Formatter):
    """Formats log records as JSON with structured fields."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": self._sanitize(record.getMessage()),
        }

        for field in _EXTRA_FIELDS:
            if hasattr(record, field):
                entry[field] = getattr(record, field)

        if record.exc_info and record.exc_info[1]:
            entry["exception"] = self._sanitize(
                self.formatException(record.exc_info)
            )

        return json.dumps(entry, default=str)

    @staticmethod
    def _sanitize(text: str) -> str:
        """Remove sensitive values from log text."""
        return _SENSITIVE_PATTERNS.sub("[REDACTED]", text)


def configure_logging(level: str | None = None) -> None:
    """Configure the root logger with JSON formatting.

    Parameters
    ----------
    level:
        Log level string (DEBUG, INFO, WARNING, ERROR, CRITICAL). Defaults to
        the ``JSONRESP_LOG_LEVEL`` setting.
    """
    if level is None:
        level = get_settings().log_level

    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Remove existing handlers to avoid duplicates
    root.handlers.clear()

    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())
    root.addHandler(handler)
