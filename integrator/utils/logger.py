"""Structured logging helpers."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional, TextIO

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class JsonFormatter(logging.Formatter):
    """Formats log records as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        if hasattr(record, "extra") and isinstance(record.extra, dict):
            payload.update(record.extra)
        return json.dumps(payload, ensure_ascii=True)


def normalize_level(level: str) -> str:
    """Returns the canonical level name.

    Raises:
        ValueError: If ``level`` is not one of ``LOG_LEVELS``.
    """
    name = str(level).strip().upper()
    if name not in LOG_LEVELS:
        raise ValueError("Unknown log level '{}'. Expected one of: {}".format(level, ", ".join(LOG_LEVELS)))
    return name


def configure_logging(level: str = "INFO", stream: Optional[TextIO] = None) -> None:
    """Routes every record through a single JSON handler.

    Args:
        level: One of ``LOG_LEVELS``, case-insensitive.
        stream: Target stream; stderr when omitted, leaving stdout to results.
    """
    name = normalize_level(level)
    handler = logging.StreamHandler(stream)
    handler.setFormatter(JsonFormatter())

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(name)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
