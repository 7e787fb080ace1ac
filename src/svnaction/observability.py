"""Observability: structured JSON logging."""

from __future__ import annotations

import json
import logging
from typing import Any

from svnaction.config import load_settings

_EXTRA_FIELDS = ("action_id", "action_name")


class JsonFormatter(logging.Formatter):
    """Emit log records as single-line JSON."""

    def format(self, record: logging.LogRecord) -> str:
        log_dict: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info and record.exc_info[0] is not None:
            log_dict["exception"] = self.formatException(record.exc_info)
        for key in _EXTRA_FIELDS:
            val = getattr(record, key, None)
            if val is not None:
                log_dict[key] = val
        return json.dumps(log_dict, default=str)


def setup_logging(level: str | None = None) -> None:
    """Configure the ``svnaction`` logger with JSON output.

    *level* defaults to ``SVNACTION_LOG_LEVEL`` (INFO).
    """
    level = level or load_settings().log_level
    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())
    logger = logging.getLogger("svnaction")
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
