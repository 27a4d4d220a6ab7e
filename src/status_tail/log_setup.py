"""JSON console logging for programs that drive the in-place display.

Records go to stderr until a display attaches the logger; after that they
land in the display's message tail instead.
"""

from __future__ import annotations

import json
import logging
from datetime import UTC, datetime
from typing import Any


class JsonConsoleFormatter(logging.Formatter):
    """One JSON object per record, tagged with the emitting thread.

    The thread name separates repaint-thread failures from producer logs.
    """

    def format(self, record: logging.LogRecord) -> str:
        event: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "thread": record.threadName,
            "message": record.getMessage(),
        }
        if record.exc_info:
            event["exception"] = self.formatException(record.exc_info)
        return json.dumps(event, default=str)


def setup_logger(name: str = "status_tail", level: int | str = logging.INFO) -> logging.Logger:
    """Return the display's process logger, adding the JSON stderr handler once.

    `level` accepts the level names used by `DisplaySettings.log_level`.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.propagate = False
    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    handler.setFormatter(JsonConsoleFormatter())
    logger.addHandler(handler)
    return logger
