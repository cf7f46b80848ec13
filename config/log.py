"""Structured JSON logging for the ``dynamic_button`` logger tree."""

import json
import logging
from typing import Optional

from config.settings import Settings, load_settings

LOGGER_NAME = "dynamic_button"

# Optional record attributes copied into JSON output when present.
EXTRA_KEYS = ("variant", "missing", "unexpected")

PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class StructuredFormatter(logging.Formatter):
    """JSON-lines formatter for structured log output."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in EXTRA_KEYS:
            val = getattr(record, key, None)
            if val is not None:
                log_data[key] = val
        if record.exc_info and record.exc_info[0] is not None:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data)


def configure_logging(settings: Optional[Settings] = None) -> logging.Logger:
    """Install a single stream handler on the package logger.

    Calling it again replaces the handler instead of stacking a second one.
    """
    if settings is None:
        settings = load_settings()

    handler = logging.StreamHandler()
    if settings.log_json:
        handler.setFormatter(StructuredFormatter())
    else:
        handler.setFormatter(logging.Formatter(PLAIN_FORMAT))

    logger = logging.getLogger(LOGGER_NAME)
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(settings.log_level)
    # Prevent propagation to root logger to avoid duplicate output
    logger.propagate = False
    return logger
