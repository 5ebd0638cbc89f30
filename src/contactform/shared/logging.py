"""
Structured JSON logging configuration.

Modules log through ``logging.getLogger(__name__)``; `setup_logging` installs
the JSON handler once on the root logger at the level from `Settings`.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

from contactform.config import Settings, get_settings

_NOISY_LOGGERS = ("httpx", "httpcore")


class StructuredFormatter(logging.Formatter):
    """Render a record as one JSON object, including its ``extra=`` fields."""

    # attributes every LogRecord carries; anything else came from extra=
    _RESERVED = frozenset(
        logging.LogRecord("", logging.INFO, "", 0, "", (), None).__dict__
    ) | {"message", "asctime"}

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for key, value in record.__dict__.items():
            if key in self._RESERVED:
                continue
            log_data[f"extra_{key}" if key in log_data else key] = value

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


def setup_logging(settings: Settings | None = None) -> None:
    """Configure structured JSON logging on the root logger."""
    settings = settings or get_settings()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(StructuredFormatter())

    root_logger = logging.getLogger()
    root_logger.setLevel(settings.log_level.upper())
    root_logger.handlers = [handler]

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
