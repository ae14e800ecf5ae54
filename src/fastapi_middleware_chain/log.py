"""Centralized logging configuration."""

from __future__ import annotations

import json
import logging
import logging.config
from datetime import datetime, timezone
from typing import Any

_STANDARD_ATTRS = set(logging.makeLogRecord({}).__dict__.keys())

TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class JsonFormatter(logging.Formatter):
    """Basic JSON formatter for structured logs."""

    def format(self, record: logging.LogRecord) -> str:
        message: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            message["exc_info"] = self.formatException(record.exc_info)
        if record.stack_info:
            message["stack_info"] = record.stack_info

        extra = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _STANDARD_ATTRS and key not in ("message", "asctime")
        }
        if extra:
            message["extra"] = extra

        return json.dumps(message, default=str)


def setup_logging(level: str = "INFO", *, json_logs: bool = False) -> None:
    """Apply the process-wide logging configuration."""
    resolved = getattr(logging, level.upper(), logging.INFO)
    formatter: dict[str, Any] = (
        {"()": JsonFormatter} if json_logs else {"format": TEXT_FORMAT}
    )
    logging_config: dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"default": formatter},
        "handlers": {
            "default": {
                "class": "logging.StreamHandler",
                "formatter": "default",
            }
        },
        "root": {
            "handlers": ["default"],
            "level": resolved,
        },
        "loggers": {
            "uvicorn.error": {"level": resolved},
            "uvicorn.access": {
                "handlers": ["default"],
                "level": resolved,
                "propagate": False,
            },
        },
    }

    logging.config.dictConfig(logging_config)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
