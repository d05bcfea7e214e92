"""Console logging setup for scripts and the demo driver."""
from __future__ import annotations

import logging
import logging.config
from typing import Any, Dict

from .config import get_settings


class SimpleConsoleFormatter(logging.Formatter):
    """Minimal, readable console format for terminal use."""

    default_time_format = "%Y-%m-%d %H:%M:%S"
    default_msec_format = "%s.%03d"

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        record.message = record.getMessage()
        asctime = self.formatTime(record, self.datefmt)
        line = f"{asctime} | {record.levelname} | {record.name} | {record.message}"
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


def configure_logging(level: str | None = None) -> None:
    """Configure application-wide logging from Settings.

    ENV:
    - LOG_LEVEL (default INFO)
    - SQLALCHEMY_LOG_LEVEL (default WARNING)
    """
    settings = get_settings()
    log_level = (level or settings.log_level).upper()

    dict_config: Dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "simple": {"()": SimpleConsoleFormatter},
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": log_level,
                "formatter": "simple",
            },
        },
        "loggers": {
            "": {"handlers": ["console"], "level": log_level, "propagate": False},
            "sqlalchemy.engine": {
                "handlers": ["console"],
                "level": settings.sqlalchemy_log_level,
                "propagate": False,
            },
        },
    }
    logging.config.dictConfig(dict_config)
