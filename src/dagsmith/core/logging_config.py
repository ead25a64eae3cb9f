"""Logging configuration for dagsmith.

dagsmith never configures logging on import; modules only create loggers
with ``logging.getLogger(__name__)``. Hosts that want dagsmith's output
formatted call ``configure_logging`` once.

Usage:
    from dagsmith.core.logging_config import configure_logging

    configure_logging(level="DEBUG", format="json")

Environment Variables:
    DAGSMITH_LOG_LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    DAGSMITH_LOG_FORMAT: Output format ("text" or "json")
    DAGSMITH_LOG_FILE: Optional log file path
"""

from __future__ import annotations

import json
import logging
import os
import sys
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Literal

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
TEXT_FORMAT_WITH_MS = "%(asctime)s.%(msecs)03d - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

PACKAGE_LOGGER = "dagsmith"

# Attributes every LogRecord carries; anything else was passed via extra=
_STANDARD_ATTRS = frozenset(
    {
        "name",
        "msg",
        "args",
        "created",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "module",
        "msecs",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "exc_info",
        "exc_text",
        "thread",
        "threadName",
        "taskName",
        "message",
    }
)


def _check_level(value: str, source: str) -> str:
    level = value.upper()
    if level not in LEVELS:
        raise ValueError(f"{source} must be one of {', '.join(LEVELS)}, got {value!r}")
    return level


@dataclass
class LogConfig:
    """Logging configuration.

    Attributes:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        format: Output format ("text" or "json").
        file_path: Optional file path for file logging.
        include_ms: Include milliseconds in timestamp.
    """

    level: str = "WARNING"
    format: Literal["text", "json"] = "text"
    file_path: str | None = None
    include_ms: bool = True

    @classmethod
    def from_env(cls) -> LogConfig:
        """Build a config from DAGSMITH_LOG_* environment variables."""
        level = _check_level(os.environ.get("DAGSMITH_LOG_LEVEL", "WARNING"), "DAGSMITH_LOG_LEVEL")
        fmt = os.environ.get("DAGSMITH_LOG_FORMAT", "text").lower()
        if fmt not in ("text", "json"):
            raise ValueError(f"DAGSMITH_LOG_FORMAT must be 'text' or 'json', got {fmt!r}")
        return cls(
            level=level,
            format=fmt,  # type: ignore[arg-type]
            file_path=os.environ.get("DAGSMITH_LOG_FILE") or None,
        )


class JsonFormatter(logging.Formatter):
    """JSON log formatter for structured logging.

    Outputs one JSON object per record:
    {
        "timestamp": "2026-10-17T14:30:00.123000",
        "level": "DEBUG",
        "logger": "dagsmith.core.graph.graph",
        "message": "node created: NodeId(0, 3)",
        "extra": {...}
    }
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        extra = {k: v for k, v in record.__dict__.items() if k not in _STANDARD_ATTRS}
        if extra:
            log_data["extra"] = extra

        return json.dumps(log_data, default=str)


def configure_logging(
    level: str | None = None,
    format: Literal["text", "json"] | None = None,
    file_path: str | None = None,
    include_ms: bool = True,
) -> logging.Logger:
    """Attach handlers to the ``dagsmith`` logger.

    Calling again replaces the handlers installed by the previous call.
    Explicit arguments win over DAGSMITH_LOG_* environment variables.

    Args:
        level: Log level. Defaults to DAGSMITH_LOG_LEVEL or "WARNING".
        format: Output format. Defaults to DAGSMITH_LOG_FORMAT or "text".
        file_path: Optional file path. Defaults to DAGSMITH_LOG_FILE.
        include_ms: Include milliseconds in timestamp.

    Returns:
        The configured package logger.
    """
    env = LogConfig.from_env()
    config = LogConfig(
        level=_check_level(level, "level") if level else env.level,
        format=format or env.format,
        file_path=file_path or env.file_path,
        include_ms=include_ms,
    )

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, config.level))

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if config.format == "json":
        formatter: logging.Formatter = JsonFormatter()
    else:
        fmt = TEXT_FORMAT_WITH_MS if config.include_ms else TEXT_FORMAT
        formatter = logging.Formatter(fmt, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if config.file_path:
        file_handler = logging.FileHandler(config.file_path)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
