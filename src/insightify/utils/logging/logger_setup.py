"""
Structured logging setup built on structlog.

Call setup_logging() once at process start, then get_logger() wherever a
logger is needed.
"""

import logging
import sys
from typing import Any, Dict, Optional

import structlog

from ..settings import config

LEVEL_ICONS = {
    "debug": "·",
    "info": "✓",
    "warning": "⚠",
    "error": "✗",
    "critical": "✗",
}

# Keys rendered in the fixed prefix rather than as key=value pairs
_RESERVED_KEYS = ("timestamp", "level", "event")


def custom_renderer(_logger: Any, _method_name: Optional[str], event_dict: Dict[str, Any]) -> str:
    """
    Render a log event as a single readable line.

    Format: ``<timestamp> <icon> <LEVEL> <event> key=value ...``

    Args:
        _logger: Wrapped logger (unused)
        _method_name: Name of the log method called (unused)
        event_dict: Event dictionary built by the processor chain

    Returns:
        Formatted log line
    """
    level = str(event_dict.get("level", "info")).lower()
    icon = LEVEL_ICONS.get(level, " ")
    timestamp = event_dict.get("timestamp", "")
    event = event_dict.get("event", "")

    context = " ".join(
        f"{key}={value!r}" for key, value in event_dict.items() if key not in _RESERVED_KEYS
    )

    line = f"{timestamp} {icon} {level.upper():<8} {event}"
    if context:
        line += f" {context}"
    return line


def setup_logging(level: Optional[str] = None) -> None:
    """
    Configure stdlib logging and structlog.

    Args:
        level: Log level name. Falls back to config.log_level.
    """
    log_level = (level or config.log_level or "INFO").upper()
    numeric_level = getattr(logging, log_level, logging.INFO)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=numeric_level,
        force=True,
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S"),
            custom_renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: Optional[str] = None) -> Any:
    """
    Get a structlog logger.

    Args:
        name: Optional logger name, defaults to the package name

    Returns:
        structlog bound logger
    """
    return structlog.get_logger(name or "insightify")
