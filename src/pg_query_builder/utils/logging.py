"""Structured logging framework using structlog.

This module provides centralized logging configuration with:
- ISO-8601 timestamps
- JSON rendering for structured logs
- Context binding support
- Dual output (stdout + optional file logging)

Nothing is configured on import. Builder modules only fetch loggers, so a
host application keeps its own logging and structlog setup. Applications
and tests that want this package's JSON output call ``configure_logging()``
once at startup.

Configuration is loaded from pg_query_builder.config.settings:
- PGQB_LOG_LEVEL: Set log level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Default: INFO
- PGQB_LOG_TO_FILE: Enable file logging (1, true, yes). Default: disabled
- PGQB_LOG_FILE_DIR: Directory for log files. Default: logs/

Usage:
    >>> from pg_query_builder.utils.logging import configure_logging, get_logger
    >>> configure_logging()
    >>> logger = get_logger(__name__)
    >>> logger.warning("containment.fallback", column="t.age", reason="empty")
"""

import logging
from datetime import datetime
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Any, Optional

import structlog
from structlog.types import Processor

from pg_query_builder.config import get_settings

# Marks handlers installed by configure_logging so a second call replaces them
_HANDLER_MARKER = "_pg_query_builder_handler"


def _get_log_level() -> int:
    """Get log level from settings."""
    level_name = get_settings().log_level
    return getattr(logging, level_name, logging.INFO)


def _get_log_file_path() -> Path:
    """Get the log file path with date-based naming."""
    log_dir = Path(get_settings().log_file_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    # Format: pg-query-builder-YYYYMMDD.log
    date_str = datetime.now().strftime("%Y%m%d")
    return log_dir / f"pg-query-builder-{date_str}.log"


def _mark(handler: logging.Handler) -> logging.Handler:
    setattr(handler, _HANDLER_MARKER, True)
    return handler


def _remove_installed_handlers(root: logging.Logger) -> None:
    for handler in list(root.handlers):
        if getattr(handler, _HANDLER_MARKER, False):
            root.removeHandler(handler)
            handler.close()


def configure_logging(level: Optional[int] = None) -> None:
    """Configure stdlib logging and structlog with JSON rendering.

    Sets up:
    - ISO-8601 timestamps
    - Logger name
    - Log level
    - JSON renderer
    - Dual output (stdout + optional file)

    Calling it again replaces the handlers installed by the previous call.

    Args:
        level: Log level; defaults to PGQB_LOG_LEVEL
    """
    if level is None:
        level = _get_log_level()

    root = logging.getLogger()
    _remove_installed_handlers(root)
    root.setLevel(level)

    stdout_handler = logging.StreamHandler()
    stdout_handler.setLevel(level)
    stdout_handler.setFormatter(logging.Formatter("%(message)s"))
    root.addHandler(_mark(stdout_handler))

    if get_settings().log_to_file:
        file_handler = TimedRotatingFileHandler(
            filename=str(_get_log_file_path()),
            when="midnight",
            interval=1,
            backupCount=30,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter("%(message)s"))
        root.addHandler(_mark(file_handler))

    processors: list[Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer(),
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> Any:
    """Get a structlog logger.

    The logger is a lazy proxy: it follows whatever structlog configuration
    is active when it first logs.

    Args:
        name: Logger name (typically __name__ of the calling module)

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("predicate.built", filter_count=3)
    """
    return structlog.get_logger(name)


def bind_context(name: str, **kwargs: Any) -> Any:
    """Create a named logger with bound context fields.

    Args:
        name: Logger name
        **kwargs: Context fields to bind (e.g., first_placeholder=3)

    Returns:
        A logger with the specified context already bound

    Example:
        >>> logger = bind_context(__name__, first_placeholder=3)
        >>> logger.debug("query.composed", arguments=2)
    """
    return structlog.get_logger(name).bind(**kwargs)
