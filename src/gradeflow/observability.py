"""Structured logging for gradeflow.

Console tables go to stdout through rich; structured logs go to stderr
through structlog and the stdlib root logger, so the two never interleave
in redirected output.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from structlog.stdlib import BoundLogger

LOGGER_NAME = "gradeflow"

VERBOSITY_LEVELS = {0: "WARNING", 1: "INFO", 2: "DEBUG"}


def get_logger(name: str = LOGGER_NAME) -> BoundLogger:
    """Get a structlog logger.

    Args:
        name: Logger name, usually ``__name__``.

    Returns:
        structlog BoundLogger instance.

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("record_generated", record_id=1)
    """
    return structlog.get_logger(name)  # type: ignore[no-any-return]


def level_for_verbosity(verbosity: int) -> str:
    """Map a ``-v`` count to a log level name.

    Args:
        verbosity: Number of ``-v`` flags given.

    Returns:
        Log level name (WARNING, INFO or DEBUG).
    """
    return VERBOSITY_LEVELS.get(min(verbosity, 2), "WARNING")


def configure_logging(
    *,
    log_level: str = "WARNING",
    json_format: bool = False,
    add_timestamp: bool = True,
) -> None:
    """Configure structured logging for gradeflow.

    Args:
        log_level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        json_format: If True, output JSON format. If False, output human-readable.
        add_timestamp: If True, add ISO timestamp to log entries.

    Example:
        >>> configure_logging(log_level="DEBUG", json_format=False)
    """
    processors: list[Any] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if add_timestamp:
        processors.insert(1, structlog.processors.TimeStamper(fmt="iso"))

    if json_format:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, log_level.upper()),
        force=True,
    )
