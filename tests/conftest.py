"""Shared pytest fixtures for gradeflow tests.

Provides structlog configuration, capturing consoles, and small record
collections used across unit tests.
"""

from __future__ import annotations

import sys
from collections.abc import Callable
from io import StringIO

import pytest
import structlog
from rich.console import Console

from gradeflow.schemas import Record


@pytest.fixture(autouse=True)
def configure_structlog_for_tests() -> None:
    """Configure structlog to output to stdout for test capture.

    Without this, structlog may use different processors depending on
    test execution order.
    """
    structlog.reset_defaults()
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=False,  # Important for test isolation
    )


@pytest.fixture
def console_buffer() -> tuple[Console, StringIO]:
    """Create a wide, colorless console writing to a buffer.

    Returns:
        Tuple of (console, buffer); read output with ``buffer.getvalue()``.
    """
    buffer = StringIO()
    console = Console(file=buffer, width=120, no_color=True, highlight=False)
    return console, buffer


@pytest.fixture
def scenario_records() -> list[Record]:
    """Three records with known filter, mean and sort outcomes.

    Returns:
        Records ``[{1, 90}, {2, 50}, {3, 70}]``.
    """
    return [
        Record(id=1, score=90.0),
        Record(id=2, score=50.0),
        Record(id=3, score=70.0),
    ]


@pytest.fixture
def no_sleep() -> Callable[[float], None]:
    """Sleep replacement that returns immediately."""

    def _sleep(_seconds: float) -> None:
        return None

    return _sleep
