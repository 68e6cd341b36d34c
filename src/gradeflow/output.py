"""Rich console output for gradeflow.

This module provides:
- Console creation respecting NO_COLOR and --no-color
- The error message helper used by the CLI
- Banners, the statistics block, and the record table printer

Every printer takes an optional console so tests can capture output with
``Console(file=StringIO())``.
"""

from __future__ import annotations

import os
from collections.abc import Iterable
from typing import Any

from rich import box
from rich.console import Console
from rich.table import Table

from gradeflow.schemas import Record

# Rich automatically respects NO_COLOR, but we also support --no-color flag
_force_no_color = os.environ.get("NO_COLOR") is not None

ID_COLUMN_WIDTH = 10
SCORE_COLUMN_WIDTH = 12
BANNER_RULE = "=" * 10
# Two padded columns plus three border characters
TABLE_WIDTH = ID_COLUMN_WIDTH + SCORE_COLUMN_WIDTH + 2 * 2 + 3


def create_console(no_color: bool = False) -> Console:
    """Create a Rich Console instance with appropriate color settings.

    Args:
        no_color: If True, disable colored output. Also respects NO_COLOR env var.

    Returns:
        Configured Console instance.
    """
    force_terminal = None
    if no_color or _force_no_color:
        force_terminal = False
    return Console(
        force_terminal=force_terminal,
        no_color=no_color or _force_no_color,
        highlight=False,
    )


# Default console instance
console = create_console()


def _resolve(target: Console | None) -> Console:
    return target if target is not None else console


def error(message: str, **kwargs: Any) -> None:
    """Print an error message with red X.

    Example:
        >>> error("Could not generate record 7")
        ✗ Could not generate record 7
    """
    console.print(f"[red]✗[/red] {message}", **kwargs)


def set_no_color(no_color: bool) -> None:
    """Update the global console to enable/disable colors.

    Args:
        no_color: If True, disable colored output.

    Note:
        This updates the module-level console instance.
    """
    global console
    console = create_console(no_color=no_color)


def print_banner(title: str, target: Console | None = None, *, leading_blank: bool = True) -> None:
    """Print a section banner.

    Args:
        title: Banner title.
        target: Optional Rich console (defaults to the module console).
        leading_blank: Print an empty line before the banner.

    Example:
        >>> print_banner("(1) Filter: Excellent Students")

        ========== (1) Filter: Excellent Students ==========
    """
    out = _resolve(target)
    if leading_blank:
        out.print()
    out.print(f"{BANNER_RULE} {title} {BANNER_RULE}", style="bold", markup=False, soft_wrap=True)


def print_statistics(count: int, average: float | None, target: Console | None = None) -> None:
    """Print the statistics block used by the above-average step.

    Args:
        count: Number of records analyzed.
        average: Mean score, or None when nothing was analyzed.
        target: Optional Rich console.
    """
    out = _resolve(target)
    average_text = "N/A" if average is None else f"{average:.2f}"
    out.print("--- Statistics ---", markup=False)
    out.print(f"Number of students analyzed: {count}", markup=False)
    out.print(f"Calculated Average Score: {average_text}", markup=False)
    out.print("-" * 20, markup=False)


def print_record_table(
    list_title: str,
    records: Iterable[Record],
    print_summary: bool = True,
    target: Console | None = None,
) -> int:
    """Print records as a bordered table with fixed column widths.

    The records are traversed exactly once, in order, so lazy iterators
    such as ``RecordView.filter(...)`` are accepted alongside lists.

    Args:
        list_title: Title printed above the table.
        records: Any iterable of records (list, view, generator, empty).
        print_summary: Print the row count and a none-matched notice.
        target: Optional Rich console.

    Returns:
        Number of rows printed.

    Example:
        >>> print_record_table("List: Score > 85.0", [Record(id=1, score=90.0)])
    """
    out = _resolve(target)

    table = Table(box=box.SQUARE, show_header=True, header_style="bold", width=TABLE_WIDTH)
    table.add_column(
        "Student ID", width=ID_COLUMN_WIDTH, min_width=ID_COLUMN_WIDTH, no_wrap=True
    )
    table.add_column(
        "Score", width=SCORE_COLUMN_WIDTH, min_width=SCORE_COLUMN_WIDTH, no_wrap=True
    )

    count = 0
    for record in records:
        table.add_row(str(record.id), f"{record.score:.2f}")
        count += 1

    out.print(f"--- {list_title} ---", markup=False, soft_wrap=True)
    out.print(table, crop=False)

    if print_summary:
        out.print(f"Total matching students: {count}", markup=False, soft_wrap=True)
        if count == 0:
            out.print(
                "(No students met the criteria for this list)",
                markup=False,
                style="dim",
                soft_wrap=True,
            )
    out.print()

    return count
