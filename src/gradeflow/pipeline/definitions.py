"""Default analysis pipeline.

Four steps, run in this order:
1. Excellent students (score above the excellence threshold)
2. Failing students (score below the pass threshold)
3. Class average, then every student at or above it
4. Sort the collection by score, descending, and print it

Step 4 reorders the shared collection in place.
"""

from __future__ import annotations

from operator import attrgetter

from rich.console import Console

from gradeflow.config import ThresholdConfig
from gradeflow.output import print_record_table, print_statistics
from gradeflow.pipeline.steps import ActionStep, CustomLogicStep, FilterPrintStep, Step
from gradeflow.pipeline.views import RecordView
from gradeflow.schemas import Record


def average_score(view: RecordView) -> float | None:
    """Arithmetic mean of all scores, or None for an empty collection."""
    if not view:
        return None
    return sum(view.scores()) / len(view)


def print_above_average(view: RecordView, console: Console) -> None:
    """Print the class average and every record scoring at or above it.

    Args:
        view: Read-only view of the collection
        console: Console receiving the output
    """
    average = average_score(view)
    print_statistics(len(view), average, console)

    if average is None:
        print_record_table("List: Scoring >= Average (N/A)", (), True, console)
        return

    print_record_table(
        f"List: Scoring >= Average ({average:.2f})",
        view.filter(lambda r: r.score >= average),
        True,
        console,
    )


def sort_by_score_descending(records: list[Record]) -> None:
    """Sort in place by score, highest first. Equal scores keep their order."""
    records.sort(key=attrgetter("score"), reverse=True)


def sort_and_print_all(records: list[Record], console: Console) -> None:
    """Sort the collection by score, descending, and print all of it.

    Args:
        records: The shared collection, reordered in place
        console: Console receiving the output
    """
    console.print("--- Sorting Data by Score (Descending)... ---", markup=False)
    sort_by_score_descending(records)
    console.print("--- Data Sorted Successfully ---", markup=False)
    console.print()

    print_record_table(
        "List: All Students (Sorted by Score Descending)",
        records,
        False,
        console,
    )


def build_default_pipeline(thresholds: ThresholdConfig | None = None) -> list[Step]:
    """Build the default four-step analysis pipeline.

    Args:
        thresholds: Pass and excellence thresholds (default: ThresholdConfig())

    Returns:
        Steps in execution order

    Example:
        >>> steps = build_default_pipeline()
        >>> [s.title for s in steps][0]
        '(1) Filter: Excellent Students'
    """
    t = thresholds or ThresholdConfig()
    excellent = t.excellent_threshold
    passing = t.pass_threshold

    return [
        FilterPrintStep(
            "(1) Filter: Excellent Students",
            f"List: Score > {excellent:.1f}",
            lambda r: r.score > excellent,
            print_summary=True,
        ),
        FilterPrintStep(
            "(2) Filter: Failing Students",
            f"List: Score < {passing:.1f}",
            lambda r: r.score < passing,
            print_summary=True,
        ),
        CustomLogicStep("(3) Calculate & Filter: Above Average", print_above_average),
        ActionStep("(4) Action & View: Sort All and Print", sort_and_print_all),
    ]
