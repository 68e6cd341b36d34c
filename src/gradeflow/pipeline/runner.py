"""Pipeline step runner.

Executes steps in declared order against one shared record collection.
Steps see every mutation made by the steps before them.
"""

from __future__ import annotations

import time
from collections.abc import Sequence
from datetime import UTC, datetime

import structlog
from rich.console import Console

from gradeflow import output
from gradeflow.pipeline.models import PipelineResult, StepResult, StepStatus
from gradeflow.pipeline.steps import Step
from gradeflow.schemas import Record

logger = structlog.get_logger(__name__)

NO_DATA_NOTICE = "--- No student data available to process for this step ---"


class PipelineRunner:
    """Runs pipeline steps in order over a shared collection.

    Step bodies are not expected to fail; an exception raised by one
    propagates out of ``run``.

    Attributes:
        steps: Steps in execution order
        console: Console receiving banners and step output

    Example:
        >>> runner = PipelineRunner(build_default_pipeline())
        >>> result = runner.run(records)
        >>> result.executed_count
        4
    """

    def __init__(self, steps: Sequence[Step], console: Console | None = None) -> None:
        """Initialize the runner.

        Args:
            steps: Steps in execution order
            console: Console for output (default: module console)
        """
        self.steps = list(steps)
        self.console = console if console is not None else output.console
        self._log = logger.bind(component="pipeline_runner")

    def run(self, records: list[Record]) -> PipelineResult:
        """Run every step against ``records``.

        Args:
            records: The shared collection; steps may reorder it in place

        Returns:
            PipelineResult with one StepResult per step
        """
        start_time = time.monotonic()
        started_at = datetime.now(UTC)
        results: list[StepResult] = []

        self._log.info("pipeline_started", steps=len(self.steps), records=len(records))

        for step in self.steps:
            results.append(self.run_step(step, records))

        total_duration_ms = int((time.monotonic() - start_time) * 1000)
        result = PipelineResult(
            steps=results,
            started_at=started_at,
            finished_at=datetime.now(UTC),
            total_duration_ms=total_duration_ms,
        )

        self._log.info(
            "pipeline_completed",
            executed=result.executed_count,
            skipped=result.skipped_count,
            total_duration_ms=total_duration_ms,
        )
        return result

    def run_step(self, step: Step, records: list[Record]) -> StepResult:
        """Announce a step and run its body unless the collection is empty.

        Args:
            step: Step to run
            records: The shared collection

        Returns:
            StepResult describing whether the body ran
        """
        step_start = time.monotonic()
        record_count = len(records)
        output.print_banner(step.title, self.console)

        if not records:
            self.console.print(NO_DATA_NOTICE, markup=False)
            self.console.print()
            self._log.info("step_skipped", step=step.title, reason="no data")
            return StepResult(title=step.title, status=StepStatus.SKIPPED)

        self._log.debug("step_started", step=step.title, records=record_count)
        step.apply(records, self.console)
        duration_ms = int((time.monotonic() - step_start) * 1000)
        self._log.info("step_completed", step=step.title, duration_ms=duration_ms)

        return StepResult(
            title=step.title,
            status=StepStatus.EXECUTED,
            record_count=record_count,
            duration_ms=duration_ms,
        )


def run_pipeline(
    steps: Sequence[Step],
    records: list[Record],
    console: Console | None = None,
) -> PipelineResult:
    """Run pipeline steps over a collection.

    Convenience function that creates a runner and executes the steps.

    Args:
        steps: Steps in execution order
        records: The shared collection
        console: Optional Rich console

    Returns:
        PipelineResult with one StepResult per step
    """
    return PipelineRunner(steps, console=console).run(records)
