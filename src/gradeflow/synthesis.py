"""Record synthesis with per-record retry.

Generates the record collection one id at a time. A failed attempt is
retried for the same id with a fresh draw, so ids come out as ``1..N`` with
no gaps regardless of how many attempts failed.

Retries use tenacity with a fixed pause between attempts. Without an attempt
cap the loop runs until the generator succeeds.
"""

from __future__ import annotations

import time
from collections.abc import Callable

import structlog
from rich.console import Console
from rich.text import Text
from tenacity import (
    RetryError,
    Retrying,
    retry_if_exception_type,
    stop_after_attempt,
    stop_never,
    wait_fixed,
)
from tenacity.stop import stop_base

from gradeflow import output
from gradeflow.config import PipelineConfig
from gradeflow.errors import GenerationError, RetryExhaustedError
from gradeflow.generators.base import DataGenerator
from gradeflow.generators.scores import ScoreGenerator
from gradeflow.schemas import Record

logger = structlog.get_logger(__name__)


class RecordSynthesizer:
    """Builds the record collection, retrying failed generation attempts.

    Attributes:
        generator: Generator producing one record per attempt
        config: Run configuration (record count and retry policy)
        console: Console receiving the progress lines
        total_attempts: Attempts made across all records
        failed_attempts: Attempts that raised GenerationError

    Example:
        >>> synthesizer = RecordSynthesizer(ScoreGenerator(seed=42))
        >>> records = synthesizer.run()
        >>> [r.id for r in records][:3]
        [1, 2, 3]
    """

    def __init__(
        self,
        generator: DataGenerator,
        config: PipelineConfig | None = None,
        console: Console | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """Initialize the synthesizer.

        Args:
            generator: Generator producing one record per attempt
            config: Run configuration (default: PipelineConfig())
            console: Console for progress output (default: module console)
            sleep: Function used to pause between attempts
        """
        self.generator = generator
        self.config = config or PipelineConfig()
        self.console = console if console is not None else output.console
        self.total_attempts = 0
        self.failed_attempts = 0
        self._sleep = sleep
        self._log = logger.bind(component="record_synthesizer")

    def run(self) -> list[Record]:
        """Generate ``record_count`` records.

        Returns:
            Records with ids ``1..record_count``, in id order

        Raises:
            RetryExhaustedError: If an attempt cap is set and reached
        """
        count = self.config.generation.record_count
        start_time = time.monotonic()
        records: list[Record] = []

        output.print_banner(
            f"Generating Data for {count} Students (Normal Dist., Retry on Error)",
            self.console,
            leading_blank=False,
        )
        self._log.info(
            "generation_started",
            count=count,
            max_attempts=self.config.retry.max_attempts,
        )

        while len(records) < count:
            records.append(self._generate_with_retry(len(records) + 1))

        duration_ms = int((time.monotonic() - start_time) * 1000)
        self._log.info(
            "generation_completed",
            count=len(records),
            total_attempts=self.total_attempts,
            failed_attempts=self.failed_attempts,
            duration_ms=duration_ms,
        )
        self.console.print(
            f"======= Generation Complete: {len(records)} Students Generated =======",
            style="bold",
            markup=False,
        )
        return records

    def _stop_strategy(self) -> stop_base:
        """Build the tenacity stop strategy from the retry config."""
        max_attempts = self.config.retry.max_attempts
        if max_attempts is None:
            return stop_never
        return stop_after_attempt(max_attempts)

    def _generate_with_retry(self, record_id: int) -> Record:
        """Generate one record, retrying until success or the attempt cap.

        Args:
            record_id: Identifier of the record to generate

        Returns:
            The generated record
        """
        self.console.print(
            f"  Generating data for ID {record_id:<4}...", end="", markup=False, soft_wrap=True
        )
        attempt = 0

        try:
            for attempt_state in Retrying(
                retry=retry_if_exception_type(GenerationError),
                stop=self._stop_strategy(),
                wait=wait_fixed(self.config.retry.wait_seconds),
                sleep=self._sleep,
                reraise=False,
            ):
                with attempt_state:
                    attempt = attempt_state.retry_state.attempt_number
                    self.total_attempts += 1
                    try:
                        record = self.generator.generate_one(record_id)
                    except GenerationError as exc:
                        self.failed_attempts += 1
                        self._report_failure(attempt, exc)
                        raise
                    self._report_success(record, attempt)
                    return record
        except RetryError as exc:
            self.console.print()
            self._log.error("generation_retries_exhausted", record_id=record_id, attempts=attempt)
            raise RetryExhaustedError(record_id, attempt) from exc.last_attempt.exception()

        # Should not reach here, but satisfy type checker
        raise RuntimeError("Unexpected retry state")  # pragma: no cover

    def _report_failure(self, attempt: int, exc: GenerationError) -> None:
        self.console.print()
        self.console.print(
            Text.assemble(
                "    ",
                ("[!!]", "yellow"),
                f" Attempt {attempt} Failed: {exc.message}. Retrying...",
            ),
            end="",
            soft_wrap=True,
        )
        self._log.debug(
            "generation_attempt_failed",
            record_id=exc.record_id,
            attempt=attempt,
            kind=exc.kind.value,
        )

    def _report_success(self, record: Record, attempt: int) -> None:
        self.console.print(
            Text.assemble(
                " ",
                ("[OK]", "green"),
                f" Score: {record.score:.2f} (Attempt {attempt})",
            ),
            soft_wrap=True,
        )
        self._log.debug("record_generated", record_id=record.id, attempt=attempt)


def synthesize_records(
    config: PipelineConfig | None = None,
    *,
    console: Console | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> list[Record]:
    """Generate a record collection with a ScoreGenerator.

    Convenience function that builds the generator from ``config`` and runs
    a RecordSynthesizer.

    Args:
        config: Run configuration (seed, generation parameters, retry policy)
        console: Optional Rich console for progress output
        sleep: Function used to pause between attempts

    Returns:
        Records with ids ``1..record_count``

    Example:
        >>> records = synthesize_records(PipelineConfig(seed=7))
        >>> len(records)
        30
    """
    cfg = config or PipelineConfig()
    generator = ScoreGenerator(cfg.generation, seed=cfg.seed)
    return RecordSynthesizer(generator, cfg, console=console, sleep=sleep).run()
