"""Unit tests for record synthesis with retry.

Tests cover:
- Sequential ids regardless of retries
- Score range of the generated collection
- Attempt counting and pauses between attempts
- Optional attempt cap
- Progress output
"""

from __future__ import annotations

from collections.abc import Callable
from io import StringIO
from unittest.mock import MagicMock

import pytest
from rich.console import Console

from gradeflow.config import GenerationConfig, PipelineConfig, RetryConfig
from gradeflow.errors import (
    GenerationError,
    RetryExhaustedError,
    ScoreOutOfRangeError,
    SimulatedGenerationError,
)
from gradeflow.generators.base import DataGenerator
from gradeflow.schemas import Record
from gradeflow.synthesis import RecordSynthesizer, synthesize_records

pytestmark = pytest.mark.unit


class ScriptedGenerator(DataGenerator):
    """Fails a scripted number of times per record id, then succeeds."""

    def __init__(self, failures: dict[int, int] | None = None) -> None:
        self.failures = dict(failures or {})
        self.calls: list[int] = []

    def generate_one(self, record_id: int) -> Record:
        self.calls.append(record_id)
        remaining = self.failures.get(record_id, 0)
        if remaining:
            self.failures[record_id] = remaining - 1
            if remaining % 2:
                raise SimulatedGenerationError(record_id)
            raise ScoreOutOfRangeError(
                record_id, raw_score=120.0, min_score=0.0, max_score=100.0
            )
        return Record(id=record_id, score=float(record_id))


def _config(count: int, max_attempts: int | None = None) -> PipelineConfig:
    return PipelineConfig(
        generation=GenerationConfig(record_count=count),
        retry=RetryConfig(max_attempts=max_attempts),
    )


class TestRecordSynthesizer:
    """Tests for RecordSynthesizer."""

    def test_ids_sequential_without_failures(
        self,
        console_buffer: tuple[Console, StringIO],
        no_sleep: Callable[[float], None],
    ) -> None:
        """Ids run from 1 to N."""
        console, _ = console_buffer
        synthesizer = RecordSynthesizer(
            ScriptedGenerator(), _config(5), console=console, sleep=no_sleep
        )

        records = synthesizer.run()

        assert [r.id for r in records] == [1, 2, 3, 4, 5]
        assert synthesizer.total_attempts == 5
        assert synthesizer.failed_attempts == 0

    def test_ids_have_no_gaps_after_retries(
        self,
        console_buffer: tuple[Console, StringIO],
        no_sleep: Callable[[float], None],
    ) -> None:
        """Failed attempts retry the same id; no id is skipped or repeated."""
        console, _ = console_buffer
        generator = ScriptedGenerator({2: 3, 4: 1})
        synthesizer = RecordSynthesizer(generator, _config(5), console=console, sleep=no_sleep)

        records = synthesizer.run()

        assert [r.id for r in records] == [1, 2, 3, 4, 5]
        assert generator.calls == [1, 2, 2, 2, 2, 3, 4, 4, 5]
        assert synthesizer.total_attempts == 9
        assert synthesizer.failed_attempts == 4

    def test_pauses_between_failed_attempts(
        self, console_buffer: tuple[Console, StringIO]
    ) -> None:
        """Each failed attempt is followed by the configured pause."""
        console, _ = console_buffer
        sleep = MagicMock()
        synthesizer = RecordSynthesizer(
            ScriptedGenerator({1: 2}), _config(1), console=console, sleep=sleep
        )

        synthesizer.run()

        assert sleep.call_count == 2
        sleep.assert_called_with(pytest.approx(0.005))

    def test_attempt_cap_raises(
        self,
        console_buffer: tuple[Console, StringIO],
        no_sleep: Callable[[float], None],
    ) -> None:
        """Reaching the cap raises RetryExhaustedError chained to the last failure."""
        console, _ = console_buffer
        generator = ScriptedGenerator({2: 10})
        synthesizer = RecordSynthesizer(
            generator, _config(3, max_attempts=3), console=console, sleep=no_sleep
        )

        with pytest.raises(RetryExhaustedError) as exc_info:
            synthesizer.run()

        assert exc_info.value.record_id == 2
        assert exc_info.value.attempts == 3
        assert isinstance(exc_info.value.__cause__, GenerationError)
        assert generator.calls == [1, 2, 2, 2]

    def test_cap_not_reached_succeeds(
        self,
        console_buffer: tuple[Console, StringIO],
        no_sleep: Callable[[float], None],
    ) -> None:
        """Success on the last allowed attempt is still a success."""
        console, _ = console_buffer
        synthesizer = RecordSynthesizer(
            ScriptedGenerator({1: 2}), _config(1, max_attempts=3), console=console, sleep=no_sleep
        )

        records = synthesizer.run()

        assert [r.id for r in records] == [1]

    def test_unexpected_errors_propagate(
        self,
        console_buffer: tuple[Console, StringIO],
        no_sleep: Callable[[float], None],
    ) -> None:
        """Only GenerationError is retried."""
        console, _ = console_buffer
        generator = MagicMock(spec=DataGenerator)
        generator.generate_one.side_effect = KeyError("boom")
        synthesizer = RecordSynthesizer(generator, _config(1), console=console, sleep=no_sleep)

        with pytest.raises(KeyError):
            synthesizer.run()

        assert generator.generate_one.call_count == 1

    def test_zero_records(
        self,
        console_buffer: tuple[Console, StringIO],
        no_sleep: Callable[[float], None],
    ) -> None:
        """A zero-size run generates nothing and still prints the banners."""
        console, buffer = console_buffer
        synthesizer = RecordSynthesizer(
            ScriptedGenerator(), _config(0), console=console, sleep=no_sleep
        )

        assert synthesizer.run() == []
        assert "Generation Complete: 0 Students Generated" in buffer.getvalue()

    def test_progress_output(
        self,
        console_buffer: tuple[Console, StringIO],
        no_sleep: Callable[[float], None],
    ) -> None:
        """Progress lines show each attempt and the final score."""
        console, buffer = console_buffer
        synthesizer = RecordSynthesizer(
            ScriptedGenerator({1: 2}), _config(2), console=console, sleep=no_sleep
        )

        synthesizer.run()

        content = buffer.getvalue()
        assert "Generating Data for 2 Students (Normal Dist., Retry on Error)" in content
        assert "Generating data for ID 1   ..." in content
        assert "[!!] Attempt 1 Failed: Generation failed: Raw score 120.00" in content
        assert "[!!] Attempt 2 Failed: Generation failed: Simulated random error." in content
        assert "[OK] Score: 1.00 (Attempt 3)" in content
        assert "[OK] Score: 2.00 (Attempt 1)" in content
        assert "Generation Complete: 2 Students Generated" in content


class TestSynthesizeRecords:
    """Tests for the synthesize_records convenience function."""

    def test_default_run_properties(
        self,
        console_buffer: tuple[Console, StringIO],
        no_sleep: Callable[[float], None],
    ) -> None:
        """A default run yields 30 in-range records with ids 1..30."""
        console, _ = console_buffer
        config = PipelineConfig(seed=42)

        records = synthesize_records(config, console=console, sleep=no_sleep)

        assert len(records) == 30
        assert [r.id for r in records] == list(range(1, 31))
        assert all(0.0 <= r.score <= 100.0 for r in records)

    def test_same_seed_same_records(
        self,
        console_buffer: tuple[Console, StringIO],
        no_sleep: Callable[[float], None],
    ) -> None:
        """Seeded runs are reproducible."""
        console, _ = console_buffer
        config = PipelineConfig(seed=99)

        first = synthesize_records(config, console=console, sleep=no_sleep)
        second = synthesize_records(config, console=console, sleep=no_sleep)

        assert first == second

    @pytest.mark.parametrize("seed", [0, 1, 2, 3, 4])
    def test_scores_in_range_for_many_seeds(
        self,
        seed: int,
        console_buffer: tuple[Console, StringIO],
        no_sleep: Callable[[float], None],
    ) -> None:
        """The range holds for every generated collection."""
        console, _ = console_buffer

        records = synthesize_records(PipelineConfig(seed=seed), console=console, sleep=no_sleep)

        assert all(0.0 <= r.score <= 100.0 for r in records)
        assert len({r.id for r in records}) == len(records)
