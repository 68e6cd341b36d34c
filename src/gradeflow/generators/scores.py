"""Normally distributed score generator.

This module provides the ScoreGenerator, which draws student scores from a
normal distribution and injects simulated failures so the retry loop has
something to do.

Features:
- Instance-owned random engine, seeded once
- Seed chosen from the clock when none is given, and exposed for replay
- Out-of-range draws are rejected, never clamped
"""

from __future__ import annotations

import random
import time

import structlog

from gradeflow.config import GenerationConfig
from gradeflow.errors import ScoreOutOfRangeError, SimulatedGenerationError
from gradeflow.generators.base import DataGenerator
from gradeflow.schemas import Record

logger = structlog.get_logger(__name__)


class ScoreGenerator(DataGenerator):
    """Generator for student score records.

    Each attempt draws a score and then rolls the failure injector, in that
    order, so a seeded generator replays the same sequence of outcomes.

    Attributes:
        config: Generation parameters
        seed: Seed the random engine was initialized with

    Example:
        >>> generator = ScoreGenerator(seed=42)
        >>> try:
        ...     record = generator.generate_one(1)
        ... except GenerationError:
        ...     pass  # retry with a fresh draw
    """

    def __init__(self, config: GenerationConfig | None = None, seed: int | None = None) -> None:
        """Initialize the generator.

        Args:
            config: Generation parameters (default: GenerationConfig())
            seed: Random seed for reproducibility. None seeds from the clock.
        """
        self.config = config or GenerationConfig()
        self.seed = seed if seed is not None else time.time_ns()
        self._rng = random.Random(self.seed)
        logger.info("generator_seeded", seed=self.seed, explicit=seed is not None)

    def draw_score(self) -> float:
        """Draw a raw score from the configured normal distribution."""
        return self._rng.gauss(self.config.mean, self.config.std_dev)

    def inject_failure(self) -> bool:
        """Roll the simulated failure injector."""
        return self._rng.random() < self.config.failure_rate

    def generate_one(self, record_id: int) -> Record:
        """Attempt to generate the record for ``record_id``.

        Args:
            record_id: Identifier to assign on success

        Returns:
            Record with a score inside ``[min_score, max_score]``

        Raises:
            SimulatedGenerationError: The failure injector fired
            ScoreOutOfRangeError: The drawn score fell outside the range
        """
        score = self.draw_score()
        injected = self.inject_failure()

        if injected:
            raise SimulatedGenerationError(record_id)

        if score < self.config.min_score or score > self.config.max_score:
            raise ScoreOutOfRangeError(
                record_id,
                raw_score=score,
                min_score=self.config.min_score,
                max_score=self.config.max_score,
            )

        return Record(id=record_id, score=score)
