"""Configuration models for gradeflow.

This module provides:
- GenerationConfig: Record count, score range and distribution parameters
- RetryConfig: Pause and optional attempt cap for failed generation
- ThresholdConfig: Pass and excellence thresholds used by the pipeline
- PipelineConfig: Top-level configuration for one run

Defaults are the fixed constants of the program. Only the seed and the
attempt cap are exposed on the command line.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

NUM_STUDENTS = 30
MIN_SCORE = 0.0
MAX_SCORE = 100.0
PASS_THRESHOLD = 60.0
EXCELLENT_THRESHOLD = 85.0
SCORE_MEAN_CENTER = 70.0
SCORE_STD_DEV = 30.0
SIMULATED_FAILURE_RATE = 1 / 20
RETRY_WAIT_SECONDS = 0.005


class GenerationConfig(BaseModel):
    """Parameters for synthetic score generation.

    Attributes:
        record_count: Number of records to generate
        min_score: Lowest accepted score (inclusive)
        max_score: Highest accepted score (inclusive)
        mean: Center of the normal distribution scores are drawn from
        std_dev: Standard deviation of the normal distribution
        failure_rate: Probability that an attempt fails with a simulated error

    Example:
        >>> config = GenerationConfig(record_count=10, failure_rate=0.0)
        >>> config.max_score
        100.0
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    record_count: int = Field(default=NUM_STUDENTS, ge=0, description="Records to generate")
    min_score: float = Field(default=MIN_SCORE, description="Minimum valid score")
    max_score: float = Field(default=MAX_SCORE, description="Maximum valid score")
    mean: float = Field(default=SCORE_MEAN_CENTER, description="Distribution mean")
    std_dev: float = Field(default=SCORE_STD_DEV, gt=0, description="Distribution std dev")
    failure_rate: float = Field(
        default=SIMULATED_FAILURE_RATE,
        ge=0.0,
        le=1.0,
        description="Probability of a simulated failure per attempt",
    )

    @model_validator(mode="after")
    def max_must_not_be_below_min(self) -> GenerationConfig:
        """Validate that the score range is not empty."""
        if self.max_score < self.min_score:
            msg = f"max_score ({self.max_score}) must be >= min_score ({self.min_score})"
            raise ValueError(msg)
        return self


class RetryConfig(BaseModel):
    """Retry policy for failed generation attempts.

    Attributes:
        wait_seconds: Pause between a failed attempt and the next one
        max_attempts: Attempt cap per record (None retries until success)

    Example:
        >>> RetryConfig(max_attempts=50).max_attempts
        50
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    wait_seconds: float = Field(
        default=RETRY_WAIT_SECONDS,
        ge=0.0,
        le=5.0,
        description="Pause between attempts in seconds",
    )
    max_attempts: int | None = Field(
        default=None,
        ge=1,
        description="Maximum attempts per record (None=unbounded)",
    )


class ThresholdConfig(BaseModel):
    """Score thresholds used by the filter steps."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    pass_threshold: float = Field(default=PASS_THRESHOLD, description="Scores below fail")
    excellent_threshold: float = Field(
        default=EXCELLENT_THRESHOLD, description="Scores above are excellent"
    )


class PipelineConfig(BaseModel):
    """Configuration for a full generate-and-analyze run.

    Attributes:
        generation: Score generation parameters
        retry: Retry policy for failed attempts
        thresholds: Filter thresholds
        seed: Random seed (None seeds from the clock)

    Example:
        >>> config = PipelineConfig(seed=42, retry=RetryConfig(max_attempts=100))
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    generation: GenerationConfig = Field(
        default_factory=GenerationConfig,
        description="Generation parameters",
    )
    retry: RetryConfig = Field(
        default_factory=RetryConfig,
        description="Retry policy",
    )
    thresholds: ThresholdConfig = Field(
        default_factory=ThresholdConfig,
        description="Filter thresholds",
    )
    seed: int | None = Field(default=None, description="Random seed for reproducible runs")
