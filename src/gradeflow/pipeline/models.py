"""Pipeline result models.

Models for reporting what the runner did with each step.
"""

from __future__ import annotations

from datetime import UTC, datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class StepStatus(str, Enum):
    """Outcome of a single step.

    Attributes:
        EXECUTED: Step body ran
        SKIPPED: Collection was empty, step body did not run
    """

    EXECUTED = "executed"
    SKIPPED = "skipped"


class StepResult(BaseModel):
    """Result of running one step.

    Attributes:
        title: Step title
        status: Whether the step body ran
        record_count: Collection size when the step started
        duration_ms: Step duration in milliseconds

    Example:
        >>> result = StepResult(
        ...     title="(1) Filter: Excellent Students",
        ...     status=StepStatus.EXECUTED,
        ...     record_count=30,
        ... )
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    title: str = Field(..., min_length=1, description="Step title")
    status: StepStatus = Field(..., description="Step status")
    record_count: int = Field(default=0, ge=0, description="Records seen by the step")
    duration_ms: int = Field(default=0, ge=0, description="Duration in milliseconds")


class PipelineResult(BaseModel):
    """Aggregated result of a pipeline run.

    Attributes:
        steps: Step results in execution order
        started_at: When the run started
        finished_at: When the run finished
        total_duration_ms: Total duration in milliseconds
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    steps: list[StepResult] = Field(default_factory=list, description="Step results")
    started_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC), description="Start time"
    )
    finished_at: datetime | None = Field(default=None, description="End time")
    total_duration_ms: int = Field(default=0, ge=0, description="Total duration")

    @property
    def executed_count(self) -> int:
        """Count of steps whose body ran."""
        return sum(1 for s in self.steps if s.status == StepStatus.EXECUTED)

    @property
    def skipped_count(self) -> int:
        """Count of steps skipped for lack of data."""
        return sum(1 for s in self.steps if s.status == StepStatus.SKIPPED)
