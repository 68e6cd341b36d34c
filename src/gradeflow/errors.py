"""Custom exceptions for gradeflow.

This module defines the exception hierarchy:
- GradeflowError (base)
- GenerationError
  - SimulatedGenerationError
  - ScoreOutOfRangeError
- RetryExhaustedError

Generation errors are recoverable: the synthesizer retries the same record
id with a fresh draw. RetryExhaustedError is only raised when an attempt cap
is configured and reached.
"""

from __future__ import annotations

from enum import Enum


class GradeflowError(Exception):
    """Base exception for all gradeflow errors.

    Attributes:
        message: Human-readable error description.
        details: Optional additional context about the error.

    Example:
        >>> try:
        ...     records = synthesize_records(config)
        ... except GradeflowError as e:
        ...     print(f"Run failed: {e}")
    """

    def __init__(self, message: str, *, details: dict[str, str] | None = None) -> None:
        """Initialize GradeflowError.

        Args:
            message: Human-readable error description.
            details: Optional additional context about the error.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return string representation with details if present."""
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({detail_str})"
        return self.message


class GenerationErrorKind(str, Enum):
    """Kind of a failed generation attempt.

    Attributes:
        SIMULATED: Injected transient failure, independent of the drawn score
        OUT_OF_RANGE: Drawn score fell outside the accepted range
    """

    SIMULATED = "simulated"
    OUT_OF_RANGE = "out_of_range"


class GenerationError(GradeflowError):
    """A single generation attempt failed.

    The message is shown on the console as-is, so details are kept out of
    ``__str__``.
    """

    def __init__(self, message: str, *, kind: GenerationErrorKind, record_id: int) -> None:
        """Initialize GenerationError.

        Args:
            message: Human-readable error description.
            kind: Failure kind.
            record_id: Record id the attempt was generating.
        """
        super().__init__(message)
        self.kind = kind
        self.record_id = record_id


class SimulatedGenerationError(GenerationError):
    """Injected transient failure used to exercise the retry loop."""

    def __init__(self, record_id: int) -> None:
        super().__init__(
            "Generation failed: Simulated random error",
            kind=GenerationErrorKind.SIMULATED,
            record_id=record_id,
        )


class ScoreOutOfRangeError(GenerationError):
    """Drawn score fell outside ``[min_score, max_score]``.

    Example:
        >>> str(ScoreOutOfRangeError(3, raw_score=104.2, min_score=0.0, max_score=100.0))
        'Generation failed: Raw score 104.20 out of range [0.0, 100.0]'
    """

    def __init__(
        self,
        record_id: int,
        *,
        raw_score: float,
        min_score: float,
        max_score: float,
    ) -> None:
        """Initialize ScoreOutOfRangeError.

        Args:
            record_id: Record id the attempt was generating.
            raw_score: The rejected score.
            min_score: Lowest accepted score.
            max_score: Highest accepted score.
        """
        super().__init__(
            f"Generation failed: Raw score {raw_score:.2f} out of range "
            f"[{min_score:.1f}, {max_score:.1f}]",
            kind=GenerationErrorKind.OUT_OF_RANGE,
            record_id=record_id,
        )
        self.raw_score = raw_score
        self.min_score = min_score
        self.max_score = max_score


class RetryExhaustedError(GradeflowError):
    """Attempt cap reached without generating a record.

    Raised when:
    - RetryConfig.max_attempts is set
    - Every attempt for one record id failed

    The last GenerationError is chained as ``__cause__``.
    """

    def __init__(self, record_id: int, attempts: int) -> None:
        """Initialize RetryExhaustedError.

        Args:
            record_id: Record id that could not be generated.
            attempts: Number of attempts made.
        """
        super().__init__(
            f"Could not generate record {record_id}",
            details={"attempts": str(attempts)},
        )
        self.record_id = record_id
        self.attempts = attempts
