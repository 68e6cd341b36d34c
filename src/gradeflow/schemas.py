"""Record schema for generated student scores.

Records are immutable (frozen=True) and validate at construction time.
The score range is enforced by the generator, not by the model, so that
out-of-range draws are rejected before a record exists.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Record(BaseModel):
    """A generated student score.

    Attributes:
        id: Sequential identifier, assigned from 1 as generation succeeds
        score: Real-valued score

    Example:
        >>> record = Record(id=1, score=91.5)
        >>> record.score
        91.5
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: int = Field(..., ge=1, description="Sequential student identifier")
    score: float = Field(..., description="Student score")
