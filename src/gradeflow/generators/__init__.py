"""Record generators.

- DataGenerator: Abstract base class
- ScoreGenerator: Normally distributed student scores with simulated failures
"""

from __future__ import annotations

from gradeflow.generators.base import DataGenerator
from gradeflow.generators.scores import ScoreGenerator

__all__ = [
    "DataGenerator",
    "ScoreGenerator",
]
