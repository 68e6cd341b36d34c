"""Base generator protocol.

This module defines the DataGenerator abstract base class that record
generators implement. A generator produces one record per call and signals
failure by raising GenerationError; retrying is the caller's job.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from gradeflow.schemas import Record


class DataGenerator(ABC):
    """Abstract base class for record generators.

    All generators must implement:
    - generate_one: Produce a record for a target id, or raise GenerationError

    Generators should:
    - Own their random state (no module-level random engine)
    - Support deterministic seeding for reproducibility

    Example:
        >>> class ConstantGenerator(DataGenerator):
        ...     def generate_one(self, record_id: int) -> Record:
        ...         return Record(id=record_id, score=50.0)
    """

    @abstractmethod
    def generate_one(self, record_id: int) -> Record:  # pragma: no cover - abstract method
        """Generate a single record.

        Args:
            record_id: Identifier to assign on success

        Returns:
            The generated record

        Raises:
            GenerationError: If this attempt failed. A fresh call may succeed.
        """
        ...
