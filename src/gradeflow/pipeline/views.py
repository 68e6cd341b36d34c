"""Read-only view over the shared record collection."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from typing import overload

from gradeflow.schemas import Record

RecordPredicate = Callable[[Record], bool]


class RecordView(Sequence[Record]):
    """Immutable view of a live record list.

    The view reflects the list it wraps (including reordering by earlier
    steps) but exposes no mutating methods. Records themselves are frozen.

    Example:
        >>> records = [Record(id=1, score=90.0), Record(id=2, score=50.0)]
        >>> view = RecordView(records)
        >>> [r.id for r in view.filter(lambda r: r.score > 85)]
        [1]
    """

    __slots__ = ("_records",)

    def __init__(self, records: Sequence[Record]) -> None:
        self._records = records

    @overload
    def __getitem__(self, index: int) -> Record: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[Record, ...]: ...

    def __getitem__(self, index: int | slice) -> Record | tuple[Record, ...]:
        if isinstance(index, slice):
            return tuple(self._records[index])
        return self._records[index]

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self._records)

    def __repr__(self) -> str:
        return f"RecordView({len(self._records)} records)"

    def filter(self, predicate: RecordPredicate) -> Iterator[Record]:
        """Lazily yield records matching ``predicate``, in order."""
        return (record for record in self._records if predicate(record))

    def scores(self) -> Iterator[float]:
        """Yield every score, in order."""
        return (record.score for record in self._records)
