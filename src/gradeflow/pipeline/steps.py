"""Pipeline step shapes.

Every step exposes the same interface, ``apply(records, console)``, taking
the shared mutable collection. The shapes differ in what their logic gets:

- FilterPrintStep: filters a read-only view and prints the matches
- ActionStep: hands the mutable list to an action (sorting, reordering)
- CustomLogicStep: hands a read-only RecordView to arbitrary logic
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable

from rich.console import Console

from gradeflow.output import print_record_table
from gradeflow.pipeline.views import RecordPredicate, RecordView
from gradeflow.schemas import Record

RecordAction = Callable[[list[Record], Console], None]
ViewLogic = Callable[[RecordView, Console], None]


class Step(ABC):
    """Base class for pipeline steps.

    Attributes:
        title: Step title, printed as a banner by the runner

    Example:
        >>> class CountStep(Step):
        ...     def apply(self, records: list[Record], console: Console) -> None:
        ...         console.print(f"{len(records)} records")
    """

    def __init__(self, title: str) -> None:
        """Initialize the step.

        Args:
            title: Step title for banners and logging
        """
        self.title = title

    @abstractmethod
    def apply(self, records: list[Record], console: Console) -> None:
        """Run the step body against the shared collection.

        Args:
            records: The shared record collection
            console: Console receiving the step output
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}(title={self.title!r})"


class FilterPrintStep(Step):
    """Print the records matching a predicate. Never mutates the collection.

    Example:
        >>> step = FilterPrintStep(
        ...     "(1) Filter: Excellent Students",
        ...     "List: Score > 85.0",
        ...     lambda r: r.score > 85.0,
        ... )
    """

    def __init__(
        self,
        title: str,
        list_title: str,
        predicate: RecordPredicate,
        print_summary: bool = True,
    ) -> None:
        """Initialize the step.

        Args:
            title: Step title
            list_title: Title printed above the table
            predicate: Selects the records to print
            print_summary: Print the row count and none-matched notice
        """
        super().__init__(title)
        self.list_title = list_title
        self.predicate = predicate
        self.print_summary = print_summary

    def apply(self, records: list[Record], console: Console) -> None:
        view = RecordView(records)
        print_record_table(
            self.list_title,
            view.filter(self.predicate),
            self.print_summary,
            console,
        )


class ActionStep(Step):
    """Run an action with mutable access to the collection."""

    def __init__(self, title: str, action: RecordAction) -> None:
        """Initialize the step.

        Args:
            title: Step title
            action: Callable receiving the mutable list and the console
        """
        super().__init__(title)
        self.action = action

    def apply(self, records: list[Record], console: Console) -> None:
        self.action(records, console)


class CustomLogicStep(Step):
    """Run read-only logic against an immutable view of the collection.

    The runner always passes the mutable list; this wrapper converts it to a
    RecordView before calling the logic, so the logic has no way to mutate.
    """

    def __init__(self, title: str, logic: ViewLogic) -> None:
        """Initialize the step.

        Args:
            title: Step title
            logic: Callable receiving a RecordView and the console
        """
        super().__init__(title)
        self.logic = logic

    def apply(self, records: list[Record], console: Console) -> None:
        self.logic(RecordView(records), console)
