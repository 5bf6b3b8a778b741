"""Column sorting.

A table sorts by at most one column. Clicking a header moves through a
cycle of states; the table reports the new state to the caller and leaves
the actual ordering to them.
"""

from dataclasses import dataclass
from enum import Enum

from ..exceptions import TableConfigurationError


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


class SortCycle(str, Enum):
    """What a third click on the same header does.

    ASC_DESC_NONE: ascending -> descending -> unsorted
    ASC_DESC: ascending <-> descending, never unsorted
    """

    ASC_DESC_NONE = "asc-desc-none"
    ASC_DESC = "asc-desc"


def parse_cycle(value) -> SortCycle:
    try:
        return SortCycle(value)
    except ValueError:
        raise TableConfigurationError(
            f"Invalid sort cycle {value!r}. Must be one of {[c.value for c in SortCycle]}"
        ) from None


@dataclass(frozen=True)
class SortState:
    """The active sort key, or no sort when column_id is None."""

    column_id: str | None = None
    direction: SortDirection = SortDirection.ASC

    @classmethod
    def unsorted(cls) -> "SortState":
        return cls()

    @classmethod
    def from_ordering(cls, ordering: str | None) -> "SortState":
        """Build a state from Django-style ordering: "name" or "-name"."""
        if not ordering:
            return cls()
        if ordering.startswith("-"):
            column_id = ordering[1:]
            return cls(column_id, SortDirection.DESC) if column_id else cls()
        return cls(ordering, SortDirection.ASC)

    @property
    def is_active(self) -> bool:
        return self.column_id is not None

    @property
    def ordering(self) -> str:
        """Django-style ordering string; empty when unsorted."""
        if not self.is_active:
            return ""
        prefix = "-" if self.direction == SortDirection.DESC else ""
        return f"{prefix}{self.column_id}"

    def direction_for(self, column_id: str) -> SortDirection | None:
        """Direction applied to column_id, or None if it is not the sort key."""
        if self.column_id == column_id:
            return self.direction
        return None


def next_sort(
    state: SortState,
    column_id: str,
    cycle: SortCycle = SortCycle.ASC_DESC_NONE,
) -> SortState:
    """State after the user clicks the header of column_id."""
    if state.column_id != column_id:
        return SortState(column_id, SortDirection.ASC)

    if state.direction == SortDirection.ASC:
        return SortState(column_id, SortDirection.DESC)

    if cycle == SortCycle.ASC_DESC:
        return SortState(column_id, SortDirection.ASC)
    return SortState.unsorted()
