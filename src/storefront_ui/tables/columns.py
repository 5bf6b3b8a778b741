"""Column descriptors for DataTable.

A Column declares how to turn a record into a cell value. The table never
looks at a record any other way, so records can be dicts, model instances,
dataclasses, or anything a field path or callable can read.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Iterable

from ..exceptions import TableConfigurationError

ALIGNMENTS = ("left", "center", "right")


def resolve_path(record: Any, path: str) -> Any:
    """Read a dotted field path from a record.

    Each segment is looked up as a mapping key first, then as an attribute.
    A missing segment yields None. A zero-argument callable at the end of
    the path is called, the way Django templates resolve variables.

    Args:
        record: The record to read from
        path: Dotted path such as "customer.email"

    Returns:
        The resolved value, or None if any segment is missing
    """
    value = record
    for segment in path.split("."):
        if value is None:
            return None
        if isinstance(value, Mapping):
            value = value.get(segment)
        else:
            value = getattr(value, segment, None)

    if callable(value):
        value = value()
    return value


@dataclass(frozen=True)
class Column:
    """Describes one column of a DataTable.

    Example:
        Column("email", "Email", accessor="customer.email", sortable=True)
        Column("total", "Total", cell=lambda order, i: f"${order.total}",
               align="right")
    """

    id: str
    header: str
    accessor: str | Callable[[Any], Any] | None = None
    cell: Callable[[Any, int], Any] | None = None
    sortable: bool = False
    align: str = "left"
    width: int | str | None = None
    sticky: bool = False
    order_by: str | None = None

    def __post_init__(self):
        if not self.id:
            raise TableConfigurationError("Column id must be a non-empty string")
        if self.align not in ALIGNMENTS:
            raise TableConfigurationError(
                f"Invalid align {self.align!r} for column {self.id!r}. "
                f"Must be one of {list(ALIGNMENTS)}"
            )

    def value_of(self, record: Any, index: int = 0) -> Any:
        """Derive this column's display value for a record."""
        if self.cell is not None:
            return self.cell(record, index)

        if self.accessor is None:
            return None
        if callable(self.accessor):
            return self.accessor(record)
        return resolve_path(record, self.accessor)

    @property
    def ordering_field(self) -> str | None:
        """Field a caller orders by when this column is sorted.

        Falls back to the accessor path, translated to Django lookup syntax.
        """
        if self.order_by:
            return self.order_by
        if isinstance(self.accessor, str):
            return self.accessor.replace(".", "__")
        return None

    @property
    def align_class(self) -> str:
        return f"text-{self.align}"

    @property
    def width_style(self) -> str:
        if self.width is None:
            return ""
        if isinstance(self.width, int):
            return f"width: {self.width}px;"
        return f"width: {self.width};"


def validate_columns(columns: Iterable[Column]) -> tuple[Column, ...]:
    """Check a column set and return it as a tuple.

    Raises:
        TableConfigurationError: If two columns share an id
    """
    columns = tuple(columns)
    seen = set()
    duplicates = []
    for column in columns:
        if column.id in seen and column.id not in duplicates:
            duplicates.append(column.id)
        seen.add(column.id)

    if duplicates:
        raise TableConfigurationError(f"Duplicate column ids: {duplicates}")
    return columns
