"""Render tree produced by DataTable.build().

Plain objects the data_table template walks. Every interactive element
carries the intent it stands for and, when the table was built with a link
builder, the href for that intent.
"""

from dataclasses import dataclass, field
from typing import Any, Hashable

from .actions import BulkAction, EmptyAction, RowAction
from .columns import Column
from .intents import ExpansionIntent, SelectionIntent, SortIntent
from .pagination import Pagination
from .sorting import SortDirection

LOADING = "loading"
EMPTY = "empty"
ROWS = "rows"

VARIANTS = ("default", "bordered", "striped")

SIZE_STYLES = {
    "sm": {
        "cell": "px-3 py-2 text-sm",
        "header": "px-3 py-2 text-xs font-medium",
    },
    "md": {
        "cell": "px-4 py-3 text-sm",
        "header": "px-4 py-3 text-sm font-medium",
    },
    "lg": {
        "cell": "px-6 py-4",
        "header": "px-6 py-4 text-sm font-medium",
    },
}

# Form field names used when no link builder is supplied
DEFAULT_PARAMS = {
    "search": "q",
    "selected": "selected",
    "bulk_action": "bulk_action",
    "row_action": "row_action",
    "page_size": "page_size",
}


@dataclass
class HeaderCell:
    column: Column
    sortable: bool = False
    direction: SortDirection | None = None
    intent: SortIntent | None = None
    href: str | None = None

    @property
    def ascending(self) -> bool:
        return self.direction == SortDirection.ASC

    @property
    def descending(self) -> bool:
        return self.direction == SortDirection.DESC

    @property
    def aria_sort(self) -> str:
        if self.ascending:
            return "ascending"
        if self.descending:
            return "descending"
        return "none"


@dataclass
class SelectAll:
    state: str
    intent: SelectionIntent
    href: str | None = None

    @property
    def checked(self) -> bool:
        return self.state == "all"

    @property
    def indeterminate(self) -> bool:
        return self.state == "some"


@dataclass
class Cell:
    column: Column
    value: Any


@dataclass
class Row:
    row_id: Hashable
    index: int
    record: Any
    cells: list[Cell]
    selected: bool = False
    expanded: bool = False
    detail: Any = None
    actions: tuple[RowAction, ...] = ()
    css_class: str = ""
    select_intent: SelectionIntent | None = None
    select_href: str | None = None
    expand_intent: ExpansionIntent | None = None
    expand_href: str | None = None

    @property
    def number(self) -> int:
        return self.index + 1

    @property
    def select_label(self) -> str:
        return f"Select row {self.number}"

    @property
    def has_detail(self) -> bool:
        return self.expanded and self.detail is not None


@dataclass
class EmptyState:
    icon: str
    message: str
    action: EmptyAction | None = None


@dataclass
class BulkActionBar:
    count: int
    selected_ids: list
    actions: tuple[BulkAction, ...]
    busy: bool = False
    # Selected ids with no checkbox on this page, posted as hidden inputs
    offpage_ids: list = field(default_factory=list)


@dataclass
class SearchBar:
    value: str
    placeholder: str
    name: str
    hidden_fields: list[tuple[str, str]] = field(default_factory=list)


@dataclass
class PageLink:
    number: int | None
    current: bool = False
    href: str | None = None

    @property
    def is_ellipsis(self) -> bool:
        return self.number is None


@dataclass
class PageSizeOption:
    size: int
    selected: bool = False
    href: str | None = None


@dataclass
class Footer:
    pagination: Pagination
    pages: list[PageLink]
    page_sizes: list[PageSizeOption]
    first_href: str | None = None
    previous_href: str | None = None
    next_href: str | None = None
    last_href: str | None = None

    @property
    def first_item(self) -> int:
        return self.pagination.first_item

    @property
    def last_item(self) -> int:
        return self.pagination.last_item

    @property
    def total_items(self) -> int:
        return self.pagination.total_items


@dataclass
class TableLayout:
    """Everything the data_table template needs, already derived."""

    state: str
    columns: tuple[Column, ...]
    label: str
    variant: str = "default"
    size: str = "md"
    sticky_header: bool = False
    max_height: int | str | None = None
    selectable: bool = False
    expandable: bool = False
    has_row_actions: bool = False
    header: list[HeaderCell] = field(default_factory=list)
    select_all: SelectAll | None = None
    rows: list[Row] = field(default_factory=list)
    skeleton_rows: int = 0
    empty: EmptyState | None = None
    bulk_bar: BulkActionBar | None = None
    footer: Footer | None = None
    search: SearchBar | None = None
    filters: Any = None
    params: dict = field(default_factory=lambda: dict(DEFAULT_PARAMS))

    @property
    def is_loading(self) -> bool:
        return self.state == LOADING

    @property
    def is_empty(self) -> bool:
        return self.state == EMPTY

    @property
    def has_rows(self) -> bool:
        return self.state == ROWS

    @property
    def column_count(self) -> int:
        """Number of cells in a row, for full-width colspans."""
        return (
            len(self.columns)
            + (1 if self.selectable else 0)
            + (1 if self.expandable else 0)
            + (1 if self.has_row_actions else 0)
        )

    @property
    def skeleton(self) -> range:
        return range(self.skeleton_rows)

    @property
    def has_form(self) -> bool:
        return self.has_rows and (self.selectable or self.has_row_actions)

    @property
    def show_controls(self) -> bool:
        return bool(self.search or self.filters or self.bulk_bar)

    @property
    def max_height_style(self) -> str:
        """Inline style for the scroll container; numbers are pixels."""
        if self.max_height in (None, ""):
            return ""
        if isinstance(self.max_height, (int, float)):
            return f"max-height: {self.max_height}px;"
        return f"max-height: {self.max_height};"

    @property
    def cell_class(self) -> str:
        return SIZE_STYLES[self.size]["cell"]

    @property
    def header_class(self) -> str:
        return SIZE_STYLES[self.size]["header"]
