"""DataTable: renders caller-supplied records through column descriptors.

The table coordinates four interaction models, each of which can be owned
by the table or by the caller:

- selection: which rows are checked, with select-all over visible rows
- sort: one active column and direction, emitted as an intent
- expansion: which rows show a detail row
- pagination and search: display only, changes forwarded to the caller

The table never reorders, filters or pages records itself. Each build()
derives everything from the records and state it holds right now, so a
caller can swap the record collection between renders (a new page from the
server, say) without stale ids leaking into select-all or expansion.

Usage:
    table = DataTable(
        orders,
        [
            Column("number", "Order", accessor="display_id", sortable=True),
            Column("total", "Total", accessor="total", align="right"),
        ],
        get_row_id=lambda order: str(order.pk),
        selectable=True,
        selected_rows=query.selected,
        on_selection_change=handle_selection,
    )
    layout = table.build(link=query)
"""

import logging
from typing import Any, Callable, Hashable, Iterable, Sequence

from django.template.loader import render_to_string

from .. import conf
from ..exceptions import TableConfigurationError
from . import expansion as expansion_controller
from . import selection as selection_controller
from .actions import BulkAction, EmptyAction, RowAction, validate_action_keys
from .columns import Column, validate_columns
from .intents import (
    ExpansionIntent,
    PageIntent,
    PageSizeIntent,
    SelectionIntent,
    SortIntent,
)
from .layout import (
    EMPTY,
    LOADING,
    ROWS,
    SIZE_STYLES,
    VARIANTS,
    BulkActionBar,
    Cell,
    EmptyState,
    Footer,
    HeaderCell,
    PageLink,
    PageSizeOption,
    Row,
    SearchBar,
    SelectAll,
    TableLayout,
)
from .pagination import Pagination
from .sorting import SortState, next_sort, parse_cycle
from .state import Facet

logger = logging.getLogger(__name__)

TEMPLATE_NAME = "storefront_ui/components/data_table.html"


class DataTable:
    """A table over arbitrary records.

    Passing a value for selected_rows, sort, expanded_rows, search_value or
    page_size makes that facet controlled: the table reads it, reports
    changes through the matching callback, and expects the caller to pass
    the new value back. Leaving it as None lets the table keep the state
    itself, starting from the default_* value where one exists.
    """

    def __init__(
        self,
        records: Sequence[Any],
        columns: Iterable[Column],
        *,
        get_row_id: Callable[[Any], Hashable] | None = None,
        # Selection
        selectable: bool = False,
        selected_rows: Iterable[Hashable] | None = None,
        on_selection_change: Callable[[list], Any] | None = None,
        # Sorting
        sortable: bool = True,
        sort: SortState | None = None,
        default_sort: SortState | None = None,
        sort_cycle: str | None = None,
        on_sort: Callable[[str, str | None], Any] | None = None,
        # Expansion
        expandable: bool = False,
        expanded_rows: Iterable[Hashable] | None = None,
        on_expansion_change: Callable[[list], Any] | None = None,
        render_expanded_row: Callable[[Any], Any] | None = None,
        # Pagination
        pagination: Pagination | None = None,
        page_size: int | None = None,
        on_page_change: Callable[[int], Any] | None = None,
        on_page_size_change: Callable[[int], Any] | None = None,
        # Search & filters
        searchable: bool = False,
        search_placeholder: str | None = None,
        search_value: str | None = None,
        on_search: Callable[[str], Any] | None = None,
        filters: Any = None,
        # Actions
        bulk_actions: Iterable[BulkAction] = (),
        row_actions: Callable[[Any], Iterable[RowAction]] | None = None,
        actions_busy: bool = False,
        on_row_click: Callable[[Any, int], Any] | None = None,
        # Loading & empty states
        loading: bool = False,
        loading_rows: int | None = None,
        empty_message: str | None = None,
        empty_icon: str | None = None,
        empty_action: EmptyAction | None = None,
        # Appearance
        variant: str = "default",
        size: str = "md",
        sticky_header: bool = False,
        max_height: int | str | None = None,
        get_row_class: Callable[[Any, int], str] | None = None,
        label: str | None = None,
    ):
        defaults = conf.get_table_defaults()

        self.records = records
        self.columns = validate_columns(columns)
        self._columns_by_id = {column.id: column for column in self.columns}

        if (selectable or expandable) and get_row_id is None:
            raise TableConfigurationError(
                "get_row_id is required when a DataTable is selectable or expandable"
            )
        if variant not in VARIANTS:
            raise TableConfigurationError(f"Invalid variant {variant!r}. Must be one of {list(VARIANTS)}")
        if size not in SIZE_STYLES:
            raise TableConfigurationError(f"Invalid size {size!r}. Must be one of {list(SIZE_STYLES)}")

        self.get_row_id = get_row_id
        self.selectable = selectable
        self.sortable = sortable
        self.sort_cycle = parse_cycle(sort_cycle or defaults["sort_cycle"])
        self.expandable = expandable
        self.render_expanded_row = render_expanded_row
        self.pagination = pagination
        self.searchable = searchable
        self.search_placeholder = search_placeholder or defaults["search_placeholder"]
        self.filters = filters
        self.bulk_actions = validate_action_keys(bulk_actions, "bulk")
        self.row_actions = row_actions
        self.actions_busy = actions_busy
        self.loading = loading
        self.loading_rows = defaults["loading_rows"] if loading_rows is None else loading_rows
        self.empty_message = empty_message or defaults["empty_message"]
        self.empty_icon = empty_icon or defaults["empty_icon"]
        self.empty_action = empty_action
        self.variant = variant
        self.size = size
        self.sticky_header = sticky_header
        self.max_height = max_height
        self.get_row_class = get_row_class
        self.label = label or "Data table"

        self.on_selection_change = on_selection_change
        self.on_sort = on_sort
        self.on_expansion_change = on_expansion_change
        self.on_page_change = on_page_change
        self.on_page_size_change = on_page_size_change
        self.on_search = on_search
        self.on_row_click = on_row_click

        self._selection = Facet.for_value(
            None if selected_rows is None else frozenset(selected_rows),
            frozenset(),
            on_change=self._emit_selection,
        )
        self._sort = Facet.for_value(sort, default_sort or SortState.unsorted(), on_change=self._emit_sort)
        self._expansion = Facet.for_value(
            None if expanded_rows is None else frozenset(expanded_rows),
            frozenset(),
            on_change=self._emit_expansion,
        )
        self._search = Facet.for_value(search_value, "", on_change=self._emit_search)
        self._page_size = Facet.for_value(
            page_size,
            pagination.page_size if pagination else defaults["page_size"],
            on_change=self._emit_page_size,
        )

    def __repr__(self):
        return f"<DataTable columns={[c.id for c in self.columns]} records={len(self.records)}>"

    # State

    @property
    def selection(self) -> frozenset:
        return self._selection.value

    @property
    def sort_state(self) -> SortState:
        return self._sort.value

    @property
    def expanded(self) -> frozenset:
        return self._expansion.value

    @property
    def search_value(self) -> str:
        return self._search.value

    @property
    def page_size(self) -> int:
        return self._page_size.value

    @property
    def visible_ids(self) -> list:
        """Ids of the records supplied right now, in display order."""
        if self.get_row_id is None:
            return list(range(len(self.records)))
        return [self.get_row_id(record) for record in self.records]

    @property
    def is_all_selected(self) -> bool:
        if not self.selectable:
            return False
        return selection_controller.is_all_selected(self.visible_ids, self.selection)

    @property
    def is_partially_selected(self) -> bool:
        if not self.selectable:
            return False
        return selection_controller.is_partially_selected(self.visible_ids, self.selection)

    def column(self, column_id: str) -> Column:
        try:
            return self._columns_by_id[column_id]
        except KeyError:
            raise KeyError(f"Unknown column: {column_id!r}") from None

    def record_for(self, row_id: Hashable) -> tuple[Any, int]:
        """The visible record with row_id, and its index."""
        for index, current_id in enumerate(self.visible_ids):
            if current_id == row_id:
                return self.records[index], index
        raise KeyError(f"No visible record with id {row_id!r}")

    # Interactions

    def toggle_all(self) -> frozenset:
        """Select every visible row, or clear them when all are selected."""
        return self._selection.set(selection_controller.toggle_all(self.visible_ids, self.selection))

    def toggle_row(self, row_id: Hashable) -> frozenset:
        return self._selection.set(selection_controller.toggle_one(row_id, self.selection))

    def sort_by(self, column_id: str) -> SortState | None:
        """Advance the sort cycle for a header click.

        Returns the new state, or None when the column cannot be sorted.
        """
        column = self.column(column_id)
        if not (self.sortable and column.sortable):
            logger.debug("Ignoring sort on non-sortable column %s", column_id)
            return None
        return self._sort.set(next_sort(self.sort_state, column_id, self.sort_cycle))

    def toggle_expansion(self, row_id: Hashable) -> frozenset:
        return self._expansion.set(expansion_controller.toggle_expansion(row_id, self.expanded))

    def search(self, text: str) -> str:
        return self._search.set(text)

    def change_page(self, page: int) -> bool:
        """Forward a page change. Returns False if the page does not exist."""
        if self.pagination is None or not self.pagination.contains_page(page):
            logger.debug("Ignoring change to page %s", page)
            return False
        logger.debug("Page change intent: %s", page)
        if self.on_page_change is not None:
            self.on_page_change(page)
        return True

    def change_page_size(self, size: int) -> bool:
        """Forward a page size change. Returns False for sizes not offered."""
        if size not in self._page_size_options():
            logger.debug("Ignoring unsupported page size %s", size)
            return False
        self._page_size.set(size)
        return True

    def run_bulk_action(self, key: str) -> Any:
        """Run a bulk action against the current selection.

        Returns whatever the action returns; None when it is disabled or
        nothing is selected.
        """
        action = self._find_action(self.bulk_actions, key, "bulk")
        if action.disabled or self.actions_busy or not self.selection:
            logger.debug("Bulk action %s not available", key)
            return None
        logger.debug("Running bulk action %s on %d rows", key, len(self.selection))
        return action.on_click(self._ordered(self.selection))

    def run_row_action(self, row_id: Hashable, key: str) -> Any:
        """Run one of a visible row's actions."""
        if self.row_actions is None:
            raise KeyError("DataTable has no row actions")
        record, _ = self.record_for(row_id)
        action = self._find_action(self.row_actions(record), key, "row")
        if action.disabled:
            logger.debug("Row action %s disabled for %s", key, row_id)
            return None
        logger.debug("Running row action %s on %s", key, row_id)
        return action.on_click(row_id)

    def click_row(self, row_id: Hashable) -> Any:
        if self.on_row_click is None:
            return None
        record, index = self.record_for(row_id)
        return self.on_row_click(record, index)

    # Rendering

    def build(self, link=None) -> TableLayout:
        """Derive the render tree from the current records and state.

        Args:
            link: Optional link builder (see TableQuery) used to attach an
                href to every interactive element

        Raises:
            TableConfigurationError: If two visible records share an id
        """
        layout = TableLayout(
            state=ROWS,
            columns=self.columns,
            label=self.label,
            variant=self.variant,
            size=self.size,
            sticky_header=self.sticky_header,
            max_height=self.max_height,
            selectable=self.selectable,
            expandable=self.expandable,
            has_row_actions=self.row_actions is not None,
            filters=self.filters,
        )
        if link is not None:
            layout.params = link.params

        if self.searchable:
            layout.search = SearchBar(
                value=self.search_value,
                placeholder=self.search_placeholder,
                name=layout.params["search"],
                hidden_fields=link.hidden_fields("q", "page") if link is not None else [],
            )

        if not self.records:
            if self.loading:
                layout.state = LOADING
                layout.header = [HeaderCell(column) for column in self.columns]
                layout.skeleton_rows = self.loading_rows
            else:
                layout.state = EMPTY
                layout.empty = EmptyState(self.empty_icon, self.empty_message, self.empty_action)
            return layout

        visible_ids = self.visible_ids
        self._check_unique_ids(visible_ids)

        layout.header = self._build_header(link)
        if self.selectable:
            intent = SelectionIntent(selection_controller.toggle_all(visible_ids, self.selection))
            layout.select_all = SelectAll(
                state=selection_controller.selection_state(visible_ids, self.selection),
                intent=intent,
                href=_href(link, intent),
            )
        layout.rows = [
            self._build_row(record, index, row_id, link)
            for index, (record, row_id) in enumerate(zip(self.records, visible_ids))
        ]

        if self.selectable and self.selection and self.bulk_actions:
            selected_ids = self._ordered(self.selection)
            shown = set(visible_ids)
            layout.bulk_bar = BulkActionBar(
                count=len(self.selection),
                selected_ids=selected_ids,
                actions=self.bulk_actions,
                busy=self.actions_busy,
                offpage_ids=[row_id for row_id in selected_ids if row_id not in shown],
            )

        if self.pagination is not None:
            layout.footer = self._build_footer(link)
        return layout

    def render(self, request=None, link=None) -> str:
        """Render the table to HTML with the data_table template."""
        layout = self.build(link=link)
        return render_to_string(TEMPLATE_NAME, {"table": layout}, request=request)

    # Internals

    def _build_header(self, link) -> list[HeaderCell]:
        cells = []
        for column in self.columns:
            cell = HeaderCell(column)
            if self.sortable and column.sortable:
                intent = SortIntent(next_sort(self.sort_state, column.id, self.sort_cycle))
                cell.sortable = True
                cell.direction = self.sort_state.direction_for(column.id)
                cell.intent = intent
                cell.href = _href(link, intent)
            cells.append(cell)
        return cells

    def _build_row(self, record, index: int, row_id, link) -> Row:
        row = Row(
            row_id=row_id,
            index=index,
            record=record,
            cells=[Cell(column, column.value_of(record, index)) for column in self.columns],
            css_class=self.get_row_class(record, index) if self.get_row_class else "",
        )

        if self.selectable:
            row.selected = row_id in self.selection
            row.select_intent = SelectionIntent(selection_controller.toggle_one(row_id, self.selection))
            row.select_href = _href(link, row.select_intent)

        if self.expandable:
            row.expanded = row_id in self.expanded
            row.expand_intent = ExpansionIntent(expansion_controller.toggle_expansion(row_id, self.expanded))
            row.expand_href = _href(link, row.expand_intent)
            if row.expanded and self.render_expanded_row is not None:
                row.detail = self.render_expanded_row(record)

        if self.row_actions is not None:
            row.actions = validate_action_keys(self.row_actions(record), "row")
        return row

    def _build_footer(self, link) -> Footer:
        pagination = self.pagination
        current = pagination.current_page

        def page_href(number):
            if link is None or not pagination.contains_page(number):
                return None
            return link.href_for(PageIntent(number))

        pages = [
            PageLink(
                number=number,
                current=number == current,
                href=page_href(number) if number is not None else None,
            )
            for number in pagination.page_items()
        ]
        page_sizes = [
            PageSizeOption(
                size=size,
                selected=size == self.page_size,
                href=_href(link, PageSizeIntent(size)),
            )
            for size in self._page_size_options()
        ]
        return Footer(
            pagination=pagination,
            pages=pages,
            page_sizes=page_sizes if self.on_page_size_change is not None or link is not None else [],
            first_href=page_href(1) if pagination.has_previous else None,
            previous_href=page_href(current - 1) if pagination.has_previous else None,
            next_href=page_href(current + 1) if pagination.has_next else None,
            last_href=page_href(pagination.total_pages) if pagination.has_next else None,
        )

    def _page_size_options(self) -> tuple[int, ...]:
        if self.pagination is not None:
            return tuple(self.pagination.page_size_options)
        return conf.get_table_defaults()["page_size_options"]

    def _check_unique_ids(self, visible_ids: list) -> None:
        seen = set()
        duplicates = []
        for row_id in visible_ids:
            if row_id in seen:
                duplicates.append(row_id)
            seen.add(row_id)
        if duplicates:
            raise TableConfigurationError(f"Duplicate row ids among visible records: {duplicates}")

    def _ordered(self, ids: Iterable[Hashable]) -> list:
        """ids as a list: visible rows in display order, then the rest."""
        ids = set(ids)
        visible = [row_id for row_id in self.visible_ids if row_id in ids]
        shown = set(visible)
        hidden = sorted((row_id for row_id in ids if row_id not in shown), key=str)
        return visible + hidden

    @staticmethod
    def _find_action(actions: Iterable, key: str, kind: str):
        for action in actions:
            if action.key == key:
                return action
        raise KeyError(f"Unknown {kind} action: {key!r}")

    # Intent callbacks, wired into the facets

    def _emit_selection(self, selection: frozenset) -> None:
        logger.debug("Selection change intent: %d selected", len(selection))
        if self.on_selection_change is not None:
            self.on_selection_change(self._ordered(selection))

    def _emit_sort(self, state: SortState) -> None:
        direction = state.direction.value if state.is_active else None
        logger.debug("Sort intent: %s %s", state.column_id, direction)
        if self.on_sort is not None:
            self.on_sort(state.column_id, direction)

    def _emit_expansion(self, expanded: frozenset) -> None:
        if self.on_expansion_change is not None:
            self.on_expansion_change(self._ordered(expanded))

    def _emit_search(self, text: str) -> None:
        logger.debug("Search intent: %r", text)
        if self.on_search is not None:
            self.on_search(text)

    def _emit_page_size(self, size: int) -> None:
        logger.debug("Page size intent: %s", size)
        if self.on_page_size_change is not None:
            self.on_page_size_change(size)


def _href(link, intent) -> str | None:
    if link is None:
        return None
    return link.href_for(intent)
