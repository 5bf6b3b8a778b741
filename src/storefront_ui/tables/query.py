"""Table state carried in the query string.

TableQuery reads a table's state from request.GET and turns intents back
into links, so every sort header, page number and checkbox on a
server-rendered table is a plain href. Parameters belonging to other
tables (different prefix) or to the page itself are preserved.

    ?sort=-total&page=2&page_size=20&q=bob&selected=3&selected=7&expanded=3

With prefix="orders" the same state reads ?orders-sort=-total&orders-page=2...
"""

from django.http import QueryDict

from .intents import (
    ExpansionIntent,
    PageIntent,
    PageSizeIntent,
    SearchIntent,
    SelectionIntent,
    SortIntent,
)
from .sorting import SortState


def _positive_int(value):
    try:
        number = int(value)
    except (TypeError, ValueError):
        return None
    return number if number > 0 else None


class TableQuery:
    """Reads table state from, and writes intents to, a query string."""

    def __init__(self, params: QueryDict | None = None, prefix: str = "", path: str = ""):
        self.prefix = prefix
        self.path = path
        self._params = params.copy() if params is not None else QueryDict(mutable=True)

    @classmethod
    def from_request(cls, request, prefix: str = "") -> "TableQuery":
        return cls(request.GET, prefix=prefix, path=request.path)

    def param(self, name: str) -> str:
        """Query parameter name for name, with this table's prefix."""
        return f"{self.prefix}-{name}" if self.prefix else name

    @property
    def params(self) -> dict:
        """Form field names, in the shape TableLayout.params expects."""
        return {
            "search": self.param("q"),
            "selected": self.param("selected"),
            "bulk_action": self.param("bulk_action"),
            "row_action": self.param("row_action"),
            "page_size": self.param("page_size"),
        }

    @property
    def sort(self) -> SortState:
        return SortState.from_ordering(self._params.get(self.param("sort")))

    @property
    def has_sort(self) -> bool:
        """True if the query names a sort, including an explicit "sort=" for none."""
        return self.param("sort") in self._params

    @property
    def page(self) -> int:
        return _positive_int(self._params.get(self.param("page"))) or 1

    @property
    def page_size(self) -> int | None:
        return _positive_int(self._params.get(self.param("page_size")))

    @property
    def search(self) -> str:
        return self._params.get(self.param("q"), "").strip()

    @property
    def selected(self) -> frozenset:
        return frozenset(v for v in self._params.getlist(self.param("selected")) if v)

    @property
    def expanded(self) -> frozenset:
        return frozenset(v for v in self._params.getlist(self.param("expanded")) if v)

    def with_changes(self, **changes) -> QueryDict:
        """Copy of the query with the named table parameters replaced.

        None, empty strings and empty collections remove the parameter.
        """
        params = self._params.copy()
        for name, value in changes.items():
            key = self.param(name)
            if value is None or value == "" or (isinstance(value, (set, frozenset, list, tuple)) and not value):
                params.pop(key, None)
            elif isinstance(value, (set, frozenset, list, tuple)):
                params.setlist(key, sorted((str(v) for v in value)))
            else:
                params[key] = str(value)
        return params

    def href(self, **changes) -> str:
        return self._link(self.with_changes(**changes))

    def _link(self, params: QueryDict) -> str:
        return f"{self.path}?{params.urlencode()}"

    def href_for(self, intent) -> str:
        """Link that applies intent to the current state."""
        if isinstance(intent, SortIntent):
            # A cleared sort is kept as an empty "sort=" parameter
            params = self.with_changes(page=None)
            params[self.param("sort")] = intent.sort.ordering
            return self._link(params)
        if isinstance(intent, SelectionIntent):
            return self.href(selected=intent.selected)
        if isinstance(intent, ExpansionIntent):
            return self.href(expanded=intent.expanded)
        if isinstance(intent, PageIntent):
            return self.href(page=intent.page)
        if isinstance(intent, PageSizeIntent):
            return self.href(page_size=intent.page_size, page=None)
        if isinstance(intent, SearchIntent):
            return self.href(q=intent.text, page=None)
        raise TypeError(f"Unsupported intent: {intent!r}")

    def hidden_fields(self, *exclude: str) -> list[tuple[str, str]]:
        """(name, value) pairs to carry through a GET form.

        exclude names table parameters (unprefixed) the form itself sets.
        """
        skipped = {self.param(name) for name in exclude}
        return [
            (key, value)
            for key, values in self._params.lists()
            if key not in skipped
            for value in values
        ]
