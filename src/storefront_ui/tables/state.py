"""Controlled and uncontrolled table state.

Each facet of a table (selection, sort, expansion, search text, page size)
is either owned by the table or by the caller. A Facet hides the difference
behind a get/set pair so the table logic is written once:

- uncontrolled: set() stores the new value and notifies on_change
- controlled: set() only notifies on_change; the caller decides whether to
  feed the value back in on the next render
"""

from typing import Any, Callable


class Facet:
    """One piece of table state and who owns it."""

    def __init__(self, value: Any, *, controlled: bool = False, on_change: Callable | None = None):
        self._value = value
        self.controlled = controlled
        self.on_change = on_change

    @classmethod
    def for_value(cls, value: Any, default: Any, on_change: Callable | None = None) -> "Facet":
        """Controlled when the caller supplies value, else owned with default."""
        if value is not None:
            return cls(value, controlled=True, on_change=on_change)
        return cls(default, controlled=False, on_change=on_change)

    @property
    def value(self) -> Any:
        return self._value

    def set(self, value: Any) -> Any:
        if not self.controlled:
            self._value = value
        if self.on_change is not None:
            self.on_change(value)
        return value

    def __repr__(self):
        owner = "controlled" if self.controlled else "uncontrolled"
        return f"<Facet {owner} value={self._value!r}>"
