"""Bulk, row and empty-state actions."""

from dataclasses import dataclass
from typing import Any, Callable, Iterable

from ..exceptions import TableConfigurationError


@dataclass(frozen=True)
class BulkAction:
    """An action applied to every selected row.

    on_click receives the list of selected row ids.
    """

    key: str
    label: str
    on_click: Callable[[list], Any]
    icon: str | None = None
    variant: str = "outline"
    disabled: bool = False


@dataclass(frozen=True)
class RowAction:
    """An action offered on a single row; on_click receives the row id."""

    key: str
    label: str
    on_click: Callable[[Any], Any]
    icon: str | None = None
    disabled: bool = False
    destructive: bool = False


@dataclass(frozen=True)
class EmptyAction:
    """Call to action shown in the empty state."""

    label: str
    on_click: Callable[[], Any] | None = None
    href: str | None = None


def validate_action_keys(actions: Iterable, kind: str) -> tuple:
    """Return actions as a tuple, failing on duplicate keys."""
    actions = tuple(actions)
    keys = [action.key for action in actions]
    duplicates = sorted({key for key in keys if keys.count(key) > 1})
    if duplicates:
        raise TableConfigurationError(f"Duplicate {kind} action keys: {duplicates}")
    return actions
