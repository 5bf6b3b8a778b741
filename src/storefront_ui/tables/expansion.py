"""Row expansion.

Expanded rows get a full-width detail row underneath. Expansion has its own
set of ids and never reads or writes the selection.
"""

from typing import Hashable, Iterable


def toggle_expansion(row_id: Hashable, expanded: Iterable[Hashable]) -> frozenset:
    """Expand a row, or collapse it if already expanded."""
    expanded = frozenset(expanded)
    if row_id in expanded:
        return expanded - {row_id}
    return expanded | {row_id}


def is_expanded(row_id: Hashable, expanded: Iterable[Hashable]) -> bool:
    return row_id in set(expanded)
