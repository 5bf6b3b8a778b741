"""Row selection.

Pure functions over the currently visible ids and the selection set. Select
all only touches the rows on screen, so a caller paginating on the server
keeps selections made on other pages.
"""

from typing import Hashable, Iterable

ALL = "all"
SOME = "some"
NONE = "none"


def is_all_selected(visible_ids: Iterable[Hashable], selection: Iterable[Hashable]) -> bool:
    """True iff there are visible rows and every one of them is selected."""
    visible = set(visible_ids)
    return bool(visible) and visible <= set(selection)


def is_partially_selected(visible_ids: Iterable[Hashable], selection: Iterable[Hashable]) -> bool:
    """True iff at least one, but not every, visible row is selected."""
    visible = set(visible_ids)
    selected = visible & set(selection)
    return bool(selected) and selected != visible


def selection_state(visible_ids: Iterable[Hashable], selection: Iterable[Hashable]) -> str:
    """Tri-state value for a select-all checkbox: "all", "some" or "none"."""
    visible = set(visible_ids)
    selection = set(selection)
    if is_all_selected(visible, selection):
        return ALL
    if is_partially_selected(visible, selection):
        return SOME
    return NONE


def toggle_all(visible_ids: Iterable[Hashable], selection: Iterable[Hashable]) -> frozenset:
    """Select every visible row, or clear them if they are all selected.

    Ids selected outside the visible set are kept either way.
    """
    visible = frozenset(visible_ids)
    selection = frozenset(selection)
    if is_all_selected(visible, selection):
        return selection - visible
    return selection | visible


def toggle_one(row_id: Hashable, selection: Iterable[Hashable]) -> frozenset:
    """Add a row to the selection, or remove it if already selected."""
    selection = frozenset(selection)
    if row_id in selection:
        return selection - {row_id}
    return selection | {row_id}
