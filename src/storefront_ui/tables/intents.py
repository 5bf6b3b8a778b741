"""Intents a DataTable emits.

An intent describes a change the user asked for. The table reports it
through a callback, and the render tree attaches one to every interactive
element so a link builder can turn it into an href.
"""

from dataclasses import dataclass

from .sorting import SortState


@dataclass(frozen=True)
class SortIntent:
    sort: SortState


@dataclass(frozen=True)
class SelectionIntent:
    selected: frozenset


@dataclass(frozen=True)
class ExpansionIntent:
    expanded: frozenset


@dataclass(frozen=True)
class PageIntent:
    page: int


@dataclass(frozen=True)
class PageSizeIntent:
    page_size: int


@dataclass(frozen=True)
class SearchIntent:
    text: str
