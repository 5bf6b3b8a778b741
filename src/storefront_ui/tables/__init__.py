"""Data tables: column descriptors, interaction state and the DataTable."""

from .actions import BulkAction, EmptyAction, RowAction
from .columns import Column
from .pagination import Pagination
from .query import TableQuery
from .sorting import SortCycle, SortDirection, SortState
from .table import DataTable

__all__ = [
    "BulkAction",
    "Column",
    "DataTable",
    "EmptyAction",
    "Pagination",
    "RowAction",
    "SortCycle",
    "SortDirection",
    "SortState",
    "TableQuery",
]
