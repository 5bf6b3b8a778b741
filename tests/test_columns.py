"""Tests for column descriptors."""

from dataclasses import dataclass

import pytest

from storefront_ui.exceptions import TableConfigurationError
from storefront_ui.tables import Column
from storefront_ui.tables.columns import resolve_path, validate_columns


@dataclass
class Customer:
    email: str


@dataclass
class Order:
    display_id: int
    customer: Customer

    def label(self):
        return f"#{self.display_id}"


class TestResolvePath:
    """Tests for dotted field lookup."""

    def test_mapping_key(self):
        assert resolve_path({"city": "Lima"}, "city") == "Lima"

    def test_nested_attribute(self):
        order = Order(7, Customer("ada@example.com"))
        assert resolve_path(order, "customer.email") == "ada@example.com"

    def test_mixed_mapping_and_attribute(self):
        record = {"order": Order(7, Customer("ada@example.com"))}
        assert resolve_path(record, "order.customer.email") == "ada@example.com"

    def test_missing_segment_is_none(self):
        assert resolve_path({"a": None}, "a.b") is None
        assert resolve_path(Order(7, Customer("x")), "missing") is None

    def test_callable_is_called(self):
        """A method at the end of the path is called like in templates."""
        assert resolve_path(Order(7, Customer("x")), "label") == "#7"


class TestColumn:
    """Tests for Column."""

    def test_cell_takes_precedence_over_accessor(self):
        column = Column("total", "Total", accessor="total", cell=lambda r, i: f"{i}:{r['total']}")
        assert column.value_of({"total": 5}, 2) == "2:5"

    def test_callable_accessor(self):
        column = Column("n", "N", accessor=lambda r: r["n"] * 2)
        assert column.value_of({"n": 4}) == 8

    def test_no_accessor_gives_none(self):
        assert Column("blank", "").value_of({"a": 1}) is None

    def test_ordering_field_from_accessor(self):
        """Dotted accessors become Django lookups."""
        assert Column("email", "Email", accessor="customer.email").ordering_field == "customer__email"

    def test_ordering_field_prefers_order_by(self):
        column = Column("name", "Name", accessor="full_name", order_by="last_name")
        assert column.ordering_field == "last_name"

    def test_width_style(self):
        assert Column("a", "A", width=120).width_style == "width: 120px;"
        assert Column("a", "A", width="20%").width_style == "width: 20%;"
        assert Column("a", "A").width_style == ""

    def test_align_class(self):
        assert Column("a", "A", align="right").align_class == "text-right"

    def test_rejects_bad_align(self):
        with pytest.raises(TableConfigurationError):
            Column("a", "A", align="justify")

    def test_rejects_empty_id(self):
        with pytest.raises(TableConfigurationError):
            Column("", "A")


class TestValidateColumns:
    """Tests for column set validation."""

    def test_returns_tuple(self):
        columns = validate_columns(iter([Column("a", "A"), Column("b", "B")]))
        assert isinstance(columns, tuple)
        assert [c.id for c in columns] == ["a", "b"]

    def test_duplicate_ids_raise(self):
        with pytest.raises(TableConfigurationError, match="Duplicate column ids"):
            validate_columns([Column("a", "A"), Column("a", "Again")])
