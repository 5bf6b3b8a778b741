"""Tests for DataTableMixin."""

from unittest import mock

import pytest
from django.core.exceptions import ImproperlyConfigured
from django.views.generic import TemplateView

from storefront_ui.mixins import DataTableMixin
from storefront_ui.tables import BulkAction, Column, RowAction

PRODUCTS = [
    {"id": i, "title": title, "price": price}
    for i, (title, price) in enumerate(
        [
            ("Mask", 40),
            ("Fins", 90),
            ("Snorkel", 15),
            ("Wetsuit", 250),
            ("Booties", None),
        ],
        start=1,
    )
]


class ProductTableView(DataTableMixin, TemplateView):
    template_name = "unused.html"
    table_columns = (
        Column("title", "Title", accessor="title", sortable=True),
        Column("price", "Price", accessor="price", sortable=True, align="right"),
    )
    table_selectable = True
    table_searchable = True
    table_page_size = 2
    search_fields = ("title",)

    bulk_handler = None
    row_handler = None

    def get_table_records(self):
        return list(PRODUCTS)

    def get_bulk_actions(self):
        return (BulkAction("archive", "Archive", self.bulk_handler),)

    def has_row_actions(self):
        return True

    def get_row_actions(self, record):
        return (RowAction("feature", "Feature", self.row_handler),)


def make_view(request, **attrs):
    view = ProductTableView(**attrs)
    view.setup(request)
    return view


def titles(context):
    return [row.record["title"] for row in context["table_layout"].rows]


class TestGet:
    """Tests for reading table state from the query string."""

    def test_first_page(self, rf):
        context = make_view(rf.get("/products/")).get_context_data()

        assert titles(context) == ["Mask", "Fins"]
        footer = context["table_layout"].footer
        assert footer.total_items == 5
        assert footer.pagination.total_pages == 3

    def test_sort_descending(self, rf):
        context = make_view(rf.get("/products/", {"sort": "-price", "page_size": "10"})).get_context_data()
        assert titles(context) == ["Booties", "Wetsuit", "Fins", "Mask", "Snorkel"]

    def test_sort_ascending_puts_missing_last(self, rf):
        context = make_view(rf.get("/products/", {"sort": "price", "page_size": "10"})).get_context_data()
        assert titles(context) == ["Snorkel", "Mask", "Fins", "Wetsuit", "Booties"]

    def test_unknown_sort_column_is_ignored(self, rf):
        context = make_view(rf.get("/products/", {"sort": "secret"})).get_context_data()
        assert titles(context) == ["Mask", "Fins"]

    def test_default_sort_applies_without_sort_parameter(self, rf):
        view = make_view(rf.get("/products/", {"page_size": "10"}), table_default_sort="-price")
        assert titles(view.get_context_data())[:2] == ["Booties", "Wetsuit"]

    def test_empty_sort_parameter_disables_default(self, rf):
        """Following the header link that clears the sort shows records unsorted."""
        request = rf.get("/products/", {"sort": "-title", "page_size": "10"})
        header = make_view(request, table_default_sort="title").get_context_data()["table_layout"].header[0]
        assert header.href == "/products/?sort=&page_size=10"

        request = rf.get("/products/", {"page_size": "10", "sort": ""})
        context = make_view(request, table_default_sort="title").get_context_data()
        assert titles(context) == ["Mask", "Fins", "Snorkel", "Wetsuit", "Booties"]

    def test_search(self, rf):
        context = make_view(rf.get("/products/", {"q": "OR"})).get_context_data()
        assert titles(context) == ["Snorkel"]
        assert context["table_layout"].search.value == "OR"

    def test_page_out_of_range_shows_last(self, rf):
        context = make_view(rf.get("/products/", {"page": "99"})).get_context_data()
        assert titles(context) == ["Booties"]

    def test_unsupported_page_size_uses_view_default(self, rf):
        context = make_view(rf.get("/products/", {"page_size": "7"})).get_context_data()
        assert len(titles(context)) == 2

    def test_selection_is_controlled_by_query(self, rf):
        context = make_view(rf.get("/products/", {"selected": ["1", "4"]})).get_context_data()
        layout = context["table_layout"]

        assert [row.selected for row in layout.rows] == [True, False]
        assert layout.bulk_bar.count == 2

    def test_row_ids_are_strings(self, rf):
        context = make_view(rf.get("/products/")).get_context_data()
        assert context["table"].visible_ids == ["1", "2"]

    def test_prefix(self, rf):
        request = rf.get("/products/", {"p-page": "2", "page": "3"})
        context = make_view(request, table_prefix="p").get_context_data()
        assert titles(context) == ["Snorkel", "Wetsuit"]

    def test_missing_columns(self, rf):
        view = make_view(rf.get("/products/"), table_columns=())
        with pytest.raises(ImproperlyConfigured):
            view.get_context_data()


class TestPost:
    """Tests for bulk and row action dispatch."""

    def test_bulk_action_runs_on_posted_selection(self, rf):
        """Ids arrive in display order: Fins is on this page, Mask is not."""
        handler = mock.Mock()
        request = rf.post("/products/?sort=title", {"selected": ["2", "1"], "bulk_action": "archive"})

        response = make_view(request, bulk_handler=handler).post(request)

        handler.assert_called_once_with(["2", "1"])
        assert response.status_code == 302
        assert response.url == "/products/?sort=title"

    def test_row_action_runs_on_row(self, rf):
        handler = mock.Mock()
        request = rf.post("/products/", {"row_action": "feature:2"})

        response = make_view(request, row_handler=handler).post(request)

        handler.assert_called_once_with("2")
        assert response.status_code == 302

    def test_unknown_action_is_rejected(self, rf):
        request = rf.post("/products/", {"row_action": "explode:2"})
        response = make_view(request, row_handler=mock.Mock()).post(request)
        assert response.status_code == 400

    def test_row_not_on_page_is_rejected(self, rf):
        request = rf.post("/products/", {"row_action": "feature:5"})
        response = make_view(request, row_handler=mock.Mock()).post(request)
        assert response.status_code == 400

    def test_selection_outside_selectable_ids_is_rejected(self, rf):
        handler = mock.Mock()
        request = rf.post("/products/", {"selected": ["1", "42"], "bulk_action": "archive"})
        view = make_view(request, bulk_handler=handler, get_selectable_ids=lambda: {"1", "2", "3", "4", "5"})

        response = view.post(request)

        assert response.status_code == 400
        handler.assert_not_called()

    def test_missing_action(self, rf):
        request = rf.post("/products/", {"selected": ["1"]})
        response = make_view(request).post(request)
        assert response.status_code == 400
