"""Tests for storefront_ui template tags and components."""

import pytest
from django.template import Context, Template, TemplateSyntaxError
from django.template.loader import render_to_string

from storefront_ui.tables import Column, DataTable


class TestIconTag:
    """Tests for the icon template tag."""

    def test_renders_svg(self):
        template = Template("{% load storefront_ui_tags %}{% icon 'check' 'w-3 h-3' %}")
        rendered = template.render(Context({}))

        assert rendered.startswith("<svg")
        assert 'data-icon="check"' in rendered
        assert 'class="w-3 h-3"' in rendered
        assert 'aria-hidden="true"' in rendered

    def test_default_class(self):
        template = Template("{% load storefront_ui_tags %}{% icon 'inbox' %}")
        assert 'class="w-5 h-5"' in template.render(Context({}))

    def test_unknown_icon_renders_nothing(self):
        template = Template("{% load storefront_ui_tags %}{% icon 'no-such-icon' %}")
        assert template.render(Context({})) == ""


class TestButtonComponent:
    """Tests for the button component template."""

    def test_button(self):
        rendered = render_to_string(
            "storefront_ui/components/button.html",
            {"text": "Delete", "variant": "destructive", "type": "submit", "name": "bulk_action", "value": "delete"},
        )
        assert "<button" in rendered
        assert 'type="submit"' in rendered
        assert 'name="bulk_action" value="delete"' in rendered
        assert 'data-variant="destructive"' in rendered
        assert "bg-red-600" in rendered

    def test_link_button(self):
        rendered = render_to_string(
            "storefront_ui/components/button.html",
            {"text": "Shop", "href": "/shop/"},
        )
        assert '<a href="/shop/"' in rendered
        assert 'data-variant="outline"' in rendered

    def test_disabled(self):
        rendered = render_to_string("storefront_ui/components/button.html", {"text": "Go", "disabled": True})
        assert "<button type=\"button\" disabled" in rendered


class TestCheckboxComponent:
    """Tests for the checkbox component template."""

    def test_native_checkbox(self):
        rendered = render_to_string(
            "storefront_ui/components/checkbox.html",
            {"name": "selected", "value": "7", "checked": True, "aria_label": "Select row 1"},
        )
        assert 'type="checkbox"' in rendered
        assert 'name="selected" value="7"' in rendered
        assert "value=\"7\" checked" in rendered
        assert 'aria-label="Select row 1"' in rendered

    def test_indeterminate_link_checkbox(self):
        rendered = render_to_string(
            "storefront_ui/components/checkbox.html",
            {"href": "/t/?selected=1", "indeterminate": True, "aria_label": "Select all rows"},
        )
        assert 'role="checkbox"' in rendered
        assert 'aria-checked="mixed"' in rendered
        assert 'data-icon="minus"' in rendered

    def test_checked_link_carries_hidden_input(self):
        """Selections made through links are still submitted with the form."""
        rendered = render_to_string(
            "storefront_ui/components/checkbox.html",
            {"href": "/t/", "name": "selected", "value": "7", "checked": True},
        )
        assert 'aria-checked="true"' in rendered
        assert '<input type="hidden" name="selected" value="7">' in rendered


class TestDataTableTag:
    """Tests for the data_table inclusion tag."""

    def test_renders_table(self):
        table = DataTable([{"id": 1, "name": "Ada"}], [Column("name", "Name", accessor="name")])
        template = Template("{% load storefront_ui_tags %}{% data_table table %}")
        rendered = template.render(Context({"table": table}))

        assert 'data-table-state="rows"' in rendered
        assert "Ada" in rendered

    def test_rejects_other_values(self):
        template = Template("{% load storefront_ui_tags %}{% data_table table %}")
        with pytest.raises(TemplateSyntaxError):
            template.render(Context({"table": ["not", "a", "table"]}))
