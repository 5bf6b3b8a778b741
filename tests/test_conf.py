"""Tests for storefront_ui configuration."""

from storefront_ui import conf
from storefront_ui.context_processors import storefront_ui
from storefront_ui.tables import Column, DataTable


class TestConfig:
    """Tests for settings merged over defaults."""

    def test_defaults(self):
        defaults = conf.get_table_defaults()
        assert defaults["loading_rows"] == 5
        assert defaults["empty_message"] == "No data found"
        assert defaults["page_size_options"] == (10, 20, 50, 100)
        assert defaults["sort_cycle"] == "asc-desc-none"

    def test_user_settings_override(self, settings):
        settings.STOREFRONT_UI = {"SITE_NAME": "Reef Shop", "TABLE_EMPTY_MESSAGE": "Nothing yet"}

        assert conf.get_site_name() == "Reef Shop"
        assert conf.get_setting("TABLE_EMPTY_MESSAGE") == "Nothing yet"
        assert conf.get_setting("TABLE_LOADING_ROWS") == 5

    def test_tables_pick_up_settings(self, settings):
        settings.STOREFRONT_UI = {"TABLE_EMPTY_ICON": "map-pin", "TABLE_SORT_CYCLE": "asc-desc"}
        table = DataTable([], [Column("a", "A", sortable=True)])

        assert table.build().empty.icon == "map-pin"
        table.sort_by("a")
        table.sort_by("a")
        table.sort_by("a")
        assert table.sort_state.ordering == "a"

    def test_context_processor(self, rf, settings):
        settings.STOREFRONT_UI = {"SITE_NAME": "Reef Shop"}
        context = storefront_ui(rf.get("/"))

        assert context["storefront_ui"]["site_name"] == "Reef Shop"
        assert context["storefront_ui"]["table"]["page_size"] == 10
