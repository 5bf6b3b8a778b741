"""Tests for the project settings module."""

import importlib


class TestBaseSettings:
    """Tests for storefront.settings.base."""

    def setup_method(self):
        self.base = importlib.import_module("storefront.settings.base")

    def test_no_database_configured(self):
        """Customers and addresses come from the customer service, not a local database."""
        assert not hasattr(self.base, "DATABASES")

    def test_sessions_use_signed_cookies(self):
        assert self.base.SESSION_ENGINE == "django.contrib.sessions.backends.signed_cookies"

    def test_json_log_formatter_available(self):
        formatter = self.base.LOGGING["formatters"]["json"]
        assert formatter["()"] == "pythonjsonlogger.jsonlogger.JsonFormatter"

    def test_customer_service_settings(self):
        assert self.base.CUSTOMER_SERVICE_URL
        assert isinstance(self.base.CUSTOMER_SERVICE_TIMEOUT, float)
