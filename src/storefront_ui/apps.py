"""Storefront UI app configuration."""

from django.apps import AppConfig


class StorefrontUIConfig(AppConfig):
    """Configuration for storefront-ui."""

    name = "storefront_ui"
    verbose_name = "Storefront UI"
    default_auto_field = "django.db.models.BigAutoField"
