"""Django app configuration for storefront commerce."""

from django.apps import AppConfig


class CommerceConfig(AppConfig):
    """App configuration for customer-facing commerce routes."""

    name = "storefront.commerce"
    verbose_name = "Storefront Commerce"
    default_auto_field = "django.db.models.BigAutoField"
