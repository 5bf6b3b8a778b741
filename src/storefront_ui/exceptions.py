"""Exceptions raised by storefront-ui components."""

from django.core.exceptions import ImproperlyConfigured


class TableConfigurationError(ImproperlyConfigured):
    """A DataTable was configured in a way that cannot render correctly.

    Raised for duplicate column ids, duplicate action keys, missing row
    identity extractors, and identity collisions among visible records.
    """

    pass
