"""Storefront UI configuration."""

from django.conf import settings


def get_config():
    """Get storefront UI configuration from settings."""
    defaults = {
        # Site branding
        'SITE_NAME': 'Storefront',
        'PRIMARY_COLOR': 'primary',  # Tailwind color name

        # Data tables
        'TABLE_LOADING_ROWS': 5,
        'TABLE_EMPTY_MESSAGE': 'No data found',
        'TABLE_EMPTY_ICON': 'inbox',
        'TABLE_SEARCH_PLACEHOLDER': 'Search...',
        'TABLE_PAGE_SIZE': 10,
        'TABLE_PAGE_SIZE_OPTIONS': [10, 20, 50, 100],
        'TABLE_SORT_CYCLE': 'asc-desc-none',
    }

    user_config = getattr(settings, 'STOREFRONT_UI', {})
    return {**defaults, **user_config}


def get_setting(name, default=None):
    """Get a specific storefront UI setting."""
    config = get_config()
    return config.get(name, default)


def get_site_name():
    """Get the configured site name."""
    return get_setting('SITE_NAME', 'Storefront')


def get_table_defaults():
    """Get the defaults applied to every DataTable."""
    config = get_config()
    return {
        'loading_rows': config['TABLE_LOADING_ROWS'],
        'empty_message': config['TABLE_EMPTY_MESSAGE'],
        'empty_icon': config['TABLE_EMPTY_ICON'],
        'search_placeholder': config['TABLE_SEARCH_PLACEHOLDER'],
        'page_size': config['TABLE_PAGE_SIZE'],
        'page_size_options': tuple(config['TABLE_PAGE_SIZE_OPTIONS']),
        'sort_cycle': config['TABLE_SORT_CYCLE'],
    }
