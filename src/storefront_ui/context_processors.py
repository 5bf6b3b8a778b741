"""Context processors for storefront-ui."""

from . import conf


def storefront_ui(request):
    """Add storefront UI configuration to template context."""
    config = conf.get_config()

    return {
        'storefront_ui': {
            # Site branding
            'site_name': config.get('SITE_NAME'),
            'primary_color': config.get('PRIMARY_COLOR'),

            # Table defaults, for templates that render their own controls
            'table': conf.get_table_defaults(),
        }
    }
