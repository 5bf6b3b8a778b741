"""Template tags and filters for storefront-ui."""

from django import template

from ..icons import render_icon
from ..tables.layout import TableLayout
from ..tables.table import TEMPLATE_NAME, DataTable

register = template.Library()


@register.simple_tag
def icon(name, css_class="w-5 h-5"):
    """Render an inline SVG icon.

    Usage: {% icon 'chevron-down' 'w-4 h-4' %}
    """
    return render_icon(name, css_class)


@register.inclusion_tag(TEMPLATE_NAME, takes_context=True)
def data_table(context, table, link=None):
    """Render a DataTable, or a layout already built from one.

    Usage: {% data_table table %} or {% data_table table table_query %}
    """
    if isinstance(table, DataTable):
        table = table.build(link=link)
    elif not isinstance(table, TableLayout):
        raise template.TemplateSyntaxError(
            f"data_table expects a DataTable or TableLayout, got {type(table).__name__}"
        )
    return {
        "table": table,
        "csrf_token": context.get("csrf_token"),
        "request": context.get("request"),
    }

