"""SVG icon set used by storefront-ui components.

Outline icons on a 24x24 grid, drawn with currentColor so CSS text colors
apply.
"""

import logging

from django.utils.html import format_html
from django.utils.safestring import mark_safe

logger = logging.getLogger(__name__)

ICONS = {
    "check": '<polyline points="20 6 9 17 4 12"></polyline>',
    "chevron-down": '<polyline points="6 9 12 15 18 9"></polyline>',
    "chevron-left": '<polyline points="15 18 9 12 15 6"></polyline>',
    "chevron-right": '<polyline points="9 18 15 12 9 6"></polyline>',
    "chevron-up": '<polyline points="18 15 12 9 6 15"></polyline>',
    "chevrons-left": (
        '<polyline points="11 17 6 12 11 7"></polyline>'
        '<polyline points="18 17 13 12 18 7"></polyline>'
    ),
    "chevrons-right": (
        '<polyline points="13 17 18 12 13 7"></polyline>'
        '<polyline points="6 17 11 12 6 7"></polyline>'
    ),
    "edit": (
        '<path d="M11 4H4a2 2 0 0 0-2 2v14a2 2 0 0 0 2 2h14a2 2 0 0 0 2-2v-7"></path>'
        '<path d="M18.5 2.5a2.121 2.121 0 0 1 3 3L12 15l-4 1 1-4 9.5-9.5z"></path>'
    ),
    "inbox": (
        '<polyline points="22 12 16 12 14 15 10 15 8 12 2 12"></polyline>'
        '<path d="M5.45 5.11L2 12v6a2 2 0 0 0 2 2h16a2 2 0 0 0 2-2v-6l-3.45-6.89'
        'A2 2 0 0 0 16.76 4H7.24a2 2 0 0 0-1.79 1.11z"></path>'
    ),
    "map-pin": (
        '<path d="M21 10c0 7-9 13-9 13s-9-6-9-13a9 9 0 0 1 18 0z"></path>'
        '<circle cx="12" cy="10" r="3"></circle>'
    ),
    "minus": '<line x1="5" y1="12" x2="19" y2="12"></line>',
    "more-vertical": (
        '<circle cx="12" cy="12" r="1"></circle>'
        '<circle cx="12" cy="5" r="1"></circle>'
        '<circle cx="12" cy="19" r="1"></circle>'
    ),
    "plus": (
        '<line x1="12" y1="5" x2="12" y2="19"></line>'
        '<line x1="5" y1="12" x2="19" y2="12"></line>'
    ),
    "search": (
        '<circle cx="11" cy="11" r="8"></circle>'
        '<line x1="21" y1="21" x2="16.65" y2="16.65"></line>'
    ),
    "trash-2": (
        '<polyline points="3 6 5 6 21 6"></polyline>'
        '<path d="M19 6v14a2 2 0 0 1-2 2H7a2 2 0 0 1-2-2V6m3 0V4a2 2 0 0 1 2-2h4'
        'a2 2 0 0 1 2 2v2"></path>'
        '<line x1="10" y1="11" x2="10" y2="17"></line>'
        '<line x1="14" y1="11" x2="14" y2="17"></line>'
    ),
}


def render_icon(name, css_class="w-5 h-5"):
    """Render an icon as inline SVG. Unknown names render nothing."""
    body = ICONS.get(name)
    if body is None:
        logger.warning("Unknown icon: %s", name)
        return ""

    return format_html(
        '<svg xmlns="http://www.w3.org/2000/svg" class="{}" viewBox="0 0 24 24" fill="none" '
        'stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round" '
        'aria-hidden="true" data-icon="{}">{}</svg>',
        css_class,
        name,
        mark_safe(body),
    )
