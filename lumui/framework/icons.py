"""
Icon Set

Outline icons (24x24, stroke based) rendered as inline SVG strings.

Usage:
    from lumui.framework.icons import icon, icons

    icons["plus"]                       # default w-5 h-5
    icon("refresh", css_class="w-4 h-4 animate-spin")
"""

from collections.abc import Mapping
from types import MappingProxyType

from markupsafe import Markup

# name -> SVG path data
ICON_PATHS: Mapping[str, str] = MappingProxyType(
    {
        "plus": "M12 4v16m8-8H4",
        "check": "M5 13l4 4L19 7",
        "x": "M6 18L18 6M6 6l12 12",
        "info": "M13 16h-1v-4h-1m1-4h.01M21 12a9 9 0 11-18 0 9 9 0 0118 0z",
        "exclamation": (
            "M12 9v2m0 4h.01m-6.938 4h13.856c1.54 0 2.502-1.667 1.732-3L13.732 4c-.77-1.333-2.694-1.333-3.464 0"
            "L3.34 16c-.77 1.333.192 3 1.732 3z"
        ),
        "exclamationCircle": "M12 8v4m0 4h.01M21 12a9 9 0 11-18 0 9 9 0 0118 0z",
        "search": "M21 21l-6-6m2-5a7 7 0 11-14 0 7 7 0 0114 0z",
        "download": "M4 16v1a3 3 0 003 3h10a3 3 0 003-3v-1m-4-4l-4 4m0 0l-4-4m4 4V4",
        "externalLink": "M10 6H6a2 2 0 00-2 2v10a2 2 0 002 2h10a2 2 0 002-2v-4M14 4h6m0 0v6m0-6L10 14",
        "refresh": (
            "M4 4v5h.582m15.356 2A8.001 8.001 0 004.582 9m0 0H9m11 11v-5h-.581m0 0a8.003 8.003 0 01-15.357-2m15.357 2H15"
        ),
        "chart": (
            "M9 19v-6a2 2 0 00-2-2H5a2 2 0 00-2 2v6a2 2 0 002 2h2a2 2 0 002-2zm0 0V9a2 2 0 012-2h2a2 2 0 012 2v10"
            "m-6 0a2 2 0 002 2h2a2 2 0 002-2m0 0V5a2 2 0 012-2h2a2 2 0 012 2v14a2 2 0 01-2 2h-2a2 2 0 01-2-2z"
        ),
        "user": "M16 7a4 4 0 11-8 0 4 4 0 018 0zM12 14a7 7 0 00-7 7h14a7 7 0 00-7-7z",
        "server": (
            "M5 12h14M5 12a2 2 0 01-2-2V6a2 2 0 012-2h14a2 2 0 012 2v4a2 2 0 01-2 2M5 12a2 2 0 00-2 2v4a2 2 0 002 2"
            "h14a2 2 0 002-2v-4a2 2 0 00-2-2m-2-4h.01M17 16h.01"
        ),
        "clock": "M12 8v4l3 3m6-3a9 9 0 11-18 0 9 9 0 0118 0z",
        "chevronUp": "M5 15l7-7 7 7",
        "chevronDown": "M19 9l-7 7-7-7",
        "minus": "M5 12h14",
    }
)

DEFAULT_ICON_CLASS = "w-5 h-5"


def icon(name: str, css_class: str = DEFAULT_ICON_CLASS) -> Markup:
    """
    Render a named icon as an inline SVG.

    Args:
        name: Key of ICON_PATHS
        css_class: Classes for the <svg> element (size and color)

    Returns:
        SVG markup (safe to pass to templates)

    Raises:
        KeyError: If the icon name is unknown
    """
    path = ICON_PATHS[name]
    return Markup(
        '<svg class="{}" fill="none" stroke="currentColor" viewBox="0 0 24 24">'
        '<path stroke-linecap="round" stroke-linejoin="round" stroke-width="2" d="{}"/></svg>'
    ).format(css_class, path)


# Pre-rendered icons at the default size
icons: Mapping[str, Markup] = MappingProxyType({name: icon(name) for name in ICON_PATHS})
