"""
lumui - server-side UI components

Pure functions returning HTML fragments for dashboards: SVG charts, cards,
tables, metric widgets and page layouts, styled by a generated theme of CSS
variables and a Tailwind configuration.

Usage:
    from lumui import create_theme, head, line_chart, page, section

    theme = create_theme({"brand": {"primary": "#2563EB"}})
    html = page(head("Traffic", theme=theme), section("Weekly", line_chart([("Mon", 3), ("Tue", 5)])))
"""

VERSION = "0.1.0"

from .dashboards.components import *  # noqa: E402,F401,F403
from .dashboards.components import __all__ as _components_all  # noqa: E402
from .domain import DataPoint, DonutSegment, TimeSeries, TimeSeriesOptions, TimeSeriesPoint  # noqa: E402
from .framework import create_theme, default_theme, get_page_framework, get_token_docs, icon, icons  # noqa: E402

__all__ = [
    "VERSION",
    "DataPoint",
    "DonutSegment",
    "TimeSeries",
    "TimeSeriesOptions",
    "TimeSeriesPoint",
    "create_theme",
    "default_theme",
    "get_page_framework",
    "get_token_docs",
    "icon",
    "icons",
    *_components_all,
]
