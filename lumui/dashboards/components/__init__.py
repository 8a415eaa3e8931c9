"""
Dashboard Components - Reusable HTML building blocks

This package provides pure functions returning HTML fragments:
    - geometry: coordinate mapping and donut arc math for the charts
    - charts: line, area, bar, donut, gauge, sparkline, progress bar, uPlot time series
    - tables: data tables, status badges/dots, ranked and activity lists
    - cards: buttons, cards, alerts, badges, inputs, spinners, avatars, dividers
    - metrics: metric cards, chart cards, time range selector, progress ring, banners
    - layouts: head, page, page header, grid, section, flex, container, stack

Usage:
    from lumui.dashboards.components import line_chart, section

    html = section("Traffic", line_chart([("Mon", 120), ("Tue", 180)]))
"""

from .cards import alert, avatar, badge, button, card, divider, spinner, stat_card, text_input
from .charts import (
    DONUT_PALETTE,
    NO_DATA_HTML,
    TIME_SERIES_PALETTE,
    area_chart,
    bar_chart,
    chart_scripts,
    donut_chart,
    gauge_chart,
    gauge_fill_color,
    line_chart,
    metric_card_with_trend,
    progress_bar,
    sparkline,
    time_series_chart,
)
from .layouts import card_wrapper, container, flex, grid, head, page, page_header, section, stack
from .metrics import (
    BannerAction,
    MetricTrend,
    alert_banner,
    chart_card,
    metric_card,
    metric_grid,
    progress_ring,
    status_indicator,
    time_range_selector,
)
from .tables import TableColumn, activity_list, ranked_list, status_badge, status_dot, table

__all__ = [
    # Charts
    "DONUT_PALETTE",
    "NO_DATA_HTML",
    "TIME_SERIES_PALETTE",
    "area_chart",
    "bar_chart",
    "chart_scripts",
    "donut_chart",
    "gauge_chart",
    "gauge_fill_color",
    "line_chart",
    "metric_card_with_trend",
    "progress_bar",
    "sparkline",
    "time_series_chart",
    # Core components
    "alert",
    "avatar",
    "badge",
    "button",
    "card",
    "divider",
    "spinner",
    "stat_card",
    "text_input",
    # Tables
    "TableColumn",
    "activity_list",
    "ranked_list",
    "status_badge",
    "status_dot",
    "table",
    # Metrics
    "BannerAction",
    "MetricTrend",
    "alert_banner",
    "chart_card",
    "metric_card",
    "metric_grid",
    "progress_ring",
    "status_indicator",
    "time_range_selector",
    # Layouts
    "card_wrapper",
    "container",
    "flex",
    "grid",
    "head",
    "page",
    "page_header",
    "section",
    "stack",
]
