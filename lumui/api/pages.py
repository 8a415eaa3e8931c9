"""
Demo pages composed from lumui components.

Shared by the demo FastAPI app and the static showcase generator.
"""

from lumui.dashboards.components import (
    TableColumn,
    activity_list,
    area_chart,
    badge,
    button,
    chart_card,
    container,
    donut_chart,
    grid,
    head,
    metric_card,
    page,
    page_header,
    section,
    stat_card,
    status_indicator,
    table,
)
from lumui.framework.theme import Theme

from . import sample_data


def render_metrics_grid() -> str:
    """Metric cards for the dashboard; also served as the HTMX polling partial."""
    cards = []
    for key, (title, value, trend, icon_name, color) in sample_data.METRICS.items():
        cards.append(
            metric_card(
                title,
                value,
                trend=trend,
                icon=icon_name,
                color=color,
                sparkline_data=sample_data.USERS_SPARKLINE if key == "users" else None,
            )
        )
    return f'<div id="metrics" hx-get="/partials/metrics" hx-trigger="every 30s" hx-swap="outerHTML">{grid("".join(cards), 4)}</div>'


def _plan_badge(value, row):
    return badge(value, color="brand")


def _status_badge(value, row):
    return badge(value, color="success" if value == "Active" else "warning")


def render_dashboard_body() -> str:
    header = page_header(
        "Dashboard",
        subtitle="Welcome back! Here's what's happening.",
        actions=button("New Report", variant="primary", icon="plus"),
    )
    status_row = (
        '<div class="flex items-center gap-6 mb-6">'
        f'{status_indicator("healthy", label="All systems operational")}'
        f'{badge("v0.1.0", color="brand")}'
        "</div>"
    )

    charts = (
        '<div class="grid grid-cols-1 lg:grid-cols-2 gap-6 mt-6">'
        + chart_card(
            "Weekly Traffic",
            area_chart(sample_data.WEEKLY_TRAFFIC, height=200),
            subtitle="Page views over the last 7 days",
        )
        + chart_card(
            "Traffic Sources",
            donut_chart(sample_data.TRAFFIC_SOURCES, center_text="100%", center_subtext="Total"),
            subtitle="By device type",
        )
        + "</div>"
    )

    quick_stats = (
        stat_card("Server Status", "Healthy", status="online")
        + '<div class="mt-4">'
        + stat_card("API Latency", "45ms", subtext="Last 5 minutes")
        + "</div>"
    )
    columns = (
        '<div class="grid grid-cols-1 lg:grid-cols-3 gap-6 mt-6">'
        f'<div class="lg:col-span-2">{section("Recent Activity", activity_list(sample_data.RECENT_ACTIVITY), "Latest updates from your platform")}</div>'
        f'<div>{section("Quick Stats", quick_stats, "System health")}</div>'
        "</div>"
    )

    users = section(
        "Recent Users",
        table(
            [
                TableColumn("name", "Name"),
                TableColumn("email", "Email"),
                TableColumn("status", "Status", render=_status_badge),
                TableColumn("plan", "Plan", render=_plan_badge),
            ],
            sample_data.RECENT_USERS,
        ),
        "Recently registered users",
    )

    return container(header + status_row + render_metrics_grid() + charts + columns + users, size="2xl")


def render_dashboard(theme: Theme | None = None) -> str:
    """Full dashboard document."""
    return page(head("Dashboard - lumui", theme=theme), render_dashboard_body())
