"""
Metric components for dashboards and monitoring

    - metric_card: headline value with unit, trend, icon, sparkline and HTMX polling
    - metric_grid: responsive grid for metric cards
    - chart_card: titled container for a chart fragment
    - time_range_selector: 1h / 6h / 24h / 7d / 30d buttons
    - status_indicator: health dot with label
    - progress_ring: circular progress
    - alert_banner: dismissible severity banner
"""

import json
import math
from collections.abc import Sequence
from dataclasses import dataclass

from lumui.domain.variants import HealthStatus, MetricColor, Severity, Size, TimeRange, TrendDirection
from lumui.framework.icons import icon as render_icon
from lumui.framework.icons import icons
from lumui.template_engine import mark_safe, render_template
from lumui.utils.formatting import round_half_up

from .charts import sparkline
from .geometry import format_number


@dataclass(frozen=True)
class MetricTrend:
    """
    Trend shown under a metric value.

    Attributes:
        direction: up, down or flat (chevron shape)
        value: Trend text, e.g. "+12%"
        positive: Whether the movement is good (green) or bad (red)
    """

    direction: TrendDirection
    value: str
    positive: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "direction", TrendDirection(self.direction))


@dataclass(frozen=True)
class BannerAction:
    label: str
    href: str


METRIC_COLOR_CLASSES = {
    MetricColor.DEFAULT: "from-[var(--brand-accent)]/20 via-[var(--brand-primary)]/20 "
    "to-[var(--brand-secondary)]/20 border-[var(--brand-primary)]/30",
    MetricColor.SUCCESS: "from-[var(--status-success)]/20 to-[var(--status-success)]/10 border-[var(--status-success)]/30",
    MetricColor.WARNING: "from-[var(--status-warning)]/20 to-[var(--status-warning)]/10 border-[var(--status-warning)]/30",
    MetricColor.DANGER: "from-[var(--status-error)]/20 to-[var(--status-error)]/10 border-[var(--status-error)]/30",
}

TREND_ICONS = {
    TrendDirection.UP: "chevronUp",
    TrendDirection.DOWN: "chevronDown",
    TrendDirection.FLAT: "minus",
}


def metric_card(
    title: str,
    value: str | float,
    unit: str | None = None,
    trend: MetricTrend | None = None,
    sparkline_data: Sequence[float] | None = None,
    icon: str | None = None,
    color: MetricColor | str = MetricColor.DEFAULT,
    loading: bool = False,
    hx_get: str | None = None,
    hx_trigger: str | None = None,
    hx_swap: str = "outerHTML",
) -> str:
    """
    Generate a metric card with optional trend and sparkline.

    Args:
        title: Metric name
        value: Headline value
        unit: Unit shown after the value
        trend: Optional MetricTrend
        sparkline_data: Optional values for an inline sparkline (30px tall)
        icon: Optional icon name shown top right
        color: default, success, warning or danger gradient
        loading: Overlay a spinner
        hx_get: URL polled by HTMX; the card replaces itself with the response
        hx_trigger: HTMX trigger (default "load, every 30s")
        hx_swap: HTMX swap strategy

    Returns:
        HTML string for the card

    Example:
        html = metric_card("Requests", "1.2k", unit="/s",
                           trend=MetricTrend("up", "+12%", positive=True),
                           sparkline_data=[3, 5, 4, 8], hx_get="/partials/metrics")
    """
    trend_class = "text-[var(--text-muted)]"
    trend_icon = None
    if trend:
        trend_class = "text-[var(--status-success)]" if trend.positive else "text-[var(--status-error)]"
        trend_icon = render_icon(TREND_ICONS[trend.direction], "w-3 h-3")

    sparkline_html = sparkline(sparkline_data, height=30) if sparkline_data else ""

    return render_template(
        "metrics/metric_card.html",
        title=title,
        value=value,
        unit=unit,
        trend=trend,
        trend_class=trend_class,
        trend_icon=trend_icon,
        icon_html=icons[icon] if icon else None,
        color_class=METRIC_COLOR_CLASSES[MetricColor(color)],
        loading=loading,
        hx_get=hx_get,
        hx_trigger=hx_trigger or "load, every 30s",
        hx_swap=hx_swap,
        sparkline_html=mark_safe(sparkline_html),
    )


def metric_grid(children: str, columns: int = 4, gap: Size | str = Size.MD) -> str:
    """Responsive grid (1 column on mobile, up to `columns` on large screens)."""
    col_classes = {
        2: "grid-cols-1 sm:grid-cols-2",
        3: "grid-cols-1 sm:grid-cols-2 lg:grid-cols-3",
        4: "grid-cols-1 sm:grid-cols-2 lg:grid-cols-4",
    }
    gap_classes = {Size.SM: "gap-2", Size.MD: "gap-4", Size.LG: "gap-6"}
    if columns not in col_classes:
        raise ValueError(f"metric_grid columns must be 2, 3 or 4, got {columns}")

    return f'<div class="grid {col_classes[columns]} {gap_classes[Size(gap)]}">{children}</div>'


def chart_card(
    title: str,
    chart: str,
    subtitle: str | None = None,
    actions: str | None = None,
    loading: bool = False,
    hx_get: str | None = None,
    hx_trigger: str | None = None,
) -> str:
    """
    Container for a chart fragment.

    With hx_get the chart container is refreshed by HTMX (trigger defaults to "load").
    """
    return render_template(
        "metrics/chart_card.html",
        title=title,
        subtitle=subtitle,
        chart=mark_safe(chart),
        actions=mark_safe(actions),
        loading=loading,
        hx_get=hx_get,
        hx_trigger=hx_trigger or "load",
    )


def time_range_selector(selected: TimeRange | str, param_name: str = "range", hx_get: str | None = None) -> str:
    """Segmented buttons for the standard time ranges; the selected one is highlighted."""
    selected = TimeRange(selected)
    options = []
    for time_range in TimeRange:
        if time_range is selected:
            classes = "bg-[var(--brand-primary)] text-white"
        else:
            classes = "text-[var(--text-muted)] hover:text-white hover:bg-[var(--surface-3)]"
        options.append(
            {
                "range": time_range.value,
                "classes": classes,
                "vals": json.dumps({param_name: time_range.value}),
            }
        )

    return render_template("metrics/time_range_selector.html", options=options, hx_get=hx_get)


HEALTH_COLORS = {
    HealthStatus.HEALTHY: "bg-[var(--status-success)]",
    HealthStatus.DEGRADED: "bg-[var(--status-warning)]",
    HealthStatus.DOWN: "bg-[var(--status-error)]",
    HealthStatus.UNKNOWN: "bg-[var(--text-subtle)]",
}


def status_indicator(status: HealthStatus | str, label: str | None = None, pulse: bool = True) -> str:
    """Health dot; healthy services get a ping animation unless pulse is False."""
    status = HealthStatus(status)
    return render_template(
        "metrics/status_indicator.html",
        color_class=HEALTH_COLORS[status],
        ping=pulse and status is HealthStatus.HEALTHY,
        label=label or status.value.capitalize(),
    )


def progress_ring(
    value: float,
    max_value: float = 100,
    size: Size | str = Size.MD,
    color: str = "var(--brand-primary)",
    label: str | None = None,
    show_value: bool = True,
) -> str:
    """
    Circular progress indicator.

    The fraction is clamped to [0, 1]; a non-positive max_value renders 0%.
    """
    size = Size(size)
    dimensions = {Size.SM: (48, 4, "text-xs"), Size.MD: (64, 6, "text-sm"), Size.LG: (96, 8, "text-lg")}
    if size not in dimensions:
        raise ValueError(f"progress_ring size must be sm, md or lg, got {size.value}")

    diameter, stroke_width, text_class = dimensions[size]
    radius = (diameter - stroke_width) / 2
    circumference = math.pi * 2 * radius
    fraction = min(max(value / max_value, 0), 1) if max_value > 0 else 0.0

    return render_template(
        "metrics/progress_ring.html",
        size=diameter,
        center=format_number(diameter / 2),
        radius=format_number(radius),
        stroke_width=stroke_width,
        color=color,
        circumference=format_number(circumference),
        offset=format_number(circumference * (1 - fraction)),
        show_value=show_value,
        text_class=text_class,
        percent=round_half_up(fraction * 100),
        label=label,
    )


BANNER_STYLES = {
    Severity.INFO: ("status-info", "info"),
    Severity.WARNING: ("status-warning", "exclamation"),
    Severity.CRITICAL: ("status-error", "exclamationCircle"),
}


def alert_banner(
    title: str,
    severity: Severity | str = Severity.INFO,
    message: str | None = None,
    action: BannerAction | None = None,
    dismissible: bool = False,
) -> str:
    """Full-width banner for incidents and notices, with an optional action link."""
    token, icon_name = BANNER_STYLES[Severity(severity)]
    style = f"bg-[var(--{token})]/10 border-[var(--{token})]/30 text-[var(--{token})]"

    return render_template(
        "metrics/alert_banner.html",
        style=style,
        icon_html=icons[icon_name],
        title=title,
        message=message,
        action=action,
        dismissible=dismissible,
        close_icon=icons["x"],
    )
