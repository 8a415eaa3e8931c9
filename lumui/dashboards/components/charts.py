"""
Chart components for dashboards

SVG-based chart renderers. Every function is pure: it takes a series plus
options and returns an HTML fragment string.

    - line_chart / area_chart: padded time series with baseline and captions
    - bar_chart: percentage-height flex bars
    - sparkline: minimal inline line
    - donut_chart: stroke-dasharray segments with legend
    - gauge_chart: half-circle gauge with threshold colors
    - progress_bar, metric_card_with_trend
    - time_series_chart + chart_scripts: client-side uPlot chart

Empty series render NO_DATA_HTML instead of raising.
"""

import json
import math
from collections.abc import Iterable, Sequence
from typing import Any

from lumui.core.logging_config import get_logger
from lumui.domain.charts import TimeSeries, TimeSeriesOptions, as_data_points, as_donut_segments
from lumui.domain.variants import GaugeColor, Presence, ProgressColor, Size, Trend
from lumui.framework.icons import icon
from lumui.framework.javascript import get_chart_scripts
from lumui.security import safe_attr, safe_html
from lumui.utils.formatting import round_half_up

from .geometry import (
    area_path_data,
    circle_circumference,
    donut_arcs,
    format_number,
    next_element_id,
    path_data,
    plot_points,
    points_attribute,
    sparkline_points,
    unique_chart_id,
)

logger = get_logger(__name__)

NO_DATA_HTML = '<div class="text-[var(--text-subtle)] text-sm">No data available</div>'

DEFAULT_CHART_COLOR = "var(--brand-primary)"
BASELINE_STROKE = "rgba(255,255,255,0.1)"

# Fallback colors for donut segments without an explicit color
DONUT_PALETTE = (
    "var(--brand-primary)",
    "#06b6d4",  # cyan
    "#10b981",  # emerald
    "#f59e0b",  # amber
    "#8b5cf6",  # violet
    "#ec4899",  # pink
)

TIME_SERIES_PALETTE = (
    "var(--brand-primary)",
    "var(--brand-accent)",
    "var(--brand-secondary)",
    "#10B981",
    "#3B82F6",
)

STATUS_FILLS = {
    "default": "var(--brand-primary)",
    "success": "var(--status-success)",
    "warning": "var(--status-warning)",
    "error": "var(--status-error)",
}

# Gauge thresholds (percent): below the first is success, below the second warning, else error
GAUGE_WARNING_THRESHOLD = 60
GAUGE_ERROR_THRESHOLD = 80


def _no_data(chart: str) -> str:
    logger.debug("Empty series, rendering placeholder", extra={"chart": chart})
    return NO_DATA_HTML


def _caption_row(first: str, last: str) -> str:
    return f"""<div class="flex justify-between text-xs text-[var(--text-subtle)] mt-1 px-2">
      <span>{safe_html(first)}</span>
      <span>{safe_html(last)}</span>
    </div>"""


def _baseline(width: float, height: float, padding: float) -> str:
    y = format_number(height - padding)
    return (
        f'<line x1="{format_number(padding)}" y1="{y}" x2="{format_number(width - padding)}" y2="{y}" '
        f'stroke="{BASELINE_STROKE}" stroke-width="1" />'
    )


def line_chart(
    data: Iterable[Any],
    width: int = 400,
    height: int = 120,
    color: str = DEFAULT_CHART_COLOR,
    show_dots: bool = True,
    show_labels: bool = True,
    padding: int = 20,
) -> str:
    """
    Generate an SVG line chart.

    Args:
        data: Series of DataPoint (or {"label", "value"} mappings / (label, value) pairs)
        width: viewBox width
        height: viewBox height
        color: Stroke and marker color
        show_dots: Draw a marker circle on every point
        show_labels: Show the first and last labels under the chart
        padding: Inner padding on every side

    Returns:
        HTML string with inline SVG, or NO_DATA_HTML for an empty series

    Example:
        html = line_chart([DataPoint("Mon", 120), DataPoint("Tue", 180)])
    """
    points_data = as_data_points(data)
    if not points_data:
        return _no_data("line")

    points = plot_points([p.value for p in points_data], width, height, padding)
    stroke = safe_attr(color)

    dots = ""
    if show_dots:
        dots = "".join(
            f'<circle cx="{format_number(x)}" cy="{format_number(y)}" r="3" fill="{stroke}" />' for x, y in points
        )

    captions = _caption_row(points_data[0].label, points_data[-1].label) if show_labels else ""

    return f"""
    <svg viewBox="0 0 {width} {height}" class="w-full h-32">
      <polyline fill="none" stroke="{stroke}" stroke-width="2" points="{points_attribute(points)}" />
      {dots}
      {_baseline(width, height, padding)}
    </svg>
    {captions}
  """


def area_chart(
    data: Iterable[Any],
    width: int = 400,
    height: int = 120,
    color: str = DEFAULT_CHART_COLOR,
    show_labels: bool = True,
    fill_opacity: float = 0.2,
    padding: int = 20,
) -> str:
    """
    Generate an SVG area chart with a gradient fill fading to transparent.

    The gradient id is unique per call so several area charts can share a page.

    Args:
        data: Series of DataPoint (or mappings / pairs)
        width: viewBox width
        height: viewBox height (also the rendered height in px)
        color: Stroke and gradient color
        show_labels: Show the first and last labels under the chart
        fill_opacity: Opacity at the top of the gradient
        padding: Inner padding on every side

    Returns:
        HTML string with inline SVG, or NO_DATA_HTML for an empty series
    """
    points_data = as_data_points(data)
    if not points_data:
        return _no_data("area")

    points = plot_points([p.value for p in points_data], width, height, padding)
    gradient_id = f"areaGradient-{next_element_id()}"
    stroke = safe_attr(color)

    line_path = path_data(points)
    area_path = area_path_data(points, height, padding)

    captions = _caption_row(points_data[0].label, points_data[-1].label) if show_labels else ""

    return f"""
    <svg viewBox="0 0 {width} {height}" class="w-full" style="height: {height}px">
      <defs>
        <linearGradient id="{gradient_id}" x1="0" y1="0" x2="0" y2="1">
          <stop offset="0%" stop-color="{stroke}" stop-opacity="{format_number(fill_opacity)}" />
          <stop offset="100%" stop-color="{stroke}" stop-opacity="0" />
        </linearGradient>
      </defs>
      <path d="{area_path}" fill="url(#{gradient_id})" />
      <path d="{line_path}" fill="none" stroke="{stroke}" stroke-width="2" />
      {_baseline(width, height, padding)}
    </svg>
    {captions}
  """


def bar_heights(values: Sequence[float]) -> list[float]:
    """
    Bar heights as a percentage of the largest value (floored at 1).

    Every bar is at least 2% tall so zero values remain visible.
    """
    if not values:
        return []
    max_val = max(max(values), 1)
    return [max(value / max_val * 100, 2) for value in values]


def bar_chart(
    data: Iterable[Any],
    height: int = 80,
    color: str = DEFAULT_CHART_COLOR,
    labels: Sequence[str] | None = None,
) -> str:
    """
    Generate a bar chart from flex items sized by percentage.

    Args:
        data: Series of DataPoint (or mappings / pairs)
        height: Container height in px
        color: Bar color (used in Tailwind arbitrary-value classes)
        labels: Optional caption row; rendered as given, not aligned to the bars

    Returns:
        HTML string, or NO_DATA_HTML for an empty series

    Example:
        html = bar_chart([("Mon", 3), ("Tue", 0)], labels=["Mon", "Tue"])
    """
    points_data = as_data_points(data)
    if not points_data:
        return _no_data("bar")

    bar_color = safe_attr(color)
    heights = bar_heights([p.value for p in points_data])

    bars = "".join(
        f'<div class="flex-1 bg-[{bar_color}]/30 hover:bg-[{bar_color}]/50 transition-colors rounded-t" '
        f'style="height: {format_number(h)}%" title="{safe_attr(point.label)} - {format_number(point.value)}"></div>'
        for point, h in zip(points_data, heights)
    )

    label_html = ""
    if labels:
        spans = "".join(f"<span>{safe_html(label)}</span>" for label in labels)
        label_html = f"""
    <div class="flex justify-between text-xs text-[var(--text-subtle)] mt-1">
      {spans}
    </div>
  """

    return f"""
    <div class="flex items-end gap-0.5" style="height: {height}px">
      {bars}
    </div>
    {label_html}
  """


def sparkline(values: Sequence[float], width: int = 80, height: int = 24, color: str = DEFAULT_CHART_COLOR) -> str:
    """
    Generate an inline SVG sparkline.

    Args:
        values: Numeric values to plot
        width: SVG width in pixels
        height: SVG height in pixels
        color: Line color

    Returns:
        HTML string with inline SVG; empty string for fewer than 2 values

    Example:
        svg = sparkline([10, 15, 12, 18, 20], width=150, height=40)
    """
    points = sparkline_points(list(values), width, height)
    if not points:
        return ""

    return f"""
    <svg viewBox="0 0 {width} {height}" class="inline-block">
      <polyline fill="none" stroke="{safe_attr(color)}" stroke-width="1.5" points="{points_attribute(points)}" />
    </svg>
  """


def progress_bar(
    value: float,
    max_value: float = 100,
    color: ProgressColor | str = ProgressColor.DEFAULT,
    show_label: bool = False,
    size: Size | str = Size.SM,
) -> str:
    """
    Generate a horizontal progress bar.

    Args:
        value: Current value
        max_value: Value that fills the bar
        color: default, success, warning or error
        show_label: Show the rounded percentage under the bar
        size: sm or md

    Returns:
        HTML string for the progress bar
    """
    color = ProgressColor(color)
    size = Size(size)
    heights = {Size.SM: "h-1.5", Size.MD: "h-2.5"}
    if size not in heights:
        raise ValueError(f"progress_bar size must be sm or md, got {size.value}")

    percentage = _clamped_percentage(value, max_value)
    height_class = heights[size]
    fill = f"bg-[{STATUS_FILLS[color.value]}]"

    label = (
        f'<span class="text-xs text-[var(--text-muted)] mt-1">{round_half_up(percentage)}%</span>'
        if show_label
        else ""
    )

    return f"""
    <div class="w-full">
      <div class="w-full bg-[var(--surface-3)] rounded-full {height_class}">
        <div class="{fill} {height_class} rounded-full transition-all duration-300" style="width: {format_number(percentage)}%"></div>
      </div>
      {label}
    </div>
  """


def donut_chart(
    data: Iterable[Any],
    size: int = 120,
    stroke_width: int = 20,
    show_legend: bool = True,
    center_text: str | None = None,
    center_subtext: str | None = None,
) -> str:
    """
    Generate an SVG donut chart.

    Segments are circles drawn with stroke-dasharray "<arc> <circumference>"
    and a negative dashoffset equal to the arcs before them, rotated -90deg
    so the first segment starts at 12 o'clock.

    Legend percentages are rounded independently and may not sum to exactly 100.

    Args:
        data: DonutSegment values (or mappings with label, value and optional color)
        size: Width and height in px
        stroke_width: Ring thickness
        show_legend: Render a legend with percentages
        center_text: Large text in the hole
        center_subtext: Small text under center_text

    Returns:
        HTML string, or NO_DATA_HTML when empty or the total is 0
    """
    segments = as_donut_segments(data)
    if not segments:
        return _no_data("donut")

    total = sum(segment.value for segment in segments)
    if total == 0:
        return _no_data("donut")

    radius = (size - stroke_width) / 2
    circumference = circle_circumference(radius)
    center = format_number(size / 2)
    r = format_number(radius)
    full = format_number(circumference)

    arcs = donut_arcs([segment.value for segment in segments], circumference)
    colors = [segment.color or DONUT_PALETTE[i % len(DONUT_PALETTE)] for i, segment in enumerate(segments)]

    circles = "".join(
        f"""<circle
      cx="{center}" cy="{center}" r="{r}"
      fill="none" stroke="{safe_attr(color)}" stroke-width="{stroke_width}"
      stroke-dasharray="{format_number(arc.length)} {full}"
      stroke-dashoffset="{format_number(-arc.offset)}"
      transform="rotate(-90 {center} {center})"
      class="transition-all duration-300"
    />"""
        for arc, color in zip(arcs, colors)
    )

    center_html = ""
    if center_text:
        sub = ""
        if center_subtext:
            sub = (
                f'<text x="{center}" y="{format_number(size / 2 + 14)}" text-anchor="middle" '
                f'class="fill-[var(--text-subtle)] text-xs">{safe_html(center_subtext)}</text>'
            )
        center_html = (
            f'<text x="{center}" y="{center}" text-anchor="middle" dominant-baseline="central" '
            f'class="fill-white text-lg font-bold">{safe_html(center_text)}</text>{sub}'
        )

    legend = ""
    if show_legend:
        entries = "".join(
            f"""<span class="flex items-center gap-1 text-xs text-[var(--text-muted)]">
            <span class="w-2 h-2 rounded-full" style="background: {safe_attr(color)}"></span>
            {safe_html(segment.label)} ({round_half_up(arc.percentage * 100)}%)
          </span>"""
            for segment, arc, color in zip(segments, arcs, colors)
        )
        legend = f'<div class="flex flex-wrap gap-2 mt-2 justify-center">{entries}</div>'

    return f"""
    <div class="flex flex-col items-center">
      <svg viewBox="0 0 {size} {size}" width="{size}" height="{size}">
        <circle cx="{center}" cy="{center}" r="{r}" fill="none" stroke="var(--surface-3)" stroke-width="{stroke_width}" />
        {circles}
        {center_html}
      </svg>
      {legend}
    </div>
  """


def _clamped_percentage(value: float, max_value: float) -> float:
    if max_value <= 0:
        logger.warning("Non-positive maximum, treating as 0%", extra={"value": value, "max_value": max_value})
        return 0.0
    return min(max(value / max_value * 100, 0), 100)


def gauge_fill_color(percentage: float, color: GaugeColor | str = GaugeColor.AUTO) -> str:
    """
    Resolve the gauge stroke color.

    In AUTO mode high values are treated as bad: below 60% is success,
    below 80% warning, anything else error. Explicit colors bypass the policy.
    """
    color = GaugeColor(color)
    if color is GaugeColor.AUTO:
        if percentage < GAUGE_WARNING_THRESHOLD:
            return STATUS_FILLS["success"]
        if percentage < GAUGE_ERROR_THRESHOLD:
            return STATUS_FILLS["warning"]
        return STATUS_FILLS["error"]
    return STATUS_FILLS[color.value]


def gauge_chart(
    value: float,
    max_value: float = 100,
    size: int = 100,
    label: str | None = None,
    color: GaugeColor | str = GaugeColor.AUTO,
) -> str:
    """
    Generate a half-circle gauge.

    Args:
        value: Current value
        max_value: Value at a full gauge; non-positive values render 0%
        size: Width in px (height is size / 2 + 10)
        label: Caption under the gauge
        color: auto (threshold policy, high is bad), default, success, warning or error

    Returns:
        HTML string with inline SVG
    """
    percentage = _clamped_percentage(value, max_value)
    fill_color = gauge_fill_color(percentage, color)

    radius = (size - 12) / 2
    circumference = math.pi * radius
    dash_offset = circumference - (percentage / 100) * circumference
    half = size / 2
    arc = (
        f"M 6 {format_number(half)} A {format_number(radius)} {format_number(radius)} 0 0 1 "
        f"{size - 6} {format_number(half)}"
    )
    view_height = format_number(half + 10)

    caption = f'<span class="text-xs text-[var(--text-subtle)] -mt-1">{safe_html(label)}</span>' if label else ""

    return f"""
    <div class="flex flex-col items-center">
      <svg viewBox="0 0 {size} {view_height}" width="{size}" height="{view_height}">
        <path
          d="{arc}"
          fill="none" stroke="var(--surface-3)" stroke-width="8" stroke-linecap="round"
        />
        <path
          d="{arc}"
          fill="none" stroke="{fill_color}" stroke-width="8" stroke-linecap="round"
          stroke-dasharray="{format_number(circumference)}" stroke-dashoffset="{format_number(dash_offset)}"
          class="transition-all duration-500"
        />
        <text x="{format_number(half)}" y="{format_number(half - 5)}" text-anchor="middle" class="fill-white text-lg font-bold">{round_half_up(percentage)}%</text>
      </svg>
      {caption}
    </div>
  """


def metric_card_with_trend(
    label: str,
    value: str,
    trend: Trend | str = Trend.STABLE,
    trend_value: str | None = None,
    status: Presence | str = Presence.ONLINE,
) -> str:
    """
    Compact metric tile with a status dot and an optional trend.

    An upward trend is colored as an error and a downward trend as success
    (suited to error counts and latencies).
    """
    trend = Trend(trend)
    status = Presence(status)

    status_colors = {
        Presence.ONLINE: "bg-[var(--status-success)]",
        Presence.WARNING: "bg-[var(--status-warning)]",
        Presence.OFFLINE: "bg-[var(--status-error)]",
    }
    trend_styles = {
        Trend.UP: ("chevronUp", "text-[var(--status-error)]"),
        Trend.DOWN: ("chevronDown", "text-[var(--status-success)]"),
        Trend.STABLE: ("minus", "text-[var(--text-muted)]"),
    }

    trend_html = ""
    if trend_value:
        icon_name, text_class = trend_styles[trend]
        trend_html = f"""<span class="flex items-center gap-1 text-xs {text_class}">
            {icon(icon_name, f"w-4 h-4 {text_class}")}{safe_html(trend_value)}
          </span>"""

    return f"""
    <div class="p-4 rounded-xl bg-[var(--surface-2)] border border-[var(--border-default)]">
      <div class="flex items-center justify-between mb-2">
        <span class="text-[var(--text-subtle)] text-sm">{safe_html(label)}</span>
        <span class="w-2 h-2 rounded-full {status_colors[status]}"></span>
      </div>
      <div class="flex items-end gap-2">
        <span class="text-2xl font-bold text-white">{safe_html(value)}</span>
        {trend_html}
      </div>
    </div>
  """


def chart_scripts() -> str:
    """Include in the page head to load uPlot for time_series_chart()."""
    return get_chart_scripts()


def _series_color(series: TimeSeries, index: int) -> str:
    return series.color or TIME_SERIES_PALETTE[index % len(TIME_SERIES_PALETTE)]


def time_series_chart(series: Sequence[TimeSeries], options: TimeSeriesOptions | None = None) -> str:
    """
    High-performance time series chart rendered client-side by uPlot.

    Emits an Alpine.js x-data/x-init wrapper carrying the data as JSON
    ([timestamps, *values], timestamps taken from the first series).
    Requires chart_scripts() in the page head.

    Args:
        series: One or more TimeSeries sharing the first series' timestamps
        options: TimeSeriesOptions (title, height, width, legend, grid, theme)

    Returns:
        HTML string, or NO_DATA_HTML when there is nothing to plot
    """
    options = options or TimeSeriesOptions()
    if not series or not series[0].data:
        return _no_data("time_series")

    chart_id = unique_chart_id()
    timestamps = [point.timestamp for point in series[0].data]
    values = [[point.value for point in s.data] for s in series]
    payload = json.dumps([timestamps, *values])

    series_config = []
    for i, s in enumerate(series):
        color = _series_color(s, i)
        entry = {"label": s.name, "stroke": color, "width": 2}
        # Hex colors get a translucent fill ('20' alpha suffix); CSS variables cannot be suffixed
        if color.startswith("#") and len(color) == 7:
            entry["fill"] = color + "20"
        series_config.append(json.dumps(entry))

    if options.show_grid:
        grid_stroke = "rgba(255,255,255,0.05)" if options.theme == "dark" else "rgba(0,0,0,0.05)"
    else:
        grid_stroke = "transparent"

    joined_series = ",\n      ".join(series_config)
    init_script = f"""$nextTick(() => {{
  const data = {payload};
  const opts = {{
    width: $el.querySelector('.chart-container').clientWidth,
    height: {options.height},
    series: [
      {{}},
      {joined_series}
    ],
    scales: {{ x: {{ time: true }} }},
    axes: [
      {{ stroke: 'var(--text-subtle)', grid: {{ stroke: '{grid_stroke}' }} }},
      {{ stroke: 'var(--text-subtle)', grid: {{ stroke: '{grid_stroke}' }} }}
    ],
    cursor: {{ sync: {{ key: 'lum-sync' }} }}
  }};
  chart = new uPlot(opts, data, $el.querySelector('.chart-container'));
  new ResizeObserver(() => chart.setSize({{ width: $el.querySelector('.chart-container').clientWidth, height: {options.height} }})).observe($el);
}})"""

    title = (
        f'<h4 class="text-sm font-medium text-[var(--text-muted)] mb-2">{safe_html(options.title)}</h4>'
        if options.title
        else ""
    )

    legend = ""
    if options.show_legend:
        items = " ".join(
            f'<span class="inline-flex items-center gap-1 text-xs text-[var(--text-muted)]">'
            f'<span class="w-2 h-2 rounded-full" style="background:{safe_attr(_series_color(s, i))}"></span>'
            f"{safe_html(s.name)}</span>"
            for i, s in enumerate(series)
        )
        legend = f'<div class="flex gap-3 mt-2">{items}</div>'

    logger.debug("Rendered time series chart", extra={"chart_id": chart_id, "series": len(series)})

    return f"""
<div x-data="{{ chart: null }}" x-init="{safe_attr(init_script)}" id="{chart_id}" class="w-full">
  {title}
  <div class="chart-container" style="width:{safe_attr(options.width)};height:{options.height}px"></div>
  {legend}
</div>"""
