"""
Domain Models - Value objects and closed variant sets

This package contains:
    - charts: DataPoint, DonutSegment, TimeSeries, TimeSeriesOptions
    - variants: enums for component options (ButtonVariant, GaugeColor, ...)
    - status: ordered status classification rules
    - lists: RankedItem, ActivityItem

Usage:
    from lumui.domain import DataPoint, GaugeColor

    series = [DataPoint("Mon", 120), DataPoint("Tue", 180)]
"""

from .charts import (
    DataPoint,
    DonutSegment,
    TimeSeries,
    TimeSeriesOptions,
    TimeSeriesPoint,
    as_data_points,
    as_donut_segments,
)
from .lists import ActivityItem, RankedItem
from .status import STATUS_BADGE_RULES, STATUS_COLOR_RULES, StatusRule, classify_status
from .variants import (
    ActivityStatus,
    AlertType,
    Align,
    BadgeColor,
    ButtonVariant,
    ContainerSize,
    DotStatus,
    GaugeColor,
    HealthStatus,
    IconPosition,
    Justify,
    MetricColor,
    Presence,
    ProgressColor,
    Severity,
    Size,
    StatusColor,
    TimeRange,
    Trend,
    TrendDirection,
)

__all__ = [
    # Chart values
    "DataPoint",
    "DonutSegment",
    "TimeSeries",
    "TimeSeriesOptions",
    "TimeSeriesPoint",
    "as_data_points",
    "as_donut_segments",
    # List items
    "ActivityItem",
    "RankedItem",
    # Status classification
    "StatusRule",
    "STATUS_BADGE_RULES",
    "STATUS_COLOR_RULES",
    "classify_status",
    # Variants
    "ActivityStatus",
    "AlertType",
    "Align",
    "BadgeColor",
    "ButtonVariant",
    "ContainerSize",
    "DotStatus",
    "GaugeColor",
    "HealthStatus",
    "IconPosition",
    "Justify",
    "MetricColor",
    "Presence",
    "ProgressColor",
    "Severity",
    "Size",
    "StatusColor",
    "TimeRange",
    "Trend",
    "TrendDirection",
]
