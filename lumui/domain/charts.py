"""
Chart domain models

Immutable value objects consumed by the chart renderers:
    - DataPoint: one labeled sample (line, area, bar charts)
    - DonutSegment: one labeled sample with an optional color
    - TimeSeriesPoint / TimeSeries: timestamped samples for uPlot charts
    - TimeSeriesOptions: display options for time_series_chart()
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any


def _check_number(value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"value must be a number, got {type(value).__name__}")


@dataclass(frozen=True)
class DataPoint:
    """
    One sample of a chart series.

    Labels need not be unique; order in the series defines x position.

    Attributes:
        label: Caption for the sample (e.g., "Mon")
        value: Numeric value
    """

    label: str
    value: float

    def __post_init__(self) -> None:
        _check_number(self.value)

    @classmethod
    def coerce(cls, item: Any) -> "DataPoint":
        """
        Build a DataPoint from a DataPoint, a {"label", "value"} mapping or a (label, value) pair.

        Example:
            >>> DataPoint.coerce({"label": "Mon", "value": 3})
            DataPoint(label='Mon', value=3)
        """
        if isinstance(item, cls):
            return item
        if isinstance(item, Mapping):
            return cls(label=str(item.get("label", "")), value=item["value"])
        label, value = item
        return cls(label=str(label), value=value)


@dataclass(frozen=True)
class DonutSegment:
    """
    One slice of a donut chart.

    Attributes:
        label: Legend caption
        value: Slice weight (share of the total)
        color: Optional CSS color; the donut palette is used when omitted
    """

    label: str
    value: float
    color: str | None = None

    def __post_init__(self) -> None:
        _check_number(self.value)

    @classmethod
    def coerce(cls, item: Any) -> "DonutSegment":
        """Build a DonutSegment from a segment, a mapping or a (label, value[, color]) tuple."""
        if isinstance(item, cls):
            return item
        if isinstance(item, DataPoint):
            return cls(label=item.label, value=item.value)
        if isinstance(item, Mapping):
            return cls(label=str(item.get("label", "")), value=item["value"], color=item.get("color"))
        return cls(*item)


@dataclass(frozen=True)
class TimeSeriesPoint:
    timestamp: float
    value: float


@dataclass(frozen=True)
class TimeSeries:
    """
    A named series for time_series_chart().

    Attributes:
        name: Legend label
        data: Points in chronological order
        color: Optional stroke color; the time series palette is used when omitted
    """

    name: str
    data: tuple[TimeSeriesPoint, ...] = ()
    color: str | None = None

    def __post_init__(self) -> None:
        # Accept any iterable of points or (timestamp, value) pairs
        points = tuple(
            point if isinstance(point, TimeSeriesPoint) else TimeSeriesPoint(*point) for point in self.data
        )
        object.__setattr__(self, "data", points)


@dataclass(frozen=True)
class TimeSeriesOptions:
    """Display options for time_series_chart()."""

    title: str | None = None
    height: int = 300
    width: str = "100%"
    show_legend: bool = True
    show_grid: bool = True
    theme: str = "dark"

    def __post_init__(self) -> None:
        if self.theme not in ("dark", "light"):
            raise ValueError(f"theme must be 'dark' or 'light', got {self.theme!r}")
        if self.height <= 0:
            raise ValueError(f"height must be positive, got {self.height}")


def as_data_points(data: Iterable[Any]) -> list[DataPoint]:
    """Coerce a chart series into DataPoint values."""
    return [DataPoint.coerce(item) for item in data]


def as_donut_segments(data: Iterable[Any]) -> list[DonutSegment]:
    """Coerce a donut series into DonutSegment values."""
    return [DonutSegment.coerce(item) for item in data]


