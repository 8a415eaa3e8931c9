"""
Chart geometry helpers

Coordinate mapping shared by the line, area and sparkline renderers, plus
the arc math for donut charts and the unique element id source.

All functions are pure except next_element_id(), which draws from a
process-wide counter guarded by a lock.
"""

import itertools
import math
import threading
import time
from collections.abc import Sequence
from dataclasses import dataclass

from lumui.utils.formatting import to_base36

Point = tuple[float, float]

_id_counter = itertools.count(1)
_id_lock = threading.Lock()


def next_element_id() -> int:
    """Return the next value of the process-wide element id counter (thread-safe)."""
    with _id_lock:
        return next(_id_counter)


def unique_chart_id(prefix: str = "lum-chart") -> str:
    """
    Build an element id that stays unique across charts rendered on one page.

    Example:
        >>> unique_chart_id()  # doctest: +SKIP
        'lum-chart-7-m1x3k9q2'
    """
    return f"{prefix}-{next_element_id()}-{to_base36(int(time.time() * 1000))}"


def format_number(value: float) -> str:
    """
    Format a coordinate for SVG attributes: at most 4 decimals, no trailing zeros.

    Example:
        >>> format_number(20.0)
        '20'
        >>> format_number(200 / 3)
        '66.6667'
    """
    text = f"{value:.4f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


def x_position(index: int, count: int, width: float, padding: float) -> float:
    """
    X coordinate of point `index` out of `count`, spread across the padded width.

    A single point (count == 1) sits at x == padding.
    """
    return (index / max(count - 1, 1)) * (width - padding * 2) + padding


def plot_points(values: Sequence[float], width: float, height: float, padding: float = 20) -> list[Point]:
    """
    Map values onto line/area chart coordinates.

    Y is scaled from [0, max(values, 1)] onto [height - padding, padding],
    so the chart never divides by zero when every value is 0.

    Returns:
        One (x, y) pair per value; empty list for empty input
    """
    if not values:
        return []

    max_val = max(max(values), 1)
    chart_height = height - padding * 2
    count = len(values)

    return [
        (x_position(i, count, width, padding), height - padding - (value / max_val) * chart_height)
        for i, value in enumerate(values)
    ]


def sparkline_points(values: Sequence[float], width: float, height: float) -> list[Point]:
    """
    Map values onto sparkline coordinates (no padding).

    Y is scaled from the observed [min, max] onto [height, 0]; the range is
    floored at 1 so equal values do not divide by zero.

    Returns:
        One (x, y) pair per value; empty list for fewer than 2 values
    """
    if len(values) < 2:
        return []

    min_val = min(values)
    max_val = max(values)
    value_range = max(max_val - min_val, 1)
    count = len(values)

    return [
        (x_position(i, count, width, 0), height - ((value - min_val) / value_range) * height)
        for i, value in enumerate(values)
    ]


def points_attribute(points: Sequence[Point]) -> str:
    """Serialize points for a <polyline points="..."> attribute."""
    return " ".join(f"{format_number(x)},{format_number(y)}" for x, y in points)


def path_data(points: Sequence[Point]) -> str:
    """Serialize points as an open SVG path ("M x,y L x,y ...")."""
    return " ".join(
        f"{'M' if i == 0 else 'L'} {format_number(x)},{format_number(y)}" for i, (x, y) in enumerate(points)
    )


def area_path_data(points: Sequence[Point], height: float, padding: float) -> str:
    """Close a line path down to the baseline so it can be filled."""
    baseline = format_number(height - padding)
    last_x = format_number(points[-1][0])
    return f"{path_data(points)} L {last_x},{baseline} L {format_number(padding)},{baseline} Z"


@dataclass(frozen=True)
class DonutArc:
    """
    Geometry of one donut segment.

    Attributes:
        length: Visible arc length (percentage * circumference)
        offset: Cumulative length of all previous segments
        percentage: Share of the total in [0, 1]
    """

    length: float
    offset: float
    percentage: float


def donut_arcs(values: Sequence[float], circumference: float) -> list[DonutArc]:
    """
    Lay out donut segments end to end around the circle.

    Returns an empty list when the total is 0 (nothing can be drawn).
    """
    total = sum(values)
    if total == 0:
        return []

    arcs = []
    offset = 0.0
    for value in values:
        percentage = value / total
        length = percentage * circumference
        arcs.append(DonutArc(length=length, offset=offset, percentage=percentage))
        offset += length
    return arcs


def circle_circumference(radius: float) -> float:
    return 2 * math.pi * radius
