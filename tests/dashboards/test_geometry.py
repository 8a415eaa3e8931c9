"""
Tests for lumui.dashboards.components.geometry
"""

import math
import threading

import pytest

from lumui.dashboards.components.geometry import (
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
    x_position,
)


class TestFormatNumber:
    """Tests for SVG coordinate formatting"""

    def test_integral_values_have_no_decimals(self):
        assert format_number(20.0) == "20"

    def test_rounds_to_four_decimals(self):
        assert format_number(200 / 3) == "66.6667"

    def test_negative_zero(self):
        assert format_number(-0.00001) == "0"


class TestPlotPoints:
    """Tests for line/area coordinate mapping"""

    def test_first_and_last_x_span_padded_width(self):
        """First point sits at x == padding, last at width - padding"""
        points = plot_points([1, 2, 3, 4], width=400, height=120, padding=20)
        assert points[0][0] == 20
        assert points[-1][0] == 380

    def test_single_point_sits_at_padding(self):
        points = plot_points([5], width=400, height=120, padding=20)
        assert points == [(20, 20)]

    def test_max_value_maps_to_top_padding(self):
        points = plot_points([0, 50, 100], width=400, height=120, padding=20)
        assert points[2][1] == 20
        assert points[0][1] == 100
        assert points[1][1] == 60

    def test_all_zero_values_use_floor_of_one(self):
        """Max is floored at 1 so all-zero series sit on the baseline"""
        points = plot_points([0, 0, 0], width=100, height=100, padding=10)
        assert all(y == 90 for _, y in points)

    def test_empty_input(self):
        assert plot_points([], 100, 100) == []

    def test_x_position_single_point(self):
        assert x_position(0, 1, 400, 20) == 20


class TestSparklinePoints:
    """Tests for sparkline coordinate mapping"""

    def test_fewer_than_two_values(self):
        assert sparkline_points([], 80, 24) == []
        assert sparkline_points([3], 80, 24) == []

    def test_min_maps_to_bottom_and_max_to_top(self):
        points = sparkline_points([10, 20, 15], 80, 24)
        assert points[0] == (0, 24)
        assert points[1] == (40, 0)
        assert points[2] == (80, 12)

    def test_equal_values_do_not_divide_by_zero(self):
        points = sparkline_points([5, 5], 80, 24)
        assert points == [(0, 24), (80, 24)]


class TestPathSerialization:
    """Tests for SVG path and polyline serialization"""

    def test_points_attribute(self):
        assert points_attribute([(20, 100), (380, 20)]) == "20,100 380,20"

    def test_path_data(self):
        assert path_data([(20, 100), (380, 20)]) == "M 20,100 L 380,20"

    def test_area_path_closes_to_baseline(self):
        path = area_path_data([(20, 100), (380, 20)], height=120, padding=20)
        assert path == "M 20,100 L 380,20 L 380,100 L 20,100 Z"


class TestDonutArcs:
    """Tests for donut arc layout"""

    def test_lengths_sum_to_circumference(self):
        circumference = circle_circumference(50)
        arcs = donut_arcs([45, 35, 20], circumference)
        assert math.isclose(sum(arc.length for arc in arcs), circumference)

    def test_offsets_are_cumulative(self):
        arcs = donut_arcs([1, 1, 2], 100)
        assert [arc.offset for arc in arcs] == [0, 25, 50]
        assert [arc.percentage for arc in arcs] == [0.25, 0.25, 0.5]

    def test_zero_total_yields_no_arcs(self):
        assert donut_arcs([0, 0], 100) == []


class TestElementIds:
    """Tests for unique element ids"""

    def test_ids_increase(self):
        first = next_element_id()
        assert next_element_id() > first

    def test_ids_unique_across_threads(self):
        results = []
        lock = threading.Lock()

        def worker():
            ids = [next_element_id() for _ in range(200)]
            with lock:
                results.extend(ids)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(results) == len(set(results)) == 1600

    def test_unique_chart_id_format(self):
        chart_id = unique_chart_id()
        prefix, counter, stamp = chart_id.rsplit("-", 2)
        assert prefix == "lum-chart"
        assert counter.isdigit()
        assert stamp.isalnum()

    @pytest.mark.parametrize("prefix", ["spark", "ring"])
    def test_custom_prefix(self, prefix):
        assert unique_chart_id(prefix).startswith(f"{prefix}-")
