"""
Tests for chart components

Covers the SVG renderers (line, area, bar, donut, gauge, sparkline) and the
extra chart widgets (progress bar, metric card with trend, uPlot time series).
"""

import logging
import math
import re

import pytest

from lumui.dashboards.components.charts import (
    DONUT_PALETTE,
    NO_DATA_HTML,
    area_chart,
    bar_chart,
    bar_heights,
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
from lumui.domain import DataPoint, DonutSegment, TimeSeries, TimeSeriesOptions


class TestLineChart:
    """Tests for line_chart()"""

    def test_empty_series_renders_placeholder(self):
        assert line_chart([]) == NO_DATA_HTML

    def test_points_span_padded_width(self, weekly_series):
        html = line_chart(weekly_series, width=400, padding=20)
        cx = re.findall(r'<circle cx="([\d.]+)"', html)
        assert cx[0] == "20"
        assert cx[-1] == "380"
        assert len(cx) == 7

    def test_single_point_at_padding(self):
        html = line_chart([DataPoint("Only", 5)])
        assert 'points="20,20"' in html

    def test_hide_dots(self, weekly_series):
        html = line_chart(weekly_series, show_dots=False)
        assert "<circle" not in html
        assert "<polyline" in html

    def test_first_and_last_labels(self, weekly_series):
        html = line_chart(weekly_series)
        assert "<span>Mon</span>" in html
        assert "<span>Sun</span>" in html
        assert "Wed" not in html

    def test_hide_labels(self, weekly_series):
        assert "<span>Mon</span>" not in line_chart(weekly_series, show_labels=False)

    def test_labels_are_escaped(self):
        html = line_chart([DataPoint("<script>", 1), DataPoint("b", 2)])
        assert "<script>" not in html
        assert "&lt;script&gt;" in html

    def test_accepts_mappings_and_pairs(self):
        html = line_chart([{"label": "a", "value": 1}, ("b", 2)])
        assert "<span>a</span>" in html
        assert "<span>b</span>" in html

    def test_baseline(self, weekly_series):
        html = line_chart(weekly_series, width=400, height=120, padding=20)
        assert '<line x1="20" y1="100" x2="380" y2="100"' in html

    def test_non_numeric_value_rejected(self):
        with pytest.raises(TypeError):
            line_chart([("a", "12")])


class TestAreaChart:
    """Tests for area_chart()"""

    def test_empty_series_renders_placeholder(self):
        assert area_chart([]) == NO_DATA_HTML

    def test_gradient_ids_unique_per_call(self, weekly_series):
        first = re.search(r'id="(areaGradient-\d+)"', area_chart(weekly_series)).group(1)
        second = re.search(r'id="(areaGradient-\d+)"', area_chart(weekly_series)).group(1)
        assert first != second

    def test_fill_references_gradient(self, weekly_series):
        html = area_chart(weekly_series)
        gradient_id = re.search(r'id="(areaGradient-\d+)"', html).group(1)
        assert f'fill="url(#{gradient_id})"' in html

    def test_area_path_closed(self, weekly_series):
        html = area_chart(weekly_series, width=400, height=120, padding=20)
        assert "L 380,100 L 20,100 Z" in html

    def test_fill_opacity(self, weekly_series):
        assert 'stop-opacity="0.35"' in area_chart(weekly_series, fill_opacity=0.35)


class TestBarChart:
    """Tests for bar_chart()"""

    def test_empty_series_renders_placeholder(self):
        assert bar_chart([]) == NO_DATA_HTML

    def test_all_zero_bars_at_minimum_height(self):
        html = bar_chart([("a", 0), ("b", 0), ("c", 0)])
        assert html.count('style="height: 2%"') == 3

    def test_tallest_bar_is_full_height(self, weekly_series):
        assert 'style="height: 100%"' in bar_chart(weekly_series)

    def test_bar_heights(self):
        assert bar_heights([0, 50, 100]) == [2, 50, 100]
        assert bar_heights([]) == []

    def test_title_carries_label_and_value(self):
        assert 'title="Mon - 120"' in bar_chart([("Mon", 120)])

    def test_labels_row(self, weekly_series):
        html = bar_chart(weekly_series, labels=["Start", "End"])
        assert "<span>Start</span>" in html
        assert "<span>End</span>" in html

    def test_container_height(self, weekly_series):
        assert 'style="height: 60px"' in bar_chart(weekly_series, height=60)


class TestDonutChart:
    """Tests for donut_chart()"""

    def test_empty_series_renders_placeholder(self):
        assert donut_chart([]) == NO_DATA_HTML

    def test_zero_total_renders_placeholder(self):
        assert donut_chart([DonutSegment("a", 0), DonutSegment("b", 0)]) == NO_DATA_HTML

    def test_dash_lengths_sum_to_circumference(self, donut_data):
        html = donut_chart(donut_data, size=120, stroke_width=20)
        dashes = re.findall(r'stroke-dasharray="([\d.]+) ([\d.]+)"', html)
        assert len(dashes) == 3
        circumference = 2 * math.pi * 50
        assert math.isclose(sum(float(length) for length, _ in dashes), circumference, abs_tol=1e-3)
        assert all(math.isclose(float(full), circumference, abs_tol=1e-3) for _, full in dashes)

    def test_first_segment_starts_at_zero_offset(self, donut_data):
        html = donut_chart(donut_data)
        offsets = re.findall(r'stroke-dashoffset="([-\d.]+)"', html)
        assert offsets[0] == "0"
        assert float(offsets[1]) < 0

    def test_legend_percentages(self, donut_data):
        html = donut_chart(donut_data)
        assert "Desktop (45%)" in html
        assert "Mobile (35%)" in html
        assert "Tablet (20%)" in html

    def test_legend_rounding_is_independent(self):
        """Three equal thirds each show 33%, summing to 99"""
        html = donut_chart([("a", 1), ("b", 1), ("c", 1)])
        assert html.count("(33%)") == 3

    def test_palette_fallback_and_explicit_color(self):
        html = donut_chart([DonutSegment("a", 1), DonutSegment("b", 1, color="#123456")])
        assert f'stroke="{DONUT_PALETTE[0]}"' in html
        assert 'stroke="#123456"' in html

    def test_center_text(self, donut_data):
        html = donut_chart(donut_data, center_text="100%", center_subtext="Total")
        assert ">100%</text>" in html
        assert ">Total</text>" in html

    def test_hide_legend(self, donut_data):
        assert "Desktop" not in donut_chart(donut_data, show_legend=False)


class TestGaugeChart:
    """Tests for gauge_chart()"""

    @pytest.mark.parametrize(
        "percentage, expected",
        [
            (0, "var(--status-success)"),
            (59.9, "var(--status-success)"),
            (60, "var(--status-warning)"),
            (70, "var(--status-warning)"),
            (80, "var(--status-error)"),
            (95, "var(--status-error)"),
        ],
    )
    def test_auto_color_bands(self, percentage, expected):
        assert gauge_fill_color(percentage) == expected

    def test_explicit_color_bypasses_thresholds(self):
        assert gauge_fill_color(95, "success") == "var(--status-success)"
        assert gauge_fill_color(10, "default") == "var(--brand-primary)"

    def test_value_text(self):
        assert ">42%</text>" in gauge_chart(42)

    def test_value_clamped(self):
        assert ">100%</text>" in gauge_chart(250)
        assert ">0%</text>" in gauge_chart(-5)

    def test_non_positive_max_renders_zero(self, caplog):
        with caplog.at_level(logging.WARNING, logger="lumui"):
            html = gauge_chart(50, max_value=0)
        assert ">0%</text>" in html
        assert any("Non-positive maximum" in record.message for record in caplog.records)

    def test_full_gauge_has_zero_offset(self):
        assert 'stroke-dashoffset="0"' in gauge_chart(100)

    def test_label(self):
        assert "CPU" in gauge_chart(10, label="CPU")

    def test_invalid_color(self):
        with pytest.raises(ValueError):
            gauge_chart(10, color="purple")


class TestSparkline:
    """Tests for sparkline()"""

    def test_fewer_than_two_points(self):
        assert sparkline([]) == ""
        assert sparkline([1]) == ""

    def test_equal_points(self):
        html = sparkline([5, 5])
        assert 'points="0,24 80,24"' in html

    def test_dimensions(self):
        assert 'viewBox="0 0 150 40"' in sparkline([1, 2, 3], width=150, height=40)


class TestProgressBar:
    """Tests for progress_bar()"""

    def test_width_is_percentage(self):
        assert "width: 25%" in progress_bar(25)

    def test_clamped(self):
        assert "width: 100%" in progress_bar(150)

    def test_label(self):
        assert "68%" in progress_bar(68, show_label=True)

    def test_color(self):
        assert "bg-[var(--status-warning)]" in progress_bar(50, color="warning")

    def test_size(self):
        assert "h-2.5" in progress_bar(50, size="md")
        with pytest.raises(ValueError):
            progress_bar(50, size="lg")


class TestMetricCardWithTrend:
    """Tests for metric_card_with_trend()"""

    def test_up_trend_is_error_colored(self):
        html = metric_card_with_trend("Errors", "12", trend="up", trend_value="+3")
        assert "text-[var(--status-error)]" in html
        assert "+3" in html

    def test_down_trend_is_success_colored(self):
        html = metric_card_with_trend("Latency", "45ms", trend="down", trend_value="-5ms")
        assert "text-[var(--status-success)]" in html

    def test_no_trend_value(self):
        html = metric_card_with_trend("Latency", "45ms", trend="down")
        assert "text-[var(--status-success)]" not in html

    def test_status_dot(self):
        assert "bg-[var(--status-error)]" in metric_card_with_trend("API", "down", status="offline")


class TestTimeSeriesChart:
    """Tests for time_series_chart() and chart_scripts()"""

    def test_empty_renders_placeholder(self):
        assert time_series_chart([]) == NO_DATA_HTML
        assert time_series_chart([TimeSeries("empty")]) == NO_DATA_HTML

    def test_chart_id(self, latency_series):
        html = time_series_chart(latency_series)
        assert re.search(r'id="lum-chart-\d+-[0-9a-z]+"', html)

    def test_init_script_is_attribute_escaped(self, latency_series):
        html = time_series_chart(latency_series)
        assert "&quot;label&quot;: &quot;p50&quot;" in html
        assert '"label"' not in html

    def test_data_payload(self, latency_series):
        html = time_series_chart(latency_series)
        assert "[[1700000000, 1700000060, 1700000120], [12.0, 14.5, 11.0], [80.0, 95.0, 70.0]]" in html

    def test_hex_color_gets_fill(self, latency_series):
        assert "#3B82F620" in time_series_chart(latency_series)

    def test_options(self, latency_series):
        options = TimeSeriesOptions(title="Latency", height=200, show_legend=False, show_grid=False)
        html = time_series_chart(latency_series, options)
        assert "Latency</h4>" in html
        assert "height:200px" in html
        assert "transparent" in html
        assert "rounded-full" not in html

    def test_chart_scripts(self):
        scripts = chart_scripts()
        assert "uplot@1.6.30" in scripts
        assert "uPlot.iife.min.js" in scripts
