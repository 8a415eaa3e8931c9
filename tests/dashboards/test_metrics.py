"""
Tests for metric components
"""

import pytest

from lumui.dashboards.components.metrics import (
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


class TestMetricCard:
    """Tests for metric_card()"""

    def test_basic(self):
        html = metric_card("Requests", "1.2k", unit="/s")
        assert "Requests" in html
        assert "1.2k" in html
        assert "/s" in html

    def test_positive_trend(self):
        html = metric_card("Users", "12,847", trend=MetricTrend("up", "+12%", positive=True))
        assert "text-[var(--status-success)]" in html
        assert "+12%" in html

    def test_negative_trend(self):
        html = metric_card("Orders", "1,234", trend=MetricTrend("down", "-3%"))
        assert "text-[var(--status-error)]" in html

    def test_htmx_attributes(self):
        html = metric_card("Users", "1", hx_get="/partials/metrics")
        assert 'hx-get="/partials/metrics"' in html
        assert 'hx-trigger="load, every 30s"' in html
        assert 'hx-swap="outerHTML"' in html

    def test_no_htmx_by_default(self):
        assert "hx-get" not in metric_card("Users", "1")

    def test_sparkline_embedded(self):
        html = metric_card("Users", "1", sparkline_data=[1, 4, 2, 8])
        assert "<polyline" in html
        assert 'viewBox="0 0 80 30"' in html

    def test_color_and_loading(self):
        html = metric_card("Errors", "3", color="danger", loading=True)
        assert "from-[var(--status-error)]/20" in html
        assert "animate-spin" in html

    def test_invalid_trend_direction(self):
        with pytest.raises(ValueError):
            MetricTrend("sideways", "0")


class TestMetricGrid:
    """Tests for metric_grid()"""

    def test_columns_and_gap(self):
        html = metric_grid("<div>a</div>", columns=3, gap="lg")
        assert "lg:grid-cols-3" in html
        assert "gap-6" in html
        assert "<div>a</div>" in html

    def test_invalid_columns(self):
        with pytest.raises(ValueError):
            metric_grid("", columns=5)


class TestChartCard:
    """Tests for chart_card()"""

    def test_chart_and_actions_inserted(self):
        html = chart_card("Traffic", "<svg></svg>", subtitle="7 days", actions="<button>1h</button>")
        assert "<svg></svg>" in html
        assert "<button>1h</button>" in html
        assert "7 days" in html

    def test_htmx_refresh(self):
        html = chart_card("Traffic", "", hx_get="/charts/traffic")
        assert 'hx-get="/charts/traffic"' in html
        assert 'hx-trigger="load"' in html
        assert 'hx-target="find .chart-container"' in html


class TestTimeRangeSelector:
    """Tests for time_range_selector()"""

    def test_all_ranges_with_selected_highlighted(self):
        html = time_range_selector("24h")
        for value in ("1h", "6h", "24h", "7d", "30d"):
            assert f">{value}</button>" in html
        assert html.count("bg-[var(--brand-primary)] text-white") == 1

    def test_htmx_values(self):
        html = time_range_selector("7d", param_name="window", hx_get="/chart")
        assert 'hx-vals="{&#34;window&#34;: &#34;1h&#34;}"' in html

    def test_invalid_range(self):
        with pytest.raises(ValueError):
            time_range_selector("2d")


class TestStatusIndicator:
    """Tests for status_indicator()"""

    def test_healthy_pings(self):
        html = status_indicator("healthy")
        assert "animate-ping" in html
        assert "Healthy" in html

    def test_no_ping_when_disabled_or_unhealthy(self):
        assert "animate-ping" not in status_indicator("healthy", pulse=False)
        assert "animate-ping" not in status_indicator("down")

    def test_custom_label(self):
        assert "All systems operational" in status_indicator("healthy", label="All systems operational")


class TestProgressRing:
    """Tests for progress_ring()"""

    def test_percent_text(self):
        assert "75%" in progress_ring(75)

    def test_clamped_to_full(self):
        html = progress_ring(150)
        assert "100%" in html
        assert 'stroke-dashoffset="0"' in html

    def test_non_positive_max(self):
        assert "0%" in progress_ring(10, max_value=0)

    def test_sizes(self):
        assert 'width="96"' in progress_ring(10, size="lg")
        with pytest.raises(ValueError):
            progress_ring(10, size="xl")


class TestAlertBanner:
    """Tests for alert_banner()"""

    def test_critical_with_action(self):
        html = alert_banner("Outage", severity="critical", message="API down", action=BannerAction("Status", "/status"))
        assert "text-[var(--status-error)]" in html
        assert '<a href="/status"' in html
        assert "API down" in html

    def test_dismissible(self):
        assert '@click="show = false"' in alert_banner("Note", dismissible=True)
        assert "@click" not in alert_banner("Note")
