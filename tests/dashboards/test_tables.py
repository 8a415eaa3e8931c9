"""
Tests for table components
"""

import pytest

from lumui.dashboards.components.tables import (
    TableColumn,
    activity_list,
    ranked_list,
    status_badge,
    status_dot,
    table,
)
from lumui.domain import ActivityItem, RankedItem


@pytest.fixture
def user_rows():
    return [
        {"name": "John Doe", "email": "john@example.com", "status": "Active"},
        {"name": "Jane <Admin>", "email": None, "status": "Pending"},
    ]


class TestTable:
    """Tests for table()"""

    def test_empty_message(self):
        html = table([TableColumn("name", "Name")], [], empty_message="Nobody here")
        assert "Nobody here" in html
        assert "<table" not in html

    def test_headers_and_cells(self, user_rows):
        html = table([TableColumn("name", "Name"), TableColumn("email", "Email")], user_rows)
        assert ">Name</th>" in html
        assert ">John Doe</td>" in html

    def test_cells_escaped_and_none_empty(self, user_rows):
        html = table([TableColumn("name", "Name"), TableColumn("email", "Email")], user_rows)
        assert "Jane &lt;Admin&gt;" in html
        assert '<td class="py-2 "></td>' in html

    def test_custom_renderer_receives_value_and_row(self, user_rows):
        seen = []

        def render(value, row):
            seen.append((value, row["name"]))
            return f"<b>{value}</b>"

        html = table([TableColumn("status", "Status", render=render)], user_rows)
        assert "<b>Active</b>" in html
        assert seen == [("Active", "John Doe"), ("Pending", "Jane <Admin>")]

    def test_row_class_callable(self, user_rows):
        html = table(
            [TableColumn("name", "Name")],
            user_rows,
            row_class=lambda row: "row-active" if row["status"] == "Active" else "",
        )
        assert html.count("row-active") == 1

    def test_column_classes(self, user_rows):
        html = table([TableColumn("name", "Name", css_class="font-mono", header_class="w-1/2")], user_rows)
        assert 'class="pb-2 font-medium w-1/2"' in html
        assert 'class="py-2 font-mono"' in html


class TestStatusBadge:
    """Tests for status_badge()"""

    @pytest.mark.parametrize(
        "status, token",
        [
            ("Running", "status-success"),
            ("Healthy", "status-success"),
            ("Pending", "status-warning"),
            ("Degraded", "status-warning"),
            ("Failed", "status-error"),
            ("Offline", "status-error"),
        ],
    )
    def test_auto_variant(self, status, token):
        assert f"text-[var(--{token})]" in status_badge(status)

    def test_notready_matches_ready_first(self):
        """First matching rule wins, so NotReady is classified as success"""
        assert "text-[var(--status-success)]" in status_badge("NotReady")

    def test_unknown_is_default(self):
        assert "bg-[var(--surface-3)]" in status_badge("CrashLoopBackOff")

    def test_explicit_variant(self):
        assert "text-[var(--status-info)]" in status_badge("Running", variant="info")

    def test_text_escaped(self):
        assert "&lt;b&gt;" in status_badge("<b>")


class TestStatusDot:
    """Tests for status_dot()"""

    def test_pulse_only_when_online(self):
        assert "animate-pulse" in status_dot("online", pulse=True)
        assert "animate-pulse" not in status_dot("warning", pulse=True)

    def test_pending_color(self):
        assert "bg-[var(--text-subtle)]" in status_dot("pending")

    def test_invalid_status(self):
        with pytest.raises(ValueError):
            status_dot("sleeping")


class TestRankedList:
    """Tests for ranked_list()"""

    def test_empty(self):
        assert "No data" in ranked_list([])

    def test_ranks_in_order(self):
        html = ranked_list([RankedItem("alice", 42, sublabel="commits"), {"label": "bob", "value": 17}])
        assert html.index("alice") < html.index("bob")
        assert ">1</span>" in html
        assert ">2</span>" in html
        assert "commits" in html
        assert ">42</span>" in html


class TestActivityList:
    """Tests for activity_list()"""

    def test_empty(self):
        assert "No activity" in activity_list([])

    def test_status_dot_and_meta(self):
        html = activity_list([ActivityItem("Deploy", subtitle="api", status="running", meta="2m ago")])
        assert "bg-[var(--brand-primary)] animate-pulse" in html
        assert "2m ago" in html
        assert "api" in html

    def test_href_wraps_entry(self):
        html = activity_list([{"title": "Build #12", "href": "https://ci.example.com/12", "status": "failure"}])
        assert '<a href="https://ci.example.com/12" target="_blank" class="block">' in html
        assert "bg-[var(--status-error)]" in html

    def test_invalid_status(self):
        with pytest.raises(ValueError):
            ActivityItem("x", status="exploded")

    def test_max_height(self):
        assert "max-h-40" in activity_list([ActivityItem("x")], max_height="max-h-40")
