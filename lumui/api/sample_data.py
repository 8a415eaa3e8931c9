"""
Sample data for the demo dashboard and the static showcase.
"""

from lumui.dashboards.components.metrics import MetricTrend
from lumui.domain import ActivityItem, DataPoint, DonutSegment

METRICS = {
    "users": ("Total Users", "12,847", MetricTrend("up", "+12%", positive=True), "user", "default"),
    "revenue": ("Revenue", "$45.2k", MetricTrend("up", "+8%", positive=True), "chart", "success"),
    "orders": ("Orders", "1,234", MetricTrend("down", "-3%", positive=False), "clock", "warning"),
    "uptime": ("Uptime", "99.9%", MetricTrend("flat", "stable", positive=True), "server", "default"),
}

USERS_SPARKLINE = [65, 59, 80, 81, 56, 55, 75, 90]

WEEKLY_TRAFFIC = [
    DataPoint("Mon", 120),
    DataPoint("Tue", 180),
    DataPoint("Wed", 150),
    DataPoint("Thu", 220),
    DataPoint("Fri", 280),
    DataPoint("Sat", 240),
    DataPoint("Sun", 190),
]

TRAFFIC_SOURCES = [
    DonutSegment("Desktop", 45),
    DonutSegment("Mobile", 35),
    DonutSegment("Tablet", 20),
]

RECENT_ACTIVITY = [
    ActivityItem("New user signup", subtitle="john@example.com", status="success", meta="2m ago"),
    ActivityItem("Order completed", subtitle="Order #12345", status="success", meta="5m ago"),
    ActivityItem("Payment failed", subtitle="Order #12340", status="failure", meta="12m ago"),
    ActivityItem("Nightly export", subtitle="warehouse-sync", status="running", meta="1h ago"),
]

RECENT_USERS = [
    {"id": 1, "name": "John Doe", "email": "john@example.com", "status": "Active", "plan": "Pro"},
    {"id": 2, "name": "Jane Smith", "email": "jane@example.com", "status": "Active", "plan": "Enterprise"},
    {"id": 3, "name": "Bob Wilson", "email": "bob@example.com", "status": "Pending", "plan": "Free"},
]
