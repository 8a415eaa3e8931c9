"""
Pytest configuration and shared fixtures

Provides sample chart series and a clean configuration singleton.
"""

import logging

import pytest

from lumui.domain import DataPoint, DonutSegment, TimeSeries


# ===== Chart Fixtures =====


@pytest.fixture
def weekly_series():
    """Seven labeled samples"""
    return [
        DataPoint("Mon", 120),
        DataPoint("Tue", 180),
        DataPoint("Wed", 150),
        DataPoint("Thu", 220),
        DataPoint("Fri", 280),
        DataPoint("Sat", 240),
        DataPoint("Sun", 190),
    ]


@pytest.fixture
def donut_data():
    """Three segments summing to 100"""
    return [DonutSegment("Desktop", 45), DonutSegment("Mobile", 35), DonutSegment("Tablet", 20)]


@pytest.fixture
def latency_series():
    """Two time series sharing timestamps"""
    return [
        TimeSeries("p50", [(1700000000, 12.0), (1700000060, 14.5), (1700000120, 11.0)]),
        TimeSeries("p99", [(1700000000, 80.0), (1700000060, 95.0), (1700000120, 70.0)], color="#3B82F6"),
    ]


# ===== Configuration Fixtures =====


@pytest.fixture
def fresh_config(monkeypatch):
    """Reset the configuration singleton and stop .env files from leaking in"""
    import lumui.secure_config as secure_config

    monkeypatch.setattr(secure_config, "_config_instance", None)
    monkeypatch.setattr(secure_config, "load_dotenv", lambda *args, **kwargs: False)
    for name in (
        "LUMUI_HOST",
        "LUMUI_PORT",
        "LUMUI_LOG_LEVEL",
        "LUMUI_JSON_LOGS",
        "LUMUI_BRAND_PRIMARY",
        "LUMUI_BRAND_SECONDARY",
        "LUMUI_BRAND_ACCENT",
    ):
        monkeypatch.delenv(name, raising=False)
    yield secure_config


# ===== Logging Fixtures =====


@pytest.fixture
def restore_root_logger():
    """Undo handler and level changes made by setup_logging()"""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
