"""
Closed variant sets for component options

Every renderer accepts either the enum member or its string value:

    button("Save", variant="danger")
    button("Save", variant=ButtonVariant.DANGER)

Unknown strings raise ValueError from the enum constructor.
"""

from enum import Enum


class ButtonVariant(str, Enum):
    PRIMARY = "primary"
    SECONDARY = "secondary"
    GHOST = "ghost"
    DANGER = "danger"
    SUCCESS = "success"


class Size(str, Enum):
    SM = "sm"
    MD = "md"
    LG = "lg"
    XL = "xl"


class ContainerSize(str, Enum):
    SM = "sm"
    MD = "md"
    LG = "lg"
    XL = "xl"
    XXL = "2xl"
    FULL = "full"


class StatusColor(str, Enum):
    """Semantic color bucket, shared by badges, cards and status classification."""

    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"
    INFO = "info"
    DEFAULT = "default"


class BadgeColor(str, Enum):
    DEFAULT = "default"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"
    INFO = "info"
    BRAND = "brand"


class GaugeColor(str, Enum):
    """Gauge fill color; AUTO applies the threshold policy (high values are bad)."""

    DEFAULT = "default"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"
    AUTO = "auto"


class ProgressColor(str, Enum):
    DEFAULT = "default"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


class MetricColor(str, Enum):
    DEFAULT = "default"
    SUCCESS = "success"
    WARNING = "warning"
    DANGER = "danger"


class Trend(str, Enum):
    """Trend of a metric card with trend; UP is rendered as bad."""

    UP = "up"
    DOWN = "down"
    STABLE = "stable"


class TrendDirection(str, Enum):
    UP = "up"
    DOWN = "down"
    FLAT = "flat"


class Presence(str, Enum):
    ONLINE = "online"
    WARNING = "warning"
    OFFLINE = "offline"


class DotStatus(str, Enum):
    ONLINE = "online"
    OFFLINE = "offline"
    WARNING = "warning"
    PENDING = "pending"


class HealthStatus(str, Enum):
    HEALTHY = "healthy"
    DEGRADED = "degraded"
    DOWN = "down"
    UNKNOWN = "unknown"


class ActivityStatus(str, Enum):
    SUCCESS = "success"
    FAILURE = "failure"
    PENDING = "pending"
    RUNNING = "running"


class AlertType(str, Enum):
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"
    INFO = "info"


class Severity(str, Enum):
    INFO = "info"
    WARNING = "warning"
    CRITICAL = "critical"


class TimeRange(str, Enum):
    H1 = "1h"
    H6 = "6h"
    H24 = "24h"
    D7 = "7d"
    D30 = "30d"


class IconPosition(str, Enum):
    LEFT = "left"
    RIGHT = "right"


class Justify(str, Enum):
    START = "start"
    END = "end"
    CENTER = "center"
    BETWEEN = "between"
    AROUND = "around"


class Align(str, Enum):
    START = "start"
    END = "end"
    CENTER = "center"
    STRETCH = "stretch"
