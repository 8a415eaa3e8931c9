"""
List item models for ranked lists and activity feeds.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .variants import ActivityStatus


@dataclass(frozen=True)
class RankedItem:
    """
    One row of a ranked list (contributors, top endpoints, ...).

    Attributes:
        label: Primary text
        value: Score shown on the right (number or preformatted string)
        sublabel: Optional secondary text next to the label
    """

    label: str
    value: str | float
    sublabel: str | None = None

    @classmethod
    def coerce(cls, item: Any) -> "RankedItem":
        if isinstance(item, cls):
            return item
        if isinstance(item, Mapping):
            return cls(label=item["label"], value=item["value"], sublabel=item.get("sublabel"))
        return cls(*item)


@dataclass(frozen=True)
class ActivityItem:
    """
    One entry of an activity feed (workflow runs, commits, deployments).

    Attributes:
        title: Primary text
        subtitle: Optional secondary line
        timestamp: Optional timestamp text (kept for callers; not rendered)
        status: Optional ActivityStatus shown as a colored dot
        meta: Optional text on the right (duration, author, ...)
        href: Optional link; the whole entry becomes an anchor opening a new tab
    """

    title: str
    subtitle: str | None = None
    timestamp: str | None = None
    status: ActivityStatus | None = None
    meta: str | None = None
    href: str | None = None

    def __post_init__(self) -> None:
        if self.status is not None:
            object.__setattr__(self, "status", ActivityStatus(self.status))

    @classmethod
    def coerce(cls, item: Any) -> "ActivityItem":
        if isinstance(item, cls):
            return item
        return cls(**dict(item))
