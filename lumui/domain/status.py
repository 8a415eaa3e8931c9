"""
Status text classification

Maps free-form status strings ("Running", "CrashLoopBackOff", "Pending")
onto a StatusColor bucket with an ordered rule list: the first rule whose
keyword occurs in the lowercased status wins.

Two rule sets exist because the status badge and the general purpose
classifier have always used different keyword sets; keeping them separate
means existing status strings keep their colors. Note that "notready"
contains "ready", so it classifies as success under both rule sets.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from .variants import StatusColor


@dataclass(frozen=True)
class StatusRule:
    """
    One classification rule.

    Attributes:
        keywords: Substrings that select this rule (matched against lowercased status)
        color: Bucket returned when the rule matches
    """

    keywords: tuple[str, ...]
    color: StatusColor

    def matches(self, status: str) -> bool:
        lower = status.lower()
        return any(keyword in lower for keyword in self.keywords)


# Used by status_badge() when no variant is passed
STATUS_BADGE_RULES: tuple[StatusRule, ...] = (
    StatusRule(("ready", "running", "success", "active", "healthy", "online"), StatusColor.SUCCESS),
    StatusRule(("pending", "warning", "degraded"), StatusColor.WARNING),
    StatusRule(("failed", "error", "offline", "notready"), StatusColor.ERROR),
)

# Used by get_status_color()
STATUS_COLOR_RULES: tuple[StatusRule, ...] = (
    StatusRule(("ready", "running", "success", "active", "healthy", "online", "completed"), StatusColor.SUCCESS),
    StatusRule(("pending", "warning", "degraded", "waiting"), StatusColor.WARNING),
    StatusRule(("failed", "error", "offline", "notready", "crashed"), StatusColor.ERROR),
    StatusRule(("info", "unknown"), StatusColor.INFO),
)


def classify_status(
    status: str,
    rules: Sequence[StatusRule] = STATUS_COLOR_RULES,
    default: StatusColor = StatusColor.DEFAULT,
) -> StatusColor:
    """
    Classify a status string, first match wins.

    Example:
        >>> classify_status("Running")
        <StatusColor.SUCCESS: 'success'>
        >>> classify_status("CrashLoopBackOff")
        <StatusColor.DEFAULT: 'default'>
    """
    for rule in rules:
        if rule.matches(status):
            return rule.color
    return default
