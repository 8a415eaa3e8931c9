"""
Formatting Utilities

Shared helpers for turning raw values into display text:
    - round_half_up: rounding used by every percentage shown on screen
    - time_ago / format_date: relative and absolute dates
    - format_duration / format_bytes / format_number / format_percent
    - truncate / pluralize
    - get_status_color: status string -> semantic color bucket
    - simple_hash / to_base36: short stable identifiers
    - debounce_script: client-side debounce helper source
"""

import math
from datetime import datetime, timezone

from lumui.domain.status import STATUS_COLOR_RULES, classify_status
from lumui.domain.variants import StatusColor

BASE36_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, halves rounding up.

    Python's round() uses banker's rounding (round(0.5) == 0); on-screen
    percentages use the schoolbook rule instead.

    Example:
        >>> round_half_up(12.5)
        13
        >>> round_half_up(-0.5)
        0
    """
    return math.floor(value + 0.5)


def _as_datetime(value: datetime | str) -> datetime:
    if isinstance(value, datetime):
        parsed = value
    else:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def time_ago(date: datetime | str, now: datetime | None = None) -> str:
    """
    Format a timestamp relative to now ("3h ago", "2w ago", "just now").

    Args:
        date: datetime or ISO 8601 string (naive values are treated as UTC)
        now: Reference time (default: current UTC time)

    Example:
        >>> time_ago("2026-01-01T00:00:00", now=datetime(2026, 1, 1, 3, tzinfo=timezone.utc))
        '3h ago'
    """
    reference = _as_datetime(now) if now is not None else datetime.now(timezone.utc)
    diff_seconds = (reference - _as_datetime(date)).total_seconds()

    seconds = math.floor(diff_seconds)
    minutes = seconds // 60
    hours = minutes // 60
    days = hours // 24
    weeks = days // 7
    months = days // 30

    if months > 0:
        return f"{months}mo ago"
    if weeks > 0:
        return f"{weeks}w ago"
    if days > 0:
        return f"{days}d ago"
    if hours > 0:
        return f"{hours}h ago"
    if minutes > 0:
        return f"{minutes}m ago"
    return "just now"


def format_duration(seconds: int) -> str:
    """
    Format a duration in seconds ("45s", "2m 5s", "1h 30m").
    """
    if seconds < 60:
        return f"{seconds}s"
    mins = seconds // 60
    secs = seconds % 60
    if mins < 60:
        return f"{mins}m {secs}s" if secs > 0 else f"{mins}m"
    hours = mins // 60
    remain_mins = mins % 60
    return f"{hours}h {remain_mins}m"


def format_bytes(num_bytes: float) -> str:
    """
    Format a byte count with binary units ("1.5 KB", "3 MB").

    Example:
        >>> format_bytes(1536)
        '1.5 KB'
    """
    if num_bytes == 0:
        return "0 B"
    sizes = ["B", "KB", "MB", "GB", "TB"]
    index = min(max(int(math.floor(math.log(num_bytes) / math.log(1024))), 0), len(sizes) - 1)
    scaled = round(num_bytes / math.pow(1024, index), 1)
    return f"{scaled:g} {sizes[index]}"


def format_number(num: float) -> str:
    """
    Format a number with thousands separators and at most 3 decimals.

    Example:
        >>> format_number(12847)
        '12,847'
        >>> format_number(1234.5678)
        '1,234.568'
    """
    if isinstance(num, int) or float(num).is_integer():
        return f"{int(num):,}"
    return f"{num:,.3f}".rstrip("0").rstrip(".")


def format_percent(value: float, total: float) -> str:
    """
    Format value/total as a whole percentage ("0%" when total is 0).
    """
    if total == 0:
        return "0%"
    return f"{round_half_up(value / total * 100)}%"


def truncate(text: str, max_length: int) -> str:
    """
    Shorten text to max_length characters, ending with an ellipsis.
    """
    if len(text) <= max_length:
        return text
    return text[: max_length - 1] + "…"


def pluralize(count: int, singular: str, plural: str | None = None) -> str:
    """
    Pick the singular or plural word for count.

    Example:
        >>> pluralize(2, "pod")
        'pods'
    """
    return singular if count == 1 else plural or f"{singular}s"


def get_status_color(status: str) -> StatusColor:
    """
    Classify a status string into a color bucket.

    Example:
        >>> get_status_color("Completed")
        <StatusColor.SUCCESS: 'success'>
    """
    return classify_status(status, STATUS_COLOR_RULES)


def to_base36(number: int) -> str:
    """Encode a non-negative integer in lowercase base 36."""
    if number < 0:
        raise ValueError("to_base36 expects a non-negative integer")
    if number == 0:
        return "0"
    digits = []
    while number:
        number, remainder = divmod(number, 36)
        digits.append(BASE36_DIGITS[remainder])
    return "".join(reversed(digits))


def simple_hash(text: str) -> str:
    """
    Short, stable, non-cryptographic hash for cache keys.

    Uses the classic 31-multiplier string hash folded into a signed
    32-bit integer, encoded in base 36.
    """
    hash_value = 0
    for char in text:
        hash_value = ((hash_value << 5) - hash_value + ord(char)) & 0xFFFFFFFF
    if hash_value >= 0x80000000:
        hash_value -= 0x100000000
    return to_base36(abs(hash_value))


def debounce_script(wait: int) -> str:
    """
    Return the source of a client-side debounce(func, wait) helper.

    Args:
        wait: Delay in milliseconds baked into the helper
    """
    return f"""
    function debounce(func, wait) {{
      let timeout;
      return function executedFunction(...args) {{
        const later = () => {{
          clearTimeout(timeout);
          func(...args);
        }};
        clearTimeout(timeout);
        timeout = setTimeout(later, {int(wait)});
      }};
    }}
  """


def format_date(date: datetime | str, style: str = "short", now: datetime | None = None) -> str:
    """
    Format a date for display.

    Args:
        date: datetime or ISO 8601 string
        style: 'short' ("Jan 5, 2026"), 'long' ("Monday, January 5, 2026") or 'relative'
        now: Reference time for the 'relative' style

    Raises:
        ValueError: If style is unknown
    """
    if style == "relative":
        return time_ago(date, now=now)

    value = _as_datetime(date)

    if style == "long":
        return f"{value:%A}, {value:%B} {value.day}, {value.year}"
    if style == "short":
        return f"{value:%b} {value.day}, {value.year}"

    raise ValueError(f"Unknown date style: {style}")
