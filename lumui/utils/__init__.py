"""
Display utilities shared by renderers and callers.
"""

from lumui.security import safe_html as escape_html

from .formatting import (
    debounce_script,
    format_bytes,
    format_date,
    format_duration,
    format_number,
    format_percent,
    get_status_color,
    pluralize,
    round_half_up,
    simple_hash,
    time_ago,
    to_base36,
    truncate,
)

__all__ = [
    "debounce_script",
    "escape_html",
    "format_bytes",
    "format_date",
    "format_duration",
    "format_number",
    "format_percent",
    "get_status_color",
    "pluralize",
    "round_half_up",
    "simple_hash",
    "time_ago",
    "to_base36",
    "truncate",
]
