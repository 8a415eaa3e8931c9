"""
Table components for dashboards

Provides data tables, status badges/dots, ranked lists and activity feeds.
Text from rows and items is escaped; custom cell renderers return markup
that is inserted as-is.
"""

from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Protocol

from lumui.domain.lists import ActivityItem, RankedItem
from lumui.domain.status import STATUS_BADGE_RULES, classify_status
from lumui.domain.variants import ActivityStatus, DotStatus, StatusColor
from lumui.security import safe_attr, safe_html

Row = Mapping[str, Any]


class CellRenderer(Protocol):
    """Renders one table cell to markup."""

    def __call__(self, value: Any, row: Row) -> str: ...


def default_cell(value: Any, row: Row) -> str:
    """Stringify and escape a cell value; None renders as an empty cell."""
    return "" if value is None else safe_html(value)


@dataclass(frozen=True)
class TableColumn:
    """
    Column definition for table().

    Attributes:
        key: Row key read for the cell value
        header: Header text
        render: Optional CellRenderer (value, row) -> markup
        css_class: Extra classes for the <td>
        header_class: Extra classes for the <th>
    """

    key: str
    header: str
    render: CellRenderer | None = None
    css_class: str = ""
    header_class: str = ""

    def cell(self, row: Row) -> str:
        renderer = self.render or default_cell
        return renderer(row.get(self.key), row)


def _empty(message: str) -> str:
    return f'<p class="text-[var(--text-subtle)] text-sm">{safe_html(message)}</p>'


def table(
    columns: Sequence[TableColumn],
    data: Sequence[Row],
    empty_message: str = "No data available",
    css_class: str = "",
    row_class: str | Callable[[Row], str] = "",
) -> str:
    """
    Generate a data table.

    Args:
        columns: Column definitions
        data: Rows as mappings keyed by TableColumn.key
        empty_message: Text shown instead of the table when data is empty
        css_class: Extra classes for the <table>
        row_class: Extra classes per row, or a callable computing them from the row

    Returns:
        HTML string for the table

    Example:
        columns = [
            TableColumn("name", "Service"),
            TableColumn("status", "Status", render=lambda v, row: status_badge(v)),
        ]
        html = table(columns, [{"name": "api", "status": "Running"}])
    """
    if not data:
        return _empty(empty_message)

    header_row = "".join(
        f'<th class="pb-2 font-medium {col.header_class}">{safe_html(col.header)}</th>' for col in columns
    )

    body_rows = []
    for row in data:
        cells = "".join(f'<td class="py-2 {col.css_class}">{col.cell(row)}</td>' for col in columns)
        extra = row_class(row) if callable(row_class) else row_class
        body_rows.append(
            f'<tr class="border-b border-[var(--border-default)] hover:bg-[var(--surface-2)]/50 {extra}">{cells}</tr>'
        )

    return f"""
    <div class="overflow-x-auto">
      <table class="w-full text-sm {css_class}">
        <thead>
          <tr class="text-left text-[var(--text-subtle)] border-b border-[var(--border-default)]">
            {header_row}
          </tr>
        </thead>
        <tbody>
          {"".join(body_rows)}
        </tbody>
      </table>
    </div>
  """


STATUS_BADGE_CLASSES = {
    StatusColor.SUCCESS: "bg-[var(--status-success)]/20 text-[var(--status-success)]",
    StatusColor.WARNING: "bg-[var(--status-warning)]/20 text-[var(--status-warning)]",
    StatusColor.ERROR: "bg-[var(--status-error)]/20 text-[var(--status-error)]",
    StatusColor.INFO: "bg-[var(--status-info)]/20 text-[var(--status-info)]",
    StatusColor.DEFAULT: "bg-[var(--surface-3)] text-[var(--text-secondary)]",
}


def status_badge(status: str, variant: StatusColor | str | None = None) -> str:
    """
    Pill badge for a status string.

    When no variant is given the color is detected from the text
    (e.g. "Running" is success, "Pending" warning, "Failed" error).
    """
    color = StatusColor(variant) if variant else classify_status(status, STATUS_BADGE_RULES)
    return f'<span class="px-2 py-0.5 text-xs rounded-full {STATUS_BADGE_CLASSES[color]}">{safe_html(status)}</span>'


def status_dot(status: DotStatus | str, pulse: bool = False) -> str:
    """Small colored dot; pulse only animates the online state."""
    status = DotStatus(status)
    colors = {
        DotStatus.ONLINE: "bg-[var(--status-success)]",
        DotStatus.WARNING: "bg-[var(--status-warning)]",
        DotStatus.OFFLINE: "bg-[var(--status-error)]",
        DotStatus.PENDING: "bg-[var(--text-subtle)]",
    }
    animation = "animate-pulse" if pulse and status is DotStatus.ONLINE else ""
    return f'<span class="w-2 h-2 rounded-full {colors[status]} {animation}"></span>'


def ranked_list(items: Iterable[Any], empty_message: str = "No data") -> str:
    """
    Numbered list of label/value rows, ranked in the given order.

    Args:
        items: RankedItem values (or mappings with label, value, sublabel)
        empty_message: Text shown when there are no items
    """
    entries = [RankedItem.coerce(item) for item in items]
    if not entries:
        return _empty(empty_message)

    rows = []
    for rank, item in enumerate(entries, start=1):
        sublabel = (
            f'<span class="text-[var(--text-subtle)] text-xs ml-2">{safe_html(item.sublabel)}</span>'
            if item.sublabel
            else ""
        )
        rows.append(
            f"""
        <div class="flex items-center justify-between p-2 rounded-md bg-[var(--surface-2)]/50">
          <div class="flex items-center gap-3">
            <span class="w-6 h-6 flex items-center justify-center rounded-full bg-[var(--surface-3)] text-xs text-[var(--text-muted)]">{rank}</span>
            <div>
              <span class="text-white">{safe_html(item.label)}</span>
              {sublabel}
            </div>
          </div>
          <span class="text-[var(--brand-primary)] font-mono">{safe_html(item.value)}</span>
        </div>
      """
        )

    return f"""
    <div class="space-y-2">
      {"".join(rows)}
    </div>
  """


ACTIVITY_DOT_CLASSES = {
    ActivityStatus.SUCCESS: "bg-[var(--status-success)]",
    ActivityStatus.FAILURE: "bg-[var(--status-error)]",
    ActivityStatus.PENDING: "bg-[var(--text-subtle)]",
    ActivityStatus.RUNNING: "bg-[var(--brand-primary)] animate-pulse",
}


def _activity_entry(item: ActivityItem) -> str:
    dot = f'<span class="w-2 h-2 rounded-full {ACTIVITY_DOT_CLASSES[item.status]}"></span>' if item.status else ""
    subtitle = f'<p class="text-[var(--text-subtle)] text-xs">{safe_html(item.subtitle)}</p>' if item.subtitle else ""
    meta = f'<span class="text-[var(--text-muted)] text-sm">{safe_html(item.meta)}</span>' if item.meta else ""

    content = f"""
          <div class="flex items-center justify-between p-2 rounded-md bg-[var(--surface-2)]/50 hover:bg-[var(--surface-2)] transition-colors">
            <div class="flex items-center gap-3">
              {dot}
              <div>
                <p class="text-white text-sm">{safe_html(item.title)}</p>
                {subtitle}
              </div>
            </div>
            {meta}
          </div>
        """
    if item.href:
        return f'<a href="{safe_attr(item.href)}" target="_blank" class="block">{content}</a>'
    return content


def activity_list(items: Iterable[Any], empty_message: str = "No activity", max_height: str = "max-h-80") -> str:
    """
    Scrollable feed of recent activity.

    Args:
        items: ActivityItem values (or mappings of ActivityItem fields)
        empty_message: Text shown when there are no items
        max_height: Tailwind max-height class for the scroll container
    """
    entries = [ActivityItem.coerce(item) for item in items]
    if not entries:
        return _empty(empty_message)

    return f"""
    <div class="space-y-2 {max_height} overflow-y-auto">
      {"".join(_activity_entry(item) for item in entries)}
    </div>
  """
