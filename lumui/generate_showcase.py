#!/usr/bin/env python3
"""
Generate the static lumui showcase.

Writes two pages into the output directory:
    - index.html: the demo dashboard
    - showcase.html: every component with sample data, plus the token reference

Usage:
    python -m lumui.generate_showcase ./showcase
    python -m lumui.generate_showcase ./showcase --brand-primary "#2563EB"
"""

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from lumui.api.pages import render_dashboard
from lumui.api.sample_data import TRAFFIC_SOURCES, USERS_SPARKLINE, WEEKLY_TRAFFIC
from lumui.core import ConfigurationError, get_config, get_logger, setup_logging
from lumui.dashboards.components import (
    TableColumn,
    alert,
    alert_banner,
    avatar,
    badge,
    bar_chart,
    button,
    card,
    chart_card,
    container,
    divider,
    donut_chart,
    gauge_chart,
    grid,
    head,
    line_chart,
    metric_card_with_trend,
    page,
    page_header,
    progress_bar,
    progress_ring,
    section,
    sparkline,
    spinner,
    stack,
    stat_card,
    status_badge,
    status_dot,
    status_indicator,
    table,
    text_input,
    time_range_selector,
)
from lumui.dashboards.components.metrics import BannerAction
from lumui.framework.theme import Theme, create_theme, get_token_docs
from lumui.security import safe_html

logger = get_logger(__name__)


def _row(*fragments: str) -> str:
    return f'<div class="flex flex-wrap items-center gap-3">{"".join(fragments)}</div>'


def _token_reference(theme: Theme) -> str:
    rows = []
    for group, slots in get_token_docs().items():
        for slot, description in slots.items():
            rows.append({"token": f"{group}.{slot}", "description": description})

    return table(
        [
            TableColumn("token", "Token", css_class="font-mono text-[var(--brand-primary)]"),
            TableColumn("description", "Usage"),
        ],
        rows,
    ) + f'<pre class="mt-4 text-xs text-[var(--text-muted)] overflow-x-auto">{safe_html(theme.css_variables)}</pre>'


def generate_showcase(theme: Theme | None = None) -> str:
    """
    Render the component showcase page.

    Args:
        theme: Theme for the page (default theme if omitted)

    Returns:
        Full HTML document
    """
    theme = theme or create_theme()

    header = page_header(
        "lumui Component Showcase",
        subtitle="Every component rendered server-side from plain Python functions.",
        actions=button("Back to dashboard", href="./index.html", variant="ghost"),
    )

    buttons = section(
        "Buttons",
        stack(
            _row(*(button(v.title(), variant=v) for v in ("primary", "secondary", "ghost", "danger", "success")))
            + _row(
                button("Small", size="sm"),
                button("Medium", size="md"),
                button("Large", size="lg"),
                button("Download", icon="download", variant="secondary"),
                button("Disabled", disabled=True),
            )
        ),
        "Variants, sizes and icons",
    )

    feedback = section(
        "Feedback",
        stack(
            alert("Deployment finished.", type="success", title="Success")
            + alert("Disk usage above 80%.", type="warning", dismissible=True)
            + alert_banner(
                "Elevated error rate",
                severity="critical",
                message="5xx responses are above the SLO.",
                action=BannerAction("View incident", "#"),
                dismissible=True,
            )
            + _row(
                badge("Default"),
                badge("Success", color="success", dot=True),
                badge("Warning", color="warning"),
                badge("Brand", color="brand", size="md"),
                status_badge("Running"),
                status_badge("Pending"),
                status_badge("Failed"),
                status_dot("online", pulse=True),
                status_indicator("degraded"),
            )
            + _row(spinner("sm"), spinner("md", text="Loading"), avatar("Ada Lovelace"), avatar(email="ops@example.com", size="lg"))
        ),
    )

    forms = section(
        "Forms",
        grid(
            text_input("email", type="email", label="Email", placeholder="you@example.com", required=True)
            + text_input("search", placeholder="Search", icon="search", help_text="Filter by name")
            + text_input("token", label="API token", value="abc", error="Token expired"),
            3,
        ),
    )

    charts = section(
        "Charts",
        grid(
            chart_card("Line", line_chart(WEEKLY_TRAFFIC))
            + chart_card("Bar", bar_chart(WEEKLY_TRAFFIC, labels=[p.label for p in WEEKLY_TRAFFIC]))
            + chart_card("Donut", donut_chart(TRAFFIC_SOURCES, center_text="100%", center_subtext="Total"))
            + chart_card(
                "Gauges",
                _row(gauge_chart(42, label="CPU"), gauge_chart(71, label="Memory"), gauge_chart(93, label="Disk")),
                actions=time_range_selector("24h"),
            ),
            2,
        )
        + divider("Inline")
        + _row(
            sparkline(USERS_SPARKLINE, width=120, height=32),
            progress_ring(68, label="Quota"),
            f'<div class="w-48">{progress_bar(68, color="success", show_label=True)}</div>',
        ),
    )

    cards = section(
        "Cards",
        grid(
            card("<p class='text-sm text-[var(--text-muted)]'>Plain functions, no build step.</p>", title="Zero build step", icon="check")
            + card("<p class='text-sm text-[var(--text-muted)]'>hx-* attributes on metric cards.</p>", title="HTMX ready", status="New")
            + stat_card("Server Status", "Healthy", status="online")
            + metric_card_with_trend("Error rate", "0.4%", trend="down", trend_value="-0.1%"),
            4,
        ),
    )

    tokens = section("Theme tokens", _token_reference(theme), "Override any slot with create_theme()")

    body = container(header + buttons + feedback + forms + charts + cards + tokens, size="2xl")
    return page(head("lumui Component Showcase", description="Visual showcase of lumui components", theme=theme), body)


def generate_showcase_files(output_dir: Path, theme: Theme | None = None) -> list[Path]:
    """
    Write index.html and showcase.html into output_dir (created if missing).

    Returns:
        Paths of the written files

    Raises:
        OSError: If the directory or files cannot be written
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    pages = {
        "index.html": render_dashboard(theme),
        "showcase.html": generate_showcase(theme),
    }

    written = []
    for name, html in pages.items():
        path = output_dir / name
        path.write_text(html, encoding="utf-8")
        logger.info("Page written", extra={"path": str(path), "bytes": len(html)})
        written.append(path)
    return written


def parse_arguments(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Returns:
        Namespace: Parsed arguments
    """
    parser = argparse.ArgumentParser(description="Generate the static lumui showcase pages")

    parser.add_argument("output_dir", nargs="?", default="./showcase", help="Output directory (default: ./showcase)")
    parser.add_argument("--brand-primary", default=None, help="Override brand.primary (#RRGGBB)")
    parser.add_argument("--brand-secondary", default=None, help="Override brand.secondary (#RRGGBB)")
    parser.add_argument("--brand-accent", default=None, help="Override brand.accent (#RRGGBB)")
    parser.add_argument("--log-level", default="INFO", help="Logging level (default: INFO)")

    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """
    Entry point for the showcase generator.

    Brand colors come from LUMUI_BRAND_* (.env) and are overridden by the
    command-line flags.

    Returns:
        0 on success, 1 on an invalid brand color or if the pages could not be written
    """
    args = parse_arguments(argv)
    setup_logging(level=args.log_level.upper())

    try:
        overrides = get_config().get_theme_overrides()
        brand = dict(overrides.get("brand", {}))
        for slot in ("primary", "secondary", "accent"):
            value = getattr(args, f"brand_{slot}")
            if value:
                brand[slot] = value
        theme = create_theme({"brand": brand} if brand else None)
    except (ConfigurationError, ValueError) as e:
        logger.error(f"Invalid theme configuration: {e}")
        return 1

    try:
        written = generate_showcase_files(Path(args.output_dir), theme)
    except OSError as e:
        logger.error(f"Failed to write showcase: {e}", exc_info=True)
        return 1

    logger.info("Showcase generated", extra={"output_dir": args.output_dir, "files": len(written)})
    return 0


if __name__ == "__main__":
    sys.exit(main())
