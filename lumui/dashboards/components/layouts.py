"""
Layout components

Page scaffolding (head, full page) and structural wrappers. Wrappers take
already-rendered child fragments and insert them without escaping.
"""

from lumui.domain.variants import Align, ContainerSize, Justify
from lumui.framework import get_page_framework
from lumui.framework.theme import Theme
from lumui.security import safe_attr
from lumui.template_engine import mark_safe, render_template


def head(
    title: str,
    description: str | None = None,
    favicon: str | None = None,
    theme_color: str = "#0A0A0F",
    theme: Theme | None = None,
    css_variables_override: str | None = None,
    tailwind_config_override: str | None = None,
    extra_head: str = "",
) -> str:
    """
    Generate the <head> element with critical CSS and runtime scripts.

    Args:
        title: Page title
        description: Optional meta description
        favicon: Optional SVG favicon URL
        theme_color: Browser UI color
        theme: Theme providing the CSS variables and Tailwind config (default theme if omitted)
        css_variables_override: Raw CSS variable block used instead of the theme's
        tailwind_config_override: Raw Tailwind config used instead of the theme's
        extra_head: Additional markup appended to the head (e.g. chart_scripts())

    Returns:
        HTML string for the <head> element

    Example:
        theme = create_theme({"brand": {"primary": "#2563EB"}})
        html = head("Ops Dashboard", theme=theme, extra_head=chart_scripts())
    """
    styles, scripts = get_page_framework(
        theme=theme,
        css_variables=css_variables_override,
        tailwind_config=tailwind_config_override,
    )
    return render_template(
        "layouts/head.html",
        title=title,
        description=description,
        favicon=favicon,
        theme_color=theme_color,
        styles=mark_safe(styles),
        scripts=mark_safe(scripts),
        extra_head=mark_safe(extra_head),
    )


def page(head_html: str, body: str, lang: str = "en") -> str:
    """Assemble a full HTML document from a head() fragment and body markup."""
    return render_template("layouts/page.html", head=mark_safe(head_html), body=mark_safe(body), lang=lang)


def page_header(title: str, subtitle: str | None = None, actions: str | None = None) -> str:
    return render_template("layouts/page_header.html", title=title, subtitle=subtitle, actions=mark_safe(actions))


GRID_COLUMNS = {
    1: "grid-cols-1",
    2: "grid-cols-1 sm:grid-cols-2",
    3: "grid-cols-1 sm:grid-cols-2 lg:grid-cols-3",
    4: "grid-cols-1 sm:grid-cols-2 lg:grid-cols-4",
    5: "grid-cols-1 sm:grid-cols-2 lg:grid-cols-5",
    6: "grid-cols-1 sm:grid-cols-2 md:grid-cols-3 lg:grid-cols-6",
}


def grid(children: str, cols: int = 4) -> str:
    """Responsive grid; unsupported column counts fall back to 4."""
    return f'<div class="grid {GRID_COLUMNS.get(cols, GRID_COLUMNS[4])} gap-4">{children}</div>'


def section(title: str, children: str, subtitle: str | None = None) -> str:
    return render_template("layouts/section.html", title=title, children=mark_safe(children), subtitle=subtitle)


def flex(
    children: str,
    direction: str = "row",
    gap: int = 4,
    justify: Justify | str = Justify.START,
    align: Align | str = Align.CENTER,
    wrap: bool = False,
) -> str:
    """
    Flex container.

    Args:
        children: Inner markup
        direction: row or col
        gap: Tailwind gap step
        justify: start, end, center, between or around
        align: start, end, center or stretch
        wrap: Allow wrapping
    """
    if direction not in ("row", "col"):
        raise ValueError(f"flex direction must be 'row' or 'col', got {direction!r}")

    dir_class = "flex-col" if direction == "col" else "flex-row"
    justify_class = f"justify-{Justify(justify).value}"
    align_class = f"items-{Align(align).value}"
    wrap_class = "flex-wrap" if wrap else ""
    return f'<div class="flex {dir_class} gap-{gap} {justify_class} {align_class} {wrap_class}">{children}</div>'


CONTAINER_WIDTHS = {
    ContainerSize.SM: "max-w-screen-sm",
    ContainerSize.MD: "max-w-screen-md",
    ContainerSize.LG: "max-w-screen-lg",
    ContainerSize.XL: "max-w-screen-xl",
    ContainerSize.XXL: "max-w-screen-2xl",
    ContainerSize.FULL: "max-w-full",
}


def container(children: str, size: ContainerSize | str = ContainerSize.XL) -> str:
    """Centered container with a max width and responsive horizontal padding."""
    return f'<div class="mx-auto px-4 sm:px-6 lg:px-8 {CONTAINER_WIDTHS[ContainerSize(size)]}">{children}</div>'


def stack(children: str, gap: int = 4) -> str:
    """Vertical layout with consistent spacing."""
    return f'<div class="flex flex-col gap-{gap}">{children}</div>'


def card_wrapper(children: str, href: str | None = None, css_class: str = "") -> str:
    """Glass card around arbitrary content; an anchor when href is given."""
    base_class = (
        "block bg-[var(--surface-1)]/70 backdrop-blur-xl rounded-lg border border-[var(--border-default)] "
        "hover:border-[var(--border-hover)] hover:shadow-[var(--shadow-glow)] transition-all duration-200 p-6 "
        f"{css_class}"
    )
    if href:
        return f'<a href="{safe_attr(href)}" class="{base_class}">{children}</a>'
    return f'<div class="{base_class}">{children}</div>'
