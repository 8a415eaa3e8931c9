"""
Page Framework - theme tokens, critical CSS and runtime scripts

Package Structure:
    - theme.py: Token generator (CSS variables + Tailwind configuration)
    - base_styles.py: Critical CSS inlined before Tailwind loads
    - javascript.py: Tailwind / Alpine.js / HTMX / uPlot tags
    - icons.py: Inline SVG icon set

Usage::

    from lumui.framework import get_page_framework, create_theme

    styles, scripts = get_page_framework(create_theme({"brand": {"primary": "#2563EB"}}))
"""

from .base_styles import get_base_styles
from .icons import icon, icons
from .javascript import get_chart_scripts, get_resource_hints, get_runtime_scripts
from .theme import (
    CSS_VARIABLES,
    DEFAULT_THEME_CONFIG,
    EFFECTS,
    GLASS,
    GRADIENTS,
    TAILWIND_CONFIG,
    Theme,
    ThemeConfig,
    create_theme,
    default_theme,
    get_theme_variables,
    get_token_docs,
    hex_to_rgba,
)


def get_page_framework(theme=None, css_variables=None, tailwind_config=None):
    """
    Returns the critical <style> block and the runtime <script> tags for a page.

    Args:
        theme: Theme to use (default: the pre-built default theme)
        css_variables: Raw CSS variable block overriding the theme's
        tailwind_config: Raw Tailwind configuration overriding the theme's

    Returns:
        Tuple of (style_html, scripts_html) ready to inject into <head>
    """
    theme = theme or default_theme

    styles = f"""
      <style>
        {get_base_styles()}

        /* CSS Variables */
        {css_variables or theme.css_variables}
      </style>
    """

    scripts = get_resource_hints() + get_runtime_scripts(tailwind_config or theme.tailwind_config)

    return styles, scripts


__all__ = [
    "get_page_framework",
    "get_base_styles",
    "get_resource_hints",
    "get_runtime_scripts",
    "get_chart_scripts",
    "icon",
    "icons",
    "CSS_VARIABLES",
    "DEFAULT_THEME_CONFIG",
    "EFFECTS",
    "GLASS",
    "GRADIENTS",
    "TAILWIND_CONFIG",
    "Theme",
    "ThemeConfig",
    "create_theme",
    "default_theme",
    "get_theme_variables",
    "get_token_docs",
    "hex_to_rgba",
]
