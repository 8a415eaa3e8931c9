"""
Jinja2 Template Engine for Component Markup

Loads the component templates shipped in lumui/templates and renders them
with automatic HTML escaping. Plain text arguments are escaped; fragments
produced by other renderers must be wrapped with mark_safe() first.

Usage:
    from lumui.template_engine import render_template

    html = render_template("components/badge.html", text="Beta", classes="...")
"""

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup


class TemplateEngine:
    """
    Template engine with autoescaping enabled for .html templates.
    """

    def __init__(self, template_dir: Path | str | None = None):
        """
        Initialize template engine.

        Args:
            template_dir: Directory containing templates (default: lumui/templates)
        """
        if template_dir is None:
            template_dir = Path(__file__).parent / "templates"

        self.template_dir = Path(template_dir)

        self.env = Environment(
            loader=FileSystemLoader(self.template_dir),
            autoescape=select_autoescape(["html", "xml"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render(self, template_name: str, **context: Any) -> str:
        """
        Render a template with given context.

        Args:
            template_name: Template path relative to the templates dir
            **context: Template variables

        Returns:
            Rendered HTML string
        """
        template = self.env.get_template(template_name)
        return template.render(**context)


_engine: TemplateEngine | None = None


def get_template_engine() -> TemplateEngine:
    """
    Get the global template engine instance (singleton pattern).
    """
    global _engine
    if _engine is None:
        _engine = TemplateEngine()
    return _engine


def render_template(template_name: str, **context: Any) -> str:
    """
    Convenience function to render a package template.

    Example:
        html = render_template("components/spinner.html", size_class="h-6 w-6", text=None)
    """
    return get_template_engine().render(template_name, **context)


def mark_safe(fragment: str | None) -> Markup | None:
    """Mark an already-rendered fragment as safe for template insertion."""
    if fragment is None:
        return None
    return Markup(fragment)
