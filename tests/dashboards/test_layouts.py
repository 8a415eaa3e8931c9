"""
Tests for layout components
"""

import pytest

from lumui.dashboards.components.layouts import (
    card_wrapper,
    container,
    flex,
    grid,
    head,
    page,
    page_header,
    section,
    stack,
)
from lumui.framework.theme import create_theme


class TestHead:
    """Tests for head() and page()"""

    def test_default_head(self):
        html = head("Dashboard")
        assert "<title>Dashboard</title>" in html
        assert "--brand-primary: #FF4D8D;" in html
        assert "tailwind.config" in html
        assert "htmx.org" in html
        assert "alpinejs" in html
        assert '<meta name="theme-color" content="#0A0A0F">' in html

    def test_theme_applied(self):
        html = head("Dashboard", theme=create_theme({"brand": {"primary": "#2563EB"}}))
        assert "--brand-primary: #2563EB;" in html
        assert "primary: '#2563EB'" in html

    def test_raw_overrides_win(self):
        html = head("x", css_variables_override=":root { --custom: 1; }", tailwind_config_override="tailwind.config = {}")
        assert ":root { --custom: 1; }" in html
        assert "--brand-primary" not in html
        assert "tailwind.config = {}" in html

    def test_title_escaped_and_optional_meta(self):
        html = head("<Ops>", description="Ops view", favicon="/icon.svg")
        assert "<title>&lt;Ops&gt;</title>" in html
        assert 'content="Ops view"' in html
        assert 'href="/icon.svg"' in html

    def test_extra_head(self):
        assert "<script src=\"/x.js\"></script>" in head("x", extra_head='<script src="/x.js"></script>')

    def test_page_document(self):
        html = page(head("x"), "<main>body</main>")
        assert html.startswith("<!DOCTYPE html>")
        assert "<main>body</main>" in html
        assert '<html lang="en"' in html


class TestStructure:
    """Tests for structural wrappers"""

    def test_page_header(self):
        html = page_header("Dashboard", subtitle="Welcome", actions="<button>New</button>")
        assert ">Dashboard</h2>" in html
        assert "<button>New</button>" in html

    @pytest.mark.parametrize("cols, expected", [(1, "grid-cols-1 "), (3, "lg:grid-cols-3"), (6, "lg:grid-cols-6")])
    def test_grid_columns(self, cols, expected):
        assert expected in grid("x", cols)

    def test_grid_unknown_columns_falls_back(self):
        assert "lg:grid-cols-4" in grid("x", 9)

    def test_section(self):
        html = section("Recent", "<ul></ul>", subtitle="Latest")
        assert ">Recent</h3>" in html
        assert "<ul></ul>" in html
        assert "Latest" in html

    def test_flex(self):
        html = flex("x", direction="col", gap=2, justify="between", align="start", wrap=True)
        assert 'class="flex flex-col gap-2 justify-between items-start flex-wrap"' in html

    def test_flex_invalid(self):
        with pytest.raises(ValueError):
            flex("x", direction="diagonal")
        with pytest.raises(ValueError):
            flex("x", justify="evenly")

    def test_container(self):
        assert "max-w-screen-2xl" in container("x", size="2xl")
        assert "max-w-full" in container("x", size="full")

    def test_stack(self):
        assert stack("x", gap=6) == '<div class="flex flex-col gap-6">x</div>'

    def test_card_wrapper(self):
        assert card_wrapper("x").startswith("<div")
        assert card_wrapper("x", href="/a", css_class="extra").startswith('<a href="/a"')
