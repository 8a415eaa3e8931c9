"""
Security Utilities for Markup Generation

Package Structure:
    - validation: ValidationError exception
    - html_sanitizer: HTML escaping for XSS prevention

Usage:
    from lumui.security import safe_html, ValidationError

    label_html = f"<span>{safe_html(point.label)}</span>"
"""

from .html_sanitizer import HTMLSanitizer
from .validation import ValidationError


def safe_html(text: object | None) -> str:
    """Convenience wrapper for HTMLSanitizer.escape_html()"""
    return HTMLSanitizer.escape_html(text)


def safe_attr(text: object | None) -> str:
    """Convenience wrapper for HTMLSanitizer.escape_html_attribute()"""
    return HTMLSanitizer.escape_html_attribute(text)


__all__ = [
    "ValidationError",
    "HTMLSanitizer",
    "safe_html",
    "safe_attr",
]
