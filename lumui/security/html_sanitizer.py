"""
HTML Sanitizer for XSS Prevention

Escapes text that renderers interpolate into markup built with f-strings
(chart labels, table cells, legend entries). Components rendered through
Jinja2 templates are auto-escaped and do not need this.
"""


class HTMLSanitizer:
    """
    Escapes text for HTML body and HTML attribute contexts.
    """

    # HTML entities that must be escaped ('&' first so entities are not double-escaped)
    HTML_ESCAPES = {
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        '"': "&quot;",
        "'": "&#039;",
    }

    @staticmethod
    def escape_html(text: object | None) -> str:
        """
        Escape HTML special characters.

        Args:
            text: Text to escape (may be None or a non-string value)

        Returns:
            Escaped text safe for HTML context

        Example:
            >>> HTMLSanitizer.escape_html("<b>'hi'</b>")
            '&lt;b&gt;&#039;hi&#039;&lt;/b&gt;'
        """
        if text is None:
            return ""

        text = str(text)

        for char, escape in HTMLSanitizer.HTML_ESCAPES.items():
            text = text.replace(char, escape)

        return text

    @staticmethod
    def escape_html_attribute(text: object | None) -> str:
        """
        Escape text for use in a double-quoted HTML attribute.

        Control characters other than newline and tab are dropped.
        """
        if text is None:
            return ""

        text = "".join(char for char in str(text) if ord(char) >= 32 or char in "\n\t")

        return HTMLSanitizer.escape_html(text)
