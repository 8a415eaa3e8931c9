"""
Base Validation Exception for lumui

Raised by helpers that accept a narrow input format (hex colors).
"""


class ValidationError(ValueError):
    """
    Raised when input validation fails.

    Subclasses ValueError so callers can treat it as a plain bad-argument error.
    """

    pass
