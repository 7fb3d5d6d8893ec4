"""Output formatters for assembled context windows."""

from .text import TextFormatter, format_window, formatter_for

__all__ = [
    "TextFormatter",
    "format_window",
    "formatter_for",
]
