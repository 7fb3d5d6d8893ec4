"""Custom exceptions for context-assembler."""

from __future__ import annotations

__all__ = [
    "ContextAssemblerError",
    "FormatterError",
    "InvalidInputError",
]


class ContextAssemblerError(Exception):
    """Base exception for all context-assembler errors."""


class InvalidInputError(ContextAssemblerError, ValueError):
    """Raised when a budget, weight or record value is rejected at the boundary.

    Subclasses ``ValueError`` so callers that already guard numeric input
    with ``except ValueError`` keep working.
    """


class FormatterError(ContextAssemblerError):
    """Raised when formatting a context window fails."""
