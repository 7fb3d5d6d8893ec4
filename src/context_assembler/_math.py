"""Shared math utilities for context-assembler."""

from __future__ import annotations

import math

from context_assembler.exceptions import InvalidInputError


def clamp(value: float, lo: float = 0.0, hi: float = 1.0) -> float:
    """Clamp a value to [lo, hi]."""
    return max(lo, min(hi, value))


def require_non_negative(name: str, value: float) -> float:
    """Return *value* unchanged, or raise if it is negative or not finite."""
    if not math.isfinite(value):
        msg = f"{name} must be a finite number, got {value!r}"
        raise InvalidInputError(msg)
    if value < 0:
        msg = f"{name} must be non-negative, got {value!r}"
        raise InvalidInputError(msg)
    return value
