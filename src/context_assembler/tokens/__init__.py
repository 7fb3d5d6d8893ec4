"""Token counting utilities."""

from .counter import TiktokenCounter, get_exact_counter
from .estimators import (
    CharacterEstimator,
    WordEstimator,
    estimate_tokens,
    estimate_tokens_accurate,
)

__all__ = [
    "CharacterEstimator",
    "TiktokenCounter",
    "WordEstimator",
    "estimate_tokens",
    "estimate_tokens_accurate",
    "get_exact_counter",
]
