"""Heuristic token estimators.

Both estimators are pure functions of a string and never raise.  They are
approximations for budgeting only; exact counts are available through
:class:`~context_assembler.tokens.counter.TiktokenCounter`.
"""

from __future__ import annotations

import math

CHARS_PER_TOKEN = 4
WORDS_PER_TOKEN = 0.75


def estimate_tokens(text: str) -> int:
    """Estimate tokens as one token per four characters, rounded up."""
    return math.ceil(len(text) / CHARS_PER_TOKEN)


def estimate_tokens_accurate(text: str) -> int:
    """Estimate tokens from the whitespace-delimited word count.

    Roughly 0.75 words per token for English prose.  Whitespace-only text
    has no words and yields 0.
    """
    return math.ceil(len(text.split()) / WORDS_PER_TOKEN)


class CharacterEstimator:
    """Tokenizer-protocol wrapper around :func:`estimate_tokens`."""

    __slots__ = ()

    def count_tokens(self, text: str) -> int:
        return estimate_tokens(text)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class WordEstimator:
    """Tokenizer-protocol wrapper around :func:`estimate_tokens_accurate`."""

    __slots__ = ()

    def count_tokens(self, text: str) -> int:
        return estimate_tokens_accurate(text)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
