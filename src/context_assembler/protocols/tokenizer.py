"""Tokenizer protocol for token counting abstraction."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Tokenizer(Protocol):
    """Protocol for token counting.

    The engine only ever needs an approximate size for budgeting, so the
    default implementations are the character and word estimators in
    :mod:`context_assembler.tokens.estimators`.  Any object with a matching
    ``count_tokens`` method (tiktoken, HuggingFace tokenizers, sentencepiece)
    can be used instead.
    """

    def count_tokens(self, text: str) -> int:
        """Count the number of tokens in a text string.

        Parameters:
            text: The input text to measure.

        Returns:
            A non-negative token count.  Empty text counts as 0.
        """
        ...
