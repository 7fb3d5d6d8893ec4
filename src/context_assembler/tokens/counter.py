"""Exact token counting backed by tiktoken."""

from __future__ import annotations

import functools
from collections import OrderedDict

# Texts at least this long are counted but not memoised.
MAX_MEMO_CHARS = 10_000


class TiktokenCounter:
    """Exact :class:`~context_assembler.protocols.Tokenizer` using tiktoken.

    Candidate pools are re-assembled every turn with mostly the same
    records, so counts are memoised per text in a least-recently-used table
    of ``max_cache_size`` entries.  Record text is counted as plain text:
    strings such as ``<|endoftext|>`` inside a memory or a turn are encoded
    like any other characters instead of being rejected as special tokens.

    Requires the ``tiktoken`` extra; the import happens on construction.
    """

    __slots__ = ("_cache", "_encoding", "_max_cache_size")

    def __init__(self, encoding_name: str = "cl100k_base", max_cache_size: int = 4_096) -> None:
        try:
            import tiktoken
        except ImportError:
            msg = (
                "Exact token counting needs tiktoken. "
                "Install it with: pip install context-assembler[tiktoken], "
                "or use CharacterEstimator / WordEstimator instead"
            )
            raise ImportError(msg) from None

        self._encoding = tiktoken.get_encoding(encoding_name)
        self._max_cache_size = max_cache_size
        self._cache: OrderedDict[str, int] = OrderedDict()

    @property
    def encoding_name(self) -> str:
        return self._encoding.name

    def count_tokens(self, text: str) -> int:
        cached = self._cache.get(text)
        if cached is not None:
            self._cache.move_to_end(text)
            return cached

        count = len(self._encoding.encode(text, disallowed_special=()))
        if len(text) < MAX_MEMO_CHARS and self._max_cache_size > 0:
            self._cache[text] = count
            if len(self._cache) > self._max_cache_size:
                self._cache.popitem(last=False)
        return count

    def __repr__(self) -> str:
        return f"{type(self).__name__}(encoding={self.encoding_name!r})"


@functools.cache
def get_exact_counter() -> TiktokenCounter:
    """Shared :class:`TiktokenCounter` for the CLI's ``--exact`` flag.

    Raises:
        ImportError: If tiktoken is not installed.
    """
    return TiktokenCounter()
