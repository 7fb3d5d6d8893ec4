"""Presentation ordering for selected items.

Models attend less to the middle of a long context than to its start and
end.  :func:`arrange_items` places the most important items at both edges
and lets the least important ones sink to the middle.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from context_assembler.models.context import ContentItem

# At or below this many items, reordering gains nothing.
MIN_ITEMS_TO_ARRANGE = 3


def arrange_items(items: Sequence[ContentItem]) -> list[ContentItem]:
    """Interleave the most important items between the front and the back.

    Sort by importance (descending, stable) and split at ``ceil(n / 2)``.
    Output is: even positions of the top half, then the whole bottom half,
    then odd positions of the top half.  Importances ``[.9, .8, .7, .6, .5]``
    come out as ``[.9, .7, .6, .5, .8]``.
    """
    if len(items) <= MIN_ITEMS_TO_ARRANGE:
        return list(items)

    ranked = sorted(items, key=lambda item: item.importance, reverse=True)
    half = math.ceil(len(ranked) / 2)
    top = ranked[:half]
    return top[0::2] + ranked[half:] + top[1::2]


def arrange_chronologically(items: Sequence[ContentItem]) -> list[ContentItem]:
    """Oldest first."""
    return sorted(items, key=lambda item: item.timestamp)
