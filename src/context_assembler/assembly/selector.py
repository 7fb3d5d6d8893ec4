"""Greedy score-ordered selection under a single sub-budget."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import UTC, datetime

from context_assembler._math import require_non_negative
from context_assembler.models.context import ContentItem
from context_assembler.scoring import exponential_recency

logger = logging.getLogger(__name__)


def composite_score(
    item: ContentItem,
    *,
    importance_weight: float = 0.7,
    recency_weight: float = 0.3,
    now: datetime | None = None,
) -> float:
    """``importance_weight * importance + recency_weight * exp(-age_days / 30)``."""
    return importance_weight * item.importance + recency_weight * exponential_recency(
        item.timestamp, now
    )


def select_items(
    items: Sequence[ContentItem],
    sub_budget: int,
    *,
    importance_weight: float = 0.7,
    recency_weight: float = 0.3,
    now: datetime | None = None,
) -> list[ContentItem]:
    """Pick the highest-scoring items whose token sizes fit in *sub_budget*.

    Items are ranked by :func:`composite_score` (ties keep input order) and
    walked once.  An item that does not fit is skipped without stopping the
    walk, so smaller items further down can still fill the gap.  This is a
    greedy fill, not an optimal knapsack.

    Parameters:
        items: Candidate items, typically all from one category.
        sub_budget: Token budget for this call.
        importance_weight: Weight of the item's importance.
        recency_weight: Weight of the exponential recency score.
        now: Reference instant for ages; the current UTC time if omitted.

    Returns:
        The kept items in score order (highest first).

    Raises:
        InvalidInputError: If the budget or either weight is negative or
            not finite.
    """
    require_non_negative("sub_budget", sub_budget)
    require_non_negative("importance_weight", importance_weight)
    require_non_negative("recency_weight", recency_weight)

    if not items or sub_budget == 0:
        return []

    if now is None:
        now = datetime.now(UTC)
    ranked = sorted(
        items,
        key=lambda item: composite_score(
            item,
            importance_weight=importance_weight,
            recency_weight=recency_weight,
            now=now,
        ),
        reverse=True,
    )

    selected: list[ContentItem] = []
    used = 0
    for item in ranked:
        if used + item.estimated_tokens <= sub_budget:
            selected.append(item)
            used += item.estimated_tokens

    logger.debug(
        "Selected %d/%d items (%d/%d tokens)", len(selected), len(items), used, sub_budget
    )
    return selected
