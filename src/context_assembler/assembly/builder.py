"""Window building: convert, select per category, arrange, account."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import UTC, datetime
from typing import NamedTuple

from pydantic import BaseModel, Field

from context_assembler.budget.planner import create_adaptive_budget, create_fixed_budget
from context_assembler.budget.profiles import get_named_budget
from context_assembler.formatters.text import TextFormatter
from context_assembler.models.budget import Budget
from context_assembler.models.context import Category, ContentItem
from context_assembler.models.records import Entity, Lesson, Memory, Message
from context_assembler.models.window import ContextWindow, WindowStats
from context_assembler.protocols.tokenizer import Tokenizer
from context_assembler.scoring import ScoringWeights

from .arranger import arrange_chronologically, arrange_items
from .converters import (
    convert_conversation_items,
    convert_entity_items,
    convert_lesson_items,
    convert_memory_items,
)
from .selector import select_items

logger = logging.getLogger(__name__)

DEFAULT_COMPARISON_MODELS: tuple[str, ...] = ("gpt-3.5-turbo", "gpt-4-turbo", "claude-3.5-sonnet")


class CandidatePool(BaseModel):
    """Already-fetched candidate records for every category."""

    conversation: list[Message] = Field(default_factory=list)
    memories: list[Memory] = Field(default_factory=list)
    lessons: list[Lesson] = Field(default_factory=list)
    entities: list[Entity] = Field(default_factory=list)


class AssembledContext(NamedTuple):
    """Result of :func:`assemble_context`."""

    window: ContextWindow
    formatted: str
    stats: WindowStats


class BudgetComparison(NamedTuple):
    """One row of :func:`compare_budgets`."""

    model: str
    budget: Budget
    stats: WindowStats


def _category_candidates(
    pool: CandidatePool, tokenizer: Tokenizer | None
) -> list[tuple[Category, list[ContentItem]]]:
    return [
        (Category.CONVERSATION, convert_conversation_items(pool.conversation, tokenizer)),
        (Category.MEMORY, convert_memory_items(pool.memories, tokenizer)),
        (Category.LESSON, convert_lesson_items(pool.lessons, tokenizer)),
        (Category.ENTITY, convert_entity_items(pool.entities, tokenizer)),
    ]


def build_window(
    pool: CandidatePool,
    budget: Budget,
    *,
    use_arrangement: bool = True,
    weights: ScoringWeights | None = None,
    tokenizer: Tokenizer | None = None,
    now: datetime | None = None,
) -> ContextWindow:
    """Assemble a context window from a candidate pool under *budget*.

    Every category is converted and then selected against its own
    sub-budget.  The survivors are combined (conversation, memory, lesson,
    entity) and ordered either by :func:`arrange_items` or chronologically.

    Parameters:
        pool: Candidate records per category.
        budget: Sub-budgets to select against.
        use_arrangement: Lost-in-middle arrangement when true, oldest-first
            order otherwise.
        weights: Importance/recency weights; defaults to 0.7 / 0.3.
        tokenizer: Estimator for records without a stored token count.
        now: Reference instant for recency scoring.

    Returns:
        A :class:`ContextWindow` whose ``truncated`` flag is set when any
        category dropped candidates.
    """
    weights = weights or ScoringWeights()
    if now is None:
        now = datetime.now(UTC)

    combined: list[ContentItem] = []
    truncated_categories: list[Category] = []
    for category, candidates in _category_candidates(pool, tokenizer):
        selected = select_items(
            candidates,
            budget.for_category(category),
            importance_weight=weights.importance_weight,
            recency_weight=weights.recency_weight,
            now=now,
        )
        if len(selected) < len(candidates):
            truncated_categories.append(category)
        logger.debug(
            "Category %s: kept %d of %d candidates", category, len(selected), len(candidates)
        )
        combined.extend(selected)

    if use_arrangement:
        items = arrange_items(combined)
    else:
        items = arrange_chronologically(combined)

    return ContextWindow(
        items=items,
        total_tokens=sum(item.estimated_tokens for item in items),
        budget=budget,
        truncated=bool(truncated_categories),
        truncated_categories=truncated_categories,
    )


def window_stats(window: ContextWindow) -> WindowStats:
    """Item counts, token usage and utilisation of the category sub-budgets."""
    counts: dict[str, int] = {}
    for item in window.items:
        counts[item.category.value] = counts.get(item.category.value, 0) + 1

    allocated = window.budget.allocated
    return WindowStats(
        item_count=len(window.items),
        total_tokens=window.total_tokens,
        utilization_ratio=window.total_tokens / allocated if allocated else 0.0,
        budget_remaining=allocated - window.total_tokens,
        counts_by_category=counts,
        truncated=window.truncated,
    )


def assemble_context(
    pool: CandidatePool,
    *,
    budget: Budget | None = None,
    model: str | None = None,
    context_size: int | None = None,
    use_arrangement: bool = True,
    weights: ScoringWeights | None = None,
    formatter: TextFormatter | None = None,
    tokenizer: Tokenizer | None = None,
    now: datetime | None = None,
) -> AssembledContext:
    """Pick a budget, build the window and render it in one call.

    The budget is chosen in this order: an explicit *budget*, the named
    profile for *model*, a fixed-ratio budget for *context_size*, and
    finally an adaptive budget proportional to the pool's candidate counts.

    Parameters:
        pool: Candidate records per category.
        budget: A ready-made budget; wins over every other option.
        model: Named profile identifier (unknown names use the default).
        context_size: Total capacity passed to :func:`create_fixed_budget`.
        use_arrangement: Passed to :func:`build_window`.
        weights: Importance/recency weights.
        formatter: Renderer for the window; grouped without metadata by
            default.
        tokenizer: Estimator for records without a stored token count.
        now: Reference instant for recency scoring.

    Returns:
        An :class:`AssembledContext` with the window, its text and stats.
    """
    if budget is None:
        if model is not None:
            budget = get_named_budget(model)
        elif context_size is not None:
            budget = create_fixed_budget(context_size)
        else:
            budget = create_adaptive_budget(
                conversation_count=len(pool.conversation),
                memory_count=len(pool.memories),
                lesson_count=len(pool.lessons),
                entity_count=len(pool.entities),
            )
    formatter = formatter or TextFormatter(group_by_category=True)

    window = build_window(
        pool,
        budget,
        use_arrangement=use_arrangement,
        weights=weights,
        tokenizer=tokenizer,
        now=now,
    )
    return AssembledContext(window, formatter.format(window), window_stats(window))


def compare_budgets(
    pool: CandidatePool,
    models: Sequence[str] = DEFAULT_COMPARISON_MODELS,
    *,
    weights: ScoringWeights | None = None,
    tokenizer: Tokenizer | None = None,
    now: datetime | None = None,
) -> list[BudgetComparison]:
    """Build the same pool under several named profiles, for tuning and debugging."""
    if now is None:
        now = datetime.now(UTC)
    rows: list[BudgetComparison] = []
    for model in models:
        budget = get_named_budget(model)
        window = build_window(pool, budget, weights=weights, tokenizer=tokenizer, now=now)
        rows.append(BudgetComparison(model, budget, window_stats(window)))
    return rows
