"""Assembled context window models."""

from __future__ import annotations

from collections.abc import Iterator

from pydantic import BaseModel, Field

from .budget import Budget
from .context import Category, ContentItem


class ContextWindow(BaseModel):
    """A selected, ordered and token-accounted set of content items.

    Produced by :func:`~context_assembler.assembly.builder.build_window`.
    ``truncated`` is true exactly when at least one category had candidates
    that did not fit its sub-budget; those categories are listed in
    ``truncated_categories``.
    """

    items: list[ContentItem] = Field(default_factory=list)
    total_tokens: int = Field(default=0, ge=0)
    budget: Budget
    truncated: bool = False
    truncated_categories: list[Category] = Field(default_factory=list)

    def __len__(self) -> int:
        return len(self.items)

    def iter_items(self) -> Iterator[ContentItem]:
        """Iterate over content items in presentation order."""
        return iter(self.items)

    def items_in(self, category: Category) -> list[ContentItem]:
        """Items of one category, in presentation order."""
        return [item for item in self.items if item.category == category]


class WindowStats(BaseModel):
    """Summary numbers for a built window."""

    item_count: int
    total_tokens: int
    utilization_ratio: float
    budget_remaining: int
    counts_by_category: dict[str, int] = Field(default_factory=dict)
    truncated: bool = False
