"""Tests for context_assembler.assembly.arranger."""

from __future__ import annotations

from collections import Counter

from context_assembler.assembly.arranger import arrange_chronologically, arrange_items
from context_assembler.models.context import ContentItem
from tests.conftest import make_item


def _importances(items: list[ContentItem]) -> list[float]:
    return [item.importance for item in items]


class TestArrangeItems:
    """Lost-in-middle arrangement."""

    def test_five_items(self) -> None:
        items = [make_item(importance=v) for v in (0.9, 0.8, 0.7, 0.6, 0.5)]
        assert _importances(arrange_items(items)) == [0.9, 0.7, 0.6, 0.5, 0.8]

    def test_input_order_does_not_matter(self) -> None:
        items = [make_item(importance=v) for v in (0.5, 0.7, 0.9, 0.6, 0.8)]
        assert _importances(arrange_items(items)) == [0.9, 0.7, 0.6, 0.5, 0.8]

    def test_six_items(self) -> None:
        items = [make_item(importance=v / 10) for v in range(1, 7)]
        # ranked .6 .5 .4 | .3 .2 .1 -> front .6 .4, middle .3 .2 .1, back .5
        assert _importances(arrange_items(items)) == [0.6, 0.4, 0.3, 0.2, 0.1, 0.5]

    def test_most_important_at_edges(self) -> None:
        items = [make_item(importance=v / 100) for v in range(20)]
        arranged = arrange_items(items)
        assert arranged[0].importance == 0.19
        assert _importances(arranged[-5:]) == [0.18, 0.16, 0.14, 0.12, 0.10]
        assert min(_importances(arranged[1:-1])) == 0.0

    def test_is_a_permutation(self) -> None:
        items = [make_item(importance=v / 10, text=str(v)) for v in (3, 1, 4, 1, 5, 9, 2, 6)]
        arranged = arrange_items(items)
        assert len(arranged) == len(items)
        assert Counter(i.text for i in arranged) == Counter(i.text for i in items)

    def test_three_or_fewer_unchanged(self) -> None:
        for n in range(4):
            items = [make_item(importance=v / 10) for v in range(n)]
            assert arrange_items(items) == items

    def test_equal_importance_keeps_order(self) -> None:
        items = [make_item(importance=0.5, text=str(i)) for i in range(4)]
        # top half [0, 1] -> front 0, back 1; bottom half [2, 3]
        assert [i.text for i in arrange_items(items)] == ["0", "2", "3", "1"]


class TestArrangeChronologically:
    """Oldest-first fallback."""

    def test_sorts_by_timestamp(self) -> None:
        newest = make_item(age_days=0)
        oldest = make_item(age_days=10)
        middle = make_item(age_days=5)
        assert arrange_chronologically([newest, oldest, middle]) == [oldest, middle, newest]

    def test_empty(self) -> None:
        assert arrange_chronologically([]) == []
