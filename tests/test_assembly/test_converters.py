"""Tests for context_assembler.assembly.converters."""

from __future__ import annotations

import pytest

from context_assembler.assembly.converters import (
    convert_conversation_items,
    convert_entity_items,
    convert_lesson_items,
    convert_memory_items,
)
from context_assembler.exceptions import InvalidInputError
from context_assembler.models.context import Category
from tests.conftest import (
    FakeTokenizer,
    days_ago,
    make_entity,
    make_lesson,
    make_memory,
    make_message,
)


class TestConvertConversation:
    """Conversation turns."""

    def test_text_is_prefixed_with_role(self) -> None:
        [item] = convert_conversation_items([make_message(role="assistant", content="Done.")])
        assert item.category == Category.CONVERSATION
        assert item.text == "assistant: Done."

    def test_user_turns_outrank_agent_turns(self) -> None:
        user, agent = convert_conversation_items(
            [make_message("a", role="user"), make_message("b", role="assistant")]
        )
        assert user.importance == 0.8
        assert agent.importance == 0.6

    def test_stored_token_count_wins(self) -> None:
        [item] = convert_conversation_items([make_message(content="x" * 400, token_count=7)])
        assert item.estimated_tokens == 7

    def test_estimates_content_not_prefixed_text(self) -> None:
        [item] = convert_conversation_items([make_message(role="user", content="abcdefgh")])
        assert item.estimated_tokens == 2

    def test_zero_token_count_is_kept(self) -> None:
        [item] = convert_conversation_items([make_message(content="abcdefgh", token_count=0)])
        assert item.estimated_tokens == 0

    def test_metadata_carries_ids(self) -> None:
        [item] = convert_conversation_items([make_message("m9", metadata={"channel": "cli"})])
        assert item.source_metadata == {"channel": "cli", "id": "m9", "session_id": "s1"}

    def test_order_and_length_preserved(self) -> None:
        messages = [make_message(str(i), content=f"turn {i}") for i in range(5)]
        items = convert_conversation_items(messages)
        assert [item.text for item in items] == [f"user: turn {i}" for i in range(5)]

    def test_custom_tokenizer(self) -> None:
        [item] = convert_conversation_items(
            [make_message(content="three little words")], FakeTokenizer()
        )
        assert item.estimated_tokens == 3


class TestConvertMemory:
    """Long-term memories."""

    def test_text_and_importance(self) -> None:
        [item] = convert_memory_items(
            [make_memory(content="Lives in Lisbon", importance=0.65, category="fact")]
        )
        assert item.text == "[Memory: fact] Lives in Lisbon"
        assert item.importance == 0.65
        assert item.timestamp == days_ago(0)

    def test_missing_category_is_general(self) -> None:
        [item] = convert_memory_items([make_memory(content="note")])
        assert item.text == "[Memory: general] note"

    @pytest.mark.parametrize(("stored", "expected"), [(1.7, 1.0), (-0.3, 0.0)])
    def test_importance_clamped(self, stored: float, expected: float) -> None:
        [item] = convert_memory_items([make_memory(importance=stored)])
        assert item.importance == expected

    def test_nan_importance_rejected(self) -> None:
        with pytest.raises(InvalidInputError, match="non-finite"):
            convert_memory_items([make_memory(importance=float("nan"))])

    def test_token_estimate_uses_content(self) -> None:
        [item] = convert_memory_items([make_memory(content="x" * 40)])
        assert item.estimated_tokens == 10

    def test_source_record_untouched(self) -> None:
        memory = make_memory(importance=1.5)
        convert_memory_items([memory])
        assert memory.importance == 1.5


class TestConvertLesson:
    """Lessons learned."""

    @pytest.mark.parametrize(
        ("severity", "importance"), [("critical", 0.9), ("warning", 0.7), ("info", 0.5)]
    )
    def test_importance_by_severity(self, severity: str, importance: float) -> None:
        [item] = convert_lesson_items([make_lesson(severity=severity)])
        assert item.importance == importance

    def test_text_with_action(self) -> None:
        [item] = convert_lesson_items(
            [make_lesson(lesson="Ask first", action="Confirm dates", category="correction")]
        )
        assert item.text == "[Lesson: correction] Ask first\nAction: Confirm dates"

    def test_text_without_action(self) -> None:
        [item] = convert_lesson_items([make_lesson(lesson="Ask first")])
        assert item.text == "[Lesson: error] Ask first"

    def test_tokens_cover_lesson_and_action(self) -> None:
        [item] = convert_lesson_items([make_lesson(lesson="abcd", action="efgh")])
        assert item.estimated_tokens == 2

    def test_metadata(self) -> None:
        [item] = convert_lesson_items([make_lesson("l7", severity="warning")])
        assert item.source_metadata == {"id": "l7", "severity": "warning", "applied": 0}


class TestConvertEntity:
    """Known entities."""

    @pytest.mark.parametrize(("mentions", "importance"), [(0, 0.0), (5, 0.25), (20, 1.0), (45, 1.0)])
    def test_importance_from_mentions(self, mentions: int, importance: float) -> None:
        [item] = convert_entity_items([make_entity(mention_count=mentions)])
        assert item.importance == importance

    def test_text_with_description(self) -> None:
        [item] = convert_entity_items([make_entity(name="Bob", description="Travel agent")])
        assert item.text == "[Entity: person] Bob: Travel agent"

    def test_text_without_description(self) -> None:
        [item] = convert_entity_items([make_entity(name="Bob")])
        assert item.text == "[Entity: person] Bob"

    def test_timestamp_is_last_seen(self) -> None:
        [item] = convert_entity_items([make_entity(age_days=4)])
        assert item.timestamp == days_ago(4)

    def test_metadata(self) -> None:
        [item] = convert_entity_items([make_entity("e3", mention_count=2)])
        assert item.source_metadata == {"id": "e3", "type": "person", "mentions": 2}


class TestEmptyInput:
    """Every converter maps an empty list to an empty list."""

    def test_all_empty(self) -> None:
        assert convert_conversation_items([]) == []
        assert convert_memory_items([]) == []
        assert convert_lesson_items([]) == []
        assert convert_entity_items([]) == []
