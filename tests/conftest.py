"""Shared fixtures for context-assembler tests."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Any

import pytest

from context_assembler.assembly.builder import CandidatePool
from context_assembler.models.context import Category, ContentItem
from context_assembler.models.records import Entity, Lesson, Memory, Message

NOW = datetime(2026, 1, 15, 12, 0, tzinfo=UTC)
"""Fixed reference instant so recency scores are deterministic."""


def days_ago(days: float) -> datetime:
    return NOW - timedelta(days=days)


class FakeTokenizer:
    """A simple tokenizer that splits on whitespace for testing.

    Satisfies the Tokenizer protocol without requiring tiktoken's
    network-downloaded encoding data.
    """

    def count_tokens(self, text: str) -> int:
        """Count tokens by splitting on whitespace."""
        if not text or not text.strip():
            return 0
        return len(text.split())


def make_item(
    *,
    importance: float = 0.5,
    tokens: int = 10,
    age_days: float = 0.0,
    category: Category = Category.MEMORY,
    text: str | None = None,
    **metadata: Any,
) -> ContentItem:
    """Build a ContentItem with sensible test defaults."""
    return ContentItem(
        category=category,
        text=text if text is not None else f"item importance={importance}",
        importance=importance,
        timestamp=days_ago(age_days),
        estimated_tokens=tokens,
        source_metadata=metadata,
    )


def make_message(
    msg_id: str = "m1",
    *,
    role: str = "user",
    content: str = "hello there",
    age_days: float = 0.0,
    token_count: int | None = None,
    metadata: dict[str, Any] | None = None,
) -> Message:
    return Message(
        id=msg_id,
        session_id="s1",
        role=role,  # type: ignore[arg-type]
        content=content,
        created_at=days_ago(age_days),
        token_count=token_count,
        metadata=metadata or {},
    )


def make_memory(
    mem_id: str = "mem1",
    *,
    content: str = "User prefers dark mode",
    importance: float = 0.5,
    category: str | None = None,
    age_days: float = 0.0,
    tags: list[str] | None = None,
) -> Memory:
    metadata: dict[str, Any] = {}
    if tags is not None:
        metadata["tags"] = tags
    return Memory(
        id=mem_id,
        content=content,
        importance=importance,
        category=category,
        created_at=days_ago(age_days),
        metadata=metadata,
    )


def make_lesson(
    lesson_id: str = "l1",
    *,
    lesson: str = "Check the timezone before scheduling",
    action: str | None = None,
    severity: str = "info",
    category: str = "error",
    age_days: float = 0.0,
) -> Lesson:
    return Lesson(
        id=lesson_id,
        category=category,  # type: ignore[arg-type]
        trigger="scheduling",
        lesson=lesson,
        action=action,
        severity=severity,  # type: ignore[arg-type]
        created_at=days_ago(age_days),
    )


def make_entity(
    entity_id: str = "e1",
    *,
    name: str = "Alice",
    entity_type: str = "person",
    description: str | None = None,
    mention_count: int = 4,
    age_days: float = 0.0,
) -> Entity:
    return Entity(
        id=entity_id,
        entity_type=entity_type,
        name=name,
        description=description,
        last_seen_at=days_ago(age_days),
        mention_count=mention_count,
    )


@pytest.fixture
def counter() -> FakeTokenizer:
    """Return a FakeTokenizer instance for testing."""
    return FakeTokenizer()


@pytest.fixture
def sample_pool() -> CandidatePool:
    """A small pool with two candidates in every category."""
    return CandidatePool(
        conversation=[
            make_message("m1", role="user", content="Can you book the flight?", age_days=0.1),
            make_message("m2", role="assistant", content="Booked for Friday.", age_days=0.05),
        ],
        memories=[
            make_memory("mem1", content="User lives in Lisbon", importance=0.9, category="fact"),
            make_memory("mem2", content="User likes window seats", importance=0.4, age_days=10),
        ],
        lessons=[
            make_lesson("l1", severity="critical", action="Confirm with the user"),
            make_lesson("l2", lesson="Prefer direct flights", severity="info", age_days=3),
        ],
        entities=[
            make_entity("e1", name="TAP", entity_type="airline", mention_count=20),
            make_entity("e2", name="Bob", description="Travel agent", mention_count=2),
        ],
    )
