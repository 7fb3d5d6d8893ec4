"""Category converters: source records to :class:`ContentItem` lists.

Each converter returns one item per record, in input order, and applies the
category's default importance.  Sizes come from a record's own token count
when it carries one, otherwise from the supplied tokenizer (the character
estimator by default).
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from context_assembler._math import clamp
from context_assembler.exceptions import InvalidInputError
from context_assembler.models.context import Category, ContentItem
from context_assembler.models.records import Entity, Lesson, Memory, Message
from context_assembler.protocols.tokenizer import Tokenizer
from context_assembler.tokens.estimators import CharacterEstimator

USER_TURN_IMPORTANCE = 0.8
AGENT_TURN_IMPORTANCE = 0.6

SEVERITY_IMPORTANCE: dict[str, float] = {
    "critical": 0.9,
    "warning": 0.7,
    "info": 0.5,
}

# Mentions at which an entity reaches full importance.
ENTITY_SATURATION_MENTIONS = 20

_DEFAULT_TOKENIZER = CharacterEstimator()


def convert_conversation_items(
    messages: Sequence[Message], tokenizer: Tokenizer | None = None
) -> list[ContentItem]:
    """Wrap conversation turns; user turns outrank everything else the agent said."""
    tokenizer = tokenizer or _DEFAULT_TOKENIZER
    return [
        ContentItem(
            category=Category.CONVERSATION,
            text=f"{msg.role}: {msg.content}",
            importance=USER_TURN_IMPORTANCE if msg.role == "user" else AGENT_TURN_IMPORTANCE,
            timestamp=msg.created_at,
            estimated_tokens=(
                msg.token_count
                if msg.token_count is not None
                else tokenizer.count_tokens(msg.content)
            ),
            source_metadata={**msg.metadata, "id": msg.id, "session_id": msg.session_id},
        )
        for msg in messages
    ]


def convert_memory_items(
    memories: Sequence[Memory], tokenizer: Tokenizer | None = None
) -> list[ContentItem]:
    """Wrap long-term memories, carrying their stored importance through.

    Raises:
        InvalidInputError: If a memory's importance is NaN or infinite.
    """
    tokenizer = tokenizer or _DEFAULT_TOKENIZER
    items: list[ContentItem] = []
    for mem in memories:
        if not math.isfinite(mem.importance):
            msg = f"Memory {mem.id!r} has non-finite importance {mem.importance!r}"
            raise InvalidInputError(msg)
        items.append(
            ContentItem(
                category=Category.MEMORY,
                text=f"[Memory: {mem.category or 'general'}] {mem.content}",
                importance=clamp(mem.importance),
                timestamp=mem.created_at,
                estimated_tokens=tokenizer.count_tokens(mem.content),
                source_metadata={**mem.metadata, "id": mem.id, "category": mem.category},
            )
        )
    return items


def convert_lesson_items(
    lessons: Sequence[Lesson], tokenizer: Tokenizer | None = None
) -> list[ContentItem]:
    """Wrap lessons learned, ranked by severity."""
    tokenizer = tokenizer or _DEFAULT_TOKENIZER
    items: list[ContentItem] = []
    for lesson in lessons:
        text = f"[Lesson: {lesson.category}] {lesson.lesson}"
        if lesson.action:
            text += f"\nAction: {lesson.action}"
        items.append(
            ContentItem(
                category=Category.LESSON,
                text=text,
                importance=SEVERITY_IMPORTANCE[lesson.severity],
                timestamp=lesson.created_at,
                estimated_tokens=tokenizer.count_tokens(lesson.lesson + (lesson.action or "")),
                source_metadata={
                    **lesson.metadata,
                    "id": lesson.id,
                    "severity": lesson.severity,
                    "applied": lesson.applied_count,
                },
            )
        )
    return items


def convert_entity_items(
    entities: Sequence[Entity], tokenizer: Tokenizer | None = None
) -> list[ContentItem]:
    """Wrap known entities; frequently mentioned entities matter more."""
    tokenizer = tokenizer or _DEFAULT_TOKENIZER
    items: list[ContentItem] = []
    for entity in entities:
        text = f"[Entity: {entity.entity_type}] {entity.name}"
        if entity.description:
            text += f": {entity.description}"
        items.append(
            ContentItem(
                category=Category.ENTITY,
                text=text,
                importance=min(entity.mention_count / ENTITY_SATURATION_MENTIONS, 1.0),
                timestamp=entity.last_seen_at,
                estimated_tokens=tokenizer.count_tokens(entity.name + (entity.description or "")),
                source_metadata={
                    "id": entity.id,
                    "type": entity.entity_type,
                    "mentions": entity.mention_count,
                },
            )
        )
    return items
