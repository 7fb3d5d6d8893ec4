"""Source records supplied by the persistence layer.

These mirror the rows an agent's store hands back for conversation turns,
long-term memories, lessons learned and known entities.  The engine only
reads them; converters wrap each record in a
:class:`~context_assembler.models.context.ContentItem`.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Literal, TypeAlias

from pydantic import BaseModel, ConfigDict, Field

from .context import UtcDatetime

Role: TypeAlias = Literal["user", "assistant", "system", "tool"]
Severity: TypeAlias = Literal["info", "warning", "critical"]
LessonCategory: TypeAlias = Literal["error", "correction", "improvement", "capability_gap"]


class Message(BaseModel):
    """A single conversation turn."""

    id: str
    session_id: str
    role: Role
    content: str
    created_at: UtcDatetime
    token_count: int | None = Field(default=None, ge=0)
    metadata: dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)


class Memory(BaseModel):
    """A long-term note.

    ``importance`` is taken as stored; converters clamp it into [0, 1].
    Tags used for bootstrap pinning live under ``metadata["tags"]``.
    """

    id: str
    content: str
    category: str | None = None
    importance: float = 0.5
    created_at: UtcDatetime
    metadata: dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)

    @property
    def tags(self) -> frozenset[str]:
        raw = self.metadata.get("tags") or ()
        if isinstance(raw, str):
            return frozenset({raw})
        if not isinstance(raw, Iterable):
            return frozenset()
        return frozenset(str(tag) for tag in raw)


class Lesson(BaseModel):
    """A lessons-learned record."""

    id: str
    category: LessonCategory
    trigger: str = ""
    lesson: str
    action: str | None = None
    severity: Severity = "info"
    applied_count: int = Field(default=0, ge=0)
    created_at: UtcDatetime
    metadata: dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)


class Entity(BaseModel):
    """A known entity (person, project, tool, ...)."""

    id: str
    entity_type: str
    name: str
    description: str | None = None
    last_seen_at: UtcDatetime
    mention_count: int = Field(default=0, ge=0)

    model_config = ConfigDict(frozen=True)


class Session(BaseModel):
    """A conversation session as seen by the bootstrap digest."""

    id: str
    started_at: UtcDatetime
    ended_at: UtcDatetime | None = None
    summary: str | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)
