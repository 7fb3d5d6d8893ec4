"""Core content models for context-assembler."""

from __future__ import annotations

from datetime import UTC, datetime
from enum import StrEnum
from typing import Annotated, Any

from pydantic import AfterValidator, BaseModel, ConfigDict, Field


def _ensure_utc(value: datetime) -> datetime:
    """Interpret naive datetimes as UTC so age arithmetic never mixes kinds."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


UtcDatetime = Annotated[datetime, AfterValidator(_ensure_utc)]


class Category(StrEnum):
    """The kind of source a content item was converted from."""

    CONVERSATION = "conversation"
    MEMORY = "memory"
    LESSON = "lesson"
    ENTITY = "entity"


class ContentItem(BaseModel):
    """A single candidate piece of context, uniform across categories.

    Items wrap a source record without changing it and are immutable after
    creation.  ``source_metadata`` is never interpreted by the engine; it is
    only forwarded to formatters.
    """

    category: Category
    text: str
    importance: float = Field(ge=0.0, le=1.0)
    timestamp: UtcDatetime
    estimated_tokens: int = Field(default=0, ge=0)
    source_metadata: dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)
