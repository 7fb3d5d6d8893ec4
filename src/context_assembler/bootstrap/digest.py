"""Session bootstrap digest.

A short "where we left off" block for the start of a new session: the last
session's summary plus the top memories, under one flat budget.  Unlike the
window builder this budget is counted in characters (``max_tokens * 4``)
and memories are ranked with a linear recency curve.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field

from context_assembler._math import clamp
from context_assembler.exceptions import InvalidInputError
from context_assembler.models.records import Memory, Message, Session
from context_assembler.scoring import age_seconds, linear_recency
from context_assembler.tokens.estimators import CHARS_PER_TOKEN

logger = logging.getLogger(__name__)

RECENT_CONTEXT_HEADING = "## Recent Context"
KEY_MEMORIES_HEADING = "## Key Memories"
SECTION_SEPARATOR = "\n\n"

# Turns used in place of a missing session summary.
FALLBACK_TURNS = 3


class DigestOptions(BaseModel):
    """Configuration for :func:`build_digest`."""

    max_tokens: int = Field(default=2000, ge=0)
    include_last_session: bool = True
    top_memories: int = Field(default=10, ge=0)
    always_include_tags: frozenset[str] = frozenset({"core", "preference"})
    recency_bias: float = Field(default=0.3, ge=0.0, le=1.0)

    model_config = ConfigDict(frozen=True)

    @property
    def max_chars(self) -> int:
        return self.max_tokens * CHARS_PER_TOKEN


def time_ago(then: datetime, now: datetime | None = None) -> str:
    """Human-readable age such as ``"just now"`` or ``"3 hours ago"``."""
    minutes = int(age_seconds(then, now) // 60)
    if minutes < 1:
        return "just now"
    if minutes < 60:
        value, unit = minutes, "minute"
    elif minutes < 24 * 60:
        value, unit = minutes // 60, "hour"
    else:
        value, unit = minutes // (24 * 60), "day"
    return f"{value} {unit}{'' if value == 1 else 's'} ago"


def memory_score(memory: Memory, recency_bias: float, now: datetime | None = None) -> float:
    """``importance * (1 - bias) + linear_recency * bias``."""
    if not math.isfinite(memory.importance):
        msg = f"Memory {memory.id!r} has non-finite importance {memory.importance!r}"
        raise InvalidInputError(msg)
    return clamp(memory.importance) * (1.0 - recency_bias) + linear_recency(
        memory.created_at, now
    ) * recency_bias


def rank_memories(
    memories: Sequence[Memory], options: DigestOptions, now: datetime | None = None
) -> list[Memory]:
    """Pinned memories first, then the rest; each group by descending score."""
    scores = {id(mem): memory_score(mem, options.recency_bias, now) for mem in memories}
    ranked = sorted(memories, key=lambda mem: scores[id(mem)], reverse=True)
    pinned = [mem for mem in ranked if mem.tags & options.always_include_tags]
    rest = [mem for mem in ranked if not mem.tags & options.always_include_tags]
    return (pinned + rest)[: options.top_memories]


def _recent_context(
    session: Session | None, turns: Sequence[Message], now: datetime
) -> str | None:
    if session is None:
        return None
    body = session.summary
    if not body:
        body = "\n".join(f"{turn.role}: {turn.content}" for turn in turns[-FALLBACK_TURNS:])
    if not body:
        return None
    label = time_ago(session.ended_at or session.started_at, now)
    return f"{RECENT_CONTEXT_HEADING}\nLast session ({label}): {body}"


def _memory_lines(memories: Sequence[Memory]) -> list[str]:
    return [f"- [{mem.category or 'general'}] {mem.content}" for mem in memories]


def _fit_lines(heading: str, lines: Sequence[str], room: int) -> str | None:
    """Heading plus as many leading lines as fit in *room* characters."""
    kept = heading
    for line in lines:
        candidate = f"{kept}\n{line}"
        if len(candidate) > room:
            break
        kept = candidate
    return kept if kept != heading else None


def build_digest(
    session: Session | None,
    memories: Sequence[Memory],
    options: DigestOptions | None = None,
    *,
    turns: Sequence[Message] = (),
    now: datetime | None = None,
) -> str:
    """Render the bootstrap digest.

    Sections are added in priority order while they fit the remaining
    character budget: the most recent ended session (its summary, or its
    last three turns when there is no summary), then the key memories.  A
    memory section that does not fit whole is cut down to its leading
    lines instead of being dropped.

    Parameters:
        session: The most recent ended session, if any.
        memories: Candidate memories.
        options: Digest configuration; defaults apply when omitted.
        turns: The session's turns, used only when it has no summary.
        now: Reference instant for ages.

    Returns:
        The digest text, or an empty string if no section qualifies.
    """
    options = options or DigestOptions()
    if now is None:
        now = datetime.now(UTC)

    budget = options.max_chars
    sections: list[str] = []

    def room() -> int:
        used = sum(len(section) for section in sections)
        used += len(SECTION_SEPARATOR) * len(sections)
        return budget - used

    if options.include_last_session:
        recent = _recent_context(session, turns, now)
        if recent is not None and len(recent) <= room():
            sections.append(recent)
        elif recent is not None:
            logger.debug("Recent context (%d chars) does not fit %d chars", len(recent), room())

    top = rank_memories(memories, options, now)
    if top:
        lines = _memory_lines(top)
        section = "\n".join([KEY_MEMORIES_HEADING, *lines])
        if len(section) > room():
            logger.debug("Key memories (%d chars) trimmed to fit %d chars", len(section), room())
            section = _fit_lines(KEY_MEMORIES_HEADING, lines, room())
        if section is not None:
            sections.append(section)

    return SECTION_SEPARATOR.join(sections)
