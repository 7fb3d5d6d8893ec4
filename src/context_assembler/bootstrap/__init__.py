"""Session bootstrap digest."""

from .digest import DigestOptions, build_digest, rank_memories, time_ago

__all__ = ["DigestOptions", "build_digest", "rank_memories", "time_ago"]
