"""Budget planning strategies.

Two of the three strategies live here: a fixed percentage split and a
corpus-adaptive split driven by how many candidates each category has.
Named model profiles are in :mod:`context_assembler.budget.profiles`.

All strategies are pure.  Sub-budgets are floored, so a budget can be
under-allocated by a few tokens but never over-allocated.
"""

from __future__ import annotations

import math

from context_assembler._math import require_non_negative
from context_assembler.exceptions import InvalidInputError
from context_assembler.models.budget import Budget

DEFAULT_TOTAL_TOKENS = 128_000
DEFAULT_SYSTEM_PROMPT_RESERVE = 2_000
DEFAULT_RESPONSE_RESERVE = 4_000

DEFAULT_CONVERSATION_PCT = 0.40
DEFAULT_MEMORY_PCT = 0.30
DEFAULT_LESSON_PCT = 0.20
DEFAULT_ENTITY_PCT = 0.10

# Floating point slack when checking that percentages sum to at most 1.
_PCT_TOLERANCE = 1e-9


def _check_int(name: str, value: int) -> int:
    require_non_negative(name, value)
    return int(value)


def _reserves(total: int, system_prompt_reserve: int, response_reserve: int) -> tuple[int, int]:
    """Cap both reserves so that together they never exceed the total."""
    system = min(system_prompt_reserve, total)
    response = min(response_reserve, total - system)
    return system, response


def create_fixed_budget(
    total: int = DEFAULT_TOTAL_TOKENS,
    *,
    system_prompt_reserve: int = DEFAULT_SYSTEM_PROMPT_RESERVE,
    response_reserve: int = DEFAULT_RESPONSE_RESERVE,
    conversation_pct: float = DEFAULT_CONVERSATION_PCT,
    memory_pct: float = DEFAULT_MEMORY_PCT,
    lesson_pct: float = DEFAULT_LESSON_PCT,
    entity_pct: float = DEFAULT_ENTITY_PCT,
) -> Budget:
    """Split a total capacity by fixed per-category percentages.

    ``available = total - system_prompt_reserve - response_reserve`` and each
    sub-budget is ``floor(available * pct)``.  Percentages are fractions
    (``0.4`` means 40%) and may sum to less than 1, leaving tokens unused.

    Parameters:
        total: Model context capacity in tokens.
        system_prompt_reserve: Tokens held back for the system prompt.
        response_reserve: Tokens held back for the user input and reply.
        conversation_pct: Share of the available pool for conversation turns.
        memory_pct: Share for long-term memories.
        lesson_pct: Share for lessons learned.
        entity_pct: Share for known entities.

    Returns:
        A :class:`Budget`.

    Raises:
        InvalidInputError: If any size is negative, any percentage is
            negative or not finite, or the percentages sum above 1.
    """
    total = _check_int("total", total)
    system_prompt_reserve = _check_int("system_prompt_reserve", system_prompt_reserve)
    response_reserve = _check_int("response_reserve", response_reserve)

    pcts = {
        "conversation": conversation_pct,
        "memory": memory_pct,
        "lesson": lesson_pct,
        "entity": entity_pct,
    }
    for name, pct in pcts.items():
        require_non_negative(f"{name}_pct", pct)
    if sum(pcts.values()) > 1.0 + _PCT_TOLERANCE:
        msg = f"Category percentages sum to {sum(pcts.values()):.4f}, which exceeds 1.0"
        raise InvalidInputError(msg)

    system, response = _reserves(total, system_prompt_reserve, response_reserve)
    available = total - system - response

    return Budget(
        total=total,
        system_prompt_reserve=system,
        response_reserve=response,
        **{name: math.floor(available * pct) for name, pct in pcts.items()},
    )


def create_adaptive_budget(
    total: int = DEFAULT_TOTAL_TOKENS,
    *,
    conversation_count: int = 0,
    memory_count: int = 0,
    lesson_count: int = 0,
    entity_count: int = 0,
    system_prompt_reserve: int = DEFAULT_SYSTEM_PROMPT_RESERVE,
    response_reserve: int = DEFAULT_RESPONSE_RESERVE,
) -> Budget:
    """Split a total capacity in proportion to each category's candidate count.

    Only the number of candidates matters, not their size.  With no
    candidates at all this falls back to :func:`create_fixed_budget` with its
    default percentages.

    Raises:
        InvalidInputError: If any size or count is negative.
    """
    counts = {
        "conversation": _check_int("conversation_count", conversation_count),
        "memory": _check_int("memory_count", memory_count),
        "lesson": _check_int("lesson_count", lesson_count),
        "entity": _check_int("entity_count", entity_count),
    }
    total_count = sum(counts.values())
    if total_count == 0:
        return create_fixed_budget(
            total,
            system_prompt_reserve=system_prompt_reserve,
            response_reserve=response_reserve,
        )

    total = _check_int("total", total)
    system, response = _reserves(
        total,
        _check_int("system_prompt_reserve", system_prompt_reserve),
        _check_int("response_reserve", response_reserve),
    )
    available = total - system - response

    return Budget(
        total=total,
        system_prompt_reserve=system,
        response_reserve=response,
        **{name: available * count // total_count for name, count in counts.items()},
    )
