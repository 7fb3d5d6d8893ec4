"""Named model budget profiles.

``MODEL_BUDGETS`` is built once at import time and exposed read-only.
Each profile is the model's context capacity run through
:func:`~context_assembler.budget.planner.create_fixed_budget` with default
reserves and percentages.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from context_assembler.models.budget import Budget

from .planner import create_fixed_budget

DEFAULT_PROFILE = "default"

MODEL_CONTEXT_SIZES: Mapping[str, int] = MappingProxyType(
    {
        # Anthropic
        "claude-3-opus": 200_000,
        "claude-3-sonnet": 200_000,
        "claude-3-haiku": 200_000,
        "claude-3.5-sonnet": 200_000,
        # OpenAI
        "gpt-4-turbo": 128_000,
        "gpt-4": 8_192,
        "gpt-3.5-turbo": 16_384,
        # Others
        "gemini-pro": 32_000,
        "llama-3-70b": 8_192,
        DEFAULT_PROFILE: 128_000,
    }
)

MODEL_BUDGETS: Mapping[str, Budget] = MappingProxyType(
    {model: create_fixed_budget(size) for model, size in MODEL_CONTEXT_SIZES.items()}
)

# (upper bound, label): a token count above every bound maps to the last label.
_CONTEXT_SIZE_TIERS: tuple[tuple[int, str], ...] = (
    (4_000, "4k"),
    (8_000, "8k"),
    (16_000, "16k"),
    (32_000, "32k"),
    (64_000, "64k"),
    (128_000, "128k"),
)


def get_named_budget(model: str) -> Budget:
    """Get the budget for a model identifier, or the default profile if unknown."""
    return MODEL_BUDGETS.get(model, MODEL_BUDGETS[DEFAULT_PROFILE])


def recommend_context_size(tokens: float) -> str:
    """Smallest context size label that comfortably holds *tokens*.

    >>> recommend_context_size(3_500)
    '4k'
    >>> recommend_context_size(9_000)
    '16k'
    """
    for bound, label in _CONTEXT_SIZE_TIERS:
        if tokens <= bound:
            return label
    return "200k"
