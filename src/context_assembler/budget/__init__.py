"""Budget planning: fixed, adaptive and named-profile strategies."""

from .planner import create_adaptive_budget, create_fixed_budget
from .profiles import MODEL_BUDGETS, get_named_budget, recommend_context_size

__all__ = [
    "MODEL_BUDGETS",
    "create_adaptive_budget",
    "create_fixed_budget",
    "get_named_budget",
    "recommend_context_size",
]
