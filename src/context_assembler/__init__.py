"""context-assembler: budgeted prompt context assembly for LLM agents.

Budget Planning:
    create_fixed_budget, create_adaptive_budget, get_named_budget,
    recommend_context_size, MODEL_BUDGETS

Assembly:
    convert_conversation_items, convert_memory_items, convert_lesson_items,
    convert_entity_items, select_items, composite_score, arrange_items,
    arrange_chronologically, build_window, window_stats, compare_budgets,
    assemble_context, CandidatePool, BudgetComparison, AssembledContext

Formatting:
    TextFormatter, format_window, formatter_for

Bootstrap Digest:
    build_digest, DigestOptions, rank_memories, time_ago

Scoring:
    ScoringWeights, exponential_recency, linear_recency

Models & Types:
    Budget, Category, ContentItem, ContextWindow, WindowStats,
    Message, Memory, Lesson, Entity, Session, Role, Severity

Protocols:
    Tokenizer

Tokens:
    estimate_tokens, estimate_tokens_accurate, CharacterEstimator,
    WordEstimator, TiktokenCounter

Exceptions:
    ContextAssemblerError, InvalidInputError, FormatterError
"""

from importlib.metadata import PackageNotFoundError, version

from context_assembler.assembly import (
    AssembledContext,
    BudgetComparison,
    CandidatePool,
    arrange_chronologically,
    arrange_items,
    assemble_context,
    build_window,
    compare_budgets,
    composite_score,
    convert_conversation_items,
    convert_entity_items,
    convert_lesson_items,
    convert_memory_items,
    select_items,
    window_stats,
)
from context_assembler.bootstrap import DigestOptions, build_digest, rank_memories, time_ago
from context_assembler.budget import (
    MODEL_BUDGETS,
    create_adaptive_budget,
    create_fixed_budget,
    get_named_budget,
    recommend_context_size,
)
from context_assembler.exceptions import (
    ContextAssemblerError,
    FormatterError,
    InvalidInputError,
)
from context_assembler.formatters import TextFormatter, format_window, formatter_for
from context_assembler.models import (
    Budget,
    Category,
    ContentItem,
    ContextWindow,
    Entity,
    Lesson,
    Memory,
    Message,
    Role,
    Session,
    Severity,
    WindowStats,
)
from context_assembler.protocols import Tokenizer
from context_assembler.scoring import ScoringWeights, exponential_recency, linear_recency
from context_assembler.tokens import (
    CharacterEstimator,
    TiktokenCounter,
    WordEstimator,
    estimate_tokens,
    estimate_tokens_accurate,
)

try:
    __version__ = version("context-assembler")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"

__all__ = [
    "MODEL_BUDGETS",
    "AssembledContext",
    "Budget",
    "BudgetComparison",
    "CandidatePool",
    "Category",
    "CharacterEstimator",
    "ContentItem",
    "ContextAssemblerError",
    "ContextWindow",
    "DigestOptions",
    "Entity",
    "FormatterError",
    "InvalidInputError",
    "Lesson",
    "Memory",
    "Message",
    "Role",
    "ScoringWeights",
    "Session",
    "Severity",
    "TextFormatter",
    "TiktokenCounter",
    "Tokenizer",
    "WindowStats",
    "WordEstimator",
    "__version__",
    "arrange_chronologically",
    "arrange_items",
    "assemble_context",
    "build_digest",
    "build_window",
    "compare_budgets",
    "composite_score",
    "convert_conversation_items",
    "convert_entity_items",
    "convert_lesson_items",
    "convert_memory_items",
    "create_adaptive_budget",
    "create_fixed_budget",
    "estimate_tokens",
    "estimate_tokens_accurate",
    "exponential_recency",
    "format_window",
    "formatter_for",
    "get_named_budget",
    "linear_recency",
    "rank_memories",
    "recommend_context_size",
    "select_items",
    "time_ago",
    "window_stats",
]
