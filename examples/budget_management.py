"""Example: Token Budget Management. Run with: python examples/budget_management.py

Demonstrates the three ways of planning a budget (fixed ratios, adaptive
to candidate counts, named model profiles) and what happens when a small
budget forces the selector to drop candidates.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

from context_assembler import (
    CandidatePool,
    Entity,
    Lesson,
    Memory,
    Message,
    build_window,
    compare_budgets,
    create_adaptive_budget,
    create_fixed_budget,
    format_window,
    get_named_budget,
    window_stats,
)

NOW = datetime.now(UTC)


def sample_pool() -> CandidatePool:
    return CandidatePool(
        conversation=[
            Message(
                id="m1",
                session_id="s1",
                role="user",
                content="Tell me about context budgets and how they work",
                created_at=NOW - timedelta(minutes=5),
            ),
            Message(
                id="m2",
                session_id="s1",
                role="assistant",
                content="A budget splits the context window between categories.",
                created_at=NOW - timedelta(minutes=4),
            ),
            Message(
                id="m3",
                session_id="s1",
                role="user",
                content="What happens when there is not enough room?",
                created_at=NOW - timedelta(minutes=1),
            ),
        ],
        memories=[
            Memory(
                id="mem1",
                content="User is building a support chatbot",
                importance=0.9,
                category="project",
                created_at=NOW - timedelta(days=2),
            ),
            Memory(
                id="mem2",
                content="User prefers short answers",
                importance=0.6,
                category="preference",
                created_at=NOW - timedelta(days=20),
            ),
        ],
        lessons=[
            Lesson(
                id="l1",
                category="error",
                lesson="Long histories push instructions out of the window",
                action="Summarise old turns",
                severity="warning",
                created_at=NOW - timedelta(days=1),
            ),
        ],
        entities=[
            Entity(
                id="e1",
                entity_type="product",
                name="HelpDesk Bot",
                description="The user's chatbot",
                last_seen_at=NOW - timedelta(hours=3),
                mention_count=7,
            ),
        ],
    )


# ---------------------------------------------------------------------------
# Example 1: Planning budgets
# ---------------------------------------------------------------------------


def show_budgets() -> None:
    """Display a fixed, an adaptive and a named budget."""
    print("=== Budgets ===")
    print()

    pool = sample_pool()
    for name, budget in [
        ("Fixed (8192)", create_fixed_budget(8192)),
        (
            "Adaptive (8192)",
            create_adaptive_budget(
                8192,
                conversation_count=len(pool.conversation),
                memory_count=len(pool.memories),
                lesson_count=len(pool.lessons),
                entity_count=len(pool.entities),
            ),
        ),
        ("gpt-4 profile", get_named_budget("gpt-4")),
    ]:
        print(f"--- {name} ---")
        print(f"  Total: {budget.total}, available: {budget.available}")
        print(
            f"  conversation={budget.conversation} memory={budget.memory} "
            f"lesson={budget.lesson} entity={budget.entity}"
        )
        print()


# ---------------------------------------------------------------------------
# Example 2: A budget too small for the pool
# ---------------------------------------------------------------------------


def run_tight_budget() -> None:
    """Build a window under a tiny budget and show what was dropped."""
    budget = create_fixed_budget(
        160, system_prompt_reserve=20, response_reserve=40
    )  # Intentionally small to force truncation
    window = build_window(sample_pool(), budget)
    stats = window_stats(window)

    print("=== Tight Budget ===")
    print(f"Items included: {stats.item_count}")
    print(f"Token utilization: {stats.utilization_ratio:.1%}")
    print(f"Truncated categories: {', '.join(window.truncated_categories) or 'none'}")
    print()
    print(format_window(window, group_by_category=True, include_metadata=True))
    print()


# ---------------------------------------------------------------------------
# Example 3: Comparing model profiles
# ---------------------------------------------------------------------------


def run_comparison() -> None:
    print("=== Profile Comparison ===")
    for row in compare_budgets(sample_pool()):
        print(
            f"  {row.model}: {row.stats.item_count} items, "
            f"{row.stats.total_tokens} tokens, {row.stats.budget_remaining} remaining"
        )


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------


def main() -> None:
    show_budgets()
    run_tight_budget()
    run_comparison()


if __name__ == "__main__":
    main()
