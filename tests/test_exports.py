"""Tests for top-level package exports."""

from __future__ import annotations

import context_assembler


class TestTopLevelExports:
    """Verify all expected symbols are importable from the top-level package."""

    def test_budget_exports(self) -> None:
        from context_assembler import (
            MODEL_BUDGETS,
            create_adaptive_budget,
            create_fixed_budget,
            get_named_budget,
            recommend_context_size,
        )

        assert "default" in MODEL_BUDGETS
        assert callable(create_adaptive_budget)
        assert callable(create_fixed_budget)
        assert callable(get_named_budget)
        assert callable(recommend_context_size)

    def test_assembly_exports(self) -> None:
        from context_assembler import (
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

        assert AssembledContext is not None
        assert BudgetComparison is not None
        assert CandidatePool is not None
        for func in (
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
        ):
            assert callable(func)

    def test_model_exports(self) -> None:
        from context_assembler import (
            Budget,
            Category,
            ContentItem,
            ContextWindow,
            Entity,
            Lesson,
            Memory,
            Message,
            Session,
            WindowStats,
        )

        assert Budget is not None
        assert Category.MEMORY == "memory"
        assert ContentItem is not None
        assert ContextWindow is not None
        assert Entity is not None
        assert Lesson is not None
        assert Memory is not None
        assert Message is not None
        assert Session is not None
        assert WindowStats is not None

    def test_token_exports(self) -> None:
        from context_assembler import (
            CharacterEstimator,
            TiktokenCounter,
            Tokenizer,
            WordEstimator,
            estimate_tokens,
            estimate_tokens_accurate,
        )

        assert isinstance(CharacterEstimator(), Tokenizer)
        assert isinstance(WordEstimator(), Tokenizer)
        assert TiktokenCounter is not None
        assert estimate_tokens("abcd") == 1
        assert estimate_tokens_accurate("one two three") == 4

    def test_exception_hierarchy(self) -> None:
        from context_assembler import ContextAssemblerError, FormatterError, InvalidInputError

        assert issubclass(InvalidInputError, ContextAssemblerError)
        assert issubclass(InvalidInputError, ValueError)
        assert issubclass(FormatterError, ContextAssemblerError)

    def test_all_names_resolve(self) -> None:
        for name in context_assembler.__all__:
            assert hasattr(context_assembler, name), name
