"""Context assembly: conversion, selection, arrangement and window building."""

from .arranger import arrange_chronologically, arrange_items
from .builder import (
    AssembledContext,
    BudgetComparison,
    CandidatePool,
    assemble_context,
    build_window,
    compare_budgets,
    window_stats,
)
from .converters import (
    convert_conversation_items,
    convert_entity_items,
    convert_lesson_items,
    convert_memory_items,
)
from .selector import composite_score, select_items

__all__ = [
    "AssembledContext",
    "BudgetComparison",
    "CandidatePool",
    "arrange_chronologically",
    "arrange_items",
    "assemble_context",
    "build_window",
    "compare_budgets",
    "composite_score",
    "convert_conversation_items",
    "convert_entity_items",
    "convert_lesson_items",
    "convert_memory_items",
    "select_items",
    "window_stats",
]
