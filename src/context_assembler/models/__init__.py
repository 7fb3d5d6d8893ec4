"""Data models for context-assembler."""

from .budget import Budget
from .context import Category, ContentItem
from .records import Entity, Lesson, LessonCategory, Memory, Message, Role, Session, Severity
from .window import ContextWindow, WindowStats

__all__ = [
    "Budget",
    "Category",
    "ContentItem",
    "ContextWindow",
    "Entity",
    "Lesson",
    "LessonCategory",
    "Memory",
    "Message",
    "Role",
    "Session",
    "Severity",
    "WindowStats",
]
