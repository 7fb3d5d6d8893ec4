"""Plain text rendering of a context window."""

from __future__ import annotations

from context_assembler.exceptions import FormatterError
from context_assembler.models.context import Category, ContentItem
from context_assembler.models.window import ContextWindow

# Grouped layout presents categories in this order, not in window order.
SECTION_HEADINGS: dict[Category, str] = {
    Category.MEMORY: "# Relevant Memories",
    Category.LESSON: "# Relevant Lessons",
    Category.ENTITY: "# Known Entities",
    Category.CONVERSATION: "# Recent Conversation",
}

LAYOUTS = ("grouped", "flat")


class TextFormatter:
    """Renders a window as text, one item per line.

    The grouped layout emits a markdown heading per non-empty category; the
    flat layout keeps the window's own order (arranged or chronological).
    With ``include_metadata`` every line ends in
    ``[category, importance: X.XX]``.

    Security Note:
        Item text is inserted verbatim.  Memories and conversation turns may
        carry user-controlled content; filter it before it reaches the
        engine if that matters for the prompt.
    """

    __slots__ = ("_group_by_category", "_include_metadata")

    def __init__(self, *, group_by_category: bool = False, include_metadata: bool = False) -> None:
        self._group_by_category = group_by_category
        self._include_metadata = include_metadata

    @property
    def format_type(self) -> str:
        return "grouped" if self._group_by_category else "flat"

    def format(self, window: ContextWindow) -> str:
        if not self._group_by_category:
            return "\n".join(self._line(item) for item in window.items)

        parts: list[str] = []
        for category, heading in SECTION_HEADINGS.items():
            items = window.items_in(category)
            if items:
                parts.append(heading)
                parts.append("")
                parts.extend(self._line(item) for item in items)
                parts.append("")
        return "\n".join(parts).rstrip("\n")

    def _line(self, item: ContentItem) -> str:
        if self._include_metadata:
            return f"{item.text} [{item.category}, importance: {item.importance:.2f}]"
        return item.text


def formatter_for(layout: str, *, include_metadata: bool = False) -> TextFormatter:
    """Get a formatter by layout name (``"grouped"`` or ``"flat"``)."""
    if layout not in LAYOUTS:
        msg = f"Unknown layout {layout!r}; expected one of {', '.join(LAYOUTS)}"
        raise FormatterError(msg)
    return TextFormatter(group_by_category=layout == "grouped", include_metadata=include_metadata)


def format_window(
    window: ContextWindow, *, group_by_category: bool = False, include_metadata: bool = False
) -> str:
    """Render *window* as text; see :class:`TextFormatter`."""
    formatter = TextFormatter(group_by_category=group_by_category, include_metadata=include_metadata)
    return formatter.format(window)
