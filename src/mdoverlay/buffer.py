#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdoverlay/buffer.py
"""Read-only access to the text being decorated.

The renderer reads text through the :class:`TextSource` protocol: the text
covered by a node, a range of whole lines, and the width of the view the
decorations will be drawn in. :class:`TextBuffer` implements it over an
immutable snapshot of a document, so a render pass can never observe a
mutation halfway through.

Columns are character offsets into a line.
"""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

from mdoverlay.constants import DEFAULT_VIEW_WIDTH
from mdoverlay.tree.nodes import SyntaxNode


@runtime_checkable
class TextSource(Protocol):
    """Accessors the decoration renderer needs from a text buffer."""

    def get_node_text(self, node: SyntaxNode) -> str:
        """Return the text covered by ``node``."""
        ...

    def get_lines(self, start_row: int, end_row: int) -> Sequence[str]:
        """Return lines ``[start_row, end_row)`` without line terminators."""
        ...

    def get_view_width(self) -> int:
        """Return the display width available to the view."""
        ...


class TextBuffer:
    """Immutable snapshot of a document's lines.

    Parameters
    ----------
    text : str
        Full document text; ``\\r\\n`` and ``\\r`` line endings are normalized
    width : int, default 80
        Display width of the view decorations are drawn in

    Examples
    --------
        >>> buffer = TextBuffer("# Title\\n\\nBody", width=40)
        >>> buffer.get_lines(0, 1)
        ('# Title',)
        >>> buffer.get_view_width()
        40

    """

    def __init__(self, text: str, width: int = DEFAULT_VIEW_WIDTH):
        """Initialize the buffer from document text."""
        if width < 0:
            raise ValueError(f"width must be non-negative, got {width}")
        normalized = text.replace("\r\n", "\n").replace("\r", "\n")
        self._lines: tuple[str, ...] = tuple(normalized.split("\n"))
        self._width = width

    @classmethod
    def from_lines(cls, lines: Sequence[str], width: int = DEFAULT_VIEW_WIDTH) -> TextBuffer:
        """Build a buffer from already split lines."""
        return cls("\n".join(lines), width=width)

    @property
    def lines(self) -> tuple[str, ...]:
        return self._lines

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def get_lines(self, start_row: int, end_row: int) -> tuple[str, ...]:
        """Return lines ``[start_row, end_row)``, clipped to the buffer."""
        start_row = max(start_row, 0)
        return self._lines[start_row:max(end_row, start_row)]

    def get_node_text(self, node: SyntaxNode) -> str:
        """Return the text covered by ``node``; rows past the end are ignored."""
        start_row, start_col, end_row, end_col = node.range
        if start_row >= len(self._lines):
            return ""
        if start_row == end_row:
            return self._lines[start_row][start_col:end_col]

        parts = [self._lines[start_row][start_col:]]
        for row in range(start_row + 1, min(end_row, len(self._lines))):
            parts.append(self._lines[row])
        if end_row < len(self._lines):
            parts.append(self._lines[end_row][:end_col])
        return "\n".join(parts)

    def get_view_width(self) -> int:
        return self._width

    def __repr__(self) -> str:
        return f"TextBuffer(lines={len(self._lines)}, width={self._width})"


__all__ = ["TextSource", "TextBuffer"]
