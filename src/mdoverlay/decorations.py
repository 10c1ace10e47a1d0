#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdoverlay/decorations.py
"""Decoration instructions produced by a render pass.

A decoration describes *what* to draw and *where* without touching the text
buffer. The consuming surface (an editor, a terminal previewer) turns each
instruction into screen output. There are four shapes:

- :class:`OverlayReplace` draws text over a character range
- :class:`LineBackground` washes whole rows with a style, optionally with an
  overlay drawn at column 0
- :class:`VirtualLine` inserts a synthetic line above or below a row
- :class:`Conceal` hides a character range

All positions are 0-based; end rows and columns are exclusive. Each
instruction is an immutable value with a ``to_dict`` method for JSON output.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Union

from mdoverlay.constants import DecorationKind


@dataclass(frozen=True)
class StyledText:
    """One chunk of decoration text.

    Parameters
    ----------
    text : str
        Literal text to draw
    styles : tuple of str
        Style names applied to the chunk, innermost last

    """

    text: str
    styles: tuple[str, ...]

    @classmethod
    def of(cls, text: str, *styles: str) -> StyledText:
        """Build a chunk from text and one or more style names."""
        return cls(text=text, styles=tuple(styles))

    def to_dict(self) -> dict[str, Any]:
        return {"text": self.text, "styles": list(self.styles)}


def _chunks_to_list(chunks: tuple[StyledText, ...]) -> list[dict[str, Any]]:
    return [chunk.to_dict() for chunk in chunks]


@dataclass(frozen=True)
class OverlayReplace:
    """Draw ``chunks`` over a range without changing the underlying text.

    ``end_row`` and ``end_col`` are None when the overlay is anchored at a
    single position and simply covers as many cells as its text needs
    (used for thematic breaks, which span the whole view).
    """

    row: int
    start_col: int
    end_row: Optional[int]
    end_col: Optional[int]
    chunks: tuple[StyledText, ...]

    kind: DecorationKind = field(default="overlay", init=False, repr=False)

    @property
    def text(self) -> str:
        """Concatenated text of all chunks."""
        return "".join(chunk.text for chunk in self.chunks)

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "row": self.row,
            "start_col": self.start_col,
            "end_row": self.end_row,
            "end_col": self.end_col,
            "chunks": _chunks_to_list(self.chunks),
        }


@dataclass(frozen=True)
class LineBackground:
    """Apply ``style`` to rows ``[row, end_row)``, filled to the end of line.

    Parameters
    ----------
    row : int
        First row
    end_row : int
        Row after the last styled row
    style : str
        Background style name
    chunks : tuple of StyledText, default ()
        Overlay text drawn at column 0 of ``row``
    fill_eol : bool, default True
        Extend the style past the last character to the window edge

    """

    row: int
    end_row: int
    style: str
    chunks: tuple[StyledText, ...] = ()
    fill_eol: bool = True

    kind: DecorationKind = field(default="line_background", init=False, repr=False)

    @property
    def text(self) -> str:
        return "".join(chunk.text for chunk in self.chunks)

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "row": self.row,
            "end_row": self.end_row,
            "style": self.style,
            "chunks": _chunks_to_list(self.chunks),
            "fill_eol": self.fill_eol,
        }


@dataclass(frozen=True)
class VirtualLine:
    """Insert one synthetic line next to ``row``.

    Parameters
    ----------
    row : int
        Anchor row
    col : int
        Anchor column
    chunks : tuple of StyledText
        Content of the inserted line
    above : bool
        Insert above ``row`` when True, below it otherwise

    """

    row: int
    col: int
    chunks: tuple[StyledText, ...]
    above: bool

    kind: DecorationKind = field(default="virtual_line", init=False, repr=False)

    @property
    def text(self) -> str:
        return "".join(chunk.text for chunk in self.chunks)

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "row": self.row,
            "col": self.col,
            "chunks": _chunks_to_list(self.chunks),
            "above": self.above,
        }


@dataclass(frozen=True)
class Conceal:
    """Hide a character range (zero display width, no replacement text)."""

    row: int
    start_col: int
    end_row: int
    end_col: int

    kind: DecorationKind = field(default="conceal", init=False, repr=False)

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "row": self.row,
            "start_col": self.start_col,
            "end_row": self.end_row,
            "end_col": self.end_col,
        }


Decoration = Union[OverlayReplace, LineBackground, VirtualLine, Conceal]


__all__ = [
    "StyledText",
    "OverlayReplace",
    "LineBackground",
    "VirtualLine",
    "Conceal",
    "Decoration",
]
