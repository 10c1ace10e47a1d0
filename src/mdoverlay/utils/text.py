#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdoverlay/utils/text.py
"""Text measurement helpers for overlay placement.

Overlays replace text cell for cell, so every size computation is done in
terminal display cells rather than code points. Cell widths come from
``rich.cells.cell_len``, which accounts for wide East Asian characters and
zero-width combining marks.

Functions
---------
display_width : Number of terminal cells a string occupies
leading_spaces : Count of leading whitespace characters
split_trim_empty : Split on a separator, dropping empty leading/trailing fields

"""

from __future__ import annotations

from rich.cells import cell_len


def display_width(text: str) -> int:
    """Return the number of terminal cells ``text`` occupies.

    Parameters
    ----------
    text : str
        Text to measure

    Returns
    -------
    int
        Display width in cells

    Examples
    --------
        >>> display_width("###")
        3
        >>> display_width("表")
        2

    """
    return cell_len(text)


def leading_spaces(text: str) -> int:
    """Return the number of whitespace characters at the start of ``text``."""
    return len(text) - len(text.lstrip())


def split_trim_empty(text: str, separator: str) -> list[str]:
    """Split ``text`` on ``separator`` and drop empty fields at both ends.

    Empty fields in the middle are kept, so ``"|a||b|"`` yields
    ``["a", "", "b"]``.

    Parameters
    ----------
    text : str
        Text to split
    separator : str
        Literal separator

    Returns
    -------
    list[str]
        The fields between the outermost separators

    """
    parts = text.split(separator)
    start = 0
    end = len(parts)
    while start < end and parts[start] == "":
        start += 1
    while end > start and parts[end - 1] == "":
        end -= 1
    return parts[start:end]


__all__ = ["display_width", "leading_spaces", "split_trim_empty"]
