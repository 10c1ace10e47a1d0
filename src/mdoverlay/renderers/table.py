#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdoverlay/renderers/table.py
"""Box-drawing synthesis for pipe tables.

Two pieces of table rendering live here:

- :func:`build_borders` sizes a top and a bottom border line from the header
  row, one horizontal run per column.
- :func:`box_row` redraws a row's pipes as vertical bars and, for the
  delimiter row, turns the dashes into a horizontal rule with tees and
  crosses at every column boundary.

Example
-------
    >>> build_borders("|Alpha|Charlie|", "|abcde|fghijkl|")
    ('┌─────┬───────┐', '└─────┴───────┘')
    >>> box_row("| --- | --- |", delimiter=True)
    '├─────┼─────┤'

"""

from __future__ import annotations

from typing import Optional

from mdoverlay.constants import (
    BOX_BOTTOM_LEFT,
    BOX_BOTTOM_RIGHT,
    BOX_BOTTOM_TEE,
    BOX_CROSS,
    BOX_HORIZONTAL,
    BOX_TEE_LEFT,
    BOX_TEE_RIGHT,
    BOX_TOP_LEFT,
    BOX_TOP_RIGHT,
    BOX_TOP_TEE,
    BOX_VERTICAL,
    DELIMITER_RULE_CHARS,
    TABLE_SEPARATOR_CHAR,
)
from mdoverlay.utils.text import display_width, split_trim_empty


def column_widths(header: str, separator: str = TABLE_SEPARATOR_CHAR) -> list[int]:
    """Return the display width of every separator-delimited header field."""
    return [display_width(part) for part in split_trim_empty(header, separator)]


def build_borders(
    head: str, tail: str, separator: str = TABLE_SEPARATOR_CHAR
) -> Optional[tuple[str, str]]:
    """Build the top and bottom border lines of a table.

    Parameters
    ----------
    head : str
        First line of the table (the header row)
    tail : str
        Last line of the table
    separator : str, default "|"
        Column separator

    Returns
    -------
    tuple of (str, str) or None
        ``(top, bottom)``, or None when the first and last lines differ in
        display width, which means the columns cannot be trusted to line up

    """
    if display_width(head) != display_width(tail):
        return None
    runs = [BOX_HORIZONTAL * width for width in column_widths(head, separator)]
    top = BOX_TOP_LEFT + BOX_TOP_TEE.join(runs) + BOX_TOP_RIGHT
    bottom = BOX_BOTTOM_LEFT + BOX_BOTTOM_TEE.join(runs) + BOX_BOTTOM_RIGHT
    return top, bottom


def _junction(before: str, after: str) -> str:
    if before == BOX_HORIZONTAL and after == BOX_HORIZONTAL:
        return BOX_CROSS
    if after == BOX_HORIZONTAL:
        return BOX_TEE_RIGHT
    if before == BOX_HORIZONTAL:
        return BOX_TEE_LEFT
    return BOX_VERTICAL


def box_row(text: str, delimiter: bool = False, separator: str = TABLE_SEPARATOR_CHAR) -> str:
    """Redraw a table row with box-drawing characters.

    Every separator becomes a vertical bar. On the delimiter row, dashes and
    spaces become a horizontal rule first; each bar is then classified by its
    neighbours in a single left-to-right scan: a cross between two rules, a
    right tee with a rule only after it, a left tee with a rule only before
    it. Alignment colons are kept as they are.

    Parameters
    ----------
    text : str
        Literal row text
    delimiter : bool, default False
        Whether the row is the header delimiter row
    separator : str, default "|"
        Column separator

    Returns
    -------
    str
        The redrawn row, with the same number of characters as ``text``

    """
    if not delimiter:
        return text.replace(separator, BOX_VERTICAL)

    cells = [
        BOX_VERTICAL if char == separator else BOX_HORIZONTAL if char in DELIMITER_RULE_CHARS else char
        for char in text
    ]
    drawn = []
    for index, char in enumerate(cells):
        if char != BOX_VERTICAL:
            drawn.append(char)
            continue
        before = cells[index - 1] if index > 0 else ""
        after = cells[index + 1] if index + 1 < len(cells) else ""
        drawn.append(_junction(before, after))
    return "".join(drawn)


__all__ = ["column_widths", "build_borders", "box_row"]
