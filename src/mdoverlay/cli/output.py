#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdoverlay/cli/output.py
"""Output formatting for the mdoverlay CLI.

Decorations are written either as JSON lines (one object per decoration,
suitable for piping into an editor integration) or as a table for reading.
Table output uses rich when requested and plain aligned text otherwise.
"""

from __future__ import annotations

import sys
from typing import IO, Iterable, Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text

from mdoverlay.decorations import Conceal, Decoration, LineBackground, OverlayReplace, VirtualLine

TABLE_COLUMNS = ("kind", "position", "text", "style")


def describe_position(decoration: Decoration) -> str:
    """Return a compact ``row:col`` description of where a decoration applies.

    Examples
    --------
        >>> describe_position(Conceal(row=2, start_col=0, end_row=2, end_col=2))
        '2:0-2:2'

    """
    if isinstance(decoration, LineBackground):
        return f"rows {decoration.row}-{decoration.end_row}"
    if isinstance(decoration, VirtualLine):
        return f"{'above' if decoration.above else 'below'} {decoration.row}"
    if isinstance(decoration, OverlayReplace) and decoration.end_row is None:
        return f"{decoration.row}:{decoration.start_col}-eol"
    return f"{decoration.row}:{decoration.start_col}-{decoration.end_row}:{decoration.end_col}"


def describe_style(decoration: Decoration) -> str:
    """Return the style names of a decoration, comma separated."""
    if isinstance(decoration, Conceal):
        return ""
    styles = [style for chunk in decoration.chunks for style in chunk.styles]
    if isinstance(decoration, LineBackground):
        styles.insert(0, decoration.style)
    return ",".join(dict.fromkeys(styles))


def decoration_rows(decorations: Iterable[Decoration]) -> list[tuple[str, str, str, str]]:
    """Flatten decorations into ``(kind, position, text, style)`` rows."""
    rows = []
    for decoration in decorations:
        text = "" if isinstance(decoration, Conceal) else decoration.text
        rows.append((decoration.kind, describe_position(decoration), text, describe_style(decoration)))
    return rows


def print_plain_table(decorations: Sequence[Decoration], stream: IO[str] | None = None) -> None:
    """Print decorations as left-aligned, tab separated columns."""
    stream = stream or sys.stdout
    stream.write("\t".join(TABLE_COLUMNS) + "\n")
    for row in decoration_rows(decorations):
        stream.write("\t".join(row) + "\n")


def print_rich_table(decorations: Sequence[Decoration], title: str | None = None, console: Console | None = None) -> None:
    """Print decorations as a rich table."""
    console = console or Console()
    table = Table(title=title, show_lines=False)
    for column in TABLE_COLUMNS:
        table.add_column(column, no_wrap=column != "text")
    for row in decoration_rows(decorations):
        # Cells are literal text; brackets in callout markers are not markup
        table.add_row(*(Text(cell) for cell in row))
    console.print(table)


__all__ = ["describe_position", "describe_style", "decoration_rows", "print_plain_table", "print_rich_table"]
