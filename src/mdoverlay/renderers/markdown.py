#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdoverlay/renderers/markdown.py
"""Markdown decoration rendering.

This module provides the MarkdownDecorationRenderer, which walks the captures
of a markdown syntax tree and turns each one into decoration instructions:

- headings get a full-line background and a level glyph over the ``#`` run
- thematic breaks are overdrawn with a rule spanning the view
- fenced code blocks get a background wash
- bullet markers become depth-dependent bullets, or are concealed when a
  task checkbox follows
- task markers become checkbox glyphs
- quote markers become bars, styled by callout when the quote is one
- pipe tables are redrawn with box-drawing characters and, in ``full``
  style, framed by top and bottom borders

Captures are processed in the order the query yields them. A capture name
without a renderer is logged and skipped; a decoration that cannot be
computed safely (a glyph too wide for its slot, a table whose rows do not
line up) is skipped on its own without affecting the rest of the pass.

"""

from __future__ import annotations

import logging
from functools import partial
from typing import Callable, Iterator

from mdoverlay.buffer import TextSource
from mdoverlay.callout import classify_quote
from mdoverlay.constants import QUOTE_MARKER_CHAR
from mdoverlay.decorations import Conceal, Decoration, LineBackground, OverlayReplace, StyledText, VirtualLine
from mdoverlay.options.render import RenderOptions
from mdoverlay.query import Capture, CaptureKind, MarkdownQuery
from mdoverlay.renderers.base import BaseDecorationRenderer
from mdoverlay.renderers.table import box_row, build_borders
from mdoverlay.tree.nodes import SyntaxNode
from mdoverlay.tree.structure import enclosing_quote, is_sibling_checkbox, list_nesting_depth
from mdoverlay.utils.lists import clamp_last, cycle, first, last
from mdoverlay.utils.text import display_width, leading_spaces

logger = logging.getLogger(__name__)

CaptureHandler = Callable[[SyntaxNode, str, TextSource], list[Decoration]]


def _overlay(node: SyntaxNode, text: str, *styles: str) -> OverlayReplace:
    start_row, start_col, end_row, end_col = node.range
    return OverlayReplace(
        row=start_row,
        start_col=start_col,
        end_row=end_row,
        end_col=end_col,
        chunks=(StyledText.of(text, *styles),),
    )


class MarkdownDecorationRenderer(BaseDecorationRenderer):
    """Compute decorations for the captures of a markdown syntax tree.

    The renderer holds only its configuration and capture query, both
    immutable, so one instance can serve any number of render passes.

    Parameters
    ----------
    options : RenderOptions or None, default = None
        Render configuration
    query : MarkdownQuery or None, default = None
        Capture rules; defaults to the markdown rule set

    Examples
    --------
        >>> from mdoverlay.buffer import TextBuffer
        >>> from mdoverlay.parsers.markdown import MarkdownBlockParser
        >>> buffer = TextBuffer("## Usage\\n")
        >>> tree = MarkdownBlockParser().parse("## Usage\\n")
        >>> decorations = MarkdownDecorationRenderer().render(tree.root, buffer)
        >>> decorations[0].kind
        'line_background'

    """

    def __init__(self, options: RenderOptions | None = None, query: MarkdownQuery | None = None):
        """Initialize the renderer and its capture dispatch table."""
        super().__init__(options)
        self.query = query or MarkdownQuery()
        self._handlers: dict[CaptureKind, CaptureHandler] = {
            CaptureKind.HEADING: self._render_heading,
            CaptureKind.DASH: self._render_dash,
            CaptureKind.CODE: self._render_code,
            CaptureKind.LIST_MARKER: self._render_list_marker,
            CaptureKind.CHECKBOX_UNCHECKED: partial(self._render_checkbox, checked=False),
            CaptureKind.CHECKBOX_CHECKED: partial(self._render_checkbox, checked=True),
            CaptureKind.QUOTE_MARKER: self._render_quote_marker,
            CaptureKind.TABLE: self._render_table,
            CaptureKind.TABLE_HEAD: partial(self._render_table_row, kind=CaptureKind.TABLE_HEAD),
            CaptureKind.TABLE_DELIM: partial(self._render_table_row, kind=CaptureKind.TABLE_DELIM),
            CaptureKind.TABLE_ROW: partial(self._render_table_row, kind=CaptureKind.TABLE_ROW),
        }

    def iter_decorations(self, root: SyntaxNode, buffer: TextSource) -> Iterator[Decoration]:
        """Yield decorations for every capture under ``root``, in capture order."""
        for capture in self.query.iter_captures(root):
            yield from self.render_capture(capture, buffer)

    def render_capture(self, capture: Capture, buffer: TextSource) -> list[Decoration]:
        """Compute the decorations of a single capture.

        Parameters
        ----------
        capture : Capture
            Capture to render
        buffer : TextSource
            Read-only snapshot of the text

        Returns
        -------
        list[Decoration]
            Zero or more decorations; empty for an unhandled capture name

        """
        kind = capture.kind
        if kind is None:
            logger.error("Unhandled markdown capture: %s", capture.name)
            return []

        node = capture.node
        value = buffer.get_node_text(node)
        logger.debug("Capture %s: %r %s", capture.name, node, value)
        return self._handlers[kind](node, value, buffer)

    def _render_heading(self, node: SyntaxNode, value: str, buffer: TextSource) -> list[Decoration]:
        highlights = self.options.highlights.heading
        level = display_width(value)

        heading = cycle(self.options.headings, level)
        # Available width is level + 1: the marker run plus the space before the title
        padding = max(level + 1 - display_width(heading), 0)

        background = clamp_last(highlights.backgrounds, level)
        foreground = clamp_last(highlights.foregrounds, level)

        return [
            LineBackground(
                row=node.start_row,
                end_row=node.end_row + 1,
                style=background,
                chunks=(StyledText.of(" " * padding + heading, foreground, background),),
            )
        ]

    def _render_dash(self, node: SyntaxNode, value: str, buffer: TextSource) -> list[Decoration]:
        width = buffer.get_view_width()
        return [
            OverlayReplace(
                row=node.start_row,
                start_col=0,
                end_row=None,
                end_col=None,
                chunks=(StyledText.of(self.options.dash * width, self.options.highlights.dash),),
            )
        ]

    def _render_code(self, node: SyntaxNode, value: str, buffer: TextSource) -> list[Decoration]:
        if node.end_row <= node.start_row:
            logger.debug("Skipping code block with empty row span at row %d", node.start_row)
            return []
        return [LineBackground(row=node.start_row, end_row=node.end_row, style=self.options.highlights.code)]

    def _render_list_marker(self, node: SyntaxNode, value: str, buffer: TextSource) -> list[Decoration]:
        if is_sibling_checkbox(node):
            # The checkbox draws over its own marker; hide the bullet entirely
            start_row, start_col, end_row, end_col = node.range
            return [Conceal(row=start_row, start_col=start_col, end_row=end_row, end_col=end_col)]

        # Markers may arrive with or without their leading indentation
        indent = leading_spaces(value)
        depth = list_nesting_depth(node)
        bullet = cycle(self.options.bullets, depth)
        return [_overlay(node, " " * indent + bullet, self.options.highlights.bullet)]

    def _render_checkbox(
        self, node: SyntaxNode, value: str, buffer: TextSource, checked: bool = False
    ) -> list[Decoration]:
        glyphs = self.options.checkbox
        highlights = self.options.highlights.checkbox
        checkbox = glyphs.checked if checked else glyphs.unchecked
        style = highlights.checked if checked else highlights.unchecked

        padding = display_width(value) - display_width(checkbox)
        if padding < 0:
            logger.debug("Checkbox glyph %r wider than marker %r, skipping", checkbox, value)
            return []
        return [_overlay(node, " " * padding + checkbox, style)]

    def _render_quote_marker(self, node: SyntaxNode, value: str, buffer: TextSource) -> list[Decoration]:
        highlights = self.options.highlights
        style = highlights.quote
        quote = enclosing_quote(node)
        if quote is not None:
            key = classify_quote(buffer.get_node_text(quote), self.options.callouts)
            if key is not None:
                style = highlights.callout.get(key, style)

        return [_overlay(node, value.replace(QUOTE_MARKER_CHAR, self.options.quote), style)]

    def _render_table(self, node: SyntaxNode, value: str, buffer: TextSource) -> list[Decoration]:
        if self.options.table_style != "full":
            return []

        # A table closed by end of input ends mid-line instead of at column 0
        end_row = node.end_row + 1 if node.end_col > 0 else node.end_row
        lines = buffer.get_lines(node.start_row, end_row)
        head = first(lines)
        tail = last(lines)
        if head is None or tail is None:
            return []

        # Borders start where the table does; keep any container prefix clear
        indent = " " * display_width(head[: node.start_col])
        borders = build_borders(head[node.start_col :], tail[node.start_col :])
        if borders is None:
            logger.debug("Table at row %d has rows of different widths, skipping borders", node.start_row)
            return []

        top, bottom = borders
        highlights = self.options.highlights.table
        last_row = node.start_row + len(lines) - 1
        return [
            VirtualLine(
                row=node.start_row,
                col=node.start_col,
                chunks=(StyledText.of(indent + top, highlights.head),),
                above=True,
            ),
            VirtualLine(
                row=last_row,
                col=node.start_col,
                chunks=(StyledText.of(indent + bottom, highlights.row),),
                above=False,
            ),
        ]

    def _render_table_row(
        self, node: SyntaxNode, value: str, buffer: TextSource, kind: CaptureKind = CaptureKind.TABLE_ROW
    ) -> list[Decoration]:
        if self.options.table_style not in ("normal", "full"):
            return []

        row = box_row(value, delimiter=kind is CaptureKind.TABLE_DELIM)
        highlights = self.options.highlights.table
        style = highlights.row if kind is CaptureKind.TABLE_ROW else highlights.head
        return [_overlay(node, row, style)]


__all__ = ["MarkdownDecorationRenderer"]
