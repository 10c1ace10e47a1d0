#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/mdoverlay/renderers/__init__.py
"""Decoration renderers for parsed markdown.

This package turns the captures of a syntax tree into decoration
instructions:

- MarkdownDecorationRenderer: headings, thematic breaks, code blocks, list
  markers, checkboxes, quotes and callouts, and pipe tables
- BaseDecorationRenderer: abstract base for custom renderers
- ListSink / JsonLinesSink: receivers for the decoration stream

Examples
--------
Render decorations for a document:

    >>> from mdoverlay.buffer import TextBuffer
    >>> from mdoverlay.parsers import MarkdownBlockParser
    >>> from mdoverlay.renderers import ListSink, MarkdownDecorationRenderer
    >>> text = "# Title\\n\\n---\\n"
    >>> sink = ListSink()
    >>> _ = MarkdownDecorationRenderer().render(MarkdownBlockParser().parse(text).root, TextBuffer(text), sink)
    >>> [decoration.kind for decoration in sink]
    ['line_background', 'overlay']

"""

from mdoverlay.renderers.base import BaseDecorationRenderer, DecorationSink, JsonLinesSink, ListSink
from mdoverlay.renderers.markdown import MarkdownDecorationRenderer
from mdoverlay.renderers.table import box_row, build_borders, column_widths

__all__ = [
    "BaseDecorationRenderer",
    "DecorationSink",
    "JsonLinesSink",
    "ListSink",
    "MarkdownDecorationRenderer",
    "box_row",
    "build_borders",
    "column_widths",
]
