"""The main exported API functions for markdown decoration."""

#  Copyright (c) 2025 Tom Villani, Ph.D.
# src/mdoverlay/api.py
import logging
from pathlib import Path
from typing import Optional, Union

from mdoverlay.buffer import TextBuffer
from mdoverlay.constants import DEFAULT_VIEW_WIDTH
from mdoverlay.decorations import Decoration
from mdoverlay.options.render import RenderOptions
from mdoverlay.parsers.markdown import MarkdownBlockParser
from mdoverlay.query import MarkdownQuery
from mdoverlay.renderers.base import DecorationSink
from mdoverlay.renderers.markdown import MarkdownDecorationRenderer
from mdoverlay.utils.timing import debug_timer

logger = logging.getLogger(__name__)


def render_markdown(
    text: str,
    options: Optional[RenderOptions] = None,
    *,
    width: int = DEFAULT_VIEW_WIDTH,
    sink: Optional[DecorationSink] = None,
    query: Optional[MarkdownQuery] = None,
) -> list[Decoration]:
    """Compute the decorations for a markdown document.

    The text is parsed into a syntax tree, the capture rules select the
    nodes to decorate, and every capture is rendered in order. The text
    itself is never modified.

    Parameters
    ----------
    text : str
        Markdown source
    options : RenderOptions, optional
        Render configuration; defaults to ``RenderOptions()``
    width : int, default 80
        Display width of the view the decorations are drawn in
    sink : DecorationSink, optional
        Receiver called once per decoration, in emission order
    query : MarkdownQuery, optional
        Capture rules; defaults to the markdown rule set

    Returns
    -------
    list[Decoration]
        All decorations in emission order

    Raises
    ------
    ValidationError
        If ``options`` is not a RenderOptions instance
    ParsingError
        If the text cannot be parsed

    Examples
    --------
    Basic usage:
        >>> decorations = render_markdown("# Title\\n")
        >>> decorations[0].chunks[0].text
        '◉ '

    With options:
        >>> options = RenderOptions(table_style="off")
        >>> render_markdown("| a |\\n| - |\\n", options)
        []

    """
    renderer = MarkdownDecorationRenderer(options, query=query)
    buffer = TextBuffer(text, width=width)

    with debug_timer(logger, "Parsing (markdown)"):
        tree = MarkdownBlockParser().parse(text)

    with debug_timer(logger, "Rendering (decorations)"):
        decorations = renderer.render(tree.root, buffer, sink)

    logger.debug("Produced %d decoration(s) for %d line(s)", len(decorations), buffer.line_count)
    return decorations


def render_file(
    path: Union[str, Path],
    options: Optional[RenderOptions] = None,
    *,
    width: int = DEFAULT_VIEW_WIDTH,
    encoding: str = "utf-8",
    sink: Optional[DecorationSink] = None,
    query: Optional[MarkdownQuery] = None,
) -> list[Decoration]:
    """Read a markdown file and compute its decorations.

    Parameters
    ----------
    path : str or Path
        Markdown file to read
    options : RenderOptions, optional
        Render configuration
    width : int, default 80
        Display width of the view
    encoding : str, default "utf-8"
        Text encoding of the file
    sink : DecorationSink, optional
        Receiver called once per decoration
    query : MarkdownQuery, optional
        Capture rules

    Returns
    -------
    list[Decoration]
        All decorations in emission order

    Raises
    ------
    OSError
        If the file cannot be read

    """
    logger.debug("Reading %s", path)
    text = Path(path).read_text(encoding=encoding)
    return render_markdown(text, options, width=width, sink=sink, query=query)


__all__ = ["render_markdown", "render_file"]
