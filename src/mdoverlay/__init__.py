"""mdoverlay - Non-destructive decoration of markdown documents.

mdoverlay computes the visual decorations an editor or previewer draws over
markdown source without changing the text: heading glyphs on a colored
line, rules across thematic breaks, code block backgrounds, depth-aware
bullets, checkbox glyphs, quote bars with callout colors, and box-drawn
pipe tables.

A render pass takes a syntax tree, a read-only snapshot of the text and a
resolved configuration, and produces a stream of decoration instructions:
overlays, line backgrounds, virtual lines and conceals. Painting them is
left to the consumer.

Requirements
------------
- Python 3.10+

Examples
--------
Decorate a document with the default configuration:

    >>> from mdoverlay import render_markdown
    >>> decorations = render_markdown("# Title\\n\\n- item\\n")
    >>> [decoration.kind for decoration in decorations]
    ['line_background', 'overlay']

Use a custom configuration:

    >>> from mdoverlay import RenderOptions
    >>> options = RenderOptions(bullets=("•", "◦", "▪"))
    >>> render_markdown("- item\\n", options)[0].text
    '•'

See Also
--------
mdoverlay.renderers : Decoration renderers and sinks
mdoverlay.options : Render configuration

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

__version__ = "0.1.0"

from mdoverlay.api import render_file, render_markdown  # noqa: E402
from mdoverlay.buffer import TextBuffer, TextSource  # noqa: E402
from mdoverlay.decorations import (  # noqa: E402
    Conceal,
    Decoration,
    LineBackground,
    OverlayReplace,
    StyledText,
    VirtualLine,
)
from mdoverlay.exceptions import (  # noqa: E402
    ConfigurationError,
    MdOverlayError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from mdoverlay.options import RenderOptions  # noqa: E402
from mdoverlay.parsers import MarkdownBlockParser  # noqa: E402
from mdoverlay.query import Capture, CaptureKind, CaptureRule, MarkdownQuery  # noqa: E402
from mdoverlay.renderers import ListSink, MarkdownDecorationRenderer  # noqa: E402

__all__ = [
    "__version__",
    "render_markdown",
    "render_file",
    "TextBuffer",
    "TextSource",
    "Conceal",
    "Decoration",
    "LineBackground",
    "OverlayReplace",
    "StyledText",
    "VirtualLine",
    "ConfigurationError",
    "MdOverlayError",
    "ParsingError",
    "RenderingError",
    "ValidationError",
    "RenderOptions",
    "MarkdownBlockParser",
    "Capture",
    "CaptureKind",
    "CaptureRule",
    "MarkdownQuery",
    "ListSink",
    "MarkdownDecorationRenderer",
]
