#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Render configuration for mdoverlay.

    >>> from mdoverlay.options import RenderOptions
    >>> RenderOptions().table_style
    'full'
"""

from mdoverlay.options.base import BaseOptions, CloneFrozenMixin
from mdoverlay.options.render import (
    CheckboxGlyphs,
    CheckboxHighlights,
    HeadingHighlights,
    HighlightOptions,
    RenderOptions,
    TableHighlights,
)

__all__ = [
    "BaseOptions",
    "CloneFrozenMixin",
    "CheckboxGlyphs",
    "CheckboxHighlights",
    "HeadingHighlights",
    "HighlightOptions",
    "RenderOptions",
    "TableHighlights",
]
