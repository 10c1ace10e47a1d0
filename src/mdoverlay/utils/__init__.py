#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Utility helpers shared by the mdoverlay renderers."""

from mdoverlay.utils.lists import clamp_last, cycle, first, last
from mdoverlay.utils.text import display_width, leading_spaces, split_trim_empty

__all__ = [
    "clamp_last",
    "cycle",
    "first",
    "last",
    "display_width",
    "leading_spaces",
    "split_trim_empty",
]
