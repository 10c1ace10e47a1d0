#  Copyright (c) 2025 Tom Villani, Ph.D.
# mdoverlay/options/render.py
"""Configuration options for markdown decoration rendering.

This module defines the resolved, immutable configuration consumed by the
decoration renderer: the glyphs drawn over markdown syntax and the style
names attached to every decoration. Configuration values are validated once
at construction; the renderer assumes every list it selects from is
non-empty.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Sequence

from mdoverlay.constants import (
    DEFAULT_BULLET_STYLE,
    DEFAULT_BULLETS,
    DEFAULT_CALLOUT_STYLES,
    DEFAULT_CALLOUTS,
    DEFAULT_CHECKBOX_CHECKED,
    DEFAULT_CHECKBOX_CHECKED_STYLE,
    DEFAULT_CHECKBOX_UNCHECKED,
    DEFAULT_CHECKBOX_UNCHECKED_STYLE,
    DEFAULT_CODE_STYLE,
    DEFAULT_DASH,
    DEFAULT_DASH_STYLE,
    DEFAULT_HEADING_BACKGROUNDS,
    DEFAULT_HEADING_FOREGROUNDS,
    DEFAULT_HEADINGS,
    DEFAULT_QUOTE,
    DEFAULT_QUOTE_STYLE,
    DEFAULT_TABLE_HEAD_STYLE,
    DEFAULT_TABLE_ROW_STYLE,
    DEFAULT_TABLE_STYLE,
    TABLE_STYLES,
    TableStyle,
)
from mdoverlay.exceptions import ConfigurationError
from mdoverlay.options.base import BaseOptions
from mdoverlay.utils.text import display_width


def _require_non_empty_strings(values: Sequence[Any], parameter_name: str) -> None:
    if isinstance(values, str) or not isinstance(values, Sequence):
        raise ConfigurationError(
            f"{parameter_name} must be a list of strings, got {type(values).__name__}",
            parameter_name=parameter_name,
            parameter_value=values,
        )
    if not values:
        raise ConfigurationError(
            f"{parameter_name} must contain at least one entry",
            parameter_name=parameter_name,
            parameter_value=values,
        )
    for value in values:
        if not isinstance(value, str):
            raise ConfigurationError(
                f"{parameter_name} entries must be strings, got {type(value).__name__}",
                parameter_name=parameter_name,
                parameter_value=values,
            )


def _require_string(value: Any, parameter_name: str, allow_empty: bool = False) -> None:
    if not isinstance(value, str) or (not allow_empty and not value):
        raise ConfigurationError(
            f"{parameter_name} must be a non-empty string, got {value!r}",
            parameter_name=parameter_name,
            parameter_value=value,
        )


@dataclass(frozen=True)
class CheckboxGlyphs(BaseOptions):
    """Glyphs drawn over task list markers.

    Parameters
    ----------
    unchecked : str, default "☐ "
        Glyph replacing ``[ ]``
    checked : str, default "☑ "
        Glyph replacing ``[x]``

    """

    unchecked: str = field(default=DEFAULT_CHECKBOX_UNCHECKED, metadata={"help": "Glyph for unchecked tasks"})
    checked: str = field(default=DEFAULT_CHECKBOX_CHECKED, metadata={"help": "Glyph for checked tasks"})

    def __post_init__(self) -> None:
        """Validate that both glyphs are non-empty strings."""
        _require_string(self.unchecked, "checkbox.unchecked")
        _require_string(self.checked, "checkbox.checked")


@dataclass(frozen=True)
class HeadingHighlights(BaseOptions):
    """Per-level heading styles; levels past the end reuse the last entry."""

    backgrounds: tuple[str, ...] = field(
        default=DEFAULT_HEADING_BACKGROUNDS,
        metadata={"help": "Line background style per heading level"},
    )
    foregrounds: tuple[str, ...] = field(
        default=DEFAULT_HEADING_FOREGROUNDS,
        metadata={"help": "Glyph foreground style per heading level"},
    )

    def __post_init__(self) -> None:
        """Validate that both style ramps are non-empty."""
        _require_non_empty_strings(self.backgrounds, "highlights.heading.backgrounds")
        _require_non_empty_strings(self.foregrounds, "highlights.heading.foregrounds")
        object.__setattr__(self, "backgrounds", tuple(self.backgrounds))
        object.__setattr__(self, "foregrounds", tuple(self.foregrounds))


@dataclass(frozen=True)
class CheckboxHighlights(BaseOptions):
    """Styles of the checkbox glyphs."""

    unchecked: str = field(default=DEFAULT_CHECKBOX_UNCHECKED_STYLE, metadata={"help": "Unchecked task style"})
    checked: str = field(default=DEFAULT_CHECKBOX_CHECKED_STYLE, metadata={"help": "Checked task style"})

    def __post_init__(self) -> None:
        _require_string(self.unchecked, "highlights.checkbox.unchecked")
        _require_string(self.checked, "highlights.checkbox.checked")


@dataclass(frozen=True)
class TableHighlights(BaseOptions):
    """Styles of table rows and borders."""

    head: str = field(default=DEFAULT_TABLE_HEAD_STYLE, metadata={"help": "Header/delimiter row and top border"})
    row: str = field(default=DEFAULT_TABLE_ROW_STYLE, metadata={"help": "Body rows and bottom border"})

    def __post_init__(self) -> None:
        _require_string(self.head, "highlights.table.head")
        _require_string(self.row, "highlights.table.row")


@dataclass(frozen=True)
class HighlightOptions(BaseOptions):
    """Style names attached to every decoration.

    Parameters
    ----------
    heading : HeadingHighlights
        Heading background/foreground ramps
    dash : str
        Thematic break style
    code : str
        Fenced code block background
    bullet : str
        List bullet style
    checkbox : CheckboxHighlights
        Checkbox glyph styles
    table : TableHighlights
        Table row and border styles
    quote : str
        Default quote marker style
    callout : Mapping[str, str]
        Callout key to quote marker style

    """

    heading: HeadingHighlights = field(default_factory=HeadingHighlights)
    dash: str = field(default=DEFAULT_DASH_STYLE, metadata={"help": "Thematic break style"})
    code: str = field(default=DEFAULT_CODE_STYLE, metadata={"help": "Code block background style"})
    bullet: str = field(default=DEFAULT_BULLET_STYLE, metadata={"help": "List bullet style"})
    checkbox: CheckboxHighlights = field(default_factory=CheckboxHighlights)
    table: TableHighlights = field(default_factory=TableHighlights)
    quote: str = field(default=DEFAULT_QUOTE_STYLE, metadata={"help": "Quote marker style"})
    callout: Mapping[str, str] = field(
        default_factory=lambda: dict(DEFAULT_CALLOUT_STYLES),
        metadata={"help": "Quote marker style per callout key"},
    )

    _nested = {"heading": HeadingHighlights, "checkbox": CheckboxHighlights, "table": TableHighlights}

    def __post_init__(self) -> None:
        """Validate scalar style names and the callout style map."""
        for name in ("dash", "code", "bullet", "quote"):
            _require_string(getattr(self, name), f"highlights.{name}")
        if not isinstance(self.callout, Mapping):
            raise ConfigurationError(
                "highlights.callout must be a mapping of callout key to style",
                parameter_name="highlights.callout",
                parameter_value=self.callout,
            )
        for key, style in self.callout.items():
            _require_string(style, f"highlights.callout.{key}")
        object.__setattr__(self, "callout", MappingProxyType(dict(self.callout)))


@dataclass(frozen=True)
class RenderOptions(BaseOptions):
    r"""Resolved configuration for a markdown decoration pass.

    Parameters
    ----------
    headings : tuple of str
        Heading glyphs, cycled by heading level
    dash : str, default "─"
        Single-cell fill character for thematic breaks
    bullets : tuple of str
        Bullet glyphs, cycled by list nesting depth
    checkbox : CheckboxGlyphs
        Task list glyphs
    quote : str, default "┃"
        Replacement for every ``>`` of a quote marker
    table_style : {"off", "normal", "full"}, default "full"
        ``normal`` redraws table rows with box-drawing characters, ``full``
        also adds top and bottom borders
    callouts : Mapping[str, str]
        Callout key to the literal marker that identifies it
    highlights : HighlightOptions
        Style names

    Examples
    --------
        >>> options = RenderOptions(bullets=("•", "◦", "▪"), table_style="normal")
        >>> options.create_updated(table_style="off").table_style
        'off'
        >>> custom = RenderOptions.from_dict({"highlights": {"heading": {"backgrounds": ["H1bg", "H2bg"]}}})
        >>> custom.highlights.heading.backgrounds
        ('H1bg', 'H2bg')

    """

    headings: tuple[str, ...] = field(default=DEFAULT_HEADINGS, metadata={"help": "Heading glyphs by level"})
    dash: str = field(default=DEFAULT_DASH, metadata={"help": "Thematic break fill character"})
    bullets: tuple[str, ...] = field(default=DEFAULT_BULLETS, metadata={"help": "Bullet glyphs by nesting depth"})
    checkbox: CheckboxGlyphs = field(default_factory=CheckboxGlyphs)
    quote: str = field(default=DEFAULT_QUOTE, metadata={"help": "Quote marker replacement glyph"})
    table_style: TableStyle = field(
        default=DEFAULT_TABLE_STYLE,
        metadata={"help": "Table rendering: off, normal, or full", "choices": list(TABLE_STYLES)},
    )
    callouts: Mapping[str, str] = field(
        default_factory=lambda: dict(DEFAULT_CALLOUTS),
        metadata={"help": "Callout key to bracketed marker"},
    )
    highlights: HighlightOptions = field(default_factory=HighlightOptions)

    _nested = {"checkbox": CheckboxGlyphs, "highlights": HighlightOptions}

    def __post_init__(self) -> None:
        """Validate glyph lists, the table style and callout coverage.

        Raises
        ------
        ConfigurationError
            If any field value is unusable by the renderer

        """
        _require_non_empty_strings(self.headings, "headings")
        _require_non_empty_strings(self.bullets, "bullets")
        object.__setattr__(self, "headings", tuple(self.headings))
        object.__setattr__(self, "bullets", tuple(self.bullets))
        _require_string(self.quote, "quote")
        _require_string(self.dash, "dash")
        if display_width(self.dash) != 1:
            raise ConfigurationError(
                f"dash must be a single display cell wide, got {self.dash!r}",
                parameter_name="dash",
                parameter_value=self.dash,
            )
        if self.table_style not in TABLE_STYLES:
            raise ConfigurationError(
                f"table_style must be one of {', '.join(TABLE_STYLES)}, got {self.table_style!r}",
                parameter_name="table_style",
                parameter_value=self.table_style,
            )
        if not isinstance(self.callouts, Mapping):
            raise ConfigurationError(
                "callouts must be a mapping of callout key to marker",
                parameter_name="callouts",
                parameter_value=self.callouts,
            )
        for key, marker in self.callouts.items():
            _require_string(marker, f"callouts.{key}")
            if key not in self.highlights.callout:
                raise ConfigurationError(
                    f"Callout '{key}' has no style in highlights.callout",
                    parameter_name=f"highlights.callout.{key}",
                )
        object.__setattr__(self, "callouts", MappingProxyType(dict(self.callouts)))


__all__ = [
    "CheckboxGlyphs",
    "HeadingHighlights",
    "CheckboxHighlights",
    "TableHighlights",
    "HighlightOptions",
    "RenderOptions",
]
