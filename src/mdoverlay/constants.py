#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the mdoverlay library.

This module centralizes the syntax node type names the renderers inspect,
the capture names of the default rule set, and the default glyphs and
style names of the render configuration.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Syntax Node Types - Node type tags of the markdown block tree
3. Capture Names - Names emitted by the default capture rule set
4. Default Glyphs - Characters drawn over the source text
5. Default Styles - Highlight group names attached to decorations
6. Table Drawing - Box-drawing characters for pipe tables
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

TableStyle = Literal["off", "normal", "full"]
TABLE_STYLES: tuple[str, ...] = ("off", "normal", "full")

DecorationKind = Literal["overlay", "line_background", "virtual_line", "conceal"]

# =============================================================================
# Syntax Node Types
# =============================================================================

NODE_DOCUMENT = "document"
NODE_SECTION = "section"
NODE_THEMATIC_BREAK = "thematic_break"
NODE_FENCED_CODE_BLOCK = "fenced_code_block"
NODE_LIST = "list"
NODE_BLOCK_QUOTE = "block_quote"
NODE_BLOCK_QUOTE_MARKER = "block_quote_marker"
NODE_BLOCK_CONTINUATION = "block_continuation"
NODE_PIPE_TABLE = "pipe_table"
NODE_PIPE_TABLE_HEADER = "pipe_table_header"
NODE_PIPE_TABLE_DELIMITER_ROW = "pipe_table_delimiter_row"
NODE_PIPE_TABLE_ROW = "pipe_table_row"

# Heading markers are typed by level: atx_h1_marker ... atx_h6_marker
ATX_MARKER_TEMPLATE = "atx_h{level}_marker"
MAX_HEADING_LEVEL = 6

NODE_LIST_MARKER_MINUS = "list_marker_minus"
NODE_LIST_MARKER_PLUS = "list_marker_plus"
NODE_LIST_MARKER_STAR = "list_marker_star"

# Every task marker type starts with this prefix
TASK_LIST_MARKER_PREFIX = "task_list_marker"
NODE_TASK_LIST_MARKER_CHECKED = "task_list_marker_checked"
NODE_TASK_LIST_MARKER_UNCHECKED = "task_list_marker_unchecked"

# Ancestors that end every upward walk of the structural helpers
BOUNDARY_NODE_TYPES: frozenset[str] = frozenset({NODE_SECTION, NODE_DOCUMENT})

# =============================================================================
# Capture Names
# =============================================================================

CAPTURE_HEADING = "heading"
CAPTURE_DASH = "dash"
CAPTURE_CODE = "code"
CAPTURE_LIST_MARKER = "list_marker"
CAPTURE_CHECKBOX_UNCHECKED = "checkbox_unchecked"
CAPTURE_CHECKBOX_CHECKED = "checkbox_checked"
CAPTURE_QUOTE_MARKER = "quote_marker"
CAPTURE_TABLE = "table"
CAPTURE_TABLE_HEAD = "table_head"
CAPTURE_TABLE_DELIM = "table_delim"
CAPTURE_TABLE_ROW = "table_row"

# =============================================================================
# Default Glyphs
# =============================================================================

DEFAULT_HEADINGS: tuple[str, ...] = ("◉ ", "○ ", "✸ ", "✿ ", "▶ ", "◆ ")
DEFAULT_DASH = "─"
DEFAULT_BULLETS: tuple[str, ...] = ("●", "○", "◆", "◇")
DEFAULT_CHECKBOX_UNCHECKED = "☐ "
DEFAULT_CHECKBOX_CHECKED = "☑ "
DEFAULT_QUOTE = "┃"
DEFAULT_TABLE_STYLE: TableStyle = "full"

QUOTE_MARKER_CHAR = ">"
TABLE_SEPARATOR_CHAR = "|"

DEFAULT_CALLOUTS: dict[str, str] = {
    "note": "[!NOTE]",
    "tip": "[!TIP]",
    "important": "[!IMPORTANT]",
    "warning": "[!WARNING]",
    "caution": "[!CAUTION]",
}

# =============================================================================
# Default Styles
# =============================================================================

DEFAULT_HEADING_BACKGROUNDS: tuple[str, ...] = ("DiffAdd", "DiffChange", "DiffDelete")
DEFAULT_HEADING_FOREGROUNDS: tuple[str, ...] = (
    "markdownH1",
    "markdownH2",
    "markdownH3",
    "markdownH4",
    "markdownH5",
    "markdownH6",
)
DEFAULT_DASH_STYLE = "LineNr"
DEFAULT_CODE_STYLE = "ColorColumn"
DEFAULT_BULLET_STYLE = "Normal"
DEFAULT_CHECKBOX_UNCHECKED_STYLE = "@markup.list.unchecked"
DEFAULT_CHECKBOX_CHECKED_STYLE = "@markup.heading"
DEFAULT_TABLE_HEAD_STYLE = "@markup.heading"
DEFAULT_TABLE_ROW_STYLE = "Normal"
DEFAULT_QUOTE_STYLE = "@markup.quote"
DEFAULT_CALLOUT_STYLES: dict[str, str] = {
    "note": "DiagnosticInfo",
    "tip": "DiagnosticOk",
    "important": "DiagnosticHint",
    "warning": "DiagnosticWarn",
    "caution": "DiagnosticError",
}

# =============================================================================
# Table Drawing
# =============================================================================

BOX_VERTICAL = "│"
BOX_HORIZONTAL = "─"
BOX_CROSS = "┼"
BOX_TEE_RIGHT = "├"
BOX_TEE_LEFT = "┤"
BOX_TOP_LEFT = "┌"
BOX_TOP_TEE = "┬"
BOX_TOP_RIGHT = "┐"
BOX_BOTTOM_LEFT = "└"
BOX_BOTTOM_TEE = "┴"
BOX_BOTTOM_RIGHT = "┘"

# Delimiter row characters drawn as horizontal rules; alignment colons are kept
DELIMITER_RULE_CHARS: frozenset[str] = frozenset({"-", " "})

# =============================================================================
# Miscellaneous
# =============================================================================

DEFAULT_VIEW_WIDTH = 80
CONFIG_ENV_VAR = "MDOVERLAY_CONFIG"
