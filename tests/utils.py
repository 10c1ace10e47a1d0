"""Test utilities for the mdoverlay test suite.

This module provides helpers for building synthetic syntax trees, a
minimal text source, and temporary directory handling.
"""

import shutil
import tempfile
from pathlib import Path
from typing import Sequence

from mdoverlay.tree import SyntaxNode, SyntaxTree, TreeBuilder


class StaticTextSource:
    """Text source returning fixed values, for renderer tests on synthetic trees.

    Node text is looked up by arena index; unknown nodes yield ``default``.
    """

    def __init__(
        self,
        texts: dict[int, str] | None = None,
        lines: Sequence[str] = (),
        width: int = 80,
        default: str = "",
    ):
        self.texts = texts or {}
        self.lines = tuple(lines)
        self.width = width
        self.default = default

    def get_node_text(self, node: SyntaxNode) -> str:
        return self.texts.get(node.index, self.default)

    def get_lines(self, start_row: int, end_row: int) -> tuple[str, ...]:
        return self.lines[start_row:end_row]

    def get_view_width(self) -> int:
        return self.width


def find_nodes(tree: SyntaxTree, node_type: str) -> list[SyntaxNode]:
    """Return every node of ``node_type`` in pre-order."""
    return [node for node in tree.root.walk() if node.type == node_type]


def nested_list_tree(depth: int, marker: str = "list_marker_minus") -> tuple[SyntaxTree, int]:
    """Build a document with ``depth`` nested lists, one item each.

    Returns
    -------
    tuple[SyntaxTree, int]
        The tree and the arena index of the innermost list marker

    """
    builder = TreeBuilder()
    builder.open("document", 0, 0)
    marker_index = -1
    for level in range(depth):
        indent = 2 * level
        builder.open("list", level, indent)
        builder.open("list_item", level, indent)
        marker_index = builder.leaf(marker, level, indent, level, indent + 2)
    return builder.build(end=(depth, 0)), marker_index


def create_test_temp_dir() -> Path:
    """Create a temporary directory for test files."""
    return Path(tempfile.mkdtemp(prefix="mdoverlay_test_"))


def cleanup_test_dir(temp_dir: Path) -> None:
    """Remove a temporary test directory and its contents."""
    shutil.rmtree(temp_dir, ignore_errors=True)
