#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdoverlay/tree/structure.py
"""Structural queries over the syntax tree.

Captures carry no nesting depth and no knowledge of the quote they live in,
so both are recovered by climbing parent links. Every upward walk stops at
the nearest ``section`` or ``document`` ancestor: a list or quote never
extends past the section that contains it.
"""

from __future__ import annotations

from typing import Iterator

from mdoverlay.constants import BOUNDARY_NODE_TYPES, NODE_BLOCK_QUOTE, NODE_LIST, TASK_LIST_MARKER_PREFIX
from mdoverlay.tree.nodes import SyntaxNode


def _ancestors_within_section(node: SyntaxNode) -> Iterator[SyntaxNode]:
    parent = node.parent()
    while parent is not None and parent.type not in BOUNDARY_NODE_TYPES:
        yield parent
        parent = parent.parent()


def is_sibling_checkbox(node: SyntaxNode) -> bool:
    """Return True when the node's next sibling is a task list marker.

    A list marker followed by ``[ ]`` or ``[x]`` is concealed rather than
    replaced with a bullet, leaving the slot to the checkbox glyph.
    """
    sibling = node.next_sibling()
    if sibling is None:
        return False
    return sibling.type.startswith(TASK_LIST_MARKER_PREFIX)


def list_nesting_depth(node: SyntaxNode) -> int:
    """Count the ``list`` ancestors between ``node`` and its section.

    Parameters
    ----------
    node : SyntaxNode
        Usually a list marker

    Returns
    -------
    int
        Nesting depth; 1 for a top level list item, 0 when no list encloses
        the node

    """
    return sum(1 for ancestor in _ancestors_within_section(node) if ancestor.type == NODE_LIST)


def enclosing_quote(node: SyntaxNode) -> SyntaxNode | None:
    """Return the nearest ``block_quote`` ancestor within the node's section."""
    for ancestor in _ancestors_within_section(node):
        if ancestor.type == NODE_BLOCK_QUOTE:
            return ancestor
    return None


__all__ = ["is_sibling_checkbox", "list_nesting_depth", "enclosing_quote"]
