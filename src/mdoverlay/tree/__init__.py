#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdoverlay/tree/__init__.py
"""Syntax tree arena, builder, and structural queries.

    >>> from mdoverlay.tree import TreeBuilder, list_nesting_depth
"""

from mdoverlay.tree.builder import TreeBuilder
from mdoverlay.tree.nodes import NodeRange, NodeRecord, SyntaxNode, SyntaxTree
from mdoverlay.tree.structure import enclosing_quote, is_sibling_checkbox, list_nesting_depth

__all__ = [
    "NodeRange",
    "NodeRecord",
    "SyntaxNode",
    "SyntaxTree",
    "TreeBuilder",
    "enclosing_quote",
    "is_sibling_checkbox",
    "list_nesting_depth",
]
