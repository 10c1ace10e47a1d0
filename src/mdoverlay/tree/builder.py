#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdoverlay/tree/builder.py
"""Builder for syntax tree arenas.

Parsers and tests describe a tree as a sequence of open/close events; the
builder handles index bookkeeping and produces an immutable
:class:`~mdoverlay.tree.nodes.SyntaxTree`.

Examples
--------
A top level list with one item:

    >>> builder = TreeBuilder()
    >>> builder.open("document", 0, 0)
    0
    >>> builder.open("list", 0, 0)
    1
    >>> builder.open("list_item", 0, 0)
    2
    >>> builder.leaf("list_marker_minus", 0, 0, 0, 2)
    3
    >>> tree = builder.build(end=(1, 0))
    >>> tree.node(3).parent().type
    'list_item'

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from mdoverlay.tree.nodes import NodeRecord, SyntaxTree


@dataclass
class _PendingNode:
    type: str
    start_row: int
    start_col: int
    parent: Optional[int]
    end_row: int = -1
    end_col: int = -1
    children: list[int] = field(default_factory=list)


class TreeBuilder:
    """Incrementally assemble a :class:`SyntaxTree`.

    Nodes are appended in pre-order. ``open`` pushes a container that stays
    current until ``close``; ``leaf`` adds a complete node under the current
    container.
    """

    def __init__(self) -> None:
        """Initialize an empty builder."""
        self._nodes: list[_PendingNode] = []
        self._stack: list[int] = []

    @property
    def depth(self) -> int:
        """Number of currently open containers."""
        return len(self._stack)

    @property
    def current_type(self) -> str | None:
        """Type of the innermost open container."""
        return self._nodes[self._stack[-1]].type if self._stack else None

    def _append(self, node_type: str, start_row: int, start_col: int) -> int:
        if not self._stack and self._nodes:
            raise ValueError("Only one root node can be opened")
        parent = self._stack[-1] if self._stack else None
        index = len(self._nodes)
        self._nodes.append(_PendingNode(node_type, start_row, start_col, parent))
        if parent is not None:
            self._nodes[parent].children.append(index)
        return index

    def open(self, node_type: str, start_row: int, start_col: int) -> int:
        """Open a container node and make it current.

        Returns
        -------
        int
            Arena index of the new node

        """
        index = self._append(node_type, start_row, start_col)
        self._stack.append(index)
        return index

    def close(self, end_row: int, end_col: int) -> int:
        """Close the current container at the given end position.

        Returns
        -------
        int
            Arena index of the closed node

        """
        if not self._stack:
            raise ValueError("No open node to close")
        index = self._stack.pop()
        pending = self._nodes[index]
        pending.end_row = end_row
        pending.end_col = end_col
        return index

    def leaf(self, node_type: str, start_row: int, start_col: int, end_row: int, end_col: int) -> int:
        """Add a complete node under the current container."""
        if not self._stack:
            raise ValueError(f"Cannot add {node_type!r} without an open container")
        index = self._append(node_type, start_row, start_col)
        self._nodes[index].end_row = end_row
        self._nodes[index].end_col = end_col
        return index

    def build(self, end: tuple[int, int] | None = None) -> SyntaxTree:
        """Freeze the arena into a :class:`SyntaxTree`.

        Parameters
        ----------
        end : tuple of (int, int), optional
            End position used to close containers that are still open

        Raises
        ------
        ValueError
            If containers are still open and no ``end`` is given

        """
        if self._stack:
            if end is None:
                raise ValueError(f"{len(self._stack)} node(s) still open; pass end= to close them")
            while self._stack:
                self.close(*end)
        if not self._nodes:
            raise ValueError("Cannot build an empty tree")
        return SyntaxTree(
            [
                NodeRecord(
                    type=node.type,
                    start_row=node.start_row,
                    start_col=node.start_col,
                    end_row=node.end_row,
                    end_col=node.end_col,
                    parent=node.parent,
                    children=tuple(node.children),
                )
                for node in self._nodes
            ]
        )


__all__ = ["TreeBuilder"]
