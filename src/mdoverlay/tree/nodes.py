#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdoverlay/tree/nodes.py
"""Arena representation of a parsed markdown syntax tree.

The decoration engine never mutates the tree it inspects, and it never
keeps nodes beyond a single render pass. A tree is therefore stored as a
flat arena of immutable records addressed by index. Parent, child and
sibling relationships are plain indices, which keeps upward walks cheap and
makes synthetic trees trivial to build in tests.

Positions follow the usual syntax-tree convention: rows and columns are
0-based, the end position is exclusive, and block nodes that cover whole
lines end at ``(last_row + 1, 0)``.

Classes
-------
NodeRecord : Immutable storage for one node in the arena
SyntaxTree : The arena itself
SyntaxNode : Lightweight handle (tree, index) used by all tree helpers

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Sequence

NodeRange = tuple[int, int, int, int]


@dataclass(frozen=True)
class NodeRecord:
    """Storage for a single node of a :class:`SyntaxTree`.

    Parameters
    ----------
    type : str
        Node type tag (e.g. ``"list_marker_minus"``)
    start_row, start_col, end_row, end_col : int
        Source range, end exclusive
    parent : int or None
        Index of the parent node, None for the root
    children : tuple of int
        Indices of the child nodes in source order

    """

    type: str
    start_row: int
    start_col: int
    end_row: int
    end_col: int
    parent: Optional[int]
    children: tuple[int, ...] = ()


class SyntaxTree:
    """Immutable arena of syntax nodes.

    Parameters
    ----------
    records : sequence of NodeRecord
        Node records; index 0 is the root

    Examples
    --------
        >>> from mdoverlay.tree.builder import TreeBuilder
        >>> builder = TreeBuilder()
        >>> builder.open("document", 0, 0)
        0
        >>> tree = builder.build(end=(1, 0))
        >>> tree.root.type
        'document'

    """

    def __init__(self, records: Sequence[NodeRecord]):
        """Initialize the tree from its node records."""
        if not records:
            raise ValueError("A syntax tree needs at least a root node")
        self._records: tuple[NodeRecord, ...] = tuple(records)

    def __len__(self) -> int:
        return len(self._records)

    def record(self, index: int) -> NodeRecord:
        """Return the stored record of the node at ``index``."""
        return self._records[index]

    def node(self, index: int) -> SyntaxNode:
        """Return a handle for the node at ``index``."""
        if not 0 <= index < len(self._records):
            raise IndexError(f"Node index {index} out of range")
        return SyntaxNode(self, index)

    @property
    def root(self) -> SyntaxNode:
        """Handle for the root node."""
        return SyntaxNode(self, 0)

    def __repr__(self) -> str:
        return f"SyntaxTree(nodes={len(self._records)}, root={self._records[0].type!r})"


@dataclass(frozen=True)
class SyntaxNode:
    """Handle into a :class:`SyntaxTree`.

    Handles are cheap value objects: two handles are equal when they point at
    the same index of the same tree. All navigation returns new handles and
    never modifies the arena.
    """

    tree: SyntaxTree
    index: int

    @property
    def _record(self) -> NodeRecord:
        return self.tree.record(self.index)

    @property
    def type(self) -> str:
        """Node type tag."""
        return self._record.type

    @property
    def start_row(self) -> int:
        return self._record.start_row

    @property
    def start_col(self) -> int:
        return self._record.start_col

    @property
    def end_row(self) -> int:
        return self._record.end_row

    @property
    def end_col(self) -> int:
        return self._record.end_col

    @property
    def range(self) -> NodeRange:
        """Return ``(start_row, start_col, end_row, end_col)``."""
        record = self._record
        return record.start_row, record.start_col, record.end_row, record.end_col

    @property
    def children(self) -> list[SyntaxNode]:
        """Child handles in source order."""
        return [SyntaxNode(self.tree, child) for child in self._record.children]

    @property
    def child_count(self) -> int:
        return len(self._record.children)

    def parent(self) -> SyntaxNode | None:
        """Return the parent node, or None at the root."""
        parent = self._record.parent
        return None if parent is None else SyntaxNode(self.tree, parent)

    def _sibling(self, offset: int) -> SyntaxNode | None:
        parent = self._record.parent
        if parent is None:
            return None
        siblings = self.tree.record(parent).children
        position = siblings.index(self.index) + offset
        if 0 <= position < len(siblings):
            return SyntaxNode(self.tree, siblings[position])
        return None

    def next_sibling(self) -> SyntaxNode | None:
        """Return the following sibling, or None for the last child."""
        return self._sibling(1)

    def prev_sibling(self) -> SyntaxNode | None:
        """Return the preceding sibling, or None for the first child."""
        return self._sibling(-1)

    def walk(self) -> Iterator[SyntaxNode]:
        """Yield this node and all of its descendants in pre-order."""
        stack = [self.index]
        while stack:
            index = stack.pop()
            yield SyntaxNode(self.tree, index)
            stack.extend(reversed(self.tree.record(index).children))

    def __repr__(self) -> str:
        start_row, start_col, end_row, end_col = self.range
        return f"<{self.type} [{start_row}:{start_col}-{end_row}:{end_col}]>"


__all__ = ["NodeRange", "NodeRecord", "SyntaxTree", "SyntaxNode"]
