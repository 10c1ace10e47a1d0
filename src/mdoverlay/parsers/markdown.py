#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdoverlay/parsers/markdown.py
"""Markdown block parsing with tree-sitter.

This module runs the tree-sitter markdown block grammar over a document and
copies the named nodes of the resulting parse tree into a
:class:`~mdoverlay.tree.nodes.SyntaxTree` arena. The arena keeps the
grammar's node types (``atx_h1_marker``, ``list_marker_minus``,
``task_list_marker_checked``, ``block_quote_marker``, ``pipe_table_row``,
...), so the default capture rules select exactly the nodes an editor
running the same grammar would decorate.

Only the block grammar is used. Inline content stays a single ``inline``
node whose children are the ``block_continuation`` prefixes of its
continuation lines.

Tree-sitter reports columns as UTF-8 byte offsets. The arena stores
character offsets, matching :class:`~mdoverlay.buffer.TextBuffer`.

"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence, Union

import tree_sitter_markdown as tsmarkdown
from tree_sitter import Language, Node, Parser

from mdoverlay.exceptions import ParsingError
from mdoverlay.tree.builder import TreeBuilder
from mdoverlay.tree.nodes import SyntaxTree

logger = logging.getLogger(__name__)


class ColumnMap:
    """Convert tree-sitter byte columns to character columns.

    Parameters
    ----------
    lines : sequence of str
        Source lines without line terminators

    Examples
    --------
        >>> ColumnMap(["a表b"]).char_column(0, 4)
        2

    """

    def __init__(self, lines: Sequence[str]):
        """Encode every line once; ASCII lines need no conversion."""
        self._encoded: list[bytes | None] = []
        for line in lines:
            encoded = line.encode("utf-8")
            self._encoded.append(None if len(encoded) == len(line) else encoded)

    def char_column(self, row: int, byte_column: int) -> int:
        """Return the character offset of ``byte_column`` on ``row``."""
        if row >= len(self._encoded) or byte_column == 0:
            return byte_column
        encoded = self._encoded[row]
        if encoded is None:
            return byte_column
        return len(encoded[:byte_column].decode("utf-8", errors="replace"))

    def point(self, ts_point: tuple[int, int]) -> tuple[int, int]:
        """Convert a tree-sitter ``(row, byte_column)`` point."""
        row, byte_column = ts_point
        return row, self.char_column(row, byte_column)


def copy_tree(root: Node, columns: ColumnMap) -> SyntaxTree:
    """Copy the named nodes under ``root`` into a :class:`SyntaxTree`.

    Anonymous tokens (``|``, ``#`` runs inside other nodes, newlines) and
    nodes inserted by error recovery are left out; every other node keeps
    its type and range.
    """
    builder = TreeBuilder()
    pending: list[tuple[Node, bool]] = [(root, False)]
    while pending:
        node, entered = pending.pop()
        if entered:
            builder.close(*columns.point(node.end_point))
            continue
        builder.open(node.type, *columns.point(node.start_point))
        pending.append((node, True))
        pending.extend((child, False) for child in reversed(node.named_children) if not child.is_missing)
    return builder.build()


class MarkdownBlockParser:
    """Parse markdown text into a block-level :class:`SyntaxTree`.

    Examples
    --------
        >>> tree = MarkdownBlockParser().parse("# Title\\n\\n- [ ] task\\n")
        >>> [node.type for node in tree.root.walk()][:4]
        ['document', 'section', 'atx_heading', 'atx_h1_marker']

    """

    def __init__(self) -> None:
        """Initialize the tree-sitter parser with the markdown block grammar."""
        self._parser = Parser(Language(tsmarkdown.language()))

    def parse(self, text: str) -> SyntaxTree:
        """Parse markdown text into a syntax tree.

        Parameters
        ----------
        text : str
            Markdown source; ``\\r\\n`` and ``\\r`` line endings are normalized

        Returns
        -------
        SyntaxTree
            Tree rooted at a ``document`` node

        Raises
        ------
        ParsingError
            If tree-sitter fails or its tree cannot be copied

        """
        text = text.replace("\r\n", "\n").replace("\r", "\n")
        lines = text.split("\n")
        try:
            ts_tree = self._parser.parse(text.encode("utf-8"))
            if ts_tree.root_node.has_error:
                logger.debug("Markdown parse tree contains error nodes")
            tree = copy_tree(ts_tree.root_node, ColumnMap(lines))
        except Exception as e:
            raise ParsingError(
                f"Failed to parse markdown block structure: {e}", parsing_stage="tree_sitter", original_error=e
            ) from e

        logger.debug("Parsed %d line(s) into %d node(s)", len(lines), len(tree))
        return tree

    def parse_file(self, path: Union[str, Path], encoding: str = "utf-8") -> SyntaxTree:
        """Read and parse a markdown file.

        Raises
        ------
        OSError
            If the file cannot be read
        ParsingError
            If parsing fails

        """
        return self.parse(Path(path).read_text(encoding=encoding))


__all__ = ["ColumnMap", "MarkdownBlockParser", "copy_tree"]
