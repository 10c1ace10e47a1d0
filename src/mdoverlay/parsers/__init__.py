#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/mdoverlay/parsers/__init__.py
"""Parsers producing syntax trees for the decoration renderers.

The renderers only need a syntax tree and a capture source. Any parser whose
nodes follow the tree-sitter markdown node types can feed them;
:class:`MarkdownBlockParser` runs the tree-sitter markdown grammar itself.

Examples
--------
    >>> from mdoverlay.parsers import MarkdownBlockParser
    >>> tree = MarkdownBlockParser().parse("> quoted\\n")
    >>> tree.root.children[0].children[0].type
    'block_quote'

"""

from mdoverlay.parsers.markdown import MarkdownBlockParser

__all__ = ["MarkdownBlockParser"]
