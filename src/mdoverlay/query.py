#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdoverlay/query.py
"""Capture rules selecting the syntax nodes that get decorated.

A capture is a ``(name, node)`` pair. :class:`MarkdownQuery` walks a syntax
tree in pre-order and yields a capture for every node matched by one of its
rules. The default rule set covers headings, thematic breaks, fenced code,
bullet list markers, task markers, quote markers and pipe tables.

Rules can be extended with new capture names. Names outside
:class:`CaptureKind` have no renderer; the render driver reports and skips
them.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, Optional

from mdoverlay.constants import (
    ATX_MARKER_TEMPLATE,
    CAPTURE_CHECKBOX_CHECKED,
    CAPTURE_CHECKBOX_UNCHECKED,
    CAPTURE_CODE,
    CAPTURE_DASH,
    CAPTURE_HEADING,
    CAPTURE_LIST_MARKER,
    CAPTURE_QUOTE_MARKER,
    CAPTURE_TABLE,
    CAPTURE_TABLE_DELIM,
    CAPTURE_TABLE_HEAD,
    CAPTURE_TABLE_ROW,
    MAX_HEADING_LEVEL,
    NODE_BLOCK_CONTINUATION,
    NODE_BLOCK_QUOTE,
    NODE_BLOCK_QUOTE_MARKER,
    NODE_FENCED_CODE_BLOCK,
    NODE_LIST_MARKER_MINUS,
    NODE_LIST_MARKER_PLUS,
    NODE_LIST_MARKER_STAR,
    NODE_PIPE_TABLE,
    NODE_PIPE_TABLE_DELIMITER_ROW,
    NODE_PIPE_TABLE_HEADER,
    NODE_PIPE_TABLE_ROW,
    NODE_TASK_LIST_MARKER_CHECKED,
    NODE_TASK_LIST_MARKER_UNCHECKED,
    NODE_THEMATIC_BREAK,
)
from mdoverlay.tree.nodes import SyntaxNode


class CaptureKind(str, Enum):
    """Capture names that have a renderer."""

    HEADING = CAPTURE_HEADING
    DASH = CAPTURE_DASH
    CODE = CAPTURE_CODE
    LIST_MARKER = CAPTURE_LIST_MARKER
    CHECKBOX_UNCHECKED = CAPTURE_CHECKBOX_UNCHECKED
    CHECKBOX_CHECKED = CAPTURE_CHECKBOX_CHECKED
    QUOTE_MARKER = CAPTURE_QUOTE_MARKER
    TABLE = CAPTURE_TABLE
    TABLE_HEAD = CAPTURE_TABLE_HEAD
    TABLE_DELIM = CAPTURE_TABLE_DELIM
    TABLE_ROW = CAPTURE_TABLE_ROW

    @classmethod
    def from_name(cls, name: str) -> Optional[CaptureKind]:
        """Return the kind for ``name``, or None for a capture without a renderer."""
        try:
            return cls(name)
        except ValueError:
            return None


@dataclass(frozen=True)
class Capture:
    """A node selected by a capture rule."""

    name: str
    node: SyntaxNode

    @property
    def kind(self) -> Optional[CaptureKind]:
        return CaptureKind.from_name(self.name)


@dataclass(frozen=True)
class CaptureRule:
    """Capture every node of ``node_type`` as ``capture``.

    Parameters
    ----------
    node_type : str
        Node type tag to match
    capture : str
        Capture name to emit
    inside : str, optional
        When set, only match nodes with an ancestor of this type

    """

    node_type: str
    capture: str
    inside: Optional[str] = None

    def matches(self, node: SyntaxNode) -> bool:
        if node.type != self.node_type:
            return False
        if self.inside is None:
            return True
        ancestor = node.parent()
        while ancestor is not None:
            if ancestor.type == self.inside:
                return True
            ancestor = ancestor.parent()
        return False


def default_rules() -> list[CaptureRule]:
    """Return the default markdown capture rules."""
    rules = [
        CaptureRule(ATX_MARKER_TEMPLATE.format(level=level), CAPTURE_HEADING)
        for level in range(1, MAX_HEADING_LEVEL + 1)
    ]
    rules.extend(
        [
            CaptureRule(NODE_THEMATIC_BREAK, CAPTURE_DASH),
            CaptureRule(NODE_FENCED_CODE_BLOCK, CAPTURE_CODE),
            CaptureRule(NODE_LIST_MARKER_PLUS, CAPTURE_LIST_MARKER),
            CaptureRule(NODE_LIST_MARKER_MINUS, CAPTURE_LIST_MARKER),
            CaptureRule(NODE_LIST_MARKER_STAR, CAPTURE_LIST_MARKER),
            CaptureRule(NODE_TASK_LIST_MARKER_UNCHECKED, CAPTURE_CHECKBOX_UNCHECKED),
            CaptureRule(NODE_TASK_LIST_MARKER_CHECKED, CAPTURE_CHECKBOX_CHECKED),
            CaptureRule(NODE_BLOCK_QUOTE_MARKER, CAPTURE_QUOTE_MARKER, inside=NODE_BLOCK_QUOTE),
            CaptureRule(NODE_BLOCK_CONTINUATION, CAPTURE_QUOTE_MARKER, inside=NODE_BLOCK_QUOTE),
            CaptureRule(NODE_PIPE_TABLE, CAPTURE_TABLE),
            CaptureRule(NODE_PIPE_TABLE_HEADER, CAPTURE_TABLE_HEAD),
            CaptureRule(NODE_PIPE_TABLE_DELIMITER_ROW, CAPTURE_TABLE_DELIM),
            CaptureRule(NODE_PIPE_TABLE_ROW, CAPTURE_TABLE_ROW),
        ]
    )
    return rules


class MarkdownQuery:
    """Ordered set of capture rules.

    Parameters
    ----------
    rules : iterable of CaptureRule, optional
        Rules to match; defaults to :func:`default_rules`

    Examples
    --------
    Adding a capture without a renderer:

        >>> query = MarkdownQuery().with_rule(CaptureRule("html_block", "html"))
        >>> "html" in query.capture_names
        True

    """

    def __init__(self, rules: Iterable[CaptureRule] | None = None):
        """Initialize the query with its rules."""
        self._rules: tuple[CaptureRule, ...] = tuple(default_rules() if rules is None else rules)

    @property
    def rules(self) -> tuple[CaptureRule, ...]:
        return self._rules

    @property
    def capture_names(self) -> list[str]:
        """Distinct capture names, in rule order."""
        return list(dict.fromkeys(rule.capture for rule in self._rules))

    def with_rule(self, rule: CaptureRule) -> MarkdownQuery:
        """Return a new query with ``rule`` appended."""
        return MarkdownQuery([*self._rules, rule])

    def iter_captures(self, root: SyntaxNode) -> Iterator[Capture]:
        """Yield captures for ``root`` and its descendants in pre-order.

        A node matched by several rules yields one capture per rule, in rule
        order.
        """
        for node in root.walk():
            for rule in self._rules:
                if rule.matches(node):
                    yield Capture(rule.capture, node)


__all__ = ["CaptureKind", "Capture", "CaptureRule", "MarkdownQuery", "default_rules"]
