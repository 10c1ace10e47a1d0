#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdoverlay/renderers/base.py
"""Base classes for decoration renderers.

This module defines the sink protocol that receives decoration instructions
and the abstract base class decoration renderers inherit from. A renderer
turns a syntax tree plus a text snapshot into a stream of decorations; it
never writes to the text itself.

"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from typing import IO, Iterable, Protocol, runtime_checkable

from mdoverlay.buffer import TextSource
from mdoverlay.decorations import Decoration
from mdoverlay.exceptions import RenderingError, ValidationError
from mdoverlay.options.render import RenderOptions
from mdoverlay.tree.nodes import SyntaxNode


@runtime_checkable
class DecorationSink(Protocol):
    """Receiver of decoration instructions, one call per instruction."""

    def add(self, decoration: Decoration) -> None:
        """Accept one decoration."""
        ...


class ListSink:
    """Sink collecting decorations in emission order.

    Examples
    --------
        >>> sink = ListSink()
        >>> len(sink)
        0

    """

    def __init__(self) -> None:
        """Initialize an empty sink."""
        self.decorations: list[Decoration] = []

    def add(self, decoration: Decoration) -> None:
        self.decorations.append(decoration)

    def __len__(self) -> int:
        return len(self.decorations)

    def __iter__(self):
        return iter(self.decorations)


class JsonLinesSink:
    """Sink writing each decoration as one JSON object per line.

    Parameters
    ----------
    stream : IO[str]
        Text stream to write to

    """

    def __init__(self, stream: IO[str]):
        """Initialize the sink with its output stream."""
        self.stream = stream

    def add(self, decoration: Decoration) -> None:
        try:
            self.stream.write(json.dumps(decoration.to_dict(), ensure_ascii=False))
            self.stream.write("\n")
        except OSError as e:
            raise RenderingError(
                f"Failed to write decoration: {e}", rendering_stage="sink", original_error=e
            ) from e


class BaseDecorationRenderer(ABC):
    """Abstract base class for decoration renderers.

    Parameters
    ----------
    options : RenderOptions or None, default = None
        Resolved render configuration. If None, default options are used.

    Examples
    --------
    Creating a custom renderer:

        >>> class NothingRenderer(BaseDecorationRenderer):
        ...     def iter_decorations(self, root, buffer):
        ...         return iter(())

    """

    def __init__(self, options: RenderOptions | None = None):
        """Initialize the renderer with validated options."""
        self._validate_options_type(options, RenderOptions, self.__class__.__name__)
        self.options: RenderOptions = options or RenderOptions()

    @abstractmethod
    def iter_decorations(self, root: SyntaxNode, buffer: TextSource) -> Iterable[Decoration]:
        """Yield the decorations for ``root`` and its descendants.

        Parameters
        ----------
        root : SyntaxNode
            Root of the subtree to decorate
        buffer : TextSource
            Read-only snapshot of the text the tree was parsed from

        """

    def render(
        self, root: SyntaxNode, buffer: TextSource, sink: DecorationSink | None = None
    ) -> list[Decoration]:
        """Compute every decoration for ``root``.

        Each decoration is passed to ``sink`` as soon as it is produced and
        also returned, in emission order.

        Parameters
        ----------
        root : SyntaxNode
            Root of the subtree to decorate
        buffer : TextSource
            Read-only snapshot of the text
        sink : DecorationSink, optional
            Receiver for the decorations

        Returns
        -------
        list[Decoration]
            All decorations, in emission order

        """
        decorations: list[Decoration] = []
        for decoration in self.iter_decorations(root, buffer):
            decorations.append(decoration)
            if sink is not None:
                sink.add(decoration)
        return decorations

    @staticmethod
    def _validate_options_type(options: object, expected_type: type, renderer_name: str) -> None:
        """Reject options that are not an instance of ``expected_type``.

        Raises
        ------
        ValidationError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise ValidationError(
                f"{renderer_name} expected options of type '{expected_type.__name__}' "
                f"but received '{type(options).__name__}'",
                parameter_name="options",
                parameter_value=type(options),
            )


__all__ = ["DecorationSink", "ListSink", "JsonLinesSink", "BaseDecorationRenderer"]
