#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdoverlay/utils/lists.py
"""Depth-indexed selection from configured style lists.

Headings, bullets and color ramps are configured as short ordered lists,
while the depth that selects from them is unbounded. Two strategies map an
arbitrary depth onto such a list:

- ``cycle`` wraps around, giving a repeating pattern for deep nesting.
- ``clamp_last`` saturates, repeating the final element once the depth
  runs past the end of the list.

Depths are 1-based: depth 1 selects the first element.

Examples
--------
    >>> cycle(["●", "○"], 3)
    '●'
    >>> clamp_last(["DiffAdd", "DiffChange"], 5)
    'DiffChange'

"""

from __future__ import annotations

from typing import Sequence, TypeVar

T = TypeVar("T")


def _require_values(values: Sequence[T], selector: str) -> None:
    if not values:
        raise ValueError(f"{selector}() requires a non-empty list of values")


def cycle(values: Sequence[T], index: int) -> T:
    """Select ``values[(index - 1) mod len(values)]``.

    Parameters
    ----------
    values : Sequence
        Non-empty ordered values
    index : int
        1-based depth; 0 wraps around to the last element

    Returns
    -------
    T
        The selected value

    Raises
    ------
    ValueError
        If ``values`` is empty

    """
    _require_values(values, "cycle")
    return values[(index - 1) % len(values)]


def clamp_last(values: Sequence[T], index: int) -> T:
    """Select ``values[min(index, len(values)) - 1]``.

    Parameters
    ----------
    values : Sequence
        Non-empty ordered values
    index : int
        1-based depth, expected to be at least 1

    Returns
    -------
    T
        The selected value; the last one for every index past the end

    Raises
    ------
    ValueError
        If ``values`` is empty

    """
    _require_values(values, "clamp_last")
    return values[max(min(index, len(values)), 1) - 1]


def first(values: Sequence[T]) -> T | None:
    """Return the first element, or None for an empty sequence."""
    return values[0] if values else None


def last(values: Sequence[T]) -> T | None:
    """Return the last element, or None for an empty sequence."""
    return values[-1] if values else None


__all__ = ["cycle", "clamp_last", "first", "last"]
