#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdoverlay/callout.py
"""Callout classification for block quotes.

A GitHub style callout is a block quote whose first line carries a
bracketed keyword such as ``[!NOTE]`` or ``[!WARNING]``. The classifier maps
that first line onto a configured callout key, which the quote renderer then
uses to pick an alternate style.
"""

from __future__ import annotations

from typing import Mapping


def first_line(text: str) -> str:
    """Return ``text`` up to its first line break."""
    return text.split("\n", 1)[0]


def get_key_contains(text: str, callouts: Mapping[str, str]) -> str | None:
    """Return the key of the first callout marker contained in ``text``.

    Parameters
    ----------
    text : str
        Text to classify, typically the first line of a block quote
    callouts : Mapping[str, str]
        Callout key to literal marker (e.g. ``{"note": "[!NOTE]"}``), in
        priority order

    Returns
    -------
    str or None
        The matching key, or None when no marker occurs in ``text``

    Examples
    --------
        >>> get_key_contains("> [!TIP] Use the api", {"note": "[!NOTE]", "tip": "[!TIP]"})
        'tip'
        >>> get_key_contains("> plain quote", {"note": "[!NOTE]"}) is None
        True

    """
    for key, marker in callouts.items():
        if marker and marker in text:
            return key
    return None


def classify_quote(quote_text: str, callouts: Mapping[str, str]) -> str | None:
    """Classify a block quote by the callout marker on its first line."""
    return get_key_contains(first_line(quote_text), callouts)


__all__ = ["first_line", "get_key_contains", "classify_quote"]
