"""Text helpers for building short excerpts of user content.

Excerpts are cut on characters, not words, and never exceed ``limit``
characters before the ``end`` marker is appended.
"""

from __future__ import annotations

__all__ = ["limit_chars"]


def limit_chars(value: object | None, limit: int = 100, end: str = "...") -> str:
    """
    Limit a string to ``limit`` characters, appending ``end`` when it was cut.

    Trailing whitespace left by the cut is removed before ``end`` is appended,
    so "hello world" limited to 6 becomes "hello..." rather than "hello ...".

    Args:
        value: Text to shorten; None is treated as an empty string
        limit: Maximum number of characters kept from ``value``
        end: Marker appended to shortened text

    Returns:
        The original text when it fits, otherwise the shortened text plus ``end``

    Examples:
        >>> limit_chars("short", 10)
        'short'
        >>> limit_chars("The quick brown fox", 9)
        'The quick...'
    """
    text = "" if value is None else str(value)
    if limit < 0:
        raise ValueError(f"limit must be >= 0, got {limit}")
    if len(text) <= limit:
        return text
    return text[:limit].rstrip() + end
