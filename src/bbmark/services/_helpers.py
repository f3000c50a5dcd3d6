"""Shared service-layer helper functions."""

from __future__ import annotations

import re

_WHITESPACE = re.compile(r"\s+")


def collapse_whitespace(text: str) -> str:
    """Fold every whitespace run (newlines included) into one space and trim."""
    return _WHITESPACE.sub(" ", text).strip()


def truncate_words(text: str, length: int, suffix: str = "...") -> tuple[str, bool]:
    """Cut *text* to at most *length* characters, preferring a word boundary.

    Returns ``(text, truncated)``. The *suffix* is appended only when
    something was cut and does not count toward *length*.

    Examples:
        >>> truncate_words("one two three", 7)
        ('one two...', True)
        >>> truncate_words("short", 10)
        ('short', False)
        >>> truncate_words("abcdefghij", 4, "")
        ('abcd', True)
    """
    if len(text) <= length:
        return text, False
    cut = text[:length]
    if not text[length].isspace():
        boundary = cut.rfind(" ")
        if boundary > 0:
            cut = cut[:boundary]
    return cut.rstrip() + suffix, True
