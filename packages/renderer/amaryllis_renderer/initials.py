"""Initials extraction from display names."""

from __future__ import annotations


def extract_initials(name: str | None) -> str | None:
    """Return the first letter of the first and last space-separated words.

    Runs of spaces produce empty tokens, which are skipped. A single word gives
    a one-letter result; a name with no words gives ``None``.
    """
    if name is None:
        return None

    first: str | None = None
    last: str | None = None
    for word in name.split(" "):
        if not word:
            continue
        if first is None:
            first = word[0]
        else:
            last = word[0]

    if first is None:
        return None
    return first + (last or "")
