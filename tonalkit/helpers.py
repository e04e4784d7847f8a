"""Small string helpers shared by the dictionaries."""

from __future__ import annotations


def split(text: str) -> list[str]:
    """Split on single spaces, keeping empty tokens between repeated spaces.

    An empty string gives an empty list.
    """
    if not text:
        return []
    return text.split(" ")