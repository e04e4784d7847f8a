"""Generic list utilities: ranges, rotations, shuffles and permutations."""

from __future__ import annotations

import itertools
import math
import random
from collections.abc import Callable, Sequence, Sized
from typing import Any, TypeVar

T = TypeVar("T")


def int_range(start: int, end: int) -> list[int]:
    """Return the integers from ``start`` to ``end``, both included, in either direction."""
    if start < end:
        return list(range(start, end + 1))
    return list(range(start, end - 1, -1))


def rotate(times: int, items: Sequence[T]) -> list[T]:
    """Rotate a sequence to the left ``times`` times (negative rotates right)."""
    values = list(items)
    if not values:
        return values
    n = times % len(values)
    return values[n:] + values[:n]


def compact(items: Sequence[Any]) -> list[Any]:
    """Return a copy without ``None`` values and empty strings or containers."""
    return [
        item
        for item in items
        if item is not None and not (isinstance(item, Sized) and len(item) == 0)
    ]


def shuffle(items: Sequence[T], rnd: Callable[[], float] | None = None) -> list[T]:
    """Return a shuffled copy using the Fisher-Yates algorithm.

    ``rnd`` must return floats in ``[0, 1)``; it defaults to ``random.random``.
    """
    rnd = rnd or random.random
    values = list(items)
    m = len(values)
    while m:
        i = math.floor(rnd() * m)
        m -= 1
        values[m], values[i] = values[i], values[m]
    return values


def permutations(items: Sequence[T]) -> list[list[T]]:
    """Return all distinct permutations in lexicographic order."""
    ordered = sorted(items)
    unique = dict.fromkeys(itertools.permutations(ordered))
    return [list(p) for p in unique]