"""Interval arithmetic and properties by interval name."""

from __future__ import annotations

from collections.abc import Callable

from tonalkit.pitch import Pitch
from tonalkit.pitch_distance import distance as _distance
from tonalkit.pitch_interval import (
    Interval,
    IntervalType,
    coord_to_interval,
    interval,
    interval_pitch_name,
)

_NUMBERS = (1, 2, 2, 3, 3, 4, 5, 5, 6, 6, 7, 7)
_QUALITIES = ("P", "m", "M", "m", "M", "P", "d", "P", "m", "M", "m", "M")


def names() -> list[str]:
    """The natural interval names."""
    return ["1P", "2M", "3M", "4P", "5P", "6m", "7m"]


def get(name: str) -> Interval:
    """Properties of an interval."""
    return interval(name)


def name(name: str) -> str:
    """Normalized interval name; empty if not an interval."""
    return get(name).name


def semitones(name: str) -> int:
    """Size of the interval in semitones."""
    return get(name).semitones


def quality(name: str) -> str:
    """Quality string of the interval (P, M, m, d, A, ...)."""
    return get(name).q


def num(name: str) -> int:
    """Signed interval number."""
    return get(name).num


def simplify(name: str) -> str:
    """Reduce a compound interval to within one octave."""
    ivl = get(name)
    if ivl.empty:
        return ""
    return f"{ivl.simple}{ivl.q}"


def invert(name: str) -> str:
    """Inversion of an interval, keeping its direction and octave."""
    ivl = get(name)
    if ivl.empty:
        return ""
    step = (7 - ivl.step) % 7
    alt = -ivl.alt if ivl.type is IntervalType.PERFECTABLE else -(ivl.alt + 1)
    return interval_pitch_name(Pitch(step, alt, ivl.oct, ivl.dir))


def from_semitones(semitones: int) -> str:
    """Interval name for a number of semitones."""
    d = -1 if semitones < 0 else 1
    n = abs(semitones)
    c = n % 12
    o = n // 12
    return f"{d * (_NUMBERS[c] + 7 * o)}{_QUALITIES[c]}"


def distance(from_note: str, to_note: str) -> str:
    """Interval between two notes."""
    return _distance(from_note, to_note)


def _combine(
    fn: Callable[[tuple[int, ...], tuple[int, ...]], tuple[int, int]], a: str, b: str
) -> str:
    coord_a = get(a).coord
    coord_b = get(b).coord
    if not coord_a or not coord_b:
        return ""
    return coord_to_interval(fn(coord_a, coord_b)).name


def add(a: str, b: str) -> str:
    """Sum of two intervals; empty if either is not valid."""
    return _combine(lambda x, y: (x[0] + y[0], x[1] + y[1]), a, b)


def add_to(interval: str) -> Callable[[str], str]:
    """A function that adds ``interval`` to its argument."""
    return lambda other: add(interval, other)


def subtract(minuend: str, subtrahend: str) -> str:
    """Difference of two intervals; empty if either is not valid."""
    return _combine(lambda x, y: (x[0] - y[0], x[1] - y[1]), minuend, subtrahend)


def transpose_fifths(interval: str, fifths: int) -> str:
    """Move an interval by a number of perfect fifths."""
    ivl = get(interval)
    if ivl.empty:
        return ""
    f, o, d = ivl.coord
    return coord_to_interval((f + fifths, o, d)).name