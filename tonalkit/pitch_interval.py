"""Interval names: tokenizing, parsing and building from coordinates."""

from __future__ import annotations

import enum
import functools
import re
from dataclasses import dataclass
from typing import Any

from tonalkit.pitch import (
    Direction,
    Pitch,
    coordinates,
    is_named_pitch,
    is_pitch,
    pitch_from_coordinates,
)

_SIZES = (0, 2, 4, 5, 7, 9, 11)
_TYPES = "PMMPPMM"
_INTERVAL_RE = re.compile(
    r"^([-+]?[0-9]+)(d{1,4}|m|M|P|A{1,4})|(AA|A|P|M|m|d|dd)([-+]?[0-9]+)\Z"
)
_A_RE = re.compile(r"A+")
_D_RE = re.compile(r"d+")


class IntervalType(enum.Enum):
    """Whether an interval number can be perfect or major/minor."""

    PERFECTABLE = "perfectable"
    MAJORABLE = "majorable"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Interval:
    """A parsed interval; ``empty`` is True for names that are not intervals."""

    empty: bool = True
    name: str = ""
    num: int = 0
    q: str = ""
    type: IntervalType = IntervalType.UNKNOWN
    step: int = 0
    alt: int = 0
    dir: Direction | None = None
    simple: int = 0
    semitones: int = 0
    chroma: int = 0
    oct: int = 0
    coord: tuple[int, ...] = ()


NO_INTERVAL = Interval()


def tokenize_interval(text: str) -> tuple[str, str]:
    """Split an interval name into (number, quality); both empty if not an interval."""
    m = _INTERVAL_RE.search(text)
    if m is None:
        return ("", "")
    if m.group(1):
        return (m.group(1), m.group(2))
    return (m.group(4), m.group(3))


def alt_to_q(type: IntervalType, alt: int) -> str:
    """Quality string for an alteration of the given interval type."""
    if alt == 0:
        return "M" if type is IntervalType.MAJORABLE else "P"
    if alt == -1 and type is IntervalType.MAJORABLE:
        return "m"
    if alt > 0:
        return "A" * alt
    count = alt if type is IntervalType.PERFECTABLE else alt + 1
    return "d" * abs(count)


def q_to_alt(type: IntervalType, quality: str) -> int:
    """Alteration for a quality string of the given interval type."""
    if (quality == "M" and type is IntervalType.MAJORABLE) or (
        quality == "P" and type is IntervalType.PERFECTABLE
    ):
        return 0
    if quality == "m" and type is IntervalType.MAJORABLE:
        return -1
    if _A_RE.fullmatch(quality):
        return len(quality)
    if _D_RE.fullmatch(quality):
        size = len(quality) if type is IntervalType.PERFECTABLE else len(quality) + 1
        return -size
    return 0


@functools.lru_cache(maxsize=None)
def _parse(text: str) -> Interval:
    num_str, q = tokenize_interval(text)
    if not num_str:
        return NO_INTERVAL
    num = int(num_str)
    if num == 0:
        return NO_INTERVAL
    step = (abs(num) - 1) % 7
    majorable = _TYPES[step] == "M"
    if majorable and q == "P":
        return NO_INTERVAL
    kind = IntervalType.MAJORABLE if majorable else IntervalType.PERFECTABLE
    direction = Direction.DESCENDING if num < 0 else Direction.ASCENDING
    d = int(direction)
    alt = q_to_alt(kind, q)
    octave = (abs(num) - 1) // 7
    return Interval(
        empty=False,
        name=f"{num}{q}",
        num=num,
        q=q,
        type=kind,
        step=step,
        alt=alt,
        dir=direction,
        simple=num if num in (8, -8) else d * (step + 1),
        semitones=d * (_SIZES[step] + alt + 12 * octave),
        chroma=(d * (_SIZES[step] + alt)) % 12,
        oct=octave,
        coord=coordinates(Pitch(step, alt, octave, direction)),
    )


def interval_pitch_name(props: Any) -> str:
    """Interval name for a pitch with a direction; empty without one."""
    direction = getattr(props, "dir", None)
    step = props.step
    if not direction or not 0 <= step < len(_TYPES):
        return ""
    octave = getattr(props, "oct", None) or 0
    calc = step + 1 + 7 * octave
    num = step + 1 if calc == 0 else calc
    sign = "-" if direction < 0 else ""
    kind = IntervalType.MAJORABLE if _TYPES[step] == "M" else IntervalType.PERFECTABLE
    return f"{sign}{num}{alt_to_q(kind, props.alt)}"


def interval(src: Any) -> Interval:
    """Get an Interval from a name, an Interval, a pitch or a named pitch."""
    if isinstance(src, str):
        return _parse(src)
    if isinstance(src, Interval):
        return src
    if is_pitch(src):
        return _parse(interval_pitch_name(src))
    if is_named_pitch(src):
        return _parse(src.name)
    return NO_INTERVAL


def coord_to_interval(
    coord: tuple[int, ...] | list[int], force_descending: bool = False
) -> Interval:
    """Interval from fifths/octaves coordinates."""
    f = coord[0]
    o = coord[1] if len(coord) > 1 else 0
    descending = force_descending or f * 7 + o * 12 < 0
    ivl = (-f, -o, -1) if descending else (f, o, 1)
    return interval(pitch_from_coordinates(ivl))