"""Core pitch model: steps, alterations, octaves and directions."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any

_SEMI = (0, 2, 4, 5, 7, 9, 11)
_FIFTHS = (0, 2, 4, -1, 1, 3, 5)
_STEPS_TO_OCTS = tuple((f * 7) // 12 for f in _FIFTHS)
_FIFTHS_TO_STEPS = (3, 0, 4, 1, 5, 2, 6)


class Direction(enum.IntEnum):
    """Direction of an interval."""

    ASCENDING = 1
    DESCENDING = -1


@dataclass(frozen=True)
class Pitch:
    """A pitch class (no octave), a note (octave) or an interval (direction)."""

    step: int = 0
    alt: int = 0
    oct: int | None = None
    dir: Direction | None = None
    name: str = ""


def is_named_pitch(src: Any) -> bool:
    """True if ``src`` is an object with a string ``name``."""
    return isinstance(getattr(src, "name", None), str)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_pitch(src: Any) -> bool:
    """True if ``src`` carries integer ``step`` and ``alt`` values."""
    return _is_int(getattr(src, "step", None)) and _is_int(getattr(src, "alt", None))


def _dir_value(pitch: Any) -> int:
    direction = getattr(pitch, "dir", None)
    return int(direction) if direction else 1


def chroma(pitch: Any) -> int:
    """Pitch class number (0-11)."""
    return (_SEMI[pitch.step] + pitch.alt) % 12


def height(pitch: Any) -> int:
    """Signed distance in semitones; pitch classes sit at a fixed low octave."""
    octave = pitch.oct if pitch.oct is not None else -100
    return _dir_value(pitch) * (_SEMI[pitch.step] + pitch.alt + 12 * octave)


def midi(pitch: Any) -> int | None:
    """MIDI number of a pitch with octave, or None when out of range."""
    h = height(pitch)
    if pitch.oct is not None and -12 <= h <= 115:
        return h + 12
    return None


def coordinates(pitch: Any) -> tuple[int, ...]:
    """Fifths/octaves coordinates; intervals carry their direction as a third value."""
    d = _dir_value(pitch)
    f = _FIFTHS[pitch.step] + 7 * pitch.alt
    if pitch.oct is None:
        return (d * f,)
    o = pitch.oct - _STEPS_TO_OCTS[pitch.step] - 4 * pitch.alt
    if getattr(pitch, "dir", None) is None:
        return (d * f, d * o)
    return (d * f, d * o, d)


def pitch_from_coordinates(coord: tuple[int, ...] | list[int]) -> Pitch:
    """Build a pitch back from its coordinates."""
    f = coord[0]
    step = _FIFTHS_TO_STEPS[(f + 1) % 7]
    alt = (f + 1) // 7
    direction = Direction(coord[2]) if len(coord) > 2 else None
    if len(coord) < 2:
        return Pitch(step, alt, None, direction)
    octave = coord[1] + 4 * alt + _STEPS_TO_OCTS[step]
    return Pitch(step, alt, octave, direction)