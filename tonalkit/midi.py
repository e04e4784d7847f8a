"""MIDI numbers, frequencies and pitch class sets of MIDI notes."""

from __future__ import annotations

import math
import re
from collections.abc import Callable, Iterable

from tonalkit.pitch_note import note as _note

SHARPS = ("C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B")
FLATS = ("C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B")
L2 = math.log(2.0)
L440 = math.log(440.0)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _round_half_up(value: float) -> float:
    return math.floor(value + 0.5)


def is_midi(arg: int) -> bool:
    """True for a MIDI note number between 0 and 127."""
    return 0 <= arg <= 127


def to_midi(note: int | str) -> int | None:
    """MIDI number of a number or note name; None if not valid."""
    if isinstance(note, int):
        return note if is_midi(note) else None
    m = _LEADING_INT.match(note)
    if m:
        return to_midi(int(m.group(1)))
    return _note(note).midi


def midi_to_freq(midi: float, tuning: float = 440.0) -> float:
    """Frequency in hertz of a MIDI number."""
    return 2.0 ** ((midi - 69.0) / 12.0) * tuning


def freq_to_midi(freq: float) -> float:
    """MIDI number of a frequency, rounded to two decimals; NaN for negative values."""
    if freq < 0:
        return math.nan
    if freq == 0:
        return -math.inf
    v = (12.0 * (math.log(freq) - L440)) / L2 + 69.0
    return _round_half_up(v * 100.0) / 100.0


def midi_to_note_name(midi: float, pitch_class: bool = False, sharps: bool = False) -> str:
    """Note name of a MIDI number, with flats unless ``sharps`` is set."""
    if not math.isfinite(midi):
        return ""
    value = int(_round_half_up(midi))
    pc = (SHARPS if sharps else FLATS)[value % 12]
    if pitch_class:
        return pc
    return f"{pc}{value // 12 - 1}"


def chroma(midi: int) -> int:
    """Pitch class (0-11) of a MIDI number."""
    return midi % 12


def pcset_from_chroma(chroma: str) -> list[int]:
    """Pitch class numbers set in a binary chroma."""
    return [i for i, bit in enumerate(chroma[:12]) if bit == "1"]


def pcset_from_midi(midi: Iterable[int]) -> list[int]:
    """Sorted unique pitch classes of MIDI numbers."""
    return sorted({chroma(m) for m in midi})


def pcset(notes: str | Iterable[int]) -> list[int]:
    """Pitch class set of a chroma string or of MIDI numbers."""
    if isinstance(notes, str):
        return pcset_from_chroma(notes)
    return pcset_from_midi(notes)


def pcset_nearest(notes: str | Iterable[int]) -> Callable[[int], int | None]:
    """A function mapping a MIDI number to the nearest note of the set."""
    members = frozenset(pcset(notes))

    def nearest(midi: int) -> int | None:
        if not members:
            return None
        ch = chroma(midi)
        for i in range(12):
            if ch + i in members:
                return midi + i
            if ch - i in members:
                return midi - i
        return None

    return nearest


def pcset_steps(notes: str | Iterable[int], tonic: int) -> Callable[[int], int]:
    """A function mapping zero-based scale steps to MIDI numbers."""
    members = pcset(notes)

    def steps(step: int) -> int:
        if not members:
            raise ValueError("pitch class set is empty")
        size = len(members)
        return members[step % size] + (step // size) * 12 + tonic

    return steps


def pcset_degrees(notes: str | Iterable[int], tonic: int) -> Callable[[int], int | None]:
    """A function mapping one-based scale degrees to MIDI numbers; degree 0 gives None."""
    steps = pcset_steps(notes, tonic)

    def degrees(degree: int) -> int | None:
        if degree == 0:
            return None
        return steps(degree - 1 if degree > 0 else degree)

    return degrees