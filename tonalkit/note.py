"""Note properties, conversions, transposition and sorting by note name."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Sequence

from tonalkit.midi import freq_to_midi as _freq_to_midi
from tonalkit.midi import midi_to_note_name as _midi_to_note_name
from tonalkit.pitch_distance import distance as _distance
from tonalkit.pitch_distance import transpose as _transpose
from tonalkit.pitch_note import Note
from tonalkit.pitch_note import note as _note

NAMES = ("C", "D", "E", "F", "G", "A", "B")


def _only_notes(array: Iterable[str]) -> list[Note]:
    return [n for n in map(_note, array) if not n.empty]


def names(array: Sequence[str] | None = None) -> list[str]:
    """Natural note names, or the names of the valid notes in ``array``."""
    if not array:
        return list(NAMES)
    return [n.name for n in _only_notes(array)]


def get(src: str | Note) -> Note:
    """Properties of a note."""
    return _note(src)


def name(note: str) -> str:
    """Normalized note name; empty if not a note."""
    return get(note).name


def pitch_class(note: str) -> str:
    """Pitch class of the note (name without octave)."""
    return get(note).pc


def accidentals(note: str) -> str:
    """Accidentals of the note."""
    return get(note).acc


def octave(note: str) -> int | None:
    """Octave of the note, or None for pitch classes."""
    return get(note).oct


def midi(note: str) -> int | None:
    """MIDI number of the note, or None."""
    return get(note).midi


def freq(note: str) -> float | None:
    """Frequency in hertz of the note, or None."""
    return get(note).freq


def chroma(note: str) -> int:
    """Pitch class number (0-11) of the note."""
    return get(note).chroma


def from_midi(midi: int) -> str:
    """Note name of a MIDI number, using flats."""
    return _midi_to_note_name(midi)


def from_midi_sharps(midi: int) -> str:
    """Note name of a MIDI number, using sharps."""
    return _midi_to_note_name(midi, sharps=True)


def _freq_to_int_midi(frequency: float) -> int | None:
    value = _freq_to_midi(frequency)
    if not math.isfinite(value):
        return None
    return int(value)


def from_freq(frequency: float) -> str:
    """Note name of a frequency, using flats; empty if not valid."""
    value = _freq_to_int_midi(frequency)
    return "" if value is None else _midi_to_note_name(value)


def from_freq_sharps(frequency: float) -> str:
    """Note name of a frequency, using sharps; empty if not valid."""
    value = _freq_to_int_midi(frequency)
    return "" if value is None else _midi_to_note_name(value, sharps=True)


def distance(from_note: str, to_note: str) -> str:
    """Interval between two notes."""
    return _distance(from_note, to_note)


def transpose(note_name: str, interval_name: str) -> str:
    """Transpose a note by an interval."""
    return _transpose(note_name, interval_name)


def transpose_by(interval: str) -> Callable[[str], str]:
    """A function that transposes notes by ``interval``."""
    return lambda note: transpose(note, interval)


def transpose_from(note: str) -> Callable[[str], str]:
    """A function that transposes ``note`` by a given interval."""
    return lambda interval: transpose(note, interval)


def transpose_fifths(note_name: str, fifths: int) -> str:
    """Transpose a note by a number of perfect fifths."""
    return _transpose(note_name, [fifths, 0])


def transpose_octaves(note_name: str, octaves: int) -> str:
    """Transpose a note by a number of octaves."""
    return _transpose(note_name, [0, octaves])


def sorted_names(notes: Iterable[str], reverse: bool = False) -> list[str]:
    """Names of the valid notes sorted by height, ascending unless ``reverse``."""
    ordered = sorted(_only_notes(notes), key=lambda n: n.height, reverse=reverse)
    return [n.name for n in ordered]


def sorted_uniq_names(notes: Iterable[str]) -> list[str]:
    """Ascending note names with adjacent duplicates removed."""
    result: list[str] = []
    for entry in sorted_names(notes):
        if not result or result[-1] != entry:
            result.append(entry)
    return result


def simplify(note_name: str) -> str:
    """Simplest spelling of the same pitch; empty if not a note."""
    n = get(note_name)
    if n.empty:
        return ""
    return _midi_to_note_name(
        n.midi if n.midi is not None else n.chroma,
        pitch_class=n.midi is None,
        sharps=n.alt > 0,
    )


def enharmonic(note_name: str, dest_name: str = "") -> str:
    """Enharmonic spelling of a note, optionally to a given pitch class.

    Returns an empty string if the note is not valid or the destination does
    not share its pitch class.
    """
    src = get(note_name)
    if src.empty:
        return ""
    dest_pc = dest_name or _midi_to_note_name(
        src.midi if src.midi is not None else src.chroma,
        pitch_class=True,
        sharps=src.alt < 0,
    )
    dest = get(dest_pc)
    if dest.empty or dest.chroma != src.chroma:
        return ""
    if src.oct is None:
        return dest.pc
    src_chroma = src.chroma - src.alt
    dest_chroma = dest.chroma - dest.alt
    offset = 0
    if src_chroma > 11 or dest_chroma < 0:
        offset = -1
    elif src_chroma < 0 or dest_chroma > 11:
        offset = 1
    return f"{dest.pc}{src.oct + offset}"