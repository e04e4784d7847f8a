"""Detect chord names from a collection of notes."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass

from tonalkit import chord_type as _chord_type
from tonalkit.pcset import modes
from tonalkit.pitch_note import note

_ANY_THIRDS = 384  # 3m (256) + 3M (128)
_PERFECT_FIFTH = 16
_NON_PERFECT_FIFTHS = 40  # 5d (32) + 5A (8)
_ANY_SEVENTH = 3  # 7m (2) + 7M (1)


@dataclass(frozen=True)
class FoundChord:
    """A detected chord name with a ranking weight."""

    weight: float
    name: str


def named_set(notes: Iterable[str]) -> Callable[[int], str]:
    """A function mapping a chroma to the first note name given for it."""
    pc_to_name: dict[int, str] = {}
    for entry in notes:
        n = note(entry)
        if not n.empty:
            pc_to_name.setdefault(n.chroma, n.name)
    return lambda chroma: pc_to_name.get(chroma, "")


def has_any_third_and_perfect_fifth_and_any_seventh(
    chord_type: _chord_type.ChordType,
) -> bool:
    """True if the chord type has a third, a perfect fifth and a seventh."""
    number = int(chord_type.chroma, 2)
    return bool(
        number & _ANY_THIRDS and number & _PERFECT_FIFTH and number & _ANY_SEVENTH
    )


def with_perfect_fifth(chroma: str) -> str:
    """Add a perfect fifth to a chroma unless it has a diminished or augmented one."""
    number = int(chroma, 2)
    if number & _NON_PERFECT_FIFTHS:
        return chroma
    return format(number | _PERFECT_FIFTH, "012b")


def find_matches(
    notes: Sequence[str], weight: float, assume_perfect_fifth: bool = False
) -> list[FoundChord]:
    """Chord types matching every rotation of the notes, with their weights."""
    if not notes:
        return []
    tonic = notes[0]
    tonic_chroma = note(tonic).chroma
    note_name = named_set(notes)
    types = _chord_type.all_types()
    found: list[FoundChord] = []
    for index, mode in enumerate(modes(list(notes), False)):
        mode_with_fifth = with_perfect_fifth(mode) if assume_perfect_fifth else mode
        for chord in types:
            if assume_perfect_fifth and has_any_third_and_perfect_fifth_and_any_seventh(
                chord
            ):
                matches = chord.chroma == mode_with_fifth
            else:
                matches = chord.chroma == mode
            if not matches or not chord.aliases:
                continue
            symbol = note_name(index) + chord.aliases[0]
            if index != tonic_chroma:
                found.append(FoundChord(0.5 * weight, f"{symbol}/{tonic}"))
            else:
                found.append(FoundChord(1.0 * weight, symbol))
    return found


def detect(source: Iterable[str], assume_perfect_fifth: bool = False) -> list[str]:
    """Chord names that fit the notes, root-position chords first."""
    notes = [pc for pc in (note(entry).pc for entry in source) if pc]
    if not notes:
        return []
    found = find_matches(notes, 1.0, assume_perfect_fifth)
    found.sort(key=lambda chord: chord.weight, reverse=True)
    return [chord.name for chord in found if chord.weight > 0]