"""Chords: parsing chord names, building chord notes and related chords."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from tonalkit import chord_type as _chord_type
from tonalkit import pcset as _pcset
from tonalkit import pitch_distance as _pitch_distance
from tonalkit.interval import subtract as _subtract
from tonalkit.pitch_note import NO_NOTE, tokenize_note
from tonalkit.pitch_note import note as _note

ChordSource = str | Sequence[str]


@dataclass(frozen=True)
class Chord(_chord_type.ChordType):
    """A chord type placed on an optional tonic, with an optional bass note."""

    tonic: str = ""
    type: str = ""
    root: str = ""
    bass: str = ""
    root_degree: int | None = None
    symbol: str = ""
    notes: tuple[str, ...] = ()


NO_CHORD = Chord()


def tokenize_bass(note: str, chord: str) -> tuple[str, str, str]:
    """Split a slash bass off the chord part; only a pitch class is accepted as bass."""
    chord_part, slash, bass_part = chord.partition("/")
    if not slash:
        return (note, chord, "")
    letter, acc, octave, rest = tokenize_note(bass_part)
    if letter and not octave and not rest:
        return (note, chord_part, letter + acc)
    return (note, chord, "")


def tokenize(name: str) -> tuple[str, str, str]:
    """Split a chord name into (tonic, chord type, bass)."""
    letter, acc, octave, rest = tokenize_note(name)
    if not letter:
        return tokenize_bass("", rest)
    if letter == "A" and rest == "ug":
        return tokenize_bass("", "aug")
    return tokenize_bass(letter + acc, octave + rest)


def get_chord(type_name: str, tonic: str = "", bass: str = "") -> Chord:
    """Build a chord from a type name, an optional tonic and an optional bass.

    Returns NO_CHORD when the type, or a given tonic or bass, is not valid.
    """
    ctype = _chord_type.get(type_name)
    tonic_note = _note(tonic)
    bass_note = _note(bass)
    if ctype.empty or (tonic and tonic_note.empty) or (bass and bass_note.empty):
        return NO_CHORD

    bass_interval = _pitch_distance.distance(tonic_note.pc, bass_note.pc)
    bass_index = next(
        (i for i, ivl in enumerate(ctype.intervals) if ivl == bass_interval), -1
    )
    has_root = bass_index >= 0
    root = bass_note if has_root else NO_NOTE
    root_degree = bass_index + 1 if has_root else None
    has_bass = bool(bass_note.pc) and bass_note.pc != tonic_note.pc

    intervals = list(ctype.intervals)
    if root_degree is not None:
        for _ in range(root_degree - 1):
            first = intervals.pop(0)
            intervals.append(f"{int(first[0]) + 7}{first[1:2]}")
    elif has_bass:
        ivl = _subtract(bass_interval, "8P")
        if ivl:
            intervals.insert(0, ivl)

    chord_notes = (
        tuple(_pitch_distance.transpose(tonic_note.pc, ivl) for ivl in intervals)
        if not tonic_note.empty
        else ()
    )

    if type_name in ctype.aliases:
        preferred_alias = type_name
    else:
        preferred_alias = ctype.aliases[0] if ctype.aliases else ""

    symbol = ("" if tonic_note.empty else tonic_note.pc) + preferred_alias
    name = (f"{tonic_note.pc} " if tonic else "") + ctype.name
    if root_degree is not None and root_degree > 1:
        symbol += f"/{root.pc}"
        name += f" over {root.pc}"
    elif has_bass:
        symbol += f"/{bass_note.pc}"
        name += f" over {bass_note.pc}"

    return Chord(
        name=name,
        empty=False,
        set_num=ctype.set_num,
        chroma=ctype.chroma,
        normalized=ctype.normalized,
        intervals=tuple(intervals),
        quality=ctype.quality,
        aliases=ctype.aliases,
        tonic=tonic_note.pc,
        type=ctype.name,
        root=root.pc,
        bass=bass_note.pc if has_bass else "",
        root_degree=root_degree,
        symbol=symbol,
        notes=chord_notes,
    )


def get(src: ChordSource) -> Chord:
    """Chord from a name such as ``"Cmaj7/B"`` or from ``[tonic, type, bass]`` tokens."""
    if not src:
        return NO_CHORD
    if isinstance(src, str):
        tonic, type_name, bass = tokenize(src)
        result = get_chord(type_name, tonic, bass)
        return get_chord(src) if result.empty else result
    tokens = list(src)
    type_name = tokens[1] if len(tokens) > 1 else ""
    bass = tokens[2] if len(tokens) > 2 else ""
    return get_chord(type_name, tokens[0], bass)


def _chord_name(src: ChordSource) -> str:
    if isinstance(src, str):
        return src
    return src[0] if src else ""


def transpose(chord_name: str, interval: str) -> str:
    """Transpose the tonic and bass of a chord name; names without tonic are unchanged."""
    tonic, type_name, bass = tokenize(chord_name)
    if not tonic:
        return chord_name
    new_tonic = _pitch_distance.transpose(tonic, interval)
    new_bass = _pitch_distance.transpose(bass, interval) if bass else ""
    slash = f"/{new_bass}" if new_bass else ""
    return new_tonic + type_name + slash


def extended(chord_name: str) -> list[str]:
    """Names of the chords on the same tonic that contain this chord."""
    chord = get(chord_name)
    if not chord.tonic:
        return []
    return [
        chord.tonic + (ct.aliases[0] if ct.aliases else "")
        for ct in _chord_type.all_types()
        if _pcset.is_superset_of(chord.chroma, ct.chroma)
    ]


def reduced(chord_name: str) -> list[str]:
    """Names of the chords on the same tonic contained in this chord."""
    chord = get(chord_name)
    if not chord.tonic:
        return []
    return [
        chord.tonic + (ct.aliases[0] if ct.aliases else "")
        for ct in _chord_type.all_types()
        if _pcset.is_subset_of(chord.chroma, ct.chroma)
    ]


def notes(chord_name: ChordSource, tonic: str = "") -> list[str]:
    """Chord notes, built on ``tonic`` when given, otherwise on the chord's tonic."""
    chord = get(_chord_name(chord_name))
    base = tonic or chord.tonic
    if not base or chord.empty:
        return []
    return [_pitch_distance.transpose(base, ivl) for ivl in chord.intervals]


def step_to_note(chord_name: ChordSource, step: int, tonic: str = "") -> str:
    """Note at a zero-based step of the chord, wrapping across octaves."""
    chord = get(_chord_name(chord_name))
    base = tonic or chord.tonic
    if not base or chord.empty or not chord.intervals:
        return ""
    octaves, index = divmod(step, len(chord.intervals))
    root = _pitch_distance.transpose(base, [0, octaves])
    return _pitch_distance.transpose(root, chord.intervals[index])


def degree_to_note(chord_name: ChordSource, degree: int, tonic: str = "") -> str:
    """Note at a one-based chord degree (negative degrees count down); 0 gives ''."""
    if degree == 0:
        return ""
    return step_to_note(chord_name, degree - 1 if degree > 0 else degree, tonic)