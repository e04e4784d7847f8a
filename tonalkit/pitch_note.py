"""Note names: tokenizing, parsing and building from pitches."""

from __future__ import annotations

import functools
import re
from dataclasses import dataclass
from typing import Any

from tonalkit.pitch import coordinates, is_named_pitch, is_pitch, pitch_from_coordinates

_SEMI = (0, 2, 4, 5, 7, 9, 11)
_LETTERS = "CDEFGAB"
_NOTE_RE = re.compile(r"([a-gA-G]?)(#+|b+|x+|)(-?[0-9]*)\s*(.*)")


@dataclass(frozen=True)
class Note:
    """A parsed note; ``empty`` is True for names that are not notes."""

    empty: bool = True
    name: str = ""
    letter: str = ""
    acc: str = ""
    pc: str = ""
    step: int = 0
    alt: int = 0
    oct: int | None = None
    chroma: int = 0
    height: int = 0
    coord: tuple[int, ...] = ()
    midi: int | None = None
    freq: float | None = None


NO_NOTE = Note()


def tokenize_note(name: str) -> tuple[str, str, str, str]:
    """Split a note name into (letter, accidentals, octave, rest)."""
    m = _NOTE_RE.fullmatch(name)
    if m is None:
        return ("", "", "", "")
    letter, acc, oct_str, rest = m.groups()
    return (letter.upper(), acc.replace("x", "##"), oct_str, rest)


def step_to_letter(step: int) -> str:
    """Letter for a step (0 is C); empty for steps out of range."""
    return _LETTERS[step] if 0 <= step < len(_LETTERS) else ""


def alt_to_acc(alt: int) -> str:
    """Accidental string for an alteration (-2 gives 'bb')."""
    return "b" * -alt if alt < 0 else "#" * alt


def acc_to_alt(acc: str) -> int:
    """Alteration for an accidental string ('bb' gives -2)."""
    return -len(acc) if acc.startswith("b") else len(acc)


@functools.lru_cache(maxsize=None)
def parse(note_name: str) -> Note:
    """Parse a note name; returns NO_NOTE when it is not a note."""
    letter, acc, oct_str, rest = tokenize_note(note_name)
    if not letter or rest or oct_str == "-":
        return NO_NOTE
    step = (ord(letter) + 3) % 7
    alt = acc_to_alt(acc)
    octave = int(oct_str) if oct_str else None
    pc = letter + acc
    semis = _SEMI[step] + alt
    if octave is None:
        h = semis % 12 - 12 * 99
        freq = None
        coord = coordinates(_PitchLike(step, alt, None))
    else:
        h = semis + 12 * (octave + 1)
        freq = 2 ** ((h - 69) / 12) * 440
        coord = coordinates(_PitchLike(step, alt, octave))
    return Note(
        empty=False,
        name=pc + oct_str,
        letter=letter,
        acc=acc,
        pc=pc,
        step=step,
        alt=alt,
        oct=octave,
        chroma=semis % 12,
        height=h,
        coord=coord,
        midi=h if 0 <= h <= 127 else None,
        freq=freq,
    )


@dataclass(frozen=True)
class _PitchLike:
    step: int
    alt: int
    oct: int | None


def pitch_name(pitch: Any) -> str:
    """Note name for anything with step, alt and oct."""
    letter = step_to_letter(pitch.step)
    if not letter:
        return ""
    pc = letter + alt_to_acc(pitch.alt)
    octave = getattr(pitch, "oct", None)
    return pc if octave is None else f"{pc}{octave}"


def note(src: Any) -> Note:
    """Get a Note from a name, a Note, a pitch or a named pitch."""
    if isinstance(src, str):
        return parse(src)
    if isinstance(src, Note):
        return src
    if is_pitch(src):
        return parse(pitch_name(src))
    if is_named_pitch(src):
        return parse(src.name)
    return NO_NOTE


def coord_to_note(coord: tuple[int, ...] | list[int]) -> Note:
    """Note from fifths/octaves coordinates."""
    return note(pitch_from_coordinates(coord))