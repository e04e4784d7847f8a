"""Pitch class sets: chromas, set numbers, modes and set relations."""

from __future__ import annotations

import functools
import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any, Union

from tonalkit.collection import rotate
from tonalkit.pitch_distance import tonic_intervals_transposer
from tonalkit.pitch_interval import interval
from tonalkit.pitch_note import note

_INTERVALS = ("1P", "2m", "2M", "3m", "3M", "4P", "5d", "5P", "6m", "6M", "7m", "7M")
_CHROMA_RE = re.compile(r"[01]{12}")
_EMPTY_CHROMA = "000000000000"


@dataclass(frozen=True)
class Pcset:
    """Properties of a pitch class set."""

    name: str = ""
    empty: bool = True
    set_num: int = 0
    chroma: str = _EMPTY_CHROMA
    normalized: str = _EMPTY_CHROMA
    intervals: tuple[str, ...] = ()


EMPTY_PCSET = Pcset()

PcsetSource = Union[Pcset, str, int, Sequence[str]]


def is_chroma(chroma: Any) -> bool:
    """True for a string of exactly twelve 0/1 digits."""
    return isinstance(chroma, str) and _CHROMA_RE.fullmatch(chroma) is not None


def is_pcset_num(num: Any) -> bool:
    """True for an integer set number between 0 and 4095."""
    return isinstance(num, int) and not isinstance(num, bool) and 0 <= num <= 4095


def is_pcset(obj: Any) -> bool:
    """True for a Pcset whose chroma is valid."""
    return isinstance(obj, Pcset) and is_chroma(obj.chroma)


def set_num_to_chroma(set_num: int) -> str:
    """Twelve-digit binary chroma of a set number."""
    return format(set_num & 0xFFF, "012b")


def chroma_to_number(chroma: str) -> int:
    """Set number of a binary chroma."""
    return int(chroma, 2)


def _chroma_rotations(chroma: str) -> list[str]:
    return ["".join(rotate(i, chroma)) for i in range(12)]


def _list_to_chroma(items: Iterable[str]) -> str:
    bits = [0] * 12
    valid = False
    for item in items:
        n = note(item)
        if not n.empty:
            valid = True
            bits[n.chroma] = 1
            continue
        ivl = interval(item)
        if ivl.name:
            valid = True
            bits[ivl.chroma] = 1
    if not valid:
        return _EMPTY_CHROMA
    return "".join(str(b) for b in bits)


@functools.lru_cache(maxsize=None)
def _chroma_to_pcset(chroma: str) -> Pcset:
    if chroma == _EMPTY_CHROMA:
        return EMPTY_PCSET
    candidates = sorted(
        n for n in map(chroma_to_number, _chroma_rotations(chroma)) if n >= 2048
    )
    normalized = set_num_to_chroma(candidates[0]) if candidates else chroma
    return Pcset(
        name="",
        empty=False,
        set_num=chroma_to_number(chroma),
        chroma=chroma,
        normalized=normalized,
        intervals=tuple(ivl for ivl, bit in zip(_INTERVALS, chroma) if bit == "1"),
    )


def get(src: PcsetSource) -> Pcset:
    """Pitch class set from a Pcset, a chroma, a set number or a list of notes/intervals."""
    if isinstance(src, Pcset):
        return src if is_pcset(src) else EMPTY_PCSET
    if isinstance(src, str):
        return _chroma_to_pcset(src) if is_chroma(src) else EMPTY_PCSET
    if isinstance(src, int) and not isinstance(src, bool):
        return _chroma_to_pcset(set_num_to_chroma(src)) if is_pcset_num(src) else EMPTY_PCSET
    if isinstance(src, Iterable):
        return _chroma_to_pcset(_list_to_chroma(src))
    return EMPTY_PCSET


def intervals(src: PcsetSource) -> list[str]:
    """Intervals of the set, measured from C."""
    return list(get(src).intervals)


def chroma(src: PcsetSource) -> str:
    """Binary chroma of the set."""
    return get(src).chroma


def num(src: PcsetSource) -> int:
    """Set number of the set."""
    return get(src).set_num


def notes(src: PcsetSource) -> list[str]:
    """Pitch class names of the set, starting from C."""
    pcs = get(src)
    if pcs.empty:
        return []
    return tonic_intervals_transposer(pcs.intervals, "C")


def chromas() -> list[str]:
    """All chromas that contain C (set numbers 2048 to 4095)."""
    return [set_num_to_chroma(n) for n in range(2048, 4096)]


def modes(src: PcsetSource, normalize: bool = True) -> list[str]:
    """Rotations of the set's chroma; with ``normalize`` only those starting with 1."""
    return [
        rotated
        for rotated in _chroma_rotations(get(src).chroma)
        if not normalize or rotated[0] == "1"
    ]


def is_equal(s1: PcsetSource, s2: PcsetSource) -> bool:
    """True if both sets hold the same pitch classes."""
    return get(s1).set_num == get(s2).set_num


def is_subset_of(superset: PcsetSource, subset: PcsetSource) -> bool:
    """True if ``subset`` is a proper subset of ``superset``."""
    s = get(superset).set_num
    o = get(subset).set_num
    return bool(s) and s != o and (o & s) == o


def is_superset_of(subset: PcsetSource, superset: PcsetSource) -> bool:
    """True if ``superset`` is a proper superset of ``subset``."""
    s = get(subset).set_num
    o = get(superset).set_num
    return bool(s) and s != o and (o | s) == o


def is_note_included_in(pcset: PcsetSource, note_name: str) -> bool:
    """True if the note's pitch class belongs to the set."""
    pcs = get(pcset)
    n = note(note_name)
    if n.empty or pcs.empty:
        return False
    return pcs.chroma[n.chroma] == "1"


def filter_notes(pcset: PcsetSource, notes: Iterable[str]) -> list[str]:
    """Keep only the notes whose pitch class belongs to the set."""
    pcs = get(pcset)
    if pcs.empty:
        return []
    return [name for name in notes if is_note_included_in(pcs, name)]