"""Transposing notes by intervals and measuring the interval between notes."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from typing import Any

from tonalkit.pitch_interval import coord_to_interval, interval
from tonalkit.pitch_note import coord_to_note, note


def transpose(note_name: Any, interval_name: Any) -> str:
    """Transpose a note by an interval name or by ``[fifths, octaves]`` coordinates.

    Returns an empty string when the note or the interval is not valid.
    """
    n = note(note_name)
    if isinstance(interval_name, (list, tuple)):
        ivl_coord: Sequence[int] = interval_name
    else:
        ivl_coord = interval(interval_name).coord
    if n.empty or len(ivl_coord) < 2:
        return ""
    note_coord = n.coord
    if len(note_coord) == 1:
        moved = (note_coord[0] + ivl_coord[0],)
    else:
        moved = (note_coord[0] + ivl_coord[0], note_coord[1] + ivl_coord[1])
    return coord_to_note(moved).name


def distance(from_note: Any, to_note: Any) -> str:
    """Interval name between two notes; empty if either is not a note."""
    src = note(from_note)
    dest = note(to_note)
    if src.empty or dest.empty:
        return ""
    fcoord = src.coord
    tcoord = dest.coord
    fifths = tcoord[0] - fcoord[0]
    if len(fcoord) == 2 and len(tcoord) == 2:
        octs = tcoord[1] - fcoord[1]
    else:
        octs = -math.floor(fifths * 7 / 12)
    force_descending = (
        dest.height == src.height
        and dest.midi is not None
        and src.midi is not None
        and src.step > dest.step
    )
    return coord_to_interval((fifths, octs), force_descending).name


def tonic_intervals_transposer(intervals: Iterable[str], tonic: str) -> list[str]:
    """The notes reached by transposing ``tonic`` by each interval in turn."""
    return [transpose(tonic, ivl) for ivl in intervals]