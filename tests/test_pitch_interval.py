import pytest

from tonalkit.helpers import split
from tonalkit.pitch import Direction, Pitch
from tonalkit.pitch_interval import (
    IntervalType,
    alt_to_q,
    coord_to_interval,
    interval,
    interval_pitch_name,
    q_to_alt,
    tokenize_interval,
)


def names(src):
    return " ".join(interval(s).name for s in split(src))


def test_tokenize():
    assert tokenize_interval("-2M") == ("-2", "M")
    assert tokenize_interval("M-3") == ("-3", "M")


def test_tokenize_invalid():
    assert tokenize_interval("not-an-interval") == ("", "")


def test_interval_has_all_properties():
    ivl = interval("4d")
    assert ivl.empty is False
    assert ivl.name == "4d"
    assert ivl.num == 4
    assert ivl.q == "d"
    assert ivl.type is IntervalType.PERFECTABLE
    assert ivl.alt == -1
    assert ivl.chroma == 4
    assert ivl.dir == Direction.ASCENDING
    assert len(ivl.coord) == 3
    assert ivl.coord[0] == -8
    assert ivl.coord[1] == 5
    assert ivl.oct == 0
    assert ivl.semitones == 4
    assert ivl.simple == 4
    assert ivl.step == 3


def test_accepts_interval_name():
    ivl1 = interval("5P")
    ivl2 = interval(ivl1.name)
    assert ivl1.name == ivl2.name
    assert ivl1.semitones == ivl2.semitones
    assert ivl1.chroma == ivl2.chroma


def test_accepts_interval_object():
    ivl = interval("3m")
    assert interval(ivl) == ivl


def test_names():
    assert names("1P 2M 3M 4P 5P 6M 7M") == "1P 2M 3M 4P 5P 6M 7M"
    assert names("P1 M2 M3 P4 P5 M6 M7") == "1P 2M 3M 4P 5P 6M 7M"
    assert names("-1P -2M -3M -4P -5P -6M -7M") == "-1P -2M -3M -4P -5P -6M -7M"
    assert names("P-1 M-2 M-3 P-4 P-5 M-6 M-7") == "-1P -2M -3M -4P -5P -6M -7M"
    assert interval("not-an-interval").empty is True
    assert interval("2P").empty is True


def test_quality():
    assert [interval(i).q for i in split("1dd 1d 1P 1A 1AA")] == ["dd", "d", "P", "A", "AA"]
    assert [interval(i).q for i in split("2dd 2d 2m 2M 2A 2AA")] == [
        "dd", "d", "m", "M", "A", "AA",
    ]


def test_alt():
    assert [interval(i).alt for i in split("1dd 2dd 3dd 4dd")] == [-2, -3, -3, -2]


def test_simple():
    assert [interval(i).simple for i in split("1P 2M 3M 4P")] == [1, 2, 3, 4]
    assert [interval(i).simple for i in split("8P 9M 10M 11P")] == [8, 2, 3, 4]
    assert [interval(i).simple for i in split("-8P -9M -10M -11P")] == [-8, -2, -3, -4]


@pytest.mark.parametrize(
    "pitch, expected",
    [
        (Pitch(0, 0, None, Direction.ASCENDING), "1P"),
        (Pitch(0, -2, None, Direction.ASCENDING), "1dd"),
        (Pitch(1, 1, None, Direction.ASCENDING), "2A"),
        (Pitch(2, -2, None, Direction.ASCENDING), "3d"),
        (Pitch(1, 1, None, Direction.DESCENDING), "-2A"),
        (Pitch(0, 0, 0, Direction.ASCENDING), "1P"),
        (Pitch(0, -1, 1, Direction.DESCENDING), "-8d"),
        (Pitch(0, 1, 2, Direction.DESCENDING), "-15A"),
        (Pitch(1, -1, 1, Direction.DESCENDING), "-9m"),
    ],
)
def test_interval_from_pitch_props(pitch, expected):
    assert interval(interval_pitch_name(pitch)).name == expected
    assert interval(pitch).name == expected


def test_interval_from_invalid_pitch():
    assert interval("invalid").empty is True
    assert interval(interval_pitch_name(Pitch(1000, 0))).empty is True
    assert interval(Pitch(1, 0)).empty is True


@pytest.mark.parametrize("kind", [IntervalType.PERFECTABLE, IntervalType.MAJORABLE])
@pytest.mark.parametrize("alt", [-3, -2, -1, 0, 1, 2, 3])
def test_quality_alteration_round_trip(kind, alt):
    assert q_to_alt(kind, alt_to_q(kind, alt)) == alt


@pytest.mark.parametrize(
    "name", split("1P 2m 3M 4A 5d 6M 7m 8P 9M 11A 13m -2M -3m -5P -8P -10M")
)
def test_coordinates_round_trip(name):
    ivl = interval(name)
    assert coord_to_interval(ivl.coord).name == ivl.name