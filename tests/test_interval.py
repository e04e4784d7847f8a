import pytest

from tonalkit import interval as ivl


def test_names():
    assert ivl.names() == ["1P", "2M", "3M", "4P", "5P", "6m", "7m"]


def test_properties():
    assert ivl.name("P5") == "5P"
    assert ivl.name("blah") == ""
    assert ivl.quality("3M") == "M"
    assert ivl.num("-5P") == -5
    assert ivl.semitones("5P") == ivl.get("5P").semitones


def test_simplify():
    assert ivl.simplify("9M") == "2M"
    assert ivl.simplify("-9M") == "-2M"
    assert ivl.simplify("nope") == ""


@pytest.mark.parametrize("name", ["1P", "2M", "2m", "3M", "3m", "4P", "5P", "6M", "6m", "7M", "7m"])
def test_invert_round_trip(name):
    assert ivl.invert(ivl.invert(name)) == name


def test_invert_values():
    assert ivl.invert("3M") == "6m"
    assert ivl.invert("5P") == "4P"
    assert ivl.invert("x") == ""


def test_from_semitones_values():
    assert ivl.from_semitones(0) == "1P"
    assert ivl.from_semitones(6) == "5d"
    assert ivl.from_semitones(12) == "8P"


@pytest.mark.parametrize("n", range(-24, 25))
def test_from_semitones_round_trip(n):
    assert ivl.semitones(ivl.from_semitones(n)) == n


def test_distance():
    assert ivl.distance("C4", "G4") == "5P"
    assert ivl.distance("C4", "nope") == ""


def test_add_and_subtract():
    assert ivl.add("3m", "3M") == "5P"
    assert ivl.subtract("5P", "3M") == "3m"
    assert ivl.add("3m", "nope") == ""
    assert ivl.subtract("nope", "3M") == ""


def test_add_to():
    add_third = ivl.add_to("3M")
    assert add_third("3m") == ivl.add("3M", "3m")


@pytest.mark.parametrize("name", ["2M", "3m", "4P", "6M", "7m"])
def test_add_subtract_inverse(name):
    assert ivl.subtract(ivl.add(name, "3M"), "3M") == name


@pytest.mark.parametrize("fifths", [-3, -1, 1, 2, 5])
def test_transpose_fifths_round_trip(fifths):
    moved = ivl.transpose_fifths("3M", fifths)
    assert ivl.transpose_fifths(moved, -fifths) == "3M"


def test_transpose_fifths_invalid():
    assert ivl.transpose_fifths("invalid", 1) == ""