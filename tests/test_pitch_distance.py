import pytest

from tonalkit.pitch_distance import distance, tonic_intervals_transposer, transpose
from tonalkit.pitch_interval import interval
from tonalkit.pitch_note import note


def test_pinned_values():
    assert transpose("C4", "3M") == "E4"
    assert distance("C4", "G4") == "5P"


@pytest.mark.parametrize(
    "a,b",
    [("C", "D"), ("E", "C"), ("F#", "Bb"), ("Ab", "G"), ("B", "C#")],
)
def test_pitch_class_round_trip(a, b):
    assert transpose(a, distance(a, b)) == b


@pytest.mark.parametrize(
    "a,b",
    [("C4", "G4"), ("C5", "C4"), ("A3", "F#5"), ("Eb4", "D2"), ("G4", "G4")],
)
def test_note_round_trip_and_semitones(a, b):
    ivl = distance(a, b)
    assert transpose(a, ivl) == b
    assert interval(ivl).semitones == note(b).height - note(a).height


def test_invalid_inputs_give_empty():
    assert transpose("blah", "3M") == ""
    assert transpose("C4", "blah") == ""
    assert distance("", "C4") == ""
    assert distance("C4", "x") == ""


@pytest.mark.parametrize("name", ["C4", "F#3", "Bb5"])
@pytest.mark.parametrize("octaves", [-2, 0, 1, 3])
def test_transpose_by_octave_coordinates(name, octaves):
    result = note(transpose(name, [0, octaves]))
    assert result.pc == note(name).pc
    assert result.oct == note(name).oct + octaves


@pytest.mark.parametrize("name", ["C", "D4", "Ab2"])
def test_coordinates_match_interval_names(name):
    assert transpose(name, [1, 0]) == transpose(name, "5P")
    assert transpose(name, (0, 0)) == note(name).name


def test_coordinates_need_two_values():
    assert transpose("C4", [1]) == ""


def test_tonic_intervals_transposer_round_trip():
    ivls = ["1P", "2M", "3m", "5P", "7m"]
    result = tonic_intervals_transposer(ivls, "D")
    assert len(result) == len(ivls)
    assert [distance("D", n) for n in result] == ivls


def test_tonic_intervals_transposer_empty():
    assert tonic_intervals_transposer([], "C") == []