import pytest

from tonalkit import chord
from tonalkit import chord_type
from tonalkit import pcset
from tonalkit.note import transpose_octaves


def test_tokenize_plain_and_slash_names():
    assert chord.tokenize("Cmaj7") == ("C", "maj7", "")
    assert chord.tokenize("maj7") == ("", "maj7", "")
    assert chord.tokenize("aug") == ("", "aug", "")
    assert chord.tokenize("C7/E") == ("C", "7", "E")
    assert chord.tokenize("Cmaj7/x") == ("C", "maj7/x", "")


def test_tokenize_bass_only_accepts_pitch_classes():
    assert chord.tokenize_bass("C", "m7/Eb") == ("C", "m7", "Eb")
    assert chord.tokenize_bass("C", "m7/E4") == ("C", "m7/E4", "")
    assert chord.tokenize_bass("C", "m7") == ("C", "m7", "")


def test_get_chord_with_tonic():
    c = chord.get("Cmaj7")
    maj7 = chord_type.get("maj7")
    assert c.empty is False
    assert c.tonic == "C"
    assert c.symbol == "Cmaj7"
    assert c.type == maj7.name
    assert c.intervals == maj7.intervals
    assert c.chroma == maj7.chroma
    assert c.root == ""
    assert c.root_degree is None
    assert c.notes == ("C", "E", "G", "B")


def test_get_inversion_rotates_intervals():
    c = chord.get("Cmaj7/B")
    assert c.root == "B"
    assert c.bass == "B"
    assert c.root_degree == 4
    assert c.symbol == "Cmaj7/B"
    assert c.intervals == ("7M", "8P", "10M", "12P")
    assert c.notes == ("B", "C", "E", "G")
    assert c.name.endswith(" over B")


def test_bass_outside_chord_is_prepended():
    c = chord.get("C/Bb")
    assert c.bass == "Bb"
    assert c.root == ""
    assert c.root_degree is None
    assert c.symbol == "C/Bb"
    assert c.notes[0] == "Bb"
    assert set(c.notes[1:]) == set(chord.get("C").notes)


def test_invalid_chords_are_empty():
    assert chord.get("") == chord.NO_CHORD
    assert chord.get("hello").empty is True
    assert chord.get_chord("maj7", "X").empty is True
    assert chord.get_chord("maj7", "C", "X").empty is True
    assert chord.get_chord("nope").empty is True


def test_get_chord_without_tonic_has_no_notes():
    c = chord.get_chord("maj7")
    assert c.empty is False
    assert c.tonic == ""
    assert c.notes == ()
    assert c.symbol == "maj7"
    assert c.name == chord_type.get("maj7").name


def test_get_from_tokens_matches_name():
    assert chord.get(["C", "maj7"]) == chord.get("Cmaj7")
    assert chord.get(["C", "maj7", "B"]) == chord.get("Cmaj7/B")
    assert chord.get([]) == chord.NO_CHORD


def test_transpose_chord_names():
    assert chord.transpose("Eb7b9", "3M") == "G7b9"
    assert chord.transpose("7b9", "3M") == "7b9"
    up = chord.transpose("Cmaj7/E", "3M")
    assert chord.transpose(up, "-3M") == "Cmaj7/E"


def test_extended_and_reduced():
    ext = chord.extended("Cmaj7")
    assert "Cmaj9" in ext
    assert "Cmaj13" in ext
    assert "Cmaj7" not in ext
    assert all(name.startswith("C") for name in ext)

    red = chord.reduced("Cmaj7")
    assert "CM" in red
    assert "C5" in red
    assert "Cmaj7" not in red
    base = chord.get("Cmaj7").chroma
    assert pcset.is_subset_of(base, chord.get("C5").chroma)


def test_extended_and_reduced_need_a_tonic():
    assert chord.extended("maj7") == []
    assert chord.reduced("maj7") == []


def test_notes():
    assert chord.notes("Cmaj7") == list(chord.get("Cmaj7").notes)
    assert chord.notes(["Cmaj7"]) == chord.notes("Cmaj7")
    assert chord.notes("maj7", "Eb") == ["Eb", "G", "Bb", "D"]
    assert chord.notes("maj7") == []
    assert chord.notes("nope", "C") == []


def test_degree_to_note():
    assert chord.degree_to_note("maj7", 1, "C4") == "C4"
    assert chord.degree_to_note("maj7", 5, "C4") == "C5"
    assert chord.degree_to_note("maj7", -1, "C4") == "B3"
    assert chord.degree_to_note("maj7", 0, "C4") == ""
    assert chord.degree_to_note("maj7", 2) == ""


@pytest.mark.parametrize("degree", [1, 2, 3, 4, 5, 9])
def test_positive_degree_is_step_minus_one(degree):
    assert chord.degree_to_note("maj7", degree, "C4") == chord.step_to_note(
        "maj7", degree - 1, "C4"
    )


@pytest.mark.parametrize("step", range(-4, 4))
def test_steps_wrap_by_octave(step):
    low = chord.step_to_note("maj7", step, "C4")
    high = chord.step_to_note("maj7", step + 4, "C4")
    assert high == transpose_octaves(low, 1)


def test_step_to_note_with_tokens_and_invalid():
    assert chord.step_to_note(["Cmaj7"], 0) == chord.step_to_note("Cmaj7", 0)
    assert chord.step_to_note("Cmaj7", 0) == "C"
    assert chord.step_to_note("nope", 0, "C4") == ""