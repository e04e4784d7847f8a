# tonalkit

A small music theory library: parse notes and intervals, transpose, compute
distances, work with pitch class sets, convert between MIDI numbers,
frequencies and note names, look up chord types and detect chords from notes.

It is pure Python with no runtime dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Overview

| Module | Purpose |
| --- | --- |
| `tonalkit.pitch` | The `Pitch` model, `Direction`, and chroma, height and coordinate helpers |
| `tonalkit.pitch_note` | Parse note names (`note("A4")`) into `Note` objects |
| `tonalkit.pitch_interval` | Parse interval names (`interval("5P")`) into `Interval` objects |
| `tonalkit.pitch_distance` | `transpose` notes by intervals, measure `distance` between notes |
| `tonalkit.note` | Note helpers: names, MIDI, frequency, enharmonics, sorting |
| `tonalkit.interval` | Interval helpers: simplify, invert, add, subtract, from semitones |
| `tonalkit.midi` | MIDI and frequency conversion, pitch class set stepping |
| `tonalkit.pcset` | Pitch class sets: chroma, set numbers, modes, subset and superset tests |
| `tonalkit.chord_type` | Dictionary of chord types and their aliases |
| `tonalkit.chord_detect` | Detect chord names from a list of notes |
| `tonalkit.chord` | Chords with tonic and bass: notes, degrees, transposition |
| `tonalkit.collection` | List utilities: `int_range`, `rotate`, `compact`, `shuffle`, `permutations` |
| `tonalkit.helpers` | `split` on single spaces |

## Examples

```python
from tonalkit import chord, chord_detect, interval, midi, note, pcset
from tonalkit.pitch_note import note as parse_note

a4 = parse_note("A4")
a4.midi          # 69
a4.freq          # 440.0

note.transpose("C4", "5P")        # "G4"
note.distance("C", "E")           # "3M"
note.enharmonic("C#4")            # "Db4"
note.sorted_names(["E4", "C4", "G3"])   # ["G3", "C4", "E4"]

interval.simplify("9M")           # "2M"
interval.invert("3M")             # "6m"
interval.from_semitones(7)        # "5P"

midi.midi_to_freq(69)             # 440.0
midi.midi_to_note_name(61, sharps=True)   # "C#4"

pcset.chroma(["c", "d", "e"])     # "101010000000"
pcset.is_subset_of(["c", "e", "g"], ["c", "e"])   # True

chord.get("Cmaj7").notes          # ("C", "E", "G", "B")
chord.transpose("Eb7b9/Bb", "3M") # "G7b9/D"

chord_detect.detect(["D", "F#", "A", "C"])        # ["D7"]
```

Lookups that fail return empty values (an empty string, an empty list, `None`,
or an object whose `empty` flag is set) rather than raising, so results can be
chained without guarding every call.

The chord type dictionary is module-level state: `chord_type.add`,
`chord_type.remove_all` and `chord_type.init_chord_types` change it for every
caller in the process.

## What it does not do

- There is no scale dictionary and no scale functions, so there is no way to
  list the scales a chord fits in or the chords a scale holds.
- There is no command-line tool; the package is used as a library.