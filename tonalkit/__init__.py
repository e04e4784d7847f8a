"""Music theory toolkit: notes, intervals, pitch class sets, MIDI, chord types and chords."""

__version__ = "0.1.0"