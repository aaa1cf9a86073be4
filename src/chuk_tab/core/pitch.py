"""
Pitch primitives - PitchClass and Note.

PitchClass represents the 12 chromatic pitches (octave-independent).
Note is a concrete pitch (MIDI number) with a canonical display form,
used as tuning data for the strings of an instrument.
"""

from __future__ import annotations

import re
from enum import IntEnum
from functools import total_ordering

# Display name mappings (module level to avoid IntEnum member issues)
_SHARP_NAMES: list[str] = [
    "C",
    "C#",
    "D",
    "D#",
    "E",
    "F",
    "F#",
    "G",
    "G#",
    "A",
    "A#",
    "B",
]
_FLAT_NAMES: list[str] = [
    "C",
    "Db",
    "D",
    "Eb",
    "E",
    "F",
    "Gb",
    "G",
    "Ab",
    "A",
    "Bb",
    "B",
]

# Letter, optional accidental, octave (may be negative, e.g. "C-1")
_NOTE_PATTERN = re.compile(r"^([A-Ga-g])([#b]?)(-?\d+)$")


class PitchClass(IntEnum):
    """
    The 12 chromatic pitch classes (0-11).

    Enharmonic equivalents share the same value (C# == Db == 1).
    Spelling is a display concern, handled by spell().
    """

    C = 0
    Cs = 1  # C# / Db
    D = 2
    Ds = 3  # D# / Eb
    E = 4
    F = 5
    Fs = 6  # F# / Gb
    G = 7
    Gs = 8  # G# / Ab
    A = 9
    As = 10  # A# / Bb
    B = 11

    def to_midi(self, octave: int = 4) -> int:
        """Convert to MIDI note number. C4 = 60."""
        return self.value + (octave + 1) * 12

    def spell(self, prefer_flats: bool = False) -> str:
        """Get human-readable name."""
        names = _FLAT_NAMES if prefer_flats else _SHARP_NAMES
        return names[self.value]

    @classmethod
    def from_midi(cls, midi_note: int) -> PitchClass:
        """Extract pitch class from MIDI note number."""
        return cls(midi_note % 12)

    @classmethod
    def parse(cls, name: str) -> PitchClass:
        """Parse a pitch class from a string like 'C', 'C#', 'Db'."""
        name = name.strip()

        if name in _SHARP_NAMES:
            return cls(_SHARP_NAMES.index(name))

        if name in _FLAT_NAMES:
            return cls(_FLAT_NAMES.index(name))

        raise ValueError(f"Unknown pitch class: {name}")


@total_ordering
class Note:
    """
    An open-string pitch: a MIDI note number plus a spelling preference.

    Equality, ordering and hashing use the pitch only, so E2 spelled
    either way compares equal. The spelling only affects as_string().

    Immutable and hashable.
    """

    __slots__ = ("_midi", "_prefer_flats")
    _midi: int
    _prefer_flats: bool

    def __init__(self, midi: int, prefer_flats: bool = False) -> None:
        """Create a note from a MIDI note number."""
        if not 0 <= midi <= 127:
            raise ValueError(f"MIDI note must be 0-127, got {midi}")
        object.__setattr__(self, "_midi", midi)
        object.__setattr__(self, "_prefer_flats", prefer_flats)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"Note is immutable, cannot set {name!r}")

    @property
    def midi(self) -> int:
        """MIDI note number of this pitch."""
        return self._midi

    @property
    def pitch_class(self) -> PitchClass:
        return PitchClass.from_midi(self._midi)

    @property
    def octave(self) -> int:
        """Scientific pitch octave (C4 = middle C)."""
        return self._midi // 12 - 1

    def as_string(self) -> str:
        """
        Canonical display form: spelled pitch class followed by octave.

        Used as the row label of each string in a rendered tab.
        """
        return f"{self.pitch_class.spell(self._prefer_flats)}{self.octave}"

    @classmethod
    def from_pitch_class(cls, pitch_class: PitchClass, octave: int) -> Note:
        """Build a note from a pitch class and an octave."""
        return cls(pitch_class.to_midi(octave))

    @classmethod
    def parse(cls, text: str) -> Note:
        """
        Parse a note from its display form.

        Accepts 'E2', 'c#3', 'Bb1'. A flat accidental keeps the
        flat spelling for display.
        """
        match = _NOTE_PATTERN.match(text.strip())
        if match is None:
            raise ValueError(f"Unknown note: {text}")

        letter, accidental, octave = match.groups()
        pitch_class = PitchClass.parse(letter.upper() + accidental)
        return cls(pitch_class.to_midi(int(octave)), prefer_flats=accidental == "b")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Note):
            return NotImplemented
        return bool(self._midi == other._midi)

    def __lt__(self, other: Note) -> bool:
        if not isinstance(other, Note):
            return NotImplemented
        return bool(self._midi < other._midi)

    def __hash__(self) -> int:
        return hash(self._midi)

    def __repr__(self) -> str:
        return f"Note({self.as_string()!r})"

    def __str__(self) -> str:
        return self.as_string()
