"""
chuk-tab - immutable tablature sections with JSON and text output.

A Section is a named block of tab with its own tempo and tuning, made of
Columns (time-slices) holding one Position (fret label) per string.
Every edit returns a new Section.
"""

from chuk_tab.core import Note, PitchClass
from chuk_tab.errors import MalformedDocumentError, StringIndexOutOfRangeError, TabError
from chuk_tab.models import Column, ParseResult, Position, Section, TuningPreset
from chuk_tab.tunings import TuningLoader

__all__ = [
    "Column",
    "MalformedDocumentError",
    "Note",
    "ParseResult",
    "PitchClass",
    "Position",
    "Section",
    "StringIndexOutOfRangeError",
    "TabError",
    "TuningLoader",
    "TuningPreset",
]
