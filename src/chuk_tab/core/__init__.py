"""
Core music primitives.

- PitchClass: The 12 chromatic pitch classes (0-11)
- Note: A concrete pitch with a display form, used as tuning data
"""

from chuk_tab.core.pitch import Note, PitchClass

__all__ = [
    "Note",
    "PitchClass",
]
