"""
Pydantic models for the tablature document.

This module provides:
- Section: Named block of tab with tempo, tuning and columns
- Column: One time-slice across all strings
- Position: One string's fret label
- ParseResult: Outcome of parsing untyped JSON
- TuningPreset: Named tuning loaded from configuration
"""

from chuk_tab.models.column import Column
from chuk_tab.models.parsing import ParseResult
from chuk_tab.models.position import Position
from chuk_tab.models.section import Section
from chuk_tab.models.tuning import TuningPreset

__all__ = [
    "Column",
    "ParseResult",
    "Position",
    "Section",
    "TuningPreset",
]
