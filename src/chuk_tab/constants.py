"""
Constants for the tablature model.

No magic strings - defaults, rendering characters and messages live here.
"""

from typing import Final

# Section defaults
DEFAULT_SECTION_NAME: Final = "New Tab Section"
DEFAULT_BPM: Final = 150

# Text rendering
REST_CHARACTER: Final = "-"  # Filler for empty or short fret labels
TRACK_START: Final = "|-"  # Follows the string label on every row
SECTION_HEADER: Final = "Section Name: {name}"

# Tuning used when a caller does not name one
DEFAULT_TUNING_NAME: Final = "standard"


class ErrorMessages:
    """Standardized error messages."""

    MALFORMED_SECTION = "Cannot create tab section from json!"
    MALFORMED_COLUMN = "Cannot create tab column from json!"
    INVALID_JSON = "Cannot parse tab section json: {reason}"
    NO_STRING = "No string at position {string_number}"
    TUNING_NOT_FOUND = "Tuning '{name}' not found."
    COLUMN_TUNING_MISMATCH = (
        "Column {index} has {positions} positions but the tuning has {strings} strings"
    )
