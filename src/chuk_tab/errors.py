"""
Exceptions raised by the tablature model.

Both concrete errors also derive from the matching builtin (ValueError,
IndexError) so callers that only know the builtins still catch them.
"""

from __future__ import annotations

from chuk_tab.constants import ErrorMessages


class TabError(Exception):
    """Base class for tablature model errors."""


class MalformedDocumentError(TabError, ValueError):
    """JSON input does not have the shape of a section or column."""


class StringIndexOutOfRangeError(TabError, IndexError):
    """A 1-based string number does not exist in the tuning."""

    def __init__(self, string_number: int, string_count: int) -> None:
        super().__init__(ErrorMessages.NO_STRING.format(string_number=string_number))
        self.string_number = string_number
        self.string_count = string_count
