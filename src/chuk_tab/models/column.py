"""
Column model - one vertical time-slice across all strings.

A Column holds exactly one Position per string of the active tuning.
String numbers are 1-based in the public API (string 1 = tuning[0]).
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import BaseModel, Field

from chuk_tab.constants import ErrorMessages
from chuk_tab.core.pitch import Note
from chuk_tab.errors import StringIndexOutOfRangeError
from chuk_tab.models.parsing import ParseResult
from chuk_tab.models.position import Position

logger = logging.getLogger(__name__)


def _fit_positions(positions: Sequence[Position], string_count: int) -> tuple[Position, ...]:
    """Truncate trailing positions or pad with empty ones to string_count."""
    kept = tuple(positions[:string_count])
    return kept + tuple(Position() for _ in range(string_count - len(kept)))


class Column(BaseModel):
    """
    One time-slice of a tab: a fret label for every string.

    Columns are immutable; every edit returns a new Column.
    """

    positions: tuple[Position, ...] = Field(
        ..., min_length=1, description="One position per string, in string order"
    )

    model_config = {"frozen": True}

    @classmethod
    def create(cls, tuning: Sequence[Note]) -> Column:
        """Create an empty column with one position per tuning string."""
        return cls(positions=tuple(Position() for _ in tuning))

    @classmethod
    def parse_json(cls, data: Any, tuning: Sequence[Note]) -> ParseResult[Column]:
        """
        Parse a column from its JSON form.

        The stored fret labels are re-joined against the supplied tuning:
        surplus labels are dropped and missing strings are left empty.
        """
        if not isinstance(data, Mapping):
            logger.debug("Rejected column json of type %s", type(data).__name__)
            return ParseResult.failure(ErrorMessages.MALFORMED_COLUMN)

        frets = data.get("positions")
        if not isinstance(frets, list) or not all(isinstance(fret, str) for fret in frets):
            logger.debug("Rejected column json with positions %r", frets)
            return ParseResult.failure(ErrorMessages.MALFORMED_COLUMN)

        positions = [Position(fret=fret) for fret in frets]
        return ParseResult.success(cls(positions=_fit_positions(positions, len(tuning))))

    @classmethod
    def create_from_json(cls, data: Any, tuning: Sequence[Note]) -> Column:
        """
        Create a column from its JSON form.

        Raises:
            MalformedDocumentError: if data is not {"positions": [str, ...]}
        """
        return cls.parse_json(data, tuning).unwrap()

    @property
    def string_count(self) -> int:
        return len(self.positions)

    def set_tuning(self, tuning: Sequence[Note]) -> Column:
        """
        Re-key the column to a tuning with a possibly different string count.

        Strings present in both tunings keep their position, removed
        trailing strings are dropped, added strings start empty.
        """
        return Column(positions=_fit_positions(self.positions, len(tuning)))

    def get_string_position(self, string_number: int) -> Position:
        """
        Get the position for a 1-based string number.

        Raises:
            StringIndexOutOfRangeError: if the string does not exist
        """
        self._check_string(string_number)
        return self.positions[string_number - 1]

    def set_fret(self, string_number: int, fret: str) -> Column:
        """Return a new column with one string's fret label replaced."""
        self._check_string(string_number)
        index = string_number - 1
        replaced = self.positions[index].set_fret(fret)
        return Column(
            positions=self.positions[:index] + (replaced,) + self.positions[index + 1 :]
        )

    def get_character_width(self) -> int:
        """Width needed to render every fret label untruncated (at least 1)."""
        return max(1, *(len(position.fret) for position in self.positions))

    def is_populated(self) -> bool:
        """Return True if any string has a fret label."""
        return any(not position.is_empty for position in self.positions)

    def to_json(self) -> dict[str, Any]:
        return {"positions": [position.to_json() for position in self.positions]}

    def _check_string(self, string_number: int) -> None:
        if not 1 <= string_number <= len(self.positions):
            raise StringIndexOutOfRangeError(string_number, len(self.positions))
