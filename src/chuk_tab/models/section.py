"""
Section model - the entry point of the tablature document.

A Section contains:
- A free-form name
- A tempo (bpm)
- A tuning (one Note per string, index 0 = string 1)
- Ordered columns (left-to-right playback order)

Every edit returns a new Section. The previous instance stays valid and
unchanged; untouched columns are shared between versions.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import BaseModel, Field, model_validator

from chuk_tab.constants import DEFAULT_BPM, DEFAULT_SECTION_NAME, ErrorMessages
from chuk_tab.core.pitch import Note
from chuk_tab.errors import StringIndexOutOfRangeError
from chuk_tab.models.column import Column
from chuk_tab.models.parsing import ParseResult
from chuk_tab.rendering import render_section

logger = logging.getLogger(__name__)


def _is_number(value: Any) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)


class Section(BaseModel):
    """
    A named, tempo-tagged block of tablature.

    Edit operations never mutate; they build a new Section. Edits that
    address a column index are tolerant (an unknown index is a no-op),
    while string lookups are bounds-checked.
    """

    name: str = Field(DEFAULT_SECTION_NAME, description="Section name")
    columns: tuple[Column, ...] = Field(default=(), description="Columns in playback order")
    tuning: tuple[Note, ...] = Field(..., min_length=1, description="Open string pitches")
    bpm: int | float = Field(DEFAULT_BPM, description="Tempo in BPM")

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    @model_validator(mode="after")
    def validate_column_strings(self) -> Section:
        """Every column must have one position per tuning string."""
        for index, column in enumerate(self.columns):
            if column.string_count != len(self.tuning):
                raise ValueError(
                    ErrorMessages.COLUMN_TUNING_MISMATCH.format(
                        index=index, positions=column.string_count, strings=len(self.tuning)
                    )
                )
        return self

    # Factories

    @classmethod
    def create(cls, tuning: Sequence[Note]) -> Section:
        """Create a section with a single empty column, ready to render."""
        return cls(columns=(Column.create(tuning),), tuning=tuple(tuning))

    @classmethod
    def parse_json(cls, data: Any, tuning: Sequence[Note]) -> ParseResult[Section]:
        """
        Parse a section from its JSON form.

        The tuning is not part of the JSON; the supplied one is
        authoritative for every column.
        """
        if not (
            isinstance(data, Mapping)
            and _is_number(data.get("bpm"))
            and isinstance(data.get("name"), str)
            and isinstance(data.get("columns"), list)
        ):
            logger.debug("Rejected section json: %r", data)
            return ParseResult.failure(ErrorMessages.MALFORMED_SECTION)

        columns = []
        for column_data in data["columns"]:
            result = Column.parse_json(column_data, tuning)
            if not result:
                return ParseResult(error=result.error)
            columns.append(result.unwrap())

        return ParseResult.success(
            cls(name=data["name"], columns=tuple(columns), tuning=tuple(tuning), bpm=data["bpm"])
        )

    @classmethod
    def create_from_json(cls, data: Any, tuning: Sequence[Note]) -> Section:
        """
        Create a section from its JSON form.

        Raises:
            MalformedDocumentError: if bpm, name or columns is missing or mis-typed
        """
        return cls.parse_json(data, tuning).unwrap()

    # Queries

    @property
    def string_count(self) -> int:
        return len(self.tuning)

    def is_populated(self) -> bool:
        """Return True if any position in any column has a fret label."""
        return any(column.is_populated() for column in self.columns)

    def get_root_note_for_string(self, string_number: int) -> Note:
        """
        Get the open-string note for a 1-based string number.

        Raises:
            StringIndexOutOfRangeError: if the string does not exist
        """
        if not 1 <= string_number <= len(self.tuning):
            raise StringIndexOutOfRangeError(string_number, len(self.tuning))
        return self.tuning[string_number - 1]

    # Edits

    def set_tuning(self, tuning: Sequence[Note]) -> Section:
        """Replace the tuning and re-key every column to it."""
        return self._replace(
            columns=tuple(column.set_tuning(tuning) for column in self.columns),
            tuning=tuple(tuning),
        )

    def set_bpm(self, bpm: int | float) -> Section:
        return self._replace(bpm=bpm)

    def add_column(self, index: int) -> Section:
        """
        Insert an empty column immediately after index.

        -1 inserts at the front; indices past the end append.
        """
        cut = index + 1
        return self._replace(
            columns=self.columns[:cut] + (Column.create(self.tuning),) + self.columns[cut:]
        )

    def delete_column(self, index: int) -> Section:
        """Remove the column at index. An unknown index leaves the columns unchanged."""
        return self._replace(columns=tuple(c for i, c in enumerate(self.columns) if i != index))

    def set_column(self, column: Column, column_index: int) -> Section:
        """Replace the column at column_index. An unknown index leaves the columns unchanged."""
        return self._replace(
            columns=tuple(
                column if index == column_index else old for index, old in enumerate(self.columns)
            )
        )

    def set_fret(self, column_index: int, string_number: int, fret: str) -> Section:
        """
        Replace a single fret label.

        An unknown column index is a no-op, an unknown string number
        raises StringIndexOutOfRangeError.
        """
        if not 0 <= column_index < len(self.columns):
            return self._replace()
        column = self.columns[column_index].set_fret(string_number, fret)
        return self.set_column(column, column_index)

    def update_name(self, name: str) -> Section:
        return self._replace(name=name)

    # Output

    def to_json(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "columns": [column.to_json() for column in self.columns],
            "bpm": self.bpm,
        }

    def to_text(self) -> str:
        """Render the section as an aligned ASCII tab diagram."""
        return render_section(self)

    def _replace(self, **changes: Any) -> Section:
        """Build a new validated Section with some fields replaced."""
        fields: dict[str, Any] = {
            "name": self.name,
            "columns": self.columns,
            "tuning": self.tuning,
            "bpm": self.bpm,
        }
        fields.update(changes)
        return Section(**fields)
