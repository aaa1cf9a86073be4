"""
Position model - one string's fretting at one time-slice.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from chuk_tab.constants import REST_CHARACTER


class Position(BaseModel):
    """
    The fret label played on one string within a column.

    An empty label means the string is not played at that slice.
    Labels are opaque text (digits or symbols such as 'x', 'h7').
    """

    fret: str = Field("", description="Fret label, empty when not played")

    model_config = {"frozen": True}

    @property
    def is_empty(self) -> bool:
        """Return True if nothing is played on this string."""
        return len(self.fret) == 0

    def set_fret(self, fret: str) -> Position:
        """Return a new position with the given fret label."""
        return Position(fret=fret)

    def pad_fret(self, width: int) -> str:
        """
        Left-justify the fret label and fill it with rests up to width.

        Labels longer than width are returned unchanged, never truncated.
        """
        return self.fret.ljust(width, REST_CHARACTER)

    def to_json(self) -> str:
        return self.fret
