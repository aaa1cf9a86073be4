"""
Tuning preset model - a named list of open-string notes.

Presets are configuration: they come from the built-in table or from
project YAML files and are turned into the Note tuple a Section needs.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from chuk_tab.core.pitch import Note


class TuningPreset(BaseModel):
    """
    A named tuning.

    Notes are listed from string 1 (the top row of a tab) downwards,
    e.g. standard guitar is E4 B3 G3 D3 A2 E2.
    """

    name: str = Field(..., description="Tuning name (e.g., 'standard', 'drop-d')")
    description: str = Field("", description="Human readable description")
    notes: tuple[str, ...] = Field(..., min_length=1, description="Open string notes")

    model_config = {"frozen": True}

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Ensure tuning name is a valid identifier."""
        if not v or not v.replace("_", "").replace("-", "").isalnum():
            raise ValueError(f"Invalid tuning name: {v}")
        return v.lower().replace("_", "-")

    @field_validator("notes")
    @classmethod
    def validate_notes(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Validate note format."""
        for note in v:
            Note.parse(note)
        return v

    @property
    def string_count(self) -> int:
        return len(self.notes)

    def to_notes(self) -> tuple[Note, ...]:
        """Get parsed Note objects, string 1 first."""
        return tuple(Note.parse(note) for note in self.notes)
