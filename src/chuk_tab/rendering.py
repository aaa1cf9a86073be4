"""
Text rendering - Section to an aligned ASCII tab diagram.

Output layout:

    Section Name: Riff
    E4|---0--
    B3|---1--
    G3|---0--
    ...

Each column is padded to its own width, computed once per column and
applied to every string, so fret labels line up vertically even when a
column mixes one- and two-digit frets.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from chuk_tab.constants import REST_CHARACTER, SECTION_HEADER, TRACK_START

if TYPE_CHECKING:
    from chuk_tab.models.section import Section


def render_string_row(section: Section, string_number: int, widths: list[int]) -> str:
    """Render one string's row, without the trailing newline."""
    label = section.get_root_note_for_string(string_number).as_string()
    fields = (
        REST_CHARACTER + column.get_string_position(string_number).pad_fret(width)
        for column, width in zip(section.columns, widths, strict=True)
    )
    return label + TRACK_START + "".join(fields)


def render_section(section: Section) -> str:
    """
    Render a section as a tab diagram.

    The header line is followed by one row per string in tuning order
    and a trailing blank line.
    """
    widths = [column.get_character_width() for column in section.columns]
    rows = [
        render_string_row(section, string_number, widths)
        for string_number in range(1, section.string_count + 1)
    ]
    header = SECTION_HEADER.format(name=section.name)
    return header + "\n" + "".join(row + "\n" for row in rows) + "\n"
