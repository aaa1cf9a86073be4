"""
Tests for the Section model.

Tests cover:
- Construction, factories and invariants
- Queries (is_populated, root notes)
- Structural edits and their index policies
- JSON round-trips and shape checks
"""

import pytest
from pydantic import ValidationError

from chuk_tab.core import Note
from chuk_tab.errors import MalformedDocumentError, StringIndexOutOfRangeError
from chuk_tab.models import Column, Section


@pytest.fixture
def column_a(standard_tuning) -> Column:
    return Column.create(standard_tuning).set_fret(1, "a")


@pytest.fixture
def column_b(standard_tuning) -> Column:
    return Column.create(standard_tuning).set_fret(1, "b")


@pytest.fixture
def two_columns(standard_tuning, column_a, column_b) -> Section:
    """A section with columns [A, B]."""
    return Section(columns=[column_a, column_b], tuning=standard_tuning)


class TestSectionCreate:
    """Tests for constructing sections."""

    def test_create(self, standard_tuning) -> None:
        """create() gives one empty column with defaults."""
        section = Section.create(standard_tuning)
        assert section.name == "New Tab Section"
        assert section.bpm == 150
        assert section.tuning == standard_tuning
        assert len(section.columns) == 1
        assert section.columns[0] == Column.create(standard_tuning)

    def test_constructor_defaults(self, standard_tuning) -> None:
        """Only the tuning is required."""
        section = Section(tuning=standard_tuning)
        assert section.name == "New Tab Section"
        assert section.columns == ()
        assert section.bpm == 150

    def test_tuning_required(self) -> None:
        """A section cannot exist without a tuning."""
        with pytest.raises(ValidationError):
            Section()  # type: ignore[call-arg]
        with pytest.raises(ValidationError):
            Section(tuning=[])

    def test_column_must_match_tuning(self, standard_tuning, bass_tuning) -> None:
        """Every column has one position per string."""
        with pytest.raises(ValidationError, match="Column 0 has 4 positions"):
            Section(columns=[Column.create(bass_tuning)], tuning=standard_tuning)

    def test_fields_are_read_only(self, standard_tuning) -> None:
        """Columns and tuning are tuples and the model is frozen."""
        section = Section.create(list(standard_tuning))
        assert isinstance(section.columns, tuple)
        assert isinstance(section.tuning, tuple)
        with pytest.raises(ValidationError):
            section.name = "Other"  # type: ignore[misc]

    def test_tuning_notes_shared(self, standard_tuning) -> None:
        """Tuning notes are shared by reference."""
        section = Section.create(standard_tuning)
        assert section.tuning[0] is standard_tuning[0]


class TestSectionQueries:
    """Tests for section queries."""

    def test_not_populated_when_empty(self, standard_tuning) -> None:
        """Empty fret labels everywhere means not populated."""
        assert not Section.create(standard_tuning).is_populated()
        assert not Section(tuning=standard_tuning).is_populated()

    def test_one_fret_populates(self, standard_tuning) -> None:
        """A single non-empty label flips is_populated."""
        section = Section.create(standard_tuning).add_column(0).set_fret(1, 6, "3")
        assert section.is_populated()

    def test_root_note_for_string(self, standard_tuning) -> None:
        """String numbers are 1-based."""
        section = Section.create(standard_tuning)
        assert section.get_root_note_for_string(1) == Note.parse("E4")
        assert section.get_root_note_for_string(6) == Note.parse("E2")

    @pytest.mark.parametrize("string_number", [0, 7, -1])
    def test_root_note_out_of_range(self, standard_tuning, string_number) -> None:
        """Strings outside 1..6 raise with the offending number."""
        section = Section.create(standard_tuning)
        with pytest.raises(StringIndexOutOfRangeError, match=f"No string at position {string_number}"):
            section.get_root_note_for_string(string_number)

    def test_string_count(self, bass_tuning) -> None:
        """String count follows the tuning."""
        assert Section.create(bass_tuning).string_count == 4


class TestSectionAddColumn:
    """Tests for add_column index policy."""

    def test_add_at_front(self, two_columns, column_a, column_b) -> None:
        """-1 inserts before the first column."""
        result = two_columns.add_column(-1)
        assert result.columns[1:] == (column_a, column_b)
        assert not result.columns[0].is_populated()

    def test_add_after_first(self, two_columns, column_a, column_b) -> None:
        """An index inserts immediately after that column."""
        result = two_columns.add_column(0)
        assert result.columns[0] == column_a
        assert not result.columns[1].is_populated()
        assert result.columns[2] == column_b

    def test_add_after_last(self, two_columns, column_a, column_b) -> None:
        """The last index appends."""
        result = two_columns.add_column(1)
        assert result.columns[:2] == (column_a, column_b)
        assert len(result.columns) == 3

    def test_add_out_of_range_appends(self, two_columns, column_a, column_b) -> None:
        """Indices past the end clamp to the end."""
        result = two_columns.add_column(5)
        assert result.columns[:2] == (column_a, column_b)
        assert len(result.columns) == 3
        assert result.columns[2].string_count == 6

    def test_add_leaves_original(self, two_columns) -> None:
        """The previous version is unchanged."""
        two_columns.add_column(0)
        assert len(two_columns.columns) == 2

    def test_untouched_columns_shared(self, two_columns, column_a) -> None:
        """Unchanged columns are shared between versions."""
        result = two_columns.add_column(-1)
        assert result.columns[1] is two_columns.columns[0]


class TestSectionDeleteColumn:
    """Tests for delete_column."""

    def test_delete(self, two_columns, column_b) -> None:
        """The column at index is removed."""
        assert two_columns.delete_column(0).columns == (column_b,)

    @pytest.mark.parametrize("index", [5, 2, -1])
    def test_delete_unknown_index_is_noop(self, two_columns, index) -> None:
        """No column matches, nothing is removed."""
        result = two_columns.delete_column(index)
        assert result.columns == two_columns.columns

    def test_delete_last_column(self, standard_tuning) -> None:
        """A section may end up with no columns."""
        assert Section.create(standard_tuning).delete_column(0).columns == ()


class TestSectionSetColumn:
    """Tests for set_column and set_fret."""

    def test_set_column(self, two_columns, column_a, standard_tuning) -> None:
        """The column at index is replaced."""
        replacement = Column.create(standard_tuning).set_fret(2, "x")
        result = two_columns.set_column(replacement, 1)
        assert result.columns == (column_a, replacement)

    @pytest.mark.parametrize("index", [5, -1])
    def test_set_column_unknown_index_is_noop(self, two_columns, standard_tuning, index) -> None:
        """No column matches, nothing is replaced."""
        replacement = Column.create(standard_tuning).set_fret(2, "x")
        result = two_columns.set_column(replacement, index)
        assert result.columns == two_columns.columns

    def test_set_column_wrong_size(self, two_columns, bass_tuning) -> None:
        """A column built for another tuning is rejected."""
        with pytest.raises(ValidationError):
            two_columns.set_column(Column.create(bass_tuning), 0)

    def test_set_fret(self, two_columns) -> None:
        """One fret label is replaced."""
        result = two_columns.set_fret(1, 6, "0")
        assert result.columns[1].get_string_position(6).fret == "0"
        assert result.columns[1].get_string_position(1).fret == "b"
        assert two_columns.columns[1].get_string_position(6).fret == ""

    def test_set_fret_unknown_column_is_noop(self, two_columns) -> None:
        """An unknown column index changes nothing."""
        result = two_columns.set_fret(9, 1, "5")
        assert result.columns == two_columns.columns
        assert result is not two_columns

    def test_set_fret_unknown_string(self, two_columns) -> None:
        """An unknown string number raises."""
        with pytest.raises(StringIndexOutOfRangeError):
            two_columns.set_fret(0, 7, "5")


class TestSectionSimpleEdits:
    """Tests for tuning, tempo and name edits."""

    def test_set_tuning_shrinks_columns(self, two_columns, bass_tuning) -> None:
        """6 to 4 strings keeps the first four labels of every column."""
        section = two_columns.set_fret(0, 4, "7").set_fret(0, 5, "9")
        result = section.set_tuning(bass_tuning)
        assert result.tuning == bass_tuning
        assert all(column.string_count == 4 for column in result.columns)
        assert [p.fret for p in result.columns[0].positions] == ["a", "", "", "7"]
        assert [p.fret for p in result.columns[1].positions] == ["b", "", "", ""]

    def test_set_tuning_grows_columns(self, bass_tuning, standard_tuning) -> None:
        """4 to 6 strings pads every column with empty positions."""
        section = Section.create(bass_tuning).set_fret(0, 4, "3")
        result = section.set_tuning(standard_tuning)
        assert all(column.string_count == 6 for column in result.columns)
        assert [p.fret for p in result.columns[0].positions] == ["", "", "", "3", "", ""]

    def test_set_bpm(self, two_columns) -> None:
        """Only the tempo changes."""
        result = two_columns.set_bpm(92.5)
        assert result.bpm == 92.5
        assert result.columns == two_columns.columns
        assert two_columns.bpm == 150

    def test_set_bpm_not_validated(self, two_columns) -> None:
        """Tempo values are not checked here."""
        assert two_columns.set_bpm(0).bpm == 0

    def test_update_name(self, two_columns) -> None:
        """Only the name changes."""
        result = two_columns.update_name("Chorus")
        assert result.name == "Chorus"
        assert two_columns.name == "New Tab Section"
        assert result.columns == two_columns.columns


class TestSectionJson:
    """Tests for section JSON."""

    def test_to_json(self, standard_tuning) -> None:
        """JSON holds name, columns and bpm but no tuning."""
        section = Section.create(standard_tuning).update_name("Intro").set_fret(0, 2, "1")
        assert section.to_json() == {
            "name": "Intro",
            "columns": [{"positions": ["", "1", "", "", "", ""]}],
            "bpm": 150,
        }

    def test_round_trip(self, standard_tuning) -> None:
        """Loading the JSON back gives the same JSON."""
        section = (
            Section.create(standard_tuning)
            .add_column(0)
            .add_column(1)
            .set_fret(0, 1, "0")
            .set_fret(1, 2, "12")
            .set_fret(2, 6, "x")
            .set_bpm(97.5)
            .update_name("Verse")
        )
        loaded = Section.create_from_json(section.to_json(), section.tuning)
        assert loaded.to_json() == section.to_json()
        assert loaded.tuning == section.tuning

    def test_tuning_is_authoritative(self, standard_tuning, bass_tuning) -> None:
        """Columns are re-keyed to the supplied tuning."""
        data = Section.create(standard_tuning).set_fret(0, 1, "5").to_json()
        loaded = Section.create_from_json(data, bass_tuning)
        assert loaded.tuning == bass_tuning
        assert loaded.columns[0].string_count == 4
        assert loaded.columns[0].get_string_position(1).fret == "5"

    @pytest.mark.parametrize(
        "data",
        [
            {"name": "x", "columns": []},
            {"name": "x", "columns": [], "bpm": "150"},
            {"name": "x", "columns": [], "bpm": True},
            {"name": 3, "columns": [], "bpm": 150},
            {"columns": [], "bpm": 150},
            {"name": "x", "columns": {}, "bpm": 150},
            {"name": "x", "bpm": 150},
            [],
            None,
        ],
    )
    def test_malformed(self, standard_tuning, data) -> None:
        """Failing any shape check raises a generic construction error."""
        with pytest.raises(MalformedDocumentError, match="Cannot create tab section from json!"):
            Section.create_from_json(data, standard_tuning)

    def test_malformed_column(self, standard_tuning) -> None:
        """A bad column fails the whole section."""
        data = {"name": "x", "columns": [{"positions": [1]}], "bpm": 150}
        with pytest.raises(MalformedDocumentError):
            Section.create_from_json(data, standard_tuning)

    def test_malformed_is_value_error(self, standard_tuning) -> None:
        """The error is also a ValueError."""
        with pytest.raises(ValueError):
            Section.create_from_json({}, standard_tuning)

    def test_parse_json(self, standard_tuning) -> None:
        """parse_json returns a tagged result."""
        ok = Section.parse_json({"name": "x", "columns": [], "bpm": 120}, standard_tuning)
        assert ok.is_ok
        assert ok.unwrap().bpm == 120

        bad = Section.parse_json({"name": "x"}, standard_tuning)
        assert not bad.is_ok
        assert bad.value is None
        with pytest.raises(MalformedDocumentError):
            bad.unwrap()
