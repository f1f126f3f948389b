"""
Tests for the TableSerializer component.

Tests cover:
- Column width computation with escaped pipes
- Separator row generation for every alignment
- Alignment defaulting for short alignment lists
- Headerless tables and empty tables
- Invalid alignment values
"""

import pytest
from mdt.tables.components.table_serializer import TableSerializer, serialize_table
from mdt.tables.data_models import Alignment, Table


PEOPLE_ROWS = [
    ["id", "firstname", "lastname"],
    ["1", "john", "doe"],
    ["2", "jane", "doe"],
    ["3", "max", "mustermann"],
]


@pytest.fixture
def serializer():
    """Create serializer instance."""
    return TableSerializer()


@pytest.fixture
def three_column_table():
    """Small three-column table with a header."""
    return Table(rows=[["a", "b", "c"], ["1", "2", "3"]])


def separator_of(markdown: str) -> str:
    """Return the separator line of rendered markdown."""
    return markdown.split("\n")[1]


class TestSerializeBasics:
    """Test complete table rendering."""

    def test_empty_table(self, serializer):
        """Table without rows renders as empty string."""
        assert serializer.serialize(Table(rows=[])) == ""

    def test_people_table(self, serializer):
        """Default alignment with header."""
        expected = (
            "| id  | firstname | lastname   |\n"
            "| --- | --------- | ---------- |\n"
            "| 1   | john      | doe        |\n"
            "| 2   | jane      | doe        |\n"
            "| 3   | max       | mustermann |"
        )
        assert serializer.serialize(Table(rows=PEOPLE_ROWS)) == expected

    def test_no_header(self, serializer):
        """Headerless table has no separator row and no minimum width."""
        table = Table(rows=[["id", "firstname"], ["1", "john"]], has_header=False)
        assert serializer.serialize(table) == "| id | firstname |\n| 1  | john      |"

    def test_no_trailing_newline(self, serializer):
        """Rendered table does not end with a newline."""
        assert not serializer.serialize(Table(rows=PEOPLE_ROWS)).endswith("\n")

    def test_header_only_table_gets_separator(self, serializer):
        """A single header row is followed by its separator."""
        table = Table(rows=[["name", "x"]])
        assert serializer.serialize(table) == "| name | x   |\n| ---- | --- |"

    def test_convenience_function(self):
        """serialize_table matches the serializer."""
        table = Table(rows=PEOPLE_ROWS)
        assert serialize_table(table) == TableSerializer().serialize(table)


class TestSerializeAlignment:
    """Test separator markers for alignments."""

    @pytest.mark.parametrize("alignment,separator", [
        (Alignment.DEFAULT, "| --- | --- | --- |"),
        (Alignment.LEFT, "| :-- | :-- | :-- |"),
        (Alignment.CENTER, "| :-: | :-: | :-: |"),
        (Alignment.RIGHT, "| --: | --: | --: |"),
    ])
    def test_single_alignment_applies_to_all(self, serializer, three_column_table, alignment, separator):
        """One alignment is used for every column."""
        three_column_table.alignments = [alignment]
        assert separator_of(serializer.serialize(three_column_table)) == separator

    def test_no_alignment(self, serializer, three_column_table):
        """Empty alignment list renders defaults."""
        assert separator_of(serializer.serialize(three_column_table)) == "| --- | --- | --- |"

    def test_partial_alignments(self, serializer, three_column_table):
        """Columns without an alignment render as default."""
        three_column_table.alignments = [Alignment.LEFT, Alignment.CENTER]
        assert separator_of(serializer.serialize(three_column_table)) == "| :-- | :-: | --- |"

    def test_all_alignments(self, serializer, three_column_table):
        """Each column uses its own alignment."""
        three_column_table.alignments = [Alignment.RIGHT, Alignment.LEFT, Alignment.CENTER]
        assert separator_of(serializer.serialize(three_column_table)) == "| --: | :-- | :-: |"

    def test_markers_fill_wide_columns(self, serializer):
        """Markers stretch to the width of the column."""
        table = Table(
            rows=[["name", "value"], ["alpha", "1"]],
            alignments=[Alignment.CENTER, Alignment.RIGHT],
        )
        assert separator_of(serializer.serialize(table)) == "| :---: | ----: |"

    @pytest.mark.parametrize("bad", [4, "left", None])
    def test_invalid_alignment_raises_assertion(self, serializer, three_column_table, bad):
        """Values outside the enum are a programming error."""
        three_column_table.alignments = [bad]
        with pytest.raises(AssertionError, match="invalid table alignment"):
            serializer.serialize(three_column_table)

    def test_invalid_alignment_ignored_without_header(self, serializer, three_column_table):
        """Alignments are only rendered in the separator row."""
        three_column_table.has_header = False
        three_column_table.alignments = [4]
        assert serializer.serialize(three_column_table) == "| a | b | c |\n| 1 | 2 | 3 |"


class TestSerializeEscaping:
    """Test escaping of pipe characters."""

    def test_pipe_is_escaped(self, serializer):
        """Literal pipes are rendered as \\|."""
        table = Table(rows=[["col"], ["a|b"]])
        lines = serializer.serialize(table).split("\n")
        assert lines[2] == "| a\\|b |"

    def test_escaped_pipe_counts_toward_width(self, serializer):
        """Each pipe widens its column by one character."""
        table = Table(rows=[["h", "x"], ["a|b|c", "y"]])
        expected = (
            "| h       | x   |\n"
            "| ------- | --- |\n"
            "| a\\|b\\|c | y   |"
        )
        assert serializer.serialize(table) == expected

    def test_escape_cell(self):
        """escape_cell escapes every pipe."""
        assert TableSerializer.escape_cell("|a||") == "\\|a\\|\\|"


class TestSerializeWidths:
    """Test width computation."""

    def test_separator_widths_minimum(self, serializer):
        """Separator widths are at least three."""
        widths = serializer.compute_separator_widths([["a", "abcd"], ["", "x"]])
        assert widths == {0: 3, 1: 4}

    def test_column_widths_count_pipes(self, serializer):
        """Column widths include escape characters."""
        widths = serializer.compute_column_widths([["a|"], ["bc"]])
        assert widths == {0: 3}

    def test_ragged_rows(self, serializer):
        """Rows keep their own column count."""
        table = Table(rows=[["a", "b"], ["1"], ["2", "3", "4"]], has_header=False)
        expected = (
            "| a | b |\n"
            "| 1 |\n"
            "| 2 | 3 | 4 |"
        )
        assert serializer.serialize(table) == expected

    def test_separator_follows_header_columns(self, serializer):
        """Separator has one segment per header column."""
        table = Table(rows=[["a", "b"], ["1", "2", "3"]])
        assert separator_of(serializer.serialize(table)) == "| --- | --- |"

    def test_empty_row(self, serializer):
        """A row without cells renders as a lone pipe."""
        table = Table(rows=[["a"], []], has_header=False)
        assert serializer.serialize(table) == "| a |\n|"

    def test_alignment_marker_widths(self):
        """Markers are exactly as wide as requested."""
        for alignment in Alignment:
            assert len(TableSerializer.alignment_marker(alignment, 7)) == 7
