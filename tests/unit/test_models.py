"""Tests for cell and orientation models."""

import pytest

from page_table.models import Cell, ColumnWidth, HeaderOrientation, to_cell_text


class TestToCellText:
    """Tests for canonical cell text conversion."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (True, "true"),
            (False, "false"),
            (42, "42"),
            (-7, "-7"),
            (0, "0"),
            (1.5, "1.500000"),
            (-0.25, "-0.250000"),
            ("x", "x"),
            ("hello world", "hello world"),
            ("", ""),
            (None, ""),
        ],
    )
    def test_canonical_forms(self, value, expected) -> None:
        """Each supported scalar kind converts to its canonical text."""
        assert to_cell_text(value) == expected

    def test_bool_is_not_treated_as_int(self) -> None:
        """Booleans render as words even though bool subclasses int."""
        assert to_cell_text(True) != "1"

    def test_unsupported_type_raises(self) -> None:
        """Containers and arbitrary objects are rejected."""
        with pytest.raises(TypeError, match="Unsupported cell value type: list"):
            to_cell_text([1, 2])  # type: ignore[arg-type]


class TestCell:
    """Tests for Cell."""

    def test_defaults_to_empty_text(self) -> None:
        """A new cell holds empty text, never None."""
        assert Cell().text == ""

    def test_assign_converts_once_and_returns_length(self) -> None:
        """Assignment stores the converted text and reports its length."""
        cell = Cell()
        assert cell.assign(False) == 5
        assert cell.text == "false"


class TestColumnWidth:
    """Tests for ColumnWidth."""

    def test_defaults(self) -> None:
        """New entries are unpinned with zero width."""
        entry = ColumnWidth()
        assert entry.width == 0
        assert entry.pinned is False


class TestHeaderOrientation:
    """Tests for HeaderOrientation.parse."""

    def test_parse_name_case_insensitive(self) -> None:
        """Names parse regardless of case and surrounding spaces."""
        assert HeaderOrientation.parse(" Row ") is HeaderOrientation.ROW
        assert HeaderOrientation.parse("COLUMN") is HeaderOrientation.COLUMN

    def test_parse_passes_members_through(self) -> None:
        """Enum members are returned unchanged."""
        assert HeaderOrientation.parse(HeaderOrientation.NONE) is HeaderOrientation.NONE

    def test_parse_unknown_raises(self) -> None:
        """Unknown names list the valid choices."""
        with pytest.raises(ValueError, match="column, row, none"):
            HeaderOrientation.parse("diagonal")
