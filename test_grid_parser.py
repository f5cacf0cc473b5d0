"""Tests for grid_parser module."""

import pytest

from grid_parser import parse_grid, parse_grid_concise
from raygrid import field_at, height, shift, width


class TestParseGrid:
    """Tests for the space-separated grid parser."""

    def test_simple_grid(self) -> None:
        """Parse a 3x3 integer grid."""
        grid = parse_grid("1 2 3|4 5 6|7 8 9")
        assert grid.get_grid_ref() == [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
        assert height(grid) == 3
        assert width(grid) == 3

    def test_multi_digit_and_extra_spaces(self) -> None:
        """Cells are split on any whitespace."""
        grid = parse_grid(" 10  200 | 3 4 ")
        assert grid.get_grid_ref() == [[10, 200], [3, 4]]

    def test_underscore_is_default(self) -> None:
        """'_' builds a default cell."""
        grid = parse_grid("1 _|_ 4")
        assert grid.get_grid_ref() == [[1, 0], [0, 4]]

    def test_custom_field_type(self) -> None:
        """The field converter and default are configurable."""
        grid = parse_grid("a b|c _", field=str, default=lambda: ".")
        assert grid.get_grid_ref() == [["a", "b"], ["c", "."]]
        assert grid.default_field() == "."

    def test_default_used_by_shift(self) -> None:
        """The parsed grid pads with the parser's default."""
        grid = parse_grid("a b", field=str, default=lambda: ".")
        shift(grid, 1, 0)
        assert grid.get_grid_ref() == [[".", "."], ["a", "b"]]

    def test_inconsistent_rows(self) -> None:
        """Rows of different lengths are rejected."""
        with pytest.raises(ValueError, match="Inconsistent row lengths") as exc_info:
            parse_grid("1 2 3|4 5")
        assert "Row 1: 2 columns" in str(exc_info.value)

    def test_invalid_cell(self) -> None:
        """A cell the converter rejects names its position."""
        with pytest.raises(ValueError, match="Invalid cell string: 'x'") as exc_info:
            parse_grid("1 2|3 x")
        assert "Row 1" in str(exc_info.value)
        assert "column 1" in str(exc_info.value)

    def test_empty_row(self) -> None:
        """An empty row is rejected."""
        with pytest.raises(ValueError, match="Empty row 1"):
            parse_grid("1 2||3 4")


class TestParseGridConcise:
    """Tests for the concise grid parser."""

    def test_pipe_separated(self) -> None:
        """Each character is a cell."""
        grid = parse_grid_concise("123|456|789")
        assert grid.get_grid_ref() == [[1, 2, 3], [4, 5, 6], [7, 8, 9]]

    def test_multi_line(self) -> None:
        """Rows can be given one per line with indentation."""
        definition = """
        12
        34
        """
        grid = parse_grid_concise(definition)
        assert grid.get_grid_ref() == [[1, 2], [3, 4]]

    def test_padding_short_rows(self) -> None:
        """Short rows are padded on the right with default cells."""
        grid = parse_grid_concise("123|4|56")
        assert grid.get_grid_ref() == [[1, 2, 3], [4, 0, 0], [5, 6, 0]]

    def test_underscore_is_default(self) -> None:
        """'_' builds a default cell."""
        grid = parse_grid_concise("1_|_4")
        assert field_at(grid, 0, 1) == 0
        assert field_at(grid, 1, 1) == 4

    def test_string_cells(self) -> None:
        """Characters can be kept as strings."""
        grid = parse_grid_concise("ab|c", field=str, default=lambda: ".")
        assert grid.get_grid_ref() == [["a", "b"], ["c", "."]]

    def test_invalid_character(self) -> None:
        """A character the converter rejects is reported."""
        with pytest.raises(ValueError, match="Invalid cell string: 'z'"):
            parse_grid_concise("12|3z")

    def test_empty_definition(self) -> None:
        """An empty definition is rejected."""
        with pytest.raises(ValueError, match="Empty grid definition"):
            parse_grid_concise("   \n  ")
