"""
Grid parsing utilities for raygrid.

Provides two parsing formats:
1. Standard format with space-separated cells
2. Concise format with single-character cells
"""

from __future__ import annotations

from typing import Callable, TypeVar

from raygrid import ListGrid

__all__ = ["parse_grid", "parse_grid_concise"]

F = TypeVar("F")

EMPTY_MARKER = "_"


def _convert(
    token: str,
    field: Callable[[str], F],
    default: Callable[[], F],
    row_idx: int,
    col_idx: int,
    row_str: str,
) -> F:
    if token == EMPTY_MARKER:
        return default()
    try:
        return field(token)
    except (TypeError, ValueError) as e:
        raise ValueError(
            f"Invalid cell string: '{token}'\n"
            f"  Row {row_idx}: \"{row_str}\"\n"
            f"  Position: column {col_idx}\n"
            f"  Conversion failed: {e}\n"
            f"  Use '{EMPTY_MARKER}' for a default cell"
        ) from e


def _check_row_lengths(rows: list[list[F]], row_strings: list[str]) -> None:
    cols = len(rows[0])
    mismatched = [(i, len(row)) for i, row in enumerate(rows) if len(row) != cols]
    if mismatched:
        error_msg = (
            f"Inconsistent row lengths\n"
            f"  Expected: {cols} columns (from row 0)\n"
            f"  Mismatched rows:\n"
        )
        for row_idx, actual_cols in mismatched:
            error_msg += f"    Row {row_idx}: {actual_cols} columns - \"{row_strings[row_idx]}\"\n"
        error_msg += "  All rows must have the same number of cells"
        raise ValueError(error_msg)


def parse_grid(
    definition: str,
    field: Callable[[str], F] = int,  # type: ignore[assignment]
    default: Callable[[], F] = int,  # type: ignore[assignment]
) -> ListGrid[F]:
    """
    Parse a grid from a compact string format.

    Format:
    - Rows separated by |
    - Cells separated by whitespace
    - Each cell string is passed to `field` to build the value
    - Underscore (_) is a default cell, built with `default`

    Example:
        parse_grid("1 2 3|4 _ 6|7 8 9")
        Creates a 3x3 ListGrid [[1, 2, 3], [4, 0, 6], [7, 8, 9]]

    Args:
        definition: Grid definition string
        field: Converts one cell string to a cell value (default int)
        default: Produces the default cell value (default int, so 0)

    Returns:
        ListGrid with the parsed cells

    Raises:
        ValueError: If a cell cannot be converted or the rows differ in length
    """
    row_strings = definition.strip().split("|")
    rows: list[list[F]] = []

    for row_idx, row_str in enumerate(row_strings):
        tokens = row_str.split()
        if not tokens:
            raise ValueError(f"Empty row {row_idx} in grid definition: \"{definition}\"")
        rows.append(
            [_convert(tok, field, default, row_idx, col_idx, row_str) for col_idx, tok in enumerate(tokens)]
        )

    _check_row_lengths(rows, row_strings)
    return ListGrid(rows, field_factory=default)


def parse_grid_concise(
    definition: str,
    field: Callable[[str], F] = int,  # type: ignore[assignment]
    default: Callable[[], F] = int,  # type: ignore[assignment]
) -> ListGrid[F]:
    """
    Parse a grid where every character is one cell.

    Format:
    - Rows separated by | or newlines
    - Surrounding whitespace on each row is ignored
    - Underscore (_) is a default cell
    - Short rows are padded on the right with default cells

    Example:
        \"\"\"
        123
        4_6
        78
        \"\"\"

        Creates a 3x3 ListGrid [[1, 2, 3], [4, 0, 6], [7, 8, 0]]

    Args:
        definition: Grid definition string
        field: Converts one character to a cell value (default int)
        default: Produces the default cell value (default int, so 0)

    Returns:
        ListGrid with the parsed cells

    Raises:
        ValueError: If the definition is empty or a character cannot be converted
    """
    row_strings = [
        row.strip()
        for line in definition.strip().split("\n")
        for row in line.split("|")
        if row.strip()
    ]
    if not row_strings:
        raise ValueError("Empty grid definition")

    rows: list[list[F]] = []
    for row_idx, row_str in enumerate(row_strings):
        rows.append(
            [_convert(char, field, default, row_idx, col_idx, row_str) for col_idx, char in enumerate(row_str)]
        )

    # Pad rows to maximum length with default cells
    max_cols = max(len(row) for row in rows)
    for row in rows:
        row.extend(default() for _ in range(max_cols - len(row)))

    return ListGrid(rows, field_factory=default)
