"""
Rectangular grid abstraction with bounds-safe access and geometric queries.

Any type providing the GridStorage primitives gets neighbour, ray, offset-jump
and shift operations from the free functions in this module.
"""

from __future__ import annotations

import copy
import logging
from typing import Callable, Generic, Iterable, Protocol, Sequence, TypeVar

from grid_types import (
    DIAGONAL_DIRECTIONS,
    STRAIGHT_DIRECTIONS,
    ColumnPadding,
    Coordinate,
    DiagonalRays,
    Direction,
    EmptyGridError,
    GridConsistencyError,
    ShiftRules,
    StraightRays,
)

logger = logging.getLogger(__name__)

F = TypeVar("F")


# =============================================================================
# Storage
# =============================================================================


class GridStorage(Protocol[F]):
    """The storage primitives a host type must expose.

    Rows are ordered top to bottom, cells within a row left to right:

        [
            [Field, Field, Field],
            [Field, Field, Field],
        ]

    grid[y][x] is row y, column x; (0, 0) is the upper-left cell.
    """

    def get_grid(self) -> list[list[F]]:
        """Return an independent copy of every row."""
        ...

    def get_grid_ref(self) -> Sequence[Sequence[F]]:
        """Return the rows for reading. Callers must not mutate them."""
        ...

    def get_grid_mut(self) -> list[list[F]]:
        """Return the live rows for in-place writes."""
        ...

    def set_grid(self, grid: list[list[F]]) -> None:
        """Replace the whole grid."""
        ...

    def default_field(self) -> F:
        """Return a fresh default cell value."""
        ...


def _check_rows(rows: Sequence[Sequence[object]]) -> None:
    if not rows:
        raise ValueError("Grid must have at least one row")

    cols = len(rows[0])
    mismatched = [(i, len(row)) for i, row in enumerate(rows) if len(row) != cols]
    if mismatched:
        error_msg = (
            f"Inconsistent row lengths\n"
            f"  Expected: {cols} columns (from row 0)\n"
            f"  Mismatched rows:\n"
        )
        for row_idx, actual_cols in mismatched:
            error_msg += f"    Row {row_idx}: {actual_cols} columns\n"
        error_msg += "  All rows must have the same number of cells"
        raise ValueError(error_msg)


class ListGrid(Generic[F]):
    """A grid stored as a list of row lists.

    Args:
        rows: Initial content, one iterable per row. Must be non-empty and
            rectangular.
        field_factory: Zero-argument callable producing the default cell
            (defaults to int, so 0).
    """

    def __init__(self, rows: Iterable[Iterable[F]], field_factory: Callable[[], F] = int) -> None:  # type: ignore[assignment]
        materialized = [list(row) for row in rows]
        _check_rows(materialized)
        self._rows = materialized
        self.field_factory = field_factory
        logger.debug("ListGrid created: %dx%d", len(materialized), len(materialized[0]))

    @classmethod
    def filled(cls, rows: int, cols: int, field_factory: Callable[[], F] = int) -> ListGrid[F]:  # type: ignore[assignment]
        """Create a rows x cols grid of default cells."""
        return cls(
            [[field_factory() for _ in range(cols)] for _ in range(rows)],
            field_factory=field_factory,
        )

    def get_grid(self) -> list[list[F]]:
        return copy.deepcopy(self._rows)

    def get_grid_ref(self) -> Sequence[Sequence[F]]:
        return self._rows

    def get_grid_mut(self) -> list[list[F]]:
        return self._rows

    def set_grid(self, grid: list[list[F]]) -> None:
        _check_rows(grid)
        self._rows = grid

    def default_field(self) -> F:
        return self.field_factory()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ListGrid):
            return NotImplemented
        return self._rows == other._rows

    def __repr__(self) -> str:
        return f"ListGrid({self._rows!r})"


# =============================================================================
# Access
# =============================================================================


def _has_cell(rows: Sequence[Sequence[object]], y: int, x: int) -> bool:
    return 0 <= y < len(rows) and 0 <= x < len(rows[y])


def width(grid: GridStorage[F]) -> int:
    """Number of columns, taken from row 0.

    Raises:
        EmptyGridError: If the grid has no rows
    """
    rows = grid.get_grid_ref()
    if not rows:
        raise EmptyGridError(
            "Grid has no rows\n"
            "  Width is read from row 0, so at least one row is required"
        )
    return len(rows[0])


def height(grid: GridStorage[F]) -> int:
    """Number of rows."""
    return len(grid.get_grid_ref())


def in_bounds(grid: GridStorage[F], y: int, x: int) -> bool:
    """True iff (y, x) names a cell. Negative coordinates are never in bounds."""
    return 0 <= x < width(grid) and 0 <= y < height(grid)


def field_at(grid: GridStorage[F], y: int, x: int) -> F | None:
    """Return the cell at (y, x), or None if there is no such cell."""
    rows = grid.get_grid_ref()
    if not _has_cell(rows, y, x):
        return None
    return rows[y][x]


def field_mut(grid: GridStorage[F], y: int, x: int) -> F | None:
    """Return the stored cell object at (y, x) from the live rows, or None.

    Mutating the returned object mutates the grid. For immutable field types
    use set_field instead.
    """
    rows = grid.get_grid_mut()
    if not _has_cell(rows, y, x):
        return None
    return rows[y][x]


def field_copy(grid: GridStorage[F], y: int, x: int) -> F | None:
    """Return an independent deep copy of the cell at (y, x), or None."""
    rows = grid.get_grid_ref()
    if not _has_cell(rows, y, x):
        return None
    return copy.deepcopy(rows[y][x])


def set_field(grid: GridStorage[F], y: int, x: int, field: F) -> None:
    """Overwrite the cell at (y, x).

    Raises:
        IndexError: If (y, x) is outside the grid
    """
    rows = grid.get_grid_mut()
    if not _has_cell(rows, y, x):
        raise IndexError(
            f"Cannot set field at ({y}, {x})\n"
            f"  Grid is {len(rows)} rows x {len(rows[0]) if rows else 0} columns"
        )
    rows[y][x] = field


def _resolve(grid: GridStorage[F], coords: Iterable[Coordinate]) -> list[F]:
    """Map coordinates to their cells, dropping any that do not resolve."""
    rows = grid.get_grid_ref()
    fields: list[F] = []
    for y, x in coords:
        if _has_cell(rows, y, x):
            fields.append(rows[y][x])
        else:
            logger.warning("Dropping unresolvable coordinate (%d, %d)", y, x)
    return fields


# =============================================================================
# Neighbourhood
# =============================================================================


def neighbor_coordinates(grid: GridStorage[F], y: int, x: int) -> list[Coordinate]:
    """
    Coordinates of the Moore neighbourhood of (y, x), clipped to the grid.

    The 3x3 block is swept column by column (column offset outer, row offset
    inner), so for an interior cell the order is:
    (y-1, x-1), (y, x-1), (y+1, x-1), (y-1, x), (y+1, x), (y-1, x+1), ...

    Returns:
        Up to 8 coordinates
    """
    neighbors: list[Coordinate] = []

    for dx in (-1, 0, 1):
        for dy in (-1, 0, 1):
            if dx == 0 and dy == 0:
                continue

            ny = y + dy
            nx = x + dx

            if ny < 0 or nx < 0:
                continue

            if in_bounds(grid, ny, nx):
                neighbors.append((ny, nx))

    return neighbors


def neighbor_fields(grid: GridStorage[F], y: int, x: int) -> list[F]:
    """Cells of the Moore neighbourhood, in neighbor_coordinates order."""
    return _resolve(grid, neighbor_coordinates(grid, y, x))


# =============================================================================
# Rays
# =============================================================================


def cast_ray(grid: GridStorage[F], y: int, x: int, direction: Direction) -> list[Coordinate]:
    """
    Walk from (y, x) in a direction until the edge of the grid.

    The origin is never included; the first element is the adjacent cell and
    the last is on the grid boundary. A grid with zero width or height yields
    an empty ray.

    Args:
        grid: The grid to cast through
        y: Origin row
        x: Origin column
        direction: Which way to walk

    Returns:
        Coordinates in walking order, nearest first

    Raises:
        IndexError: If the grid has cells but (y, x) is not one of them
    """
    rows = height(grid)
    cols = width(grid)
    if rows == 0 or cols == 0:
        return []
    if not in_bounds(grid, y, x):
        raise IndexError(
            f"Ray origin ({y}, {x}) is outside the grid\n"
            f"  Grid is {rows} rows x {cols} columns"
        )

    dy, dx = direction.delta
    ray: list[Coordinate] = []

    next_y = y + dy
    next_x = x + dx
    while 0 <= next_y < rows and 0 <= next_x < cols:
        ray.append((next_y, next_x))
        next_y += dy
        next_x += dx

    return ray


def diagonal_coordinates(grid: GridStorage[F], y: int, x: int) -> DiagonalRays:
    """
    Find the diagonals branching from a cell, e.g. for a chess bishop.

    Returns:
        DiagonalRays of upper-left, upper-right, lower-left and lower-right
        rays, each ordered outward from the origin
    """
    return DiagonalRays(*(cast_ray(grid, y, x, d) for d in DIAGONAL_DIRECTIONS))


def diagonal_fields(grid: GridStorage[F], y: int, x: int) -> list[list[F]]:
    """Cells along each diagonal, in DiagonalRays order."""
    return [_resolve(grid, ray) for ray in diagonal_coordinates(grid, y, x)]


def straight_coordinates(grid: GridStorage[F], y: int, x: int) -> StraightRays:
    """
    Find the orthogonal lines branching from a cell, e.g. for a chess rook.

    Returns:
        StraightRays of up, down, left and right rays, each ordered outward
        from the origin
    """
    return StraightRays(*(cast_ray(grid, y, x, d) for d in STRAIGHT_DIRECTIONS))


def straight_fields(grid: GridStorage[F], y: int, x: int) -> list[list[F]]:
    """Cells along each straight ray, in StraightRays order."""
    return [_resolve(grid, ray) for ray in straight_coordinates(grid, y, x)]


# =============================================================================
# Offset Jumps
# =============================================================================


def offset_jumps(grid: GridStorage[F], y: int, x: int, offset: tuple[int, int]) -> list[Coordinate]:
    """
    Coordinates reachable by a knight-like jump.

    With offset (a, b), a is first applied to the column and b to the row,
    then the two are swapped, each in all four sign combinations. (2, 1) and
    (1, 2) both give the chess knight's moves. When a == b the same
    coordinate can appear more than once.

    Args:
        grid: The grid to jump within
        y: Origin row
        x: Origin column
        offset: Pair of non-negative magnitudes

    Returns:
        In-bounds destinations in enumeration order

    Raises:
        ValueError: If either magnitude is negative
    """
    a, b = offset
    if a < 0 or b < 0:
        raise ValueError(f"Offset magnitudes must be non-negative, got {offset}")

    candidates = [
        (y + b, x + a),
        (y + b, x - a),
        (y - b, x + a),
        (y - b, x - a),
        # Swapped axes
        (y + a, x + b),
        (y + a, x - b),
        (y - a, x + b),
        (y - a, x - b),
    ]
    return [(cy, cx) for cy, cx in candidates if in_bounds(grid, cy, cx)]


def offset_jump_fields(grid: GridStorage[F], y: int, x: int, offset: tuple[int, int]) -> list[F]:
    """Cells at each offset_jumps destination."""
    return _resolve(grid, offset_jumps(grid, y, x, offset))


# =============================================================================
# Shift
# =============================================================================


def _source_cell(rows: Sequence[Sequence[F]], y: int, x: int) -> F:
    if not _has_cell(rows, y, x):
        raise GridConsistencyError(y, x)
    return copy.deepcopy(rows[y][x])


def shift_grow(
    grid: GridStorage[F],
    dy: int,
    dx: int,
    pad_at_start: bool = True,
    rules: ShiftRules = ShiftRules(),
) -> None:
    """
    Grow the grid by dy rows and dx columns of default cells.

    New rows go before the existing rows when pad_at_start is true and after
    them otherwise. With the default ColumnPadding.LEADING rule new columns
    are always put before each row's content; ColumnPadding.FOLLOW_ROWS puts
    them on the same side as the rows.

    The new grid is fully built before it replaces the old one.

    Raises:
        ValueError: If dy or dx is negative
        GridConsistencyError: If a source cell is missing (ragged grid)
    """
    if dy < 0 or dx < 0:
        raise ValueError(f"Growth amounts must be non-negative, got dy={dy}, dx={dx}")

    rows = grid.get_grid_ref()
    old_height = height(grid)
    old_width = width(grid)
    new_width = old_width + dx
    columns_first = rules.column_padding is ColumnPadding.LEADING or pad_at_start

    logger.debug(
        "Growing %dx%d grid by %d rows, %d columns (pad_at_start=%s, columns_first=%s)",
        old_height, old_width, dy, dx, pad_at_start, columns_first,
    )

    def padding_rows() -> list[list[F]]:
        return [[grid.default_field() for _ in range(new_width)] for _ in range(dy)]

    new_grid: list[list[F]] = []
    if pad_at_start:
        new_grid.extend(padding_rows())

    for i in range(old_height):
        padding = [grid.default_field() for _ in range(dx)]
        content = [_source_cell(rows, i, j) for j in range(old_width)]
        new_grid.append(padding + content if columns_first else content + padding)

    if not pad_at_start:
        new_grid.extend(padding_rows())

    grid.set_grid(new_grid)
    logger.info("Grid replaced: %dx%d -> %dx%d", old_height, old_width, len(new_grid), new_width)


def shift_shrink(grid: GridStorage[F], dy: int, dx: int, pad_at_start: bool = True) -> None:
    """
    Crop dy rows and dx columns off the grid.

    With pad_at_start the first dy rows and dx columns are dropped, otherwise
    the last ones. The result must keep at least one row.

    Raises:
        ValueError: If dy or dx is negative, dy >= height or dx > width
        GridConsistencyError: If a source cell is missing (ragged grid)
    """
    if dy < 0 or dx < 0:
        raise ValueError(f"Crop amounts must be non-negative, got dy={dy}, dx={dx}")

    rows = grid.get_grid_ref()
    old_height = height(grid)
    old_width = width(grid)
    if dy >= old_height or dx > old_width:
        raise ValueError(
            f"Cannot crop {dy} rows and {dx} columns from a {old_height}x{old_width} grid\n"
            f"  At most {old_height - 1} rows and {old_width} columns can be removed"
        )

    if pad_at_start:
        row_range = range(dy, old_height)
        col_range = range(dx, old_width)
    else:
        row_range = range(0, old_height - dy)
        col_range = range(0, old_width - dx)

    logger.debug(
        "Cropping %dx%d grid by %d rows, %d columns (pad_at_start=%s)",
        old_height, old_width, dy, dx, pad_at_start,
    )

    new_grid = [[_source_cell(rows, i, j) for j in col_range] for i in row_range]

    grid.set_grid(new_grid)
    logger.info("Grid replaced: %dx%d -> %dx%d", old_height, old_width, len(row_range), len(col_range))


def shift(
    grid: GridStorage[F],
    dy: int,
    dx: int,
    pad_at_start: bool = True,
    rules: ShiftRules = ShiftRules(),
) -> None:
    """
    Translate the grid's content by (dy, dx).

    Non-negative deltas grow the grid (shift_grow); negative deltas crop it
    by their magnitudes (shift_shrink). Both deltas must point the same way:
    growing one axis while cropping the other takes two calls.

    Example:
        [[1, 2, 3],          [[0, 0, 0],
         [4, 5, 6],   (1, 0)  [1, 2, 3],
         [7, 8, 9]]   ---->   [4, 5, 6],
                              [7, 8, 9]]

    Raises:
        ValueError: For mixed-sign deltas or a crop larger than the grid
        GridConsistencyError: If a source cell is missing (ragged grid)
    """
    if (dy < 0 < dx) or (dx < 0 < dy):
        raise ValueError(
            f"Mixed-sign shift ({dy}, {dx}) is not supported\n"
            f"  Split it into shift({dy}, 0) and shift(0, {dx})"
        )

    if dy < 0 or dx < 0:
        shift_shrink(grid, abs(dy), abs(dx), pad_at_start)
    else:
        shift_grow(grid, dy, dx, pad_at_start, rules)
