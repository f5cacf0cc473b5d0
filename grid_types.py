"""
Shared type definitions for the raygrid system.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple

Coordinate = tuple[int, int]
"""A (y, x) pair: row first, zero-based, (0, 0) is the upper-left cell."""


class Direction(Enum):
    """Compass direction for ray casting."""

    N = "N"  # Up (decreasing row)
    S = "S"  # Down (increasing row)
    E = "E"  # Right (increasing col)
    W = "W"  # Left (decreasing col)
    NE = "NE"
    NW = "NW"
    SE = "SE"
    SW = "SW"

    @property
    def delta(self) -> tuple[int, int]:
        """Step as (row_delta, col_delta)."""
        return _DELTAS[self]

    @property
    def is_diagonal(self) -> bool:
        dy, dx = self.delta
        return dy != 0 and dx != 0


_DELTAS: dict[Direction, tuple[int, int]] = {
    Direction.N: (-1, 0),
    Direction.S: (1, 0),
    Direction.E: (0, 1),
    Direction.W: (0, -1),
    Direction.NE: (-1, 1),
    Direction.NW: (-1, -1),
    Direction.SE: (1, 1),
    Direction.SW: (1, -1),
}


# =============================================================================
# Ray Families
# =============================================================================


class DiagonalRays(NamedTuple):
    """The four diagonal rays leaving a cell, nearest cell first."""

    upper_left: list[Coordinate]
    upper_right: list[Coordinate]
    lower_left: list[Coordinate]
    lower_right: list[Coordinate]


class StraightRays(NamedTuple):
    """The four orthogonal rays leaving a cell, nearest cell first."""

    up: list[Coordinate]
    down: list[Coordinate]
    left: list[Coordinate]
    right: list[Coordinate]


DIAGONAL_DIRECTIONS = (Direction.NW, Direction.NE, Direction.SW, Direction.SE)
STRAIGHT_DIRECTIONS = (Direction.N, Direction.S, Direction.W, Direction.E)


# =============================================================================
# Shift Configuration
# =============================================================================


class ColumnPadding(Enum):
    """Where new columns go when a shift grows the grid."""

    LEADING = "leading"  # Always before existing content, whatever pad_at_start says
    FOLLOW_ROWS = "follow_rows"  # Same side as the new rows


@dataclass(frozen=True)
class ShiftRules:
    """Rules governing shift behavior."""

    column_padding: ColumnPadding = ColumnPadding.LEADING


# =============================================================================
# Errors
# =============================================================================


class GridError(Exception):
    """Base class for grid failures."""


class EmptyGridError(GridError, ValueError):
    """A dimension was requested from a grid with no rows."""


class GridConsistencyError(GridError, LookupError):
    """A cell that the grid's dimensions promise could not be read.

    Raised by shift when the rows are ragged or the storage is corrupted.
    The grid instance should not be used further.
    """

    def __init__(self, y: int, x: int) -> None:
        super().__init__(f"Field not found at index {y}-{x}")
        self.y = y
        self.x = x
