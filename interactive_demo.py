"""
Interactive demo for raygrid queries.
Move a cursor over a grid and watch neighbour, ray and jump queries update.
"""

import copy
import logging
import sys
from typing import Callable

import readchar
from rich.console import Console
from rich.live import Live
from rich.panel import Panel
from rich.text import Text

from ascii_render import render_rays
from grid_parser import parse_grid_concise
from grid_types import Coordinate, GridError
from raygrid import (
    ListGrid,
    diagonal_coordinates,
    height,
    in_bounds,
    neighbor_coordinates,
    offset_jumps,
    shift,
    straight_coordinates,
    width,
)

Query = Callable[[ListGrid[int], int, int], list[list[Coordinate]]]

QUERIES: dict[str, tuple[str, Query]] = {
    "1": ("Neighbours", lambda g, y, x: [neighbor_coordinates(g, y, x)]),
    "2": ("Diagonals", lambda g, y, x: list(diagonal_coordinates(g, y, x))),
    "3": ("Straights", lambda g, y, x: list(straight_coordinates(g, y, x))),
    "4": ("Knight jumps", lambda g, y, x: [offset_jumps(g, y, x, (2, 1))]),
}

# Cursor moves (WASD) and grid shifts (IJKL) as (dy, dx)
MOVES = {"w": (-1, 0), "s": (1, 0), "a": (0, -1), "d": (0, 1)}
SHIFTS = {"i": (1, 0), "k": (-1, 0), "j": (0, 1), "l": (0, -1)}


class InteractiveDemo:
    """Interactive demo for grid queries."""

    def __init__(self, grid: ListGrid[int]) -> None:
        self.grid = grid
        self.original_grid = copy.deepcopy(grid)  # Keep a copy of the original state
        self.cursor: Coordinate = (0, 0)
        self.query_key = "1"
        self.console = Console()
        self.status_message = "Ready"

    def generate_display(self) -> Panel:
        """Generate the current display with grid and status."""
        y, x = self.cursor
        name, query = QUERIES[self.query_key]
        rays = query(self.grid, y, x)
        grid_text = render_rays(self.grid, y, x, rays, title=f"{height(self.grid)}x{width(self.grid)}")

        status = Text()
        status.append("Cursor: ", style="bold")
        status.append(f"({y}, {x})\n")
        status.append("Query: ", style="bold")
        status.append(f"{name} - {sum(len(r) for r in rays)} cells\n\n")

        # Convert ANSI-colored grid text to Rich Text properly
        status.append(Text.from_ansi(grid_text))
        status.append("\n\n")
        status.append("Keys:\n", style="bold cyan")
        status.append("  W/A/S/D - Move cursor\n")
        status.append("  1-4     - Neighbours, Diagonals, Straights, Knight jumps\n")
        status.append("  I/K     - Grow/crop a row at the top\n")
        status.append("  J/L     - Grow/crop a column at the left\n")
        status.append("  R       - Reset to original grid\n")
        status.append("  Q       - Quit\n\n")

        # Status line at the bottom
        status.append("─" * 40 + "\n", style="dim")
        status.append("Status: ", style="bold")
        status.append(self.status_message)

        return Panel(status, title="raygrid Interactive Query Demo", border_style="green", width=80)

    def move_cursor(self, dy: int, dx: int) -> None:
        """Move the cursor, staying inside the grid."""
        y, x = self.cursor[0] + dy, self.cursor[1] + dx
        if in_bounds(self.grid, y, x):
            self.cursor = (y, x)
            self.status_message = f"Moved to ({y}, {x})"
        else:
            self.status_message = f"✗ ({y}, {x}) is outside the grid"

    def attempt_shift(self, dy: int, dx: int) -> None:
        """Shift the grid, keeping the cursor on the same content where possible."""
        try:
            shift(self.grid, dy, dx, pad_at_start=True)
        except (ValueError, GridError) as e:
            self.status_message = f"✗ Shift ({dy}, {dx}) failed: {e.args[0].splitlines()[0]}"
            return

        y = min(max(self.cursor[0] + dy, 0), height(self.grid) - 1)
        x = min(max(self.cursor[1] + dx, 0), max(width(self.grid) - 1, 0))
        self.cursor = (y, x)
        self.status_message = f"✓ Shifted by ({dy}, {dx})"

    def reset_grid(self) -> None:
        """Reset the grid to its original state."""
        self.grid = copy.deepcopy(self.original_grid)
        self.cursor = (0, 0)
        self.status_message = "Grid reset to original state"

    def run(self) -> None:
        """Run the interactive demo."""
        with Live(self.generate_display(), console=self.console, refresh_per_second=4) as live:
            try:
                while True:
                    live.update(self.generate_display())

                    key = readchar.readkey().lower()

                    if key == "q":
                        self.status_message = "Quitting..."
                        live.update(self.generate_display())
                        break
                    elif key == "r":
                        self.reset_grid()
                    elif key in QUERIES:
                        self.query_key = key
                        self.status_message = f"Query: {QUERIES[key][0]}"
                    elif key in MOVES:
                        self.move_cursor(*MOVES[key])
                    elif key in SHIFTS:
                        self.attempt_shift(*SHIFTS[key])
                    else:
                        self.status_message = f"Unknown key: {repr(key)}"

            except KeyboardInterrupt:
                self.status_message = "Interrupted by user"
                live.update(self.generate_display())


LAYOUTS = dict(
    board="""
        10000000
        00000000
        00200000
        00000000
        00003000
        00000000
        00000000
        00000009
    """,
    small="123|456|789",
)


if __name__ == "__main__":
    if len(sys.argv) > 1 and sys.argv[1] == "sublime":
        # Running from IDE - just render the initial state
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s: %(message)s")

        grid = parse_grid_concise(LAYOUTS["board"])
        print(render_rays(grid, 3, 3, diagonal_coordinates(grid, 3, 3)))
    else:
        grid = parse_grid_concise(LAYOUTS[sys.argv[1] if len(sys.argv) > 1 else "board"])
        InteractiveDemo(grid).run()
