"""
ASCII rendering for raygrid grids.

Draws a grid as a bordered character box, with query results (neighbours,
rays, jump targets) coloured in and the origin cell shown inverted.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Sequence, TypeVar

import simple_chalk as chalk  # type: ignore[import-untyped]

from grid_types import Coordinate
from raygrid import GridStorage, height, width

logger = logging.getLogger(__name__)

F = TypeVar("F")

PALETTE: list[Callable[[str], str]] = [
    chalk.red,
    chalk.green,
    chalk.yellow,
    chalk.blue,
    chalk.magenta,
    chalk.cyan,
    chalk.redBright,
    chalk.greenBright,
]


def render_grid(
    grid: GridStorage[F],
    highlight: dict[Coordinate, Callable[[str], str]] | None = None,
    origin: Coordinate | None = None,
    cell_width: int = 3,
    label: Callable[[F], str] = str,
    title: str = "",
) -> list[str]:
    """
    Render a grid as a simple character display.

    Args:
        grid: The grid to render
        highlight: Optional map of coordinate to colorizer
        origin: Optional coordinate drawn with a white background
        cell_width: Characters per cell (default 3)
        label: Turns a cell into its display text; only the first
            cell_width characters are kept
        title: Optional title centred in the top border

    Returns:
        List of strings representing the rendered grid lines
    """
    if highlight is None:
        highlight = {}

    rows = grid.get_grid_ref()
    cols = width(grid)

    border_width = 2  # left and right borders
    grid_width = cols * cell_width + border_width
    title = f" {title} " if title else ""

    lines: list[str] = []

    # Top border with title
    title_line = "┌" + "─" * (grid_width - 2) + "┐"
    if title and len(title) <= grid_width - 2:
        title_start = (grid_width - len(title)) // 2
        title_line = (
            "┌" +
            "─" * (title_start - 1) +
            title +
            "─" * (grid_width - title_start - len(title) - 1) +
            "┐"
        )
    lines.append(title_line)

    for r_idx, row in enumerate(rows):
        line_parts = ["│"]

        for c_idx, cell in enumerate(row):
            text = label(cell)[:cell_width]
            content = text if cell_width == 1 else text.center(cell_width)

            pos = (r_idx, c_idx)
            if pos == origin:
                content = chalk.bgWhite.black(content)
            elif pos in highlight:
                content = highlight[pos](content)

            line_parts.append(content)

        line_parts.append("│")
        lines.append("".join(line_parts))

    # Bottom border
    lines.append("└" + "─" * (grid_width - 2) + "┘")

    return lines


def render_rays(
    grid: GridStorage[F],
    y: int,
    x: int,
    rays: Iterable[Sequence[Coordinate]],
    cell_width: int = 3,
    label: Callable[[F], str] = str,
    title: str = "",
) -> str:
    """
    Render a grid with each ray in its own colour.

    Args:
        grid: The grid to render
        y: Origin row
        x: Origin column
        rays: Coordinate sequences, e.g. a DiagonalRays or a single
            neighbour list wrapped in a list

    Returns:
        The rendered grid as one string
    """
    highlight: dict[Coordinate, Callable[[str], str]] = {}
    for i, ray in enumerate(rays):
        colorize = PALETTE[i % len(PALETTE)]
        for pos in ray:
            highlight.setdefault(pos, colorize)

    logger.debug(
        "Rendering %dx%d grid with %d highlighted cells",
        height(grid), width(grid), len(highlight),
    )
    return "\n".join(render_grid(grid, highlight, (y, x), cell_width, label, title))
