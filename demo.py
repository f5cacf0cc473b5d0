"""
Demonstration scripts for the raygrid system.
"""

from grid_parser import parse_grid, parse_grid_concise
from grid_types import Direction
from ascii_render import render_grid, render_rays
from raygrid import (
    ListGrid,
    cast_ray,
    diagonal_coordinates,
    field_at,
    neighbor_coordinates,
    offset_jumps,
    shift,
    straight_coordinates,
)


def queries_demo() -> None:
    """Show each query family on small grids."""
    grid = parse_grid("1 2 3|4 5 6|7 8 9")

    print("=" * 40)
    print("Diagonals from the centre (5):")
    print("=" * 40)
    rays = diagonal_coordinates(grid, 1, 1)
    for name, ray in rays._asdict().items():
        print(f"  {name}: {ray}")
    print(render_rays(grid, 1, 1, rays))
    print()

    board = ListGrid.filled(8, 8, field_factory=lambda: ".")

    print("=" * 40)
    print("Rook lines from (2, 5) on 8x8:")
    print("=" * 40)
    print(render_rays(board, 2, 5, straight_coordinates(board, 2, 5)))
    print()

    print("=" * 40)
    print("Knight jumps from (3, 3) and from the corner:")
    print("=" * 40)
    for y, x in ((3, 3), (0, 0)):
        jumps = offset_jumps(board, y, x, (2, 1))
        print(f"  ({y}, {x}): {len(jumps)} destinations")
        print(render_rays(board, y, x, [jumps]))
    print()

    print("=" * 40)
    print("Neighbours of a corner and of an edge cell:")
    print("=" * 40)
    for y, x in ((0, 0), (0, 1)):
        print(f"  ({y}, {x}): {neighbor_coordinates(grid, y, x)}")
    print()

    print("=" * 40)
    print("Single ray: walking south-east from (0, 0):")
    print("=" * 40)
    maze = parse_grid_concise(
        """
        1000
        0200
        0030
        """
    )
    ray = cast_ray(maze, 0, 0, Direction.SE)
    print(f"  {ray} -> {[field_at(maze, y, x) for y, x in ray]}")


def shift_demo() -> None:
    """Grow, then crop back."""
    grid = parse_grid("1 2 3|4 5 6|7 8 9")

    print("=" * 40)
    print("Shift by (1, 0), new row at the top:")
    print("=" * 40)
    shift(grid, 1, 0, pad_at_start=True)
    print("\n".join(render_grid(grid, title="grown")))

    print("Shift by (-1, 0), cropping it off again:")
    shift(grid, -1, 0, pad_at_start=True)
    print("\n".join(render_grid(grid, title="cropped")))


if __name__ == "__main__":
    queries_demo()
    print()
    shift_demo()
