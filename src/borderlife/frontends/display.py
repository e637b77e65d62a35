"""Text rendering of bordered grids."""

from typing import Callable, List

from ..core.game import GameOfLife, count_all_neighbors
from ..core.grid import Grid


def render_horizontal_border(width: int) -> str:
    """Frame line sized to the grid width, e.g. ``+ - - - +``."""
    return "+ " + "- " * max(width - 2, 0) + "+"


def _render_framed(grid: Grid, cell_text: Callable[[int, int], str]) -> str:
    lines: List[str] = [render_horizontal_border(grid.width)]
    for row in range(1, grid.height - 1):
        cells = "".join(cell_text(row, col) for col in range(1, grid.width - 1))
        lines.append("| " + cells + "|")
    lines.append(render_horizontal_border(grid.width))
    return "\n".join(lines)


def render_grid(grid: Grid, marker: str = "o") -> str:
    """Render the interior of a grid inside a ``+``/``-``/``|`` frame.

    Live cells show as ``marker``, dead cells as blank.
    """
    cells = grid.cells
    return _render_framed(grid, lambda r, c: marker + " " if cells[r, c] else "  ")


def render_neighbor_counts(grid: Grid) -> str:
    """Render each interior cell as its live-neighbor count."""
    if not grid.has_interior:
        return _render_framed(grid, lambda r, c: "")

    counts = count_all_neighbors(grid)
    return _render_framed(grid, lambda r, c: f"{counts[r, c]} ")


def render_status(game: GameOfLife) -> str:
    return f"Generation: {game.generation}  Live cells: {game.population}"
