"""Conway's Game of Life evolution engine for bordered grids.

The rule functions are pure: they read a Grid and return a new one. The
outer ring of every grid is a border that never evolves.

Neighbor lookups wrap with the interior dimensions as the modulus while
indexing with absolute coordinates, so a cell next to the border sees row 0
or column 0 across the wrap and never sees the last interior row or column.
This matches the historical behavior of the program and is kept on purpose.
"""

from typing import Dict, Optional
import numpy as np

from .errors import DegenerateGrid
from .grid import Grid

NEIGHBOR_OFFSETS = tuple(
    (di, dj) for di in (-1, 0, 1) for dj in (-1, 0, 1) if (di, dj) != (0, 0)
)


def _check_interior(grid: Grid) -> None:
    inner_height, inner_width = grid.inner_shape
    if inner_height <= 0 or inner_width <= 0:
        raise DegenerateGrid(grid.height, grid.width)


def count_neighbors(grid: Grid, row: int, col: int) -> int:
    """Count living neighbors of a cell.

    Each of the 8 surrounding positions is wrapped with the interior size:
    ``I = (row + di + inner_height) % inner_height`` and likewise for columns.

    Args:
        grid: Grid to inspect
        row: Row coordinate
        col: Column coordinate

    Returns:
        Number of living neighbors (0-8)

    Raises:
        DegenerateGrid: If the grid has fewer than 3 rows or columns
    """
    _check_interior(grid)
    inner_height, inner_width = grid.inner_shape
    cells = grid.cells

    count = 0
    for di, dj in NEIGHBOR_OFFSETS:
        i = (row + di + inner_height) % inner_height
        j = (col + dj + inner_width) % inner_width
        if cells[i, j]:
            count += 1

    return count


def count_all_neighbors(grid: Grid) -> np.ndarray:
    """Count neighbors for every interior cell at once.

    Returns:
        Integer array of shape (height, width); border entries are 0

    Raises:
        DegenerateGrid: If the grid has fewer than 3 rows or columns
    """
    _check_interior(grid)
    inner_height, inner_width = grid.inner_shape
    cells = grid.cells.astype(np.int8)

    rows = np.arange(1, grid.height - 1)
    cols = np.arange(1, grid.width - 1)

    counts = np.zeros(grid.shape, dtype=np.int8)
    interior = counts[1:-1, 1:-1]
    for di, dj in NEIGHBOR_OFFSETS:
        wrapped_rows = (rows + di + inner_height) % inner_height
        wrapped_cols = (cols + dj + inner_width) % inner_width
        interior += cells[np.ix_(wrapped_rows, wrapped_cols)]

    return counts


def evolve(grid: Grid) -> Grid:
    """Compute the next generation.

    Rules for interior cells, with n counted on the input grid:
    - Live cell with fewer than 2 neighbors dies
    - Live cell with 2 or 3 neighbors survives
    - Live cell with more than 3 neighbors dies
    - Dead cell with exactly 3 neighbors becomes alive

    Border cells are dead in the result. The input grid is not modified.
    Grids without interior cells are returned unchanged.
    """
    if not grid.has_interior:
        return grid.copy()

    neighbors = count_all_neighbors(grid)
    alive = grid.cells

    next_cells = np.zeros(grid.shape, dtype=bool)
    survive = alive & ((neighbors == 2) | (neighbors == 3))
    birth = ~alive & (neighbors == 3)
    next_cells[1:-1, 1:-1] = (survive | birth)[1:-1, 1:-1]

    return Grid(grid.height, grid.width, next_cells)


def add_cell(grid: Grid, row: int, col: int) -> Grid:
    """Make the cell at (row, col) alive.

    Out-of-range coordinates are ignored and an unchanged copy is returned.
    Border cells may be set this way.
    """
    if not grid.in_bounds(row, col):
        return grid.copy()
    return grid.with_cell(row, col, True)


class GameOfLife:
    """Simulation session that owns the current grid.

    Tracks the generation counter alongside the grid and delegates every
    transition to the pure engine functions.
    """

    def __init__(self, grid: Grid) -> None:
        """Initialize the session with a starting grid.

        Args:
            grid: The starting generation
        """
        self._grid = grid
        self._generation = 0

    @property
    def grid(self) -> Grid:
        """Current generation."""
        return self._grid

    @property
    def generation(self) -> int:
        """Current generation number."""
        return self._generation

    @property
    def population(self) -> int:
        """Current number of living cells."""
        return self._grid.population

    def step(self) -> Grid:
        """Advance the simulation by one generation."""
        self._grid = evolve(self._grid)
        self._generation += 1
        return self._grid

    def run(self, generations: int) -> Grid:
        """Advance the simulation by several generations.

        Raises:
            ValueError: If generations is negative
        """
        if generations < 0:
            raise ValueError(f"Generations must be non-negative, got {generations}")
        for _ in range(generations):
            self.step()
        return self._grid

    def add_cell(self, row: int, col: int) -> Grid:
        """Make one cell alive; out-of-range coordinates are ignored."""
        self._grid = add_cell(self._grid, row, col)
        return self._grid

    def neighbor_counts(self) -> np.ndarray:
        """Neighbor counts for the current generation."""
        return count_all_neighbors(self._grid)

    def reset(self, grid: Optional[Grid] = None) -> None:
        """Reset the generation counter.

        Args:
            grid: Optional replacement grid; defaults to an empty grid of the same size
        """
        self._grid = grid if grid is not None else Grid(self._grid.height, self._grid.width)
        self._generation = 0

    def get_statistics(self) -> Dict:
        """Get simulation statistics.

        Returns:
            Dictionary with generation, population and density figures
        """
        inner_height, inner_width = self._grid.inner_shape
        interior_cells = max(inner_height, 0) * max(inner_width, 0)

        return {
            "generation": self._generation,
            "population": self.population,
            "grid_size": self._grid.shape,
            "population_density": self.population / interior_cells if interior_cells else 0.0,
        }
