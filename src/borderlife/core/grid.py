"""Grid data structure for the bounded Game of Life."""

from typing import Iterable, List, Optional, Tuple
import math
import numpy as np

from .errors import InvalidDensity


class Grid:
    """Represents a fixed-size 2D grid of alive/dead cells.

    Cells are stored in a read-only numpy boolean array of shape
    (height, width) indexed as [row, col]. The outermost ring of rows and
    columns is the border, which the evolution rule never touches.

    A Grid is a value: every change produces a new Grid.
    """

    def __init__(self, height: int, width: int, cells: Optional[np.ndarray] = None) -> None:
        """Initialize a new grid.

        Args:
            height: Number of rows
            width: Number of columns
            cells: Optional boolean array of shape (height, width) to copy

        Raises:
            ValueError: If a dimension is below 1 or cells has the wrong shape
        """
        if height < 1 or width < 1:
            raise ValueError(f"Grid dimensions must be at least 1x1, got {height}x{width}")

        self.height = height
        self.width = width

        if cells is None:
            self._cells = np.zeros((height, width), dtype=bool)
        else:
            arr = np.array(cells, dtype=bool)
            if arr.shape != (height, width):
                raise ValueError(f"Cell array shape {arr.shape} doesn't match grid {self.shape}")
            self._cells = arr

        self._cells.flags.writeable = False

    @classmethod
    def from_cells(cls, height: int, width: int, live_cells: Iterable[Tuple[int, int]]) -> "Grid":
        """Create a grid with the given (row, col) coordinates alive.

        Coordinates outside the grid are ignored.
        """
        cells = np.zeros((height, width), dtype=bool)
        for row, col in live_cells:
            if 0 <= row < height and 0 <= col < width:
                cells[row, col] = True
        return cls(height, width, cells)

    @classmethod
    def from_list(cls, data: List[List[bool]]) -> "Grid":
        """Create a grid from a nested list of rows.

        Raises:
            ValueError: If the rows are empty or ragged
        """
        if not data or not data[0]:
            raise ValueError("Grid data must contain at least one row and one column")
        width = len(data[0])
        if any(len(row) != width for row in data):
            raise ValueError("All grid rows must have the same length")
        return cls(len(data), width, np.array(data, dtype=bool))

    @property
    def cells(self) -> np.ndarray:
        """Read-only view of the cell array."""
        return self._cells

    @property
    def shape(self) -> Tuple[int, int]:
        """Get grid dimensions as (height, width)."""
        return (self.height, self.width)

    @property
    def inner_shape(self) -> Tuple[int, int]:
        """Dimensions of the region inside the border ring."""
        return (self.height - 2, self.width - 2)

    @property
    def has_interior(self) -> bool:
        """Whether at least one non-border cell exists."""
        return self.height >= 3 and self.width >= 3

    @property
    def population(self) -> int:
        """Get the number of living cells."""
        return int(np.count_nonzero(self._cells))

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    def is_border(self, row: int, col: int) -> bool:
        """Whether (row, col) lies on the outermost ring."""
        return row in (0, self.height - 1) or col in (0, self.width - 1)

    def get_cell(self, row: int, col: int) -> bool:
        """Get the state of a cell.

        Args:
            row: Row coordinate
            col: Column coordinate

        Returns:
            True if cell is alive, False if dead

        Raises:
            IndexError: If coordinates are out of bounds
        """
        if not self.in_bounds(row, col):
            raise IndexError(f"Coordinates ({row}, {col}) out of bounds")
        return bool(self._cells[row, col])

    def with_cell(self, row: int, col: int, alive: bool) -> "Grid":
        """Return a copy of this grid with one cell set.

        Raises:
            IndexError: If coordinates are out of bounds
        """
        if not self.in_bounds(row, col):
            raise IndexError(f"Coordinates ({row}, {col}) out of bounds")
        cells = self._cells.copy()
        cells[row, col] = alive
        return Grid(self.height, self.width, cells)

    def copy(self) -> "Grid":
        return Grid(self.height, self.width, self._cells)

    def live_cells(self) -> List[Tuple[int, int]]:
        """Coordinates of living cells, sorted by row then column."""
        rows, cols = np.nonzero(self._cells)
        return [(int(r), int(c)) for r, c in zip(rows, cols)]

    def to_list(self) -> List[List[bool]]:
        """Convert grid to nested list of rows."""
        return self._cells.tolist()

    def __eq__(self, other: object) -> bool:
        """Check if two grids are equal."""
        if not isinstance(other, Grid):
            return NotImplemented
        return self.shape == other.shape and np.array_equal(self._cells, other._cells)

    def __hash__(self) -> int:
        return hash((self.shape, self._cells.tobytes()))

    def __repr__(self) -> str:
        return f"Grid(height={self.height}, width={self.width}, population={self.population})"

    def __str__(self) -> str:
        """String representation showing living cells as '*' and dead as '.'."""
        return "\n".join("".join("*" if alive else "." for alive in row) for row in self._cells)


def create_empty(height: int, width: int) -> Grid:
    """Create a grid with every cell dead, border included."""
    return Grid(height, width)


def random_seed(height: int, width: int, density: float, rng=None) -> Grid:
    """Create a grid whose interior cells are alive with probability `density`.

    Border cells are always dead. Each interior cell is decided by one draw
    from `rng.random`, alive when the draw is below `density`.

    Args:
        height: Number of rows
        width: Number of columns
        density: Chance each interior cell will be alive (0.0 to 1.0)
        rng: Object with a numpy Generator style `random(size)` method.
            A fresh entropy-seeded generator is used when omitted.

    Raises:
        InvalidDensity: If density is outside [0.0, 1.0]
        ValueError: If a dimension is below 1
    """
    if math.isnan(density) or not 0.0 <= density <= 1.0:
        raise InvalidDensity(density)

    grid = Grid(height, width)
    if not grid.has_interior:
        return grid

    if rng is None:
        rng = np.random.default_rng()

    cells = np.zeros((height, width), dtype=bool)
    draws = np.asarray(rng.random((height - 2, width - 2)))
    cells[1:-1, 1:-1] = draws < density
    return Grid(height, width, cells)
