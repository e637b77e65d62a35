"""Batch grid for stepping many independent bordered simulations with 3D tensors."""

from typing import List, Optional, Sequence, Tuple
import math
import torch

from .errors import DegenerateGrid, InvalidDensity
from .grid import Grid
from .game import NEIGHBOR_OFFSETS


class BatchGrid:
    """Represents multiple same-sized grids stored in one 3D tensor.

    Each grid in the batch is an independent simulation; stepping the batch
    gives the same result as calling ``evolve`` on every grid separately.
    Border cells never evolve and neighbor lookups wrap with the interior
    dimensions, exactly as in the single-grid engine.
    """

    def __init__(self, batch_size: int, height: int, width: int, device: str = "cpu") -> None:
        """Initialize a batch of empty grids.

        Args:
            batch_size: Number of parallel grids
            height: Number of rows in each grid
            width: Number of columns in each grid
            device: Device to place tensors on ('cpu' or 'cuda')

        Raises:
            ValueError: If any size is below 1
        """
        if batch_size < 1:
            raise ValueError(f"Batch size must be positive, got {batch_size}")
        if height < 1 or width < 1:
            raise ValueError(f"Grid dimensions must be at least 1x1, got {height}x{width}")

        self.batch_size = batch_size
        self.height = height
        self.width = width
        self.device = torch.device(device)

        # Shape: (batch_size, height, width)
        self._cells = torch.zeros(batch_size, height, width, dtype=torch.uint8, device=self.device)

    @classmethod
    def from_grids(cls, grids: Sequence[Grid], device: str = "cpu") -> "BatchGrid":
        """Create a batch holding copies of the given grids.

        Raises:
            ValueError: If grids is empty or the grids differ in size
        """
        if not grids:
            raise ValueError("At least one grid is required")

        height, width = grids[0].shape
        for grid in grids:
            if grid.shape != (height, width):
                raise ValueError(f"Grid dimensions don't match: {grid.shape} vs {(height, width)}")

        batch = cls(len(grids), height, width, device)
        for i, grid in enumerate(grids):
            batch.copy_from_single(i, torch.from_numpy(grid.cells.astype("uint8")))
        return batch

    @property
    def cells(self) -> torch.Tensor:
        """Get the current cell tensor."""
        return self._cells

    @property
    def shape(self) -> Tuple[int, int, int]:
        """Get batch dimensions as (batch_size, height, width)."""
        return (self.batch_size, self.height, self.width)

    @property
    def populations(self) -> torch.Tensor:
        """Number of living cells in each grid, shape (batch_size,)."""
        return self._cells.sum(dim=(1, 2))

    def clear(self) -> None:
        """Clear all cells in all grids."""
        self._cells.zero_()

    def randomize(self, density: float = 0.1, seeds: Optional[torch.Tensor] = None) -> None:
        """Randomly populate the interior of every grid.

        Args:
            density: Chance each interior cell will be alive (0.0 to 1.0)
            seeds: Optional tensor of random seeds, one per grid

        Raises:
            InvalidDensity: If density is outside [0.0, 1.0]
        """
        if math.isnan(density) or not 0.0 <= density <= 1.0:
            raise InvalidDensity(density)

        self._cells.zero_()
        if self.height < 3 or self.width < 3:
            return

        inner = (self.height - 2, self.width - 2)
        if seeds is not None:
            random_values = torch.empty(self.batch_size, *inner, device=self.device)
            for i in range(self.batch_size):
                gen = torch.Generator(device=self.device)
                gen.manual_seed(int(seeds[i]))
                random_values[i] = torch.rand(*inner, generator=gen, device=self.device)
        else:
            random_values = torch.rand(self.batch_size, *inner, device=self.device)

        self._cells[:, 1:-1, 1:-1] = (random_values < density).to(torch.uint8)

    def copy_from_single(self, grid_idx: int, source_cells: torch.Tensor) -> None:
        """Copy a 2D (height, width) tensor into one of the batch grids."""
        self._cells[grid_idx] = source_cells.to(device=self.device, dtype=torch.uint8)

    def extract_single(self, grid_idx: int) -> Grid:
        """Extract one grid from the batch as a Grid value."""
        cells = self._cells[grid_idx].cpu().numpy().astype(bool)
        return Grid(self.height, self.width, cells)

    def to_grids(self) -> List[Grid]:
        return [self.extract_single(i) for i in range(self.batch_size)]

    def _wrapped_indices(self, size: int, offset: int) -> torch.Tensor:
        inner = size - 2
        positions = torch.arange(1, size - 1, device=self.device)
        return (positions + offset + inner) % inner

    def count_all_neighbors(self) -> torch.Tensor:
        """Count neighbors for every interior cell of every grid.

        Returns:
            Tensor of shape (batch_size, height, width); border entries are 0

        Raises:
            DegenerateGrid: If the grids have fewer than 3 rows or columns
        """
        if self.height < 3 or self.width < 3:
            raise DegenerateGrid(self.height, self.width)

        counts = torch.zeros(self.shape, dtype=torch.uint8, device=self.device)
        interior = counts[:, 1:-1, 1:-1]
        for di, dj in NEIGHBOR_OFFSETS:
            rows = self._wrapped_indices(self.height, di)
            cols = self._wrapped_indices(self.width, dj)
            interior += self._cells.index_select(1, rows).index_select(2, cols)

        return counts

    def step(self) -> None:
        """Advance every grid by one generation."""
        if self.height < 3 or self.width < 3:
            return

        neighbors = self.count_all_neighbors()
        alive = self._cells.bool()

        survive = alive & ((neighbors == 2) | (neighbors == 3))
        birth = ~alive & (neighbors == 3)

        next_cells = torch.zeros_like(self._cells)
        next_cells[:, 1:-1, 1:-1] = (survive | birth)[:, 1:-1, 1:-1].to(torch.uint8)
        self._cells = next_cells
