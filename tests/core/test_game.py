"""Tests for the evolution engine and the GameOfLife session."""

import numpy as np
import pytest

from borderlife.core.errors import DegenerateGrid
from borderlife.core.game import (
    GameOfLife,
    add_cell,
    count_all_neighbors,
    count_neighbors,
    evolve,
)
from borderlife.core.grid import Grid, random_seed
from borderlife.core.patterns import create_preset


def border_coordinates(grid):
    for row in range(grid.height):
        for col in range(grid.width):
            if grid.is_border(row, col):
                yield row, col


class TestCountNeighbors:
    """Test neighbor counting."""

    def test_empty_grid(self):
        """No live cells means no neighbors."""
        grid = Grid(7, 7)
        assert count_neighbors(grid, 3, 3) == 0

    def test_center_cell_not_counted(self):
        """A cell is not its own neighbor."""
        grid = Grid.from_cells(7, 7, [(3, 3)])
        assert count_neighbors(grid, 3, 3) == 0

    def test_all_eight_neighbors(self):
        """Count all 8 neighbors correctly."""
        around = [(r, c) for r in (2, 3, 4) for c in (2, 3, 4) if (r, c) != (3, 3)]
        grid = Grid.from_cells(7, 7, around)
        assert count_neighbors(grid, 3, 3) == 8

    def test_border_row_is_read_across_wrap(self):
        """Cells near the top see row 0 as a regular neighbor row."""
        grid = add_cell(Grid(5, 5), 0, 1)
        assert count_neighbors(grid, 1, 1) == 1

    def test_last_interior_row_is_never_read(self):
        """Wrapping by the interior size skips the last interior row."""
        # 5x5 grid: interior is 3x3, so row indices wrap into 0..2
        grid = Grid.from_cells(5, 5, [(3, 2)])
        assert count_neighbors(grid, 3, 3) == 0
        assert count_neighbors(grid, 2, 2) == 0

    def test_wrapped_self_position_is_skipped(self):
        """For (3, 3) in a 5x5 grid the skipped offset lands on (0, 0)."""
        grid = add_cell(Grid(5, 5), 0, 0)
        assert count_neighbors(grid, 3, 3) == 0
        assert count_neighbors(grid, 1, 1) == 1

    def test_wrap_reaches_opposite_side(self):
        """Cells on the bottom interior row see the top rows."""
        # 6x6: interior 4x4, so row 4 reads rows 3, 0 and 1
        grid = Grid.from_cells(6, 6, [(1, 2)])
        assert count_neighbors(grid, 4, 2) == 1

    @pytest.mark.parametrize("shape", [(2, 5), (5, 2), (1, 1), (2, 2)])
    def test_degenerate_grid(self, shape):
        """Grids without interior cannot be counted."""
        with pytest.raises(DegenerateGrid):
            count_neighbors(Grid(*shape), 0, 0)

    @pytest.mark.parametrize("shape", [(3, 3), (3, 7), (8, 5), (12, 12)])
    def test_count_all_matches_single(self, shape):
        """Vectorized counts agree with the per-cell function."""
        rng = np.random.default_rng(sum(shape))
        cells = rng.random(shape) < 0.5
        grid = Grid(*shape, cells)

        counts = count_all_neighbors(grid)
        for row in range(1, grid.height - 1):
            for col in range(1, grid.width - 1):
                assert counts[row, col] == count_neighbors(grid, row, col)

    def test_count_all_border_entries_zero(self):
        """Border positions are never counted."""
        grid = Grid(6, 6, np.ones((6, 6), dtype=bool))
        counts = count_all_neighbors(grid)
        for row, col in border_coordinates(grid):
            assert counts[row, col] == 0

    def test_count_all_degenerate(self):
        """Vectorized counting also rejects grids without interior."""
        with pytest.raises(DegenerateGrid):
            count_all_neighbors(Grid(2, 9))

    @pytest.mark.parametrize("density", [0.3, 0.7, 1.0])
    def test_count_range(self, density):
        """Every interior count lies in [0, 8]."""
        for shape in [(3, 3), (4, 9), (10, 10)]:
            grid = random_seed(*shape, density, np.random.default_rng(7))
            full = Grid(*shape, np.ones(shape, dtype=bool))
            for g in (grid, full):
                for row in range(1, g.height - 1):
                    for col in range(1, g.width - 1):
                        assert 0 <= count_neighbors(g, row, col) <= 8


class TestEvolve:
    """Test generation transitions."""

    def test_empty_grid_stays_empty(self):
        """An all-dead grid is a fixed point."""
        grid = Grid(4, 4)
        assert evolve(grid) == grid

    def test_still_life_block(self):
        """Test that a block pattern is stable (still life)."""
        grid = Grid.from_cells(8, 8, [(2, 2), (2, 3), (3, 2), (3, 3)])
        assert evolve(grid) == grid
        assert evolve(evolve(grid)) == grid

    def test_still_life_block_smallest_grid(self):
        """Block stays put on a 6x6 grid too."""
        grid = Grid.from_cells(6, 6, [(2, 2), (2, 3), (3, 2), (3, 3)])
        assert evolve(grid) == grid

    def test_oscillator_blinker(self):
        """Test blinker oscillator (period 2)."""
        horizontal = Grid.from_cells(10, 10, [(4, 3), (4, 4), (4, 5)])
        vertical = Grid.from_cells(10, 10, [(3, 4), (4, 4), (5, 4)])

        assert evolve(horizontal) == vertical
        assert evolve(vertical) == horizontal

    def test_extinction(self):
        """A lone cell dies of underpopulation."""
        grid = Grid.from_cells(10, 10, [(5, 5)])
        assert evolve(grid).population == 0

    def test_overpopulation_uses_fresh_buffer(self):
        """Crowded cells die in the output while the input is untouched."""
        plus = [(4, 4), (3, 4), (5, 4), (4, 3), (4, 5)]
        grid = Grid.from_cells(9, 9, plus)

        result = evolve(grid)

        ring = [(r, c) for r in (3, 4, 5) for c in (3, 4, 5) if (r, c) != (4, 4)]
        assert result.live_cells() == sorted(ring)
        assert grid.live_cells() == sorted(plus)

    def test_glider_step_golden(self):
        """One step of the glider preset gives the second glider phase."""
        grid = create_preset("glider")
        assert grid.live_cells() == [(25, 25), (26, 26), (27, 24), (27, 25), (27, 26)]

        result = evolve(grid)

        assert result.shape == (50, 50)
        assert result.live_cells() == [(26, 24), (26, 26), (27, 25), (27, 26), (28, 25)]

    def test_glider_translates_after_four_steps(self):
        """After a full cycle the glider moves one cell down and right."""
        grid = create_preset("glider")
        result = grid
        for _ in range(4):
            result = evolve(result)

        expected = sorted((r + 1, c + 1) for r, c in grid.live_cells())
        assert result.live_cells() == expected

    def test_border_cells_always_dead(self):
        """Border cells never survive an evolve, whatever their input state."""
        grid = Grid(6, 7)
        for row, col in border_coordinates(grid):
            grid = add_cell(grid, row, col)
        grid = add_cell(grid, 2, 2)

        result = evolve(grid)
        for row, col in border_coordinates(result):
            assert not result.get_cell(row, col)

    def test_full_grid_border_dead(self):
        """A fully alive grid loses its border."""
        grid = Grid(7, 7, np.ones((7, 7), dtype=bool))
        result = evolve(grid)
        for row, col in border_coordinates(result):
            assert not result.get_cell(row, col)

    def test_input_not_mutated(self):
        """evolve is pure."""
        grid = random_seed(12, 12, 0.4, np.random.default_rng(3))
        before = grid.cells.copy()

        result = evolve(grid)

        assert np.array_equal(grid.cells, before)
        assert result is not grid
        assert result.shape == grid.shape

    @pytest.mark.parametrize("shape", [(2, 5), (5, 2), (1, 1), (2, 2)])
    def test_degenerate_grid_unchanged(self, shape):
        """Grids without interior come back unchanged."""
        grid = Grid(*shape, np.ones(shape, dtype=bool))
        result = evolve(grid)
        assert result == grid


class TestAddCell:
    """Test single-cell mutation."""

    def test_add_cell(self):
        """The chosen cell becomes alive in a new grid."""
        grid = Grid(5, 5)
        result = add_cell(grid, 2, 3)

        assert result.get_cell(2, 3)
        assert result.population == 1
        assert grid.population == 0

    def test_add_border_cell(self):
        """Border cells may be set directly."""
        result = add_cell(Grid(5, 5), 0, 0)
        assert result.get_cell(0, 0)

    def test_add_existing_cell(self):
        """Adding a live cell keeps it alive."""
        grid = Grid.from_cells(5, 5, [(1, 1)])
        assert add_cell(grid, 1, 1) == grid

    @pytest.mark.parametrize("row, col", [(-1, 0), (5, 0), (0, -1), (0, 6), (100, 100)])
    def test_out_of_range_is_ignored(self, row, col):
        """Out-of-range coordinates leave the grid unchanged."""
        grid = Grid.from_cells(5, 6, [(2, 2)])
        result = add_cell(grid, row, col)
        assert result == grid
        assert result.cells.tobytes() == grid.cells.tobytes()


class TestGameOfLife:
    """Test cases for the GameOfLife session."""

    def test_initialization(self):
        """Test game initialization."""
        grid = Grid(10, 10)
        game = GameOfLife(grid)

        assert game.grid is grid
        assert game.generation == 0
        assert game.population == 0

    def test_step(self):
        """Each step replaces the grid and counts a generation."""
        game = GameOfLife(Grid.from_cells(10, 10, [(4, 3), (4, 4), (4, 5)]))

        game.step()
        assert game.generation == 1
        assert game.grid.live_cells() == [(3, 4), (4, 4), (5, 4)]

    def test_run(self):
        """run advances several generations."""
        game = GameOfLife(create_preset("glider"))
        game.run(4)
        assert game.generation == 4
        assert game.population == 5

    def test_run_negative(self):
        """Negative generation counts are rejected."""
        game = GameOfLife(Grid(5, 5))
        with pytest.raises(ValueError):
            game.run(-1)

    def test_add_cell(self):
        """Cells can be added between steps; out-of-range is ignored."""
        game = GameOfLife(Grid(6, 6))
        game.add_cell(2, 2)
        game.add_cell(-1, 2)
        assert game.grid.live_cells() == [(2, 2)]

    def test_neighbor_counts(self):
        """Neighbor counts reflect the current grid."""
        game = GameOfLife(Grid.from_cells(7, 7, [(3, 3)]))
        counts = game.neighbor_counts()
        assert counts[2, 2] == 1
        assert counts[3, 3] == 0

    def test_reset(self):
        """Test game reset functionality."""
        game = GameOfLife(Grid.from_cells(6, 6, [(2, 2)]))
        game.step()
        game.step()
        assert game.generation == 2

        game.reset()
        assert game.generation == 0
        assert game.population == 0
        assert game.grid.shape == (6, 6)

        replacement = Grid.from_cells(8, 8, [(3, 3)])
        game.reset(replacement)
        assert game.grid is replacement

    def test_get_statistics(self):
        """Statistics report generation, population and interior density."""
        game = GameOfLife(Grid.from_cells(10, 10, [(2, 2), (2, 3), (3, 2), (3, 3)]))
        stats = game.get_statistics()

        assert stats["generation"] == 0
        assert stats["population"] == 4
        assert stats["grid_size"] == (10, 10)
        assert stats["population_density"] == pytest.approx(4 / 64)

    def test_statistics_without_interior(self):
        """Density is zero when there is no interior."""
        stats = GameOfLife(Grid(2, 2)).get_statistics()
        assert stats["population_density"] == 0.0
