#!/usr/bin/env python3
"""
Example usage of the borderlife package.
"""

import numpy as np

from borderlife import GameOfLife, create_preset, random_seed
from borderlife.frontends.display import render_grid, render_neighbor_counts, render_status


def main():
    """Demonstrate programmatic usage of the borderlife package."""
    # Start from the glider preset
    game = GameOfLife(create_preset("glider"))

    print("Initial state:")
    print(render_grid(game.grid))
    print(render_status(game))
    print()

    # Run simulation for 4 generations
    for _ in range(4):
        game.step()
        print(render_status(game))

    print("\nGlider after one full cycle:")
    print(game.grid.live_cells())

    # Reproducible random seed on a small grid
    grid = random_seed(8, 12, 0.35, np.random.default_rng(2024))
    print("\nRandom 8x12 seed:")
    print(render_grid(grid))
    print("Neighbor counts:")
    print(render_neighbor_counts(grid))

    # Show statistics
    stats = game.get_statistics()
    print("\nFinal statistics:")
    for key, value in stats.items():
        print(f"  {key}: {value}")


if __name__ == "__main__":
    main()
