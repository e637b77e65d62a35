"""Conway's Game of Life on a bounded grid with a non-evolving border."""

__version__ = "0.1.0"

from .core.grid import Grid, create_empty, random_seed
from .core.game import GameOfLife, add_cell, count_neighbors, evolve
from .core.patterns import PresetLibrary, create_preset
from .core.errors import InvalidDensity, UnknownPreset, DegenerateGrid

__all__ = [
    "Grid",
    "GameOfLife",
    "PresetLibrary",
    "InvalidDensity",
    "UnknownPreset",
    "DegenerateGrid",
    "create_empty",
    "create_preset",
    "random_seed",
    "add_cell",
    "count_neighbors",
    "evolve",
]
