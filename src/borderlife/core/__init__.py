"""Core bordered Game of Life logic."""

from .errors import InvalidDensity, UnknownPreset, DegenerateGrid
from .grid import Grid, create_empty, random_seed
from .game import GameOfLife, add_cell, count_neighbors, count_all_neighbors, evolve
from .patterns import Pattern, Preset, PresetLibrary, create_preset, list_presets
from .batch_grid import BatchGrid

__all__ = [
    "Grid",
    "GameOfLife",
    "Pattern",
    "Preset",
    "PresetLibrary",
    "BatchGrid",
    "InvalidDensity",
    "UnknownPreset",
    "DegenerateGrid",
    "create_empty",
    "create_preset",
    "list_presets",
    "random_seed",
    "add_cell",
    "count_neighbors",
    "count_all_neighbors",
    "evolve",
]
