"""Common Game of Life patterns and the preset catalog."""

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from .errors import UnknownPreset
from .grid import Grid


class Pattern:
    """Represents a Game of Life pattern as live-cell offsets."""

    def __init__(self, name: str, cells: List[Tuple[int, int]], description: str = "") -> None:
        """Initialize a pattern.

        Args:
            name: Pattern name
            cells: List of (row, col) offsets for living cells, relative to an anchor
            description: Optional description
        """
        self.name = name
        self.cells = cells
        self.description = description

    def place(self, grid: Grid, anchor_row: int = 1, anchor_col: int = 1) -> Grid:
        """Return a copy of grid with this pattern drawn at the anchor.

        Cells that would land on the border or outside the grid are skipped.

        Args:
            grid: Target grid
            anchor_row: Row the (0, 0) offset maps to
            anchor_col: Column the (0, 0) offset maps to
        """
        cells = grid.cells.copy()
        for d_row, d_col in self.cells:
            row, col = anchor_row + d_row, anchor_col + d_col
            if 1 <= row < grid.height - 1 and 1 <= col < grid.width - 1:
                cells[row, col] = True
        return Grid(grid.height, grid.width, cells)

    def get_bounding_box(self) -> Tuple[int, int, int, int]:
        """Get bounding box of the pattern.

        Returns:
            Tuple of (min_row, min_col, max_row, max_col)
        """
        if not self.cells:
            return (0, 0, 0, 0)

        rows, cols = zip(*self.cells)
        return (min(rows), min(cols), max(rows), max(cols))

    def get_size(self) -> Tuple[int, int]:
        """Get pattern size as (height, width)."""
        if not self.cells:
            return (0, 0)
        min_row, min_col, max_row, max_col = self.get_bounding_box()
        return (max_row - min_row + 1, max_col - min_col + 1)

    @classmethod
    def from_grid(cls, grid: Grid, name: str, description: str = "") -> "Pattern":
        """Create pattern from the live cells of a grid, normalized to start at (0, 0)."""
        live = grid.live_cells()
        if not live:
            return cls(name, [], description)

        min_row = min(r for r, _ in live)
        min_col = min(c for _, c in live)
        return cls(name, [(r - min_row, c - min_col) for r, c in live], description)


@dataclass(frozen=True)
class Preset:
    """A named starting configuration: grid size plus a pattern at an anchor."""

    name: str
    height: int
    width: int
    pattern: Pattern
    anchor: Tuple[int, int] = (1, 1)
    category: str = "Custom"

    def create_grid(self) -> Grid:
        """Build a fresh grid for this preset."""
        return self.pattern.place(Grid(self.height, self.width), *self.anchor)


BLOCK = Pattern("Block", [(0, 0), (0, 1), (1, 0), (1, 1)], "2x2 still life block")

BEEHIVE = Pattern(
    "Beehive",
    [(0, 1), (0, 2), (1, 0), (1, 3), (2, 1), (2, 2)],
    "Beehive still life",
)

BLINKER = Pattern("Blinker", [(1, 0), (1, 1), (1, 2)], "Period-2 oscillator")

TOAD = Pattern(
    "Toad",
    [(0, 1), (0, 2), (0, 3), (1, 0), (1, 1), (1, 2)],
    "Period-2 oscillator",
)

BEACON = Pattern(
    "Beacon",
    [(0, 0), (0, 1), (1, 0), (2, 3), (3, 2), (3, 3)],
    "Period-2 oscillator",
)

# Offsets relative to the glider's top cell
GLIDER = Pattern(
    "Glider",
    [(0, 0), (1, 1), (2, 1), (2, 0), (2, -1)],
    "Smallest spaceship, period-4",
)

LWSS = Pattern(
    "Lightweight Spaceship",
    [(0, 0), (0, 3), (1, 4), (2, 0), (2, 4), (3, 1), (3, 2), (3, 3), (3, 4)],
    "LWSS - Period-4 spaceship",
)

R_PENTOMINO = Pattern(
    "R-pentomino",
    [(0, 1), (0, 2), (1, 0), (1, 1), (2, 1)],
    "Famous methuselah that stabilizes after 1103 generations",
)

GOSPER_GLIDER_GUN = Pattern(
    "Gosper Glider Gun",
    [
        # Left block
        (4, 0), (4, 1), (5, 0), (5, 1),
        # Left ship
        (2, 12), (2, 13), (3, 11), (3, 15), (4, 10), (4, 16),
        (5, 10), (5, 14), (5, 16), (5, 17), (6, 10), (6, 16),
        (7, 11), (7, 15), (8, 12), (8, 13),
        # Right ship
        (0, 24), (1, 22), (1, 24), (2, 20), (2, 21), (3, 20),
        (3, 21), (4, 20), (4, 21), (5, 22), (5, 24), (6, 24),
        # Right block
        (2, 34), (2, 35), (3, 34), (3, 35),
    ],
    "Emits a glider every 30 generations",
)

EMPTY = Pattern("Empty", [], "No live cells")


BUILTIN_PRESETS: Tuple[Preset, ...] = (
    Preset("empty", 50, 50, EMPTY, category="Classic"),
    Preset("glider", 50, 50, GLIDER, anchor=(25, 25), category="Classic"),
    Preset("gun", 50, 50, GOSPER_GLIDER_GUN, anchor=(5, 5), category="Classic"),
    Preset("block", 20, 20, BLOCK, anchor=(9, 9), category="Still Life"),
    Preset("beehive", 20, 20, BEEHIVE, anchor=(8, 8), category="Still Life"),
    Preset("blinker", 20, 20, BLINKER, anchor=(8, 8), category="Oscillators"),
    Preset("toad", 20, 20, TOAD, anchor=(8, 8), category="Oscillators"),
    Preset("beacon", 20, 20, BEACON, anchor=(8, 8), category="Oscillators"),
    Preset("lwss", 30, 30, LWSS, anchor=(13, 5), category="Spaceships"),
    Preset("r-pentomino", 50, 50, R_PENTOMINO, anchor=(24, 24), category="Methuselahs"),
)


class PresetLibrary:
    """Manages the catalog of named presets."""

    def __init__(self) -> None:
        self._presets: Dict[str, Preset] = {}
        for preset in BUILTIN_PRESETS:
            self.add_preset(preset)

    def add_preset(self, preset: Preset) -> None:
        """Add a preset, replacing any preset with the same name."""
        self._presets[preset.name.strip().lower()] = preset

    def get_preset(self, name: str) -> Optional[Preset]:
        """Get a preset by name (case-insensitive), or None if not found."""
        return self._presets.get(name.strip().lower())

    def create(self, name: str) -> Grid:
        """Build the starting grid of a preset.

        Raises:
            UnknownPreset: If no preset has this name
        """
        preset = self.get_preset(name)
        if preset is None:
            raise UnknownPreset(name)
        return preset.create_grid()

    def list_presets(self) -> List[str]:
        """Get list of all preset names."""
        return list(self._presets.keys())

    def get_presets_by_category(self) -> Dict[str, List[str]]:
        """Get preset names grouped by category, in insertion order."""
        categories: Dict[str, List[str]] = {}
        for name, preset in self._presets.items():
            categories.setdefault(preset.category, []).append(name)
        return categories


_default_library = PresetLibrary()


def create_preset(name: str) -> Grid:
    """Build the starting grid of a built-in preset.

    Raises:
        UnknownPreset: If no preset has this name
    """
    return _default_library.create(name)


def list_presets() -> List[str]:
    return _default_library.list_presets()
