"""Interactive command-line shell for the bordered Game of Life.

Commands, read one line at a time:
    ENTER (or anything unrecognized)  evolve one generation
    A                                 add a live cell (prompts for row and col)
    N                                 show neighbor counts for each cell
    Q                                 quit
"""

import argparse
import sys
from typing import Callable, Dict, List, Optional

import numpy as np

from ..core.errors import UnknownPreset
from ..core.game import GameOfLife
from ..core.grid import Grid, random_seed
from ..core.patterns import PresetLibrary
from .display import render_grid, render_neighbor_counts, render_status


class InteractiveShell:
    """Drives one interactive session around a GameOfLife."""

    QUIT = "Q"
    ADD_CELL = "A"
    DISPLAY_NEIGHBOR_COUNTS = "N"

    # Start-menu numbers mapped to preset names
    PRESET_CHOICES: Dict[str, str] = {"1": "empty", "2": "glider", "3": "gun"}

    def __init__(
        self,
        input_func: Optional[Callable[[str], str]] = None,
        rng: Optional[np.random.Generator] = None,
        marker: str = "o",
        verbose: bool = False,
        library: Optional[PresetLibrary] = None,
    ) -> None:
        """Initialize the shell.

        Args:
            input_func: Reads one line after showing a prompt (defaults to input)
            rng: Random generator used for random seeding
            marker: Glyph drawn for live cells
            verbose: Print extra diagnostic lines
            library: Preset catalog (defaults to the built-in presets)
        """
        self.input_func = input_func or input
        self.rng = rng
        self.marker = marker
        self.verbose = verbose
        self.library = library or PresetLibrary()
        self.game: Optional[GameOfLife] = None

    def _read(self, prompt: str) -> str:
        return self.input_func(prompt)

    def _read_int(self, prompt: str) -> int:
        return int(self._read(prompt).strip())

    def _read_float(self, prompt: str) -> float:
        return float(self._read(prompt).strip())

    def choose_start(self) -> Optional[Grid]:
        """Ask for a preset or random seed and build the first generation.

        Returns:
            Starting grid, or None if the answer was not a valid choice

        Raises:
            InvalidDensity: If the requested density is outside [0.0, 1.0]
            ValueError: If the requested size is not positive
        """
        try:
            key = self._read_int("Press 1 if you want to start with a preset and 2 if you want a random seed: ")
        except ValueError:
            key = 0

        if key == 2:
            try:
                width = self._read_int("Choose array size:\nwidth: ")
                height = self._read_int("height: ")
                density = self._read_float("Choose the density: ")
            except ValueError:
                print("Not a valid number! Try again...")
                return None
            return self.seed_random(height, width, density)

        if key == 1:
            choice = self._read(
                "Choose a preset:\n"
                "   - Enter 1 if you want an empty grid\n"
                "   - Enter 2 if you want to start with a simple glider\n"
                "   - Enter 3 if you want to start with a simple gun\n"
            ).strip()
            name = self.PRESET_CHOICES.get(choice)
            if name is None:
                print("Not a valid choice! Try again...")
                return None
            return self.load_preset(name)

        print("Not a valid answer! Try again...")
        return None

    def load_preset(self, name: str) -> Grid:
        """Build a preset grid.

        Raises:
            UnknownPreset: If no preset has this name
        """
        grid = self.library.create(name)
        if self.verbose:
            print(f"Loaded preset '{name}' on a {grid.height}x{grid.width} grid")
        return grid

    def seed_random(self, height: int, width: int, density: float) -> Grid:
        """Build a randomly seeded grid using the shell's generator."""
        grid = random_seed(height, width, density, self.rng)
        if self.verbose:
            print(f"Random seed: {height}x{width} grid, density {density:.2%}, {grid.population} live cells")
        return grid

    def add_cell_prompt(self) -> None:
        """Prompt for a row and column and make that cell alive."""
        try:
            row = self._read_int("row: ")
            col = self._read_int("col: ")
        except ValueError:
            print("Error: row and col must be integers")
            return
        self.game.add_cell(row, col)

    def show_neighbor_counts(self) -> None:
        print(render_neighbor_counts(self.game.grid))

    def display(self) -> None:
        print(render_grid(self.game.grid, self.marker))
        print(render_status(self.game))

    def handle_command(self, command: str) -> bool:
        """Run one command line.

        Returns:
            False when the session should end
        """
        command = command.strip().upper()

        if command.startswith(self.QUIT):
            return False
        if command.startswith(self.ADD_CELL):
            self.add_cell_prompt()
        elif command.startswith(self.DISPLAY_NEIGHBOR_COUNTS):
            self.show_neighbor_counts()
        else:
            self.game.step()
        return True

    def run(self, grid: Optional[Grid] = None) -> int:
        """Run the session until the user quits or input ends.

        Args:
            grid: Starting grid; the start menu is shown when omitted

        Returns:
            Exit code (0 for success, 1 if no valid start was chosen)
        """
        if grid is None:
            try:
                grid = self.choose_start()
            except EOFError:
                grid = None
            if grid is None:
                return 1

        self.game = GameOfLife(grid)

        keep_going = True
        while keep_going:
            self.display()
            try:
                keep_going = self.handle_command(self._read(""))
            except EOFError:
                # End of input quits
                break

        if self.verbose:
            print(f"Session ended after {self.game.generation} generations")
        return 0


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Play Conway's Game of Life on a bordered grid",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Choose a preset or random seed interactively
  borderlife

  # Start straight from the glider preset
  borderlife --preset glider

  # Random 30x40 grid with 25% density, reproducible
  borderlife --random -W 40 -H 30 -p 0.25 --seed 7

  # List available presets
  borderlife --list-presets
        """,
    )

    parser.add_argument("-W", "--width", type=int, default=50, help="Grid width (default: 50)")

    parser.add_argument("-H", "--height", type=int, default=50, help="Grid height (default: 50)")

    parser.add_argument(
        "-p",
        "--density",
        type=float,
        default=0.1,
        help="Random seed density 0.0-1.0 (default: 0.1)",
    )

    start = parser.add_mutually_exclusive_group()
    start.add_argument(
        "--preset",
        type=str,
        help="Start from a named preset instead of the start menu",
    )

    start.add_argument(
        "-r",
        "--random",
        action="store_true",
        help="Start from a random seed using --width, --height and --density",
    )

    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the random generator (default: system entropy)",
    )

    parser.add_argument(
        "--marker",
        type=str,
        default="o",
        help="Character drawn for live cells (default: o)",
    )

    parser.add_argument(
        "--list-presets",
        action="store_true",
        help="List available presets and exit",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print detailed progress information",
    )

    return parser


def validate_args(args: argparse.Namespace) -> bool:
    """Validate command-line arguments.

    Args:
        args: Parsed arguments

    Returns:
        True if arguments are valid
    """
    errors = []

    if args.width <= 0:
        errors.append("Width must be positive")

    if args.height <= 0:
        errors.append("Height must be positive")

    if not 0.0 <= args.density <= 1.0:
        errors.append("Density must be between 0.0 and 1.0")

    if len(args.marker) != 1:
        errors.append("Marker must be a single character")

    if args.seed is not None and args.seed < 0:
        errors.append("Seed must be non-negative")

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def list_presets(library: PresetLibrary) -> None:
    """Print the preset catalog grouped by category."""
    print("Available presets:")
    for category, names in library.get_presets_by_category().items():
        print(f"\n{category}:")
        for name in names:
            preset = library.get_preset(name)
            print(f"  {name}: {preset.height}x{preset.width}, {len(preset.pattern.cells)} cells")
            if preset.pattern.description:
                print(f"    {preset.pattern.description}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the interactive shell.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    library = PresetLibrary()

    if args.list_presets:
        list_presets(library)
        return 0

    if not validate_args(args):
        return 1

    rng = np.random.default_rng(args.seed)
    if args.verbose and args.seed is not None:
        print(f"Using random seed {args.seed}")

    shell = InteractiveShell(rng=rng, marker=args.marker, verbose=args.verbose, library=library)

    try:
        grid = None
        if args.preset:
            grid = shell.load_preset(args.preset)
        elif args.random:
            grid = shell.seed_random(args.height, args.width, args.density)

        return shell.run(grid)

    except UnknownPreset as e:
        print(f"Error: {e}")
        print(f"Available presets: {', '.join(library.list_presets())}")
        return 1
    except ValueError as e:
        print(f"Error: {e}")
        return 1
    except KeyboardInterrupt:
        print("\nSession interrupted by user")
        return 1
    except Exception as e:
        print(f"Error: {e}")
        if args.verbose:
            import traceback

            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
