"""Exceptions raised by the simulation engine."""


class InvalidDensity(ValueError):
    """Seeding density outside the range 0.0 to 1.0."""

    def __init__(self, density: float) -> None:
        super().__init__(f"Density must be between 0.0 and 1.0, got {density}")
        self.density = density


class UnknownPreset(ValueError):
    """Preset name not present in the preset table."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown preset '{name}'")
        self.name = name


class DegenerateGrid(ValueError):
    """Grid has no interior region to count neighbors over."""

    def __init__(self, height: int, width: int) -> None:
        super().__init__(
            f"Grid {height}x{width} has no interior cells (need at least 3x3)"
        )
        self.height = height
        self.width = width
