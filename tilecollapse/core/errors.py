"""Error taxonomy for grid construction and solving."""

from __future__ import annotations


class TileCollapseError(Exception):
    """Base class for every error raised by the solver core."""


class InvalidDimensions(TileCollapseError, ValueError):
    """Grid width or height is not positive."""

    def __init__(self, width: int, height: int) -> None:
        super().__init__(f"grid dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height


class InvalidLabelSet(TileCollapseError, ValueError):
    """No labels were supplied, or a neighbor set names an unknown label."""


class OutOfBounds(TileCollapseError, IndexError):
    """Coordinate access outside the grid extent."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        super().__init__(f"cell ({x}, {y}) is outside the {width}x{height} grid")
        self.x = x
        self.y = y


class StepBudgetExceeded(TileCollapseError, RuntimeError):
    """``run_to_completion`` used up its step allowance before completing."""

    def __init__(self, steps: int, max_steps: int) -> None:
        super().__init__(f"grid not complete after {steps} steps (budget {max_steps})")
        self.steps = steps
        self.max_steps = max_steps


class TilesetConfigError(TileCollapseError, ValueError):
    """A tile-set document is malformed."""
