"""
Grid - Spatial logic for the cave.

The Grid handles:
- Coordinate validation
- 4-neighbourhood adjacency (never wrapping)
- Straight-line rays (the arrow's flight path)
- Uniform random cells (world generation)

Coordinate System:
- X increases to the EAST
- Y increases to the NORTH (mathematical convention)
- Origin (0, 0) is the start cell at BOTTOM-LEFT
"""

from __future__ import annotations
import random
from typing import Iterator
from ..core.types import GridPos, Direction


class Grid:
    """
    A square N x N grid with mathematical coordinates (Y+ = NORTH).

    Provides spatial queries without game logic or state.

    Attributes:
        size: Grid dimension N (cells per side)
    """

    def __init__(self, size: int):
        """
        Initialize a grid.

        Args:
            size: Grid dimension (must be positive)

        Raises:
            ValueError: If the dimension is invalid
        """
        if size <= 0:
            raise ValueError(f"Grid size must be positive: {size}")

        self.size = size

    def in_bounds(self, pos: GridPos) -> bool:
        """
        Check if a position is within grid boundaries.

        Args:
            pos: Position to check (x, y)

        Returns:
            True if position is valid, False otherwise
        """
        x, y = pos
        return 0 <= x < self.size and 0 <= y < self.size

    def step(self, pos: GridPos, direction: Direction) -> GridPos:
        """Position one cell away in a direction (may be out of bounds)."""
        dx, dy = direction.delta
        return (pos[0] + dx, pos[1] + dy)

    def get_neighbors(self, pos: GridPos) -> list[GridPos]:
        """
        Get orthogonally adjacent positions, clipped to the grid.

        Args:
            pos: Center position

        Returns:
            List of valid neighbouring positions (at most 4)
        """
        candidates = [self.step(pos, direction) for direction in Direction]
        return [cell for cell in candidates if self.in_bounds(cell)]

    def ray(self, origin: GridPos, direction: Direction) -> Iterator[GridPos]:
        """
        Walk from origin in a straight line until leaving the grid.

        The origin itself is not yielded.
        """
        pos = self.step(origin, direction)
        while self.in_bounds(pos):
            yield pos
            pos = self.step(pos, direction)

    def random_position(self, rng: random.Random) -> GridPos:
        """Draw a cell uniformly at random."""
        return (rng.randrange(self.size), rng.randrange(self.size))

    def __str__(self) -> str:
        return f"Grid({self.size}x{self.size})"

    def __repr__(self) -> str:
        return f"Grid(size={self.size})"
