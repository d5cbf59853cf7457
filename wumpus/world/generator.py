"""
WorldGenerator - Random cave layouts.

Placement order is fixed: the player starts at (0, 0), then the wumpus,
then the gold, then the pits. Each position is drawn uniformly over the
grid and redrawn while it collides with anything already placed.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .grid import Grid
from ..core.types import GridPos, START_POS, MIN_GRID_SIZE, MAX_GRID_SIZE
from ..core.errors import InvalidInput

# One pit per five cells.
PIT_DENSITY_DIVISOR = 5


def pit_count(size: int) -> int:
    """Number of pits for an N x N cave: floor(N^2 * 0.2) clamped to [1, N]."""
    return max(1, min(size, (size * size) // PIT_DENSITY_DIVISOR))


def validate_grid_size(size: Any) -> int:
    """
    Check a requested grid size.

    Raises:
        InvalidInput: If size is not an int in [MIN_GRID_SIZE, MAX_GRID_SIZE]
    """
    if isinstance(size, bool) or not isinstance(size, int):
        raise InvalidInput(f"Grid size must be an integer, got {size!r}")
    if not MIN_GRID_SIZE <= size <= MAX_GRID_SIZE:
        raise InvalidInput(
            f"Grid size must be between {MIN_GRID_SIZE} and {MAX_GRID_SIZE}"
        )
    return size


@dataclass
class WorldLayout:
    """
    Positions produced by the generator.

    Attributes:
        size: Grid dimension
        player: Start cell (always (0, 0))
        wumpus: Wumpus cell
        gold: Gold cell
        pits: Pit cells in draw order
    """
    size: int
    player: GridPos
    wumpus: GridPos
    gold: GridPos
    pits: List[GridPos] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "size": self.size,
            "player": list(self.player),
            "wumpus": list(self.wumpus),
            "gold": list(self.gold),
            "pits": [list(pit) for pit in self.pits],
        }


class WorldGenerator:
    """
    Stateless generator for cave layouts.

    Randomness comes from an injected random.Random so layouts are
    reproducible from a seed.

    Usage:
        generator = WorldGenerator()
        layout = generator.generate(6, rng=random.Random(7))
    """

    def generate(self, size: int, rng: Optional[random.Random] = None) -> WorldLayout:
        """
        Generate a layout for an N x N cave.

        Args:
            size: Grid dimension in [4, 10]
            rng: Random source (a fresh unseeded one if omitted)

        Returns:
            WorldLayout satisfying every placement constraint

        Raises:
            InvalidInput: If size is out of range
        """
        validate_grid_size(size)
        rng = rng or random.Random()
        grid = Grid(size)

        player = START_POS
        wumpus = self._draw(grid, rng, {player})
        gold = self._draw(grid, rng, {player, wumpus})

        excluded = {player, wumpus, gold}
        pits: List[GridPos] = []
        for _ in range(pit_count(size)):
            pit = self._draw(grid, rng, excluded)
            pits.append(pit)
            excluded.add(pit)

        return WorldLayout(size=size, player=player, wumpus=wumpus, gold=gold, pits=pits)

    @staticmethod
    def _draw(grid: Grid, rng: random.Random, excluded: set[GridPos]) -> GridPos:
        # Unbounded rejection sampling. At most N + 2 of N^2 cells are excluded
        # at any draw, so each draw succeeds with probability >= 10/16.
        while True:
            pos = grid.random_position(rng)
            if pos not in excluded:
                return pos
