"""
PerceptCalculator - What the player senses.

Percepts are a pure function of the player's cell and the layout:
- stench: the live wumpus is orthogonally adjacent
- breeze: a pit is orthogonally adjacent
- glitter: uncollected gold lies on the player's cell

bump and scream are never computed here. They belong to the action that
caused them, so the resolver overlays them on a freshly computed set.
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Iterable

from ..core.types import GridPos
from ..world.grid import Grid
from ..world.session import Percepts

if TYPE_CHECKING:
    from ..world.session import GameSession, Wumpus, Gold


class PerceptCalculator:
    """
    Stateless percept computation.

    Usage:
        percepts = PerceptCalculator().for_session(session)
    """

    def compute(
        self,
        grid: Grid,
        pos: GridPos,
        wumpus: Wumpus,
        pits: Iterable[GridPos],
        gold: Gold,
        has_gold: bool,
    ) -> Percepts:
        """
        Compute the persistent percepts at a cell.

        Args:
            grid: Grid used to clip the neighbourhood
            pos: Player cell
            wumpus: Wumpus position and liveness
            pits: Pit cells
            gold: Gold position and collected flag
            has_gold: Whether the player already carries the gold

        Returns:
            Percepts with bump and scream cleared
        """
        adjacent = set(grid.get_neighbors(pos))

        return Percepts(
            stench=wumpus.alive and wumpus.pos in adjacent,
            breeze=any(pit in adjacent for pit in pits),
            glitter=not gold.collected and not has_gold and gold.pos == pos,
        )

    def for_session(self, session: GameSession) -> Percepts:
        """Compute the persistent percepts at the player's current cell."""
        return self.compute(
            session.grid,
            session.player.pos,
            session.wumpus,
            session.pits,
            session.gold,
            session.player.has_gold,
        )
