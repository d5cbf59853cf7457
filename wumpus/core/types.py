"""
Core type definitions for Wumpus World.

This module contains the fundamental types, enums, and constants used
throughout the rules engine. No game logic, just pure data structures.
"""

from __future__ import annotations
from enum import Enum
from typing import Tuple
from dataclasses import dataclass

# ============================================================================
# SPATIAL TYPES
# ============================================================================

# Grid position: (x, y) where:
# - X increases to the EAST
# - Y increases to the NORTH
# - Origin (0, 0) is the start cell (bottom-left)
GridPos = Tuple[int, int]

START_POS: GridPos = (0, 0)

MIN_GRID_SIZE = 4
MAX_GRID_SIZE = 10
DEFAULT_GRID_SIZE = 4


class Direction(Enum):
    """
    Cardinal facing of the player, listed clockwise.

    Each direction provides a delta tuple (dx, dy) using mathematical
    coordinates (Y+ = NORTH).
    """
    NORTH = (0, 1)
    EAST = (1, 0)
    SOUTH = (0, -1)
    WEST = (-1, 0)

    @property
    def delta(self) -> Tuple[int, int]:
        """Get the (dx, dy) step for one cell in this direction."""
        return self.value

    @property
    def index(self) -> int:
        """Clockwise index (NORTH=0, EAST=1, SOUTH=2, WEST=3)."""
        return _CLOCKWISE.index(self)

    @classmethod
    def from_index(cls, index: int) -> Direction:
        """Get the direction for a clockwise index, modulo 4."""
        return _CLOCKWISE[index % len(_CLOCKWISE)]

    def rotate_left(self) -> Direction:
        """Rotate 90 degrees counter-clockwise."""
        return Direction.from_index(self.index - 1)

    def rotate_right(self) -> Direction:
        """Rotate 90 degrees clockwise."""
        return Direction.from_index(self.index + 1)

    def __str__(self) -> str:
        return self.name


_CLOCKWISE = (Direction.NORTH, Direction.EAST, Direction.SOUTH, Direction.WEST)


# ============================================================================
# ACTIONS
# ============================================================================

class ActionType(Enum):
    """Player actions, valued by their wire token."""
    FORWARD = "forward"  # Step one cell in the facing direction
    LEFT = "left"  # Turn 90 degrees counter-clockwise
    RIGHT = "right"  # Turn 90 degrees clockwise
    SHOOT = "shoot"  # Fire the arrow along the facing direction
    GRAB = "grab"  # Pick up the gold on the current cell
    CLIMB = "climb"  # Leave the cave from the start cell

    def __str__(self) -> str:
        return self.value

    @classmethod
    def tokens(cls) -> list[str]:
        """All accepted wire tokens."""
        return [member.value for member in cls]


# ============================================================================
# SCORING
# ============================================================================

class ScoreDelta:
    """Fixed score changes applied by the action resolver."""
    MOVE = -1
    BUMP = -1
    TURN = -1
    SHOOT = -10
    GRAB = 1000
    CLIMB = 0
    DEATH = -1000


# ============================================================================
# ACTION VALIDATION
# ============================================================================

@dataclass
class ActionValidation:
    """
    Structured result of validating an action against a session.

    Attributes:
        valid: Whether the action may be applied
        error_code: Machine-readable error code (None if valid)
        message: Human-readable message explaining the result

    Error codes:
        - "GAME_OVER": The session is terminal
        - "NO_ARROWS": Shoot requested with an empty quiver
        - "NO_GOLD_HERE": Grab requested away from uncollected gold
        - "NOT_AT_EXIT": Climb requested away from the start cell
    """
    valid: bool
    error_code: str | None = None
    message: str = ""

    @staticmethod
    def success(message: str = "") -> ActionValidation:
        """Create a validation success result."""
        return ActionValidation(valid=True, error_code=None, message=message)

    @staticmethod
    def fail(error_code: str, message: str) -> ActionValidation:
        """Create a validation failure result."""
        return ActionValidation(valid=False, error_code=error_code, message=message)
