"""
Core types and constants for Wumpus World.
"""

# Instead of from wumpus.core.types import Direction, you can do: from wumpus.core import Direction
from .types import (
    GridPos,
    START_POS,
    MIN_GRID_SIZE,
    MAX_GRID_SIZE,
    DEFAULT_GRID_SIZE,
    Direction,
    ActionType,
    ScoreDelta,
    ActionValidation,
)
from .errors import (
    WumpusError,
    InvalidInput,
    NotFound,
    IllegalAction,
    GameOver,
    UnknownAction,
)
from .actions import Action


__all__ = [
    "GridPos",
    "START_POS",
    "MIN_GRID_SIZE",
    "MAX_GRID_SIZE",
    "DEFAULT_GRID_SIZE",
    "Direction",
    "ActionType",
    "ScoreDelta",
    "ActionValidation",
    "WumpusError",
    "InvalidInput",
    "NotFound",
    "IllegalAction",
    "GameOver",
    "UnknownAction",
    "Action",
]
