"""
Wumpus World rules engine.

Usage:
    from wumpus import WumpusEngine, Action

    engine = WumpusEngine()
    session = engine.create(grid_size=6)
    session = engine.apply_action(session, Action.forward()).session
"""

from .core import (
    Action,
    ActionType,
    Direction,
    WumpusError,
    InvalidInput,
    NotFound,
    IllegalAction,
    GameOver,
    UnknownAction,
)
from .world import GameSession, WorldGenerator
from .mechanics import ActionOutcome
from .engine import WumpusEngine

__all__ = [
    "Action",
    "ActionType",
    "Direction",
    "WumpusError",
    "InvalidInput",
    "NotFound",
    "IllegalAction",
    "GameOver",
    "UnknownAction",
    "GameSession",
    "WorldGenerator",
    "ActionOutcome",
    "WumpusEngine",
]
