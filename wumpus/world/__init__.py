"""
World state for Wumpus World.

This module provides:
- Grid: Spatial logic and geometry
- WorldGenerator: Random cave layouts
- GameSession: The state of one game
"""

from .grid import Grid
from .generator import WorldGenerator, WorldLayout, pit_count, validate_grid_size
from .session import GameSession, Player, Wumpus, Gold, Percepts

__all__ = [
    "Grid",
    "WorldGenerator",
    "WorldLayout",
    "pit_count",
    "validate_grid_size",
    "GameSession",
    "Player",
    "Wumpus",
    "Gold",
    "Percepts",
]
