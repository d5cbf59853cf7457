"""
Mechanics module - Action resolution systems.

This module provides stateless resolvers for game actions:
- PerceptCalculator: Computes what the player senses
- ActionResolver: Applies actions and checks for death and victory

All resolvers are stateless - they take a GameSession and return results
without modifying their own state.
"""

from .percepts import PerceptCalculator
from .resolver import ActionResolver, ActionOutcome, EffectResult

__all__ = [
    "PerceptCalculator",
    "ActionResolver",
    "ActionOutcome",
    "EffectResult",
]
