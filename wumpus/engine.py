"""
WumpusEngine - Main rules engine interface.

This is the primary API for Wumpus World. It ties world generation,
percepts and action resolution together behind two operations.

Usage:
    from wumpus import WumpusEngine

    engine = WumpusEngine()
    session = engine.create(grid_size=4, seed=42)

    outcome = engine.apply_action(session, "forward")
    session = outcome.session
    print(outcome.message, outcome.score_delta, session.percepts.active())

The engine is a pure function of (session, action): it never mutates the
session passed in and keeps no per-game state of its own. Whoever owns the
session (normally a SessionStore) replaces it with outcome.session.
"""

from __future__ import annotations

import random
from datetime import datetime, timezone
from typing import Any, Callable, Optional

from .core.actions import Action
from .core.errors import GameOver, IllegalAction, InvalidInput
from .core.types import DEFAULT_GRID_SIZE
from .world.generator import WorldGenerator
from .world.session import GameSession
from .mechanics import ActionResolver, ActionOutcome, PerceptCalculator

from infra.logger import get_logger

log = get_logger(__name__)


class WumpusEngine:
    """
    Wumpus World rules engine.

    The engine manages:
    - World generation for new sessions
    - Initial percepts at the start cell
    - Action resolution and terminal-state checks
    """

    def __init__(
        self,
        generator: Optional[WorldGenerator] = None,
        resolver: Optional[ActionResolver] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """
        Initialize the engine.

        Args:
            generator: Layout generator (default: WorldGenerator())
            resolver: Action resolver (default: ActionResolver())
            clock: Returns the current UTC time, used for created_at
        """
        self._percepts = PerceptCalculator()
        self._generator = generator or WorldGenerator()
        self._resolver = resolver or ActionResolver(self._percepts)
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def create(
        self,
        grid_size: int = DEFAULT_GRID_SIZE,
        seed: Optional[int] = None,
        session_id: Optional[str] = None,
    ) -> GameSession:
        """
        Create a new game.

        Args:
            grid_size: Grid dimension in [4, 10]
            seed: Random seed for a reproducible layout
            session_id: Identifier to use (a uuid4 string if omitted)

        Returns:
            Fresh session with percepts computed for the start cell

        Raises:
            InvalidInput: If grid_size is out of range
        """
        layout = self._generator.generate(grid_size, rng=random.Random(seed))
        session = GameSession.from_layout(
            layout,
            session_id=session_id,
            created_at=self._clock(),
            seed=seed,
        )
        session.percepts = self._percepts.for_session(session)
        log.debug("Generated %s layout for session %s", session.grid, session.id)
        return session

    def apply_action(self, session: GameSession, action: Any) -> ActionOutcome:
        """
        Apply one action to a session.

        Args:
            session: Current session (not modified)
            action: Action instance or token ("forward", "left", "right",
                "shoot", "grab", "climb"; case-insensitive)

        Returns:
            Successful ActionOutcome whose session is the new snapshot

        Raises:
            InvalidInput: If no action was given
            GameOver: If the session is already terminal (checked before
                the token is recognized)
            UnknownAction: If the token names no action
            IllegalAction: If the action's precondition does not hold
        """
        if action is None or (isinstance(action, str) and not action.strip()):
            raise InvalidInput("Action is required")
        # Terminal sessions reject every token, recognized or not.
        if session.game_over:
            raise GameOver("Game is already over")

        action = Action.parse(action)
        outcome = self._resolver.resolve(session, action)

        if not outcome.success:
            if outcome.error_code == "GAME_OVER":
                raise GameOver(outcome.message)
            raise IllegalAction(outcome.message, code=outcome.error_code)

        log.debug(
            "Session %s: %s -> %s (%+d)",
            session.id, action, outcome.message, outcome.score_delta,
        )
        return outcome
