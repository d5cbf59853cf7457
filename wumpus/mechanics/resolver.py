"""
ActionResolver - Applies one player action to a session.

This module handles:
- Validating the action against the session
- Applying the action's effect (move, turn, shoot, grab, climb)
- Death checks after a move
- Score, move count and percept bookkeeping

State machine: a session is 'active' until the player dies or climbs out,
then 'over' for good. Climbing is the only way to win.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, Optional

from ..core.types import ActionType, ScoreDelta
from ..core.actions import Action
from ..core.validation import validate_action
from .percepts import PerceptCalculator

if TYPE_CHECKING:
    from ..world.session import GameSession


@dataclass
class EffectResult:
    """
    Outcome of a single action handler.

    Attributes:
        message: Human-readable description
        score_delta: Score change for the action (death penalty included)
        bump: Player walked into a wall
        scream: Arrow killed the wumpus
    """
    message: str
    score_delta: int
    bump: bool = False
    scream: bool = False


@dataclass
class ActionOutcome:
    """
    Result of resolving an action.

    Attributes:
        success: Whether the action was applied
        message: Human-readable message for the caller
        score_delta: Score change applied (0 on failure)
        session: Resulting session (the untouched input on failure)
        error_code: Machine-readable reason when success is False
    """
    success: bool
    message: str
    score_delta: int
    session: GameSession
    error_code: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with the redacted session view."""
        return {
            "success": self.success,
            "message": self.message,
            "score_delta": self.score_delta,
            "error_code": self.error_code,
            "session": self.session.redacted_view(),
        }


class ActionResolver:
    """
    Stateless resolver for player actions.

    resolve() never mutates the session it is given. It validates the
    action, and on success works on a clone and returns that clone inside
    the ActionOutcome.
    """

    def __init__(self, percepts: Optional[PerceptCalculator] = None):
        self._percepts = percepts or PerceptCalculator()
        self._handlers = {
            ActionType.FORWARD: self._move_forward,
            ActionType.LEFT: self._turn_left,
            ActionType.RIGHT: self._turn_right,
            ActionType.SHOOT: self._shoot,
            ActionType.GRAB: self._grab,
            ActionType.CLIMB: self._climb,
        }

    def resolve(self, session: GameSession, action: Action) -> ActionOutcome:
        """
        Resolve one action.

        Args:
            session: Current session (not modified)
            action: Action to apply

        Returns:
            ActionOutcome; on failure success is False and session is the input
        """
        validation = validate_action(session, action)
        if not validation.valid:
            return ActionOutcome(
                success=False,
                message=validation.message,
                score_delta=0,
                session=session,
                error_code=validation.error_code,
            )

        new_session = session.clone()
        effect = self._handlers[action.type](new_session)

        new_session.moves += 1
        new_session.score += effect.score_delta

        percepts = self._percepts.for_session(new_session)
        percepts.bump = effect.bump
        percepts.scream = effect.scream
        new_session.percepts = percepts

        return ActionOutcome(
            success=True,
            message=effect.message,
            score_delta=effect.score_delta,
            session=new_session,
        )

    # ========================================================================
    # ACTION HANDLERS (operate on the clone)
    # ========================================================================

    def _move_forward(self, session: GameSession) -> EffectResult:
        player = session.player
        grid = session.grid
        target = grid.step(player.pos, player.direction)

        if not grid.in_bounds(target):
            return EffectResult("Bump! Hit the wall.", ScoreDelta.BUMP, bump=True)

        player.pos = target
        session.mark_visited(target)

        death_message = self._check_death(session)
        if death_message:
            return EffectResult(death_message, ScoreDelta.MOVE + ScoreDelta.DEATH)

        return EffectResult("Moved forward", ScoreDelta.MOVE)

    def _turn_left(self, session: GameSession) -> EffectResult:
        session.player.direction = session.player.direction.rotate_left()
        return EffectResult("Turned left", ScoreDelta.TURN)

    def _turn_right(self, session: GameSession) -> EffectResult:
        session.player.direction = session.player.direction.rotate_right()
        return EffectResult("Turned right", ScoreDelta.TURN)

    def _shoot(self, session: GameSession) -> EffectResult:
        player = session.player
        wumpus = session.wumpus
        player.arrows -= 1

        for cell in session.grid.ray(player.pos, player.direction):
            if wumpus.alive and cell == wumpus.pos:
                wumpus.alive = False
                return EffectResult("You killed the Wumpus!", ScoreDelta.SHOOT, scream=True)

        return EffectResult("Arrow missed", ScoreDelta.SHOOT)

    def _grab(self, session: GameSession) -> EffectResult:
        session.gold.collected = True
        session.player.has_gold = True
        return EffectResult("Grabbed the gold!", ScoreDelta.GRAB)

    def _climb(self, session: GameSession) -> EffectResult:
        session.game_over = True
        session.won = session.player.has_gold
        if session.won:
            return EffectResult("You escaped with the gold! Victory!", ScoreDelta.CLIMB)
        return EffectResult("You escaped but without the gold.", ScoreDelta.CLIMB)

    @staticmethod
    def _check_death(session: GameSession) -> Optional[str]:
        """Kill the player if the current cell holds a pit or the live wumpus."""
        player = session.player
        wumpus = session.wumpus

        if session.is_pit(player.pos):
            message = "You fell into a pit! Game Over."
        elif wumpus.alive and wumpus.pos == player.pos:
            message = "You were eaten by the Wumpus! Game Over."
        else:
            return None

        player.alive = False
        session.game_over = True
        session.won = False
        return message
