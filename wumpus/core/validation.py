"""
Shared action validation helpers.

Both the action resolver and any "what can I do here?" query use these
rules, so a precondition is stated in exactly one place.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from .types import ActionValidation, ActionType, START_POS
from .actions import Action

if TYPE_CHECKING:
    from ..world.session import GameSession


def validate_action(session: GameSession, action: Action) -> ActionValidation:
    """
    Check an action's preconditions against the current session.

    FORWARD, LEFT and RIGHT have no precondition beyond an active game;
    walking into a wall is a bump, not a failure.
    """
    if session.game_over:
        return ActionValidation.fail("GAME_OVER", "Game is already over")

    player = session.player

    if action.type == ActionType.SHOOT:
        if player.arrows <= 0:
            return ActionValidation.fail("NO_ARROWS", "No arrows left")
        return ActionValidation.success()

    if action.type == ActionType.GRAB:
        gold = session.gold
        if player.pos != gold.pos or gold.collected:
            return ActionValidation.fail("NO_GOLD_HERE", "No gold here")
        return ActionValidation.success()

    if action.type == ActionType.CLIMB:
        if player.pos != START_POS:
            return ActionValidation.fail(
                "NOT_AT_EXIT",
                f"Can only climb out from starting position {START_POS}"
            )
        return ActionValidation.success()

    return ActionValidation.success()


def available_actions(session: GameSession) -> list[ActionType]:
    """List the action types whose preconditions currently hold."""
    return [
        action_type for action_type in ActionType
        if validate_action(session, Action(action_type)).valid
    ]
