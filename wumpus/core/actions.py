"""
Action definitions and utilities.

Actions are the commands a caller sends to a game session. This module
provides:
- Action dataclass
- Token parsing (case-insensitive)
- Action factory methods
- Action serialization (dict)
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Any

from .types import ActionType
from .errors import InvalidInput, UnknownAction


@dataclass(frozen=True)
class Action:
    """
    A single player action.

    Use static factory methods for convenient construction:
        - Action.forward()
        - Action.left() / Action.right()
        - Action.shoot()
        - Action.grab()
        - Action.climb()

    Or parse a wire token:
        - Action.parse("Forward")
    """

    type: ActionType

    @classmethod
    def parse(cls, token: Any) -> Action:
        """
        Parse a wire token into an action.

        Args:
            token: Action token such as "forward" or "SHOOT", or an existing
                Action / ActionType

        Returns:
            Action instance

        Raises:
            InvalidInput: If the token is missing or blank
            UnknownAction: If the token names no known action
        """
        if isinstance(token, Action):
            return token
        if isinstance(token, ActionType):
            return cls(token)
        if token is None or (isinstance(token, str) and not token.strip()):
            raise InvalidInput("Action is required")
        if not isinstance(token, str):
            raise UnknownAction(f"Invalid action: {token!r}")

        try:
            return cls(ActionType(token.strip().lower()))
        except ValueError:
            raise UnknownAction(
                f"Invalid action '{token}'. Expected one of: {', '.join(ActionType.tokens())}"
            ) from None

    def to_dict(self) -> Dict[str, Any]:
        """Convert action to a JSON-serializable dictionary."""
        return {"action": self.type.value}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Action:
        """
        Create an action from a dictionary.

        Raises:
            InvalidInput: If the dictionary has no 'action' key
        """
        if "action" not in data:
            raise InvalidInput("Action dictionary must contain 'action'")
        return cls.parse(data["action"])

    def __str__(self) -> str:
        return self.type.name

    # FACTORY METHODS
    @staticmethod
    def forward() -> Action:
        """Create a FORWARD action."""
        return Action(ActionType.FORWARD)

    @staticmethod
    def left() -> Action:
        """Create a LEFT turn action."""
        return Action(ActionType.LEFT)

    @staticmethod
    def right() -> Action:
        """Create a RIGHT turn action."""
        return Action(ActionType.RIGHT)

    @staticmethod
    def shoot() -> Action:
        """Create a SHOOT action."""
        return Action(ActionType.SHOOT)

    @staticmethod
    def grab() -> Action:
        """Create a GRAB action."""
        return Action(ActionType.GRAB)

    @staticmethod
    def climb() -> Action:
        """Create a CLIMB action."""
        return Action(ActionType.CLIMB)
