"""
Error taxonomy for Wumpus World.

All failures are reported synchronously to the caller. None of them are
fatal to the process, and a failed action never changes session state.
"""

from __future__ import annotations


class WumpusError(Exception):
    """Base class for every error raised by the game."""

    code = "WUMPUS_ERROR"

    def __init__(self, message: str, code: str | None = None):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code

    def to_dict(self) -> dict:
        return {"success": False, "message": self.message, "error": self.code}


class InvalidInput(WumpusError):
    """Malformed request: grid size out of range, missing action."""

    code = "INVALID_INPUT"


class NotFound(WumpusError):
    """Unknown session identifier."""

    code = "NOT_FOUND"


class IllegalAction(WumpusError):
    """A known action whose precondition does not hold."""

    code = "ILLEGAL_ACTION"


class GameOver(IllegalAction):
    """Any action requested on a terminal session."""

    code = "GAME_OVER"


class UnknownAction(WumpusError):
    """Unrecognized action token."""

    code = "UNKNOWN_ACTION"
