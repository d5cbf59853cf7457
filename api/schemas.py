"""Request and response models for the HTTP API (camelCase on the wire)."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from wumpus import GameSession


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ----------------------------------------------------------------------#
# Requests
# ----------------------------------------------------------------------#
class CreateGameRequest(CamelModel):
    grid_size: Optional[int] = None
    seed: Optional[int] = None


class ActionRequest(CamelModel):
    action: Optional[str] = None


# ----------------------------------------------------------------------#
# Views
# ----------------------------------------------------------------------#
class PlayerView(CamelModel):
    x: int
    y: int
    direction: str
    alive: bool
    has_gold: bool
    arrows: int


class PerceptsView(CamelModel):
    stench: bool
    breeze: bool
    glitter: bool
    bump: bool
    scream: bool


class CellView(CamelModel):
    x: int
    y: int


class WumpusView(CellView):
    alive: bool


class GoldView(CellView):
    collected: bool


class WorldView(CamelModel):
    wumpus: WumpusView
    gold: GoldView
    pits: List[CellView]


class GameView(CamelModel):
    """Redacted game state. world is only filled in once the game is over."""

    game_id: str
    grid_size: int
    player: PlayerView
    percepts: PerceptsView
    score: int
    moves: int
    visited: List[List[bool]]
    game_over: bool
    won: bool
    world: Optional[WorldView] = None

    @classmethod
    def from_session(cls, session: GameSession) -> "GameView":
        view: Dict[str, Any] = session.redacted_view()
        return cls(
            game_id=view["id"],
            grid_size=view["size"],
            player=view["player"],
            percepts=view["percepts"],
            score=view["score"],
            moves=view["moves"],
            visited=view["visited"],
            game_over=view["game_over"],
            won=view["won"],
            world=view.get("world"),
        )


class DebugGameView(CamelModel):
    """Complete game state including hazards. Trusted callers only."""

    game_id: str
    grid_size: int
    player: PlayerView
    wumpus: WumpusView
    gold: GoldView
    pits: List[CellView]
    percepts: PerceptsView
    score: int
    moves: int
    visited: List[List[bool]]
    game_over: bool
    won: bool
    created_at: datetime
    seed: Optional[int] = None

    @classmethod
    def from_session(cls, session: GameSession) -> "DebugGameView":
        data = session.to_dict()
        data["game_id"] = data.pop("id")
        data["grid_size"] = data.pop("size")
        return cls(**data)


# ----------------------------------------------------------------------#
# Envelopes
# ----------------------------------------------------------------------#
class GameResponse(CamelModel):
    success: bool = True
    message: str = ""
    data: GameView


class ActionResponse(GameResponse):
    score_delta: int


class DebugResponse(CamelModel):
    success: bool = True
    data: DebugGameView


class MessageResponse(CamelModel):
    success: bool = True
    message: str

