"""
GameSession - The state of one game.

A GameSession owns the player, the wumpus, the gold, the pits, the visited
map and the current percepts for its whole lifetime. Sessions are plain
data: the action resolver mutates a clone of a session and hands the clone
back, so a snapshot stored elsewhere is never changed behind its owner's back.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from .grid import Grid
from .generator import WorldLayout
from ..core.types import Direction, GridPos, START_POS


def _pos(data: Any) -> GridPos:
    # JSON turns tuples into lists
    return (int(data[0]), int(data[1]))


@dataclass
class Player:
    """
    The explorer.

    Attributes:
        pos: Current cell (x, y)
        direction: Facing direction
        alive: False once the player fell into a pit or met the wumpus
        has_gold: True after a successful grab
        arrows: Arrows left in the quiver (never negative)
    """
    pos: GridPos = START_POS
    direction: Direction = Direction.NORTH
    alive: bool = True
    has_gold: bool = False
    arrows: int = 1

    def to_dict(self) -> Dict[str, Any]:
        return {
            "x": self.pos[0],
            "y": self.pos[1],
            "direction": self.direction.name,
            "alive": self.alive,
            "has_gold": self.has_gold,
            "arrows": self.arrows,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Player:
        return cls(
            pos=(int(data["x"]), int(data["y"])),
            direction=Direction[data["direction"]],
            alive=data.get("alive", True),
            has_gold=data.get("has_gold", False),
            arrows=data.get("arrows", 1),
        )


@dataclass
class Wumpus:
    """The monster. Killed by an arrow, never moves."""
    pos: GridPos
    alive: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return {"x": self.pos[0], "y": self.pos[1], "alive": self.alive}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Wumpus:
        return cls(pos=(int(data["x"]), int(data["y"])), alive=data.get("alive", True))


@dataclass
class Gold:
    """The treasure. Collected at most once."""
    pos: GridPos
    collected: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {"x": self.pos[0], "y": self.pos[1], "collected": self.collected}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Gold:
        return cls(pos=(int(data["x"]), int(data["y"])), collected=data.get("collected", False))


@dataclass
class Percepts:
    """
    What the player senses on the current cell.

    stench, breeze and glitter follow from the layout and the player's cell.
    bump and scream are transient: they are true only in the result of the
    action that produced them.
    """
    stench: bool = False
    breeze: bool = False
    glitter: bool = False
    bump: bool = False
    scream: bool = False

    def to_dict(self) -> Dict[str, bool]:
        return {
            "stench": self.stench,
            "breeze": self.breeze,
            "glitter": self.glitter,
            "bump": self.bump,
            "scream": self.scream,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Percepts:
        return cls(**{key: bool(data.get(key, False)) for key in cls().to_dict()})

    def active(self) -> List[str]:
        """Names of the percepts that are currently true."""
        return [name for name, value in self.to_dict().items() if value]


@dataclass
class GameSession:
    """
    One independent game instance.

    Attributes:
        id: Opaque session identifier
        size: Grid dimension N
        player: The explorer
        wumpus: The monster
        gold: The treasure
        pits: Pit cells (fixed after generation)
        visited: N x N matrix indexed visited[y][x]
        percepts: Percepts for the current turn
        score: Accumulated score
        moves: Count of successful actions
        game_over: True once the session is terminal
        won: True only after climbing out with the gold
        created_at: Creation time (UTC), used for retention
        seed: Seed the layout was generated from, if any
    """
    id: str
    size: int
    player: Player
    wumpus: Wumpus
    gold: Gold
    pits: List[GridPos] = field(default_factory=list)
    visited: List[List[bool]] = field(default_factory=list)
    percepts: Percepts = field(default_factory=Percepts)
    score: int = 0
    moves: int = 0
    game_over: bool = False
    won: bool = False
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    seed: Optional[int] = None

    def __post_init__(self):
        if not self.visited:
            self.visited = [[False] * self.size for _ in range(self.size)]
            self.mark_visited(START_POS)

    # ========================================================================
    # CONSTRUCTION
    # ========================================================================

    @classmethod
    def from_layout(
            cls,
            layout: WorldLayout,
            session_id: Optional[str] = None,
            created_at: Optional[datetime] = None,
            seed: Optional[int] = None,
    ) -> GameSession:
        """
        Build a fresh session from a generated layout.

        Percepts are left empty; the engine computes them for the start cell.
        """
        return cls(
            id=session_id or str(uuid.uuid4()),
            size=layout.size,
            player=Player(pos=layout.player),
            wumpus=Wumpus(pos=layout.wumpus),
            gold=Gold(pos=layout.gold),
            pits=list(layout.pits),
            created_at=created_at or datetime.now(timezone.utc),
            seed=seed,
        )

    # ========================================================================
    # QUERIES
    # ========================================================================

    @property
    def grid(self) -> Grid:
        return Grid(self.size)

    @property
    def status(self) -> str:
        """'active' while accepting actions, 'over' once terminal."""
        return "over" if self.game_over else "active"

    def is_pit(self, pos: GridPos) -> bool:
        return pos in self.pits

    def mark_visited(self, pos: GridPos) -> None:
        x, y = pos
        self.visited[y][x] = True

    # ========================================================================
    # VIEWS
    # ========================================================================

    def layout_dict(self) -> Dict[str, Any]:
        """Hazard and gold coordinates. Never part of the redacted view mid-game."""
        return {
            "wumpus": self.wumpus.to_dict(),
            "gold": self.gold.to_dict(),
            "pits": [{"x": x, "y": y} for x, y in self.pits],
        }

    def redacted_view(self) -> Dict[str, Any]:
        """
        State that is safe to show an untrusted player.

        Hazard and gold coordinates are only included (under "world") once
        the game is over; before that the percepts are the only hint.
        """
        view = {
            "id": self.id,
            "size": self.size,
            "player": self.player.to_dict(),
            "percepts": self.percepts.to_dict(),
            "score": self.score,
            "moves": self.moves,
            "visited": [row[:] for row in self.visited],
            "game_over": self.game_over,
            "won": self.won,
        }
        if self.game_over:
            view["world"] = self.layout_dict()
        return view

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize the complete session (debug view).

        Returns:
            JSON-serializable dictionary including hazard coordinates
        """
        return {
            "id": self.id,
            "size": self.size,
            "player": self.player.to_dict(),
            **self.layout_dict(),
            "visited": [row[:] for row in self.visited],
            "percepts": self.percepts.to_dict(),
            "score": self.score,
            "moves": self.moves,
            "game_over": self.game_over,
            "won": self.won,
            "created_at": self.created_at.isoformat(),
            "seed": self.seed,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> GameSession:
        """
        Deserialize a session from to_dict() output.

        Args:
            data: Dictionary from to_dict()

        Returns:
            Reconstructed GameSession
        """
        return cls(
            id=data["id"],
            size=data["size"],
            player=Player.from_dict(data["player"]),
            wumpus=Wumpus.from_dict(data["wumpus"]),
            gold=Gold.from_dict(data["gold"]),
            pits=[_pos((pit["x"], pit["y"])) for pit in data.get("pits", [])],
            visited=[list(row) for row in data["visited"]],
            percepts=Percepts.from_dict(data.get("percepts", {})),
            score=data.get("score", 0),
            moves=data.get("moves", 0),
            game_over=data.get("game_over", False),
            won=data.get("won", False),
            created_at=datetime.fromisoformat(data["created_at"]),
            seed=data.get("seed"),
        )

    def clone(self) -> GameSession:
        """
        Create an independent deep copy of this session.

        Returns:
            Copy sharing no mutable state with this session
        """
        return GameSession.from_dict(self.to_dict())

    def __str__(self) -> str:
        return (f"GameSession(id={self.id}, size={self.size}, score={self.score}, "
                f"moves={self.moves}, status={self.status})")
