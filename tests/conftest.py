from pathlib import Path
import sys

# Add repository root to sys.path so tests can import local modules without installation.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from wumpus import WumpusEngine
from wumpus.core.types import Direction
from wumpus.world.session import GameSession, Player, Wumpus, Gold


def build_session(
    size=4,
    player_pos=(0, 0),
    direction=Direction.NORTH,
    wumpus=(3, 3),
    gold=(2, 2),
    pits=((3, 0),),
    arrows=1,
    session_id="test-session",
):
    """Hand-built session with a known layout."""
    return GameSession(
        id=session_id,
        size=size,
        player=Player(pos=player_pos, direction=direction, arrows=arrows),
        wumpus=Wumpus(pos=wumpus),
        gold=Gold(pos=gold),
        pits=list(pits),
    )


@pytest.fixture
def engine():
    return WumpusEngine()


@pytest.fixture
def make_session():
    return build_session
