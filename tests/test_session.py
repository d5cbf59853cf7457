from datetime import datetime, timezone

from wumpus.core.types import Direction

from conftest import build_session

HIDDEN_KEYS = {"wumpus", "gold", "pits", "world"}


def test_redacted_view_hides_layout_mid_game():
    session = build_session()
    view = session.redacted_view()

    assert not HIDDEN_KEYS & set(view)
    assert set(view) == {
        "id", "size", "player", "percepts", "score", "moves", "visited", "game_over", "won",
    }


def test_redacted_view_reveals_layout_once_over():
    session = build_session(wumpus=(3, 3), gold=(2, 2), pits=[(3, 0)])
    session.game_over = True
    world = session.redacted_view()["world"]

    assert world["wumpus"] == {"x": 3, "y": 3, "alive": True}
    assert world["gold"] == {"x": 2, "y": 2, "collected": False}
    assert world["pits"] == [{"x": 3, "y": 0}]


def test_full_view_includes_hazards():
    data = build_session().to_dict()
    assert {"wumpus", "gold", "pits", "created_at", "seed"} <= set(data)


def test_clone_shares_no_state():
    session = build_session(direction=Direction.EAST)
    session.created_at = datetime(2024, 1, 1, tzinfo=timezone.utc)
    copy = session.clone()

    copy.player.pos = (1, 0)
    copy.visited[0][1] = True
    copy.pits.append((1, 1))
    copy.wumpus.alive = False

    assert session.player.pos == (0, 0)
    assert not session.visited[0][1]
    assert (1, 1) not in session.pits
    assert session.wumpus.alive
    assert copy.created_at == session.created_at
    assert copy.player.direction == Direction.EAST


def test_status_tracks_game_over():
    session = build_session()
    assert session.status == "active"
    session.game_over = True
    assert session.status == "over"
