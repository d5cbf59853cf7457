import time
from datetime import timedelta

import pytest
from fastapi.testclient import TestClient

from api.app import create_app
from infra.settings import Settings
from runtime import GameService, InMemorySessionStore
from wumpus.core.types import Direction

from conftest import build_session


@pytest.fixture
def service():
    return GameService()


@pytest.fixture
def client(service):
    settings = Settings(log_file=None)
    return TestClient(create_app(settings=settings, service=service))


def create(client, **body):
    response = client.post("/api/game/create", json=body)
    assert response.status_code == 201, response.text
    return response.json()["data"]


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_create_game_returns_redacted_state(client):
    data = create(client, gridSize=6, seed=5)

    assert data["gridSize"] == 6
    assert data["player"] == {
        "x": 0, "y": 0, "direction": "NORTH", "alive": True, "hasGold": False, "arrows": 1,
    }
    assert data["score"] == 0
    assert data["moves"] == 0
    assert data["visited"][0][0] is True
    assert not {"wumpus", "gold", "pits", "world"} & set(data)


def test_create_game_default_size(client):
    assert create(client)["gridSize"] == 4


def test_create_game_without_body(client):
    response = client.post("/api/game/create")
    assert response.status_code == 201
    assert response.json()["data"]["gridSize"] == 4


@pytest.mark.parametrize("size", [3, 11])
def test_create_game_rejects_size(client, size):
    response = client.post("/api/game/create", json={"gridSize": size})
    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["error"] == "INVALID_INPUT"
    assert body["message"] == "Grid size must be between 4 and 10"


def test_create_game_rejects_non_integer(client):
    response = client.post("/api/game/create", json={"gridSize": "big"})
    assert response.status_code == 400
    assert response.json()["error"] == "INVALID_INPUT"


def test_get_game(client):
    game_id = create(client, seed=1)["gameId"]
    response = client.get(f"/api/game/{game_id}")

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["gameId"] == game_id
    assert data["gameOver"] is False
    assert "world" not in data


def test_get_unknown_game(client):
    response = client.get("/api/game/nope")
    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Game not found", "error": "NOT_FOUND"}


def test_debug_view_reveals_layout(client):
    game_id = create(client, seed=9)["gameId"]
    data = client.get(f"/api/game/{game_id}/debug").json()["data"]

    assert {"wumpus", "gold", "pits", "createdAt"} <= set(data)
    assert data["seed"] == 9
    assert (data["wumpus"]["x"], data["wumpus"]["y"]) != (0, 0)


def test_debug_view_can_be_disabled(service):
    client = TestClient(create_app(settings=Settings(log_file=None, debug_routes=False), service=service))
    game_id = create(client)["gameId"]
    response = client.get(f"/api/game/{game_id}/debug")
    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Not Found", "error": "NOT_FOUND"}


def test_action_turn(client):
    game_id = create(client, seed=2)["gameId"]
    response = client.post(f"/api/game/{game_id}/action", json={"action": "Right"})

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "Turned right"
    assert body["scoreDelta"] == -1
    assert body["data"]["player"]["direction"] == "EAST"
    assert body["data"]["moves"] == 1


def test_action_missing(client):
    game_id = create(client)["gameId"]
    response = client.post(f"/api/game/{game_id}/action", json={})
    assert response.status_code == 400
    assert response.json()["message"] == "Action is required"


def test_action_unknown(client):
    game_id = create(client)["gameId"]
    response = client.post(f"/api/game/{game_id}/action", json={"action": "jump"})
    assert response.status_code == 400
    assert response.json()["error"] == "UNKNOWN_ACTION"


def test_action_unknown_game(client):
    response = client.post("/api/game/missing/action", json={"action": "left"})
    assert response.status_code == 404


def test_death_then_game_over(client, service):
    service.store.put(build_session(session_id="pit", direction=Direction.NORTH, pits=[(0, 1)]))

    body = client.post("/api/game/pit/action", json={"action": "forward"}).json()
    data = body["data"]
    assert body["scoreDelta"] == -1001
    assert data["gameOver"] is True
    assert data["won"] is False
    assert data["player"]["alive"] is False
    assert data["world"]["pits"] == [{"x": 0, "y": 1}]

    response = client.post("/api/game/pit/action", json={"action": "left"})
    assert response.status_code == 400
    assert response.json()["error"] == "GAME_OVER"


def test_shoot_without_arrow(client, service):
    service.store.put(build_session(session_id="empty", arrows=0))
    response = client.post("/api/game/empty/action", json={"action": "shoot"})

    assert response.status_code == 400
    assert response.json() == {"success": False, "message": "No arrows left", "error": "NO_ARROWS"}
    assert client.get("/api/game/empty").json()["data"]["score"] == 0


def test_delete_game(client):
    game_id = create(client)["gameId"]

    response = client.delete(f"/api/game/{game_id}")
    assert response.status_code == 200
    assert response.json()["message"] == "Game deleted successfully"
    assert client.get(f"/api/game/{game_id}").status_code == 404
    assert client.delete(f"/api/game/{game_id}").status_code == 404


def test_create_app_uses_configured_ttl():
    app = create_app(settings=Settings(log_file=None, session_ttl_seconds=60))
    assert app.state.service.store.ttl == timedelta(seconds=60)


def test_unexpected_error_uses_envelope():
    class BrokenService(GameService):
        def get_game(self, session_id):
            raise RuntimeError("store unavailable")

    app = create_app(settings=Settings(log_file=None), service=BrokenService())
    client = TestClient(app, raise_server_exceptions=False)

    response = client.get("/api/game/abc")
    assert response.status_code == 500
    assert response.json() == {
        "success": False, "message": "Something went wrong", "error": "INTERNAL_ERROR",
    }


def test_lifespan_runs_and_stops_sweeper():
    class CountingStore(InMemorySessionStore):
        sweeps = 0

        def sweep(self):
            self.sweeps += 1
            return super().sweep()

    store = CountingStore()
    settings = Settings(log_file=None, sweep_interval_seconds=0.01)
    app = create_app(settings=settings, service=GameService(store=store))

    with TestClient(app) as client:
        assert client.get("/health").status_code == 200
        time.sleep(0.2)

    assert store.sweeps >= 1
    swept = store.sweeps
    time.sleep(0.05)
    assert store.sweeps == swept
