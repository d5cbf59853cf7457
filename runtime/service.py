from __future__ import annotations

import threading
from typing import Any, Dict, Optional

from wumpus import WumpusEngine, GameSession, NotFound, WumpusError
from wumpus.mechanics import ActionOutcome

from infra.logger import get_logger
from .store import SessionStore, InMemorySessionStore

log = get_logger(__name__)


class GameService:
    """
    Drives the rules engine against a session store.

    Each call reads one session, runs the engine, and writes the new
    snapshot back while holding a lock, so concurrent requests for the
    same session are applied one after the other.
    """

    def __init__(
        self,
        store: Optional[SessionStore] = None,
        engine: Optional[WumpusEngine] = None,
    ):
        self.store = store if store is not None else InMemorySessionStore()
        self.engine = engine if engine is not None else WumpusEngine()
        self._lock = threading.RLock()

    # ------------------------------------------------------------------#
    # Core API
    # ------------------------------------------------------------------#
    def create_game(self, grid_size: int, seed: Optional[int] = None) -> GameSession:
        session = self.engine.create(grid_size=grid_size, seed=seed)
        self.store.put(session)
        log.info("Created game %s (%dx%d, seed=%s)", session.id, session.size, session.size, seed)
        return session

    def get_game(self, session_id: str) -> GameSession:
        session = self.store.get(session_id)
        if session is None:
            raise NotFound("Game not found")
        return session

    def perform_action(self, session_id: str, action: Any) -> ActionOutcome:
        """
        Apply an action and store the resulting snapshot.

        Raises:
            NotFound: If the session id is unknown
            WumpusError: Any engine failure; the stored session is unchanged
        """
        with self._lock:
            session = self.get_game(session_id)
            try:
                outcome = self.engine.apply_action(session, action)
            except WumpusError as exc:
                log.info("Game %s rejected action %r: %s", session_id, action, exc.message)
                raise
            self.store.put(outcome.session)

        if outcome.session.game_over:
            log.info(
                "Game %s over: won=%s score=%d moves=%d",
                session_id, outcome.session.won, outcome.session.score, outcome.session.moves,
            )
        return outcome

    def delete_game(self, session_id: str) -> None:
        if not self.store.delete(session_id):
            raise NotFound("Game not found")
        log.info("Deleted game %s", session_id)

    def sweep(self) -> list[str]:
        return self.store.sweep()

    def stats(self) -> Dict[str, Any]:
        return {"active_sessions": len(self.store)}
