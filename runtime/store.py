"""
Session storage.

The engine never holds sessions itself; whoever drives it injects a
SessionStore. The store is the single owner of each stored snapshot.
"""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone
from typing import Callable, Dict, List, Optional

from wumpus.world.session import GameSession

from infra.logger import get_logger

log = get_logger(__name__)

DEFAULT_TTL = timedelta(hours=24)


class SessionStore(ABC):
    """
    Keyed map from session id to the latest GameSession snapshot.

    Subclasses must implement get, put, delete, sweep and list_ids.
    """

    @abstractmethod
    def get(self, session_id: str) -> Optional[GameSession]:
        """Return the stored session, or None if unknown."""

    @abstractmethod
    def put(self, session: GameSession) -> None:
        """Insert or replace a session under its own id."""

    @abstractmethod
    def delete(self, session_id: str) -> bool:
        """Remove a session. Returns True if it existed."""

    @abstractmethod
    def sweep(self) -> List[str]:
        """Purge expired sessions and return their ids."""

    @abstractmethod
    def list_ids(self) -> List[str]:
        """Ids of all stored sessions."""

    def __len__(self) -> int:
        return len(self.list_ids())

    def __contains__(self, session_id: str) -> bool:
        return self.get(session_id) is not None


class InMemorySessionStore(SessionStore):
    """
    Process-local store with age-based retention.

    A session expires once now - created_at exceeds the TTL. Expired
    sessions stay readable until the next sweep.

    A lock guards the map so handlers running in a threadpool see
    consistent snapshots. Read-modify-write sequences are serialized by the
    caller (GameService).
    """

    def __init__(
        self,
        ttl: timedelta = DEFAULT_TTL,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """
        Args:
            ttl: Maximum session age before a sweep purges it
            clock: Returns the current UTC time (injectable for tests)
        """
        self.ttl = ttl
        self._clock = clock or (lambda: datetime.now(timezone.utc))
        self._sessions: Dict[str, GameSession] = {}
        self._lock = threading.RLock()

    def get(self, session_id: str) -> Optional[GameSession]:
        with self._lock:
            return self._sessions.get(session_id)

    def put(self, session: GameSession) -> None:
        with self._lock:
            self._sessions[session.id] = session

    def delete(self, session_id: str) -> bool:
        with self._lock:
            return self._sessions.pop(session_id, None) is not None

    def sweep(self) -> List[str]:
        now = self._clock()
        with self._lock:
            expired = [
                session_id for session_id, session in self._sessions.items()
                if now - session.created_at > self.ttl
            ]
            for session_id in expired:
                del self._sessions[session_id]

        if expired:
            log.info("Swept %d expired session(s)", len(expired))
        return expired

    def list_ids(self) -> List[str]:
        with self._lock:
            return list(self._sessions)
