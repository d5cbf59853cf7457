from .store import SessionStore, InMemorySessionStore, DEFAULT_TTL
from .service import GameService
from .sweeper import sweep_periodically

__all__ = [
    "SessionStore",
    "InMemorySessionStore",
    "DEFAULT_TTL",
    "GameService",
    "sweep_periodically",
]
