from __future__ import annotations

import asyncio

from infra.logger import get_logger
from .store import SessionStore

log = get_logger(__name__)


async def sweep_periodically(store: SessionStore, interval_seconds: float) -> None:
    """
    Purge expired sessions every interval until cancelled.

    Meant to run as a background task for the lifetime of the API process.
    """
    log.info("Session sweeper started (every %.0fs)", interval_seconds)
    try:
        while True:
            await asyncio.sleep(interval_seconds)
            store.sweep()
    except asyncio.CancelledError:
        log.info("Session sweeper stopped")
        raise
