from __future__ import annotations

import logfire

from infra.logger import get_logger

log = get_logger(__name__)

_configured = False


def configure_logfire(service_name: str = "wumpus-world") -> None:
    """
    Configure logfire once per process.

    Nothing is sent unless a LOGFIRE_TOKEN is present in the environment.
    """
    global _configured
    if _configured:
        return

    logfire.configure(
        service_name=service_name,
        send_to_logfire="if-token-present",
        console=False,
    )
    _configured = True
    log.debug("logfire configured for %s", service_name)


def instrument_app(app) -> None:
    """Attach request tracing to a FastAPI app."""
    logfire.instrument_fastapi(app)
