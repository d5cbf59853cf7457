"""HTTP API entrypoint for driving Wumpus World from the mobile client."""

from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager
from datetime import timedelta

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from wumpus import WumpusError, InvalidInput, NotFound
from runtime import GameService, InMemorySessionStore, sweep_periodically
from runtime.logfire_config import configure_logfire, instrument_app
from infra.logger import get_logger
from infra.settings import Settings

from .schemas import (
    ActionRequest,
    ActionResponse,
    CreateGameRequest,
    DebugGameView,
    DebugResponse,
    GameResponse,
    GameView,
    MessageResponse,
)

log = get_logger(__name__)

def _error_status(exc: WumpusError) -> int:
    if isinstance(exc, NotFound):
        return status.HTTP_404_NOT_FOUND
    return status.HTTP_400_BAD_REQUEST


def create_app(settings: Settings | None = None, service: GameService | None = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Runtime configuration (default: read from the environment)
        service: Game service to expose (default: in-memory store with the configured TTL)
    """
    settings = settings or Settings.from_env()
    if service is None:
        service = GameService(
            store=InMemorySessionStore(ttl=timedelta(seconds=settings.session_ttl_seconds))
        )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        sweeper = asyncio.create_task(
            sweep_periodically(service.store, settings.sweep_interval_seconds)
        )
        try:
            yield
        finally:
            sweeper.cancel()
            try:
                await sweeper
            except asyncio.CancelledError:
                pass

    # Configure observability before routes are used.
    configure_logfire()

    app = FastAPI(title="Wumpus World API", lifespan=lifespan)
    app.state.settings = settings
    app.state.service = service
    instrument_app(app)

    # The mobile client talks to the API from arbitrary origins.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(WumpusError)
    async def wumpus_error_handler(request: Request, exc: WumpusError):
        return JSONResponse(
            status_code=_error_status(exc),
            content=exc.to_dict(),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=InvalidInput("Invalid request body").to_dict(),
        )

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        log.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"success": False, "message": "Something went wrong", "error": "INTERNAL_ERROR"},
        )

    @app.get("/health")
    def health():
        return {
            "status": "ok",
            "message": "Wumpus World API is running",
            **service.stats(),
        }

    @app.post(
        "/api/game/create",
        status_code=status.HTTP_201_CREATED,
        response_model=GameResponse,
        response_model_exclude_none=True,
    )
    def create_game(request: CreateGameRequest | None = None):
        request = request or CreateGameRequest()
        grid_size = request.grid_size if request.grid_size is not None else settings.default_grid_size
        session = service.create_game(grid_size, seed=request.seed)
        return GameResponse(message="Game created successfully", data=GameView.from_session(session))

    @app.get("/api/game/{game_id}", response_model=GameResponse, response_model_exclude_none=True)
    def get_game(game_id: str):
        session = service.get_game(game_id)
        return GameResponse(data=GameView.from_session(session))

    @app.get("/api/game/{game_id}/debug", response_model=DebugResponse)
    def get_full_game(game_id: str):
        if not settings.debug_routes:
            raise NotFound("Not Found")
        session = service.get_game(game_id)
        return DebugResponse(data=DebugGameView.from_session(session))

    @app.post("/api/game/{game_id}/action", response_model=ActionResponse, response_model_exclude_none=True)
    def perform_action(game_id: str, request: ActionRequest):
        outcome = service.perform_action(game_id, request.action)
        return ActionResponse(
            message=outcome.message,
            score_delta=outcome.score_delta,
            data=GameView.from_session(outcome.session),
        )

    @app.delete("/api/game/{game_id}", response_model=MessageResponse)
    def delete_game(game_id: str):
        service.delete_game(game_id)
        return MessageResponse(message="Game deleted successfully")

    log.info("Wumpus World API ready (debug routes %s)", "on" if settings.debug_routes else "off")
    return app
