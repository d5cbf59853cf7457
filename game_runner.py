"""
Command-line entrypoint.

    python game_runner.py serve [--host HOST] [--port PORT]
    python game_runner.py play [--size N] [--seed S]

'serve' runs the HTTP API under uvicorn. 'play' runs a game in the
terminal against the same engine, reading one action token per line.
"""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from wumpus import WumpusEngine, WumpusError, GameSession
from wumpus.core.validation import available_actions
from infra.logger import configure_logging, get_logger
from infra.settings import Settings

log = get_logger(__name__)

FACING_GLYPH = {"NORTH": "^", "EAST": ">", "SOUTH": "v", "WEST": "<"}


def format_board(session: GameSession) -> str:
    """Fog-of-war board: '@' player, '.' visited, '#' unexplored. Row 0 is printed last."""
    view = session.redacted_view()
    player = view["player"]
    lines = []
    for y in reversed(range(view["size"])):
        row = []
        for x in range(view["size"]):
            if (x, y) == (player["x"], player["y"]):
                row.append(FACING_GLYPH[player["direction"]])
            elif view["visited"][y][x]:
                row.append(".")
            else:
                row.append("#")
        lines.append(" ".join(row))
    return "\n".join(lines)


def format_status(session: GameSession) -> str:
    sensed = ", ".join(session.percepts.active()) or "nothing"
    return (f"score={session.score} moves={session.moves} arrows={session.player.arrows} "
            f"gold={'yes' if session.player.has_gold else 'no'} | you sense: {sensed}")


def play(size: int, seed: Optional[int]) -> GameSession:
    engine = WumpusEngine()
    session = engine.create(grid_size=size, seed=seed)
    print(format_board(session))
    print(format_status(session))
    while not session.game_over:
        prompt = "/".join(action.value for action in available_actions(session))
        try:
            token = input(f"action ({prompt}, q to quit)> ")
        except EOFError:
            break
        if token.strip().lower() in {"q", "quit"}:
            break
        try:
            outcome = engine.apply_action(session, token)
        except WumpusError as exc:
            print(f"! {exc.message}")
            continue
        session = outcome.session
        print(f"{outcome.message} ({outcome.score_delta:+d})")
        print(format_board(session))
        print(format_status(session))

    if session.game_over:
        print("You won!" if session.won else "Game over.")
    return session


def serve(host: str, port: int, settings: Settings) -> None:
    import uvicorn

    from api.app import create_app

    # log_config=None keeps the handlers installed by configure_logging()
    uvicorn.run(create_app(settings), host=host, port=port, log_config=None)


def main(argv: Optional[Sequence[str]] = None) -> None:
    settings = Settings.from_env()

    parser = argparse.ArgumentParser(description="Wumpus World")
    sub = parser.add_subparsers(dest="command", required=True)

    serve_parser = sub.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default=settings.host)
    serve_parser.add_argument("--port", type=int, default=settings.port)

    play_parser = sub.add_parser("play", help="Play in the terminal")
    play_parser.add_argument("--size", type=int, default=settings.default_grid_size)
    play_parser.add_argument("--seed", type=int, default=None)

    args = parser.parse_args(argv)

    if args.command == "serve":
        configure_logging(settings.log_level, json=settings.log_json, logfile=settings.log_file)
        log.info("Serving on %s:%d", args.host, args.port)
        serve(args.host, args.port, settings)
    else:
        configure_logging("WARNING", logfile=None)
        play(args.size, args.seed)


if __name__ == "__main__":
    main()
