"""
Example script demonstrating the rules engine on a fixed layout.

This shows how to:
1. Create a seeded game
2. Apply actions and read percepts
3. Inspect the outcome once the game is over
"""

from wumpus import WumpusEngine, WumpusError
from game_runner import format_board, format_status


def main():
    """Walk a short scripted route and print every turn."""

    print("Wumpus World - Example Game")
    print("=" * 60)

    engine = WumpusEngine()
    session = engine.create(grid_size=4, seed=7)

    print(format_board(session))
    print(format_status(session))

    script = ["right", "shoot", "forward", "left", "forward", "grab", "climb"]
    for token in script:
        if session.game_over:
            break
        print("-" * 60)
        print(f"> {token}")
        try:
            outcome = engine.apply_action(session, token)
        except WumpusError as exc:
            print(f"  rejected: {exc.message} [{exc.code}]")
            continue
        session = outcome.session
        print(f"  {outcome.message} ({outcome.score_delta:+d})")
        print(format_board(session))
        print(format_status(session))

    print("=" * 60)
    print(f"Final: {session}")
    if session.game_over:
        print(f"Layout: {session.redacted_view()['world']}")


if __name__ == "__main__":
    main()
