from wumpus.core.types import Direction
from wumpus.mechanics import PerceptCalculator

from conftest import build_session


def test_breeze_next_to_pit():
    session = build_session(pits=[(1, 0)], wumpus=(3, 3), gold=(2, 2))
    percepts = PerceptCalculator().for_session(session)
    assert percepts.breeze
    assert not percepts.stench
    assert not percepts.glitter


def test_no_breeze_on_diagonal():
    session = build_session(pits=[(1, 1)], wumpus=(3, 3), gold=(2, 2))
    assert not PerceptCalculator().for_session(session).breeze


def test_stench_only_while_wumpus_alive():
    session = build_session(wumpus=(0, 1), pits=[(3, 3)])
    calculator = PerceptCalculator()
    assert calculator.for_session(session).stench

    session.wumpus.alive = False
    assert not calculator.for_session(session).stench


def test_adjacency_does_not_wrap():
    # (3, 0) would neighbour (0, 0) on a torus
    session = build_session(pits=[(3, 0)], wumpus=(0, 3), gold=(2, 2))
    percepts = PerceptCalculator().for_session(session)
    assert not percepts.breeze
    assert not percepts.stench


def test_glitter_on_gold_cell_until_collected():
    session = build_session(player_pos=(2, 2), gold=(2, 2))
    calculator = PerceptCalculator()
    assert calculator.for_session(session).glitter

    session.gold.collected = True
    session.player.has_gold = True
    assert not calculator.for_session(session).glitter


def test_bump_and_scream_never_computed():
    session = build_session(direction=Direction.WEST)
    session.percepts.bump = True
    session.percepts.scream = True
    percepts = PerceptCalculator().for_session(session)
    assert not percepts.bump
    assert not percepts.scream


def test_percepts_are_idempotent():
    session = build_session(player_pos=(1, 1), pits=[(1, 2)], wumpus=(2, 1), gold=(1, 1))
    calculator = PerceptCalculator()
    assert calculator.for_session(session) == calculator.for_session(session)
