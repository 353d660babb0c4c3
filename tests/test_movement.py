from __future__ import annotations

from minr.adapters import Move, SimulatedTurtle
from minr.catalog import MaterialCatalog
from minr.models import Outcome
from minr.movement import ResilientMover

GRAVEL = "minecraft:gravel"
STONE = "minecraft:stone"


def _mover(turtle: SimulatedTurtle, **kwargs) -> ResilientMover:
    return ResilientMover(turtle, MaterialCatalog.default(), **kwargs)


def test_forward_into_open_space() -> None:
    turtle = SimulatedTurtle()

    assert _mover(turtle).move(Move.FORWARD) is Outcome.SUCCESS
    assert turtle.position == (1, 0, 0)
    assert turtle.count("dig:ahead") == 0


def test_forward_clears_collapsing_column_with_one_dig_per_block() -> None:
    turtle = SimulatedTurtle({(1, y, 0): GRAVEL for y in range(4)})

    assert _mover(turtle).move(Move.FORWARD) is Outcome.SUCCESS
    assert turtle.count("dig:ahead") == 4
    assert turtle.position == (1, 0, 0)
    assert turtle.heading == 0


def test_forward_never_digs_through_stable_material() -> None:
    turtle = SimulatedTurtle({(1, 0, 0): STONE})

    assert _mover(turtle).move(Move.FORWARD) is Outcome.BLOCKED
    assert turtle.count("dig:ahead") == 0
    assert turtle.blocks[(1, 0, 0)] == STONE


def test_forward_clears_fill_under_a_solid_block() -> None:
    turtle = SimulatedTurtle({(1, 0, 0): GRAVEL, (1, 1, 0): STONE})

    assert _mover(turtle).move(Move.FORWARD) is Outcome.SUCCESS
    assert turtle.count("dig:ahead") == 1
    assert turtle.blocks[(1, 1, 0)] == STONE


def test_forward_blocked_by_entity() -> None:
    turtle = SimulatedTurtle(entities=[(1, 0, 0)])

    assert _mover(turtle).move(Move.FORWARD) is Outcome.BLOCKED
    assert turtle.position == (0, 0, 0)


def test_forward_gives_up_after_clearing_limit() -> None:
    turtle = SimulatedTurtle({(1, y, 0): GRAVEL for y in range(10)})

    assert _mover(turtle, max_clear_attempts=3).move(Move.FORWARD) is Outcome.STUCK_CLEARING
    assert turtle.count("dig:ahead") == 3
    assert turtle.position == (0, 0, 0)


def test_up_clears_falling_material() -> None:
    turtle = SimulatedTurtle({(0, 1, 0): GRAVEL, (0, 2, 0): GRAVEL})

    assert _mover(turtle).move(Move.UP) is Outcome.SUCCESS
    assert turtle.count("dig:up") == 2
    assert turtle.position == (0, 1, 0)


def test_back_uses_native_step_when_possible() -> None:
    turtle = SimulatedTurtle()

    assert _mover(turtle).move(Move.BACK) is Outcome.SUCCESS
    assert turtle.position == (-1, 0, 0)
    assert turtle.count("turn:right") == 0


def test_back_turns_around_to_clear_fill_and_restores_heading() -> None:
    turtle = SimulatedTurtle({(-1, 0, 0): GRAVEL})

    assert _mover(turtle).move(Move.BACK) is Outcome.SUCCESS
    assert turtle.position == (-1, 0, 0)
    assert turtle.heading == 0
    assert turtle.count("dig:ahead") == 1
    assert turtle.count("turn:right") == 2
    assert turtle.count("turn:left") == 2


def test_back_blocked_by_wall_restores_heading() -> None:
    turtle = SimulatedTurtle({(-1, 0, 0): STONE})

    assert _mover(turtle).move(Move.BACK) is Outcome.BLOCKED
    assert turtle.position == (0, 0, 0)
    assert turtle.heading == 0
    assert turtle.count("dig:ahead") == 0
