from __future__ import annotations

import pytest

from minr.adapters import SimulatedTurtle, SlotDetail, generate_strip_world
from minr.config import MiningConfig
from minr.mining import StripController
from minr.models import Outcome, StripState


def _solid_world(depth: int, height: int) -> dict:
    return generate_strip_world(depth, height, ore_chance=0.0, gravel_chance=0.0)


def _full_of_diamonds() -> dict[int, SlotDetail]:
    return {index: SlotDetail("minecraft:diamond", 64) for index in range(1, 17)}


def test_three_by_two_strip_completes_and_returns_to_mouth() -> None:
    turtle = SimulatedTurtle(_solid_world(3, 2))
    controller = StripController(turtle, MiningConfig(depth=3, height=2))

    report = controller.run()

    assert report.state is StripState.COMPLETED
    assert report.position == 3
    assert report.reason is None
    assert report.rows_excavated == 3
    assert report.returned_to_origin
    assert controller.position == 0
    assert turtle.count("move:forward") == 3
    assert turtle.count("move:back") == 3
    assert turtle.count("dig:ahead") == 6
    # Each wall scan turns left, right, right, left.
    assert turtle.count("turn:left") == 6
    assert turtle.count("turn:right") == 6
    assert turtle.position == (0, 0, 0)
    assert turtle.heading == 0


@pytest.mark.parametrize(("depth", "height"), [(1, 2), (4, 3), (2, 5)])
def test_unobstructed_strip_forward_moves_match_depth(depth: int, height: int) -> None:
    turtle = SimulatedTurtle(_solid_world(depth, height))

    report = StripController(turtle, MiningConfig(depth=depth, height=height)).run()

    assert report.state is StripState.COMPLETED
    assert turtle.count("move:forward") == depth
    assert turtle.count("dig:ahead") >= depth * height
    assert turtle.position == (0, 0, 0)


def test_inventory_full_during_row_two_retreats_two_rows() -> None:
    blocks = _solid_world(5, 2)
    blocks[(3, 0, 0)] = "minecraft:iron_ore"
    turtle = SimulatedTurtle(blocks, inventory=_full_of_diamonds())
    controller = StripController(turtle, MiningConfig(depth=5, height=2))

    report = controller.run()

    assert report.state is StripState.ABORTED
    assert report.position == 2
    assert report.reason is Outcome.INVENTORY_FULL
    assert report.rows_excavated == 2
    assert turtle.count("move:forward") == 2
    assert turtle.count("move:back") == 2
    assert turtle.position == (0, 0, 0)
    assert controller.position == 0


def test_blocked_advance_aborts_from_current_row() -> None:
    blocks = _solid_world(4, 2)
    blocks[(2, 0, 0)] = "minecraft:bedrock"
    turtle = SimulatedTurtle(blocks)

    report = StripController(turtle, MiningConfig(depth=4, height=2)).run()

    assert report.state is StripState.ABORTED
    assert report.position == 1
    assert report.reason is Outcome.BLOCKED
    assert turtle.count("move:back") == 1
    assert turtle.position == (0, 0, 0)


def test_wall_scan_failure_retreats_from_incremented_position() -> None:
    blocks = _solid_world(4, 2)
    blocks[(2, 0, -1)] = "minecraft:iron_ore"
    turtle = SimulatedTurtle(blocks, inventory=_full_of_diamonds())

    report = StripController(turtle, MiningConfig(depth=4, height=2)).run()

    assert report.state is StripState.ABORTED
    assert report.position == 2
    assert report.reason is Outcome.INVENTORY_FULL
    assert turtle.count("move:forward") == 2
    assert turtle.count("move:back") == 2
    assert turtle.position == (0, 0, 0)
    assert turtle.heading == 0


def test_return_to_origin_from_mouth_is_a_no_op() -> None:
    turtle = SimulatedTurtle(_solid_world(2, 2))
    controller = StripController(turtle, MiningConfig(depth=2, height=2))

    assert controller.return_to_origin(0) == 0
    assert controller.return_to_origin(0) == 0
    assert turtle.actions == []


def test_collapsed_ceiling_is_cleared_during_wall_scan() -> None:
    blocks = _solid_world(2, 2)
    blocks[(1, 2, 0)] = "minecraft:gravel"
    turtle = SimulatedTurtle(blocks)

    report = StripController(turtle, MiningConfig(depth=2, height=2)).run()

    assert report.state is StripState.COMPLETED
    assert turtle.count("dig:up") == 1
    assert turtle.position == (0, 0, 0)


def test_auto_refuel_tops_up_before_mining() -> None:
    turtle = SimulatedTurtle(
        _solid_world(1, 2),
        fuel=10,
        inventory={1: SlotDetail("minecraft:coal", 5)},
    )

    report = StripController(turtle, MiningConfig(depth=1, height=2, auto_refuel=True)).run()

    assert report.state is StripState.COMPLETED
    assert turtle.held("minecraft:coal") == 4
    assert turtle.fuel_level() == 84


def test_running_dry_strands_the_turtle_and_reports_distance() -> None:
    turtle = SimulatedTurtle(_solid_world(2, 2), fuel=3)

    report = StripController(turtle, MiningConfig(depth=2, height=2)).run()

    assert report.state is StripState.ABORTED
    assert report.position == 1
    assert report.reason is Outcome.BLOCKED
    assert report.stranded_distance == 1
    assert not report.returned_to_origin
    assert turtle.position == (1, 0, 0)
    assert turtle.heading == 0
