"""In-memory turtle used for local demos and tests.

The world is a sparse map of block coordinates to material ids. ``x`` runs
along the strip, ``y`` is vertical and ``z`` is lateral (positive to the
right of the starting heading). Unstable materials fall: whenever a cell is
vacated, the stack of unstable blocks directly above it shifts down by one.
"""

from __future__ import annotations

import random
from collections.abc import Iterable, Mapping

from minr.adapters.turtle import (
    INVENTORY_SIZE,
    UNLIMITED_FUEL,
    Facing,
    FuelLevel,
    Inspection,
    Move,
    SlotDetail,
    Turn,
    TurtleActuator,
)
from minr.catalog import DROPS, UNSTABLE_MATERIALS

Coord = tuple[int, int, int]

_HEADINGS: tuple[Coord, ...] = ((1, 0, 0), (0, 0, 1), (-1, 0, 0), (0, 0, -1))

DEFAULT_FUEL_VALUES: Mapping[str, int] = {
    "minecraft:coal": 80,
    "minecraft:charcoal": 80,
    "minecraft:coal_block": 800,
    "minecraft:lava_bucket": 1000,
}

UNBREAKABLE = frozenset({"minecraft:bedrock"})

ORE_WEIGHTS: Mapping[str, int] = {
    "minecraft:coal_ore": 40,
    "minecraft:iron_ore": 25,
    "minecraft:copper_ore": 15,
    "minecraft:redstone_ore": 10,
    "minecraft:lapis_ore": 5,
    "minecraft:gold_ore": 4,
    "minecraft:diamond_ore": 1,
}


class SimulatedTurtle(TurtleActuator):
    """Grid-world implementation of the actuator contract."""

    def __init__(
        self,
        blocks: Mapping[Coord, str] | None = None,
        *,
        fuel: FuelLevel = UNLIMITED_FUEL,
        inventory: Mapping[int, SlotDetail] | None = None,
        drops: Mapping[str, str] = DROPS,
        unstable: Iterable[str] = UNSTABLE_MATERIALS,
        fuel_values: Mapping[str, int] = DEFAULT_FUEL_VALUES,
        entities: Iterable[Coord] = (),
        stack_limit: int = 64,
    ) -> None:
        self.blocks: dict[Coord, str] = dict(blocks or {})
        self.fuel: FuelLevel = fuel
        self.drops = drops
        self.unstable = frozenset(unstable)
        self.fuel_values = fuel_values
        self.entities: set[Coord] = set(entities)
        self.stack_limit = stack_limit

        self.position: Coord = (0, 0, 0)
        self.heading = 0
        self.selected = 1
        self.slots: list[SlotDetail | None] = [None] * INVENTORY_SIZE
        for index, detail in (inventory or {}).items():
            self.slots[self._slot_offset(index)] = detail

        self.actions: list[str] = []
        self.mined: list[str] = []
        self.dropped: list[tuple[str, int]] = []
        self.lost: list[str] = []

    # actuator contract

    def move(self, direction: Move) -> bool:
        target = self._neighbour_for_move(direction)
        if target in self.blocks or target in self.entities or not self._has_fuel():
            self.actions.append(f"move:{direction.value}:fail")
            return False

        if self.fuel != UNLIMITED_FUEL:
            self.fuel = int(self.fuel) - 1
        vacated = self.position
        self.position = target
        self.actions.append(f"move:{direction.value}")
        self._collapse_into(vacated)
        return True

    def turn(self, direction: Turn) -> None:
        self.heading = (self.heading + (1 if direction is Turn.RIGHT else -1)) % len(_HEADINGS)
        self.actions.append(f"turn:{direction.value}")

    def inspect(self, facing: Facing) -> Inspection:
        material = self.blocks.get(self._neighbour(facing))
        return Inspection(present=material is not None, material=material)

    def dig(self, facing: Facing) -> bool:
        target = self._neighbour(facing)
        material = self.blocks.get(target)
        if material is None or material in UNBREAKABLE:
            self.actions.append(f"dig:{facing.value}:fail")
            return False

        del self.blocks[target]
        self.mined.append(material)
        self.actions.append(f"dig:{facing.value}")
        self._collect(self.drops.get(material, material))
        self._collapse_into(target)
        return True

    def inventory_slot(self, index: int) -> SlotDetail | None:
        return self.slots[self._slot_offset(index)]

    def select_slot(self, index: int) -> None:
        self._slot_offset(index)
        self.selected = index

    def drop_selected(self) -> bool:
        offset = self._slot_offset(self.selected)
        detail = self.slots[offset]
        if detail is None:
            return False
        self.dropped.append((detail.material, detail.count))
        self.slots[offset] = None
        self.actions.append("drop")
        return True

    def fuel_level(self) -> FuelLevel:
        return self.fuel

    def refuel_from_selected(self, amount: int) -> bool:
        offset = self._slot_offset(self.selected)
        detail = self.slots[offset]
        if detail is None or detail.material not in self.fuel_values:
            return False
        if self.fuel == UNLIMITED_FUEL:
            return True

        burned = min(amount, detail.count)
        self.fuel = int(self.fuel) + burned * self.fuel_values[detail.material]
        remaining = detail.count - burned
        self.slots[offset] = SlotDetail(detail.material, remaining, detail.capacity) if remaining else None
        self.actions.append("refuel")
        return True

    # test helpers

    def count(self, action: str) -> int:
        """Number of recorded actions equal to ``action`` (e.g. ``"move:back"``)."""
        return sum(1 for recorded in self.actions if recorded == action)

    def held(self, material: str) -> int:
        return sum(detail.count for detail in self.slots if detail is not None and detail.material == material)

    # internals

    def _slot_offset(self, index: int) -> int:
        if not 1 <= index <= INVENTORY_SIZE:
            raise ValueError(f"Inventory slot out of range: {index}")
        return index - 1

    def _has_fuel(self) -> bool:
        return self.fuel == UNLIMITED_FUEL or int(self.fuel) > 0

    def _neighbour(self, facing: Facing) -> Coord:
        x, y, z = self.position
        if facing is Facing.UP:
            return (x, y + 1, z)
        if facing is Facing.DOWN:
            return (x, y - 1, z)
        dx, dy, dz = _HEADINGS[self.heading]
        return (x + dx, y + dy, z + dz)

    def _neighbour_for_move(self, direction: Move) -> Coord:
        if direction is Move.FORWARD:
            return self._neighbour(Facing.AHEAD)
        if direction is Move.UP:
            return self._neighbour(Facing.UP)
        if direction is Move.DOWN:
            return self._neighbour(Facing.DOWN)
        x, y, z = self.position
        dx, dy, dz = _HEADINGS[self.heading]
        return (x - dx, y - dy, z - dz)

    def _collect(self, item: str) -> None:
        for offset, detail in enumerate(self.slots):
            if detail is not None and detail.material == item and detail.count < detail.capacity:
                self.slots[offset] = SlotDetail(item, detail.count + 1, detail.capacity)
                return
        for offset, detail in enumerate(self.slots):
            if detail is None:
                self.slots[offset] = SlotDetail(item, 1, self.stack_limit)
                return
        self.lost.append(item)

    def _collapse_into(self, cell: Coord) -> None:
        x, y, z = cell
        while (x, y, z) not in self.blocks and (x, y, z) != self.position and (x, y, z) not in self.entities:
            above = (x, y + 1, z)
            material = self.blocks.get(above)
            if material is None or material not in self.unstable:
                return
            self.blocks[(x, y, z)] = self.blocks.pop(above)
            y += 1


def generate_strip_world(
    depth: int,
    height: int,
    *,
    seed: int | None = None,
    ore_chance: float = 0.08,
    gravel_chance: float = 0.03,
    filler: str = "minecraft:stone",
) -> dict[Coord, str]:
    """Build solid ground around a strip starting just ahead of the origin.

    The origin column (the tunnel mouth) is left open for ``height`` cells.
    Every other cell of the strip, its walls, floor and ceiling, plus a cap
    one row past ``depth``, is filler with random ore and gravel pockets.
    """
    rng = random.Random(seed)
    ores = list(ORE_WEIGHTS)
    weights = list(ORE_WEIGHTS.values())

    def pick() -> str:
        roll = rng.random()
        if roll < ore_chance:
            return rng.choices(ores, weights=weights)[0]
        if roll < ore_chance + gravel_chance:
            return "minecraft:gravel"
        return filler

    blocks: dict[Coord, str] = {}
    for x in range(0, depth + 2):
        for y in range(-1, height + 1):
            for z in (-1, 0, 1):
                if x == 0 and z == 0 and 0 <= y < height:
                    continue
                blocks[(x, y, z)] = pick()
    return blocks
