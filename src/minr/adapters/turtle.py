"""Boundary for the turtle actuator/sensor layer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Literal, Protocol, Union

INVENTORY_SIZE = 16
UNLIMITED_FUEL: Literal["unlimited"] = "unlimited"

FuelLevel = Union[int, Literal["unlimited"]]


class Move(str, Enum):
    """Translations the turtle can attempt."""

    FORWARD = "forward"
    BACK = "back"
    UP = "up"
    DOWN = "down"


class Turn(str, Enum):
    LEFT = "left"
    RIGHT = "right"


class Facing(str, Enum):
    """Cells the turtle can inspect or dig without moving."""

    AHEAD = "ahead"
    UP = "up"
    DOWN = "down"


@dataclass(slots=True, frozen=True)
class Inspection:
    """Result of looking at one neighbouring cell."""

    present: bool
    material: str | None = None


@dataclass(slots=True, frozen=True)
class SlotDetail:
    """Contents of one occupied inventory slot."""

    material: str
    count: int
    capacity: int = 64

    @property
    def free(self) -> int:
        return self.capacity - self.count


class TurtleActuator(Protocol):
    """Synchronous primitives provided by the host that owns the turtle."""

    def move(self, direction: Move) -> bool:
        """Translate one cell; return whether the turtle actually moved."""

    def turn(self, direction: Turn) -> None:
        """Rotate 90 degrees in place."""

    def inspect(self, facing: Facing) -> Inspection:
        """Report the material occupying the cell in ``facing`` direction."""

    def dig(self, facing: Facing) -> bool:
        """Break the cell in ``facing`` direction and collect its drop."""

    def inventory_slot(self, index: int) -> SlotDetail | None:
        """Return contents of slot ``index`` (1-based), or ``None`` when empty."""

    def select_slot(self, index: int) -> None:
        """Make slot ``index`` the active slot for drop and refuel."""

    def drop_selected(self) -> bool:
        """Drop the whole stack held in the selected slot."""

    def fuel_level(self) -> FuelLevel:
        """Return remaining fuel, or ``"unlimited"`` when fuel is not consumed."""

    def refuel_from_selected(self, amount: int) -> bool:
        """Burn up to ``amount`` items from the selected slot as fuel."""
