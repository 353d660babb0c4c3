"""Turtle actuator adapters."""

from .simulated import SimulatedTurtle, generate_strip_world
from .turtle import (
    INVENTORY_SIZE,
    UNLIMITED_FUEL,
    Facing,
    Inspection,
    Move,
    SlotDetail,
    Turn,
    TurtleActuator,
)

__all__ = [
    "INVENTORY_SIZE",
    "UNLIMITED_FUEL",
    "Facing",
    "Inspection",
    "Move",
    "SimulatedTurtle",
    "SlotDetail",
    "Turn",
    "TurtleActuator",
    "generate_strip_world",
]
