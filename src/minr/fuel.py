"""Fuel bookkeeping: refuelling from held items and run-length estimates."""

from __future__ import annotations

import logging

from minr.adapters.turtle import INVENTORY_SIZE, UNLIMITED_FUEL, FuelLevel, TurtleActuator
from minr.config import MiningConfig

logger = logging.getLogger(__name__)

DEFAULT_LOW_FUEL_THRESHOLD = 50


def estimate_fuel(depth: int, height: int) -> int:
    """Translations needed to mine a strip and walk back out of it.

    Each row costs ``height - 1`` moves up and down for the row miner, the
    same again for the wall scan, and one step forward; the way home costs
    one step per row.
    """
    return depth * (4 * height - 2)


def has_sufficient_fuel(level: FuelLevel, config: MiningConfig) -> bool:
    if level == UNLIMITED_FUEL:
        return True
    return int(level) >= estimate_fuel(config.depth, config.height)


class FuelPolicy:
    """Keeps the turtle above a low-fuel threshold using whatever it carries."""

    def __init__(
        self,
        actuator: TurtleActuator,
        *,
        threshold: int = DEFAULT_LOW_FUEL_THRESHOLD,
        slot_count: int = INVENTORY_SIZE,
    ) -> None:
        self._actuator = actuator
        self._threshold = threshold
        self._slot_count = slot_count

    def needs_refuel(self) -> bool:
        level = self._actuator.fuel_level()
        if level == UNLIMITED_FUEL:
            return False
        return int(level) < self._threshold

    def refuel(self) -> bool:
        """Burn one item at a time until above threshold; ``False`` if fuel ran out first."""
        while self.needs_refuel():
            if not self._burn_one():
                logger.warning(
                    "no_fuel_in_inventory",
                    extra={"fuel_level": self._actuator.fuel_level(), "threshold": self._threshold},
                )
                return False
        return True

    def _burn_one(self) -> bool:
        for index in range(1, self._slot_count + 1):
            if self._actuator.inventory_slot(index) is None:
                continue
            self._actuator.select_slot(index)
            if self._actuator.refuel_from_selected(1):
                logger.debug("refuelled", extra={"slot": index, "fuel_level": self._actuator.fuel_level()})
                return True
        return False
