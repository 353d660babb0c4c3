"""Inventory retention policy for mined material."""

from __future__ import annotations

import logging

from minr.adapters.turtle import INVENTORY_SIZE, TurtleActuator
from minr.catalog import MaterialCatalog

logger = logging.getLogger(__name__)


class InventoryPolicy:
    """Decides where mined items go and what may be thrown away to make room.

    Slots are always read live from the actuator: drops and refuels change
    the inventory between calls, so nothing is cached across decisions.
    """

    def __init__(self, actuator: TurtleActuator, catalog: MaterialCatalog, *, slot_count: int = INVENTORY_SIZE) -> None:
        self._actuator = actuator
        self._catalog = catalog
        self._slot_count = slot_count

    def find_slot_for(self, item: str, quantity: int = 1) -> int | None:
        """Return the first slot that is empty or can take ``quantity`` more of ``item``."""
        for index in range(1, self._slot_count + 1):
            detail = self._actuator.inventory_slot(index)
            if detail is None:
                return index
            if detail.material == item and detail.free >= quantity:
                return index
        return None

    def make_room_for_ignored(self) -> bool:
        """Drop the first stack of ignorable material; return whether a slot was freed."""
        for index in range(1, self._slot_count + 1):
            detail = self._actuator.inventory_slot(index)
            if detail is None or not self._catalog.is_ignored(detail.material):
                continue

            self._actuator.select_slot(index)
            if self._actuator.drop_selected():
                logger.info(
                    "ignored_material_dropped",
                    extra={"slot": index, "material": detail.material, "count": detail.count},
                )
                return True
            logger.warning("drop_refused", extra={"slot": index, "material": detail.material})
        return False
