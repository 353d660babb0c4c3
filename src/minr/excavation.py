"""Single-cell excavation under the inventory retention policy."""

from __future__ import annotations

import logging

from minr.adapters.turtle import Facing, TurtleActuator
from minr.catalog import MaterialCatalog
from minr.inventory import InventoryPolicy
from minr.models import Outcome

logger = logging.getLogger(__name__)


class Excavator:
    """Mines one neighbouring cell, keeping valuables and sacrificing filler.

    Priority: never lose valuable material if it can be stored, never stall
    over worthless material, and only report ``INVENTORY_FULL`` when neither
    a free slot nor a droppable stack of ignorable material exists.
    """

    def __init__(self, actuator: TurtleActuator, catalog: MaterialCatalog, inventory: InventoryPolicy) -> None:
        self._actuator = actuator
        self._catalog = catalog
        self._inventory = inventory

    def mine_cell(self, facing: Facing) -> Outcome:
        inspection = self._actuator.inspect(facing)
        if not inspection.present or inspection.material is None:
            return Outcome.SUCCESS

        material = inspection.material
        item = self._catalog.drop_of(material)

        if self._inventory.find_slot_for(item) is not None:
            return self._dig(facing, material)
        if self._catalog.is_ignored(material):
            return self._dig(facing, material)
        if self._inventory.make_room_for_ignored():
            return self._dig(facing, material)

        logger.warning("inventory_full", extra={"facing": facing.value, "material": material, "item": item})
        return Outcome.INVENTORY_FULL

    def _dig(self, facing: Facing, material: str) -> Outcome:
        if not self._actuator.dig(facing):
            # Unbreakable blocks surface later as a movement failure.
            logger.warning("dig_refused", extra={"facing": facing.value, "material": material})
        return Outcome.SUCCESS
