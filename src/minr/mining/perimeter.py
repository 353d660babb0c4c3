"""Scan of the tunnel cross-section for valuables embedded in its boundary."""

from __future__ import annotations

import logging

from minr.adapters.turtle import Facing, Move, Turn, TurtleActuator
from minr.catalog import MaterialCatalog
from minr.excavation import Excavator
from minr.models import Outcome
from minr.movement import ResilientMover

logger = logging.getLogger(__name__)


class PerimeterScanner:
    """Walks floor, left wall, ceiling and right wall of the current row.

    The turtle starts at ground level facing along the strip. It checks the
    floor, turns left and climbs the left wall, checks the ceiling, turns to
    the right wall and descends it, then turns back. Failures unwind the
    same path in reverse before being reported.
    """

    def __init__(
        self,
        actuator: TurtleActuator,
        catalog: MaterialCatalog,
        excavator: Excavator,
        mover: ResilientMover,
        *,
        height: int,
    ) -> None:
        self._actuator = actuator
        self._catalog = catalog
        self._excavator = excavator
        self._mover = mover
        self._height = height
        self._level = 1
        # Net quarter turns to the right relative to the strip heading.
        self._rotation = 0

    def scan_walls(self) -> Outcome:
        self._level = 1
        self._rotation = 0

        outcome = self._scan()
        if not outcome.ok:
            logger.info("wall_scan_aborted", extra={"level": self._level, "outcome": outcome.value})
            self._unwind()
        return outcome

    def _scan(self) -> Outcome:
        outcome = self._check(Facing.DOWN)
        if not outcome.ok:
            return outcome

        self._turn(Turn.LEFT)
        while True:
            outcome = self._check(Facing.AHEAD)
            if not outcome.ok:
                return outcome
            if self._level == self._height:
                break
            outcome = self._step(Move.UP)
            if not outcome.ok:
                return outcome

        outcome = self._check(Facing.UP)
        if not outcome.ok:
            return outcome

        self._turn(Turn.RIGHT)
        self._turn(Turn.RIGHT)
        while True:
            outcome = self._check(Facing.AHEAD)
            if not outcome.ok:
                return outcome
            if self._level == 1:
                break
            outcome = self._step(Move.DOWN)
            if not outcome.ok:
                return outcome

        self._turn(Turn.LEFT)
        return Outcome.SUCCESS

    def _check(self, facing: Facing) -> Outcome:
        inspection = self._actuator.inspect(facing)
        if not inspection.present or inspection.material is None:
            return Outcome.SUCCESS
        if self._catalog.is_ignored(inspection.material):
            return Outcome.SUCCESS
        logger.debug(
            "wall_material_found",
            extra={"facing": facing.value, "level": self._level, "material": inspection.material},
        )
        return self._excavator.mine_cell(facing)

    def _step(self, direction: Move) -> Outcome:
        outcome = self._mover.move(direction)
        if outcome.ok:
            self._level += 1 if direction is Move.UP else -1
        return outcome

    def _turn(self, direction: Turn) -> None:
        self._actuator.turn(direction)
        self._rotation += 1 if direction is Turn.RIGHT else -1

    def _unwind(self) -> None:
        while self._level > 1:
            if not self._step(Move.DOWN).ok:
                logger.error("wall_scan_unwind_stuck", extra={"level": self._level})
                break
        while self._rotation > 0:
            self._turn(Turn.LEFT)
        while self._rotation < 0:
            self._turn(Turn.RIGHT)
