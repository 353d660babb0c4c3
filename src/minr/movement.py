"""Movement that digs through collapsing fill but never through solid walls."""

from __future__ import annotations

import logging

from minr.adapters.turtle import Facing, Move, Turn, TurtleActuator
from minr.catalog import MaterialCatalog
from minr.models import Outcome

DEFAULT_MAX_CLEAR_ATTEMPTS = 64

_FACING_FOR_MOVE = {
    Move.FORWARD: Facing.AHEAD,
    Move.UP: Facing.UP,
    Move.DOWN: Facing.DOWN,
}


class ResilientMover:
    """Wraps raw translations with bounded clearing of unstable material."""

    def __init__(
        self,
        actuator: TurtleActuator,
        catalog: MaterialCatalog,
        *,
        max_clear_attempts: int = DEFAULT_MAX_CLEAR_ATTEMPTS,
        logger: logging.Logger | None = None,
    ) -> None:
        self._actuator = actuator
        self._catalog = catalog
        self._max_clear_attempts = max_clear_attempts
        self._logger = logger or logging.getLogger("minr.movement")

    def move(self, direction: Move) -> Outcome:
        if direction is Move.BACK:
            return self._move_back()
        return self._move_clearing(direction)

    def _move_clearing(self, direction: Move) -> Outcome:
        if self._actuator.move(direction):
            return Outcome.SUCCESS

        facing = _FACING_FOR_MOVE[direction]
        digs = 0
        while True:
            inspection = self._actuator.inspect(facing)
            if not inspection.present:
                break
            if not self._catalog.is_unstable(inspection.material or ""):
                self._logger.info(
                    "movement_blocked",
                    extra={"direction": direction.value, "material": inspection.material},
                )
                return Outcome.BLOCKED
            if digs >= self._max_clear_attempts:
                self._logger.error(
                    "clearing_limit_reached",
                    extra={"direction": direction.value, "attempts": digs, "material": inspection.material},
                )
                return Outcome.STUCK_CLEARING
            if not self._actuator.dig(facing):
                self._logger.warning(
                    "clearing_dig_refused",
                    extra={"direction": direction.value, "material": inspection.material},
                )
                return Outcome.BLOCKED
            digs += 1

        if digs:
            self._logger.debug("unstable_material_cleared", extra={"direction": direction.value, "digs": digs})

        if self._actuator.move(direction):
            return Outcome.SUCCESS

        # Nothing to dig but still unable to move: an entity or an empty tank.
        self._logger.info("movement_blocked", extra={"direction": direction.value, "material": None})
        return Outcome.BLOCKED

    def _move_back(self) -> Outcome:
        if self._actuator.move(Move.BACK):
            return Outcome.SUCCESS

        self._actuator.turn(Turn.RIGHT)
        self._actuator.turn(Turn.RIGHT)
        outcome = self._move_clearing(Move.FORWARD)
        self._actuator.turn(Turn.LEFT)
        self._actuator.turn(Turn.LEFT)
        return outcome
