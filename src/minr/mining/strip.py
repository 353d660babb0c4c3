"""Outer strip-mining loop with unconditional retreat to the tunnel mouth."""

from __future__ import annotations

import logging

from minr.adapters.turtle import Move, TurtleActuator
from minr.catalog import MaterialCatalog
from minr.config import MiningConfig
from minr.excavation import Excavator
from minr.fuel import DEFAULT_LOW_FUEL_THRESHOLD, FuelPolicy
from minr.inventory import InventoryPolicy
from minr.mining.perimeter import PerimeterScanner
from minr.mining.row import RowMiner
from minr.models import Outcome, StripReport, StripState
from minr.movement import DEFAULT_MAX_CLEAR_ATTEMPTS, ResilientMover


class StripController:
    """Advances one row at a time until the configured depth, then walks home.

    Any failure (full inventory, permanent obstruction, endless collapse)
    ends the whole run: the turtle retreats from wherever it is to the
    mouth and the run is reported as aborted at that position.
    """

    def __init__(
        self,
        actuator: TurtleActuator,
        config: MiningConfig,
        *,
        catalog: MaterialCatalog | None = None,
        low_fuel_threshold: int = DEFAULT_LOW_FUEL_THRESHOLD,
        max_clear_attempts: int = DEFAULT_MAX_CLEAR_ATTEMPTS,
        logger: logging.Logger | None = None,
    ) -> None:
        self._actuator = actuator
        self._config = config
        self._catalog = catalog or MaterialCatalog.default()
        self._logger = logger or logging.getLogger("minr.mining.strip")

        inventory = InventoryPolicy(actuator, self._catalog)
        excavator = Excavator(actuator, self._catalog, inventory)
        self._mover = ResilientMover(actuator, self._catalog, max_clear_attempts=max_clear_attempts)
        self._fuel = FuelPolicy(actuator, threshold=low_fuel_threshold)
        self._row_miner = RowMiner(excavator, self._mover, height=config.height)
        self._scanner = PerimeterScanner(actuator, self._catalog, excavator, self._mover, height=config.height)

        self.position = 0

    def run(self) -> StripReport:
        depth = self._config.depth
        self.position = 0
        rows_excavated = 0
        failure: Outcome | None = None
        failed_at = 0

        self._logger.info(
            "strip_started",
            extra={"depth": depth, "height": self._config.height, "auto_refuel": self._config.auto_refuel},
        )

        while self.position < depth:
            if self._config.auto_refuel and self._fuel.needs_refuel():
                self._fuel.refuel()

            outcome = self._row_miner.mine_row()
            if not outcome.ok:
                failure, failed_at = outcome, self.position
                self._abort("row_mining_failed", outcome)
                break
            rows_excavated += 1

            outcome = self._mover.move(Move.FORWARD)
            if not outcome.ok:
                failure, failed_at = outcome, self.position
                self._abort("advance_blocked", outcome)
                break

            self.position += 1
            self._logger.debug("row_mined", extra={"position": self.position})

            outcome = self._scanner.scan_walls()
            if not outcome.ok:
                failure, failed_at = outcome, self.position
                self._abort("wall_scan_failed", outcome)
                break

        self.position = self.return_to_origin(self.position)

        if failure is None:
            report = StripReport(
                state=StripState.COMPLETED,
                depth=depth,
                position=depth,
                rows_excavated=rows_excavated,
                stranded_distance=self.position,
            )
        else:
            report = StripReport(
                state=StripState.ABORTED,
                depth=depth,
                position=failed_at,
                reason=failure,
                rows_excavated=rows_excavated,
                stranded_distance=self.position,
            )

        self._logger.info(
            "strip_finished",
            extra={
                "state": report.state.value,
                "position": report.position,
                "reason": report.reason.value if report.reason else None,
                "stranded_distance": report.stranded_distance,
            },
        )
        return report

    def return_to_origin(self, position: int) -> int:
        """Back out ``position`` rows; return how many rows could not be retreated."""
        remaining = position
        while remaining > 0:
            outcome = self._mover.move(Move.BACK)
            if not outcome.ok:
                self._logger.error(
                    "retreat_blocked",
                    extra={"remaining": remaining, "outcome": outcome.value},
                )
                break
            remaining -= 1
        return remaining

    def _abort(self, event: str, outcome: Outcome) -> None:
        self._logger.warning(event, extra={"position": self.position, "outcome": outcome.value})
        self.position = self.return_to_origin(self.position)
