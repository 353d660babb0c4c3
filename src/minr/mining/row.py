"""Excavation of the vertical column directly ahead of the turtle."""

from __future__ import annotations

import logging

from minr.adapters.turtle import Facing, Move
from minr.excavation import Excavator
from minr.models import Outcome
from minr.movement import ResilientMover

logger = logging.getLogger(__name__)


class RowMiner:
    def __init__(self, excavator: Excavator, mover: ResilientMover, *, height: int) -> None:
        self._excavator = excavator
        self._mover = mover
        self._height = height

    def mine_row(self) -> Outcome:
        """Mine ``height`` cells ahead from the ground up, then come back down.

        The descent always happens, so callers resume at ground level even
        when the row was abandoned part way up.
        """
        level = 1
        outcome = Outcome.SUCCESS
        while level < self._height:
            outcome = self._excavator.mine_cell(Facing.AHEAD)
            if not outcome.ok:
                break
            outcome = self._rise()
            if not outcome.ok:
                break
            level += 1
        else:
            outcome = self._excavator.mine_cell(Facing.AHEAD)

        descent = self._descend(level - 1)
        if outcome.ok and not descent.ok:
            outcome = descent

        if not outcome.ok:
            logger.info("row_abandoned", extra={"level": level, "outcome": outcome.value})
        return outcome

    def _rise(self) -> Outcome:
        outcome = self._excavator.mine_cell(Facing.UP)
        if not outcome.ok:
            return outcome
        return self._mover.move(Move.UP)

    def _descend(self, levels: int) -> Outcome:
        for _ in range(levels):
            outcome = self._mover.move(Move.DOWN)
            if not outcome.ok:
                logger.error("descent_failed", extra={"levels_remaining": levels, "outcome": outcome.value})
                return outcome
            levels -= 1
        return Outcome.SUCCESS
