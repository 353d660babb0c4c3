from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Outcome(str, Enum):
    """Result of every movement and mining call made by the engine."""

    SUCCESS = "success"
    BLOCKED = "blocked"
    INVENTORY_FULL = "inventory_full"
    STUCK_CLEARING = "stuck_clearing"

    @property
    def ok(self) -> bool:
        return self is Outcome.SUCCESS


class StripState(str, Enum):
    COMPLETED = "completed"
    ABORTED = "aborted"


@dataclass(slots=True)
class StripReport:
    """Final state of one strip run, reported after the retreat to the mouth."""

    state: StripState
    depth: int
    position: int
    reason: Outcome | None = None
    rows_excavated: int = 0
    stranded_distance: int = 0

    @property
    def returned_to_origin(self) -> bool:
        return self.stranded_distance == 0
