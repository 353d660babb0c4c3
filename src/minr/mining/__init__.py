"""Row, wall-scan and strip procedures of the mining engine."""

from .perimeter import PerimeterScanner
from .row import RowMiner
from .strip import StripController

__all__ = ["PerimeterScanner", "RowMiner", "StripController"]
