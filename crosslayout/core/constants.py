"""Shared constants and enumerations for the crossword layout engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


MAX_GRID_SIZE = 14
MIN_WORD_LENGTH = 2
MIN_DISPLAY_SIZE = 8
DEFAULT_GRID_SIZE = 10
GRID_MARGIN = 1
MAX_SOLUTION_LENGTH = 15


class Direction(str, Enum):
    """Word directions supported by the grid."""

    ACROSS = "ACROSS"
    DOWN = "DOWN"

    @property
    def step(self) -> Tuple[int, int]:
        return (1, 0) if self is Direction.ACROSS else (0, 1)


class RejectReason(str, Enum):
    """Why a candidate never made it onto the grid."""

    TOO_SHORT = "too short"
    TOO_LONG = "too long"
    DUPLICATE = "duplicate"
    NO_INTERSECTION = "no intersection found"


@dataclass(frozen=True)
class Bounds:
    """Simple rectangle bounds helper."""

    width: int
    height: int

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height
