"""Greedy intersection-based word placement."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from ..core.constants import MAX_GRID_SIZE, Bounds, Direction, RejectReason
from ..core.models import NormalizedCandidate, PlacedWord, PlacementResult, RejectedCandidate
from ..utils.logger import get_logger
from .grid import LetterGrid


LOGGER = get_logger(__name__)

# Tried in this order at every anchor; the first valid one wins.
ORIENTATION_ORDER: Tuple[Direction, ...] = (Direction.DOWN, Direction.ACROSS)


@dataclass
class PlacerConfig:
    """Configuration values driving the greedy layout."""

    max_grid_size: int = MAX_GRID_SIZE
    strict_adjacency: bool = False
    allow_free_placement: bool = False

    def bounds(self) -> Bounds:
        return Bounds(width=self.max_grid_size, height=self.max_grid_size)


class LayoutPlacer:
    """Places words one by one where they cross letters already on the grid.

    There is no backtracking: each word takes the first valid crossing found
    while walking the occupied cells in a shuffled order, or is dropped.
    """

    def __init__(self, config: Optional[PlacerConfig] = None, rng: Optional[random.Random] = None) -> None:
        self.config = config or PlacerConfig()
        self.rng = rng or random.Random()

    def place(self, candidates: Sequence[NormalizedCandidate]) -> PlacementResult:
        result = PlacementResult()
        if not candidates:
            return result

        # sorted() is stable, so equal lengths keep their input order.
        ordered = sorted(candidates, key=lambda candidate: -len(candidate.word))
        grid = LetterGrid(self.config.bounds())

        seed_word = ordered[0]
        size = self.config.max_grid_size
        start_x = size // 2 - len(seed_word.word) // 2
        start_y = size // 2
        self._commit(grid, result, seed_word, start_x, start_y, Direction.ACROSS)

        for candidate in ordered[1:]:
            placement = self._find_crossing(grid, candidate.word)
            if placement is None and self.config.allow_free_placement:
                placement = self._find_free_slot(grid, candidate.word)
            if placement is None:
                LOGGER.info("Dropping %s: no valid intersection", candidate.word)
                result.rejected.append(
                    RejectedCandidate(candidate.source, candidate.word, RejectReason.NO_INTERSECTION)
                )
                continue
            self._commit(grid, result, candidate, *placement)

        LOGGER.info(
            "Placed %d/%d words on a %dx%d field",
            len(result.placed),
            len(candidates),
            size,
            size,
        )
        return result

    def _find_crossing(self, grid: LetterGrid, word: str) -> Optional[Tuple[int, int, Direction]]:
        anchors = grid.occupied()
        self.rng.shuffle(anchors)
        for (cx, cy), char in anchors:
            for index, letter in enumerate(word):
                if letter != char:
                    continue
                for direction in ORIENTATION_ORDER:
                    if direction == Direction.ACROSS:
                        x, y = cx - index, cy
                    else:
                        x, y = cx, cy - index
                    if grid.can_place(word, x, y, direction, self.config.strict_adjacency):
                        return x, y, direction
        return None

    def _find_free_slot(self, grid: LetterGrid, word: str) -> Optional[Tuple[int, int, Direction]]:
        size = self.config.max_grid_size
        for y in range(1, size - 1):
            for x in range(1, size - 1):
                if grid.can_place(word, x, y, Direction.ACROSS, self.config.strict_adjacency):
                    LOGGER.debug("Free placement for %s at (%s,%s)", word, x, y)
                    return x, y, Direction.ACROSS
        return None

    @staticmethod
    def _commit(
        grid: LetterGrid,
        result: PlacementResult,
        candidate: NormalizedCandidate,
        x: int,
        y: int,
        direction: Direction,
    ) -> None:
        grid.place_word(candidate.word, x, y, direction)
        result.placed.append(
            PlacedWord(
                id=f"word-{len(result.placed)}",
                word=candidate.word,
                clue=candidate.clue,
                direction=direction,
                start_x=x,
                start_y=y,
                number=len(result.placed) + 1,
            )
        )

