"""Grid representation and helper utilities."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple

from ..core.constants import Bounds, Direction
from ..core.exceptions import SlotPlacementError
from ..core.models import CrosswordLayout
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

Coordinate = Tuple[int, int]


class LetterGrid:
    """Sparse coordinate -> letter table owned by a single placement run."""

    def __init__(self, bounds: Bounds) -> None:
        self.bounds = bounds
        self._letters: Dict[Coordinate, str] = {}

    def __len__(self) -> int:
        return len(self._letters)

    def letter_at(self, x: int, y: int) -> Optional[str]:
        return self._letters.get((x, y))

    def occupied(self) -> List[Tuple[Coordinate, str]]:
        """Occupied cells in the order they were first written."""
        return list(self._letters.items())

    # ------------------------------------------------------------------
    # Placement checks
    # ------------------------------------------------------------------
    @staticmethod
    def word_cells(word: str, x: int, y: int, direction: Direction) -> Iterator[Coordinate]:
        dx, dy = direction.step
        for index in range(len(word)):
            yield x + dx * index, y + dy * index

    def fits(self, word: str, x: int, y: int, direction: Direction) -> bool:
        """True when every cell of the word lies inside the bounds."""
        dx, dy = direction.step
        end_x = x + dx * (len(word) - 1)
        end_y = y + dy * (len(word) - 1)
        return self.bounds.contains(x, y) and self.bounds.contains(end_x, end_y)

    def can_place(
        self,
        word: str,
        x: int,
        y: int,
        direction: Direction,
        strict_adjacency: bool = False,
    ) -> bool:
        if not self.fits(word, x, y, direction):
            return False
        for index, (cx, cy) in enumerate(self.word_cells(word, x, y, direction)):
            existing = self._letters.get((cx, cy))
            if existing is not None:
                if existing != word[index]:
                    return False
                continue
            if strict_adjacency and self._touches_neighbor(
                cx, cy, direction, first=index == 0, last=index == len(word) - 1
            ):
                return False
        return True

    def _touches_neighbor(
        self, x: int, y: int, direction: Direction, first: bool, last: bool
    ) -> bool:
        # Fresh cells may not run alongside another word, nor extend one end to end.
        if direction == Direction.ACROSS:
            sides = ((x, y - 1), (x, y + 1))
            before, after = (x - 1, y), (x + 1, y)
        else:
            sides = ((x - 1, y), (x + 1, y))
            before, after = (x, y - 1), (x, y + 1)
        if any(side in self._letters for side in sides):
            return True
        if first and before in self._letters:
            return True
        if last and after in self._letters:
            return True
        return False

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def place_word(self, word: str, x: int, y: int, direction: Direction) -> None:
        if not self.fits(word, x, y, direction):
            raise SlotPlacementError(f"Word {word} extends outside grid at {(x, y)}")
        cells = list(self.word_cells(word, x, y, direction))
        for index, coord in enumerate(cells):
            existing = self._letters.get(coord)
            if existing is not None and existing != word[index]:
                raise SlotPlacementError(f"Letter conflict for {word} at {coord}")

        # All checks passed, mutate grid
        for index, coord in enumerate(cells):
            self._letters[coord] = word[index]
        LOGGER.debug("Placed %s %s at (%s,%s)", word, direction.value, x, y)


@dataclass
class LayoutCell:
    """Dense view of one grid square of a finished layout."""

    x: int
    y: int
    char: Optional[str] = None
    number: Optional[int] = None
    word_ids: List[str] = field(default_factory=list)
    solution_index: Optional[int] = None

    @property
    def is_letter(self) -> bool:
        return self.char is not None

    @property
    def is_solution_cell(self) -> bool:
        return self.solution_index is not None


def build_cell_matrix(layout: CrosswordLayout) -> List[List[LayoutCell]]:
    """Expand a layout into ``height`` rows of ``width`` cells.

    ``solution_index`` is 1-based so it can be printed next to the cell.
    """

    matrix = [
        [LayoutCell(x=x, y=y) for x in range(layout.width)] for y in range(layout.height)
    ]
    for word in layout.words:
        for index, (x, y) in enumerate(word.cells):
            if not (0 <= y < layout.height and 0 <= x < layout.width):
                LOGGER.warning("Word %s leaves the grid at (%s,%s)", word.id, x, y)
                continue
            cell = matrix[y][x]
            cell.char = word.word[index]
            cell.word_ids.append(word.id)
            if index == 0:
                cell.number = word.number
    if layout.solution is not None:
        for sol_cell in layout.solution.cells:
            if 0 <= sol_cell.y < layout.height and 0 <= sol_cell.x < layout.width:
                matrix[sol_cell.y][sol_cell.x].solution_index = sol_cell.index + 1
    return matrix
