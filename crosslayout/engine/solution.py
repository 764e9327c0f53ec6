"""Hidden solution overlay on top of a finished layout."""

from __future__ import annotations

import random
from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Set, Tuple

from ..core.constants import MAX_SOLUTION_LENGTH
from ..core.exceptions import SolutionUnmappableError
from ..core.models import PlacedWord, SolutionCell, SolutionData
from ..data.normalization import normalize_word
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class LetterPosition:
    x: int
    y: int
    word_index: int


def index_letter_positions(words: Sequence[PlacedWord]) -> Dict[str, List[LetterPosition]]:
    """Map every letter to the cells holding it, one entry per word crossing the cell."""

    positions: Dict[str, List[LetterPosition]] = defaultdict(list)
    for word_index, word in enumerate(words):
        for (x, y), char in zip(word.cells, word.word):
            positions[char].append(LetterPosition(x, y, word_index))
    return positions


class SolutionMapper:
    """Picks one grid cell per letter of a secret word.

    Cells are never reused. Among the free cells holding a letter, one that
    belongs to a word not yet visited by the mapping is preferred, so the
    solution spreads across the grid.
    """

    def __init__(self, rng: Optional[random.Random] = None, max_length: int = MAX_SOLUTION_LENGTH) -> None:
        self.rng = rng or random.Random()
        self.max_length = max_length

    def map(self, words: Sequence[PlacedWord], secret: str) -> SolutionData:
        if len(secret) > self.max_length:
            raise SolutionUnmappableError(
                f"Solution '{secret}' is longer than {self.max_length} characters"
            )
        target = normalize_word(secret)
        if not target:
            raise SolutionUnmappableError(f"Solution '{secret}' has no usable letters")

        positions = index_letter_positions(words)
        used_coords: Set[Tuple[int, int]] = set()
        used_words: Set[int] = set()
        cells: List[SolutionCell] = []

        for index, char in enumerate(target):
            free = [pos for pos in positions.get(char, []) if (pos.x, pos.y) not in used_coords]
            if not free:
                raise SolutionUnmappableError(
                    f"No free cell for letter {char} (position {index + 1} of {target})"
                )
            self.rng.shuffle(free)
            chosen = next((pos for pos in free if pos.word_index not in used_words), free[0])
            cells.append(SolutionCell(x=chosen.x, y=chosen.y, char=char, index=index))
            used_coords.add((chosen.x, chosen.y))
            used_words.add(chosen.word_index)

        LOGGER.debug("Mapped solution %s onto %d cells", target, len(cells))
        return SolutionData(word=target, original=secret, cells=tuple(cells))
