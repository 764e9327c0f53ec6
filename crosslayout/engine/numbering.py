"""Conventional crossword numbering of start cells."""

from __future__ import annotations

from dataclasses import replace
from typing import Dict, List, Sequence, Tuple

from ..core.models import PlacedWord


def assign_numbers(words: Sequence[PlacedWord]) -> List[PlacedWord]:
    """Number distinct start cells top-to-bottom, left-to-right.

    Words that begin on the same cell share its number. The returned list is
    ordered by number; words sharing a number keep their relative order.
    """

    starts = sorted({(word.start_x, word.start_y) for word in words}, key=lambda xy: (xy[1], xy[0]))
    numbers: Dict[Tuple[int, int], int] = {start: index + 1 for index, start in enumerate(starts)}
    numbered = [replace(word, number=numbers[(word.start_x, word.start_y)]) for word in words]
    return sorted(numbered, key=lambda word: word.number)
