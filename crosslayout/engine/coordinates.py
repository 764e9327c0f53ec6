"""Rebase placed words onto a minimal, positive-origin rectangle."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import List, Sequence

from ..core.constants import DEFAULT_GRID_SIZE, GRID_MARGIN
from ..core.models import PlacedWord


@dataclass
class NormalizedCoordinates:
    words: List[PlacedWord]
    width: int
    height: int


def normalize_coordinates(words: Sequence[PlacedWord]) -> NormalizedCoordinates:
    """Translate ``words`` so the top-left word origin sits at ``(1, 1)``.

    The rectangle keeps a one cell margin on every side. An empty input
    yields the default 10x10 grid with no words.
    """

    if not words:
        return NormalizedCoordinates(words=[], width=DEFAULT_GRID_SIZE, height=DEFAULT_GRID_SIZE)

    min_x = min(word.start_x for word in words)
    min_y = min(word.start_y for word in words)
    max_x = max(word.end_x for word in words)
    max_y = max(word.end_y for word in words)

    shift_x = GRID_MARGIN - min_x
    shift_y = GRID_MARGIN - min_y
    translated = [
        replace(word, start_x=word.start_x + shift_x, start_y=word.start_y + shift_y)
        for word in words
    ]
    return NormalizedCoordinates(
        words=translated,
        width=(max_x - min_x) + GRID_MARGIN * 2,
        height=(max_y - min_y) + GRID_MARGIN * 2,
    )
