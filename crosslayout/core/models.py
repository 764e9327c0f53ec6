"""Data models supporting the crossword layout engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from .constants import Direction, RejectReason


@dataclass(frozen=True)
class WordCandidate:
    """Raw (word, clue) pair as supplied by the user or a word provider."""

    word: str
    clue: str = ""


@dataclass(frozen=True)
class NormalizedCandidate:
    """A candidate whose word passed normalization and length filtering."""

    word: str
    clue: str
    source: WordCandidate


@dataclass(frozen=True)
class PlacedWord:
    """A word committed to the grid."""

    id: str
    word: str
    clue: str
    direction: Direction
    start_x: int
    start_y: int
    number: int = 0

    @property
    def length(self) -> int:
        return len(self.word)

    @property
    def cells(self) -> List[Tuple[int, int]]:
        dx, dy = self.direction.step
        return [(self.start_x + dx * i, self.start_y + dy * i) for i in range(self.length)]

    @property
    def end_x(self) -> int:
        """Exclusive right edge of the word."""
        if self.direction == Direction.ACROSS:
            return self.start_x + self.length
        return self.start_x + 1

    @property
    def end_y(self) -> int:
        """Exclusive bottom edge of the word."""
        if self.direction == Direction.DOWN:
            return self.start_y + self.length
        return self.start_y + 1

    def to_jsonable(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "word": self.word,
            "clue": self.clue,
            "direction": self.direction.value,
            "startX": self.start_x,
            "startY": self.start_y,
            "number": self.number,
        }


@dataclass(frozen=True)
class RejectedCandidate:
    """A candidate left off the grid, with the reason it was dropped."""

    candidate: WordCandidate
    normalized: str
    reason: RejectReason

    def to_jsonable(self) -> Dict[str, Any]:
        return {
            "word": self.candidate.word,
            "normalized": self.normalized,
            "reason": self.reason.value,
        }


@dataclass
class PlacementResult:
    """Partial-success outcome of normalization and placement."""

    placed: List[PlacedWord] = field(default_factory=list)
    rejected: List[RejectedCandidate] = field(default_factory=list)

    def dropped_words(self) -> List[str]:
        return [entry.candidate.word for entry in self.rejected]


@dataclass(frozen=True)
class SolutionCell:
    x: int
    y: int
    char: str
    index: int


@dataclass(frozen=True)
class SolutionData:
    """Hidden solution overlaid on already placed letters."""

    word: str
    original: str
    cells: Tuple[SolutionCell, ...]

    def to_jsonable(self) -> Dict[str, Any]:
        return {
            "word": self.word,
            "original": self.original,
            "cells": [
                {"x": cell.x, "y": cell.y, "char": cell.char, "index": cell.index}
                for cell in self.cells
            ],
        }


@dataclass
class CrosswordLayout:
    """Final pipeline output handed to renderers."""

    words: List[PlacedWord]
    width: int
    height: int
    solution: Optional[SolutionData] = None
    rejected: List[RejectedCandidate] = field(default_factory=list)
    seed: Optional[int] = None

    def letter_map(self) -> Dict[Tuple[int, int], str]:
        letters: Dict[Tuple[int, int], str] = {}
        for word in self.words:
            for (x, y), char in zip(word.cells, word.word):
                letters[(x, y)] = char
        return letters

    def to_jsonable(self) -> Dict[str, Any]:
        return {
            "words": [word.to_jsonable() for word in self.words],
            "width": self.width,
            "height": self.height,
            "solution": self.solution.to_jsonable() if self.solution else None,
            "rejected": [entry.to_jsonable() for entry in self.rejected],
            "seed": self.seed,
        }
