"""Crossword layout orchestration.

Pipeline, each stage consuming the previous one's output:
  1. Normalize and filter the candidate words.
  2. Greedily place them on a bounded grid via letter intersections.
  3. Rebase coordinates onto a minimal rectangle with a one cell margin.
  4. Number the start cells in reading order.
  5. Optionally overlay the hidden solution on placed letters.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, replace
from typing import Iterable, List, Optional

from ..core.constants import MAX_GRID_SIZE, MAX_SOLUTION_LENGTH, MIN_DISPLAY_SIZE
from ..core.exceptions import SolutionUnmappableError
from ..core.models import CrosswordLayout, PlacedWord, SolutionData, WordCandidate
from ..data.normalization import prepare_candidates
from ..utils.logger import get_logger
from .coordinates import normalize_coordinates
from .numbering import assign_numbers
from .placer import LayoutPlacer, PlacerConfig
from .solution import SolutionMapper
from .validator import LayoutValidator


LOGGER = get_logger(__name__)


@dataclass
class GeneratorConfig:
    seed: Optional[int] = None
    max_grid_size: int = MAX_GRID_SIZE
    min_display_size: int = MIN_DISPLAY_SIZE
    max_solution_length: int = MAX_SOLUTION_LENGTH
    strict_adjacency: bool = False
    allow_free_placement: bool = False
    validate: bool = True

    def to_placer_config(self) -> PlacerConfig:
        return PlacerConfig(
            max_grid_size=self.max_grid_size,
            strict_adjacency=self.strict_adjacency,
            allow_free_placement=self.allow_free_placement,
        )


class CrosswordGenerator:
    """High-level orchestrator from (word, clue) candidates to a numbered layout.

    One random source drives both the placer and the solution mapper of a
    call. Without an injected ``rng`` every call starts a fresh
    ``random.Random(config.seed)``, so a fixed seed reproduces each result
    and calls share no state.
    """

    def __init__(
        self,
        config: Optional[GeneratorConfig] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.config = config or GeneratorConfig()
        self._rng = rng
        self.validator = LayoutValidator()

    # ------------------------------------------------------------------
    # Public entrypoint
    # ------------------------------------------------------------------
    def generate(
        self,
        candidates: Iterable[WordCandidate],
        solution_word: Optional[str] = None,
    ) -> CrosswordLayout:
        rng = self._rng or random.Random(self.config.seed)
        kept, rejected = prepare_candidates(candidates, max_length=self.config.max_grid_size)
        if not kept:
            LOGGER.warning("No candidate survived normalization; returning the empty grid")

        placement = LayoutPlacer(self.config.to_placer_config(), rng).place(kept)
        rejected.extend(placement.rejected)

        rebased = normalize_coordinates(placement.placed)
        numbered = assign_numbers(rebased.words)
        words: List[PlacedWord] = [
            replace(word, id=f"word-{index}") for index, word in enumerate(numbered)
        ]

        solution = self._map_solution(words, solution_word, rng) if solution_word else None

        layout = CrosswordLayout(
            words=words,
            width=max(rebased.width, self.config.min_display_size),
            height=max(rebased.height, self.config.min_display_size),
            solution=solution,
            rejected=rejected,
            # An injected rng is not described by the configured seed.
            seed=self.config.seed if self._rng is None else None,
        )
        if self.config.validate:
            self.validator.validate(layout)
        LOGGER.info(
            "Layout completed: %d words on %dx%d, %d rejected, solution %s",
            len(layout.words),
            layout.width,
            layout.height,
            len(layout.rejected),
            "mapped" if solution else "absent",
        )
        return layout

    def _map_solution(
        self, words: List[PlacedWord], solution_word: str, rng: random.Random
    ) -> Optional[SolutionData]:
        mapper = SolutionMapper(rng, max_length=self.config.max_solution_length)
        try:
            return mapper.map(words, solution_word)
        except SolutionUnmappableError as exc:
            LOGGER.warning("Hidden solution omitted: %s", exc)
            return None


def generate_crossword(
    candidates: Iterable[WordCandidate],
    solution_word: Optional[str] = None,
    *,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
    config: Optional[GeneratorConfig] = None,
) -> CrosswordLayout:
    """Functional entry point around :class:`CrosswordGenerator`."""

    if config is None:
        config = GeneratorConfig(seed=seed)
    elif seed is not None:
        config = replace(config, seed=seed)
    return CrosswordGenerator(config, rng=rng).generate(candidates, solution_word)
