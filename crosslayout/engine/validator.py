"""Deterministic rule validation for generated layouts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Set, Tuple

from ..core.exceptions import ValidationError
from ..core.models import CrosswordLayout
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


class LayoutValidator:
    """Runs deterministic validation over a finished layout."""

    def validate(self, layout: CrosswordLayout) -> ValidationResult:
        messages: List[str] = []
        try:
            letters = self._check_consistency(layout)
            self._check_bounds(layout)
            self._check_numbering(layout)
            self._check_solution(layout, letters)
        except ValidationError as exc:
            messages.append(str(exc))
            LOGGER.error("Validation failed: %s", exc)
            return ValidationResult(ok=False, messages=messages)
        return ValidationResult(ok=True, messages=[])

    def _check_consistency(self, layout: CrosswordLayout) -> Dict[Tuple[int, int], str]:
        letters: Dict[Tuple[int, int], str] = {}
        owners: Dict[Tuple[int, int], str] = {}
        for word in layout.words:
            for coord, char in zip(word.cells, word.word):
                existing = letters.get(coord)
                if existing is not None and existing != char:
                    raise ValidationError(
                        f"Letter conflict at {coord}: {owners[coord]} has {existing}, "
                        f"{word.id} has {char}"
                    )
                letters[coord] = char
                owners.setdefault(coord, word.id)
        return letters

    def _check_bounds(self, layout: CrosswordLayout) -> None:
        for word in layout.words:
            for x, y in word.cells:
                if not (1 <= x < layout.width and 1 <= y < layout.height):
                    raise ValidationError(
                        f"Word {word.id} leaves the {layout.width}x{layout.height} grid at ({x},{y})"
                    )

    def _check_numbering(self, layout: CrosswordLayout) -> None:
        by_start: Dict[Tuple[int, int], int] = {}
        for word in layout.words:
            start = (word.start_x, word.start_y)
            number = by_start.setdefault(start, word.number)
            if number != word.number:
                raise ValidationError(f"Start cell {start} carries numbers {number} and {word.number}")
        numbers = sorted(by_start.values())
        if numbers != list(range(1, len(numbers) + 1)):
            raise ValidationError(f"Numbers are not a contiguous 1..n range: {numbers}")

    def _check_solution(self, layout: CrosswordLayout, letters: Dict[Tuple[int, int], str]) -> None:
        if layout.solution is None:
            return
        seen: Set[Tuple[int, int]] = set()
        for cell in layout.solution.cells:
            coord = (cell.x, cell.y)
            if coord in seen:
                raise ValidationError(f"Solution reuses cell {coord}")
            seen.add(coord)
            if letters.get(coord) != cell.char:
                raise ValidationError(
                    f"Solution letter {cell.char} at {coord} does not match grid letter {letters.get(coord)}"
                )
            if layout.solution.word[cell.index] != cell.char:
                raise ValidationError(f"Solution index {cell.index} does not spell {layout.solution.word}")
