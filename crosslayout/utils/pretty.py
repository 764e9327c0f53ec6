"""Pretty-print helpers for crossword layouts."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, List

from ..core.constants import Direction
from ..engine.grid import LayoutCell, build_cell_matrix

if TYPE_CHECKING:
    from ..core.models import CrosswordLayout


EMPTY_SYMBOL = "."


def cell_symbol(cell: LayoutCell) -> str:
    if not cell.is_letter:
        return EMPTY_SYMBOL
    # Solution cells are shown in lowercase so they stand out.
    return cell.char.lower() if cell.is_solution_cell else cell.char


def format_layout(layout: CrosswordLayout) -> str:
    matrix = build_cell_matrix(layout)
    header_cells = [f"{x:>2}" for x in range(layout.width)]
    lines = ["    " + " ".join(header_cells)]
    lines.append("    " + "-" * (3 * layout.width - 1))
    for y, row in enumerate(matrix):
        row_render = " ".join(f"{cell_symbol(cell):>2}" for cell in row)
        lines.append(f"{y:>2} | {row_render}")
    return "\n".join(lines)


def format_clues(layout: CrosswordLayout, direction: Direction) -> List[str]:
    return [
        f"  {word.number:>2}. {word.clue or '?'} ({word.length})"
        for word in layout.words
        if word.direction == direction
    ]


def print_layout_stats(layout: CrosswordLayout, *, stream=None) -> None:
    """Print grid, clue lists, drops and hidden solution of a layout."""

    stream = stream or sys.stdout
    print(format_layout(layout), file=stream)

    letters = layout.letter_map()
    total_cells = layout.width * layout.height
    print(file=stream)
    print("--- Grid ---", file=stream)
    print(f"  Size:          {layout.width} x {layout.height} ({total_cells} cells)", file=stream)
    print(f"  Letters:       {len(letters)} ({len(letters) / total_cells * 100:.0f}%)", file=stream)
    print(f"  Words:         {len(layout.words)}", file=stream)

    for direction, title in ((Direction.ACROSS, "Across"), (Direction.DOWN, "Down")):
        lines = format_clues(layout, direction)
        if lines:
            print(file=stream)
            print(f"--- {title} ---", file=stream)
            for line in lines:
                print(line, file=stream)

    if layout.rejected:
        print(file=stream)
        print("--- Dropped ---", file=stream)
        for entry in layout.rejected:
            print(f"  {entry.candidate.word}: {entry.reason.value}", file=stream)

    if layout.solution is not None:
        print(file=stream)
        print("--- Hidden solution ---", file=stream)
        print(f"  {layout.solution.original} -> {layout.solution.word}", file=stream)
        cells = ", ".join(f"{cell.char}@({cell.x},{cell.y})" for cell in layout.solution.cells)
        print(f"  Cells:         {cells}", file=stream)

    if layout.seed is not None:
        print(file=stream)
        print(f"Seed: {layout.seed}", file=stream)
