import io
import unittest

from crosslayout.core.constants import Direction, RejectReason
from crosslayout.core.models import (
    CrosswordLayout,
    PlacedWord,
    RejectedCandidate,
    SolutionCell,
    SolutionData,
    WordCandidate,
)
from crosslayout.utils.pretty import format_clues, format_layout, print_layout_stats


def sample_layout() -> CrosswordLayout:
    return CrosswordLayout(
        words=[
            PlacedWord("word-0", "CASA", "Abitazione", Direction.ACROSS, 1, 1, 1),
            PlacedWord("word-1", "SOLE", "Stella del giorno", Direction.DOWN, 3, 1, 2),
        ],
        width=8,
        height=8,
        solution=SolutionData("SE", "se", (SolutionCell(3, 1, "S", 0), SolutionCell(3, 4, "E", 1))),
        rejected=[
            RejectedCandidate(WordCandidate("Biro", ""), "BIRO", RejectReason.NO_INTERSECTION)
        ],
        seed=11,
    )


class PrettyTests(unittest.TestCase):
    def test_format_layout_renders_rows(self) -> None:
        rendered = format_layout(sample_layout()).splitlines()
        self.assertEqual(len(rendered), 2 + 8)
        self.assertEqual(rendered[3].split("|")[1].split(), [".", "C", "A", "s", "A", ".", ".", "."])
        self.assertIn("e", rendered[6])

    def test_format_clues_by_direction(self) -> None:
        self.assertEqual(format_clues(sample_layout(), Direction.DOWN), ["   2. Stella del giorno (4)"])

    def test_print_layout_stats_sections(self) -> None:
        stream = io.StringIO()
        print_layout_stats(sample_layout(), stream=stream)
        output = stream.getvalue()
        self.assertIn("--- Across ---", output)
        self.assertIn("--- Down ---", output)
        self.assertIn("Biro: no intersection found", output)
        self.assertIn("se -> SE", output)
        self.assertIn("Seed: 11", output)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
