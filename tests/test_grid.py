import unittest

from crosslayout.core.constants import Bounds, Direction
from crosslayout.core.exceptions import SlotPlacementError
from crosslayout.core.models import CrosswordLayout, PlacedWord, SolutionCell, SolutionData
from crosslayout.engine.grid import LetterGrid, build_cell_matrix


def seeded_grid() -> LetterGrid:
    grid = LetterGrid(Bounds(width=14, height=14))
    grid.place_word("CASA", 5, 7, Direction.ACROSS)
    return grid


class LetterGridTests(unittest.TestCase):
    def test_place_word_records_letters_in_order(self) -> None:
        grid = seeded_grid()
        self.assertEqual(len(grid), 4)
        self.assertEqual(grid.letter_at(7, 7), "S")
        self.assertIsNone(grid.letter_at(7, 8))
        self.assertEqual([coord for coord, _ in grid.occupied()], [(5, 7), (6, 7), (7, 7), (8, 7)])

    def test_crossing_on_matching_letter_is_valid(self) -> None:
        grid = seeded_grid()
        self.assertTrue(grid.can_place("SOLE", 7, 7, Direction.DOWN))

    def test_letter_conflict_is_invalid(self) -> None:
        grid = seeded_grid()
        self.assertFalse(grid.can_place("COLE", 7, 7, Direction.DOWN))

    def test_out_of_bounds_is_invalid(self) -> None:
        grid = seeded_grid()
        self.assertFalse(grid.can_place("CASA", 12, 0, Direction.ACROSS))
        self.assertFalse(grid.can_place("AB", -1, 0, Direction.ACROSS))
        self.assertFalse(grid.can_place("ABC", 0, 12, Direction.DOWN))
        self.assertTrue(grid.can_place("ABC", 0, 11, Direction.DOWN))

    def test_place_word_raises_on_conflict(self) -> None:
        grid = seeded_grid()
        with self.assertRaises(SlotPlacementError):
            grid.place_word("COLE", 7, 7, Direction.DOWN)
        self.assertEqual(len(grid), 4)

    def test_place_word_raises_outside_bounds(self) -> None:
        grid = seeded_grid()
        with self.assertRaises(SlotPlacementError):
            grid.place_word("LONGWORD", 10, 0, Direction.ACROSS)

    def test_strict_adjacency_rejects_parallel_neighbours(self) -> None:
        grid = seeded_grid()
        self.assertTrue(grid.can_place("OR", 5, 8, Direction.ACROSS))
        self.assertFalse(grid.can_place("OR", 5, 8, Direction.ACROSS, strict_adjacency=True))

    def test_strict_adjacency_rejects_end_to_end_extension(self) -> None:
        grid = seeded_grid()
        self.assertTrue(grid.can_place("SO", 9, 7, Direction.ACROSS))
        self.assertFalse(grid.can_place("SO", 9, 7, Direction.ACROSS, strict_adjacency=True))

    def test_strict_adjacency_allows_clean_crossing(self) -> None:
        grid = seeded_grid()
        self.assertTrue(grid.can_place("SOLE", 7, 7, Direction.DOWN, strict_adjacency=True))


class CellMatrixTests(unittest.TestCase):
    def test_matrix_marks_numbers_words_and_solution(self) -> None:
        layout = CrosswordLayout(
            words=[
                PlacedWord("word-0", "CASA", "Home", Direction.ACROSS, 1, 1, 1),
                PlacedWord("word-1", "SOLE", "Sun", Direction.DOWN, 3, 1, 2),
            ],
            width=8,
            height=8,
            solution=SolutionData("SO", "so", (SolutionCell(3, 1, "S", 0), SolutionCell(3, 2, "O", 1))),
        )
        matrix = build_cell_matrix(layout)
        self.assertEqual(len(matrix), 8)
        self.assertEqual(len(matrix[0]), 8)
        crossing = matrix[1][3]
        self.assertEqual(crossing.char, "S")
        self.assertEqual(crossing.word_ids, ["word-0", "word-1"])
        self.assertEqual(crossing.number, 2)
        self.assertEqual(crossing.solution_index, 1)
        self.assertEqual(matrix[1][1].number, 1)
        self.assertEqual(matrix[2][3].solution_index, 2)
        self.assertFalse(matrix[0][0].is_letter)
        self.assertFalse(matrix[1][1].is_solution_cell)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
