import unittest

from crosslayout.core.constants import RejectReason
from crosslayout.core.models import WordCandidate
from crosslayout.data.normalization import normalize_word, prepare_candidates


class NormalizeWordTests(unittest.TestCase):
    def test_strips_accents(self) -> None:
        self.assertEqual(normalize_word("café"), "CAFE")

    def test_strips_tilde(self) -> None:
        self.assertEqual(normalize_word("Ñoño"), "NONO")

    def test_removes_punctuation_digits_and_spaces(self) -> None:
        self.assertEqual(normalize_word("l'amore mio, 2024!"), "LAMOREMIO")

    def test_empty_input(self) -> None:
        self.assertEqual(normalize_word(""), "")

    def test_non_latin_letters_are_dropped(self) -> None:
        self.assertEqual(normalize_word("Αθήνα"), "")


class PrepareCandidatesTests(unittest.TestCase):
    def test_keeps_order_and_normalizes(self) -> None:
        kept, rejected = prepare_candidates(
            [WordCandidate("Città", "Urbe"), WordCandidate("mare", "Acqua salata")]
        )
        self.assertEqual([c.word for c in kept], ["CITTA", "MARE"])
        self.assertEqual(kept[0].clue, "Urbe")
        self.assertEqual(kept[0].source.word, "Città")
        self.assertEqual(rejected, [])

    def test_filters_short_long_and_duplicates(self) -> None:
        kept, rejected = prepare_candidates(
            [
                WordCandidate("a!", "short"),
                WordCandidate("precipitevolissimevolmente", "long"),
                WordCandidate("casa", "home"),
                WordCandidate("CASA!", "again"),
            ]
        )
        self.assertEqual([c.word for c in kept], ["CASA"])
        reasons = {entry.candidate.word: entry.reason for entry in rejected}
        self.assertEqual(reasons["a!"], RejectReason.TOO_SHORT)
        self.assertEqual(reasons["precipitevolissimevolmente"], RejectReason.TOO_LONG)
        self.assertEqual(reasons["CASA!"], RejectReason.DUPLICATE)

    def test_boundary_lengths_are_kept(self) -> None:
        kept, rejected = prepare_candidates(
            [WordCandidate("ok", ""), WordCandidate("ABCDEFGHIJKLMN", "")]
        )
        self.assertEqual(len(kept), 2)
        self.assertEqual(rejected, [])

    def test_custom_max_length(self) -> None:
        kept, rejected = prepare_candidates([WordCandidate("STELLA", "")], max_length=5)
        self.assertEqual(kept, [])
        self.assertEqual(rejected[0].reason, RejectReason.TOO_LONG)
        self.assertEqual(rejected[0].normalized, "STELLA")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
