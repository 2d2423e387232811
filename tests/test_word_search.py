import random
import unittest

from puzzlegen.core.constants import ALPHABET, SENTINEL, WordDirection
from puzzlegen.core.exceptions import InvalidGridSizeError, InvalidWordError, PuzzleError
from puzzlegen.data.normalization import clean_word
from puzzlegen.engine.matcher import WordMatcher
from puzzlegen.engine.search_grid import SearchGrid
from puzzlegen.engine.word_placement import (WordPlacementEngine, WordSearchConfig,
                                             generate_word_search)

SAMPLE_TEXT = (
    "C A T X \r\n"
    "A Q W E \r\n"
    "T Y U I \r\n"
    "O P L K \r\n"
)


class SearchGridTests(unittest.TestCase):
    def test_size_below_minimum_rejected(self) -> None:
        with self.assertRaises(InvalidGridSizeError):
            SearchGrid(3)
        grid = SearchGrid(4)
        self.assertEqual(len(grid.cells), 4)
        self.assertTrue(all(cell == SENTINEL for row in grid.cells for cell in row))
        self.assertFalse(grid.is_complete())

    def test_fits_allows_crossing_on_same_letter(self) -> None:
        grid = SearchGrid(4)
        grid.write(0, 0, "CAT", WordDirection.HORIZONTAL)
        self.assertTrue(grid.fits(0, 0, "CA", WordDirection.VERTICAL))
        self.assertTrue(grid.fits(0, 1, "AXE", WordDirection.VERTICAL))
        self.assertFalse(grid.fits(0, 0, "COT", WordDirection.HORIZONTAL))
        self.assertFalse(grid.fits(0, 2, "BED", WordDirection.VERTICAL))

    def test_inverse_directions_use_exact_end_cell(self) -> None:
        grid = SearchGrid(4)
        self.assertTrue(grid.fits(0, 3, "WORD", WordDirection.HORIZONTAL_INVERSE))
        self.assertFalse(grid.fits(0, 2, "WORD", WordDirection.HORIZONTAL_INVERSE))
        self.assertTrue(grid.fits(3, 0, "WORD", WordDirection.VERTICAL_INVERSE))
        self.assertTrue(grid.fits(3, 3, "WORD", WordDirection.DIAGONAL_INVERSE))
        self.assertFalse(grid.fits(3, 2, "WORD", WordDirection.DIAGONAL_INVERSE))

    def test_forward_directions_stay_in_bounds(self) -> None:
        grid = SearchGrid(4)
        self.assertTrue(grid.fits(0, 0, "WORD", WordDirection.HORIZONTAL))
        self.assertFalse(grid.fits(0, 1, "WORD", WordDirection.HORIZONTAL))
        self.assertFalse(grid.fits(1, 0, "WORD", WordDirection.DIAGONAL))
        self.assertFalse(grid.fits(4, 0, "W", WordDirection.VERTICAL))

    def test_write_on_frozen_grid_raises(self) -> None:
        grid = SearchGrid(4)
        grid.freeze()
        with self.assertRaises(PuzzleError):
            grid.write(0, 0, "CAT", WordDirection.HORIZONTAL)

    def test_text_round_trip(self) -> None:
        grid = SearchGrid.from_text(SAMPLE_TEXT, 4, ["CAT"])
        self.assertEqual(grid.cells[0], ["C", "A", "T", "X"])
        self.assertEqual(grid.to_text(), SAMPLE_TEXT)
        self.assertEqual(SearchGrid.from_text(grid.to_text(), 4).cells, grid.cells)

    def test_text_with_wrong_row_count_rejected(self) -> None:
        with self.assertRaises(InvalidGridSizeError):
            SearchGrid.convert_to_character_matrix(SAMPLE_TEXT, 5)


class WordMatcherTests(unittest.TestCase):
    def setUp(self) -> None:
        self.grid = SearchGrid.from_text(SAMPLE_TEXT, 4)
        self.matcher = WordMatcher(self.grid)

    def test_word_read_in_every_direction(self) -> None:
        self.assertEqual(
            self.matcher.matching_directions(0, 0, "CAT"),
            [WordDirection.HORIZONTAL, WordDirection.VERTICAL],
        )
        self.assertTrue(self.matcher.is_word_correct(0, 2, "TAC"))
        self.assertTrue(self.matcher.is_word_correct(2, 0, "TAC"))
        self.assertTrue(self.matcher.is_word_correct(3, 3, "KUQC"))
        self.assertTrue(self.matcher.is_word_correct(0, 0, "CQUK"))

    def test_misses_and_out_of_range_starts(self) -> None:
        self.assertFalse(self.matcher.is_word_correct(0, 0, "COT"))
        self.assertFalse(self.matcher.is_word_correct(0, 1, "CAT"))
        self.assertFalse(self.matcher.is_word_correct(5, 5, "C"))
        self.assertFalse(self.matcher.is_word_correct(0, 0, "CATXY"))
        self.assertFalse(self.matcher.is_word_correct(0, 0, ""))

    def test_lookup_compares_word_as_given(self) -> None:
        self.assertFalse(self.matcher.is_word_correct(0, 0, "C-A-T"))
        self.assertFalse(self.matcher.is_word_correct(0, 0, "cat"))
        self.assertEqual(self.matcher.count_occurrences("cat"), 0)
        for word in ("CAT", "C-A-T", "cat"):
            self.assertEqual(
                self.matcher.is_word_correct(0, 0, word),
                self.grid.is_word_correct(0, 0, word),
            )

    def test_repeated_lookup_gives_same_answer(self) -> None:
        for row, col, word in ((0, 0, "CAT"), (3, 3, "KUQC"), (1, 1, "CAT")):
            first = self.matcher.is_word_correct(row, col, word)
            second = self.matcher.is_word_correct(row, col, word)
            self.assertEqual(first, second)
            self.assertEqual(
                self.matcher.matching_directions(row, col, word),
                self.matcher.matching_directions(row, col, word),
            )

    def test_lookup_does_not_modify_grid(self) -> None:
        before = [list(row) for row in self.grid.cells]
        self.matcher.is_word_correct(0, 0, "CAT")
        self.matcher.find("TAC")
        self.assertEqual(self.grid.cells, before)

    def test_find_and_count(self) -> None:
        found = self.matcher.find("TAC")
        self.assertEqual(
            {(p.row, p.col, p.direction) for p in found},
            {
                (0, 2, WordDirection.HORIZONTAL_INVERSE),
                (2, 0, WordDirection.VERTICAL_INVERSE),
            },
        )
        self.assertEqual(self.matcher.count_occurrences("CAT"), 2)
        self.assertEqual(self.matcher.count_occurrences("ZEBRA"), 0)


class WordPlacementEngineTests(unittest.TestCase):
    def test_words_hidden_in_fully_lettered_grid(self) -> None:
        grid = generate_word_search(10, ["CAT", "DOG"], seed=1)
        self.assertEqual(grid.size, 10)
        self.assertTrue(grid.frozen)
        self.assertTrue(grid.is_complete())
        self.assertTrue(all(cell in ALPHABET for row in grid.cells for cell in row))
        self.assertEqual(sorted(grid.placed_words), ["CAT", "DOG"])
        self.assertEqual(grid.skipped_words, [])

        matcher = WordMatcher(grid)
        for placement in grid.placements:
            self.assertTrue(matcher.is_word_correct(placement.row, placement.col, placement.word))
            self.assertIn(placement.direction, matcher.matching_directions(
                placement.row, placement.col, placement.word
            ))

    def test_crowded_grid_keeps_every_placement_readable(self) -> None:
        words = ["ABCD", "BCDA", "CDAB", "DABC", "ABBA", "DCBA", "CAB"]
        for seed in range(60):
            engine = WordPlacementEngine(WordSearchConfig(seed=seed, validate=False))
            grid = engine.generate(4, words)
            self.assertTrue(grid.is_complete())
            self.assertEqual(len(grid.placements) + len(grid.skipped_words), len(words))
            for placement in grid.placements:
                self.assertTrue(
                    grid.reads(placement.row, placement.col, placement.word, placement.direction),
                    f"seed {seed}: {placement} no longer reads back",
                )

    def test_word_longer_than_grid_is_skipped(self) -> None:
        with self.assertLogs("puzzlegen", level="WARNING") as logs:
            grid = generate_word_search(6, ["ABCDEFGHIJKL", "SUN"], seed=4)
        self.assertEqual(grid.skipped_words, ["ABCDEFGHIJKL"])
        self.assertEqual(grid.placed_words, ["SUN"])
        self.assertTrue(any("ABCDEFGHIJKL" in line for line in logs.output))
        self.assertTrue(grid.is_complete())

    def test_grid_size_three_rejected(self) -> None:
        with self.assertRaises(InvalidGridSizeError):
            generate_word_search(3, ["CAT"])

    def test_grid_size_four_accepted(self) -> None:
        grid = generate_word_search(4, ["CAT"], seed=2)
        self.assertEqual(grid.placed_words, ["CAT"])

    def test_invalid_word_lists_rejected(self) -> None:
        engine = WordPlacementEngine(WordSearchConfig(seed=0))
        with self.assertRaises(InvalidWordError):
            engine.generate(6, [])
        with self.assertRaises(InvalidWordError):
            engine.generate(6, ["123"])
        with self.assertRaises(InvalidWordError):
            engine.generate(6, "CAT")

    def test_words_are_normalized(self) -> None:
        self.assertEqual(clean_word("ação"), "ACAO")
        self.assertEqual(clean_word("ice-cream 2"), "ICECREAM")
        grid = generate_word_search(8, ["ação", "dog"], seed=6)
        self.assertEqual(grid.words, ["ACAO", "DOG"])

    def test_duplicate_words_are_kept(self) -> None:
        grid = generate_word_search(8, ["CAT", "CAT"], seed=8)
        self.assertEqual(grid.words, ["CAT", "CAT"])
        self.assertEqual(len(grid.placements) + len(grid.skipped_words), 2)

    def test_same_seed_same_grid(self) -> None:
        first = generate_word_search(9, ["APPLE", "PEAR", "PLUM"], seed=21)
        second = generate_word_search(9, ["APPLE", "PEAR", "PLUM"], rng=random.Random(21))
        self.assertEqual(first.cells, second.cells)
        self.assertEqual(first.placements, second.placements)

    def test_serialized_grid_restores_placements(self) -> None:
        grid = generate_word_search(7, ["MOON", "STAR"], seed=13)
        restored = SearchGrid.from_jsonable(grid.to_jsonable())
        self.assertEqual(restored.cells, grid.cells)
        self.assertEqual(restored.placements, grid.placements)
        payload = grid.to_jsonable()
        del payload["cells"]
        self.assertEqual(SearchGrid.from_jsonable(payload).cells, grid.cells)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
