import unittest

from wordpuzzle.core.constants import Direction
from wordpuzzle.core.exceptions import InsufficientIntersectionsError, NoValidWordsError
from wordpuzzle.core.models import ClueEntry, CrosswordPlacement, VocabularyEntry
from wordpuzzle.engine.crossword import CrosswordConfig, CrosswordGenerator, generate_crossword
from wordpuzzle.engine.grid import LetterGrid


SCIENCE = [
    ("photosynthesis", "How plants make food"),
    ("chlorophyll", "Green pigment"),
    ("stomata", "Leaf pores"),
    ("glucose", "Simple sugar"),
    ("oxygen", "Gas released by plants"),
    ("carbon", "Element in all life"),
    ("light", "Energy source"),
    ("water", "H2O"),
    ("root", "Absorbs water"),
]


class CrosswordScenarioTests(unittest.TestCase):
    def test_single_word_is_not_enough(self) -> None:
        result = generate_crossword([{"word": "sun", "clue": "star"}])
        self.assertFalse(result.ok)
        self.assertIsInstance(result.error, NoValidWordsError)

    def test_two_words_share_a_letter(self) -> None:
        result = generate_crossword([{"word": "sun", "clue": "a"}, {"word": "run", "clue": "b"}])
        self.assertTrue(result.ok)
        data = result.unwrap()

        self.assertEqual(
            data.placements,
            [
                CrosswordPlacement("SUN", "a", 2, 1, Direction.ACROSS),
                CrosswordPlacement("RUN", "b", 1, 2, Direction.DOWN),
            ],
        )
        self.assertEqual((data.size.rows, data.size.cols), (5, 5))
        self.assertEqual(data.across_clues, [ClueEntry(2, "a", "SUN", 2, 1)])
        self.assertEqual(data.down_clues, [ClueEntry(1, "b", "RUN", 1, 2)])
        self.assertEqual(data.grid[2][1:4], ["S", "U", "N"])
        self.assertEqual([data.grid[r][2] for r in range(1, 4)], ["R", "U", "N"])
        self.assertEqual(data.grid[0], [None] * 5)
        self.assertEqual(data.skipped_words, [])

    def test_summary_reports_letter_cells(self) -> None:
        with self.assertLogs("wordpuzzle.engine.crossword", level="INFO") as logs:
            generate_crossword([("sun", "a"), ("run", "b")])
        self.assertTrue(
            any("Crossword placed 2/2 words (5 letter cells)" in line for line in logs.output)
        )

    def test_words_without_shared_letters_fail(self) -> None:
        result = generate_crossword([("abc", "first"), ("xyz", "second")])
        self.assertFalse(result.ok)
        self.assertIsInstance(result.error, InsufficientIntersectionsError)

    def test_unplaceable_word_is_reported(self) -> None:
        data = generate_crossword([("cat", "pet"), ("act", "do"), ("zzz", "sleep")]).unwrap()
        self.assertEqual([p.word for p in data.placements], ["CAT", "ACT"])
        self.assertEqual(data.skipped_words, ["ZZZ"])

    def test_across_word_crossing_a_down_word(self) -> None:
        data = generate_crossword(
            [("towering", "very tall"), ("wagon", "cart"), ("map", "chart")]
        ).unwrap()

        self.assertEqual(
            data.placements,
            [
                CrosswordPlacement("TOWERING", "very tall", 4, 1, Direction.ACROSS),
                CrosswordPlacement("WAGON", "cart", 1, 2, Direction.DOWN),
                CrosswordPlacement("MAP", "chart", 2, 1, Direction.ACROSS),
            ],
        )
        self.assertEqual((data.size.rows, data.size.cols), (7, 10))
        self.assertEqual([(c.number, c.answer) for c in data.across_clues], [(2, "MAP"), (3, "TOWERING")])
        self.assertEqual([(c.number, c.answer) for c in data.down_clues], [(1, "WAGON")])


class CrosswordInvariantTests(unittest.TestCase):
    def setUp(self) -> None:
        self.data = generate_crossword(SCIENCE).unwrap()

    def test_every_later_word_intersects_an_earlier_one(self) -> None:
        seen = set()
        for index, placement in enumerate(self.data.placements):
            cells = set(placement.cells)
            if index:
                self.assertTrue(cells & seen, placement.word)
            seen |= cells

    def test_letters_match_grid_within_bounds(self) -> None:
        for placement in self.data.placements:
            for letter, (row, col) in zip(placement.word, placement.cells):
                self.assertTrue(0 <= row < self.data.size.rows)
                self.assertTrue(0 <= col < self.data.size.cols)
                self.assertEqual(self.data.grid[row][col], letter)

    def test_seed_is_longest_word_across(self) -> None:
        seed = self.data.placements[0]
        self.assertEqual(seed.word, "PHOTOSYNTHESIS")
        self.assertIs(seed.direction, Direction.ACROSS)

    def test_grid_matches_reported_size(self) -> None:
        self.assertEqual(len(self.data.grid), self.data.size.rows)
        self.assertTrue(all(len(row) == self.data.size.cols for row in self.data.grid))

    def test_deterministic(self) -> None:
        again = generate_crossword(SCIENCE).unwrap()
        self.assertEqual(again.grid, self.data.grid)
        self.assertEqual(again.placements, self.data.placements)

    def test_every_placed_word_has_one_clue(self) -> None:
        clues = self.data.across_clues + self.data.down_clues
        self.assertEqual(
            sorted(c.answer for c in clues),
            sorted(p.word for p in self.data.placements),
        )


class PlacementRuleTests(unittest.TestCase):
    def setUp(self) -> None:
        self.grid = LetterGrid.square(10)
        self.grid.write("CAT", 5, 2, Direction.ACROSS.step)
        self.generator = CrosswordGenerator()

    def test_valid_perpendicular_crossing(self) -> None:
        self.assertTrue(self.generator.can_place(self.grid, "ARM", 5, 3, Direction.DOWN))

    def test_cannot_extend_a_parallel_run(self) -> None:
        self.assertFalse(self.generator.can_place(self.grid, "AT", 5, 3, Direction.ACROSS))

    def test_cannot_brush_a_neighbouring_word(self) -> None:
        self.grid.write("TOE", 5, 4, Direction.DOWN.step)
        self.assertFalse(self.generator.can_place(self.grid, "ARM", 5, 3, Direction.DOWN))

    def test_cannot_stop_short_of_a_parallel_run(self) -> None:
        self.assertFalse(self.generator.can_place(self.grid, "CA", 5, 2, Direction.ACROSS))

    def test_cannot_brush_a_word_on_the_leading_side(self) -> None:
        self.assertTrue(self.generator.can_place(self.grid, "ARM", 5, 3, Direction.DOWN))
        self.grid.write("COW", 5, 2, Direction.DOWN.step)
        self.assertFalse(self.generator.can_place(self.grid, "ARM", 5, 3, Direction.DOWN))

    def test_letter_mismatch(self) -> None:
        self.assertFalse(self.generator.can_place(self.grid, "OX", 5, 3, Direction.DOWN))

    def test_floating_word(self) -> None:
        self.assertFalse(self.generator.can_place(self.grid, "DOG", 0, 0, Direction.DOWN))

    def test_out_of_bounds(self) -> None:
        self.assertFalse(self.generator.can_place(self.grid, "CATS", 5, 7, Direction.ACROSS))
        self.assertFalse(self.generator.can_place(self.grid, "ARC", -1, 2, Direction.DOWN))
        self.assertFalse(self.generator.can_place(self.grid, "TAXI", 8, 4, Direction.DOWN))

    def test_first_valid_placement_wins(self) -> None:
        grid = LetterGrid.square(20)
        seed = self.generator.place_seed(grid, VocabularyEntry("SUN", ""))
        self.assertEqual((seed.row, seed.col), (10, 8))
        # NUN could cross at U or at N; the earlier letter of SUN wins.
        found = self.generator.find_placement(grid, "NUN", [seed])
        self.assertEqual(found, (9, 9, Direction.DOWN))


class CrosswordConfigTests(unittest.TestCase):
    def test_rejects_single_word_minimum(self) -> None:
        with self.assertRaises(ValueError):
            CrosswordConfig(min_words=1)

    def test_wider_margin(self) -> None:
        data = generate_crossword(
            [("sun", "a"), ("run", "b")], config=CrosswordConfig(margin=2)
        ).unwrap()
        self.assertEqual((data.size.rows, data.size.cols), (7, 7))


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
