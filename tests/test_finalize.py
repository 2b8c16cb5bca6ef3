import unittest

from wordpuzzle.core.constants import Direction
from wordpuzzle.core.models import ClueEntry, CrosswordPlacement
from wordpuzzle.engine.grid import LetterGrid
from wordpuzzle.engine.numbering import number_clues
from wordpuzzle.engine.trimming import trim_crossword


class TrimTests(unittest.TestCase):
    def test_interior_word_gets_one_cell_margin(self) -> None:
        grid = LetterGrid.square(10)
        grid.write("HI", 4, 4, Direction.ACROSS.step)
        placement = CrosswordPlacement("HI", "greeting", 4, 4, Direction.ACROSS)

        trimmed, placements, offset = trim_crossword(grid, [placement])

        self.assertEqual(offset, (3, 3))
        self.assertEqual(trimmed.to_rows(), [
            [None, None, None, None],
            [None, "H", "I", None],
            [None, None, None, None],
        ])
        self.assertEqual((placements[0].row, placements[0].col), (1, 1))
        # the source grid is left untouched
        self.assertEqual(grid.bounds.rows, 10)

    def test_margin_is_clamped_at_the_edges(self) -> None:
        grid = LetterGrid(4, 5)
        grid.write("AB", 0, 0, Direction.ACROSS.step)
        grid.write("YZ", 2, 4, Direction.DOWN.step)
        placements = [
            CrosswordPlacement("AB", "", 0, 0, Direction.ACROSS),
            CrosswordPlacement("YZ", "", 2, 4, Direction.DOWN),
        ]

        trimmed, shifted, offset = trim_crossword(grid, placements)

        self.assertEqual(offset, (0, 0))
        self.assertEqual((trimmed.bounds.rows, trimmed.bounds.cols), (4, 5))
        self.assertEqual(shifted, placements)

    def test_zero_margin(self) -> None:
        grid = LetterGrid.square(8)
        grid.write("OK", 3, 2, Direction.DOWN.step)
        trimmed, _, offset = trim_crossword(grid, [], margin=0)
        self.assertEqual(offset, (3, 2))
        self.assertEqual(trimmed.to_rows(), [["O"], ["K"]])


class NumberingTests(unittest.TestCase):
    def test_shared_start_cell_shares_a_number(self) -> None:
        across, down = number_clues(
            [
                CrosswordPlacement("TOE", "t", 0, 2, Direction.DOWN),
                CrosswordPlacement("CAT", "c", 0, 0, Direction.ACROSS),
                CrosswordPlacement("COW", "w", 0, 0, Direction.DOWN),
            ]
        )
        self.assertEqual(across, [ClueEntry(1, "c", "CAT", 0, 0)])
        self.assertEqual(
            down,
            [ClueEntry(1, "w", "COW", 0, 0), ClueEntry(2, "t", "TOE", 0, 2)],
        )

    def test_numbers_follow_reading_order(self) -> None:
        across, down = number_clues(
            [
                CrosswordPlacement("SEED", "", 5, 0, Direction.ACROSS),
                CrosswordPlacement("LATE", "", 2, 3, Direction.DOWN),
                CrosswordPlacement("EARLY", "", 2, 1, Direction.DOWN),
                CrosswordPlacement("MAP", "", 3, 0, Direction.ACROSS),
            ]
        )
        self.assertEqual([(c.number, c.answer) for c in down], [(1, "EARLY"), (2, "LATE")])
        self.assertEqual([(c.number, c.answer) for c in across], [(3, "MAP"), (4, "SEED")])

    def test_empty(self) -> None:
        self.assertEqual(number_clues([]), ([], []))


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
