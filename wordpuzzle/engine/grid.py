"""Grid representation and helper utilities."""

from __future__ import annotations

import random
from typing import List, Optional, Tuple

from ..core.constants import ALPHABET, Bounds
from ..core.exceptions import PlacementError


Step = Tuple[int, int]


class LetterGrid:
    """Mutable letter buffer owned by a single generation run.

    ``None`` marks an empty cell (word search, before filling) or a block
    (crossword).
    """

    def __init__(self, rows: int, cols: int) -> None:
        self.bounds = Bounds(rows=rows, cols=cols)
        self.cells: List[List[Optional[str]]] = [[None] * cols for _ in range(rows)]

    @classmethod
    def square(cls, dimension: int) -> "LetterGrid":
        return cls(dimension, dimension)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def cell(self, row: int, col: int) -> Optional[str]:
        return self.cells[row][col]

    def has_letter(self, row: int, col: int) -> bool:
        """True when ``(row, col)`` is inside the grid and holds a letter."""

        return self.bounds.contains(row, col) and self.cells[row][col] is not None

    @property
    def letter_count(self) -> int:
        return sum(1 for row in self.cells for cell in row if cell is not None)

    def fits(self, word: str, row: int, col: int, step: Step) -> bool:
        """Check every cell on the path is in bounds and empty or already ``word[i]``."""

        dr, dc = step
        for index, letter in enumerate(word):
            r, c = row + index * dr, col + index * dc
            if not self.bounds.contains(r, c):
                return False
            existing = self.cells[r][c]
            if existing is not None and existing != letter:
                return False
        return True

    def used_bounds(self) -> Optional[Tuple[int, int, int, int]]:
        """Return ``(min_row, min_col, max_row, max_col)`` of letter cells."""

        rows = [r for r, row in enumerate(self.cells) if any(cell is not None for cell in row)]
        if not rows:
            return None
        cols = [
            c
            for c in range(self.bounds.cols)
            if any(self.cells[r][c] is not None for r in range(self.bounds.rows))
        ]
        return rows[0], cols[0], rows[-1], cols[-1]

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def write(self, word: str, row: int, col: int, step: Step) -> None:
        if not self.fits(word, row, col, step):
            raise PlacementError(f"Cannot write {word} at ({row},{col}) step {step}")
        dr, dc = step
        for index, letter in enumerate(word):
            self.cells[row + index * dr][col + index * dc] = letter

    def fill_empty(self, rng: random.Random, alphabet: str = ALPHABET) -> int:
        """Fill empty cells row by row with random letters; return how many."""

        filled = 0
        for row in self.cells:
            for c, cell in enumerate(row):
                if cell is None:
                    row[c] = rng.choice(alphabet)
                    filled += 1
        return filled

    def crop(self, top: int, left: int, bottom: int, right: int) -> "LetterGrid":
        """Return a new grid holding rows ``top..bottom`` and cols ``left..right`` inclusive."""

        cropped = LetterGrid(bottom - top + 1, right - left + 1)
        cropped.cells = [list(self.cells[r][left:right + 1]) for r in range(top, bottom + 1)]
        return cropped

    # ------------------------------------------------------------------
    # Serialization helpers
    # ------------------------------------------------------------------
    def to_rows(self) -> List[List[Optional[str]]]:
        return [list(row) for row in self.cells]
