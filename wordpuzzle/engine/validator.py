"""Deterministic rule validation for generated puzzles."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Set, Tuple

from ..core.constants import ALPHABET
from ..core.exceptions import ValidationError
from ..core.models import CrosswordData, WordSearchData
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


class PuzzleValidator:
    """Runs deterministic validation over a finished puzzle."""

    def validate_word_search(self, data: WordSearchData) -> ValidationResult:
        try:
            self._check_shape(data.grid, data.size, data.size)
            self._check_fully_lettered(data.grid)
            for placement in data.solution:
                self._check_path(data.grid, placement.word, placement.cells)
        except ValidationError as exc:
            return self._failed(exc)
        return ValidationResult(ok=True, messages=[])

    def validate_crossword(self, data: CrosswordData) -> ValidationResult:
        try:
            self._check_shape(data.grid, data.size.rows, data.size.cols)
            for placement in data.placements:
                self._check_path(data.grid, placement.word, placement.cells)
            self._check_connected([p.cells for p in data.placements])
            clue_count = len(data.across_clues) + len(data.down_clues)
            if clue_count != len(data.placements):
                raise ValidationError(
                    f"{clue_count} clues for {len(data.placements)} placed words"
                )
        except ValidationError as exc:
            return self._failed(exc)
        return ValidationResult(ok=True, messages=[])

    @staticmethod
    def _failed(exc: ValidationError) -> ValidationResult:
        LOGGER.error("Validation failed: %s", exc)
        return ValidationResult(ok=False, messages=[str(exc)])

    @staticmethod
    def _check_shape(grid: Sequence[Sequence[Optional[str]]], rows: int, cols: int) -> None:
        if len(grid) != rows or any(len(row) != cols for row in grid):
            raise ValidationError(f"Grid is not {rows}x{cols}")

    @staticmethod
    def _check_fully_lettered(grid: Sequence[Sequence[Optional[str]]]) -> None:
        for r, row in enumerate(grid):
            for c, cell in enumerate(row):
                if cell is None or len(cell) != 1 or cell not in ALPHABET:
                    raise ValidationError(f"Invalid letter {cell!r} at ({r},{c})")

    @staticmethod
    def _check_path(
        grid: Sequence[Sequence[Optional[str]]],
        word: str,
        cells: Sequence[Tuple[int, int]],
    ) -> None:
        rows = len(grid)
        cols = len(grid[0]) if rows else 0
        for letter, (r, c) in zip(word, cells):
            if not (0 <= r < rows and 0 <= c < cols):
                raise ValidationError(f"{word} leaves the grid at ({r},{c})")
            if grid[r][c] != letter:
                raise ValidationError(
                    f"{word} expects {letter} at ({r},{c}) but grid holds {grid[r][c]!r}"
                )

    @staticmethod
    def _check_connected(paths: Sequence[Sequence[Tuple[int, int]]]) -> None:
        seen: Set[Tuple[int, int]] = set()
        for index, cells in enumerate(paths):
            if index and seen.isdisjoint(cells):
                raise ValidationError(f"Word #{index + 1} does not intersect earlier words")
            seen.update(cells)
