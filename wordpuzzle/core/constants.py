"""Shared constants and enumerations for the puzzle engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple


ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"


class PuzzleSize(str, Enum):
    """Word search size hints."""

    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


class WordSearchDirection(str, Enum):
    """Directions a word search word may run in (never backwards)."""

    RIGHT = "right"
    DOWN = "down"
    DIAGONAL_DOWN_RIGHT = "diagonal-right"

    @property
    def step(self) -> Tuple[int, int]:
        return WORD_SEARCH_STEPS[self]


class Direction(str, Enum):
    """Crossword entry directions."""

    ACROSS = "across"
    DOWN = "down"

    @property
    def step(self) -> Tuple[int, int]:
        return (0, 1) if self is Direction.ACROSS else (1, 0)

    @property
    def perpendicular(self) -> "Direction":
        return Direction.DOWN if self is Direction.ACROSS else Direction.ACROSS


WORD_SEARCH_STEPS: Dict[WordSearchDirection, Tuple[int, int]] = {
    WordSearchDirection.RIGHT: (0, 1),
    WordSearchDirection.DOWN: (1, 0),
    WordSearchDirection.DIAGONAL_DOWN_RIGHT: (1, 1),
}

# (floor, pad): dimension = max(floor, longest word + pad)
SIZE_PROFILES: Dict[PuzzleSize, Tuple[int, int]] = {
    PuzzleSize.SMALL: (10, 2),
    PuzzleSize.MEDIUM: (15, 3),
    PuzzleSize.LARGE: (20, 4),
}

WORD_SEARCH_MIN_LENGTH = 3
WORD_SEARCH_MAX_LENGTH = 15
WORD_SEARCH_MAX_TRIALS = 100

CROSSWORD_MIN_DIMENSION = 20
CROSSWORD_MIN_WORDS = 2
CROSSWORD_MIN_LENGTH = 2
CROSSWORD_TRIM_MARGIN = 1


@dataclass(frozen=True)
class Bounds:
    """Simple rectangle bounds helper."""

    rows: int
    cols: int

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols
