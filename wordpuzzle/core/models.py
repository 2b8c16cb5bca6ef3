"""Data models supporting the puzzle generators."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Generic, List, Optional, Set, Tuple, TypeVar

from .constants import Direction, WordSearchDirection
from .exceptions import PuzzleError


T = TypeVar("T")


@dataclass(frozen=True)
class VocabularyEntry:
    """A crossword answer with its clue."""

    word: str
    clue: str = ""


@dataclass(frozen=True)
class WordSearchPlacement:
    """A committed word search word; one entry of the solution key."""

    word: str
    start_row: int
    start_col: int
    direction: WordSearchDirection

    @property
    def cells(self) -> List[Tuple[int, int]]:
        dr, dc = self.direction.step
        return [(self.start_row + i * dr, self.start_col + i * dc) for i in range(len(self.word))]

    def to_jsonable(self) -> Dict[str, Any]:
        return {
            "word": self.word,
            "startRow": self.start_row,
            "startCol": self.start_col,
            "direction": self.direction.value,
        }


@dataclass(frozen=True)
class CrosswordPlacement:
    """A committed crossword entry."""

    word: str
    clue: str
    row: int
    col: int
    direction: Direction

    @property
    def cells(self) -> List[Tuple[int, int]]:
        dr, dc = self.direction.step
        return [(self.row + i * dr, self.col + i * dc) for i in range(len(self.word))]

    def translated(self, row_offset: int, col_offset: int) -> "CrosswordPlacement":
        return replace(self, row=self.row - row_offset, col=self.col - col_offset)


@dataclass(frozen=True)
class ClueEntry:
    """A numbered clue as printed under the grid."""

    number: int
    clue: str
    answer: str
    row: int
    col: int

    def to_jsonable(self) -> Dict[str, Any]:
        return {
            "number": self.number,
            "clue": self.clue,
            "answer": self.answer,
            "row": self.row,
            "col": self.col,
        }


@dataclass(frozen=True)
class GridSize:
    rows: int
    cols: int


@dataclass
class WordSearchData:
    """Finished word search: filled grid plus its solution key."""

    grid: List[List[str]]
    words: List[str]
    size: int
    solution: List[WordSearchPlacement]
    skipped_words: List[str] = field(default_factory=list)

    def solution_cells(self) -> Set[Tuple[int, int]]:
        cells: Set[Tuple[int, int]] = set()
        for placement in self.solution:
            cells.update(placement.cells)
        return cells

    def to_jsonable(self) -> Dict[str, Any]:
        return {
            "grid": [list(row) for row in self.grid],
            "words": list(self.words),
            "size": self.size,
            "solution": [placement.to_jsonable() for placement in self.solution],
            "skippedWords": list(self.skipped_words),
        }


@dataclass
class CrosswordData:
    """Finished crossword: trimmed grid (``None`` for blocks) and clue lists."""

    grid: List[List[Optional[str]]]
    across_clues: List[ClueEntry]
    down_clues: List[ClueEntry]
    size: GridSize
    placements: List[CrosswordPlacement] = field(default_factory=list)
    skipped_words: List[str] = field(default_factory=list)

    def to_jsonable(self) -> Dict[str, Any]:
        return {
            "grid": [list(row) for row in self.grid],
            "acrossClues": [clue.to_jsonable() for clue in self.across_clues],
            "downClues": [clue.to_jsonable() for clue in self.down_clues],
            "size": {"rows": self.size.rows, "cols": self.size.cols},
            "skippedWords": list(self.skipped_words),
        }


@dataclass
class PuzzleResult(Generic[T]):
    """Tagged success/failure value returned by the public generators."""

    ok: bool
    data: Optional[T] = None
    error: Optional[PuzzleError] = None

    @classmethod
    def success(cls, data: T) -> "PuzzleResult[T]":
        return cls(ok=True, data=data)

    @classmethod
    def failure(cls, error: PuzzleError) -> "PuzzleResult[T]":
        return cls(ok=False, error=error)

    @property
    def message(self) -> Optional[str]:
        return str(self.error) if self.error is not None else None

    def unwrap(self) -> T:
        """Return the data, re-raising the stored error on failure."""

        if not self.ok or self.data is None:
            raise self.error or PuzzleError("Puzzle generation failed")
        return self.data
