"""Crossword generation.

Greedy layout in an oversized square grid:
  1. Seed: the longest word runs across through the middle of the grid.
  2. Intersect: every other word (longest first) takes the first valid
     perpendicular placement through a letter it shares with an already
     placed word. There is no backtracking; words that fit nowhere are skipped.
  3. Finalize: crop to the used area and number the clues.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Sequence, Tuple

from ..core.constants import (
    CROSSWORD_MIN_DIMENSION,
    CROSSWORD_MIN_LENGTH,
    CROSSWORD_MIN_WORDS,
    CROSSWORD_TRIM_MARGIN,
    Direction,
)
from ..core.exceptions import InsufficientIntersectionsError, PuzzleError, ValidationError
from ..core.models import (
    CrosswordData,
    CrosswordPlacement,
    GridSize,
    PuzzleResult,
    VocabularyEntry,
)
from ..data.normalization import normalize_vocabulary
from ..utils.logger import get_logger
from .allocator import allocate_crossword
from .grid import LetterGrid
from .numbering import number_clues
from .trimming import trim_crossword
from .validator import PuzzleValidator


LOGGER = get_logger(__name__)


@dataclass
class CrosswordConfig:
    min_dimension: int = CROSSWORD_MIN_DIMENSION
    margin: int = CROSSWORD_TRIM_MARGIN
    min_words: int = CROSSWORD_MIN_WORDS
    min_length: int = CROSSWORD_MIN_LENGTH

    def __post_init__(self) -> None:
        if self.min_words < 2:
            raise ValueError("a crossword needs at least two words")
        if self.margin < 0:
            raise ValueError("margin cannot be negative")


class CrosswordGenerator:
    """Deterministic greedy crossword builder."""

    def __init__(
        self,
        config: Optional[CrosswordConfig] = None,
        validator: Optional[PuzzleValidator] = None,
    ) -> None:
        self.config = config or CrosswordConfig()
        self.validator = validator or PuzzleValidator()

    def generate(self, vocabulary: Iterable[Any]) -> CrosswordData:
        entries = normalize_vocabulary(
            vocabulary, min_length=self.config.min_length, min_words=self.config.min_words
        )
        grid = allocate_crossword([entry.word for entry in entries], self.config.min_dimension)
        LOGGER.info(
            "Laying out crossword for %d words in %dx%d grid",
            len(entries),
            grid.bounds.rows,
            grid.bounds.cols,
        )

        placed = [self.place_seed(grid, entries[0])]
        skipped: List[str] = []
        for entry in entries[1:]:
            found = self.find_placement(grid, entry.word, placed)
            if found is None:
                LOGGER.warning("No intersecting placement for %s; skipping", entry.word)
                skipped.append(entry.word)
                continue
            row, col, direction = found
            grid.write(entry.word, row, col, direction.step)
            placed.append(CrosswordPlacement(entry.word, entry.clue, row, col, direction))
            LOGGER.debug("Placed %s at (%d,%d) %s", entry.word, row, col, direction.value)

        if len(placed) < self.config.min_words:
            raise InsufficientIntersectionsError(
                "Could not create crossword with intersecting words"
            )

        trimmed, placements, offset = trim_crossword(grid, placed, self.config.margin)
        LOGGER.debug(
            "Trimmed grid to %dx%d at offset %s", trimmed.bounds.rows, trimmed.bounds.cols, offset
        )
        across, down = number_clues(placements)
        data = CrosswordData(
            grid=trimmed.to_rows(),
            across_clues=across,
            down_clues=down,
            size=GridSize(rows=trimmed.bounds.rows, cols=trimmed.bounds.cols),
            placements=placements,
            skipped_words=skipped,
        )
        validation = self.validator.validate_crossword(data)
        if not validation.ok:
            raise ValidationError(f"Crossword validation failed: {validation.messages}")
        LOGGER.info(
            "Crossword placed %d/%d words (%d letter cells)",
            len(placements),
            len(entries),
            trimmed.letter_count,
        )
        return data

    # ------------------------------------------------------------------
    # Placement
    # ------------------------------------------------------------------
    @staticmethod
    def place_seed(grid: LetterGrid, entry: VocabularyEntry) -> CrosswordPlacement:
        row = grid.bounds.rows // 2
        col = (grid.bounds.cols - len(entry.word)) // 2
        grid.write(entry.word, row, col, Direction.ACROSS.step)
        LOGGER.debug("Seeded %s at (%d,%d)", entry.word, row, col)
        return CrosswordPlacement(entry.word, entry.clue, row, col, Direction.ACROSS)

    def find_placement(
        self,
        grid: LetterGrid,
        word: str,
        placed: Sequence[CrosswordPlacement],
    ) -> Optional[Tuple[int, int, Direction]]:
        """Return the first valid ``(row, col, direction)`` crossing a placed word.

        Search order is placed-word order, then the placed word's letter
        index, then ``word``'s letter index.
        """

        for existing in placed:
            direction = existing.direction.perpendicular
            edr, edc = existing.direction.step
            ndr, ndc = direction.step
            for ei, shared in enumerate(existing.word):
                cross_row = existing.row + ei * edr
                cross_col = existing.col + ei * edc
                for ni, letter in enumerate(word):
                    if letter != shared:
                        continue
                    row = cross_row - ni * ndr
                    col = cross_col - ni * ndc
                    if self.can_place(grid, word, row, col, direction):
                        return row, col, direction
        return None

    @staticmethod
    def can_place(grid: LetterGrid, word: str, row: int, col: int, direction: Direction) -> bool:
        dr, dc = direction.step
        length = len(word)
        if not grid.bounds.contains(row, col):
            return False
        if not grid.bounds.contains(row + (length - 1) * dr, col + (length - 1) * dc):
            return False

        # The word must not extend an existing run at either end.
        if grid.has_letter(row - dr, col - dc):
            return False
        if grid.has_letter(row + length * dr, col + length * dc):
            return False

        pdr, pdc = direction.perpendicular.step
        intersects = False
        for index, letter in enumerate(word):
            r, c = row + index * dr, col + index * dc
            existing = grid.cell(r, c)
            if existing is None:
                if grid.has_letter(r - pdr, c - pdc) or grid.has_letter(r + pdr, c + pdc):
                    return False
            elif existing == letter:
                intersects = True
            else:
                return False
        return intersects


def generate_crossword(
    vocabulary: Iterable[Any],
    *,
    config: Optional[CrosswordConfig] = None,
) -> PuzzleResult[CrosswordData]:
    """Build a crossword, returning a tagged result instead of raising."""

    try:
        data = CrosswordGenerator(config).generate(vocabulary)
    except PuzzleError as exc:
        LOGGER.warning("Crossword generation failed: %s", exc)
        return PuzzleResult.failure(exc)
    return PuzzleResult.success(data)
