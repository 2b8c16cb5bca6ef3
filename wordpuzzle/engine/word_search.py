"""Word search generation.

Pipeline: normalize the words, allocate a square grid from the size hint,
place each word at a random start and direction (bounded retries), then fill
the remaining cells with random letters.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, replace
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from ..core.constants import (
    WORD_SEARCH_MAX_LENGTH,
    WORD_SEARCH_MAX_TRIALS,
    WORD_SEARCH_MIN_LENGTH,
    PuzzleSize,
    WordSearchDirection,
)
from ..core.exceptions import NoWordsPlacedError, PuzzleError, ValidationError
from ..core.models import PuzzleResult, WordSearchData, WordSearchPlacement
from ..data.normalization import normalize_word_search_words
from ..utils.logger import get_logger
from .allocator import allocate_word_search, resolve_size
from .grid import LetterGrid
from .validator import PuzzleValidator


LOGGER = get_logger(__name__)


@dataclass
class WordSearchConfig:
    size: Union[PuzzleSize, str] = PuzzleSize.MEDIUM
    seed: Optional[int] = None
    max_trials: int = WORD_SEARCH_MAX_TRIALS
    min_length: int = WORD_SEARCH_MIN_LENGTH
    max_length: int = WORD_SEARCH_MAX_LENGTH
    directions: Tuple[WordSearchDirection, ...] = tuple(WordSearchDirection)

    def __post_init__(self) -> None:
        self.size = resolve_size(self.size)
        if self.max_trials < 1:
            raise ValueError("max_trials must be at least 1")
        if not self.directions:
            raise ValueError("at least one direction is required")


class WordSearchGenerator:
    """Randomized word search builder.

    ``rng`` is the only source of randomness; pass a seeded
    :class:`random.Random` (or set ``config.seed``) for reproducible grids.
    An explicit ``rng`` wins over ``config.seed``.
    """

    def __init__(
        self,
        config: Optional[WordSearchConfig] = None,
        rng: Optional[random.Random] = None,
        validator: Optional[PuzzleValidator] = None,
    ) -> None:
        self.config = config or WordSearchConfig()
        if rng is not None and self.config.seed is not None:
            LOGGER.debug("Explicit random source given; ignoring seed %d", self.config.seed)
        self.rng = rng if rng is not None else random.Random(self.config.seed)
        self.validator = validator or PuzzleValidator()

    def generate(self, words: Iterable[str]) -> WordSearchData:
        cleaned = normalize_word_search_words(
            words, min_length=self.config.min_length, max_length=self.config.max_length
        )
        grid = allocate_word_search(cleaned, self.config.size)
        LOGGER.info(
            "Building %s word search %dx%d for %d words",
            self.config.size.value,
            grid.bounds.rows,
            grid.bounds.cols,
            len(cleaned),
        )

        solution: List[WordSearchPlacement] = []
        skipped: List[str] = []
        for word in cleaned:
            placement = self.place_word(grid, word)
            if placement is None:
                LOGGER.warning("Skipping %s after %d trials", word, self.config.max_trials)
                skipped.append(word)
                continue
            solution.append(placement)

        if not solution:
            raise NoWordsPlacedError("Could not place any words in the grid")

        grid.fill_empty(self.rng)
        data = WordSearchData(
            grid=grid.to_rows(),
            words=[placement.word for placement in solution],
            size=grid.bounds.rows,
            solution=solution,
            skipped_words=skipped,
        )
        validation = self.validator.validate_word_search(data)
        if not validation.ok:
            raise ValidationError(f"Word search validation failed: {validation.messages}")
        LOGGER.info("Word search placed %d/%d words", len(solution), len(cleaned))
        return data

    def place_word(self, grid: LetterGrid, word: str) -> Optional[WordSearchPlacement]:
        """Try random starts/directions until one fits; commit and return it."""

        dimension = grid.bounds.rows
        directions: Sequence[WordSearchDirection] = self.config.directions
        for trial in range(1, self.config.max_trials + 1):
            row = self.rng.randrange(dimension)
            col = self.rng.randrange(dimension)
            direction = self.rng.choice(directions)
            if grid.fits(word, row, col, direction.step):
                grid.write(word, row, col, direction.step)
                LOGGER.debug(
                    "Placed %s at (%d,%d) %s on trial %d", word, row, col, direction.value, trial
                )
                return WordSearchPlacement(word, row, col, direction)
        return None


def generate_word_search(
    words: Iterable[str],
    size: Optional[Union[PuzzleSize, str]] = None,
    *,
    rng: Optional[random.Random] = None,
    config: Optional[WordSearchConfig] = None,
) -> PuzzleResult[WordSearchData]:
    """Build a word search, returning a tagged result instead of raising.

    ``size`` overrides ``config.size`` when given. ``rng`` takes precedence
    over ``config.seed``: when both are passed the seed is ignored.
    """

    config = config or WordSearchConfig()
    if size is not None:
        config = replace(config, size=size)
    try:
        data = WordSearchGenerator(config, rng=rng).generate(words)
    except PuzzleError as exc:
        LOGGER.warning("Word search generation failed: %s", exc)
        return PuzzleResult.failure(exc)
    return PuzzleResult.success(data)
