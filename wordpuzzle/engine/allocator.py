"""Grid dimension selection for both puzzle kinds."""

from __future__ import annotations

from typing import Optional, Sequence, Union

from ..core.constants import CROSSWORD_MIN_DIMENSION, SIZE_PROFILES, PuzzleSize
from .grid import LetterGrid


def resolve_size(size: Optional[Union[str, PuzzleSize]]) -> PuzzleSize:
    """Map a size hint to :class:`PuzzleSize`; ``None`` means medium."""

    if size is None:
        return PuzzleSize.MEDIUM
    try:
        return PuzzleSize(size)
    except ValueError:
        choices = ", ".join(member.value for member in PuzzleSize)
        raise ValueError(f"Unknown puzzle size {size!r}; expected one of {choices}") from None


def word_search_dimension(words: Sequence[str], size: Optional[Union[str, PuzzleSize]] = None) -> int:
    floor, pad = SIZE_PROFILES[resolve_size(size)]
    longest = max(len(word) for word in words)
    return max(floor, longest + pad)


def crossword_dimension(words: Sequence[str], min_dimension: int = CROSSWORD_MIN_DIMENSION) -> int:
    # Oversized so the layout can grow from the centered seed in any direction.
    longest = max(len(word) for word in words)
    return max(min_dimension, longest * 2)


def allocate_word_search(words: Sequence[str], size: Optional[Union[str, PuzzleSize]] = None) -> LetterGrid:
    return LetterGrid.square(word_search_dimension(words, size))


def allocate_crossword(words: Sequence[str], min_dimension: int = CROSSWORD_MIN_DIMENSION) -> LetterGrid:
    return LetterGrid.square(crossword_dimension(words, min_dimension))
