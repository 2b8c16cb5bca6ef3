"""Word search and crossword layout engine.

This package exposes the public API surface via:

- ``wordpuzzle.engine.word_search.generate_word_search``: random placement
  word search with a filled square grid and its solution key.
- ``wordpuzzle.engine.crossword.generate_crossword``: greedy interlocking
  crossword layout, trimmed and clue-numbered.

Both return a :class:`~wordpuzzle.core.models.PuzzleResult` rather than
raising on the expected failure modes.
"""

from .core.constants import Direction, PuzzleSize, WordSearchDirection
from .core.exceptions import (
    InsufficientIntersectionsError,
    NoValidWordsError,
    NoWordsPlacedError,
    PuzzleError,
    ValidationError,
)
from .core.models import (
    ClueEntry,
    CrosswordData,
    CrosswordPlacement,
    PuzzleResult,
    VocabularyEntry,
    WordSearchData,
    WordSearchPlacement,
)
from .engine.crossword import CrosswordConfig, CrosswordGenerator, generate_crossword
from .engine.word_search import WordSearchConfig, WordSearchGenerator, generate_word_search

__all__ = [
    "ClueEntry",
    "CrosswordConfig",
    "CrosswordData",
    "CrosswordGenerator",
    "CrosswordPlacement",
    "Direction",
    "InsufficientIntersectionsError",
    "NoValidWordsError",
    "NoWordsPlacedError",
    "PuzzleError",
    "PuzzleResult",
    "PuzzleSize",
    "ValidationError",
    "VocabularyEntry",
    "WordSearchConfig",
    "WordSearchData",
    "WordSearchDirection",
    "WordSearchGenerator",
    "WordSearchPlacement",
    "generate_crossword",
    "generate_word_search",
]

__version__ = "0.1.0"
