"""Custom exception hierarchy for puzzle generation."""


class PuzzleError(Exception):
    """Base exception for generator failures."""


class NoValidWordsError(PuzzleError):
    """Raised when normalization leaves too few usable words."""


class NoWordsPlacedError(PuzzleError):
    """Raised when every word search word exhausted its placement trials."""


class InsufficientIntersectionsError(PuzzleError):
    """Raised when fewer than two crossword words could be interlocked."""


class PlacementError(PuzzleError):
    """Raised when a word is written over conflicting or out-of-bounds cells."""


class ValidationError(PuzzleError):
    """Raised when the finished puzzle fails its integrity checks."""
