"""Crop an oversized crossword grid down to the area actually used."""

from __future__ import annotations

from typing import List, Sequence, Tuple

from ..core.constants import CROSSWORD_TRIM_MARGIN
from ..core.models import CrosswordPlacement
from .grid import LetterGrid


def trim_crossword(
    grid: LetterGrid,
    placements: Sequence[CrosswordPlacement],
    margin: int = CROSSWORD_TRIM_MARGIN,
) -> Tuple[LetterGrid, List[CrosswordPlacement], Tuple[int, int]]:
    """Crop to the letter bounding box plus ``margin`` (clamped to the grid).

    Returns the new grid, the placements shifted into its coordinates and the
    ``(row, col)`` offset that was subtracted.
    """

    used = grid.used_bounds()
    if used is None:
        return grid, list(placements), (0, 0)

    min_row, min_col, max_row, max_col = used
    top = max(0, min_row - margin)
    left = max(0, min_col - margin)
    bottom = min(grid.bounds.rows - 1, max_row + margin)
    right = min(grid.bounds.cols - 1, max_col + margin)

    trimmed = grid.crop(top, left, bottom, right)
    shifted = [placement.translated(top, left) for placement in placements]
    return trimmed, shifted, (top, left)
