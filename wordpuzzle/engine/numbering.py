"""Clue numbering for placed crossword entries."""

from __future__ import annotations

from typing import Dict, List, Sequence, Tuple

from ..core.constants import Direction
from ..core.models import ClueEntry, CrosswordPlacement


def number_clues(
    placements: Sequence[CrosswordPlacement],
) -> Tuple[List[ClueEntry], List[ClueEntry]]:
    """Number start cells top-to-bottom, left-to-right and split by direction.

    An across and a down entry starting on the same cell share one number.
    """

    ordered = sorted(placements, key=lambda p: (p.row, p.col))
    numbers: Dict[Tuple[int, int], int] = {}
    for placement in ordered:
        numbers.setdefault((placement.row, placement.col), len(numbers) + 1)

    across: List[ClueEntry] = []
    down: List[ClueEntry] = []
    for placement in ordered:
        entry = ClueEntry(
            number=numbers[(placement.row, placement.col)],
            clue=placement.clue,
            answer=placement.word,
            row=placement.row,
            col=placement.col,
        )
        (across if placement.direction is Direction.ACROSS else down).append(entry)

    across.sort(key=lambda entry: entry.number)
    down.sort(key=lambda entry: entry.number)
    return across, down
