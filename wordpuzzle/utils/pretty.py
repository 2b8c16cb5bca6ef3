"""Pretty-print helpers for puzzle grids."""

from __future__ import annotations

import sys
from typing import List, Optional, Sequence

from ..core.models import ClueEntry, CrosswordData, WordSearchData


BLOCK = "#"
HIDDEN = "."


def format_grid(rows: Sequence[Sequence[Optional[str]]], *, block: str = BLOCK) -> str:
    width = len(rows[0]) if rows else 0
    header_cells = [f"{c:>2}" for c in range(width)]
    lines = ["    " + " ".join(header_cells)]
    lines.append("    " + "-" * (3 * width - 1))
    for r, row in enumerate(rows):
        row_render = " ".join(f"{cell or block:>2}" for cell in row)
        lines.append(f"{r:>2} | {row_render}")
    return "\n".join(lines)


def format_word_search(data: WordSearchData, *, answer_key: bool = False) -> str:
    """Render the grid and word list; ``answer_key`` hides filler letters."""

    rows: List[List[Optional[str]]] = [list(row) for row in data.grid]
    if answer_key:
        keep = data.solution_cells()
        rows = [
            [cell if (r, c) in keep else HIDDEN for c, cell in enumerate(row)]
            for r, row in enumerate(rows)
        ]
    lines = [format_grid(rows), "", "Words: " + ", ".join(data.words)]
    if data.skipped_words:
        lines.append("Skipped: " + ", ".join(data.skipped_words))
    return "\n".join(lines)


def _format_clues(title: str, clues: Sequence[ClueEntry]) -> List[str]:
    lines = [title]
    for clue in clues:
        lines.append(f"  {clue.number:>2}. {clue.clue} ({len(clue.answer)})")
    return lines


def format_crossword(data: CrosswordData, *, show_answers: bool = True) -> str:
    rows: List[List[Optional[str]]] = [list(row) for row in data.grid]
    if not show_answers:
        rows = [[None if cell is None else HIDDEN for cell in row] for row in rows]
    lines = [format_grid(rows), ""]
    lines.extend(_format_clues("Across", data.across_clues))
    lines.extend(_format_clues("Down", data.down_clues))
    if data.skipped_words:
        lines.append("Skipped: " + ", ".join(data.skipped_words))
    return "\n".join(lines)


def pretty_print_puzzle(data, *, label: str | None = None, stream=None) -> None:
    """Print either puzzle kind in a human-friendly format."""

    stream = stream or sys.stdout
    if label:
        print(label, file=stream)
    if isinstance(data, CrosswordData):
        print(format_crossword(data), file=stream)
    else:
        print(format_word_search(data), file=stream)
