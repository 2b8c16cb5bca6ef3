"""CLI entrypoint for the word search / crossword generator."""

from __future__ import annotations

import argparse
import json
import logging
import random
import sys
from pathlib import Path
from typing import List, Tuple

from wordpuzzle.core.constants import PuzzleSize
from wordpuzzle.engine.crossword import generate_crossword
from wordpuzzle.engine.word_search import generate_word_search
from wordpuzzle.utils.logger import configure_logging
from wordpuzzle.utils.pretty import format_crossword, format_word_search


def parse_words_file(path: Path) -> List[str]:
    """Read words from a file, one entry per line. Blank lines and # comments are skipped."""
    entries: List[str] = []
    for line in path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        entries.append(line)
    return entries


def split_entry(entry: str) -> Tuple[str, str]:
    """Split ``WORD:Clue`` into its parts; the clue may be empty."""
    word, _, clue = entry.partition(":")
    return word.strip(), clue.strip()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate word search and crossword puzzles from a word list",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    subparsers = parser.add_subparsers(dest="kind", required=True)

    for kind in ("word-search", "crossword"):
        sub = subparsers.add_parser(kind)
        sub.add_argument(
            "--words",
            nargs="+",
            metavar="WORD",
            help="Words to place (format: WORD or WORD:Clue)",
        )
        sub.add_argument(
            "--words-file",
            type=Path,
            metavar="FILE",
            help="File with one WORD or WORD:Clue entry per line (# comments and blank lines ignored)",
        )
        sub.add_argument("--output", type=Path, help="Optional path to JSON output")
        sub.add_argument(
            "--pretty",
            action="store_true",
            help="Print a console preview instead of JSON",
        )

    subparsers.choices["word-search"].add_argument(
        "--size",
        type=str,
        choices=[s.value for s in PuzzleSize],
        default=PuzzleSize.MEDIUM.value,
        help="Grid size hint",
    )
    subparsers.choices["word-search"].add_argument(
        "--seed", type=int, default=None, help="Random seed for reproducibility"
    )
    subparsers.choices["word-search"].add_argument(
        "--answer-key",
        action="store_true",
        help="With --pretty, hide filler letters to show where the words are",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.WARNING)
    configure_logging(level)

    entries: List[str] = []
    if args.words:
        entries.extend(args.words)
    if args.words_file:
        entries.extend(parse_words_file(args.words_file))
    if not entries:
        parser.error("provide --words and/or --words-file")

    pairs = [split_entry(entry) for entry in entries]
    if args.kind == "word-search":
        result = generate_word_search(
            [word for word, _ in pairs], args.size, rng=random.Random(args.seed)
        )
    else:
        result = generate_crossword(pairs)

    if not result.ok:
        print(f"error: {result.message}", file=sys.stderr)
        return 1

    data = result.unwrap()
    if args.pretty:
        if args.kind == "word-search":
            output_text = format_word_search(data, answer_key=args.answer_key)
        else:
            output_text = format_crossword(data)
    else:
        output_text = json.dumps(data.to_jsonable(), ensure_ascii=False, indent=2)

    if args.output:
        args.output.write_text(output_text, encoding="utf-8")
    else:
        print(output_text)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
