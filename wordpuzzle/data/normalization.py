"""Word cleaning and input normalization for both puzzle kinds."""

from __future__ import annotations

import re
import unicodedata
from collections.abc import Mapping
from typing import Any, Iterable, List

from ..core.constants import (
    CROSSWORD_MIN_LENGTH,
    CROSSWORD_MIN_WORDS,
    WORD_SEARCH_MAX_LENGTH,
    WORD_SEARCH_MIN_LENGTH,
)
from ..core.exceptions import NoValidWordsError
from ..core.models import VocabularyEntry
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

WORD_RE = re.compile(r"[^A-Z]")


def clean_word(text: str) -> str:
    """Return ``text`` uppercased with everything outside A-Z removed.

    Accented letters are folded to their base letter first, so ``"Café"``
    becomes ``"CAFE"``.
    """

    if not text:
        return ""
    decomposed = unicodedata.normalize("NFKD", text)
    folded = "".join(char for char in decomposed if not unicodedata.combining(char))
    return WORD_RE.sub("", folded.upper())


def _by_length_desc(items: List[Any], key) -> List[Any]:
    # sorted() is stable, so equal lengths keep their input order
    return sorted(items, key=lambda item: -len(key(item)))


def normalize_word_search_words(
    words: Iterable[str],
    min_length: int = WORD_SEARCH_MIN_LENGTH,
    max_length: int = WORD_SEARCH_MAX_LENGTH,
) -> List[str]:
    """Clean, length-filter and order word search input, longest first."""

    cleaned: List[str] = []
    for raw in words:
        word = clean_word(raw)
        if min_length <= len(word) <= max_length:
            cleaned.append(word)
        else:
            LOGGER.debug("Discarding word %r (cleaned length %d)", raw, len(word))

    if not cleaned:
        raise NoValidWordsError("No valid words provided")
    return _by_length_desc(cleaned, key=lambda word: word)


def _coerce_entry(item: Any) -> VocabularyEntry:
    if isinstance(item, VocabularyEntry):
        return item
    if isinstance(item, Mapping):
        return VocabularyEntry(word=str(item.get("word") or ""), clue=str(item.get("clue") or ""))
    if isinstance(item, (tuple, list)) and len(item) == 2:
        word, clue = item
        return VocabularyEntry(word=str(word or ""), clue=str(clue or ""))
    raise TypeError(f"Unsupported vocabulary item: {item!r}")


def normalize_vocabulary(
    vocabulary: Iterable[Any],
    min_length: int = CROSSWORD_MIN_LENGTH,
    min_words: int = CROSSWORD_MIN_WORDS,
) -> List[VocabularyEntry]:
    """Clean crossword word/clue pairs and order them longest first.

    Items may be :class:`VocabularyEntry` objects, ``(word, clue)`` pairs or
    mappings with ``word`` and ``clue`` keys.
    """

    entries: List[VocabularyEntry] = []
    for item in vocabulary:
        entry = _coerce_entry(item)
        word = clean_word(entry.word)
        if len(word) < min_length:
            LOGGER.debug("Discarding vocabulary word %r", entry.word)
            continue
        entries.append(VocabularyEntry(word=word, clue=entry.clue.strip()))

    if len(entries) < min_words:
        raise NoValidWordsError(f"Need at least {min_words} words for a crossword")
    return _by_length_desc(entries, key=lambda entry: entry.word)


__all__ = ["clean_word", "normalize_vocabulary", "normalize_word_search_words"]
