"""
Dictionary loading and random word selection.

The dictionary is a plain text file with one candidate per line. Only words
made of the letters A-Z whose length falls inside the configured window are
kept.
"""
from __future__ import annotations

import logging
import random
from importlib import resources
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple

from .errors import DictionaryUnavailableError, EmptyCandidateSetError

logger = logging.getLogger(__name__)

DEFAULT_MIN_LENGTH = 5
DEFAULT_MAX_LENGTH = 12


def bundled_word_list() -> Path:
    """Return the path of the dictionary shipped with the package."""
    return Path(str(resources.files("hangman.data").joinpath("words.txt")))


def load(
    path: Optional[Path] = None,
    min_length: int = DEFAULT_MIN_LENGTH,
    max_length: int = DEFAULT_MAX_LENGTH,
) -> List[str]:
    """
    Load candidate words from a newline-delimited file.

    Args:
        path: Dictionary file. Defaults to the bundled word list.
        min_length: Shortest word kept (inclusive).
        max_length: Longest word kept (inclusive).

    Returns:
        Uppercased candidates in file order.

    Raises:
        DictionaryUnavailableError: If the file is missing or unreadable.
        ValueError: If the length window is empty.
    """
    if min_length > max_length:
        raise ValueError(f"min_length ({min_length}) exceeds max_length ({max_length})")
    source = Path(path) if path is not None else bundled_word_list()

    try:
        with source.open("r", encoding="utf-8") as f:
            lines = f.readlines()
    except OSError as exc:
        raise DictionaryUnavailableError(f"Cannot read word list {source}: {exc}") from exc

    words = []
    skipped = 0
    for line in lines:
        word = line.rstrip("\r\n")
        if not word or not min_length <= len(word) <= max_length:
            continue
        if not is_playable(word):
            skipped += 1
            continue
        words.append(word.upper())

    if skipped:
        logger.warning("Skipped %d words in %s with characters other than A-Z", skipped, source)

    logger.debug(
        "Loaded %d candidates from %s (length %d-%d)", len(words), source, min_length, max_length
    )
    return words


def is_playable(word: str) -> bool:
    """True if every character is an ASCII letter, so the word can be guessed."""
    return word.isascii() and word.isalpha()


def pick_random(candidates: Sequence[str], rng: Optional[random.Random] = None) -> str:
    """Choose one candidate uniformly at random."""
    if not candidates:
        raise EmptyCandidateSetError("No candidate words available; check the dictionary and length limits")
    rng = rng or random.Random()
    return candidates[rng.randrange(len(candidates))]


class WordSource:
    """Filtered candidate list with an injectable RNG for reproducible draws."""

    def __init__(self, words: Iterable[str], rng: Optional[random.Random] = None) -> None:
        candidates = list(words)
        self._words: Tuple[str, ...] = tuple(w.upper() for w in candidates if is_playable(w))
        if len(self._words) != len(candidates):
            logger.warning("Ignored %d unplayable words", len(candidates) - len(self._words))
        self._rng = rng or random.Random()

    @classmethod
    def load(
        cls,
        path: Optional[Path] = None,
        min_length: int = DEFAULT_MIN_LENGTH,
        max_length: int = DEFAULT_MAX_LENGTH,
        rng: Optional[random.Random] = None,
    ) -> "WordSource":
        return cls(load(path, min_length, max_length), rng=rng)

    @property
    def words(self) -> Tuple[str, ...]:
        return self._words

    def __len__(self) -> int:
        return len(self._words)

    def pick_random(self) -> str:
        word = pick_random(self._words, self._rng)
        logger.debug("Drew a %d-letter word", len(word))
        return word
