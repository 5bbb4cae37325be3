from __future__ import annotations

import logging
from enum import Enum
from typing import Iterable, List, Optional, Sequence

from .errors import InvalidBoardStateError

logger = logging.getLogger(__name__)

PLACEHOLDER = "_"
DEFAULT_MAX_GUESSES = 6


class BoardState(str, Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"


class GuessResult(str, Enum):
    CORRECT = "correct"
    WRONG = "wrong"


def _is_letter(value: object) -> bool:
    return isinstance(value, str) and len(value) == 1 and "A" <= value <= "Z"


class GameBoard:
    """State of a single round: secret word, revealed letters and guess budget.

    The board does not know about game over. ``apply_guess`` keeps working
    after the word is complete or the budget is spent; the session decides
    when to stop asking for guesses.
    """

    def __init__(self, word: str, max_guesses: int = DEFAULT_MAX_GUESSES) -> None:
        if max_guesses <= 0:
            raise ValueError("max_guesses must be positive")
        if not word:
            raise ValueError("word must not be empty")
        if not all(_is_letter(c) for c in word.upper()):
            raise ValueError(f"word must contain only the letters A-Z, got {word!r}")
        self._secret: List[str] = list(word.upper())
        self._display: List[str] = [PLACEHOLDER] * len(self._secret)
        self._guessed: List[str] = []
        self._wrong: List[str] = []
        self._remaining = max_guesses

    @classmethod
    def from_persisted_fields(
        cls,
        secret_letters: Sequence[str],
        display_letters: Sequence[str],
        wrong_letters: Sequence[str],
        guesses_remaining: int,
        guessed_letters: Optional[Sequence[str]] = None,
    ) -> "GameBoard":
        """Rebuild a board from saved values without drawing a word.

        ``guessed_letters`` may be missing from saves written before it was
        tracked. Only structural checks run on such fields, and the guessed
        list is rebuilt from the wrong letters plus the revealed ones so that
        later saves of this board stay consistent.

        Raises:
            InvalidBoardStateError: If the fields cannot describe a reachable board.
        """
        guessed = list(guessed_letters or [])
        validate_fields(secret_letters, display_letters, wrong_letters, guesses_remaining, guessed)
        if not guessed:
            guessed = _infer_guessed(display_letters, wrong_letters)
        board = cls.__new__(cls)
        board._secret = list(secret_letters)
        board._display = list(display_letters)
        board._guessed = guessed
        board._wrong = list(wrong_letters)
        board._remaining = guesses_remaining
        return board

    # Read-only views

    @property
    def secret_letters(self) -> List[str]:
        return list(self._secret)

    @property
    def display_letters(self) -> List[str]:
        return list(self._display)

    @property
    def guessed_letters(self) -> List[str]:
        return list(self._guessed)

    @property
    def wrong_letters(self) -> List[str]:
        return list(self._wrong)

    @property
    def guesses_remaining(self) -> int:
        return self._remaining

    @property
    def secret_word(self) -> str:
        return "".join(self._secret)

    @property
    def masked_word(self) -> str:
        return " ".join(self._display)

    # Rules

    def already_guessed(self, letter: str) -> bool:
        return letter in (self._guessed or ())

    def apply_guess(self, letter: str) -> GuessResult:
        """Record a guess and reveal or penalize.

        The caller must check ``already_guessed`` first; the letter format is
        not re-validated here.
        """
        self._guessed.append(letter)

        if letter in self._secret:
            for index, char in enumerate(self._secret):
                if char == letter:
                    self._display[index] = char
            logger.debug("Correct guess %r -> %s", letter, self.masked_word)
            return GuessResult.CORRECT

        if letter not in self._wrong:
            self._wrong.append(letter)
        self._remaining = max(0, self._remaining - 1)
        logger.debug("Wrong guess %r, %d guesses left", letter, self._remaining)
        return GuessResult.WRONG

    def is_word_complete(self) -> bool:
        return PLACEHOLDER not in self._display

    def is_out_of_guesses(self) -> bool:
        return self._remaining <= 0

    @property
    def state(self) -> BoardState:
        if self.is_word_complete():
            return BoardState.WON
        if self.is_out_of_guesses():
            return BoardState.LOST
        return BoardState.IN_PROGRESS

    def __repr__(self) -> str:
        return (
            f"GameBoard(display={self.masked_word!r}, wrong={self._wrong!r}, "
            f"remaining={self._remaining})"
        )


def validate_fields(
    secret_letters: Sequence[str],
    display_letters: Sequence[str],
    wrong_letters: Sequence[str],
    guesses_remaining: int,
    guessed_letters: Iterable[str] = (),
) -> None:
    """Check that persisted board fields are mutually consistent.

    Raises:
        InvalidBoardStateError: On the first violated rule.
    """
    secret = list(secret_letters)
    display = list(display_letters)
    wrong = list(wrong_letters)
    guessed = list(guessed_letters)

    if not secret:
        raise InvalidBoardStateError("secret word is empty")
    if not all(_is_letter(c) for c in secret):
        raise InvalidBoardStateError("secret word must contain single uppercase letters only")
    if len(display) != len(secret):
        raise InvalidBoardStateError(
            f"display has {len(display)} slots but the secret word has {len(secret)} letters"
        )
    for index, (shown, actual) in enumerate(zip(display, secret)):
        if shown != PLACEHOLDER and shown != actual:
            raise InvalidBoardStateError(f"display slot {index} shows {shown!r}, expected {actual!r}")

    if not all(_is_letter(c) for c in wrong):
        raise InvalidBoardStateError("wrong guesses must be single uppercase letters")
    if len(set(wrong)) != len(wrong):
        raise InvalidBoardStateError("wrong guesses contain duplicates")
    misfiled = sorted(set(wrong) & set(secret))
    if misfiled:
        raise InvalidBoardStateError(f"letters {misfiled} are in the word but listed as wrong")

    if isinstance(guesses_remaining, bool) or not isinstance(guesses_remaining, int):
        raise InvalidBoardStateError("guesses remaining must be an integer")
    if guesses_remaining < 0:
        raise InvalidBoardStateError("guesses remaining must not be negative")

    if not guessed:
        return

    if not all(_is_letter(c) for c in guessed):
        raise InvalidBoardStateError("guessed letters must be single uppercase letters")
    if len(set(guessed)) != len(guessed):
        raise InvalidBoardStateError("guessed letters contain duplicates")
    guessed_set = set(guessed)
    if not set(wrong) <= guessed_set:
        raise InvalidBoardStateError("a wrong guess is missing from the guessed letters")
    revealed = {c for c in display if c != PLACEHOLDER}
    if not revealed <= guessed_set:
        raise InvalidBoardStateError("a revealed letter was never guessed")
    for letter in guessed_set & set(secret):
        if any(actual == letter and shown == PLACEHOLDER for shown, actual in zip(display, secret)):
            raise InvalidBoardStateError(f"guessed letter {letter!r} is not fully revealed")
    unaccounted = guessed_set - set(wrong) - set(secret)
    if unaccounted:
        raise InvalidBoardStateError(f"guessed letters {sorted(unaccounted)} are neither correct nor wrong")


def _infer_guessed(display_letters: Sequence[str], wrong_letters: Sequence[str]) -> List[str]:
    """Reconstruct the guessed letters of a save that did not record them."""
    guessed = list(wrong_letters)
    for letter in display_letters:
        if letter != PLACEHOLDER and letter not in guessed:
            guessed.append(letter)
    return guessed
