from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, Optional

from .board import DEFAULT_MAX_GUESSES, GameBoard, GuessResult
from .errors import SessionFinishedError

if TYPE_CHECKING:  # pragma: no cover
    from .persistence.models import GameSnapshot
    from .words import WordSource

logger = logging.getLogger(__name__)

SAVE_KEYWORD = "save"


class GuessOutcome(str, Enum):
    SAVE_REQUEST = "save_request"
    INVALID_FORMAT = "invalid_format"
    DUPLICATE_GUESS = "duplicate_guess"
    CORRECT = "correct"
    WRONG = "wrong"


class SessionStatus(str, Enum):
    ONGOING = "ongoing"
    WON = "won"
    LOST = "lost"


class GameSession:
    """A player paired with the board they are playing.

    The session becomes inactive the first time ``check_terminal`` sees a won
    or lost board and is never mutated afterwards; a rematch is a new session.
    """

    def __init__(self, player_name: str, board: GameBoard, active: bool = True) -> None:
        name = (player_name or "").strip()
        if not name:
            raise ValueError("player name must not be empty")
        self.player_name = name
        self.board = board
        self.active = active

    @classmethod
    def new_game(
        cls,
        player_name: str,
        word_source: "WordSource",
        max_guesses: int = DEFAULT_MAX_GUESSES,
    ) -> "GameSession":
        board = GameBoard(word_source.pick_random(), max_guesses=max_guesses)
        session = cls(player_name, board)
        logger.info("New game for %s (%d letters, %d guesses)", session.player_name, len(board.secret_letters), max_guesses)
        return session

    @classmethod
    def from_snapshot(
        cls,
        snapshot: "GameSnapshot",
        word_source: Optional["WordSource"] = None,
    ) -> "GameSession":
        """Resume a session from a saved snapshot.

        ``word_source`` is accepted for callers that keep a dictionary handle
        around; it is never consulted, so the saved secret word is preserved.
        """
        board = GameBoard.from_persisted_fields(
            snapshot.secret_letters,
            snapshot.display_letters,
            snapshot.wrong_letters,
            snapshot.guesses_remaining,
            snapshot.guessed_letters,
        )
        session = cls(snapshot.player_name, board, active=snapshot.active)
        logger.info("Restored game for %s: %r", session.player_name, board)
        return session

    def evaluate_guess(self, raw_input: str) -> GuessOutcome:
        """Classify one line of player input and apply it if it is a fresh letter."""
        if not self.active:
            raise SessionFinishedError("This game is over; start a new one")

        text = (raw_input or "").rstrip("\r\n")
        if text.lower() == SAVE_KEYWORD:
            return GuessOutcome.SAVE_REQUEST

        letter = text.upper()
        if len(letter) != 1 or not ("A" <= letter <= "Z"):
            return GuessOutcome.INVALID_FORMAT
        if self.board.already_guessed(letter):
            return GuessOutcome.DUPLICATE_GUESS

        if self.board.apply_guess(letter) is GuessResult.CORRECT:
            return GuessOutcome.CORRECT
        return GuessOutcome.WRONG

    @property
    def status(self) -> SessionStatus:
        if self.board.is_word_complete():
            return SessionStatus.WON
        if self.board.is_out_of_guesses():
            return SessionStatus.LOST
        return SessionStatus.ONGOING

    def check_terminal(self) -> SessionStatus:
        """Evaluate win/loss once per turn and deactivate on either outcome."""
        status = self.status
        if status is not SessionStatus.ONGOING and self.active:
            self.active = False
            logger.info("Game for %s ended: %s (word was %s)", self.player_name, status.value, self.board.secret_word)
        return status

    def to_snapshot(self) -> "GameSnapshot":
        from .persistence.models import GameSnapshot

        return GameSnapshot(
            player_name=self.player_name,
            secret_letters=self.board.secret_letters,
            display_letters=self.board.display_letters,
            wrong_letters=self.board.wrong_letters,
            guessed_letters=self.board.guessed_letters,
            guesses_remaining=self.board.guesses_remaining,
            active=self.active,
        )
