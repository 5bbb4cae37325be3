"""
Terminal hangman.

This package provides headless game logic plus a thin terminal front end:
- WordSource: dictionary loading and random word selection
- GameBoard: the per-round state machine
- GameSession: player + board, guess classification, save/restore
- persistence: YAML and JSON save files with schema migration

UI layers should import and compose these; ``hangman.app`` is the terminal one.
"""
__version__ = "1.1.0"

from .board import BoardState, GameBoard, GuessResult, PLACEHOLDER
from .session import GameSession, GuessOutcome, SessionStatus
from .words import WordSource
from .errors import (
    HangmanError,
    DictionaryUnavailableError,
    EmptyCandidateSetError,
    InvalidBoardStateError,
    SessionFinishedError,
)

__all__ = [
    "__version__",
    "BoardState",
    "GameBoard",
    "GuessResult",
    "PLACEHOLDER",
    "GameSession",
    "GuessOutcome",
    "SessionStatus",
    "WordSource",
    "HangmanError",
    "DictionaryUnavailableError",
    "EmptyCandidateSetError",
    "InvalidBoardStateError",
    "SessionFinishedError",
]
