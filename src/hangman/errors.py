class HangmanError(Exception):
    """Base error for hangman domain exceptions."""


class DictionaryUnavailableError(HangmanError, OSError):
    """Raised when the word list cannot be read."""


class EmptyCandidateSetError(HangmanError):
    """Raised when no dictionary word survives the length filter."""


class InvalidBoardStateError(HangmanError, ValueError):
    """Raised when persisted board fields contradict each other."""


class SessionFinishedError(HangmanError):
    """Raised when a guess is evaluated against a finished session."""
