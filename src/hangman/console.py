from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from .board import GameBoard

RULE = "=" * 40


def render_board(board: GameBoard) -> str:
    """Return the framed, multi-line board shown before each guess."""
    wrong = board.wrong_letters
    return "\n".join(
        [
            "",
            RULE,
            "Word: " + board.masked_word,
            "Wrong guesses: " + (", ".join(wrong) if wrong else "None"),
            f"Guesses left: {board.guesses_remaining}",
            RULE,
        ]
    )


class Console(ABC):
    """Operator I/O used by the game loop.

    Implementations decide how text is read and shown; the game never touches
    the terminal directly.
    """

    @abstractmethod
    def prompt(self, message: str) -> str:
        """Show ``message`` and return one line of input without its newline."""

    @abstractmethod
    def show_message(self, text: str) -> None:
        """Display a status or result message."""

    def show_board(self, board: GameBoard) -> None:
        self.show_message(render_board(board))

    def show_saves(self, filenames: Sequence[str]) -> None:
        self.show_message("\nSaved Games:")
        for index, name in enumerate(filenames, start=1):
            self.show_message(f"{index}. {name}")


class TerminalConsole(Console):
    """Console backed by ``input`` and ``print``.

    ``input`` raises EOFError when stdin closes; the app treats that as quit.
    """

    def prompt(self, message: str) -> str:
        return input(message)

    def show_message(self, text: str) -> None:
        print(text)
