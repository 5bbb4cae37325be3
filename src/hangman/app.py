from __future__ import annotations

import logging
from typing import Optional

from .console import Console
from .persistence import CorruptSaveError, SaveError, SaveNotFoundError, SaveStore, open_store
from .session import GameSession, GuessOutcome, SessionStatus
from .settings import Settings
from .words import WordSource

logger = logging.getLogger(__name__)

FORMAT_CHOICES = {"1": "yaml", "2": "json"}


class HangmanApp:
    """Main menu and turn loop wiring the console to sessions and saves.

    All user-facing failures are reported through the console; only errors
    that make play impossible (an empty dictionary) propagate out of ``run``.
    """

    def __init__(
        self,
        console: Console,
        settings: Optional[Settings] = None,
        store: Optional[SaveStore] = None,
        word_source: Optional[WordSource] = None,
    ) -> None:
        self.console = console
        self.settings = settings or Settings()
        self.store = store or open_store(self.settings.save_dir)
        self.word_source = word_source or WordSource.load(
            self.settings.word_list, self.settings.min_length, self.settings.max_length
        )

    # Menu

    def run(self) -> None:
        """Show the main menu until the player quits or input runs out."""
        try:
            while True:
                self.console.show_message("HANGMAN!")
                self.console.show_message("=" * 20)
                self.console.show_message("1. New Game")
                self.console.show_message("2. Load Saved Game")
                self.console.show_message("3. Quit")
                choice = self.console.prompt("Choose an option: ").strip()

                if choice == "1":
                    self.new_game()
                elif choice == "2":
                    self.load_game()
                elif choice == "3":
                    self.console.show_message("Goodbye!")
                    return
                else:
                    self.console.show_message("Invalid choice!")
        except EOFError:
            logger.debug("Input closed; leaving the game")
            self.console.show_message("\nGoodbye!")

    def new_game(self, player_name: Optional[str] = None) -> None:
        self.console.show_message("Welcome to Hangman!")
        while not (player_name or "").strip():
            player_name = self.console.prompt("Enter your name: ")
            if not player_name.strip():
                self.console.show_message("Please enter a name.")
        session = GameSession.new_game(player_name, self.word_source, self.settings.max_guesses)
        self.play_rounds(session)

    def load_game(self) -> None:
        saves = self.store.list_saves()
        if not saves:
            self.console.show_message("No saved games found!")
            return

        self.console.show_saves(saves)
        while True:
            raw = self.console.prompt("Enter the number of the game to load: ").strip()
            index = int(raw) - 1 if raw.isdigit() else -1
            if 0 <= index < len(saves):
                break
            self.console.show_message("Invalid selection!")

        filename = saves[index]
        try:
            snapshot = self.store.load(filename)
            session = GameSession.from_snapshot(snapshot, self.word_source)
        except SaveNotFoundError:
            logger.warning("Save %s disappeared before it could be loaded", filename)
            self.console.show_message(f"Failed to load game: {filename} no longer exists.")
            return
        except CorruptSaveError as exc:
            logger.warning("Rejected corrupt save %s: %s", filename, exc)
            self.console.show_message(f"Failed to load game: {filename} is damaged or not a saved game.")
            return
        except SaveError as exc:
            logger.warning("Could not read save %s: %s", filename, exc)
            self.console.show_message(f"Failed to load game: {filename} could not be read.")
            return

        self.console.show_message("Game loaded successfully!")
        self.play_rounds(session)

    # Game

    def play_rounds(self, session: GameSession) -> None:
        """Play a session, then offer rematches for the same player."""
        while True:
            self.play(session)
            answer = self.console.prompt("\nWould you like to play again? (y/n): ").strip().lower()
            if answer not in ("y", "yes"):
                self.console.show_message("Thanks for playing!")
                return
            session = GameSession.new_game(session.player_name, self.word_source, self.settings.max_guesses)

    def play(self, session: GameSession) -> SessionStatus:
        """Run the turn loop until the board is won or lost."""
        self.console.show_message(f"Let's play, {session.player_name}!")
        while True:
            self.console.show_board(session.board)

            status = session.check_terminal()
            if status is SessionStatus.WON:
                self.console.show_message(f"Congratulations {session.player_name}! You won!")
                return status
            if status is SessionStatus.LOST:
                self.console.show_message(f"Game Over! The word was: {session.board.secret_word}")
                return status

            raw = self.console.prompt("Enter a letter to guess, or type 'save' to save your game: ")
            outcome = session.evaluate_guess(raw)
            letter = raw.upper()

            if outcome is GuessOutcome.SAVE_REQUEST:
                self.handle_save(session)
            elif outcome is GuessOutcome.INVALID_FORMAT:
                self.console.show_message("Please enter a single letter or 'save' to save your game!")
            elif outcome is GuessOutcome.DUPLICATE_GUESS:
                self.console.show_message(f"You already guessed '{letter}'! Try a different letter.")
            elif outcome is GuessOutcome.CORRECT:
                self.console.show_message("Good guess!")
            else:
                self.console.show_message(f"Sorry, '{letter}' is not in the word.")

    def handle_save(self, session: GameSession) -> bool:
        """Ask for a format and a name, then write the save. Play continues either way."""
        self.console.show_message("Choose save format:")
        self.console.show_message("1. YAML")
        self.console.show_message("2. JSON")
        choice = self.console.prompt("Enter choice (1 or 2): ").strip()
        filename = self.console.prompt("Enter filename (without extension): ").strip()

        # An empty answer picks the configured default format.
        fmt = FORMAT_CHOICES.get(choice) if choice else self.settings.default_format
        if fmt is None:
            self.console.show_message("Invalid choice. Game not saved.")
            return False

        try:
            path = self.store.save(session.to_snapshot(), filename, fmt)
        except SaveError as exc:
            logger.warning("Save failed: %s", exc)
            self.console.show_message("Could not save the game. Play continues unsaved.")
            return False

        self.console.show_message(f"Game saved as {path.name}!")
        return True
