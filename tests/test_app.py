from pathlib import Path

import pytest

from conftest import ScriptedConsole
from hangman.app import HangmanApp
from hangman.persistence import SaveStore
from hangman.settings import Settings
from hangman.words import WordSource


def _app(inputs, tmp_path: Path, words=("apple",), max_guesses=6):
    console = ScriptedConsole(inputs)
    settings = Settings(save_dir=tmp_path / "saves", max_guesses=max_guesses)
    app = HangmanApp(
        console,
        settings,
        store=SaveStore(settings.save_dir),
        word_source=WordSource(words),
    )
    return app, console


def test_full_winning_game(tmp_path: Path):
    app, console = _app(["1", "Ada", "a", "z", "p", "l", "e", "n", "3"], tmp_path)
    app.run()
    out = console.output
    assert "Let's play, Ada!" in out
    assert "Sorry, 'Z' is not in the word." in out
    assert "Word: A P P L E" in out
    assert "Congratulations Ada! You won!" in out
    assert "Thanks for playing!" in out
    assert console.messages[-1] == "Goodbye!"


def test_losing_game_reveals_word(tmp_path: Path):
    app, console = _app(["1", "Bo", "x", "n", "3"], tmp_path, words=("cat",), max_guesses=1)
    app.run()
    assert "Game Over! The word was: CAT" in console.output
    assert "Guesses left: 0" in console.output


def test_feedback_for_invalid_and_duplicate_guesses(tmp_path: Path):
    app, console = _app(["1", "Ada", "ab", "a", "A"], tmp_path)
    app.run()
    out = console.output
    assert "Please enter a single letter or 'save' to save your game!" in out
    assert "Good guess!" in out
    assert "You already guessed 'A'! Try a different letter." in out


def test_blank_name_reprompts(tmp_path: Path):
    app, console = _app(["1", "  ", "Ada"], tmp_path)
    app.run()
    assert "Please enter a name." in console.output
    assert "Let's play, Ada!" in console.output


def test_invalid_menu_choice(tmp_path: Path):
    app, console = _app(["9", "3"], tmp_path)
    app.run()
    assert "Invalid choice!" in console.messages
    assert console.messages[-1] == "Goodbye!"


def test_save_then_resume_in_new_app(tmp_path: Path):
    app, console = _app(["1", "Ada", "a", "z", "save", "2", "slot"], tmp_path)
    app.run()
    assert "Game saved as slot.json!" in console.output
    assert (tmp_path / "saves" / "slot.json").exists()

    # A different dictionary must not change the restored word
    app2, console2 = _app(["2", "1", "p", "l", "e", "n", "3"], tmp_path, words=("banana",))
    app2.run()
    out = console2.output
    assert "1. slot.json" in out
    assert "Game loaded successfully!" in out
    assert "Wrong guesses: Z" in out
    assert "Congratulations Ada! You won!" in out


def test_save_with_default_format(tmp_path: Path):
    app, console = _app(["1", "Ada", "save", "", "quick"], tmp_path)
    app.run()
    assert (tmp_path / "saves" / "quick.yaml").exists()


def test_invalid_save_format_choice(tmp_path: Path):
    app, console = _app(["1", "Ada", "save", "7", "slot", "a"], tmp_path)
    app.run()
    assert "Invalid choice. Game not saved." in console.output
    assert "Good guess!" in console.output
    assert not (tmp_path / "saves").exists()


def test_save_failure_keeps_game_running(tmp_path: Path):
    app, console = _app(["1", "Ada", "save", "1", "../outside", "a"], tmp_path)
    app.run()
    assert "Could not save the game. Play continues unsaved." in console.output
    assert "Good guess!" in console.output


def test_load_with_no_saves(tmp_path: Path):
    app, console = _app(["2", "3"], tmp_path)
    app.run()
    assert "No saved games found!" in console.messages


def test_load_invalid_selection_reprompts(tmp_path: Path):
    saves = tmp_path / "saves"
    saves.mkdir()
    (saves / "bad.json").write_text("{ nope", encoding="utf-8")
    app, console = _app(["2", "0", "abc", "1", "3"], tmp_path)
    app.run()
    assert console.messages.count("Invalid selection!") == 2


def test_load_corrupt_save_returns_to_menu(tmp_path: Path):
    saves = tmp_path / "saves"
    saves.mkdir()
    (saves / "bad.json").write_text("{ nope", encoding="utf-8")
    app, console = _app(["2", "1", "3"], tmp_path)
    app.run()
    assert "Failed to load game: bad.json is damaged or not a saved game." in console.output
    assert console.messages[-1] == "Goodbye!"


def test_rematch_starts_fresh_board(tmp_path: Path):
    inputs = ["1", "Ada", "a", "p", "l", "e", "y", "a", "p", "l", "e", "n", "3"]
    app, console = _app(inputs, tmp_path)
    app.run()
    assert console.messages.count("Congratulations Ada! You won!") == 2


def test_missing_dictionary_fails_at_startup(tmp_path: Path):
    from hangman.errors import DictionaryUnavailableError

    settings = Settings(word_list=tmp_path / "missing.txt", save_dir=tmp_path)
    with pytest.raises(DictionaryUnavailableError):
        HangmanApp(ScriptedConsole([]), settings)
