import pytest

from hangman.board import PLACEHOLDER, BoardState, GameBoard, GuessResult, validate_fields
from hangman.errors import InvalidBoardStateError


@pytest.mark.parametrize("word,max_guesses", [("apple", 6), ("Zebra", 1), ("kangaroo", 10)])
def test_fresh_board(word, max_guesses):
    board = GameBoard(word, max_guesses)
    assert board.secret_letters == list(word.upper())
    assert board.display_letters == [PLACEHOLDER] * len(word)
    assert board.guesses_remaining == max_guesses
    assert board.guessed_letters == []
    assert board.wrong_letters == []
    assert board.state is BoardState.IN_PROGRESS


def test_max_guesses_must_be_positive():
    with pytest.raises(ValueError):
        GameBoard("apple", 0)


@pytest.mark.parametrize("word", ["e-mail", "don't", "café", "new york", "r2d2"])
def test_word_with_non_letters_rejected(word):
    with pytest.raises(ValueError):
        GameBoard(word)


def test_correct_guess_reveals_all_positions_without_cost():
    board = GameBoard("apple", 6)
    assert board.apply_guess("P") is GuessResult.CORRECT
    assert board.masked_word == "_ P P _ _"
    assert board.guesses_remaining == 6
    assert board.guessed_letters == ["P"]


def test_wrong_guess_costs_one():
    board = GameBoard("apple", 6)
    assert board.apply_guess("Z") is GuessResult.WRONG
    assert board.wrong_letters == ["Z"]
    assert board.guesses_remaining == 5


def test_wrong_letters_never_duplicate_and_budget_floors_at_zero():
    board = GameBoard("cat", 1)
    board.apply_guess("X")
    board.apply_guess("X")
    assert board.wrong_letters == ["X"]
    assert board.guesses_remaining == 0


def test_apple_scenario():
    board = GameBoard("APPLE", 6)

    board.apply_guess("A")
    assert board.masked_word == "A _ _ _ _"
    assert board.wrong_letters == []
    assert board.guesses_remaining == 6

    board.apply_guess("Z")
    assert board.wrong_letters == ["Z"]
    assert board.guesses_remaining == 5

    board.apply_guess("P")
    assert board.masked_word == "A P P _ _"
    board.apply_guess("L")
    assert board.masked_word == "A P P L _"
    board.apply_guess("E")
    assert board.masked_word == "A P P L E"
    assert board.is_word_complete()
    assert board.state is BoardState.WON


def test_cat_scenario_lost():
    board = GameBoard("CAT", 1)
    board.apply_guess("X")
    assert board.wrong_letters == ["X"]
    assert board.guesses_remaining == 0
    assert board.is_out_of_guesses()
    assert board.state is BoardState.LOST
    assert board.secret_word == "CAT"


def test_complete_word_beats_empty_budget():
    board = GameBoard.from_persisted_fields(list("CAT"), list("CAT"), ["X"], 0, ["X", "C", "A", "T"])
    assert board.state is BoardState.WON


def test_missing_guessed_letters_are_rebuilt_from_board():
    board = GameBoard.from_persisted_fields(list("CAT"), ["C", "_", "_"], ["X"], 5)
    assert board.guessed_letters == ["X", "C"]
    assert board.already_guessed("C")
    assert board.already_guessed("X")
    assert not board.already_guessed("A")


def test_rebuilt_guessed_letters_count_repeated_reveals_once():
    board = GameBoard.from_persisted_fields(list("APPLE"), ["_", "P", "P", "_", "_"], [], 6)
    assert board.guessed_letters == ["P"]


def test_from_persisted_fields_restores_exactly():
    board = GameBoard.from_persisted_fields(
        list("APPLE"), ["A", "_", "_", "_", "_"], ["Z"], 5, ["A", "Z"]
    )
    assert board.masked_word == "A _ _ _ _"
    assert board.wrong_letters == ["Z"]
    assert board.guessed_letters == ["A", "Z"]
    assert board.guesses_remaining == 5
    assert board.already_guessed("Z")


@pytest.mark.parametrize(
    "secret,display,wrong,remaining,guessed",
    [
        ([], [], [], 6, []),
        (list("cat"), ["_", "_", "_"], [], 6, []),
        (list("CAT"), ["_", "_"], [], 6, []),
        (list("CAT"), ["D", "_", "_"], [], 6, []),
        (list("CAT"), ["_", "_", "_"], ["C"], 5, []),
        (list("CAT"), ["_", "_", "_"], ["X", "X"], 4, []),
        (list("CAT"), ["_", "_", "_"], [], -1, []),
        (list("CAT"), ["_", "_", "_"], [], "6", []),
        (list("CAT"), ["C", "_", "_"], [], 6, ["A"]),
        (list("CAT"), ["_", "_", "_"], ["X"], 5, ["C"]),
        (list("CAT"), ["_", "_", "_"], [], 6, ["C"]),
        (list("CAT"), ["_", "_", "_"], [], 6, ["Q"]),
    ],
)
def test_inconsistent_fields_are_rejected(secret, display, wrong, remaining, guessed):
    with pytest.raises(InvalidBoardStateError):
        validate_fields(secret, display, wrong, remaining, guessed)
    with pytest.raises(ValueError):
        GameBoard.from_persisted_fields(secret, display, wrong, remaining, guessed)


def test_legacy_fields_without_guessed_letters_are_accepted():
    validate_fields(list("CAT"), ["C", "_", "_"], ["X"], 5, [])
