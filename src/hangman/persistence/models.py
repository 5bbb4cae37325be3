from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

from ..board import PLACEHOLDER, validate_fields
from ..errors import InvalidBoardStateError
from .errors import CorruptSaveError

# Version 1 saves predate guessed-letter tracking and used the old key names.
SCHEMA_VERSION = 2

LETTER_LIST_FIELDS = ("secret_letters", "display_letters", "wrong_letters", "guessed_letters")


@dataclass
class GameSnapshot:
    """Everything needed to resume a session exactly where it was saved."""

    player_name: str
    secret_letters: List[str]
    display_letters: List[str]
    wrong_letters: List[str] = field(default_factory=list)
    guessed_letters: List[str] = field(default_factory=list)
    guesses_remaining: int = 0
    active: bool = True
    schema_version: int = SCHEMA_VERSION

    def validate(self) -> None:
        """Raise CorruptSaveError unless the snapshot describes a reachable game."""
        if not isinstance(self.player_name, str) or not self.player_name.strip():
            raise CorruptSaveError("player_name must be a non-empty string")
        if not isinstance(self.active, bool):
            raise CorruptSaveError("active must be a boolean")
        try:
            validate_fields(
                self.secret_letters,
                self.display_letters,
                self.wrong_letters,
                self.guesses_remaining,
                self.guessed_letters,
            )
        except InvalidBoardStateError as e:
            raise CorruptSaveError(f"Inconsistent board: {e}") from e
        finished = PLACEHOLDER not in self.display_letters or self.guesses_remaining <= 0
        if not self.active and not finished:
            raise CorruptSaveError("game is marked finished but the board is still in play")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "schema_version": self.schema_version,
            "player_name": self.player_name,
            "secret_letters": list(self.secret_letters),
            "display_letters": list(self.display_letters),
            "wrong_letters": list(self.wrong_letters),
            "guessed_letters": list(self.guessed_letters),
            "guesses_remaining": self.guesses_remaining,
            "active": self.active,
        }

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "GameSnapshot":
        if not isinstance(data, dict):
            raise CorruptSaveError(f"Save record must be a mapping, got {type(data).__name__}")

        missing = [
            key
            for key in ("player_name", "secret_letters", "display_letters", "wrong_letters", "guesses_remaining", "active")
            if key not in data
        ]
        if missing:
            raise CorruptSaveError(f"Save record is missing fields: {', '.join(missing)}")

        lists: Dict[str, List[str]] = {}
        for key in LETTER_LIST_FIELDS:
            value = data.get(key)
            if key == "guessed_letters" and value is None:
                value = []
            if not isinstance(value, list):
                raise CorruptSaveError(f"{key} must be a list")
            lists[key] = list(value)

        snapshot = GameSnapshot(
            player_name=data["player_name"],
            secret_letters=lists["secret_letters"],
            display_letters=lists["display_letters"],
            wrong_letters=lists["wrong_letters"],
            guessed_letters=lists["guessed_letters"],
            guesses_remaining=data["guesses_remaining"],
            active=data["active"],
            schema_version=SCHEMA_VERSION,
        )
        snapshot.validate()
        return snapshot
