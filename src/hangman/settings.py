from __future__ import annotations

import dataclasses
import logging
import os
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

import yaml

from .board import DEFAULT_MAX_GUESSES
from .words import DEFAULT_MAX_LENGTH, DEFAULT_MIN_LENGTH

logger = logging.getLogger(__name__)

SAVE_FORMATS = ("yaml", "json")
INT_FIELDS = ("min_length", "max_length", "max_guesses")

ENV_OVERRIDES: Dict[str, Tuple[str, Callable[[str], Any]]] = {
    "HANGMAN_WORD_LIST": ("word_list", str),
    "HANGMAN_SAVE_DIR": ("save_dir", str),
    "HANGMAN_MAX_GUESSES": ("max_guesses", int),
    "HANGMAN_MIN_LENGTH": ("min_length", int),
    "HANGMAN_MAX_LENGTH": ("max_length", int),
    "HANGMAN_FORMAT": ("default_format", str),
}


def _as_int(name: str, value: Any) -> int:
    """Accept ints and numeric strings from YAML; anything else is a configuration error."""
    if isinstance(value, bool):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().lstrip("-").isdigit():
        return int(value)
    raise ValueError(f"{name} must be an integer, got {value!r}")


@dataclass
class Settings:
    """Game configuration.

    Values come from, in increasing priority:
    - the packaged ``hangman/config/default_settings.yaml``
    - an optional user YAML file
    - ``HANGMAN_*`` environment variables
    - command line flags (applied by the caller via ``dataclasses.replace``)
    """

    word_list: Optional[Path] = None
    min_length: int = DEFAULT_MIN_LENGTH
    max_length: int = DEFAULT_MAX_LENGTH
    max_guesses: int = DEFAULT_MAX_GUESSES
    save_dir: Optional[Path] = None
    default_format: str = "yaml"

    def __post_init__(self) -> None:
        if self.word_list is not None:
            self.word_list = Path(self.word_list).expanduser()
        if self.save_dir is not None:
            self.save_dir = Path(self.save_dir).expanduser()
        for name in INT_FIELDS:
            setattr(self, name, _as_int(name, getattr(self, name)))
        self.default_format = str(self.default_format).lower()

    def validate(self) -> None:
        if self.min_length < 1 or self.max_length < 1:
            raise ValueError("word length limits must be positive")
        if self.min_length > self.max_length:
            raise ValueError(f"min_length ({self.min_length}) exceeds max_length ({self.max_length})")
        if self.max_guesses <= 0:
            raise ValueError("max_guesses must be positive")
        if self.default_format not in SAVE_FORMATS:
            raise ValueError(f"default_format must be one of {SAVE_FORMATS}, got {self.default_format!r}")

    @staticmethod
    def _load_yaml(path: Path) -> dict:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Settings file {path} must contain a mapping")
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Settings":
        allowed = {f.name for f in dataclasses.fields(cls)}
        unknown = sorted(set(data) - allowed)
        if unknown:
            logger.warning("Ignoring unknown settings: %s", ", ".join(unknown))
        settings = cls(**{k: v for k, v in data.items() if k in allowed})
        settings.validate()
        return settings

    @staticmethod
    def from_env(env: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
        env = os.environ if env is None else env
        overrides: Dict[str, Any] = {}
        for var, (key, cast) in ENV_OVERRIDES.items():
            raw = env.get(var)
            if raw is None or raw == "":
                continue
            try:
                overrides[key] = cast(raw)
            except ValueError:
                logger.warning("Ignoring %s=%r: not a valid %s", var, raw, cast.__name__)
        return overrides

    @classmethod
    def load(cls, user_path: Optional[Path] = None, env: Optional[Mapping[str, str]] = None) -> "Settings":
        """Load settings from built-in defaults, an optional user file and the environment."""
        try:
            with resources.files("hangman.config").joinpath("default_settings.yaml").open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except FileNotFoundError:
            logger.warning("Default settings not found; falling back to dataclass defaults.")
            data = {}

        if user_path is not None:
            user_path = Path(user_path)
            if user_path.exists():
                data.update(cls._load_yaml(user_path))
                logger.info("Loaded user settings from %s", user_path)
            else:
                logger.warning("User settings file not found: %s", user_path)

        data.update(cls.from_env(env))
        settings = cls.from_dict(data)
        logger.debug("Settings resolved: %s", settings)
        return settings

    def as_dict(self) -> Dict[str, Any]:
        return {
            "word_list": str(self.word_list) if self.word_list else None,
            "min_length": self.min_length,
            "max_length": self.max_length,
            "max_guesses": self.max_guesses,
            "save_dir": str(self.save_dir) if self.save_dir else None,
            "default_format": self.default_format,
        }

    def save(self, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            yaml.safe_dump(self.as_dict(), f, sort_keys=False)
        logger.info("Saved settings to %s", path)
