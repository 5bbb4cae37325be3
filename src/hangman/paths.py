from __future__ import annotations

from pathlib import Path

from platformdirs import PlatformDirs

APP_NAME = "hangman"


def app_dirs() -> PlatformDirs:
    return PlatformDirs(appname=APP_NAME, appauthor=False)


def default_save_dir() -> Path:
    """Return the directory saves go to when none is configured.

    Linux: ~/.local/share/hangman/saves
    macOS: ~/Library/Application Support/hangman/saves
    Windows: %LOCALAPPDATA%\\hangman\\saves
    """
    return Path(app_dirs().user_data_dir) / "saves"


def default_settings_file() -> Path:
    return Path(app_dirs().user_config_dir) / "settings.yaml"
