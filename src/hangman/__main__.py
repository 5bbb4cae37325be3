from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from pathlib import Path

import yaml

from . import __version__
from .app import HangmanApp
from .console import TerminalConsole
from .errors import HangmanError
from .logging_config import configure_logging
from .paths import default_settings_file
from .settings import Settings


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="hangman",
        description="Guess the hidden word one letter at a time.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--words", dest="word_list", type=Path, default=None, help="Dictionary file, one word per line.")
    parser.add_argument("--save-dir", dest="save_dir", type=Path, default=None, help="Directory for saved games.")
    parser.add_argument("--max-guesses", dest="max_guesses", type=int, default=None, help="Wrong guesses allowed per round.")
    parser.add_argument(
        "--settings",
        dest="settings_path",
        type=Path,
        default=None,
        help="Path to a user settings YAML file to load/override defaults.",
    )
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity (-v, -vv)")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose >= 2:
        level = logging.DEBUG
    configure_logging(level)

    try:
        user_path = args.settings_path
        if user_path is None and default_settings_file().exists():
            user_path = default_settings_file()
        settings = Settings.load(user_path=user_path)
        overrides = {
            key: value
            for key, value in (
                ("word_list", args.word_list),
                ("save_dir", args.save_dir),
                ("max_guesses", args.max_guesses),
            )
            if value is not None
        }
        settings = dataclasses.replace(settings, **overrides)
        settings.validate()
    except (ValueError, TypeError, yaml.YAMLError) as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return 2

    try:
        app = HangmanApp(TerminalConsole(), settings)
        app.run()
    except HangmanError as exc:
        logging.getLogger(__name__).debug("Fatal game error", exc_info=True)
        print(f"Cannot play: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nGoodbye!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
