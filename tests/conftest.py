import random
import sys
from pathlib import Path
from typing import Iterable, List

import pytest

# Ensure 'src' is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))

from hangman.console import Console  # noqa: E402
from hangman.words import WordSource  # noqa: E402


class ScriptedConsole(Console):
    """Console that replays canned input and records everything shown."""

    def __init__(self, inputs: Iterable[str]) -> None:
        self.inputs: List[str] = list(inputs)
        self.prompts: List[str] = []
        self.messages: List[str] = []

    def prompt(self, message: str) -> str:
        self.prompts.append(message)
        if not self.inputs:
            raise EOFError
        return self.inputs.pop(0)

    def show_message(self, text: str) -> None:
        self.messages.append(text)

    @property
    def output(self) -> str:
        return "\n".join(self.messages)


@pytest.fixture()
def word_file(tmp_path: Path) -> Path:
    path = tmp_path / "words.txt"
    path.write_text("cat\napple\nbanana\nextraordinarily\n\ngrape\n", encoding="utf-8")
    return path


@pytest.fixture()
def apple_source() -> WordSource:
    return WordSource(["apple"], rng=random.Random(0))


@pytest.fixture()
def scripted_console():
    return ScriptedConsole
