from __future__ import annotations

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Tuple, Union

import yaml

from .errors import CorruptSaveError
from .models import SCHEMA_VERSION, GameSnapshot

# Key names written by the first release, before guessed letters were tracked.
LEGACY_KEYS = {
    "secret_word": "secret_letters",
    "display_word": "display_letters",
    "wrong_guesses": "wrong_letters",
    "all_guessed_letters": "guessed_letters",
    "guesses_left": "guesses_remaining",
    "game_active": "active",
}


class SnapshotCodec(ABC):
    """Converts a GameSnapshot to and from one text format."""

    name: str = ""
    extensions: Tuple[str, ...] = ()

    @property
    def extension(self) -> str:
        """Extension used when writing new files."""
        return self.extensions[0]

    @abstractmethod
    def dumps(self, data: Dict[str, Any]) -> str:
        """Serialize a plain mapping."""

    @abstractmethod
    def loads(self, text: str) -> Any:
        """Parse text into plain Python data, raising CorruptSaveError on syntax errors."""

    def encode(self, snapshot: GameSnapshot) -> str:
        return self.dumps(snapshot.to_dict())

    def decode(self, text: str) -> GameSnapshot:
        """Decode text into a validated GameSnapshot with version migration."""
        data = self.loads(text)
        if not isinstance(data, dict):
            raise CorruptSaveError(f"Expected a {self.name.upper()} mapping at the top level")

        version = data.get("schema_version", 1)
        if isinstance(version, bool) or not isinstance(version, int):
            raise CorruptSaveError(f"Invalid schema_version: {version!r}")
        if version != SCHEMA_VERSION:
            data = migrate_data(data, from_version=version, to_version=SCHEMA_VERSION)
        return GameSnapshot.from_dict(data)


class YamlSnapshotCodec(SnapshotCodec):
    name = "yaml"
    extensions = (".yaml", ".yml")

    def dumps(self, data: Dict[str, Any]) -> str:
        return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)

    def loads(self, text: str) -> Any:
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise CorruptSaveError(f"Invalid YAML: {e}") from e


class JsonSnapshotCodec(SnapshotCodec):
    name = "json"
    extensions = (".json",)

    def dumps(self, data: Dict[str, Any]) -> str:
        return json.dumps(data, ensure_ascii=False, indent=2)

    def loads(self, text: str) -> Any:
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise CorruptSaveError(f"Invalid JSON: {e}") from e


CODECS: Dict[str, SnapshotCodec] = {
    codec.name: codec for codec in (YamlSnapshotCodec(), JsonSnapshotCodec())
}


def get_codec(name: str) -> SnapshotCodec:
    try:
        return CODECS[name.lower()]
    except KeyError:
        raise ValueError(f"Unknown save format {name!r}; expected one of {sorted(CODECS)}") from None


def codec_for_path(path: Union[str, Path]) -> SnapshotCodec:
    suffix = Path(path).suffix.lower()
    for codec in CODECS.values():
        if suffix in codec.extensions:
            return codec
    raise ValueError(f"Unrecognised save file extension {suffix!r}")


def save_extensions() -> Tuple[str, ...]:
    return tuple(ext for codec in CODECS.values() for ext in codec.extensions)


def migrate_data(data: Dict[str, Any], from_version: int, to_version: int) -> Dict[str, Any]:
    """Bring a decoded record up to the current schema, one version at a time."""
    if from_version == to_version:
        return data
    if from_version > to_version:
        raise CorruptSaveError(
            f"Save schema version {from_version} is newer than supported {to_version}."
        )
    if from_version < 1:
        raise CorruptSaveError(f"Invalid schema_version: {from_version}")

    data = dict(data)
    for v in range(from_version, to_version):
        if v == 1:
            data = _migrate_v1_to_v2(data)
    data["schema_version"] = to_version
    return data


def _migrate_v1_to_v2(data: Dict[str, Any]) -> Dict[str, Any]:
    migrated = dict(data)
    for old, new in LEGACY_KEYS.items():
        if old in migrated and new not in migrated:
            migrated[new] = migrated.pop(old)
    if migrated.get("guessed_letters") is None:
        migrated["guessed_letters"] = []
    return migrated
