"""Persistence subsystem for hangman.

This package provides:
- GameSnapshot, the canonical record of a resumable session
- Two interchangeable codecs (YAML and JSON) with schema migration
- A SaveStore that handles atomic disk I/O and save listing
"""

from .models import SCHEMA_VERSION, GameSnapshot
from .codec import (
    CODECS,
    JsonSnapshotCodec,
    SnapshotCodec,
    YamlSnapshotCodec,
    codec_for_path,
    get_codec,
)
from .store import SaveStore, open_store
from .errors import SaveError, SaveNotFoundError, CorruptSaveError, SaveTargetUnwritableError

__all__ = [
    "SCHEMA_VERSION",
    "GameSnapshot",
    "CODECS",
    "SnapshotCodec",
    "YamlSnapshotCodec",
    "JsonSnapshotCodec",
    "codec_for_path",
    "get_codec",
    "SaveStore",
    "open_store",
    "SaveError",
    "SaveNotFoundError",
    "CorruptSaveError",
    "SaveTargetUnwritableError",
]
