from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List, Optional, Union

from .codec import codec_for_path, get_codec, save_extensions
from .errors import CorruptSaveError, SaveError, SaveNotFoundError, SaveTargetUnwritableError
from .models import GameSnapshot

logger = logging.getLogger(__name__)


class SaveStore:
    """Filesystem-backed storage for saved games, one file per save.

    The directory is only created when the first save is written. Writes go
    through a temporary file and ``os.replace`` so an interrupted save never
    clobbers an existing one.
    """

    def __init__(self, save_dir: Union[str, Path]) -> None:
        self.save_dir = Path(save_dir)

    def path_for(self, name: str, fmt: str) -> Path:
        codec = get_codec(fmt)
        stem = (name or "").strip()
        if not stem or stem in (".", "..") or any(sep in stem for sep in ("/", "\\", os.sep)):
            raise SaveTargetUnwritableError(f"Invalid save name: {name!r}")
        return self.save_dir / f"{stem}{codec.extension}"

    def save(self, snapshot: GameSnapshot, name: str, fmt: str = "yaml") -> Path:
        """Write a snapshot as ``<name><ext>`` and return the path written.

        Raises SaveTargetUnwritableError on an invalid name or any OS error.
        """
        path = self.path_for(name, fmt)
        text = get_codec(fmt).encode(snapshot)
        tmp_path = path.with_name(path.name + ".tmp")
        try:
            self.save_dir.mkdir(parents=True, exist_ok=True)
            logger.debug("Writing save to temporary file: %s", tmp_path)
            with open(tmp_path, "w", encoding="utf-8") as f:
                f.write(text)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, path)
        except OSError as exc:
            logger.error("I/O error while writing %s: %s", path, exc)
            try:
                tmp_path.unlink()
            except OSError:
                logger.debug("Could not remove temp file %s", tmp_path)
            raise SaveTargetUnwritableError(f"Could not write {path}: {exc}") from exc
        logger.info("Game saved to %s", path)
        return path

    def resolve(self, filename: Union[str, Path]) -> Path:
        path = Path(filename)
        if not path.is_absolute() and path.parent == Path("."):
            path = self.save_dir / path
        return path

    def load(self, filename: Union[str, Path]) -> GameSnapshot:
        """Read and decode a save by filename (relative to the save dir) or path.

        Raises:
            SaveNotFoundError: The file does not exist.
            CorruptSaveError: The file exists but is not a valid save.
        """
        path = self.resolve(filename)
        codec = codec_for_path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise SaveNotFoundError(f"Save file not found: {path}") from e
        except UnicodeDecodeError as e:
            raise CorruptSaveError(f"Save file is not UTF-8 text: {path}") from e
        except OSError as e:
            raise SaveError(f"Could not read {path}: {e}") from e
        snapshot = codec.decode(text)
        logger.info("Loaded save %s", path)
        return snapshot

    def list_saves(self) -> List[str]:
        if not self.save_dir.is_dir():
            return []
        extensions = save_extensions()
        return sorted(
            p.name for p in self.save_dir.iterdir() if p.is_file() and p.suffix.lower() in extensions
        )

    def delete(self, filename: Union[str, Path]) -> None:
        path = self.resolve(filename)
        try:
            path.unlink()
        except FileNotFoundError as e:
            raise SaveNotFoundError(f"Save file not found: {path}") from e
        logger.info("Deleted save %s", path)


def open_store(save_dir: Optional[Path] = None) -> SaveStore:
    """Return a store rooted at ``save_dir`` or the platform default."""
    from ..paths import default_save_dir

    return SaveStore(save_dir or default_save_dir())
