"""File-system key-value store for the adventure snapshot."""
from __future__ import annotations

import json
import logging
import time
from pathlib import Path
from typing import Any, Dict

from .errors import PersistenceError
from .paths import get_save_dir

logger = logging.getLogger(__name__)

STORAGE_KEY = "ff_manager_state_v1"


class SaveStore:
    """Reads and writes the single snapshot kept under STORAGE_KEY."""

    def __init__(self, base_dir: Path | str | None = None, key: str = STORAGE_KEY) -> None:
        self._base_dir = Path(base_dir) if base_dir is not None else get_save_dir()
        self._key = key

    @property
    def path(self) -> Path:
        return self._base_dir / f"{self._key}.json"

    def exists(self) -> bool:
        """Return True if a snapshot is on disk."""
        return self.path.exists()

    def read(self) -> Dict[str, Any] | None:
        """Load the stored payload, or None when nothing has been saved yet."""
        path = self.path
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as exc:
            raise PersistenceError(f"Could not read save file {path}: {exc}") from exc
        try:
            return json.loads(text)
        except (ValueError, RecursionError) as exc:
            raise PersistenceError(f"Save file {path} is not valid JSON: {exc}") from exc

    def write(self, payload: Dict[str, Any]) -> None:
        """Persist the payload, replacing the previous snapshot."""
        path = self.path
        tmp_path = path.with_name(f"{path.name}.tmp")
        try:
            self._base_dir.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
            tmp_path.replace(path)
        except (OSError, TypeError, ValueError) as exc:
            self._discard(tmp_path)
            raise PersistenceError(f"Could not write save file {path}: {exc}") from exc
        logger.debug("Saved snapshot to %s", path)

    @staticmethod
    def _discard(tmp_path: Path) -> None:
        try:
            tmp_path.unlink(missing_ok=True)
        except OSError:
            logger.warning("Could not remove temporary save file %s", tmp_path, exc_info=True)

    def export(self, payload: Dict[str, Any], directory: Path | str) -> Path:
        """Write a timestamped copy of the payload into directory and return its path."""
        target_dir = Path(directory)
        target = target_dir / f"ff-save-{int(time.time() * 1000)}.json"
        try:
            target_dir.mkdir(parents=True, exist_ok=True)
            target.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        except (OSError, TypeError, ValueError) as exc:
            raise PersistenceError(f"Could not export save to {target}: {exc}") from exc
        return target
