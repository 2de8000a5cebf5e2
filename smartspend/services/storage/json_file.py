"""
JSON File Storage Implementation

DESIGN DECISION: Each logical key is one file, `<data_dir>/<key>.json`,
holding exactly the serialized payload. Writes go to a temporary file in
the same directory and are moved into place with os.replace, so a crash
mid-write leaves the previous value intact.

TRADEOFFS:
- One writer per directory (the tracker is single-user, single-process)
- No locking, no retries: an OSError is surfaced as a StorageError
"""

import os
import tempfile
from pathlib import Path
from typing import Optional, Union

import structlog

from smartspend.services.storage.interface import (
    PersistentStore,
    StorageReadError,
    StorageWriteError,
)


logger = structlog.get_logger(__name__)


class JsonFileStore(PersistentStore):
    """File-per-key PersistentStore rooted at a data directory."""

    def __init__(self, data_dir: Union[str, Path], fsync_after_write: bool = True):
        self._data_dir = Path(data_dir).expanduser()
        self._fsync = fsync_after_write

    @property
    def data_dir(self) -> Path:
        return self._data_dir

    def _path_for(self, key: str) -> Path:
        if not key or "/" in key or "\\" in key or key.startswith("."):
            raise ValueError(f"Invalid storage key: {key!r}")
        return self._data_dir / f"{key}.json"

    def get(self, key: str) -> Optional[str]:
        path = self._path_for(key)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except OSError as e:
            raise StorageReadError(f"Failed to read {path}: {e}") from e

    def set(self, key: str, value: str) -> None:
        path = self._path_for(key)
        temp_name: Optional[str] = None
        try:
            self._data_dir.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                mode="w",
                encoding="utf-8",
                prefix=f"{key}-",
                suffix=".tmp",
                dir=self._data_dir,
                delete=False,
            ) as tf:
                temp_name = tf.name
                tf.write(value)
                tf.flush()
                if self._fsync:
                    os.fsync(tf.fileno())
            os.replace(temp_name, path)
        except OSError as e:
            if temp_name and os.path.exists(temp_name):
                os.unlink(temp_name)
            raise StorageWriteError(f"Failed to write {path}: {e}") from e

        logger.debug("store_write", key=key, path=str(path), size=len(value))
