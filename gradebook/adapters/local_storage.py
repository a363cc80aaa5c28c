"""
Local Filesystem Key-Value Store.

Implements KeyValueStorePort on a data directory, one file per slot:
{base_path}/{key}.json

Writes go to a temporary sibling file that is then renamed over the slot,
so a crash mid-write leaves the previous contents intact.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from gradebook.components.persistence import StorageError

logger = logging.getLogger(__name__)


class LocalKeyValueStore:
    """Filesystem-backed slots, the desktop stand-in for browser local storage."""

    def __init__(self, base_path: str | Path, *, create_dirs: bool = True) -> None:
        """
        Initialize local key-value storage.

        Args:
            base_path: Directory holding one file per slot
            create_dirs: Whether to create the directory if it doesn't exist
        """
        self.base_path = Path(base_path)

        if create_dirs:
            try:
                self.base_path.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                # Reads and writes will report the failure; startup goes on.
                logger.warning("Could not create data directory %s: %s", self.base_path, e)

    def _key_to_path(self, key: str) -> Path:
        # Sanitize key to prevent directory traversal
        safe_key = key.replace("..", "").replace("/", "_").replace("\\", "_")
        if not safe_key:
            raise StorageError(f"Invalid storage key: {key!r}")
        return self.base_path / f"{safe_key}.json"

    def get(self, key: str) -> bytes | None:
        path = self._key_to_path(key)
        try:
            return path.read_bytes()
        except FileNotFoundError:
            return None
        except OSError as e:
            raise StorageError(f"Failed to read {path}: {e}") from e

    def set(self, key: str, data: bytes) -> None:
        path = self._key_to_path(key)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=path.parent, prefix=f".{path.stem}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "wb") as f:
                    f.write(data)
                os.replace(tmp_name, path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise StorageError(f"Failed to write {path}: {e}") from e

    def delete(self, key: str) -> bool:
        path = self._key_to_path(key)
        try:
            path.unlink()
        except FileNotFoundError:
            return False
        except OSError as e:
            raise StorageError(f"Failed to delete {path}: {e}") from e
        return True
