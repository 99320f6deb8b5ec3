"""Mini README: Directory-backed storage backend.

Structure:
    * FileKeyValueStore - one file per key inside a data directory.

Writes go to a temporary sibling file which then replaces the target, so a
crash mid-write leaves the previous payload intact.
"""

from __future__ import annotations

import os
import re
import tempfile
from pathlib import Path
from typing import Dict, Optional

from ..base import KeyValueStore, StorageError
from ..registry import REGISTRY
from ...logging_utils import get_logger

LOGGER = get_logger(__name__)

_SAFE_KEY = re.compile(r"^[A-Za-z0-9_.-]+$")


class FileKeyValueStore(KeyValueStore):
    """Persist each key as ``<directory>/<key>.json``."""

    backend_name = "file"

    def __init__(self, directory: Path | str) -> None:
        super().__init__()
        self.directory = Path(directory).expanduser()

    def _path_for(self, key: str) -> Path:
        if not _SAFE_KEY.match(key) or key.startswith("."):
            raise StorageError(f"Storage key '{key}' is not a valid file name")
        return self.directory / f"{key}.json"

    def get(self, key: str) -> Optional[bytes]:
        path = self._path_for(key)
        try:
            return path.read_bytes()
        except FileNotFoundError:
            return None
        except OSError as error:
            raise StorageError(f"Unable to read {path}: {error}") from error

    def set(self, key: str, payload: bytes) -> None:
        path = self._path_for(key)
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            handle, temp_name = tempfile.mkstemp(dir=self.directory, prefix=f".{key}.", suffix=".tmp")
            try:
                with os.fdopen(handle, "wb") as temp_file:
                    temp_file.write(payload)
                os.replace(temp_name, path)
            except BaseException:
                Path(temp_name).unlink(missing_ok=True)
                raise
        except OSError as error:
            raise StorageError(f"Unable to write {path}: {error}") from error
        LOGGER.debug("Wrote %s bytes to %s", len(payload), path)

    def metadata(self) -> Dict[str, str]:
        return {"backend": self.backend_name, "directory": str(self.directory)}


REGISTRY.register(FileKeyValueStore)
