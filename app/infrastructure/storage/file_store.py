"""Local filesystem key-value store with atomic writes."""

from __future__ import annotations

import logging
import os
import re
import tempfile
from pathlib import Path

import aiofiles
import aiofiles.os

from app.infrastructure.exceptions import StorageReadError, StorageWriteError

logger = logging.getLogger(__name__)

_KEY_PATTERN = re.compile(r"^[a-zA-Z0-9_.-]+$")


class JsonFileStore:
    """One JSON file per key under storage_root.

    Writes go to a temp file in the same directory and are renamed over
    the target, so readers see either the old or the new value, never a
    partial one.
    """

    SUFFIX = ".json"

    def __init__(self, storage_root: str | Path) -> None:
        """Initialize file store.

        Args:
            storage_root: Directory for all key files (created if missing;
                a leading ~ is expanded).
        """
        self.storage_root = Path(storage_root).expanduser().resolve()
        self.storage_root.mkdir(parents=True, exist_ok=True, mode=0o750)
        logger.debug("JsonFileStore ready root=%s", self.storage_root)

    def _path_for(self, key: str) -> Path:
        """Map key to its file. Keys are restricted to a filename-safe charset."""
        if not _KEY_PATTERN.match(key) or key in {".", ".."}:
            raise ValueError(f"Invalid storage key: {key!r}")
        return self.storage_root / f"{key}{self.SUFFIX}"

    async def get(self, key: str) -> str | None:
        path = self._path_for(key)
        try:
            async with aiofiles.open(path, "r", encoding="utf-8") as f:
                return await f.read()
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as e:
            raise StorageReadError(key, str(e)) from e

    async def set(self, key: str, value: str) -> None:
        path = self._path_for(key)
        temp_path: str | None = None
        try:
            temp_fd, temp_path = tempfile.mkstemp(
                dir=self.storage_root,
                prefix=".tmp_",
                suffix=self.SUFFIX,
            )
            os.close(temp_fd)
            async with aiofiles.open(temp_path, "w", encoding="utf-8") as f:
                await f.write(value)
                await f.flush()
            os.chmod(temp_path, 0o640)
            await aiofiles.os.replace(temp_path, path)
        except OSError as e:
            raise StorageWriteError(key, str(e)) from e
        finally:
            if temp_path is not None and Path(temp_path).exists():
                os.unlink(temp_path)

    async def delete(self, key: str) -> bool:
        path = self._path_for(key)
        try:
            await aiofiles.os.remove(path)
            return True
        except FileNotFoundError:
            return False
        except OSError as e:
            raise StorageWriteError(key, str(e)) from e
