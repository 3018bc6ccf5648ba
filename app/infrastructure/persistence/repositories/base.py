"""Base repository over a key-value store: one JSON document per key.

Reads fail soft (log and return None); writes fail hard with
PersistenceWriteException.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from app.domain.exceptions import PersistenceReadException, PersistenceWriteException
from app.infrastructure.exceptions import StorageException
from app.infrastructure.storage.protocol import KeyValueStoreProtocol

logger = logging.getLogger(__name__)

# Errors raised while decoding a stored document (bad JSON, bad ISO date,
# unknown enum value, missing or mistyped field).
DECODE_ERRORS = (ValueError, TypeError, KeyError, AttributeError)

UNREADABLE_SUFFIX = ".corrupt"


class KeyValueRepository:
    """Shared JSON read/write helpers for repositories bound to one storage key."""

    def __init__(self, store: KeyValueStoreProtocol, key: str) -> None:
        self.store = store
        self.key = key

    @property
    def unreadable_key(self) -> str:
        """Key that keeps the last undecodable payload found under key."""
        return f"{self.key}{UNREADABLE_SUFFIX}"

    async def _read_document(self) -> Any | None:
        """Return the decoded JSON stored under key, or None if absent or unreadable."""
        try:
            raw = await self.store.get(self.key)
        except StorageException as e:
            self._report_read_failure(e.message)
            return None
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except ValueError as e:
            self._report_read_failure(str(e))
            return None

    async def _read_raw_for_write(self) -> str | None:
        """Raw payload under key, read ahead of a write.

        Raises:
            PersistenceWriteException: The current value could not be read, so
                writing over it could destroy data.
        """
        try:
            return await self.store.get(self.key)
        except StorageException as e:
            logger.error("Read before write failed key=%s reason=%s", self.key, e.message)
            raise PersistenceWriteException(self.key, e.message) from e

    async def _write_document(self, document: Any) -> None:
        """Serialize and store document in a single write."""
        payload = json.dumps(document, ensure_ascii=False)
        try:
            await self.store.set(self.key, payload)
        except StorageException as e:
            logger.error("Write failed key=%s reason=%s", self.key, e.message)
            raise PersistenceWriteException(self.key, e.message) from e

    async def _preserve_unreadable(self, raw: str) -> None:
        """Copy an undecodable payload to unreadable_key before it is overwritten."""
        try:
            await self.store.set(self.unreadable_key, raw)
        except StorageException as e:
            logger.error("Backup failed key=%s reason=%s", self.unreadable_key, e.message)
            raise PersistenceWriteException(self.unreadable_key, e.message) from e
        logger.error(
            "Unreadable data under key=%s moved to key=%s before overwrite",
            self.key,
            self.unreadable_key,
            extra={"error_code": "PERSISTENCE_READ_ERROR", "storage_key": self.key},
        )

    async def _delete_document(self) -> bool:
        try:
            return await self.store.delete(self.key)
        except StorageException as e:
            logger.error("Delete failed key=%s reason=%s", self.key, e.message)
            raise PersistenceWriteException(self.key, e.message) from e

    def _report_read_failure(self, reason: str) -> None:
        """Log a swallowed read failure with its error code for log-based alerting."""
        exc = PersistenceReadException(self.key, reason)
        logger.warning(
            "%s (%s); falling back to empty result",
            exc.message,
            reason,
            extra={"error_code": exc.error_code, "storage_key": self.key},
        )
