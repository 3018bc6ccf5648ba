"""Key-value store protocol (DIP). Implementations: JsonFileStore, MemoryStore, RedisStore."""

from typing import Protocol


class KeyValueStoreProtocol(Protocol):
    """Protocol for string key-value backends holding serialized JSON.

    get raises StorageReadError, set/delete raise StorageWriteError.
    """

    async def get(self, key: str) -> str | None:
        """Return the stored string or None when the key is absent."""
        ...

    async def set(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value in one write."""
        ...

    async def delete(self, key: str) -> bool:
        """Remove key. Returns True if it existed."""
        ...
