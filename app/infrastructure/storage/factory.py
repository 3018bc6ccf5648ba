"""Key-value store factory: creates file, memory, or Redis backend from settings."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.infrastructure.storage.protocol import KeyValueStoreProtocol

if TYPE_CHECKING:
    from app.core.config import Settings


class StoreFactory:
    """Factory for key-value store instances based on configuration."""

    @staticmethod
    def create_store(settings: "Settings | None" = None) -> KeyValueStoreProtocol:
        """Create store from settings.

        Args:
            settings: Application settings; if None, uses get_settings().

        Returns:
            JsonFileStore, MemoryStore, or RedisStore (not yet connected).

        Raises:
            ValueError: Unknown backend or missing required config.
        """
        from app.core.config import get_settings

        s = settings or get_settings()
        backend = s.storage_backend.lower()

        if backend == "file":
            from app.infrastructure.storage.file_store import JsonFileStore

            if not s.storage_root:
                raise ValueError("STORAGE_ROOT required for file backend")
            return JsonFileStore(storage_root=s.storage_root)
        if backend == "memory":
            from app.infrastructure.storage.memory_store import MemoryStore

            return MemoryStore()
        if backend == "redis":
            from app.infrastructure.storage.redis_store import RedisStore

            return RedisStore(settings=s)
        raise ValueError(
            f"Unknown storage backend: {backend}. Supported: 'file', 'memory', 'redis'"
        )
