"""Key-value storage: JSON files, in-memory, and Redis backends.

Factory creates the backend from app.core.config. Implementations
implement KeyValueStoreProtocol (get, set, delete) over serialized JSON.
"""

from app.infrastructure.storage.factory import StoreFactory
from app.infrastructure.storage.file_store import JsonFileStore
from app.infrastructure.storage.memory_store import MemoryStore
from app.infrastructure.storage.protocol import KeyValueStoreProtocol
from app.infrastructure.storage.redis_store import RedisStore

__all__ = [
    "JsonFileStore",
    "KeyValueStoreProtocol",
    "MemoryStore",
    "RedisStore",
    "StoreFactory",
]
