"""Redis-backed key-value store.

Async redis client with an optional key prefix. Call connect() at startup
and disconnect() at shutdown (the container lifespan does both).
"""

from __future__ import annotations

import logging

import redis.asyncio as redis

from app.core.config import Settings, get_settings
from app.infrastructure.exceptions import (
    StorageNotConnectedError,
    StorageReadError,
    StorageWriteError,
)

logger = logging.getLogger(__name__)


class RedisStore:
    """Stores each key as a plain Redis string (no TTL)."""

    def __init__(
        self,
        redis_client: redis.Redis | None = None,
        settings: Settings | None = None,
    ) -> None:
        """Initialize Redis store.

        Args:
            redis_client: Optional Redis client for testing or DI.
            settings: Connection settings; defaults to get_settings().
        """
        self.redis = redis_client
        self.settings = settings or get_settings()
        self.key_prefix = self.settings.redis_key_prefix

    async def connect(self) -> None:
        """Create the client (if not injected) and verify it with PING."""
        if self.redis is None:
            password = self.settings.redis_password
            self.redis = redis.Redis(
                host=self.settings.redis_host,
                port=self.settings.redis_port,
                db=self.settings.redis_db,
                password=password.get_secret_value() if password else None,
                decode_responses=True,
                socket_connect_timeout=5,
                socket_keepalive=True,
            )
        try:
            await self.redis.ping()
        except redis.RedisError as e:
            raise StorageNotConnectedError("redis", str(e)) from e
        logger.info(
            "Redis store connected: %s:%s",
            self.settings.redis_host,
            self.settings.redis_port,
        )

    async def disconnect(self) -> None:
        """Close the connection. Safe to call twice."""
        if self.redis is not None:
            await self.redis.aclose()
            self.redis = None
            logger.info("Redis store disconnected")

    def _client(self) -> redis.Redis:
        if self.redis is None:
            raise StorageNotConnectedError("redis")
        return self.redis

    def _full_key(self, key: str) -> str:
        return f"{self.key_prefix}{key}"

    async def get(self, key: str) -> str | None:
        client = self._client()
        try:
            value = await client.get(self._full_key(key))
        except redis.RedisError as e:
            raise StorageReadError(key, str(e)) from e
        if isinstance(value, bytes):
            return value.decode("utf-8")
        return value

    async def set(self, key: str, value: str) -> None:
        client = self._client()
        try:
            await client.set(self._full_key(key), value)
        except redis.RedisError as e:
            raise StorageWriteError(key, str(e)) from e
        logger.debug("Redis SET: %s (%s bytes)", key, len(value))

    async def delete(self, key: str) -> bool:
        client = self._client()
        try:
            removed = await client.delete(self._full_key(key))
        except redis.RedisError as e:
            raise StorageWriteError(key, str(e)) from e
        return bool(removed)
