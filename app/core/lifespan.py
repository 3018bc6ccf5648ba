"""Application lifespan: startup and shutdown.

Single place for startup/shutdown logic. No business logic here, only
logging setup, container wiring and the Redis connection lifecycle.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from app.core.config import Settings, get_settings
from app.core.container import AppContainer, build_container
from app.infrastructure.storage import KeyValueStoreProtocol, RedisStore
from app.shared.telemetry.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def app_lifespan(
    settings: Settings | None = None,
    store: KeyValueStoreProtocol | None = None,
) -> AsyncIterator[AppContainer]:
    """Build the container, yield it, then release backend connections.

    Startup order: logging, container, Redis connect (redis backend only).
    Shutdown: Redis disconnect.
    """
    settings = settings or get_settings()

    # ---- Startup ----
    setup_logging(settings)
    container = build_container(settings, store=store)
    if isinstance(container.store, RedisStore):
        await container.store.connect()
    logger.info(
        "%s %s started (storage=%s)",
        settings.app_name,
        settings.app_version,
        type(container.store).__name__,
    )

    try:
        yield container
    finally:
        # ---- Shutdown ----
        if isinstance(container.store, RedisStore):
            await container.store.disconnect()
        logger.info("%s stopped", settings.app_name)
