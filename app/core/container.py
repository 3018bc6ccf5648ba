"""Composition root: builds services from infrastructure implementations.

Each call returns freshly wired instances; nothing is a module-level
singleton, so every test or process gets an isolated store.
"""

from __future__ import annotations

from dataclasses import dataclass

from app.application.services.auth_service import MockGoogleAuthProvider
from app.application.services.task_service import TaskService
from app.core.config import Settings, get_settings
from app.infrastructure.persistence.repositories import (
    KeyValueTaskRepository,
    SessionRepository,
)
from app.infrastructure.storage import KeyValueStoreProtocol, StoreFactory


@dataclass
class AppContainer:
    """Wired collaborators handed to the presentation layer."""

    settings: Settings
    store: KeyValueStoreProtocol
    task_repository: KeyValueTaskRepository
    session_repository: SessionRepository
    task_service: TaskService
    auth_provider: MockGoogleAuthProvider


def build_container(
    settings: Settings | None = None,
    store: KeyValueStoreProtocol | None = None,
) -> AppContainer:
    """Wire repositories and services over one key-value store.

    Args:
        settings: Application settings; if None, uses get_settings().
        store: Optional pre-built store (tests pass a MemoryStore); otherwise
            StoreFactory picks one from settings.
    """
    s = settings or get_settings()
    kv_store = store if store is not None else StoreFactory.create_store(s)
    task_repository = KeyValueTaskRepository(kv_store, key=s.task_collection_key)
    session_repository = SessionRepository(kv_store, key=s.session_key)
    return AppContainer(
        settings=s,
        store=kv_store,
        task_repository=task_repository,
        session_repository=session_repository,
        task_service=TaskService(task_repository),
        auth_provider=MockGoogleAuthProvider(session_repository, settings=s),
    )
