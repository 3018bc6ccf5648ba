"""Pytest configuration and fixtures for flowtask.

Every fixture builds its own MemoryStore, so tests never share state.
Async tests run under pytest-asyncio (asyncio_mode = "auto").
"""

import asyncio
from datetime import UTC, datetime, timedelta

import pytest

from app.application.services.auth_service import MockGoogleAuthProvider
from app.application.services.task_service import TaskService
from app.core.config import Settings
from app.infrastructure.persistence.repositories import (
    KeyValueTaskRepository,
    SessionRepository,
)
from app.infrastructure.storage import MemoryStore


class FakeClock:
    """Controllable clock; tick() moves time forward."""

    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2025, 6, 1, 12, 0, 0, tzinfo=UTC)

    def __call__(self) -> datetime:
        return self.now

    def tick(self, **kwargs: float) -> datetime:
        self.now = self.now + timedelta(**kwargs)
        return self.now


@pytest.fixture
def settings() -> Settings:
    """In-memory settings with no simulated auth delay."""
    return Settings(
        storage_backend="memory",
        auth_delay_min_seconds=0,
        auth_delay_max_seconds=0,
    )


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def task_repo(store: MemoryStore) -> KeyValueTaskRepository:
    return KeyValueTaskRepository(store)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def task_service(task_repo: KeyValueTaskRepository) -> TaskService:
    """Service on the real clock."""
    return TaskService(task_repo)


@pytest.fixture
def clocked_service(task_repo: KeyValueTaskRepository, clock: FakeClock) -> TaskService:
    """Service on a FakeClock for deterministic timestamps."""
    return TaskService(task_repo, clock=clock)


@pytest.fixture
def session_repo(store: MemoryStore) -> SessionRepository:
    return SessionRepository(store)


@pytest.fixture
def auth_provider(
    session_repo: SessionRepository, settings: Settings
) -> MockGoogleAuthProvider:
    return MockGoogleAuthProvider(session_repo, settings=settings)


class SlowStore(MemoryStore):
    """MemoryStore that yields to the event loop on every get and set.

    Interleaves concurrent coroutines between their read and their write.
    """

    async def get(self, key: str) -> str | None:
        value = await super().get(key)
        await asyncio.sleep(0)
        return value

    async def set(self, key: str, value: str) -> None:
        await asyncio.sleep(0)
        await super().set(key, value)


@pytest.fixture
def slow_store() -> SlowStore:
    return SlowStore()
