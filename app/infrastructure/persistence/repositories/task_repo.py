"""Task repository: the whole task collection as one JSON array under one key."""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Callable
from typing import Any

from app.core.constants import DEFAULT_TASK_COLLECTION_KEY
from app.domain.entities import TaskEntity
from app.domain.enums import TaskPriority, TaskStatus
from app.domain.exceptions import ValidationException
from app.infrastructure.persistence.repositories.base import (
    DECODE_ERRORS,
    KeyValueRepository,
)
from app.infrastructure.storage.protocol import KeyValueStoreProtocol
from app.shared.utils.datetime import parse_iso_utc

logger = logging.getLogger(__name__)


def task_to_dict(task: TaskEntity) -> dict[str, Any]:
    """Serialize a task; datetimes become ISO-8601 strings."""
    return {
        "id": task.id,
        "title": task.title,
        "description": task.description,
        "due_date": task.due_date.isoformat() if task.due_date else None,
        "status": task.status.value,
        "priority": task.priority.value,
        "created_at": task.created_at.isoformat(),
        "updated_at": task.updated_at.isoformat(),
    }


def task_from_dict(data: dict[str, Any]) -> TaskEntity:
    """Rebuild a task from its stored form. Raises on malformed records."""
    created_at = parse_iso_utc(data["created_at"])
    updated_at = parse_iso_utc(data["updated_at"])
    if created_at is None or updated_at is None:
        raise ValueError("created_at and updated_at are required")
    return TaskEntity(
        id=str(data["id"]),
        title=data["title"],
        description=data.get("description"),
        due_date=parse_iso_utc(data.get("due_date")),
        status=TaskStatus(data["status"]),
        priority=TaskPriority(data.get("priority") or TaskPriority.MEDIUM.value),
        created_at=created_at,
        updated_at=updated_at,
    )


def _decode_collection(document: Any) -> list[TaskEntity]:
    if not isinstance(document, list):
        raise TypeError(f"expected a JSON array, got {type(document).__name__}")
    return [task_from_dict(record) for record in document]


class KeyValueTaskRepository(KeyValueRepository):
    """Task collection stored in a key-value backend (implements ITaskRepository).

    Every mutation is a read-modify-write of the whole collection, held under
    an asyncio.Lock so concurrent coroutines on the same repository cannot
    lose each other's writes. Storage order is creation order.

    A mutation that finds an undecodable collection starts from an empty
    one, but first copies the old payload to unreadable_key.
    """

    def __init__(
        self,
        store: KeyValueStoreProtocol,
        key: str = DEFAULT_TASK_COLLECTION_KEY,
    ) -> None:
        super().__init__(store, key)
        self._write_lock = asyncio.Lock()

    async def _load(self) -> list[TaskEntity]:
        document = await self._read_document()
        if document is None:
            return []
        try:
            return _decode_collection(document)
        except DECODE_ERRORS as e:
            self._report_read_failure(str(e))
            return []

    async def _load_for_write(self) -> tuple[list[TaskEntity], str | None]:
        """Return (tasks, unreadable payload or None). Call with _write_lock held."""
        raw = await self._read_raw_for_write()
        if raw is None:
            return [], None
        try:
            return _decode_collection(json.loads(raw)), None
        except DECODE_ERRORS as e:
            self._report_read_failure(str(e))
            return [], raw

    async def _save(self, tasks: list[TaskEntity], unreadable: str | None = None) -> None:
        if unreadable is not None:
            await self._preserve_unreadable(unreadable)
        await self._write_document([task_to_dict(t) for t in tasks])

    async def get_all(self) -> list[TaskEntity]:
        """Return every task in storage order; [] when nothing is stored or unreadable."""
        return await self._load()

    async def get_by_id(self, task_id: str) -> TaskEntity | None:
        """Return task by ID (linear scan), or None."""
        for task in await self._load():
            if task.id == task_id:
                return task
        return None

    async def create(self, task: TaskEntity) -> TaskEntity:
        """Append task and persist the collection. Raises ValidationException on duplicate id."""
        async with self._write_lock:
            tasks, unreadable = await self._load_for_write()
            if any(t.id == task.id for t in tasks):
                raise ValidationException(f"Task id already exists: {task.id}", field="id")
            tasks.append(task)
            await self._save(tasks, unreadable)
        logger.debug("Task created id=%s total=%s", task.id, len(tasks))
        return task

    async def update(self, task_id: str, task: TaskEntity) -> TaskEntity | None:
        """Replace the task with matching ID. Returns None (nothing written) if absent."""
        return await self.modify(task_id, lambda _existing: task)

    async def modify(
        self, task_id: str, mutate: Callable[[TaskEntity], TaskEntity]
    ) -> TaskEntity | None:
        """Replace the task with matching ID by mutate(current task).

        The read, mutate and write all happen under the write lock, so mutate
        always sees the latest stored version. Exceptions from mutate abort
        the update without writing. Returns None (nothing written) if absent.
        """
        async with self._write_lock:
            tasks, unreadable = await self._load_for_write()
            for index, existing in enumerate(tasks):
                if existing.id == task_id:
                    updated = mutate(existing)
                    tasks[index] = updated
                    await self._save(tasks, unreadable)
                    logger.debug("Task updated id=%s", task_id)
                    return updated
        return None

    async def delete(self, task_id: str) -> bool:
        """Remove the task with matching ID. Returns True if one was removed."""
        async with self._write_lock:
            tasks, unreadable = await self._load_for_write()
            remaining = [t for t in tasks if t.id != task_id]
            if len(remaining) == len(tasks):
                return False
            await self._save(remaining, unreadable)
        logger.debug("Task deleted id=%s", task_id)
        return True

    async def clear(self) -> None:
        """Remove the stored collection entirely."""
        async with self._write_lock:
            await self._delete_document()
        logger.info("Task collection cleared key=%s", self.key)
