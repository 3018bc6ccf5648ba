"""Task domain service: validation, id assignment, filtering, sorting, stats."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import replace
from datetime import datetime

from app.application.dtos.task import TaskStats
from app.application.interfaces.repositories import ITaskRepository
from app.core.constants import (
    TASK_DESCRIPTION_MAX_LENGTH,
    TASK_ID_PREFIX,
    TASK_TITLE_MAX_LENGTH,
)
from app.domain.entities import TaskEntity
from app.domain.enums import TaskPriority, TaskStatus
from app.domain.exceptions import ResourceNotFoundException, ValidationException
from app.schemas.task import CreateTaskData, TaskFilters, UpdateTaskData
from app.shared.utils.datetime import next_timestamp, utc_now
from app.shared.utils.generators import generate_prefixed_id

logger = logging.getLogger(__name__)


def _clean_title(title: str) -> str:
    """Trim title and enforce the length limit. Returns "" for blank input."""
    cleaned = title.strip()
    if len(cleaned) > TASK_TITLE_MAX_LENGTH:
        raise ValidationException(
            f"Title cannot exceed {TASK_TITLE_MAX_LENGTH} characters", field="title"
        )
    return cleaned


def _clean_description(description: str | None) -> str | None:
    """Trim description; empty becomes None."""
    if description is None:
        return None
    cleaned = description.strip()
    if len(cleaned) > TASK_DESCRIPTION_MAX_LENGTH:
        raise ValidationException(
            f"Description cannot exceed {TASK_DESCRIPTION_MAX_LENGTH} characters",
            field="description",
        )
    return cleaned or None


def is_overdue(task: TaskEntity, now: datetime) -> bool:
    """Open task whose due date has passed."""
    return (
        task.status == TaskStatus.OPEN
        and task.due_date is not None
        and task.due_date < now
    )


def _matches_search(task: TaskEntity, needle: str) -> bool:
    if needle in task.title.lower():
        return True
    return task.description is not None and needle in task.description.lower()


def sort_tasks(
    tasks: list[TaskEntity], sort_by: str, descending: bool = False
) -> list[TaskEntity]:
    """Stable sort by created_at, due_date, or priority rank.

    Tasks without a due date go last when sorting by due_date, in either order.
    """
    if sort_by == "created_at":
        return sorted(tasks, key=lambda t: t.created_at, reverse=descending)
    if sort_by == "priority":
        return sorted(tasks, key=lambda t: t.priority.rank, reverse=descending)
    if sort_by == "due_date":
        dated = [t for t in tasks if t.due_date is not None]
        undated = [t for t in tasks if t.due_date is None]
        return sorted(dated, key=lambda t: t.due_date, reverse=descending) + undated
    raise ValueError(f"Invalid sort field: {sort_by}")


class TaskService:
    """Orchestrates task operations between the presentation layer and the repository.

    All validation and query semantics live here; the repository only
    stores whole task records.
    """

    def __init__(
        self,
        repository: ITaskRepository,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._repo = repository
        self._clock = clock

    async def get_all_tasks(self, filters: TaskFilters | None = None) -> list[TaskEntity]:
        """Return tasks filtered by status, priority and search text, then sorted.

        Search is a plain substring match (whitespace included); an empty
        string matches everything. Without sort_by, the newest-created task
        comes first.
        """
        tasks = await self._repo.get_all()
        filters = filters or TaskFilters()

        if filters.status is not None:
            tasks = [t for t in tasks if t.status == filters.status]
        if filters.priority is not None:
            tasks = [t for t in tasks if t.priority == filters.priority]
        if filters.search:
            needle = filters.search.lower()
            tasks = [t for t in tasks if _matches_search(t, needle)]

        if filters.sort_by is None:
            return list(reversed(tasks))
        return sort_tasks(tasks, filters.sort_by, descending=filters.sort_order == "desc")

    async def get_task_by_id(self, task_id: str) -> TaskEntity | None:
        return await self._repo.get_by_id(task_id)

    async def create_task(self, data: CreateTaskData) -> TaskEntity:
        """Validate, stamp and persist a new OPEN task.

        Raises:
            ValidationException: Blank title, or title/description too long.
        """
        title = _clean_title(data.title)
        if not title:
            raise ValidationException("Title is required", field="title")
        now = self._clock()
        task = TaskEntity(
            id=generate_prefixed_id(TASK_ID_PREFIX),
            title=title,
            description=_clean_description(data.description),
            due_date=data.due_date,
            status=TaskStatus.OPEN,
            priority=data.priority or TaskPriority.MEDIUM,
            created_at=now,
            updated_at=now,
        )
        created = await self._repo.create(task)
        logger.info("Task created id=%s priority=%s", created.id, created.priority.value)
        return created

    async def update_task(self, task_id: str, data: UpdateTaskData) -> TaskEntity | None:
        """Merge provided fields onto the stored task and re-stamp updated_at.

        A blank title keeps the old one; an empty or None description and a
        None due_date clear those fields. The merge runs against the latest
        stored version, so concurrent updates of one task do not overwrite
        each other.

        Raises:
            ResourceNotFoundException: No task with task_id.
            ValidationException: Title or description too long.
        """
        changes: dict[str, object] = {}
        if data.provided("title") and data.title is not None:
            title = _clean_title(data.title)
            if title:
                changes["title"] = title
        if data.provided("description"):
            changes["description"] = _clean_description(data.description)
        if data.provided("due_date"):
            changes["due_date"] = data.due_date
        if data.provided("status") and data.status is not None:
            changes["status"] = data.status
        if data.provided("priority") and data.priority is not None:
            changes["priority"] = data.priority

        updated = await self._modify(task_id, lambda _existing: changes)
        logger.info("Task updated id=%s fields=%s", task_id, sorted(changes))
        return updated

    async def delete_task(self, task_id: str) -> bool:
        """Delete by id. Returns False (no error) if the task does not exist."""
        deleted = await self._repo.delete(task_id)
        if deleted:
            logger.info("Task deleted id=%s", task_id)
        return deleted

    async def toggle_task_status(self, task_id: str) -> TaskEntity | None:
        """Flip OPEN <-> COMPLETED, starting from the latest stored status.

        Raises:
            ResourceNotFoundException: No task with task_id.
        """
        updated = await self._modify(
            task_id, lambda existing: {"status": existing.status.toggled()}
        )
        logger.info("Task toggled id=%s status=%s", task_id, updated.status.value)
        return updated

    async def _modify(
        self,
        task_id: str,
        changes_for: Callable[[TaskEntity], dict[str, object]],
    ) -> TaskEntity:
        """Apply changes_for(current task) under the repository lock and re-stamp updated_at."""

        def apply(existing: TaskEntity) -> TaskEntity:
            return replace(
                existing,
                **changes_for(existing),
                updated_at=next_timestamp(existing.updated_at, self._clock()),
            )

        updated = await self._repo.modify(task_id, apply)
        if updated is None:
            raise ResourceNotFoundException("task", task_id)
        return updated

    async def get_task_stats(self) -> TaskStats:
        """Counts derived from the full, unfiltered task list."""
        tasks = await self.get_all_tasks()
        now = self._clock()
        completed = sum(1 for t in tasks if t.status == TaskStatus.COMPLETED)
        return TaskStats(
            total=len(tasks),
            completed=completed,
            open=len(tasks) - completed,
            overdue=sum(1 for t in tasks if is_overdue(t, now)),
        )
