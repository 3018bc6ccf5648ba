"""Task command payloads and list filters.

Shapes the presentation layer hands to TaskService. Only types are checked
here; blank and length rules are enforced by TaskService after trimming.
"""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, field_validator

from app.domain.enums import TaskPriority, TaskStatus
from app.shared.utils.datetime import ensure_utc

TaskSortField = Literal["created_at", "due_date", "priority"]
SortOrder = Literal["asc", "desc"]


class _TaskPayload(BaseModel):
    model_config = ConfigDict(extra="forbid")

    @field_validator("due_date", mode="after", check_fields=False)
    @classmethod
    def _due_date_to_utc(cls, v: datetime | None) -> datetime | None:
        """Treat naive due dates as UTC."""
        return ensure_utc(v)


class CreateTaskData(_TaskPayload):
    """Payload for creating a task. Only title is required."""

    title: str
    description: str | None = None
    due_date: datetime | None = None
    priority: TaskPriority | None = None


class UpdateTaskData(_TaskPayload):
    """Partial update payload.

    A field counts as provided only when the caller set it explicitly
    (see model_fields_set); explicit None clears description and due_date.
    """

    title: str | None = None
    description: str | None = None
    due_date: datetime | None = None
    status: TaskStatus | None = None
    priority: TaskPriority | None = None

    def provided(self, field: str) -> bool:
        """Return whether field was explicitly set by the caller."""
        return field in self.model_fields_set


class TaskFilters(BaseModel):
    """Declarative query narrowing and ordering the task list."""

    model_config = ConfigDict(extra="forbid")

    status: TaskStatus | None = None
    priority: TaskPriority | None = None
    search: str | None = None
    sort_by: TaskSortField | None = None
    sort_order: SortOrder = "asc"
