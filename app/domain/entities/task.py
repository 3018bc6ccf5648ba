"""Task domain entity.

Plain data contract for a to-do item, independent of persistence.
Validation and mutation rules live in TaskService.
"""

from dataclasses import dataclass
from datetime import datetime

from app.domain.enums import TaskPriority, TaskStatus


@dataclass
class TaskEntity:
    """A user-created task.

    created_at is set once at creation; updated_at is re-stamped on every
    mutation and never precedes created_at. All datetimes are UTC-aware.
    """

    id: str
    title: str
    status: TaskStatus
    priority: TaskPriority
    created_at: datetime
    updated_at: datetime
    description: str | None = None
    due_date: datetime | None = None
