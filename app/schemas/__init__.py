"""Pydantic payloads consumed by application services."""

from app.schemas.task import CreateTaskData, TaskFilters, UpdateTaskData

__all__ = [
    "CreateTaskData",
    "TaskFilters",
    "UpdateTaskData",
]
