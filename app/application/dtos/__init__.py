"""Application DTOs (no storage dependency)."""

from app.application.dtos.task import TaskStats

__all__ = [
    "TaskStats",
]
