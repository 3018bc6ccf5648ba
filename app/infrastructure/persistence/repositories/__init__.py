"""Repositories over the key-value store (tasks and current session)."""

from app.infrastructure.persistence.repositories.session_repo import SessionRepository
from app.infrastructure.persistence.repositories.task_repo import KeyValueTaskRepository

__all__ = [
    "KeyValueTaskRepository",
    "SessionRepository",
]
