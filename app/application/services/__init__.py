"""Application services: task domain logic and sign-in."""

from app.application.services.auth_service import MockGoogleAuthProvider
from app.application.services.task_service import TaskService

__all__ = [
    "MockGoogleAuthProvider",
    "TaskService",
]
